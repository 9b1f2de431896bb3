"""Showdown engine.

This module provides:
- Table: community cards and player hands, parsed from text or dealt
- parse_input: build a Table from input lines
- rank_hands: classify and order hands, breaking ties with kickers
- Ranking: a hand's result and final rank
"""

from .table import (
    Table,
    InputError,
    DuplicateCard,
    COMMUNITY_CARDS,
    MAX_PLAYERS,
    parse_community,
    parse_input,
)
from .ranking import (
    Ranking,
    evaluate_hand,
    rank_hands,
)

__all__ = [
    "Table",
    "InputError",
    "DuplicateCard",
    "COMMUNITY_CARDS",
    "MAX_PLAYERS",
    "parse_community",
    "parse_input",
    "Ranking",
    "evaluate_hand",
    "rank_hands",
]
