"""Texas Hold'em hand rules.

This module provides:
- Card, face and suit definitions (ranks.py)
- Immutable card sets and the straight finder (cards.py)
- Player hands (hands.py)
- Hand categories and classification results (results.py)
- The ordered matcher pipeline (matchers.py)
"""

from .ranks import (
    HoldemError,
    InvalidCard,
    InvalidFace,
    InvalidSuit,
    Face,
    Suit,
    Card,
    FACE_SYMBOLS,
    FACE_NAMES,
    SUIT_NAMES,
    face_value_key,
    sort_cards,
    create_standard_deck,
)

from .cards import (
    WrongCardCount,
    GroupKey,
    StraightMode,
    CardSet,
)

from .hands import (
    HOLE_CARDS,
    InvalidHand,
    Hand,
    make_cards_from_string,
    format_cards,
)

from .results import (
    HandCategory,
    CATEGORY_NAMES,
    HandResult,
    RoyalFlush,
    StraightFlush,
    FourOfAKind,
    FullHouse,
    Flush,
    Straight,
    ThreeOfAKind,
    TwoPair,
    OnePair,
    HighCard,
    compare_results,
    describe_categories,
)

from .matchers import (
    MATCHERS,
    classify,
    find_hand_result,
)

__all__ = [
    # Ranks
    "HoldemError",
    "InvalidCard",
    "InvalidFace",
    "InvalidSuit",
    "Face",
    "Suit",
    "Card",
    "FACE_SYMBOLS",
    "FACE_NAMES",
    "SUIT_NAMES",
    "face_value_key",
    "sort_cards",
    "create_standard_deck",
    # Card sets
    "WrongCardCount",
    "GroupKey",
    "StraightMode",
    "CardSet",
    # Hands
    "HOLE_CARDS",
    "InvalidHand",
    "Hand",
    "make_cards_from_string",
    "format_cards",
    # Results
    "HandCategory",
    "CATEGORY_NAMES",
    "HandResult",
    "RoyalFlush",
    "StraightFlush",
    "FourOfAKind",
    "FullHouse",
    "Flush",
    "Straight",
    "ThreeOfAKind",
    "TwoPair",
    "OnePair",
    "HighCard",
    "compare_results",
    "describe_categories",
    # Matchers
    "MATCHERS",
    "classify",
    "find_hand_result",
]
