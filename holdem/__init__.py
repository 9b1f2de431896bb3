"""Holdem - Texas Hold'em hand ranking.

Classifies each player's best five-card hand from two hole cards and five
community cards, then ranks the players with kicker tie-breaks.
"""

__version__ = "0.1.0"
__author__ = "Holdem Ranker Team"

from holdem.utils.seeding import make_rng, resolve_seed

__all__ = ["__version__", "make_rng", "resolve_seed"]
