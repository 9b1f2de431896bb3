"""Showdown ranking.

Every hand is classified against the shared community cards, then hands
are ordered best first:
1. Lower hand category wins (Royal Flush beats everything)
2. Within a category, tie-break values decide (see HandResult.tiebreak)
3. Hands still equal share a rank; the next hand takes its position
   (competition ranking: 1, 1, 3)

Hands are not modified; the result is a separate list of Ranking records.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from holdem.rules import CardSet, Hand, HandResult, classify, compare_results

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ranking:
    """A hand's place in the showdown.

    Attributes:
        hand: The player's hand
        result: Best hand found in the player's pool
        rank: 1-based position; tied hands share the same rank
    """

    hand: Hand
    result: HandResult
    rank: int

    def __str__(self) -> str:
        return f"{self.rank} {self.hand.name} {self.result}"


def evaluate_hand(hand: Hand, community: CardSet) -> HandResult:
    """Classify the pool formed by a hand's hole cards and the community cards."""
    return classify(hand.pool(community))


def rank_hands(community: CardSet, hands: Sequence[Hand]) -> List[Ranking]:
    """Rank hands against shared community cards.

    Args:
        community: The five community cards
        hands: Player hands, in input order

    Returns:
        Rankings ordered best hand first; ties keep input order
    """
    results = [(hand, evaluate_hand(hand, community)) for hand in hands]
    ordered = sorted(results, key=lambda pair: pair[1].sort_key())

    rankings: List[Ranking] = []
    for position, (hand, result) in enumerate(ordered, start=1):
        rank = position
        if rankings and compare_results(result, rankings[-1].result) == 0:
            rank = rankings[-1].rank
        rankings.append(Ranking(hand=hand, result=result, rank=rank))

    for ranking in rankings:
        logger.debug("%s", ranking)
    return rankings
