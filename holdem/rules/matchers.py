"""Hand category matchers.

Each matcher takes a pool of cards and returns a HandResult when its
category is present, or None otherwise. Matchers assume every stronger
category has already been ruled out, so they are only meaningful when run
in MATCHERS order; classify() does that and always returns a result
because the high card matcher never fails.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .cards import CardSet, GroupKey, StraightMode
from .ranks import Card, Face
from .results import (
    Flush,
    FourOfAKind,
    FullHouse,
    HandResult,
    HighCard,
    OnePair,
    RoyalFlush,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPair,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 5

Matcher = Callable[[CardSet], Optional[HandResult]]


def _kickers(pool: CardSet, used: Sequence[Card]) -> Tuple[Card, ...]:
    """Highest cards outside `used`, enough to complete a five-card hand."""
    remaining = pool.difference(used).sorted()
    return tuple(remaining[: HAND_SIZE - len(used)])


def find_royal_flush(pool: CardSet) -> Optional[HandResult]:
    run = pool.find_straight(StraightMode.ROYAL)
    if run is None or run[0].face != Face.ACE:
        return None
    return RoyalFlush(pool=pool, run=tuple(run))


def find_straight_flush(pool: CardSet) -> Optional[HandResult]:
    run = pool.find_straight(StraightMode.STRAIGHT_FLUSH)
    if run is None:
        return None
    return StraightFlush(pool=pool, run=tuple(run))


def find_four_of_a_kind(pool: CardSet) -> Optional[HandResult]:
    quads = pool.groups_of_at_least(4)
    if not quads:
        return None
    quad = quads[0]
    return FourOfAKind(pool=pool, quad=tuple(quad), kickers=_kickers(pool, quad))


def find_full_house(pool: CardSet) -> Optional[HandResult]:
    """Pick the highest triple that has a companion pair, then its highest pair.

    Removing the triple before looking for pairs lets a second triple act
    as the pair.
    """
    for triple in pool.groups_of_at_least(3):
        pairs = pool.difference(triple).groups_of_at_least(2)
        if pairs:
            return FullHouse(pool=pool, triple=tuple(triple[:3]), pair=tuple(pairs[0][:2]))
    return None


def find_flush(pool: CardSet) -> Optional[HandResult]:
    suited = pool.groups_of_at_least(HAND_SIZE, by=GroupKey.SUIT)
    if not suited:
        return None
    return Flush(pool=pool, cards=tuple(suited[0][:HAND_SIZE]))


def find_straight(pool: CardSet) -> Optional[HandResult]:
    run = pool.find_straight(StraightMode.PLAIN)
    if run is None:
        return None
    return Straight(pool=pool, run=tuple(run))


def find_three_of_a_kind(pool: CardSet) -> Optional[HandResult]:
    triples = pool.groups_of_at_least(3)
    if not triples:
        return None
    triple = triples[0][:3]
    return ThreeOfAKind(pool=pool, triple=tuple(triple), kickers=_kickers(pool, triple))


def find_two_pair(pool: CardSet) -> Optional[HandResult]:
    pairs = pool.groups_of_at_least(2)
    if len(pairs) < 2:
        return None
    high_pair, low_pair = pairs[0][:2], pairs[1][:2]
    return TwoPair(
        pool=pool,
        high_pair=tuple(high_pair),
        low_pair=tuple(low_pair),
        kickers=_kickers(pool, high_pair + low_pair),
    )


def find_one_pair(pool: CardSet) -> Optional[HandResult]:
    pairs = pool.groups_of_at_least(2)
    if not pairs:
        return None
    pair = pairs[0][:2]
    return OnePair(pool=pool, pair=tuple(pair), kickers=_kickers(pool, pair))


def find_high_card(pool: CardSet) -> Optional[HandResult]:
    return HighCard(pool=pool, cards=tuple(pool.sorted()[:HAND_SIZE]))


# Ordered best hand first
MATCHERS: List[Matcher] = [
    find_royal_flush,
    find_straight_flush,
    find_four_of_a_kind,
    find_full_house,
    find_flush,
    find_straight,
    find_three_of_a_kind,
    find_two_pair,
    find_one_pair,
    find_high_card,
]


def classify(pool: CardSet) -> HandResult:
    """Classify a pool of cards into its best hand category.

    Args:
        pool: Hole cards plus community cards (at least five cards)

    Returns:
        The result of the first matcher that succeeds
    """
    for matcher in MATCHERS:
        result = matcher(pool)
        if result is not None:
            logger.debug("%s matched %s for pool %s", matcher.__name__, result, pool)
            return result

    # Unreachable for pools of five or more cards
    raise ValueError(f"Cannot classify pool '{pool}'")


find_hand_result = classify
