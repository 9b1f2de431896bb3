"""Hand categories and classification results.

Each category has its own frozen result type carrying exactly the cards
its description and tie-break need:

- RoyalFlush: the suit (royal flushes always tie)
- StraightFlush, Straight: the five-card run, top card first
- FourOfAKind: the quad and one kicker
- FullHouse: the triple and the pair
- Flush: the five highest cards of the suit
- ThreeOfAKind: the triple and two kickers
- TwoPair: the high pair, the low pair and one kicker
- OnePair: the pair and three kickers
- HighCard: the five highest cards

Comparison rules:
- Lower category wins (0 = Royal Flush ... 9 = High Card)
- Within a category, tie-break values are compared in order, higher wins
- After the decisive cards, every other pool card counts as a kicker,
  highest first, so the sixth and seventh cards can still split a tie
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, List, Sequence, Tuple

from .cards import CardSet
from .ranks import Card, Suit, SUIT_NAMES


class HandCategory(IntEnum):
    """Hand categories ordered by strength (lower value = stronger hand)."""

    ROYAL_FLUSH = 0
    STRAIGHT_FLUSH = 1
    FOUR_OF_A_KIND = 2
    FULL_HOUSE = 3
    FLUSH = 4
    STRAIGHT = 5
    THREE_OF_A_KIND = 6
    TWO_PAIR = 7
    ONE_PAIR = 8
    HIGH_CARD = 9


# Display names, printed verbatim in the ranking output
CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "Pair",
    HandCategory.HIGH_CARD: "High",
}


@dataclass(frozen=True)
class HandResult:
    """Base class for a classified 7-card pool.

    Attributes:
        pool: Every card that was considered
    """

    category: ClassVar[HandCategory]

    pool: CardSet = field(compare=False)

    @property
    def hand_rank(self) -> int:
        """Category number, 0 (Royal Flush) to 9 (High Card)."""
        return int(self.category)

    @property
    def name(self) -> str:
        return CATEGORY_NAMES[self.category]

    @property
    def best_cards(self) -> List[Card]:
        """The five cards forming the hand."""
        raise NotImplementedError

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        """Face values compared, in order, against a result of the same category."""
        return tuple(card.numeric_face_value for card in self.best_cards)

    def _pool_kickers(self, used: Sequence[Card]) -> Tuple[int, ...]:
        """Face values of the pool cards outside `used`, highest first."""
        return _values(tuple(self.pool.difference(used).sorted()))

    def describe(self) -> str:
        """Decisive cards in words, e.g. 'Ace King' for a full house."""
        return self.best_cards[0].face_name

    def sort_key(self) -> Tuple[int, Tuple[int, ...]]:
        """Ascending sort key: best hand first."""
        return (self.hand_rank, tuple(-v for v in self.tiebreak))

    def __str__(self) -> str:
        return f"{self.name} {self.describe()}"


@dataclass(frozen=True)
class RoyalFlush(HandResult):
    category: ClassVar[HandCategory] = HandCategory.ROYAL_FLUSH

    run: Tuple[Card, ...] = ()

    @property
    def suit(self) -> Suit:
        return self.run[0].suit

    @property
    def best_cards(self) -> List[Card]:
        return list(self.run)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return ()

    def describe(self) -> str:
        return SUIT_NAMES[self.suit]


@dataclass(frozen=True)
class StraightFlush(HandResult):
    category: ClassVar[HandCategory] = HandCategory.STRAIGHT_FLUSH

    run: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.run)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        # The wheel's Ace plays low, so only the top of the run counts.
        return (self.run[0].numeric_face_value,)


@dataclass(frozen=True)
class FourOfAKind(HandResult):
    category: ClassVar[HandCategory] = HandCategory.FOUR_OF_A_KIND

    quad: Tuple[Card, ...] = ()
    kickers: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.quad) + list(self.kickers)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return (self.quad[0].numeric_face_value,) + self._pool_kickers(self.quad)


@dataclass(frozen=True)
class FullHouse(HandResult):
    category: ClassVar[HandCategory] = HandCategory.FULL_HOUSE

    triple: Tuple[Card, ...] = ()
    pair: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.triple) + list(self.pair)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return (self.triple[0].numeric_face_value, self.pair[0].numeric_face_value)

    def describe(self) -> str:
        return f"{self.triple[0].face_name} {self.pair[0].face_name}"


@dataclass(frozen=True)
class Flush(HandResult):
    category: ClassVar[HandCategory] = HandCategory.FLUSH

    cards: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.cards)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return _values(self.cards) + self._pool_kickers(self.cards)


@dataclass(frozen=True)
class Straight(HandResult):
    category: ClassVar[HandCategory] = HandCategory.STRAIGHT

    run: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.run)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return (self.run[0].numeric_face_value,) + self._pool_kickers(self.run)


@dataclass(frozen=True)
class ThreeOfAKind(HandResult):
    category: ClassVar[HandCategory] = HandCategory.THREE_OF_A_KIND

    triple: Tuple[Card, ...] = ()
    kickers: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.triple) + list(self.kickers)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return (self.triple[0].numeric_face_value,) + self._pool_kickers(self.triple)


@dataclass(frozen=True)
class TwoPair(HandResult):
    category: ClassVar[HandCategory] = HandCategory.TWO_PAIR

    high_pair: Tuple[Card, ...] = ()
    low_pair: Tuple[Card, ...] = ()
    kickers: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.high_pair) + list(self.low_pair) + list(self.kickers)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        pairs = (self.high_pair[0].numeric_face_value, self.low_pair[0].numeric_face_value)
        return pairs + self._pool_kickers(self.high_pair + self.low_pair)

    def describe(self) -> str:
        return f"{self.high_pair[0].face_name} {self.low_pair[0].face_name}"


@dataclass(frozen=True)
class OnePair(HandResult):
    category: ClassVar[HandCategory] = HandCategory.ONE_PAIR

    pair: Tuple[Card, ...] = ()
    kickers: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.pair) + list(self.kickers)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return (self.pair[0].numeric_face_value,) + self._pool_kickers(self.pair)


@dataclass(frozen=True)
class HighCard(HandResult):
    category: ClassVar[HandCategory] = HandCategory.HIGH_CARD

    cards: Tuple[Card, ...] = ()

    @property
    def best_cards(self) -> List[Card]:
        return list(self.cards)

    @property
    def tiebreak(self) -> Tuple[int, ...]:
        return self._pool_kickers(())


def _values(cards: Tuple[Card, ...]) -> Tuple[int, ...]:
    return tuple(card.numeric_face_value for card in cards)


def compare_results(result1: HandResult, result2: HandResult) -> int:
    """Compare two classified hands.

    Args:
        result1: First result
        result2: Second result

    Returns:
        Positive if result1 beats result2
        Negative if result2 beats result1
        Zero if they are of equal strength
    """
    if result1.category != result2.category:
        # Lower category number is the stronger hand
        return int(result2.category) - int(result1.category)

    for value1, value2 in zip(result1.tiebreak, result2.tiebreak):
        if value1 != value2:
            return value1 - value2
    return 0


def describe_categories() -> dict:
    """Get a description of what each category requires.

    Returns:
        Dict mapping HandCategory to description string
    """
    return {
        HandCategory.ROYAL_FLUSH: "Ten to Ace of one suit",
        HandCategory.STRAIGHT_FLUSH: "Five consecutive cards of one suit (Ace may play low)",
        HandCategory.FOUR_OF_A_KIND: "Four cards of the same face",
        HandCategory.FULL_HOUSE: "Three cards of one face and two of another",
        HandCategory.FLUSH: "Five cards of one suit",
        HandCategory.STRAIGHT: "Five consecutive cards (Ace may play low)",
        HandCategory.THREE_OF_A_KIND: "Three cards of the same face",
        HandCategory.TWO_PAIR: "Two pairs of different faces",
        HandCategory.ONE_PAIR: "Two cards of the same face",
        HandCategory.HIGH_CARD: "Anything else; the highest card decides",
    }
