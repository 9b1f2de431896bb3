"""Immutable card collections.

A CardSet is the working view the matchers run against: the 7-card pool
of a player (hole cards plus community cards). It never changes after
construction; set algebra and grouping always return new values.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Union

from .ranks import Card, Face, HoldemError, Suit, sort_cards


class WrongCardCount(HoldemError, ValueError):
    """Raised when a hand or the board does not hold the required number of cards."""

    pass


class GroupKey(Enum):
    """Card attribute to group a CardSet by."""

    FACE = "face"
    SUIT = "suit"


class StraightMode(Enum):
    """Straight search variants.

    PLAIN ignores suits; STRAIGHT_FLUSH and ROYAL only accept same-suit runs,
    and ROYAL additionally requires the run to start at an Ace.
    """

    PLAIN = "plain"
    STRAIGHT_FLUSH = "straight_flush"
    ROYAL = "royal"


STRAIGHT_LENGTH = 5


@dataclass(frozen=True)
class CardSet:
    """A set of unique cards.

    Attributes:
        cards: Frozenset of the member cards
    """

    cards: FrozenSet[Card] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.cards, frozenset):
            object.__setattr__(self, "cards", frozenset(self.cards))

    @classmethod
    def from_string(cls, s: str) -> "CardSet":
        """Parse a CardSet from a string like "KH KD KS AD AS"."""
        return cls(frozenset(Card.from_string(cs) for cs in s.split()))

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.sorted())

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.sorted())

    def __or__(self, other: "CardSet") -> "CardSet":
        return self.union(other)

    def __sub__(self, other: "CardSet") -> "CardSet":
        return self.difference(other)

    def union(self, other: Union["CardSet", Iterable[Card]]) -> "CardSet":
        return CardSet(self.cards | _as_frozenset(other))

    def difference(self, other: Union["CardSet", Iterable[Card]]) -> "CardSet":
        return CardSet(self.cards - _as_frozenset(other))

    def sorted(self) -> List[Card]:
        """Members ordered by face value, highest first."""
        return sort_cards(self.cards)

    def group_by(self, key: GroupKey) -> Dict[Union[Face, Suit], List[Card]]:
        """Partition the set by face or suit.

        Each group lists its cards highest face first. Groups are inserted
        in descending order of their first card, so iterating a face
        grouping visits the highest face first. Keys with no cards are
        absent.
        """
        groups: Dict[Union[Face, Suit], List[Card]] = {}
        for card in self.sorted():
            groups.setdefault(getattr(card, key.value), []).append(card)
        return groups

    def groups_of_at_least(self, n: int, by: GroupKey = GroupKey.FACE) -> List[List[Card]]:
        """Groups holding at least n cards, highest first.

        Used to find quads (n=4), triples (n=3) and pairs (n=2).
        """
        return [group for group in self.group_by(by).values() if len(group) >= n]

    def find_straight(self, mode: StraightMode = StraightMode.PLAIN) -> Optional[List[Card]]:
        """Find a five-card run in this set.

        Args:
            mode: PLAIN searches every card regardless of suit; ROYAL and
                STRAIGHT_FLUSH search each suit separately.

        Returns:
            The five cards of the run, top card first (the Ace last for a
            wheel), or None if no partition holds a run.
        """
        if mode == StraightMode.PLAIN:
            partitions = [self.sorted()]
        else:
            partitions = list(self.group_by(GroupKey.SUIT).values())

        for partition in partitions:
            run = _find_run(partition, mode)
            if run is not None:
                return run
        return None


def _as_frozenset(cards: Union[CardSet, Iterable[Card]]) -> FrozenSet[Card]:
    if isinstance(cards, CardSet):
        return cards.cards
    return frozenset(cards)


def _find_run(cards: List[Card], mode: StraightMode) -> Optional[List[Card]]:
    """Walk cards (sorted highest first) once, looking for five in a row."""
    royal = mode == StraightMode.ROYAL
    has_ace = any(card.face == Face.ACE for card in cards)
    run: List[Card] = []

    for card in cards:
        if run and card.face == run[-1].face:
            continue
        if run and card.is_immediately_after(run[-1]):
            run.append(card)
        elif not royal or card.face == Face.ACE:
            run = [card]
        else:
            run = []

        if len(run) == STRAIGHT_LENGTH:
            return run
        if not royal and has_ace and len(run) == STRAIGHT_LENGTH - 1 and run[-1].face == Face.TWO:
            ace = next(c for c in cards if c.face == Face.ACE)
            return run + [ace]

    return None
