"""Player hands: a name plus two hole cards.

A line of input such as "Foo AC TD" describes one Hand. The pool a hand
plays from is its hole cards joined with the community cards.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .cards import CardSet, WrongCardCount
from .ranks import Card, HoldemError

HOLE_CARDS = 2


class InvalidHand(HoldemError, ValueError):
    """Raised when a hand cannot be built (e.g. the player has no name)."""

    pass


@dataclass(frozen=True)
class Hand:
    """A player's hole cards.

    Attributes:
        name: Player identifier
        cards: The two hole cards
    """

    name: str
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidHand("Player name must not be empty")
        cards = tuple(self.cards)
        if len(cards) != HOLE_CARDS or len(set(cards)) != HOLE_CARDS:
            raise WrongCardCount(f"Player '{self.name}' must have two cards!")
        object.__setattr__(self, "cards", cards)

    def __str__(self) -> str:
        return f"{self.name}: {', '.join(card.describe() for card in self.cards)}"

    @property
    def hole_cards(self) -> CardSet:
        return CardSet(self.cards)

    def pool(self, community: CardSet) -> CardSet:
        """All cards this hand can play from."""
        return self.hole_cards | community

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse a hand from a line like "Foo AC TD".

        Raises:
            WrongCardCount: If the line does not hold exactly two cards
            InvalidHand: If the line is blank
            InvalidCard: If a card cannot be parsed
        """
        if not s.split():
            raise InvalidHand("Player line must not be empty")
        name, *card_strings = s.split()
        if len(card_strings) != HOLE_CARDS:
            raise WrongCardCount(f"Player '{name}' must have two cards!")
        return cls(name=name, cards=tuple(Card.from_string(cs) for cs in card_strings))


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "3H 4D 5C 6S 7H".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]


def format_cards(cards: Sequence[Card]) -> str:
    """Short form of a card list, e.g. "AC TD"."""
    return " ".join(str(card) for card in cards)
