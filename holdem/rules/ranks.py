"""Card face and suit definitions and utilities.

Face order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Face and suit enumerations with their symbols and display names
- Card representation and string decoding ("KD" -> King of Diamonds)
- Face-value ordering and straight adjacency
- Card validation errors
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List


class HoldemError(Exception):
    """Base class for all hand ranking errors."""

    pass


class InvalidCard(HoldemError, ValueError):
    """Raised when a card cannot be built from the given face and suit."""

    pass


class InvalidFace(InvalidCard):
    """Raised when a face is not one of 2-9, T, J, Q, K, A."""

    pass


class InvalidSuit(InvalidCard):
    """Raised when a suit is not one of D, H, S, C."""

    pass


class Face(IntEnum):
    """Card faces. The value is the numeric face value (Ace high)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(Enum):
    """Card suits. Suits carry no ordering weight in hold'em."""

    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"
    CLUBS = "C"


# Face symbols for encoding/decoding
FACE_SYMBOLS = {
    Face.TWO: "2",
    Face.THREE: "3",
    Face.FOUR: "4",
    Face.FIVE: "5",
    Face.SIX: "6",
    Face.SEVEN: "7",
    Face.EIGHT: "8",
    Face.NINE: "9",
    Face.TEN: "T",
    Face.JACK: "J",
    Face.QUEEN: "Q",
    Face.KING: "K",
    Face.ACE: "A",
}

# Face names used in hand descriptions; number cards render as their symbol
FACE_NAMES = {
    Face.TEN: "Ten",
    Face.JACK: "Jack",
    Face.QUEEN: "Queen",
    Face.KING: "King",
    Face.ACE: "Ace",
}

SUIT_NAMES = {
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
    Suit.CLUBS: "Clubs",
}

# Symbol to face mapping (for parsing)
SYMBOL_TO_FACE = {v: k for k, v in FACE_SYMBOLS.items()}
SYMBOL_TO_FACE["10"] = Face.TEN


@dataclass(frozen=True)
class Card:
    """A playing card with face and suit.

    Immutable and hashable for use in sets. Equality is by (face, suit);
    ordering is done explicitly by face value via sort_cards().
    """

    face: Face
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.face, Face):
            raise InvalidFace(f"'{self.face}' is not a valid face")
        if not isinstance(self.suit, Suit):
            raise InvalidSuit(f"'{self.suit}' is not a valid suit")

    def __str__(self) -> str:
        return f"{FACE_SYMBOLS[self.face]}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def numeric_face_value(self) -> int:
        """Face value from 2 to 14, Ace high."""
        return int(self.face)

    @property
    def face_name(self) -> str:
        return FACE_NAMES.get(self.face, FACE_SYMBOLS[self.face])

    @property
    def suit_name(self) -> str:
        return SUIT_NAMES[self.suit]

    def describe(self) -> str:
        """Long form, e.g. 'King of Diamonds (13)'."""
        return f"{self.face_name} of {self.suit_name} ({self.numeric_face_value})"

    def is_immediately_after(self, other: "Card") -> bool:
        """Check if this card directly follows `other` in a descending run.

        True when this card's value is exactly one less than other's, or
        when other is a Two and this card is an Ace (the wheel wraparound).
        """
        if other.face == Face.TWO and self.face == Face.ACE:
            return True
        return self.numeric_face_value == other.numeric_face_value - 1

    @classmethod
    def of(cls, face_symbol: str, suit_symbol: str) -> "Card":
        """Build a card from a face symbol and a suit symbol.

        Raises:
            InvalidFace: If the face symbol is unknown
            InvalidSuit: If the suit symbol is unknown
        """
        face = SYMBOL_TO_FACE.get(face_symbol.upper())
        if face is None:
            raise InvalidFace(f"'{face_symbol}' is not a valid face")
        try:
            suit = Suit(suit_symbol.upper())
        except ValueError:
            raise InvalidSuit(f"'{suit_symbol}' is not a valid suit") from None
        return cls(face=face, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like 'KD', '2h' or '10S'.

        Args:
            s: Card string in format "FACE+SUIT"

        Returns:
            Card object

        Raises:
            InvalidCard: If the string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise InvalidCard(f"'{s}' is not a valid card")
        return cls.of(s[:-1], s[-1])


SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}


def face_value_key(card: Card):
    """Sort key for descending face value; suit order breaks ties."""
    return (-card.numeric_face_value, SUIT_ORDER[card.suit])


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by face value, highest first.

    Args:
        cards: Cards in any order

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=face_value_key)


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 faces x 4 suits)
    """
    deck = []
    for suit in Suit:
        for face in Face:
            deck.append(Card(face=face, suit=suit))
    return deck
