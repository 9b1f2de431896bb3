"""Table setup: community cards and the players' hands.

This module provides:
- Table: the five community cards plus every player's hand
- parse_input: build a Table from text lines
- Table.deal: deal a random table from a seeded, shuffled deck

Input format:
    KH KD KS AD AS      <- community cards
    Bar TS JD           <- one line per player: name and two hole cards
    Foo AC TD
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from holdem.rules import (
    Card,
    CardSet,
    Hand,
    HoldemError,
    WrongCardCount,
    HOLE_CARDS,
    create_standard_deck,
)
from holdem.utils.seeding import make_rng

# Number of community cards on the board
COMMUNITY_CARDS = 5

# A 52-card deck covers the board plus this many players
MAX_PLAYERS = (52 - COMMUNITY_CARDS) // HOLE_CARDS


class InputError(HoldemError):
    """Raised when the table description is malformed."""

    pass


class DuplicateCard(HoldemError, ValueError):
    """Raised when the same card is dealt twice on one table."""

    pass


@dataclass(frozen=True)
class Table:
    """A fully dealt table.

    Attributes:
        community: The five community cards
        hands: Player hands in input order
    """

    community: CardSet
    hands: List[Hand] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.community) != COMMUNITY_CARDS:
            raise WrongCardCount(f"{COMMUNITY_CARDS} community cards are required.")

        names = [hand.name for hand in self.hands]
        if len(set(names)) != len(names):
            raise InputError("Player names must be unique.")

        seen = set(self.community.cards)
        for hand in self.hands:
            for card in hand.cards:
                if card in seen:
                    raise DuplicateCard(f"Card {card} appears more than once (player '{hand.name}')")
                seen.add(card)

    @classmethod
    def deal(cls, num_players: int, seed: Optional[int] = None) -> "Table":
        """Shuffle a deck and deal a random table.

        Args:
            num_players: Number of hands to deal (1 to MAX_PLAYERS)
            seed: Random seed for reproducibility

        Returns:
            New Table with players named Player1, Player2, ...
        """
        if not 1 <= num_players <= MAX_PLAYERS:
            raise InputError(f"Can deal between 1 and {MAX_PLAYERS} players, got {num_players}")

        rng = make_rng(seed)
        deck = create_standard_deck()
        order = rng.permutation(len(deck))
        shuffled = [deck[i] for i in order]

        community = CardSet(shuffled[:COMMUNITY_CARDS])
        hands = []
        for i in range(num_players):
            start = COMMUNITY_CARDS + i * HOLE_CARDS
            hands.append(Hand(name=f"Player{i + 1}", cards=tuple(shuffled[start : start + HOLE_CARDS])))
        return cls(community=community, hands=hands)

    def to_lines(self) -> List[str]:
        """Render the table in the input format."""
        lines = [str(self.community)]
        for hand in self.hands:
            lines.append(f"{hand.name} {' '.join(str(card) for card in hand.cards)}")
        return lines


def parse_community(line: str) -> CardSet:
    """Parse the community card line.

    Raises:
        WrongCardCount: If the line does not hold five distinct cards
        InvalidCard: If a card cannot be parsed
    """
    cards: List[Card] = [Card.from_string(cs) for cs in line.split()]
    community = CardSet(cards)
    if len(cards) != COMMUNITY_CARDS or len(community) != COMMUNITY_CARDS:
        raise WrongCardCount(f"{COMMUNITY_CARDS} community cards are required.")
    return community


def parse_input(lines: Sequence[str]) -> Table:
    """Build a table from input lines.

    Args:
        lines: Non-empty lines; the first holds the community cards and
            each following line holds one player's hand

    Returns:
        The parsed Table
    """
    if len(lines) < 2:
        raise InputError("At least 2 lines of input are required.")

    community_line, *hand_lines = lines
    community = parse_community(community_line)
    hands = [Hand.from_string(line) for line in hand_lines]
    return Table(community=community, hands=hands)
