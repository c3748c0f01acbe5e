"""
Party Games - Cards and Deck

Standard 52-card deck for the High Card game. Cards compare by rank only;
suit is never a tiebreaker.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from partygames.engine.errors import EmptyDeck
from partygames.engine.random_source import RandomOutcomeSource


class Suit(Enum):
    """Card suits."""
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(IntEnum):
    """Card ranks, aces high."""
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

    @property
    def symbol(self) -> str:
        return _FACE_SYMBOLS.get(self, str(self.value))


_FACE_SYMBOLS = {Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A"}


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Equality and hashing use (suit, rank) so a deck can be checked for
    duplicates; ordering uses rank alone.
    """
    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            object.__setattr__(self, "rank", Rank(self.rank))

    @property
    def value(self) -> int:
        return int(self.rank)

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"


def standard_cards() -> list[Card]:
    """The canonical 52 cards, suit-major."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


@dataclass
class Deck:
    """
    Consumable shuffled deck.

    Cards are drawn from the end of the shuffled sequence. No card is dealt
    twice between resets.
    """
    source: RandomOutcomeSource = field(default_factory=RandomOutcomeSource)
    _cards: list[Card] = field(default_factory=list, init=False, repr=False)

    SIZE = 52

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Rebuild the full 52-card set and shuffle it."""
        self._cards = standard_cards()
        self.source.shuffle(self._cards)

    def draw(self) -> Card:
        """
        Remove and return the next card.

        Raises:
            EmptyDeck: If no cards remain
        """
        if not self._cards:
            raise EmptyDeck("Cannot draw from an empty deck.")
        return self._cards.pop()

    def remaining(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards
