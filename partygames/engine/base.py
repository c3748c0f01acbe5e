"""
Party Games - Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Round results and player snapshots are immutable (frozen
dataclasses); sessions replace them rather than mutating them in place.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Hashable
from uuid import UUID, uuid4


class GameType(Enum):
    """Available mini-games."""
    COIN_FLIP = "coin_flip"
    ROCK_PAPER_SCISSORS = "rock_paper_scissors"
    ROULETTE = "roulette"
    DICE = "dice"
    HIGH_CARD = "high_card"
    RANDOM = "random"  # Resolved to a concrete type at session creation

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[GameType, str] = {
    GameType.COIN_FLIP: "Coin Flip",
    GameType.ROCK_PAPER_SCISSORS: "Rock, Paper, Scissors",
    GameType.ROULETTE: "Roulette",
    GameType.DICE: "Dice",
    GameType.HIGH_CARD: "High Card",
    GameType.RANDOM: "Random",
}


@dataclass(frozen=True)
class RosterLimits:
    """Inclusive player-count bounds for a game type."""
    min_players: int
    max_players: int

    def allows(self, count: int) -> bool:
        return self.min_players <= count <= self.max_players


ROSTER_LIMITS: dict[GameType, RosterLimits] = {
    GameType.COIN_FLIP: RosterLimits(2, 2),
    GameType.ROCK_PAPER_SCISSORS: RosterLimits(2, 2),
    GameType.DICE: RosterLimits(2, 6),
    GameType.HIGH_CARD: RosterLimits(2, 6),
    GameType.ROULETTE: RosterLimits(2, 10),
    GameType.RANDOM: RosterLimits(2, 10),
}


def available_game_types(player_count: int) -> tuple[GameType, ...]:
    """
    Concrete game types offered for the given number of players.

    Two players may play anything; three to five choose between roulette
    and dice; larger groups only spin the wheel. This catalogue is
    narrower than ROSTER_LIMITS, which bounds what a session accepts.
    """
    if player_count > 5:
        offered = (GameType.ROULETTE,)
    elif player_count > 2:
        offered = (GameType.ROULETTE, GameType.DICE)
    else:
        offered = tuple(t for t in GameType if t is not GameType.RANDOM)
    return tuple(t for t in offered if ROSTER_LIMITS[t].allows(player_count))


class Phase(Enum):
    """Session lifecycle phases."""
    SETUP = auto()
    READY = auto()
    RESOLVING = auto()
    ROUND_RESULT = auto()
    GAME_OVER = auto()


class LoserAction(Enum):
    """What happens to players who did not win a round."""
    NONE = auto()
    ELIMINATE_NON_MAX = auto()


class CoinSide(Enum):
    """Coin faces, indexed in draw order."""
    HEADS = 0
    TAILS = 1


class Hand(Enum):
    """Rock-paper-scissors gestures, indexed in draw order."""
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    def beats(self, other: "Hand") -> bool:
        """Cyclic dominance: each hand beats the one before it."""
        return (self.value - other.value) % 3 == 1


@dataclass(frozen=True)
class Player:
    """
    Snapshot of one roster entry.

    Attributes:
        name: Display name, unique within the roster (case-insensitive)
        id: Opaque unique identifier
        score: Rounds won so far
        active: False once eliminated
    """
    name: str
    id: UUID = field(default_factory=uuid4)
    score: int = 0
    active: bool = True


@dataclass(frozen=True)
class Resolution:
    """
    Result of applying a game's comparison rule to one round of picks.

    Attributes:
        winners: Keys achieving the winning outcome (size > 1 means tie)
        is_tie: Whether no single winner emerged
        ranking: Keys ordered best-first, where the game has an ordering
    """
    winners: frozenset[Hashable]
    is_tie: bool = False
    ranking: tuple[Hashable, ...] = ()

    @property
    def sole_winner(self) -> Hashable | None:
        """The single winning key, or None on a tie / no-winner round."""
        if self.is_tie or len(self.winners) != 1:
            return None
        return next(iter(self.winners))


@dataclass(frozen=True)
class RoundOutcome:
    """
    Immutable snapshot of one resolved round.

    Attributes:
        round_number: 1-based index of the round within the session
        picks: Raw value drawn per player id
        winners: Player snapshots achieving the round's best outcome
        is_tie: Whether the round ended without a single winner
        loser_action: Whether non-winners were eliminated
        eliminated: Players eliminated by this round
        scored: Player who was awarded a point, if any
        draw: Shared draw for single-draw games (coin side, spin angle)
        message: Human-readable summary
        game_over: Whether this round ended the session
    """
    round_number: int
    picks: dict[UUID, Any]
    winners: tuple[Player, ...]
    is_tie: bool
    loser_action: LoserAction = LoserAction.NONE
    eliminated: tuple[Player, ...] = ()
    scored: Player | None = None
    draw: Any = None
    message: str = ""
    game_over: bool = False

    @property
    def winner_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.winners)


@dataclass(frozen=True)
class Standing:
    """A player's position in the standings."""
    player: Player
    score: int


@dataclass(frozen=True)
class GameSummary:
    """
    Terminal result of a session.

    Attributes:
        game_type: Game that was played
        standings: Players sorted by score, highest first
        winners: Active players tied at the maximum score
        rounds_played: Rounds resolved before the game ended
    """
    game_type: GameType
    standings: tuple[Standing, ...]
    winners: tuple[Player, ...]
    rounds_played: int

    @property
    def is_tie(self) -> bool:
        return len(self.winners) != 1

    @property
    def final_scores(self) -> dict[str, int]:
        return {s.player.name: s.score for s in self.standings}

    @property
    def message(self) -> str:
        score_line = "-".join(str(s.score) for s in self.standings)
        if not self.winners:
            return f"No winner. Final Score: {score_line}"
        if self.is_tie:
            names = " and ".join(p.name for p in self.winners)
            return f"It's a tie game between {names}! Final Score: {score_line}"
        return f"{self.winners[0].name} won the game! Final Score: {score_line}"


@dataclass(frozen=True)
class WheelSpin:
    """
    One roulette spin.

    Attributes:
        rotation: Degrees this spin turned the wheel (for animation)
        wheel_rotation: Running total of every spin since the game started;
            the wheel keeps its position between rounds
        angle: Wheel angle that stopped under the pointer, in [0, 360)
        segment: Index of the winning segment
    """
    rotation: float
    wheel_rotation: float
    angle: float
    segment: int
