"""
Party Games - Round Sessions

Stateful controllers that run one game from roster setup to GameOver.
A session owns its roster, scores, round counter and random source (and
deck, for High Card). Each call to play_round() resolves one round
synchronously and returns an immutable RoundOutcome.

Phases:
    SETUP -> READY -> RESOLVING -> ROUND_RESULT -> (READY | GAME_OVER)
    reconfigure() returns to SETUP from any phase.
"""

import logging
from dataclasses import replace
from typing import Any, ClassVar, Sequence
from uuid import UUID

from partygames.engine.base import (
    ROSTER_LIMITS,
    CoinSide,
    GameSummary,
    GameType,
    Hand,
    LoserAction,
    Phase,
    Player,
    Resolution,
    RoundOutcome,
    Standing,
    WheelSpin,
    available_game_types,
)
from partygames.engine.cards import Deck
from partygames.engine.errors import (
    GameAlreadyOver,
    InsufficientCards,
    InvalidPhase,
    InvalidRoster,
)
from partygames.engine.random_source import RandomOutcomeSource
from partygames.engine.resolvers import (
    CoinFlipResolver,
    DiceResolver,
    HighCardResolver,
    OutcomeResolver,
    RockPaperScissorsResolver,
    RouletteResolver,
    pointer_angle,
    segment_for_angle,
)
from partygames.engine.validators import (
    validate_max_rounds,
    validate_new_name,
    validate_player_count,
    validate_roster,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 10


class RoundSession:
    """
    Base session. Subclasses supply the draw step for their game.

    Args:
        player_names: Ordered roster names
        source: Random source owned by this session (fresh one if omitted)
        max_rounds: Round cap; None uses the game's default
        default_max_rounds: Cap applied when max_rounds is None, for games
            that are capped by default
    """

    game_type: ClassVar[GameType]
    resolver: ClassVar[type[OutcomeResolver]]
    capped_by_default: ClassVar[bool] = True

    def __init__(
        self,
        player_names: Sequence[str],
        source: RandomOutcomeSource | None = None,
        max_rounds: int | None = None,
        default_max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        names = validate_roster(player_names, self.game_type)
        self.source = source if source is not None else RandomOutcomeSource()
        self._max_rounds = validate_max_rounds(max_rounds)
        self._default_max_rounds = validate_max_rounds(default_max_rounds)
        self._players: list[Player] = [Player(name=name) for name in names]
        self.phase = Phase.SETUP
        self.rounds_played = 0
        self.last_outcome: RoundOutcome | None = None
        self._summary: GameSummary | None = None

    # -- roster ---------------------------------------------------------

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def active_players(self) -> tuple[Player, ...]:
        return tuple(p for p in self._players if p.active)

    def player(self, player_id: UUID) -> Player:
        """Current snapshot of a player by id."""
        for p in self._players:
            if p.id == player_id:
                return p
        raise KeyError(player_id)

    def _require_setup(self, action: str) -> None:
        if self.phase is not Phase.SETUP:
            raise InvalidPhase(f"Cannot {action} during {self.phase.name}; call reconfigure() first.")

    def add_player(self, name: str) -> Player:
        """
        Add a player while in SETUP.

        Raises:
            InvalidPhase: If the session is not in SETUP
            InvalidRoster: If the name is blank, taken, or the roster is full
        """
        self._require_setup("add players")
        normalized = validate_new_name(name, (p.name for p in self._players))
        limit = ROSTER_LIMITS[self.game_type].max_players
        if len(self._players) >= limit:
            raise InvalidRoster(f"{self.game_type.display_name} allows at most {limit} players.")
        player = Player(name=normalized)
        self._players.append(player)
        return player

    def remove_player(self, name: str) -> Player:
        """
        Remove a player by name (case-insensitive) while in SETUP.

        The minimum roster size is enforced by start_new_game().
        """
        self._require_setup("remove players")
        wanted = name.strip().casefold()
        for index, p in enumerate(self._players):
            if p.name.casefold() == wanted:
                return self._players.pop(index)
        raise InvalidRoster(f"No player named {name!r}.")

    def reconfigure(self) -> None:
        """Return to SETUP so the roster can be edited."""
        self.phase = Phase.SETUP

    # -- lifecycle ------------------------------------------------------

    def start_new_game(self) -> None:
        """
        Reset scores, eliminations and per-game resources; move to READY.

        Raises:
            InvalidRoster: If the roster size is outside the game's bounds
        """
        validate_player_count(len(self._players), self.game_type)
        self._players = [replace(p, score=0, active=True) for p in self._players]
        self.rounds_played = 0
        self.last_outcome = None
        self._summary = None
        self._reset_resources()
        self.phase = Phase.READY
        logger.debug(
            "New %s game with %d players", self.game_type.value, len(self._players)
        )

    def advance(self) -> None:
        """Move from ROUND_RESULT back to READY."""
        if self.phase is not Phase.ROUND_RESULT:
            raise InvalidPhase(f"Cannot advance from {self.phase.name}.")
        self.phase = Phase.READY

    def play_round(self) -> RoundOutcome:
        """
        Draw, resolve and score one round.

        Returns:
            The round's outcome

        Raises:
            GameAlreadyOver: If the session is in GAME_OVER
            InvalidPhase: If the game has not been started
            InsufficientCards: If the deck cannot deal this round (the
                session is moved to GAME_OVER first)
        """
        if self.phase is Phase.GAME_OVER:
            raise GameAlreadyOver("The game is over; start a new game to keep playing.")
        if self.phase is Phase.ROUND_RESULT:
            self.advance()
        if self.phase is not Phase.READY:
            raise InvalidPhase(f"Cannot play a round during {self.phase.name}.")

        active = self.active_players
        self._check_capacity(active)

        self.phase = Phase.RESOLVING
        picks, draw = self._draw(active)
        resolution = self.resolver.resolve(picks, self._resolver_draw(draw))
        outcome = self._apply(resolution, picks, draw)
        self.last_outcome = outcome
        logger.debug("Round %d resolved: %s", outcome.round_number, outcome.message)

        if outcome.game_over:
            self._finish()
        else:
            self.phase = Phase.ROUND_RESULT
        return outcome

    def is_complete(self) -> bool:
        return self.phase is Phase.GAME_OVER

    # -- round steps ----------------------------------------------------

    def _reset_resources(self) -> None:
        """Hook for per-game resources (e.g. the deck)."""

    def _check_capacity(self, active: tuple[Player, ...]) -> None:
        """Hook: raise before drawing if the round cannot be satisfied."""

    def _draw(self, active: tuple[Player, ...]) -> tuple[dict[UUID, Any], Any]:
        """Return (picks keyed by player id, shared draw or None)."""
        raise NotImplementedError

    def _resolver_draw(self, draw: Any) -> Any:
        return draw

    def _apply(
        self,
        resolution: Resolution,
        picks: dict[UUID, Any],
        draw: Any,
    ) -> RoundOutcome:
        winner_ids = resolution.winners
        scored_id = resolution.sole_winner

        eliminated_ids: set[UUID] = set()
        if self.resolver.loser_action is LoserAction.ELIMINATE_NON_MAX:
            eliminated_ids = {pid for pid in picks if pid not in winner_ids}

        updated = []
        for p in self._players:
            if p.id == scored_id:
                p = replace(p, score=p.score + 1)
            if p.id in eliminated_ids:
                p = replace(p, active=False)
            updated.append(p)
        self._players = updated
        self.rounds_played += 1

        winners = tuple(p for p in self._players if p.id in winner_ids)
        eliminated = tuple(p for p in self._players if p.id in eliminated_ids)
        if eliminated:
            logger.info(
                "Eliminated %s", ", ".join(p.name for p in eliminated)
            )

        return RoundOutcome(
            round_number=self.rounds_played,
            picks=dict(picks),
            winners=winners,
            is_tie=resolution.is_tie,
            loser_action=LoserAction.ELIMINATE_NON_MAX if eliminated else LoserAction.NONE,
            eliminated=eliminated,
            scored=self.player(scored_id) if scored_id is not None else None,
            draw=draw,
            message=self._round_message(winners, resolution.is_tie, eliminated),
            game_over=self._should_end(),
        )

    def _round_message(
        self,
        winners: tuple[Player, ...],
        is_tie: bool,
        eliminated: tuple[Player, ...],
    ) -> str:
        if not is_tie:
            return f"{winners[0].name} wins!"
        if not winners:
            return "It's a tie!"
        message = "Tie between " + " and ".join(p.name for p in winners) + "!"
        if eliminated:
            message += " Others eliminated."
        return message

    def _should_end(self) -> bool:
        cap = self.max_rounds
        return cap is not None and self.rounds_played >= cap

    def _finish(self) -> None:
        self.phase = Phase.GAME_OVER
        self._summary = self._build_summary()
        logger.info(
            "%s game over after %d rounds: %s",
            self.game_type.display_name, self.rounds_played, self._summary.message,
        )

    def _build_summary(self) -> GameSummary:
        ranked = self.standings()
        contenders = [s for s in ranked if s.player.active]
        best = max((s.score for s in contenders), default=0)
        return GameSummary(
            game_type=self.game_type,
            standings=ranked,
            winners=tuple(s.player for s in contenders if s.score == best),
            rounds_played=self.rounds_played,
        )

    # -- reporting ------------------------------------------------------

    @property
    def max_rounds(self) -> int | None:
        """Effective round cap, or None when the game ends only by its own rule."""
        if self._max_rounds is not None:
            return self._max_rounds
        return self._default_max_rounds if self.capped_by_default else None

    @property
    def rounds_remaining(self) -> int | None:
        cap = self.max_rounds
        if cap is None:
            return None
        return max(0, cap - self.rounds_played)

    @property
    def progress(self) -> float | None:
        """Fraction of the round cap already played."""
        cap = self.max_rounds
        if cap is None:
            return None
        return self.rounds_played / cap

    def standings(self) -> tuple[Standing, ...]:
        """Players by score, highest first; roster order breaks ties."""
        ranked = sorted(self._players, key=lambda p: p.score, reverse=True)
        return tuple(Standing(player=p, score=p.score) for p in ranked)

    @property
    def summary(self) -> GameSummary | None:
        """Final result, available once the session is in GAME_OVER."""
        return self._summary


class CoinFlipSession(RoundSession):
    """First player holds heads, second holds tails; one flip per round."""

    game_type = GameType.COIN_FLIP
    resolver = CoinFlipResolver

    def _draw(self, active: tuple[Player, ...]) -> tuple[dict[UUID, Any], Any]:
        bindings = {p.id: side for p, side in zip(active, CoinSide)}
        flip = CoinSide(self.source.next_index(len(CoinSide)))
        return bindings, flip


class RockPaperScissorsSession(RoundSession):
    """Both players throw a hand each round."""

    game_type = GameType.ROCK_PAPER_SCISSORS
    resolver = RockPaperScissorsResolver

    def _draw(self, active: tuple[Player, ...]) -> tuple[dict[UUID, Any], Any]:
        return {p.id: Hand(self.source.next_index(len(Hand))) for p in active}, None


class RouletteSession(RoundSession):
    """
    Every player owns an equal wheel segment, in roster order.

    The wheel is not re-centred between spins: each spin adds to the
    rotation left by the previous one, and the pointer reads the total.
    """

    game_type = GameType.ROULETTE
    resolver = RouletteResolver
    _wheel_rotation: float = 0.0

    def _reset_resources(self) -> None:
        self._wheel_rotation = 0.0

    def _draw(self, active: tuple[Player, ...]) -> tuple[dict[UUID, Any], Any]:
        segments = {p.id: index for index, p in enumerate(active)}
        rotation = self.source.spin()
        self._wheel_rotation += rotation
        angle = pointer_angle(self._wheel_rotation)
        spin = WheelSpin(
            rotation=rotation,
            wheel_rotation=self._wheel_rotation,
            angle=angle,
            segment=segment_for_angle(angle, len(active)),
        )
        return segments, spin

    def _resolver_draw(self, draw: WheelSpin) -> float:
        return draw.angle


class DiceSession(RoundSession):
    """
    Every active player rolls one die. Players below the maximum are
    eliminated; tied leaders re-roll until one remains.
    """

    game_type = GameType.DICE
    resolver = DiceResolver
    capped_by_default = False

    def _draw(self, active: tuple[Player, ...]) -> tuple[dict[UUID, Any], Any]:
        return {p.id: self.source.roll_die() for p in active}, None

    def _should_end(self) -> bool:
        return len(self.active_players) <= 1 or super()._should_end()


class HighCardSession(RoundSession):
    """
    Every player draws one card per round from a shared deck. A tied high
    card scores nothing and nobody is eliminated.
    """

    game_type = GameType.HIGH_CARD
    resolver = HighCardResolver

    def __init__(
        self,
        player_names: Sequence[str],
        source: RandomOutcomeSource | None = None,
        max_rounds: int | None = None,
        default_max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        super().__init__(
            player_names,
            source=source,
            max_rounds=max_rounds,
            default_max_rounds=default_max_rounds,
        )
        self.deck = Deck(source=self.source)

    @property
    def max_rounds(self) -> int:
        # Never schedule more rounds than the deck can deal
        return min(super().max_rounds, Deck.SIZE // max(1, len(self.active_players)))

    @property
    def cards_remaining(self) -> int:
        return self.deck.remaining()

    def _reset_resources(self) -> None:
        self.deck.reset()

    def _check_capacity(self, active: tuple[Player, ...]) -> None:
        remaining = self.deck.remaining()
        if remaining < len(active):
            logger.warning(
                "Deck cannot deal %d cards (%d left); ending game", len(active), remaining
            )
            self._finish()
            raise InsufficientCards(needed=len(active), remaining=remaining)

    def _draw(self, active: tuple[Player, ...]) -> tuple[dict[UUID, Any], Any]:
        return {p.id: self.deck.draw() for p in active}, None

    def _should_end(self) -> bool:
        return (
            super()._should_end()
            or self.deck.remaining() < len(self.active_players)
        )


SESSION_TYPES: dict[GameType, type[RoundSession]] = {
    cls.game_type: cls
    for cls in (
        CoinFlipSession,
        RockPaperScissorsSession,
        RouletteSession,
        DiceSession,
        HighCardSession,
    )
}


def create_session(
    game_type: GameType | str,
    player_names: Sequence[str],
    source: RandomOutcomeSource | None = None,
    max_rounds: int | None = None,
    default_max_rounds: int = DEFAULT_MAX_ROUNDS,
) -> RoundSession:
    """
    Build a session in SETUP for the given game and roster.

    GameType.RANDOM picks one of the games playable with this many players,
    using the session's own source.

    Raises:
        InvalidRoster: If the roster is invalid for the game
        ValueError: If the game type is unknown
    """
    game_type = GameType(game_type)
    source = source if source is not None else RandomOutcomeSource()
    if game_type is GameType.RANDOM:
        names = validate_roster(player_names, GameType.RANDOM)
        game_type = source.pick(available_game_types(len(names)))
        logger.debug("Random game type resolved to %s", game_type.value)
    return SESSION_TYPES[game_type](
        player_names,
        source=source,
        max_rounds=max_rounds,
        default_max_rounds=default_max_rounds,
    )


def start_new_game(session: RoundSession) -> None:
    session.start_new_game()


def play_round(session: RoundSession) -> RoundOutcome:
    return session.play_round()


def is_complete(session: RoundSession) -> bool:
    return session.is_complete()


def standings(session: RoundSession) -> tuple[Standing, ...]:
    return session.standings()
