"""
Party Games - Outcome Resolvers

Stateless comparison rules, one per game type. Each resolver maps a round's
picks (key -> raw value) to a Resolution. Keys are opaque; sessions use
player ids.

Tie policies differ on purpose:
    - Coin flip and roulette: a tie cannot happen
    - Rock-paper-scissors: equal hands tie, nobody wins
    - Dice: tied maximum players survive, everyone else is eliminated
    - High card: tied maximum players score nothing, nobody is eliminated
"""

from typing import Any, ClassVar, Hashable, Mapping

from partygames.engine.base import CoinSide, GameType, Hand, LoserAction, Resolution
from partygames.engine.cards import Card
from partygames.engine.validators import validate_die_value


def segment_for_angle(angle: float, segment_count: int) -> int:
    """
    Index of the equal-width wheel segment containing an angle.

    Segment i spans [i * width, (i + 1) * width) degrees, width = 360 / count.
    Angles outside [0, 360) are normalized first.
    """
    if segment_count < 1:
        raise ValueError(f"Segment count must be positive, got {segment_count}.")
    normalized = angle % 360.0
    width = 360.0 / segment_count
    # Float rounding can push 359.999... into a nonexistent segment
    return min(int(normalized // width), segment_count - 1)


def pointer_angle(rotation: float) -> float:
    """Wheel angle sitting under a fixed pointer after rotating the wheel."""
    return (360.0 - rotation % 360.0) % 360.0


def _max_value_keys(values: Mapping[Hashable, int]) -> tuple[frozenset[Hashable], tuple[Hashable, ...]]:
    ranking = tuple(sorted(values, key=lambda k: values[k], reverse=True))
    best = values[ranking[0]]
    return frozenset(k for k in ranking if values[k] == best), ranking


class OutcomeResolver:
    """Base class: one subclass per concrete game type."""

    game_type: ClassVar[GameType]
    loser_action: ClassVar[LoserAction] = LoserAction.NONE

    @classmethod
    def resolve(cls, picks: Mapping[Hashable, Any], draw: Any = None) -> Resolution:
        raise NotImplementedError

    @classmethod
    def _require_picks(cls, picks: Mapping[Hashable, Any], exactly: int | None = None) -> None:
        if not picks:
            raise ValueError(f"{cls.game_type.display_name} needs at least one pick.")
        if exactly is not None and len(picks) != exactly:
            raise ValueError(
                f"{cls.game_type.display_name} needs exactly {exactly} picks, got {len(picks)}."
            )


class CoinFlipResolver(OutcomeResolver):
    """Each of two players is bound to a side; the flipped side wins."""

    game_type = GameType.COIN_FLIP

    @classmethod
    def resolve(cls, picks: Mapping[Hashable, CoinSide], draw: CoinSide | None = None) -> Resolution:
        """
        Args:
            picks: Side bound to each player
            draw: The side the coin landed on
        """
        cls._require_picks(picks, exactly=2)
        if set(picks.values()) != set(CoinSide):
            raise ValueError("Coin flip players must be bound to opposite sides.")
        if not isinstance(draw, CoinSide):
            raise ValueError(f"Coin flip needs a CoinSide draw, got {draw!r}.")
        winner = next(k for k, side in picks.items() if side is draw)
        return Resolution(winners=frozenset({winner}), is_tie=False, ranking=(winner,))


class DiceResolver(OutcomeResolver):
    """Highest die wins; a tied maximum eliminates everyone below it."""

    game_type = GameType.DICE
    loser_action = LoserAction.ELIMINATE_NON_MAX

    @classmethod
    def resolve(cls, picks: Mapping[Hashable, int], draw: Any = None) -> Resolution:
        cls._require_picks(picks)
        for value in picks.values():
            validate_die_value(value)
        winners, ranking = _max_value_keys(picks)
        return Resolution(winners=winners, is_tie=len(winners) > 1, ranking=ranking)


class HighCardResolver(OutcomeResolver):
    """Highest rank wins; suits never break ties."""

    game_type = GameType.HIGH_CARD

    @classmethod
    def resolve(cls, picks: Mapping[Hashable, Card], draw: Any = None) -> Resolution:
        cls._require_picks(picks)
        winners, ranking = _max_value_keys({k: card.value for k, card in picks.items()})
        return Resolution(winners=winners, is_tie=len(winners) > 1, ranking=ranking)


class RockPaperScissorsResolver(OutcomeResolver):
    """Two hands, cyclic dominance; equal hands tie with no winner."""

    game_type = GameType.ROCK_PAPER_SCISSORS

    @classmethod
    def resolve(cls, picks: Mapping[Hashable, Hand], draw: Any = None) -> Resolution:
        cls._require_picks(picks, exactly=2)
        (first, first_hand), (second, second_hand) = picks.items()
        if first_hand is second_hand:
            return Resolution(winners=frozenset(), is_tie=True)
        if first_hand.beats(second_hand):
            return Resolution(winners=frozenset({first}), ranking=(first, second))
        return Resolution(winners=frozenset({second}), ranking=(second, first))


class RouletteResolver(OutcomeResolver):
    """One spin over the whole roster; the segment under the pointer wins."""

    game_type = GameType.ROULETTE

    @classmethod
    def resolve(cls, picks: Mapping[Hashable, int], draw: float | None = None) -> Resolution:
        """
        Args:
            picks: Wheel segment index owned by each player
            draw: Angle (degrees) that ended up under the pointer
        """
        cls._require_picks(picks)
        if draw is None:
            raise ValueError("Roulette needs the landing angle as its draw.")
        segment = segment_for_angle(draw, len(picks))
        winner = next(k for k, index in picks.items() if index == segment)
        return Resolution(winners=frozenset({winner}), is_tie=False, ranking=(winner,))


RESOLVERS: dict[GameType, type[OutcomeResolver]] = {
    resolver.game_type: resolver
    for resolver in (
        CoinFlipResolver,
        DiceResolver,
        HighCardResolver,
        RockPaperScissorsResolver,
        RouletteResolver,
    )
}


def get_resolver(game_type: GameType) -> type[OutcomeResolver]:
    """
    Look up the resolver for a concrete game type.

    Raises:
        ValueError: If the type has no resolver (e.g. RANDOM)
    """
    try:
        return RESOLVERS[game_type]
    except KeyError:
        raise ValueError(f"No resolver for game type {game_type.value!r}.") from None
