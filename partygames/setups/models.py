"""
Party Games - Setup Records

Pydantic model for the {player names, game type} record that the
presentation layer keeps for "play again with the same people". How the
record is stored is up to the caller.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from partygames.config import Settings, get_settings
from partygames.engine import GameType, RandomOutcomeSource, RoundSession, create_session


class GameSetup(BaseModel):
    """A reusable game configuration."""

    game_type: GameType = GameType.RANDOM
    player_names: list[str] = Field(min_length=2, max_length=10)
    max_rounds: int | None = Field(default=None, ge=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}

    @field_validator("player_names")
    @classmethod
    def strip_names(cls, names: list[str]) -> list[str]:
        return [name.strip() for name in names]

    @property
    def number_of_players(self) -> int:
        return len(self.player_names)


def create_session_from_setup(
    setup: GameSetup,
    settings: Settings | None = None,
    source: RandomOutcomeSource | None = None,
) -> RoundSession:
    """
    Build a session from a setup record, filling defaults from settings.

    The round cap falls back to settings.default_max_rounds, except for
    Dice, which ends by elimination unless a cap is given explicitly. A
    configured rng_seed seeds the session's source.

    Raises:
        InvalidRoster: If the names are invalid for the chosen game
    """
    settings = settings or get_settings()
    if source is None:
        source = RandomOutcomeSource(seed=settings.rng_seed)
    return create_session(
        setup.game_type,
        setup.player_names,
        source=source,
        max_rounds=setup.max_rounds,
        default_max_rounds=settings.default_max_rounds,
    )
