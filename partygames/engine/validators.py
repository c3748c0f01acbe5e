"""
Party Games - Input Validation Utilities

Provides validation functions for engine inputs. Roster validators raise
InvalidRoster; value validators raise plain ValueError.
"""

from typing import Iterable, Sequence

from partygames.engine.base import ROSTER_LIMITS, GameType
from partygames.engine.errors import InvalidRoster


def normalize_name(name: str) -> str:
    """
    Strip surrounding whitespace from a player name.

    Raises:
        InvalidRoster: If the name is not a string or is blank
    """
    if not isinstance(name, str):
        raise InvalidRoster(f"Player name must be a string, got {type(name).__name__}.")
    stripped = name.strip()
    if not stripped:
        raise InvalidRoster("Player name cannot be empty.")
    return stripped


def validate_new_name(name: str, existing: Iterable[str]) -> str:
    """
    Validate a name about to join a roster.

    Args:
        name: Candidate name
        existing: Names already on the roster

    Returns:
        The normalized name

    Raises:
        InvalidRoster: If the name is blank or already taken (case-insensitive)
    """
    normalized = normalize_name(name)
    taken = {n.casefold() for n in existing}
    if normalized.casefold() in taken:
        raise InvalidRoster(f"Duplicate player name: {normalized!r}.")
    return normalized


def validate_player_count(count: int, game_type: GameType) -> int:
    """
    Validate roster size for a game type.

    Raises:
        InvalidRoster: If count is outside the game's bounds
    """
    limits = ROSTER_LIMITS[game_type]
    if not limits.allows(count):
        if limits.min_players == limits.max_players:
            expected = f"exactly {limits.min_players}"
        else:
            expected = f"{limits.min_players}-{limits.max_players}"
        raise InvalidRoster(
            f"{game_type.display_name} needs {expected} players, got {count}."
        )
    return count


def validate_roster(names: Sequence[str], game_type: GameType) -> tuple[str, ...]:
    """
    Validate and normalize a full roster of player names.

    Names are never silently dropped or truncated.

    Returns:
        Normalized names, in the given order

    Raises:
        InvalidRoster: If any name is blank or duplicated, or the count is wrong
    """
    if isinstance(names, str):
        raise InvalidRoster("Player names must be a sequence of strings, not a string.")
    accepted: list[str] = []
    for name in names:
        accepted.append(validate_new_name(name, accepted))
    validate_player_count(len(accepted), game_type)
    return tuple(accepted)


def validate_die_value(value: int, faces: int = 6) -> int:
    """
    Validate a single die face.

    Raises:
        ValueError: If the value is not an integer in 1..faces
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Die value must be an integer, got {type(value).__name__}.")
    if not (1 <= value <= faces):
        raise ValueError(f"Die value {value} must be between 1 and {faces}.")
    return value


def validate_max_rounds(max_rounds: int | None) -> int | None:
    """
    Validate an optional round cap.

    Raises:
        ValueError: If max_rounds is given and not a positive integer
    """
    if max_rounds is None:
        return None
    if isinstance(max_rounds, bool) or not isinstance(max_rounds, int):
        raise ValueError(f"Max rounds must be an integer, got {type(max_rounds).__name__}.")
    if max_rounds < 1:
        raise ValueError(f"Max rounds must be positive, got {max_rounds}.")
    return max_rounds
