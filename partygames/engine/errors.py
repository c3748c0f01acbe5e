"""
Party Games - Engine Errors

Every error the engine raises derives from GameEngineError. All of them are
deterministic functions of session state at call time; none are retried.
"""


class GameEngineError(Exception):
    """Base class for engine errors."""


class InvalidRoster(GameEngineError, ValueError):
    """Too few or too many players, or an empty / duplicate name."""


class EmptyDeck(GameEngineError):
    """A card was drawn from a deck with no cards left."""


class InsufficientCards(GameEngineError):
    """The deck cannot deal one card to every active player."""

    def __init__(self, needed: int, remaining: int) -> None:
        super().__init__(
            f"Need {needed} cards to deal a round, only {remaining} remain."
        )
        self.needed = needed
        self.remaining = remaining


class GameAlreadyOver(GameEngineError):
    """A round was requested after the session reached GameOver."""


class InvalidPhase(GameEngineError):
    """An operation was called in a phase that does not allow it."""
