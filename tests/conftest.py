"""
Party Games - Test Configuration and Fixtures

Scripted random sources and common rosters for all test modules.
"""

from collections import deque
from typing import Iterable, MutableSequence

import pytest

from partygames.engine.cards import Card
from partygames.engine.random_source import RandomOutcomeSource


class ScriptedSource(RandomOutcomeSource):
    """
    Random source that replays queued values.

    Args:
        indices: Values returned by next_index(), in order
        spins: Rotations returned by spin(), in order
        deal: Cards that should come off the deck first, in draw order
    """

    def __init__(
        self,
        indices: Iterable[int] = (),
        spins: Iterable[float] = (),
        deal: Iterable[Card] = (),
    ) -> None:
        super().__init__(seed=0)
        self.indices = deque(indices)
        self.spins = deque(spins)
        self.deal = list(deal)

    def next_index(self, alphabet_size: int) -> int:
        value = self.indices.popleft()
        assert 0 <= value < alphabet_size, f"scripted {value} outside [0, {alphabet_size})"
        return value

    def spin(self) -> float:
        return self.spins.popleft()

    def shuffle(self, items: MutableSequence) -> None:
        # Deck draws pop from the end, so stack the scripted cards last
        rest = [card for card in items if card not in self.deal]
        items[:] = rest + list(reversed(self.deal))

    @classmethod
    def from_dice(cls, *rounds: Iterable[int]) -> "ScriptedSource":
        """Source whose die rolls replay the given faces (1-6), round by round."""
        return cls(indices=[face - 1 for faces in rounds for face in faces])


@pytest.fixture
def scripted():
    """The ScriptedSource class, for building deterministic sources."""
    return ScriptedSource


@pytest.fixture
def two_names() -> list[str]:
    return ["Alice", "Bob"]


@pytest.fixture
def four_names() -> list[str]:
    return ["Alice", "Bob", "Charlie", "Diana"]


@pytest.fixture
def five_names() -> list[str]:
    return ["Alice", "Bob", "Charlie", "Diana", "Eve"]


@pytest.fixture
def seeded_source() -> RandomOutcomeSource:
    return RandomOutcomeSource(seed=1234)
