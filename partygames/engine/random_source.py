"""
Party Games - Random Outcome Source

Single seam through which every session draws randomness: coin sides, die
faces, hand gestures, deck shuffles and roulette spins. Each session owns
its own source; inject a seeded one for deterministic play.
"""

import random
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class RandomOutcomeSource:
    """
    Uniform picks from a finite alphabet, backed by a private random.Random.

    Args:
        seed: Optional seed for deterministic sequences
        rng: Optional pre-built generator (takes precedence over seed)
    """

    MIN_SPIN_TURNS = 3
    MAX_SPIN_TURNS = 6

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def next_index(self, alphabet_size: int) -> int:
        """
        Draw an integer uniformly from [0, alphabet_size).

        Raises:
            ValueError: If alphabet_size is not a positive integer
        """
        if not isinstance(alphabet_size, int) or alphabet_size < 1:
            raise ValueError(f"Alphabet size must be a positive integer, got {alphabet_size!r}.")
        return self._rng.randrange(alphabet_size)

    def pick(self, options: Sequence[T]) -> T:
        """Draw one element of a non-empty sequence."""
        return options[self.next_index(len(options))]

    def roll_die(self, faces: int = 6) -> int:
        """Roll a single die, 1..faces."""
        return self.next_index(faces) + 1

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates shuffle in place; every permutation equally likely."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_index(i + 1)
            items[i], items[j] = items[j], items[i]

    def spin(self) -> float:
        """
        Total wheel rotation in degrees for one roulette spin.

        Several full turns plus a uniform extra angle in [0, 360).
        """
        full_turns = self._rng.uniform(self.MIN_SPIN_TURNS, self.MAX_SPIN_TURNS)
        extra = self._rng.random() * 360.0
        return full_turns * 360.0 + extra
