"""Injectable randomness so games can be replayed from a seed."""

import random
from abc import ABC, abstractmethod


class RandomSource(ABC):

    @abstractmethod
    def next_int(self, bound: int) -> int:
        """Return an integer in ``[0, bound)``."""
        pass

    @abstractmethod
    def next_bool(self) -> bool:
        pass


class SeededRandom(RandomSource):
    """RandomSource backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        return self.rng.randrange(bound)

    def next_bool(self) -> bool:
        return self.rng.random() < 0.5
