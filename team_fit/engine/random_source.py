"""Injectable random source for the engine's filler values."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything with ``random.Random``'s two-argument ``randrange``."""

    def randrange(self, start: int, stop: int) -> int: ...


def default_random_source() -> RandomSource:
    return random.Random()
