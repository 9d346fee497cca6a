"""Uniform random sources for the early expiration test.

The guard draws one sample per cache hit. Samples must lie in ``(0, 1]`` so
that ``ln(u)`` is defined and never positive.
"""

import random
from collections.abc import Callable

Sampler = Callable[[], float]


class RandomSampler:
    """Uniform sampler over ``(0, 1]`` backed by ``random.Random``."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def __call__(self) -> float:
        # random() covers [0, 1); flip it so 0 is excluded and 1 included
        return 1.0 - self._random.random()


class FixedSampler:
    """Sampler that always returns the same value."""

    def __init__(self, value: float) -> None:
        check_sample(value)
        self._value = value

    def __call__(self) -> float:
        return self._value


def check_sample(u: float) -> float:
    """Return ``u`` if it lies in ``(0, 1]``, else raise ValueError."""
    if not 0 < u <= 1:
        raise ValueError(f"Sample must be in (0, 1]: {u!r}")
    return u
