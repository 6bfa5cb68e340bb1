"""Random integers that try to avoid a set of excluded values."""

from __future__ import annotations

import random
from collections.abc import Collection

_default_rng = random.Random()


def get_random(low: int, high: int, exclude: Collection[int] = (),
               rng: random.Random | None = None) -> int:
    """Return a random integer in [low, high], stepping past excluded values.

    When the exclusions leave too little room the first draw is returned as is.
    """
    rng = rng or _default_rng
    number = rng.randint(low, high)

    if high - low <= len(exclude):
        return number

    while number in exclude:
        number = (number + 1) % high + low

    return number