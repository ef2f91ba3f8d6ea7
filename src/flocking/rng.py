from __future__ import annotations

import random
from typing import Optional


class DeterministicRng:
    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)
