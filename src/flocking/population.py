from __future__ import annotations

from typing import List, Optional

from .agent import Boid
from .rng import DeterministicRng
from .vector import Vec2

# Initial velocity components are integers in [-MAX_INITIAL_SPEED, MAX_INITIAL_SPEED).
MAX_INITIAL_SPEED = 5


def random_boid(world_width: float, world_height: float, rng: DeterministicRng) -> Boid:
    position = Vec2(
        float(rng.next_int(max(1, int(world_width)))),
        float(rng.next_int(max(1, int(world_height)))),
    )
    velocity = Vec2(
        float(rng.next_int(2 * MAX_INITIAL_SPEED) - MAX_INITIAL_SPEED),
        float(rng.next_int(2 * MAX_INITIAL_SPEED) - MAX_INITIAL_SPEED),
    )
    return Boid(position=position, velocity=velocity)


def initialize_population(
    count: int,
    world_width: float,
    world_height: float,
    rng: Optional[DeterministicRng] = None,
) -> List[Boid]:
    if rng is None:
        rng = DeterministicRng()
    return [random_boid(world_width, world_height, rng) for _ in range(count)]
