from __future__ import annotations

from typing import List, Sequence

from .agent import Boid


def nearest_neighbours(target: Boid, population: Sequence[Boid], count: int) -> List[Boid]:
    """Return the ``count`` boids closest to ``target``, nearest first.

    The target itself is part of the population and is ranked like any other
    boid, so it normally sits at index 0 with distance 0. ``sorted`` is stable,
    which keeps population order among equal distances. When ``count`` exceeds
    the population size the whole population is returned.
    """
    origin = target.position
    ranked = sorted(population, key=lambda other: origin.distance(other.position))
    return ranked[:count]
