"""The three flocking rules.

Each rule reads a neighbour set (which includes the boid itself) and returns
a nudge to add to the boid's velocity. None of them mutate their inputs.
"""
from __future__ import annotations

from typing import Sequence

from .agent import Boid
from .config import FlockingConfig
from .vector import ZERO, Vec2


def cohesion(neighbours: Sequence[Boid], boid: Boid, config: FlockingConfig) -> Vec2:
    """Steer toward the centroid of the neighbour set."""
    centroid = Vec2.mean(other.position for other in neighbours)
    return (centroid - boid.position) / config.cohesion_damping


def separation(neighbours: Sequence[Boid], boid: Boid, config: FlockingConfig) -> Vec2:
    """Push away from every neighbour closer than the proximity threshold.

    Contributions are summed without normalization, so crowding pushes harder.
    """
    push = ZERO
    for other in neighbours:
        if other.position.distance(boid.position) < config.proximity_threshold:
            push = push + (boid.position - other.position)
    return push


def alignment(neighbours: Sequence[Boid], boid: Boid, config: FlockingConfig) -> Vec2:
    """Match the mean velocity of the neighbour set."""
    mean_velocity = Vec2.mean(other.velocity for other in neighbours)
    return (mean_velocity - boid.velocity) / config.alignment_damping
