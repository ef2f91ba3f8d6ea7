from __future__ import annotations

from typing import List, Sequence

from .agent import Boid
from .config import SimulationConfig
from .neighbors import nearest_neighbours
from .rules import alignment, cohesion, separation
from .vector import Vec2


def limit_velocity(velocity: Vec2, max_speed: float) -> Vec2:
    if velocity.length() <= max_speed:
        return velocity
    return velocity.normalized() * max_speed


def _reflect_axis(value: float, size: float) -> float:
    if value < 0:
        return size + value
    if value > size:
        return size - value
    return value


def wrap_position(position: Vec2, width: float, height: float, mode: str = "reflect") -> Vec2:
    """Bring a position that left the world back inside it.

    ``reflect`` applies ``S + c`` below zero and ``S - c`` above ``S`` per
    axis. A single excursion larger than the world can stay out of range.
    ``torus`` wraps with a modulo and always lands in ``[0, S)``.
    """
    if mode == "torus":
        return Vec2(position.x % width, position.y % height)
    return Vec2(_reflect_axis(position.x, width), _reflect_axis(position.y, height))


def _velocity_nudge(neighbours: Sequence[Boid], boid: Boid, config: SimulationConfig) -> Vec2:
    flocking = config.flocking
    return (
        cohesion(neighbours, boid, flocking)
        + separation(neighbours, boid, flocking)
        + alignment(neighbours, boid, flocking)
    )


def _advance(boid: Boid, velocity: Vec2, config: SimulationConfig) -> None:
    flocking = config.flocking
    boid.velocity = limit_velocity(velocity, flocking.max_speed)
    position = boid.position + boid.velocity
    boid.position = wrap_position(position, config.world_width, config.world_height, flocking.boundary_mode)


def step_simulation(population: List[Boid], config: SimulationConfig) -> None:
    """Advance every boid by one tick, in place.

    In ``sequential`` mode boids are updated one at a time in population
    order, so later boids see the already-moved earlier ones. In
    ``simultaneous`` mode every boid reads the population as it stood at the
    start of the tick.

    The configuration is validated before any boid is touched, so an invalid
    one raises ``ConfigError`` and leaves the population unchanged.
    """
    config.validate()
    neighbor_count = config.flocking.neighbor_count
    if config.flocking.update_mode == "simultaneous":
        frozen = [boid.copy() for boid in population]
        for boid, before in zip(population, frozen):
            neighbours = nearest_neighbours(before, frozen, neighbor_count)
            _advance(boid, before.velocity + _velocity_nudge(neighbours, before, config), config)
        return

    for boid in population:
        neighbours = nearest_neighbours(boid, population, neighbor_count)
        _advance(boid, boid.velocity + _velocity_nudge(neighbours, boid, config), config)
