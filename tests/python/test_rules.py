from __future__ import annotations

import pytest
from pytest import approx

from flocking.agent import Boid
from flocking.config import FlockingConfig
from flocking.errors import EmptyNeighborSetError
from flocking.rules import alignment, cohesion, separation
from flocking.vector import ZERO, Vec2


def test_separation_is_zero_without_close_neighbours():
    boid = Boid(position=Vec2(0.0, 0.0))
    far = Boid(position=Vec2(100.0, 0.0))

    assert separation([boid, far], boid, FlockingConfig()) == ZERO


def test_separation_ignores_neighbours_at_the_threshold():
    boid = Boid(position=Vec2(0.0, 0.0))
    edge = Boid(position=Vec2(25.0, 0.0))

    assert separation([boid, edge], boid, FlockingConfig(proximity_threshold=25.0)) == ZERO


def test_separation_sums_unscaled_repulsion():
    boid = Boid(position=Vec2(0.0, 0.0))
    right = Boid(position=Vec2(10.0, 0.0))
    above = Boid(position=Vec2(0.0, -5.0))

    push = separation([boid, right, above], boid, FlockingConfig())

    assert push == Vec2(-10.0, 5.0)


def test_cohesion_is_zero_for_lone_boid():
    boid = Boid(position=Vec2(12.0, 7.0), velocity=Vec2(1.0, 1.0))

    assert cohesion([boid], boid, FlockingConfig()) == ZERO


def test_cohesion_is_damped_pull_toward_centroid():
    boid = Boid(position=Vec2(0.0, 0.0))
    other = Boid(position=Vec2(10.0, 20.0))

    pull = cohesion([boid, other], boid, FlockingConfig())

    assert pull.x == approx(0.05)
    assert pull.y == approx(0.1)


def test_alignment_is_damped_velocity_match():
    boid = Boid(position=Vec2(0.0, 0.0), velocity=Vec2(1.0, 0.0))
    other = Boid(position=Vec2(3.0, 0.0), velocity=Vec2(3.0, -2.0))

    nudge = alignment([boid, other], boid, FlockingConfig(alignment_damping=20.0))

    assert nudge.x == approx(0.05)
    assert nudge.y == approx(-0.05)


def test_rules_do_not_mutate_inputs():
    boid = Boid(position=Vec2(0.0, 0.0), velocity=Vec2(1.0, 1.0))
    other = Boid(position=Vec2(4.0, 0.0), velocity=Vec2(-1.0, 0.0))
    neighbours = [boid, other]
    config = FlockingConfig()

    for rule in (cohesion, separation, alignment):
        rule(neighbours, boid, config)

    assert neighbours == [boid, other]
    assert boid == Boid(position=Vec2(0.0, 0.0), velocity=Vec2(1.0, 1.0))
    assert other == Boid(position=Vec2(4.0, 0.0), velocity=Vec2(-1.0, 0.0))


def test_two_boids_push_apart_and_pull_together():
    left = Boid(position=Vec2(0.0, 0.0))
    right = Boid(position=Vec2(10.0, 0.0))
    config = FlockingConfig(neighbor_count=2)

    assert separation([left, right], left, config) == Vec2(-10.0, 0.0)
    assert separation([right, left], right, config) == Vec2(10.0, 0.0)
    assert cohesion([left, right], left, config).x == approx(0.05)
    assert cohesion([right, left], right, config).x == approx(-0.05)


@pytest.mark.parametrize("rule", [cohesion, alignment])
def test_mean_rules_reject_empty_neighbour_set(rule):
    boid = Boid(position=Vec2(0.0, 0.0))
    with pytest.raises(EmptyNeighborSetError):
        rule([], boid, FlockingConfig())
