from __future__ import annotations

from dataclasses import dataclass

from .vector import ZERO, Vec2


@dataclass(slots=True)
class Boid:
    position: Vec2
    velocity: Vec2 = ZERO

    @property
    def heading(self) -> float:
        return self.velocity.heading()

    @property
    def speed(self) -> float:
        return self.velocity.length()

    def copy(self) -> "Boid":
        return Boid(position=self.position, velocity=self.velocity)
