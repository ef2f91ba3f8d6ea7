from __future__ import annotations

import math
from typing import Iterable, List, Tuple

import pygame
from pygame.math import Vector2

from .agent import Boid
from .config import RenderConfig


def triangle_points(boid: Boid, size: float) -> List[Tuple[float, float]]:
    """Triangle with its tip on the boid, trailing ``4 * size`` behind its heading."""
    heading = boid.heading
    tip = Vector2(boid.position.x, boid.position.y)
    forward = Vector2(math.cos(heading), math.sin(heading))
    side = Vector2(-forward.y, forward.x) * size
    base = tip - forward * (size * 4)
    return [(tip.x, tip.y), ((base - side).x, (base - side).y), ((base + side).x, (base + side).y)]


def draw_boids(surface: pygame.Surface, boids: Iterable[Boid], render: RenderConfig) -> None:
    surface.fill(pygame.Color(render.background_color))
    color = pygame.Color(render.boid_color)
    for boid in boids:
        pygame.draw.polygon(surface, color, triangle_points(boid, render.boid_size))
