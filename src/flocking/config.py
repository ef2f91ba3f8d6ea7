from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigError

UPDATE_MODES = ("sequential", "simultaneous")
BOUNDARY_MODES = ("reflect", "torus")


@dataclass
class FlockingConfig:
    neighbor_count: int = 7
    proximity_threshold: float = 25.0
    max_speed: float = 5.0
    # Damping divisors applied to the cohesion and alignment nudges each tick.
    cohesion_damping: float = 100.0
    alignment_damping: float = 20.0
    update_mode: str = "sequential"
    boundary_mode: str = "reflect"


@dataclass
class RenderConfig:
    boid_size: float = 5.0
    boid_color: str = "#7473BD"
    background_color: str = "#FFFFFF"


@dataclass
class SimulationConfig:
    world_width: float = 1280.0
    world_height: float = 760.0
    initial_population: int = 50
    frame_delay: float = 0.005
    seed: int = 42
    config_version: str = "v1"
    flocking: FlockingConfig = field(default_factory=FlockingConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text())
        return load_config(data or {})

    def validate(self) -> "SimulationConfig":
        flocking = self.flocking
        if flocking.neighbor_count < 1:
            raise ConfigError(f"neighbor_count must be at least 1, got {flocking.neighbor_count}")
        if flocking.max_speed <= 0:
            raise ConfigError(f"max_speed must be positive, got {flocking.max_speed}")
        if flocking.cohesion_damping <= 0 or flocking.alignment_damping <= 0:
            raise ConfigError("cohesion_damping and alignment_damping must be positive")
        if flocking.proximity_threshold < 0:
            raise ConfigError(f"proximity_threshold must not be negative, got {flocking.proximity_threshold}")
        if flocking.update_mode not in UPDATE_MODES:
            raise ConfigError(f"Unknown update mode: {flocking.update_mode}")
        if flocking.boundary_mode not in BOUNDARY_MODES:
            raise ConfigError(f"Unknown boundary mode: {flocking.boundary_mode}")
        if self.world_width <= 0 or self.world_height <= 0:
            raise ConfigError(f"world size must be positive, got {self.world_width}x{self.world_height}")
        if self.initial_population < 0:
            raise ConfigError(f"initial_population must not be negative, got {self.initial_population}")
        if self.frame_delay < 0:
            raise ConfigError(f"frame_delay must not be negative, got {self.frame_delay}")
        return self


@dataclass
class AppConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    broadcast_interval: int = 1


def load_config(raw: dict) -> SimulationConfig:
    try:
        flocking = FlockingConfig(**raw.get("flocking", {}))
        render = RenderConfig(**raw.get("render", {}))
        sim_values = {k: v for k, v in raw.items() if k not in {"flocking", "render"}}
        config = SimulationConfig(flocking=flocking, render=render, **sim_values)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc
    return config.validate()
