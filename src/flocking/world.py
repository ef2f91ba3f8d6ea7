from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, List

from .agent import Boid
from .config import SimulationConfig
from .integrator import step_simulation
from .population import initialize_population
from .rng import DeterministicRng
from .snapshot import Snapshot, SnapshotMetadata, SnapshotWorld, TickMetrics

logger = logging.getLogger(__name__)


class World:
    def __init__(self, config: SimulationConfig):
        self._config = config.validate()
        self._rng = DeterministicRng(config.seed)
        self._agents: List[Boid] = []
        self._metrics: TickMetrics | None = None
        self._bootstrap_population()

    @property
    def agents(self) -> List[Boid]:
        return self._agents

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        self._agents.clear()
        self._rng.reset()
        self._metrics = None
        self._bootstrap_population()

    def step(self, tick: int) -> TickMetrics:
        start = perf_counter()
        step_simulation(self._agents, self._config)
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = self._collect_metrics(tick, duration_ms)
        return self._metrics

    def snapshot(self, tick: int) -> Snapshot:
        metrics = self._metrics if self._metrics is not None else self._collect_metrics(tick, 0.0)
        config = self._config
        metadata = SnapshotMetadata(
            frame_delay=config.frame_delay,
            seed=config.seed,
            config_version=config.config_version,
            update_mode=config.flocking.update_mode,
            boundary_mode=config.flocking.boundary_mode,
        )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            agents=[self._agent_snapshot(index, boid) for index, boid in enumerate(self._agents)],
            world=SnapshotWorld(width=config.world_width, height=config.world_height),
            metadata=metadata,
        )

    def _bootstrap_population(self) -> None:
        config = self._config
        self._agents.extend(
            initialize_population(config.initial_population, config.world_width, config.world_height, self._rng)
        )
        logger.debug(
            "bootstrapped %d boids in %sx%s world (seed=%s)",
            len(self._agents),
            config.world_width,
            config.world_height,
            config.seed,
        )

    def _collect_metrics(self, tick: int, duration_ms: float) -> TickMetrics:
        population = len(self._agents)
        width = self._config.world_width
        height = self._config.world_height
        speed_sum = 0.0
        max_speed = 0.0
        out_of_bounds = 0
        for boid in self._agents:
            speed = boid.speed
            speed_sum += speed
            if speed > max_speed:
                max_speed = speed
            pos = boid.position
            if not (0.0 <= pos.x <= width and 0.0 <= pos.y <= height):
                out_of_bounds += 1
        return TickMetrics(
            tick=tick,
            population=population,
            neighbor_checks=population * population,
            average_speed=speed_sum / population if population else 0.0,
            max_speed=max_speed,
            out_of_bounds=out_of_bounds,
            tick_duration_ms=duration_ms,
        )

    @staticmethod
    def _agent_snapshot(index: int, boid: Boid) -> Dict[str, Any]:
        return {
            "id": index,
            "x": boid.position.x,
            "y": boid.position.y,
            "vx": boid.velocity.x,
            "vy": boid.velocity.y,
            "heading": boid.heading,
            "speed": boid.speed,
        }
