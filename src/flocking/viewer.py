from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame

from .config import SimulationConfig
from .render import draw_boids
from .world import World

logger = logging.getLogger(__name__)


def run_viewer(config: SimulationConfig, max_ticks: Optional[int] = None) -> int:
    world = World(config)
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(config.world_width), int(config.world_height)))
        pygame.display.set_caption("Flocking")
        logger.info("viewer started with %d boids", len(world.agents))
        tick = 0
        running = True
        while running and (max_ticks is None or tick < max_ticks):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    world.reset()
                    tick = 0
            draw_boids(screen, world.agents, config.render)
            pygame.display.flip()
            world.step(tick)
            tick += 1
            pygame.time.wait(int(config.frame_delay * 1000))
        logger.info("viewer stopped after %d ticks", tick)
        return tick
    finally:
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Flocking simulation viewer")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--ticks", type=int, default=None, help="Stop after this many ticks")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    run_viewer(config, max_ticks=args.ticks)


if __name__ == "__main__":
    main()
