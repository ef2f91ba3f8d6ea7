from __future__ import annotations

import argparse
import csv
import json
import logging
import math
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .config import SimulationConfig
from .world import World

logger = logging.getLogger(__name__)

_BASIC_HEADER = ["tick", "population", "avg_speed", "tick_ms"]

_DETAILED_HEADER = [
    "tick",
    "population",
    "neighbor_checks",
    "avg_speed",
    "max_speed",
    "out_of_bounds",
    "tick_ms",
]


def _format_basic_row(metrics: object, tick_ms: float) -> list[object]:
    return [metrics.tick, metrics.population, f"{metrics.average_speed:.4f}", f"{tick_ms:.3f}"]


def _format_detailed_row(metrics: object, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        metrics.neighbor_checks,
        f"{metrics.average_speed:.4f}",
        f"{metrics.max_speed:.4f}",
        metrics.out_of_bounds,
        f"{tick_ms:.3f}",
    ]


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(sum(values) / len(values)),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p99": _percentile(sorted_values, 0.99),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    summary_path: Optional[Path] = None,
    config: Optional[SimulationConfig] = None,
    population: Optional[int] = None,
    log_format: str = "detailed",
) -> World:
    config = config if config is not None else SimulationConfig()
    if seed is not None:
        config = replace(config, seed=seed)
    if population is not None:
        config = replace(config, initial_population=population)

    log_mode = log_format.lower().strip()
    if log_mode not in {"basic", "detailed"}:
        raise ValueError(f"Unknown log format: {log_format}")
    detailed = log_mode == "detailed"

    world = World(config)
    logger.info("running %d steps with %d boids (seed=%s)", steps, len(world.agents), config.seed)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_DETAILED_HEADER if detailed else _BASIC_HEADER)

    tick_ms_series: list[float] = []
    speed_series: list[float] = []
    out_of_bounds_total = 0

    try:
        for tick in range(steps):
            metrics = world.step(tick)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            tick_ms_series.append(tick_ms)
            speed_series.append(metrics.average_speed)
            out_of_bounds_total += metrics.out_of_bounds
            if writer:
                if detailed:
                    writer.writerow(_format_detailed_row(metrics, tick_ms))
                else:
                    writer.writerow(_format_basic_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        summary = {
            "steps": steps,
            "seed": config.seed,
            "population": len(world.agents),
            "deterministic_log": deterministic_log,
            "log_format": log_mode,
            "update_mode": config.flocking.update_mode,
            "boundary_mode": config.flocking.boundary_mode,
            "tick_ms": _summary_stats(tick_ms_series),
            "average_speed": _summary_stats(speed_series),
            "out_of_bounds_total": out_of_bounds_total,
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
        logger.info("wrote summary to %s", summary_path)
    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless flocking simulation")
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--population", type=int, default=None, help="Number of boids (overrides config)")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--log-format",
        default="detailed",
        help="CSV format to write when --log is provided: 'basic' or 'detailed'.",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = SimulationConfig.from_yaml(args.config) if args.config else None
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        summary_path=args.summary,
        config=config,
        population=args.population,
        log_format=args.log_format,
    )


if __name__ == "__main__":
    main()
