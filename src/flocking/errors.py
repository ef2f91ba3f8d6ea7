from __future__ import annotations


class FlockingError(Exception):
    """Base class for errors raised by the flocking core."""


class DegenerateVectorError(FlockingError, ValueError):
    """A zero-length vector was used where a direction is required."""


class EmptyNeighborSetError(FlockingError, ValueError):
    """A mean or centroid was requested over zero boids."""


class ConfigError(FlockingError, ValueError):
    """The simulation configuration is invalid."""
