from .agent import Boid
from .config import FlockingConfig, RenderConfig, SimulationConfig, load_config
from .errors import ConfigError, DegenerateVectorError, EmptyNeighborSetError, FlockingError
from .integrator import limit_velocity, step_simulation, wrap_position
from .neighbors import nearest_neighbours
from .population import initialize_population
from .rules import alignment, cohesion, separation
from .vector import Vec2
from .world import World

__all__ = [
    "Boid",
    "ConfigError",
    "DegenerateVectorError",
    "EmptyNeighborSetError",
    "FlockingConfig",
    "FlockingError",
    "RenderConfig",
    "SimulationConfig",
    "Vec2",
    "World",
    "alignment",
    "cohesion",
    "initialize_population",
    "limit_velocity",
    "load_config",
    "nearest_neighbours",
    "separation",
    "step_simulation",
    "wrap_position",
]
