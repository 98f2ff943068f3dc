"""Boids flocking core: flock state, rules and the step engine."""

from .errors import ConfigurationError
from .state import FlockState
from .homing import SimulationContext
from .engine import StepEngine, init_flock, position, step

__all__ = [
    "ConfigurationError",
    "FlockState",
    "SimulationContext",
    "StepEngine",
    "init_flock",
    "position",
    "step",
]
