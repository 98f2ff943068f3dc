"""Flock state: owned position and velocity arrays for a fixed population."""

import math
import numpy as np
from typing import Optional, Tuple

from config import boids as config
from .errors import ConfigurationError
from . import rules


class FlockState:
    """
    Positions and velocities of every boid, stored as contiguous (N, 3) arrays.

    The population size is fixed when the state is created. Between steps
    this object is the only source of truth; ``apply_delta`` and
    ``apply_deltas`` are the only operations that change it.
    """

    def __init__(self, positions: np.ndarray, velocities: np.ndarray):
        positions = np.ascontiguousarray(positions, dtype=np.float64)
        velocities = np.ascontiguousarray(velocities, dtype=np.float64)

        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ConfigurationError(f"positions must have shape (N, 3), got {positions.shape}")
        if velocities.shape != positions.shape:
            raise ConfigurationError(
                f"velocities shape {velocities.shape} does not match positions {positions.shape}"
            )
        if positions.shape[0] < 2:
            raise ConfigurationError(
                f"population size must be at least 2, got {positions.shape[0]}"
            )

        self.positions = positions.copy()
        self.velocities = velocities.copy()
        self.num_boids = positions.shape[0]

    @classmethod
    def init(
        cls,
        population_size: int,
        spatial_scale: float,
        seed: Optional[int] = None,
        snap_to_grid: Optional[bool] = None
    ) -> "FlockState":
        """
        Scatter a new population uniformly over [0, spatial_scale) on each axis.

        Every boid starts at rest. With ``snap_to_grid`` and a whole-number
        scale the coordinates are whole numbers; any other scale gets
        continuous coordinates.
        """
        if snap_to_grid is None:
            snap_to_grid = config.BOIDS["snap_to_grid"]

        if isinstance(population_size, bool) or not isinstance(population_size, (int, np.integer)):
            raise ConfigurationError(f"population size must be an integer, got {population_size!r}")
        if population_size < 2:
            raise ConfigurationError(f"population size must be at least 2, got {population_size}")
        if not math.isfinite(spatial_scale) or spatial_scale <= 0:
            raise ConfigurationError(f"spatial scale must be positive and finite, got {spatial_scale}")

        rng = np.random.default_rng(seed)
        size = (population_size, 3)
        if snap_to_grid and float(spatial_scale).is_integer():
            positions = rng.integers(0, int(spatial_scale), size=size).astype(np.float64)
        else:
            positions = rng.uniform(0.0, spatial_scale, size=size)
        velocities = np.zeros((population_size, 3), dtype=np.float64)

        print(f"[Flock] Initialized {population_size:,} boids (scale {spatial_scale:g}, seed {seed})")
        return cls(positions, velocities)

    def _check_index(self, i: int):
        if not 0 <= i < self.num_boids:
            raise IndexError(f"boid index {i} out of range for flock of {self.num_boids}")

    def agent_count(self) -> int:
        return self.num_boids

    def position(self, i: int) -> Tuple[float, float, float]:
        self._check_index(i)
        x, y, z = self.positions[i]
        return float(x), float(y), float(z)

    def velocity(self, i: int) -> Tuple[float, float, float]:
        self._check_index(i)
        vx, vy, vz = self.velocities[i]
        return float(vx), float(vy), float(vz)

    def apply_delta(self, i: int, dvx: float, dvy: float, dvz: float):
        """Add (dvx, dvy, dvz) to boid i's velocity, then advance its position by it."""
        self._check_index(i)
        vel = self.velocities[i]
        pos = self.positions[i]
        vel[0] += dvx
        vel[1] += dvy
        vel[2] += dvz
        pos[0] += vel[0]
        pos[1] += vel[1]
        pos[2] += vel[2]

    def apply_deltas(self, deltas: np.ndarray, parallel: bool = True):
        """Commit one velocity adjustment per boid for the whole flock."""
        if deltas.shape != self.positions.shape:
            raise ValueError(f"delta buffer shape {deltas.shape} does not match flock {self.positions.shape}")
        if deltas.dtype != np.float64:
            raise ValueError(f"delta buffer must be float64, got {deltas.dtype}")
        kernel = rules.commit if parallel else rules.commit_serial
        kernel(self.positions, self.velocities, deltas)