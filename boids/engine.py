"""Step engine - two-phase, double-buffered flock update with Numba kernels."""

import numba
import numpy as np
from typing import Callable, Optional

from config import boids as config
from .errors import ConfigurationError
from .homing import SimulationContext
from .state import FlockState
from . import rules


_kernels_warm = False


def init_flock(population_size: int, spatial_scale: float, seed: Optional[int] = None) -> FlockState:
    """Create a flock of ``population_size`` resting boids scattered over [0, spatial_scale)."""
    return FlockState.init(population_size, spatial_scale, seed)


def position(flock: FlockState, index: int):
    return flock.position(index)


def check_delta_buffer(flock: FlockState, deltas: np.ndarray):
    """Kernels neither bounds-check nor convert, so the buffer must match the flock exactly."""
    if deltas.shape != flock.positions.shape:
        raise ValueError(f"delta buffer shape {deltas.shape} does not match flock {flock.positions.shape}")
    if deltas.dtype != np.float64:
        raise ValueError(f"delta buffer must be float64, got {deltas.dtype}")


def step(
    flock: FlockState,
    context: SimulationContext,
    deltas: Optional[np.ndarray] = None,
    parallel: bool = True
) -> FlockState:
    """
    Advance the flock by exactly one tick.

    1. Rule phase: every boid's cohesion + separation + alignment is written
       into ``deltas`` from the committed state.
    2. The homing pull toward the context's current target is added to every
       row, and the context advances once.
    3. Commit phase: each boid's velocity takes its delta and its position
       takes the new velocity.

    A kernel returns only after all of its iterations have finished, which is
    the barrier between phases 2 and 3.
    """
    if deltas is None:
        deltas = np.empty_like(flock.positions)
    else:
        check_delta_buffer(flock, deltas)

    if parallel:
        compute, homing = rules.compute_deltas, rules.add_homing
    else:
        compute, homing = rules.compute_deltas_serial, rules.add_homing_serial

    compute(
        flock.positions,
        flock.velocities,
        deltas,
        float(config.RULES["cohesion_divisor"]),
        float(config.RULES["separation_distance"]),
        float(config.RULES["alignment_divisor"])
    )
    homing(flock.positions, deltas, context.target, context.divisor)
    context.advance()

    flock.apply_deltas(deltas, parallel=parallel)
    return flock


class StepEngine:
    """Drives a flock one step at a time, reusing a single delta buffer."""

    def __init__(
        self,
        flock: FlockState,
        context: Optional[SimulationContext] = None,
        parallel: Optional[bool] = None,
        num_threads: Optional[int] = None
    ):
        self.flock = flock
        self.context = context if context is not None else SimulationContext()
        self.parallel = config.BOIDS["parallel"] if parallel is None else parallel
        self.steps = 0

        # Delta buffer, recomputed from scratch every step
        self._deltas = np.zeros_like(flock.positions)

        if num_threads is None:
            num_threads = config.BOIDS["num_threads"]
        if self.parallel and num_threads:
            numba.set_num_threads(max(1, min(num_threads, numba.config.NUMBA_NUM_THREADS)))

        self._warmup_numba()

        if self.parallel:
            print(f"[Engine] Using parallel kernels ({numba.get_num_threads()} threads)")
        else:
            print("[Engine] Using serial kernels")

    @classmethod
    def create(
        cls,
        population_size: Optional[int] = None,
        spatial_scale: Optional[float] = None,
        seed: Optional[int] = None,
        **kwargs
    ) -> "StepEngine":
        """Build an engine around a fresh flock, defaulting to the configured sizes."""
        flock = init_flock(
            config.BOIDS["count"] if population_size is None else population_size,
            config.BOIDS["spatial_scale"] if spatial_scale is None else spatial_scale,
            config.BOIDS["seed"] if seed is None else seed
        )
        return cls(flock, **kwargs)

    def _warmup_numba(self):
        """Pre-compile Numba kernels once per process."""
        global _kernels_warm
        if not _kernels_warm:
            rules.warmup()
            _kernels_warm = True

    @property
    def deltas(self) -> np.ndarray:
        """Velocity adjustments committed by the most recent step."""
        return self._deltas

    def step(self) -> FlockState:
        step(self.flock, self.context, self._deltas, self.parallel)
        self.steps += 1
        return self.flock

    def run(self, iterations: int, should_stop: Optional[Callable[[], bool]] = None) -> int:
        """
        Run up to ``iterations`` steps.

        ``should_stop`` is polled before every step; once it returns True no
        further steps are taken. Returns the number of steps performed.
        """
        if iterations < 0:
            raise ConfigurationError(f"iteration count must be non-negative, got {iterations}")

        done = 0
        while done < iterations:
            if should_stop is not None and should_stop():
                break
            self.step()
            done += 1
        return done

    def position(self, index: int):
        return self.flock.position(index)
