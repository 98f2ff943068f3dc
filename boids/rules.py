"""Flocking rules and per-step phase kernels, compiled with Numba."""

import numpy as np
from numba import njit, prange


# ============================================================================
# RULES - pure functions of a read-only snapshot, evaluated one axis at a time
# ============================================================================

@njit(cache=True)
def cohesion(positions: np.ndarray, j: int, axis: int, divisor: float) -> float:
    """Steer boid j toward the centre of mass of every other boid."""
    n = positions.shape[0]
    pc = 0.0
    for i in range(n):
        if i != j:
            pc += positions[i, axis]
    pc /= (n - 1)
    return (pc - positions[j, axis]) / divisor


@njit(cache=True)
def separation(positions: np.ndarray, j: int, axis: int, distance: float) -> float:
    """
    Push boid j away from boids that are too close on this axis.

    Proximity is tested on the single axis, not by Euclidean distance, so
    two boids far apart in space still repel along an axis where their
    coordinates nearly match.
    """
    n = positions.shape[0]
    c = 0.0
    for i in range(n):
        if i != j:
            d = positions[i, axis] - positions[j, axis]
            if abs(d) < distance:
                c -= d
    return c


@njit(cache=True)
def alignment(velocities: np.ndarray, j: int, axis: int, divisor: float) -> float:
    """Nudge boid j's velocity toward the mean velocity of every other boid."""
    n = velocities.shape[0]
    pv = 0.0
    for i in range(n):
        if i != j:
            pv += velocities[i, axis]
    pv /= (n - 1)
    return (pv - velocities[j, axis]) / divisor


@njit(cache=True)
def agent_delta(
    positions: np.ndarray,
    velocities: np.ndarray,
    j: int,
    deltas: np.ndarray,
    cohesion_divisor: float,
    separation_distance: float,
    alignment_divisor: float
):
    """Write the summed rule contributions for boid j into deltas[j]."""
    for axis in range(3):
        d = cohesion(positions, j, axis, cohesion_divisor)
        d += separation(positions, j, axis, separation_distance)
        d += alignment(velocities, j, axis, alignment_divisor)
        deltas[j, axis] = d


# ============================================================================
# PHASE KERNELS - each loop iteration writes only its own row
# ============================================================================
# Every kernel is compiled twice: a prange fan-out and a plain loop. The two
# perform the same arithmetic in the same order, so they agree bit for bit.

def _compute_deltas(
    positions: np.ndarray,
    velocities: np.ndarray,
    deltas: np.ndarray,
    cohesion_divisor: float,
    separation_distance: float,
    alignment_divisor: float
):
    for j in prange(positions.shape[0]):
        agent_delta(
            positions, velocities, j, deltas,
            cohesion_divisor, separation_distance, alignment_divisor
        )


def _add_homing(positions: np.ndarray, deltas: np.ndarray, target: np.ndarray, divisor: float):
    for j in prange(positions.shape[0]):
        for axis in range(3):
            deltas[j, axis] += (target[axis] - positions[j, axis]) / divisor


def _commit(positions: np.ndarray, velocities: np.ndarray, deltas: np.ndarray):
    for j in prange(positions.shape[0]):
        for axis in range(3):
            velocities[j, axis] += deltas[j, axis]
            positions[j, axis] += velocities[j, axis]


compute_deltas = njit(parallel=True)(_compute_deltas)
compute_deltas_serial = njit(_compute_deltas)

add_homing = njit(parallel=True)(_add_homing)
add_homing_serial = njit(_add_homing)

commit = njit(parallel=True)(_commit)
commit_serial = njit(_commit)


def warmup():
    """Pre-compile every kernel on a throwaway flock."""
    n = 4
    pos = np.random.rand(n, 3).astype(np.float64) * 10
    vel = np.zeros((n, 3), dtype=np.float64)
    deltas = np.zeros((n, 3), dtype=np.float64)
    target = np.zeros(3, dtype=np.float64)

    for compute, homing, apply in (
        (compute_deltas, add_homing, commit),
        (compute_deltas_serial, add_homing_serial, commit_serial),
    ):
        compute(pos, vel, deltas, 100.0, 1.0, 8.0)
        homing(pos, deltas, target, 200.0)
        apply(pos, vel, deltas)
