import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from boids import FlockState, SimulationContext  # noqa: E402


@pytest.fixture
def pair_flock() -> FlockState:
    positions = np.array([[10.0, 20.0, 30.0], [30.0, 20.5, 90.0]])
    return FlockState(positions, np.zeros((2, 3)))


@pytest.fixture
def trio_flock() -> FlockState:
    positions = np.array([
        [0.0, 0.0, 0.0],
        [0.5, 5.0, -0.25],
        [4.0, 5.75, 1.0],
    ])
    velocities = np.array([
        [1.0, 0.0, -2.0],
        [3.0, 4.0, 0.0],
        [5.0, -4.0, 2.0],
    ])
    return FlockState(positions, velocities)


@pytest.fixture
def context() -> SimulationContext:
    return SimulationContext()
