"""Homing target that pulls the whole flock between two points."""

import numpy as np
from typing import Optional, Sequence

from config import boids as config
from .errors import ConfigurationError


class SimulationContext:
    """
    Step counter and sign flag shared by the whole flock.

    The sign starts positive, so the first ``period`` steps home on the first
    target; it flips after every ``period`` calls to ``advance``.
    """

    def __init__(
        self,
        period: Optional[int] = None,
        targets: Optional[Sequence[Sequence[float]]] = None,
        divisor: Optional[float] = None
    ):
        self.period = int(config.HOMING["period"] if period is None else period)
        self.divisor = float(config.HOMING["divisor"] if divisor is None else divisor)
        targets = config.HOMING["targets"] if targets is None else targets

        if self.period < 1:
            raise ConfigurationError(f"homing period must be at least 1, got {self.period}")
        if self.divisor == 0:
            raise ConfigurationError("homing divisor must be non-zero")

        self.targets = np.array(targets, dtype=np.float64)
        if self.targets.shape != (2, 3):
            raise ConfigurationError(f"expected two 3D homing targets, got shape {self.targets.shape}")

        self.reset()

    def reset(self):
        self.count = 0
        self.sign = 1

    @property
    def target(self) -> np.ndarray:
        """Point the flock is pulled toward on the current step."""
        return self.targets[0] if self.sign > 0 else self.targets[1]

    def advance(self):
        """Move on to the next step, flipping the target at period boundaries."""
        self.count += 1
        if self.count % self.period == 0:
            self.sign = -self.sign
