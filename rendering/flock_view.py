"""Point rendering for boids and homing targets."""

import numpy as np
from OpenGL.GL import *

from config import boids as config
from boids import FlockState, SimulationContext


class FlockView:
    """Reads boid positions from a flock and draws them as points."""

    def __init__(self, point_size: float = None):
        self.point_size = config.BOIDS["point_size"] if point_size is None else point_size

    def draw(self, flock: FlockState, context: SimulationContext):
        # Client-side arrays want float32
        vertices = np.ascontiguousarray(flock.positions, dtype=np.float32)

        glPointSize(self.point_size)
        glColor3f(*config.COLORS["boid"])
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, vertices)
        glDrawArrays(GL_POINTS, 0, flock.num_boids)
        glDisableClientState(GL_VERTEX_ARRAY)

        self._draw_targets(context)

    def _draw_targets(self, context: SimulationContext):
        active = context.target
        glPointSize(self.point_size * 2.5)
        glBegin(GL_POINTS)
        for target in context.targets:
            key = "target_active" if np.array_equal(target, active) else "target_idle"
            glColor3f(*config.COLORS[key])
            glVertex3f(*target)
        glEnd()
