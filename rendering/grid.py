"""Wireframe cube marking the flock's starting volume."""

from OpenGL.GL import *
from config import boids as config


class Grid:
    """Draws the [0, scale) cube boids are scattered over at start-up."""

    def __init__(self, spatial_scale: float):
        self.size = float(spatial_scale)
        self.color = config.GRID["color"]

    def draw(self):
        s = self.size

        glBegin(GL_LINES)
        glColor3f(*self.color)

        # Edges parallel to x
        for y, z in ((0, 0), (s, 0), (0, s), (s, s)):
            glVertex3f(0, y, z); glVertex3f(s, y, z)

        # Edges parallel to y
        for x, z in ((0, 0), (s, 0), (0, s), (s, s)):
            glVertex3f(x, 0, z); glVertex3f(x, s, z)

        # Edges parallel to z
        for x, y in ((0, 0), (s, 0), (0, s), (s, s)):
            glVertex3f(x, y, 0); glVertex3f(x, y, s)

        glEnd()
