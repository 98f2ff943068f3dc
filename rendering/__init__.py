"""Rendering components for the 3D boids viewer."""

from .flock_view import FlockView
from .grid import Grid
from .text import TextRenderer

__all__ = ["FlockView", "Grid", "TextRenderer"]
