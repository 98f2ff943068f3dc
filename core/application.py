"""Viewer application: owns the window loop and polls the step engine."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import boids as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import FlockView, Grid, TextRenderer
from boids import StepEngine


class Application:
    """Draws the flock, then steps it, until the stop signal is raised."""

    def __init__(self, engine: StepEngine = None, spatial_scale: float = None):
        # Simulation
        self.engine = engine if engine is not None else StepEngine.create(spatial_scale=spatial_scale)
        scale = config.BOIDS["spatial_scale"] if spatial_scale is None else spatial_scale

        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.camera = Camera(scale)
        self.input_handler = InputHandler(self.camera)

        # Rendering components
        self.grid = Grid(scale)
        self.flock_view = FlockView()
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            config.CAMERA["fov"],
            config.WINDOW["width"] / config.WINDOW["height"],
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _handle_events(self):
        """Process pending events; any of them may raise the stop signal."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()

        self.grid.draw()
        self.flock_view.draw(self.engine.flock, self.engine.context)

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        tx, ty, tz = self.engine.context.target
        self.text_renderer.draw_text(
            f"Boids: {self.engine.flock.num_boids}  |  Step: {self.engine.steps}  |  FPS: {self.fps:.0f}",
            10, 10, screen_size
        )
        self.text_renderer.draw_text(
            f"Target: ({tx:.0f}, {ty:.0f}, {tz:.0f})  |  Q/ESC: quit",
            10, 35, screen_size
        )

        pygame.display.flip()

    def run(self):
        """Main loop: poll input, draw, then advance the flock one step."""
        print("[App] Starting main loop...")
        while self.running:
            dt = self.clock.tick() / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            if not self.running:
                break

            self.input_handler.handle_continuous_input(dt)
            self.camera.update(dt)
            self._render()
            self.engine.step()

            pygame.time.wait(config.WINDOW["frame_delay_ms"])

        pygame.quit()
        print(f"[App] Stopped after {self.engine.steps} steps")
