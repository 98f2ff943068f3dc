"""
3D Boids Simulation
===================

Flocking with cohesion, separation, alignment and a homing pull that swaps
between two targets, viewed through a 3D orbital camera.

Usage:
    python main.py                        # Configured defaults
    python main.py --population 200       # Bigger flock
    python main.py --seed 42 --serial     # Reproducible, single-threaded

Controls:
    - W/S: Rotate camera up/down
    - A/D: Rotate camera left/right
    - Z/X: Zoom in/out
    - Mouse drag: Rotate camera
    - Mouse wheel: Zoom
    - Q/ESC: Quit
"""

import argparse

from config import boids as config
from boids import ConfigurationError, StepEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive 3D boids viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--population", type=int, default=config.BOIDS["count"],
                        help=f"Number of boids (default: {config.BOIDS['count']})")
    parser.add_argument("--scale", type=float, default=config.BOIDS["spatial_scale"],
                        help=f"Initial spread per axis (default: {config.BOIDS['spatial_scale']:g})")
    parser.add_argument("--seed", type=int, default=config.BOIDS["seed"], help="Random seed")
    parser.add_argument("--serial", action="store_true", help="Run phase kernels without prange")
    return parser


def build_engine(parser: argparse.ArgumentParser, args: argparse.Namespace) -> StepEngine:
    """Engine for the parsed arguments; --serial overrides the configured kernel mode."""
    try:
        return StepEngine.create(
            args.population, args.scale, args.seed,
            parallel=False if args.serial else None
        )
    except ConfigurationError as e:
        parser.error(str(e))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    engine = build_engine(parser, args)

    # Imported late so the window stack is only loaded for the viewer
    from core import Application

    app = Application(engine, spatial_scale=args.scale)
    app.run()


if __name__ == "__main__":
    main()
