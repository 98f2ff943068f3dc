"""
Boids Benchmark
===============

Runs the step engine headless for a fixed number of iterations and reports
the wall-clock time, without any rendering in the loop.

Usage:
    python -m tools.bench                    # 1000 iterations, configured flock
    python -m tools.bench 5000               # Custom iteration count
    python -m tools.bench 500 --serial       # Compare against the plain loop
    python -m tools.bench --population 400 --threads 8
"""

import argparse
import time
from typing import Optional

from config import boids as config
from boids import ConfigurationError, StepEngine


def millis() -> int:
    """Current wall-clock time in whole milliseconds."""
    return int(time.time() * 1000)


def iteration_count(value: str) -> int:
    """argparse type for a non-negative iteration count."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid iteration count: {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"iteration count must be non-negative, got {count}")
    return count


def run_benchmark(
    iterations: int,
    population: Optional[int] = None,
    spatial_scale: Optional[float] = None,
    seed: Optional[int] = None,
    parallel: Optional[bool] = None,
    num_threads: Optional[int] = None
) -> int:
    """Step a fresh flock ``iterations`` times and return the elapsed milliseconds."""
    engine = StepEngine.create(
        population, spatial_scale, seed,
        parallel=parallel, num_threads=num_threads
    )

    print(f"Number of iterations {iterations}")

    t1 = millis()
    engine.run(iterations)
    t2 = millis()

    elapsed = t2 - t1
    print(f"Execution Time: {elapsed} ms")
    return elapsed


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Time the boids step engine without rendering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tools.bench
  python -m tools.bench 5000 --seed 42
  python -m tools.bench 1000 --serial
        """
    )

    parser.add_argument("iterations", nargs="?", type=iteration_count,
                        default=config.BENCHMARK["iterations"],
                        help=f"Steps to run (default: {config.BENCHMARK['iterations']})")
    parser.add_argument("--population", type=int, help=f"Number of boids (default: {config.BOIDS['count']})")
    parser.add_argument("--scale", type=float, help=f"Initial spread per axis (default: {config.BOIDS['spatial_scale']:g})")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--serial", action="store_true", help="Run phase kernels without prange")
    parser.add_argument("--threads", type=int, help=f"Worker threads (default: {config.BOIDS['num_threads']})")

    args = parser.parse_args(argv)

    try:
        return run_benchmark(
            args.iterations,
            population=args.population,
            spatial_scale=args.scale,
            seed=args.seed,
            parallel=False if args.serial else None,
            num_threads=args.threads
        )
    except ConfigurationError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
