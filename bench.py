#!/usr/bin/env python3
"""
Convenience entry point for the headless benchmark.

Usage:
    python bench.py                 # 1000 iterations
    python bench.py 5000            # Custom iteration count
    python bench.py 1000 --serial   # Without parallel kernels
"""

from tools.bench import main

if __name__ == "__main__":
    main()
