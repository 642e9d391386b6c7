#!/usr/bin/env python3
"""
Example usage of the torus_life package.
"""

import numpy as np

from torus_life import Universe
from torus_life.frontends.cli import format_generation, seed_universe

WIDTH = 24
HEIGHT = 16


def main():
    """Seed a universe and print 20 generations."""
    universe = Universe(WIDTH, HEIGHT)
    seed_universe(universe, 0.5, np.random.default_rng())

    for index in range(20):
        print(format_generation(index, universe))
        print()
        universe.evolve()

    print(f"Final population: {universe.population}")


if __name__ == "__main__":
    main()
