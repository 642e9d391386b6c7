"""Command-line driver for the toroidal Game of Life."""

import argparse
import time
from typing import List, Optional

import numpy as np

from ..core.cell import Cell
from ..core.universe import Universe


def seed_universe(
    universe: Universe,
    population_rate: float = 0.5,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """Randomly populate every cell of a universe.

    Args:
        universe: Universe to seed
        population_rate: Chance each cell will be alive (0.0 to 1.0)
        rng: Random generator to draw from (a fresh one if omitted)
    """
    if rng is None:
        rng = np.random.default_rng()

    mask = rng.random(universe.shape) < population_rate
    for row in range(universe.height):
        for column in range(universe.width):
            universe.set_cell(row, column, Cell.ALIVE if mask[row, column] else Cell.DEAD)


def format_generation(index: int, universe: Universe) -> str:
    """Render one generation with its index header."""
    lines = [f"Generation: {index}"]
    for row in universe.grid():
        lines.append("".join(f"{Cell(int(value))} " for value in row))
    return "\n".join(lines)


class CLIGameOfLife:
    """Command-line interface for stepping a universe and printing each generation."""

    def run(
        self,
        width: int,
        height: int,
        generations: int,
        population_rate: float = 0.5,
        seed: Optional[int] = None,
        verbose: bool = False,
    ) -> Universe:
        """Seed a universe and print it for a number of generations.

        Args:
            width: Grid width
            height: Grid height
            generations: Number of generations to print
            population_rate: Initial random population rate (0.0-1.0)
            seed: Random seed for reproducibility
            verbose: Print setup and timing details

        Returns:
            The universe after the last evolve()
        """
        universe = Universe(width, height)

        if verbose:
            print(f"Initializing {width}x{height} toroidal universe")
            print(f"Generating random population (rate: {population_rate:.2%}, seed: {seed})")

        seed_universe(universe, population_rate, np.random.default_rng(seed))

        if verbose:
            print(f"Initial population: {universe.population} cells\n")

        start_time = time.time()

        for index in range(generations):
            print(format_generation(index, universe))
            print()
            universe.evolve()

        if verbose:
            duration = time.time() - start_time
            print(f"Final population: {universe.population} cells, duration: {duration:.3f}s")

        return universe


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a toroidal grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print 20 generations of a random 24x16 universe
  torus-life

  # Reproducible 10x10 run, 30% initial population
  torus-life -W 10 -H 10 --population 0.3 --seed 42
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=24, help="Grid width (default: 24)")

    parser.add_argument("-H", "--height", type=int, default=16, help="Grid height (default: 16)")

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=20,
        help="Number of generations to print (default: 20)",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument("-s", "--seed", type=int, default=None, help="Random seed for reproducibility")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print setup and timing details")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations <= 0:
        errors.append("Generations must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()
    cli.run(
        width=args.width,
        height=args.height,
        generations=args.generations,
        population_rate=args.population,
        seed=args.seed,
        verbose=args.verbose,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
