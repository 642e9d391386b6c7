"""Basic tests for the torus_life package."""

import torus_life
from torus_life import Cell, Universe


def test_package_exports():
    """Test the package exposes its public API."""
    assert torus_life.__version__ == "0.1.0"
    assert set(torus_life.__all__) == {"Cell", "Universe"}


def test_universe_creation():
    """Test basic universe creation and cell operations."""
    universe = Universe(10, 10)
    assert universe.width == 10
    assert universe.height == 10
    assert universe.get_cell(0, 0) is Cell.DEAD

    universe.set_cell(5, 5, Cell.ALIVE)
    assert universe.get_cell(5, 5) is Cell.ALIVE
    assert universe.population == 1


def test_block_pattern():
    """Test the block pattern is a still life."""
    universe = Universe(6, 6)
    for row, column in [(2, 2), (2, 3), (3, 2), (3, 3)]:
        universe.set_cell(row, column, Cell.ALIVE)

    before = universe.grid()
    for _ in range(3):
        universe.evolve()

    assert (universe.grid() == before).all()
    assert universe.generation == 3
