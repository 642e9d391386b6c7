"""Fixed-size toroidal universe for Conway's Game of Life."""

from numbers import Integral
from typing import Tuple, Union

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell


class Universe:
    """A fixed-dimension toroidal grid evolving under the B3/S23 rule.

    Cells are stored in a numpy array of shape (height, width) indexed
    [row, column]. Every cell has the 8 neighbors reached by stepping one
    row and/or one column in either direction, wrapping around the edges.

    When a dimension is 1, the wrapped offsets land back on the same row or
    column, so cells on that axis count themselves as neighbors: a 1xN row
    sees itself twice and a 1x1 universe counts its own cell 8 times. That is
    the expected result of the modular formula and is not special-cased.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a universe with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
                raise ValueError(f"Universe {name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        self._generation = 0

        # Double buffer: evolve() writes into _next and then swaps
        self._cells = np.zeros((self._height, self._width), dtype=np.int8)
        self._next = np.zeros((self._height, self._width), dtype=np.int8)

        torch.set_num_threads(1)

        self._torch_input = torch.zeros(1, 1, self._height, self._width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (height, width)."""
        return (self._height, self._width)

    @property
    def generation(self) -> int:
        """Number of generations evolved so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def grid(self) -> np.ndarray:
        """Get a read-only snapshot of the cell states.

        Returns:
            Copy of the (height, width) array with values Cell.DEAD/Cell.ALIVE.
            The copy is not writeable and does not share memory with the
            universe.
        """
        snapshot = self._cells.copy()
        snapshot.flags.writeable = False
        return snapshot

    def _check_bounds(self, row: int, column: int) -> None:
        for value in (row, column):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise IndexError(f"Cell index must be an integer, got {value!r}")
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"Cell ({row}, {column}) out of bounds for {self._height}x{self._width} universe"
            )

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If (row, column) is outside the grid
        """
        self._check_bounds(row, column)
        return Cell(int(self._cells[row, column]))

    def set_cell(self, row: int, column: int, state: Union[Cell, bool, int]) -> None:
        """Set the state of a cell.

        Args:
            row: Row index, 0 <= row < height
            column: Column index, 0 <= column < width
            state: New state (Cell, bool or 0/1)

        Raises:
            IndexError: If (row, column) is outside the grid or not a pair
                of integers; negative indices are rejected rather than wrapped
            ValueError: If state is not a valid cell state
        """
        self._check_bounds(row, column)
        self._cells[row, column] = Cell.from_value(state)

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of a cell with wraparound.

        Offsets height-1 and width-1 stand in for -1 so every coordinate
        stays non-negative before the modulo.

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If (row, column) is outside the grid
        """
        self._check_bounds(row, column)

        count = 0
        for row_index, delta_row in enumerate((self._height - 1, 0, 1)):
            for col_index, delta_col in enumerate((self._width - 1, 0, 1)):
                # Skip the centre by position; on 1-wide axes the other offsets are 0 too
                if (row_index, col_index) == (1, 1):
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                count += int(self._cells[neighbor_row, neighbor_col])

        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count living neighbors for every cell using a PyTorch convolution.

        Circular padding reproduces the modular offsets of
        live_neighbor_count, including repeated positions on grids with a
        dimension of 1 or 2.

        Returns:
            (height, width) int8 array of neighbor counts
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.int8)

    def evolve(self) -> None:
        """Advance the universe by one generation.

        All neighbor counts come from the current generation; the next one is
        built in the spare buffer and only then swapped in.
        """
        counts = self.neighbor_counts()
        alive = self._cells == Cell.ALIVE

        survive = alive & ((counts == 2) | (counts == 3))
        birth = ~alive & (counts == 3)

        self._next.fill(Cell.DEAD)
        self._next[survive | birth] = Cell.ALIVE

        self._cells, self._next = self._next, self._cells
        self._generation += 1

    def __eq__(self, other: object) -> bool:
        """Check if two universes hold the same cells."""
        if not isinstance(other, Universe):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """Rows of '*' (alive) and '-' (dead) glyphs, one row per line."""
        return "\n".join(" ".join(str(Cell(int(value))) for value in row) for row in self._cells)
