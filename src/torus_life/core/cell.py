"""Cell state for the Game of Life."""

from enum import IntEnum
from numbers import Integral
from typing import Union

import numpy as np


class Cell(IntEnum):
    """Binary state of a single grid position.

    Values are plain ints so cells can be stored in and compared against
    numpy arrays directly.
    """

    DEAD = 0
    ALIVE = 1

    def is_alive(self) -> bool:
        return self is Cell.ALIVE

    @classmethod
    def from_value(cls, value: Union["Cell", bool, int]) -> "Cell":
        """Coerce a Cell, bool (Python or numpy) or 0/1 int into a Cell.

        Args:
            value: State to convert

        Returns:
            The matching Cell

        Raises:
            ValueError: If value is not a valid cell state
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (np.bool_, Integral)) and int(value) in (0, 1):
            return cls(int(value))
        raise ValueError(f"Invalid cell state: {value!r}")

    def __str__(self) -> str:
        """Console glyph: '*' for alive, '-' for dead."""
        return "*" if self is Cell.ALIVE else "-"
