"""State of a single cell."""

from enum import IntEnum


class CellState(IntEnum):
    """Represents the current state of a single cell.

    The integer values are what the grid stores in its numpy buffer.
    """

    DEAD = 0
    ALIVE = 1
