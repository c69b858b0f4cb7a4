"""
A pending change to the simulation grid.

Operations are produced while a generation is evaluated and consumed as soon
as the generation is applied.
"""

from typing import NamedTuple

from .cell_state import CellState


class Operation(NamedTuple):
    """New state for the cell at (row, col)."""

    row: int
    col: int
    state: CellState

    def __str__(self) -> str:
        return f"Operation[row={self.row}, col={self.col}, state={self.state.name}]"
