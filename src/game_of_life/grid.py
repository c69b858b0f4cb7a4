"""
Dense storage for the cells of the simulation world.

Cells live in a flat numpy buffer in row-major order, so the cell at
(row, col) is stored at index ``row * num_cols + col``.
"""

import numpy as np

from .cell_state import CellState

ALIVE_GLYPH = "◼ "
DEAD_GLYPH = "  "


class Grid:
    """Fixed-size grid of cell states."""

    def __init__(self, rows: int, cols: int, initializer=None):
        """
        Create a rows x cols grid, all cells DEAD.

        If an initializer is given, cell i becomes ALIVE when initializer[i]
        is truthy. Indices past the end of the initializer stay DEAD and
        extra initializer entries are ignored. Arrays of any shape are read
        in row-major order.
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")

        self._num_rows = rows
        self._num_cols = cols
        self._cells = np.full(rows * cols, CellState.DEAD, dtype=np.uint8)

        if initializer is not None:
            seed = np.asarray(initializer, dtype=bool).ravel()[: self._cells.size]
            self._cells[: seed.size][seed] = CellState.ALIVE

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    def _cell_to_index(self, row: int, col: int) -> int:
        if not (0 <= row < self._num_rows and 0 <= col < self._num_cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self._num_rows}x{self._num_cols} grid"
            )
        return row * self._num_cols + col

    def get(self, row: int, col: int) -> CellState:
        """Get the state of the specified cell."""
        return CellState(self._cells[self._cell_to_index(row, col)])

    def get_display_string(self, row: int, col: int) -> str:
        """Get the state of the specified cell as "ALIVE" or "DEAD"."""
        return self.get(row, col).name

    def set(self, row: int, col: int, value) -> None:
        """Set the state of the specified cell."""
        self._cells[self._cell_to_index(row, col)] = CellState(value)

    def to_array(self) -> np.ndarray:
        """Copy of the cells as a (num_rows, num_cols) array."""
        return self._cells.reshape(self._num_rows, self._num_cols).copy()

    def assign(self, cells: np.ndarray) -> None:
        """Overwrite every cell from a (num_rows, num_cols) array."""
        cells = np.asarray(cells)
        if cells.shape != (self._num_rows, self._num_cols):
            raise ValueError(
                f"Shape mismatch: expected {(self._num_rows, self._num_cols)}, got {cells.shape}"
            )
        self._cells[:] = (cells != 0).ravel()

    def __str__(self) -> str:
        divider = "-" * (self._num_cols * 2 + 2)
        lines = [divider]
        for row in self.to_array():
            lines.append("|" + "".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row) + "|")
        lines.append(divider)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(rows={self._num_rows}, cols={self._num_cols})"
