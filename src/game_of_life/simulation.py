"""
Conway's Game of Life - simulation engine

Rules:
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)

Cells outside the grid do not exist: there is no wrap-around, so a corner
cell has three neighbors and an edge cell five.
"""

import numpy as np

from .cell_state import CellState
from .grid import Grid
from .operation import Operation

# Moore neighborhood, row-major, center excluded
NEIGHBOR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)]


class Simulation:
    """Owns the grid and the generation counter."""

    def __init__(self, rows: int, cols: int, initializer=None):
        self._grid = Grid(rows, cols, initializer)
        self._generation = 0

    @property
    def num_rows(self) -> int:
        return self._grid.num_rows

    @property
    def num_cols(self) -> int:
        return self._grid.num_cols

    def get_generation(self) -> int:
        """Current generation count, starting at 0."""
        return self._generation

    def is_cell_alive(self, row: int, col: int) -> bool:
        return self._grid.get(row, col) == CellState.ALIVE

    def is_any_cell_alive(self) -> bool:
        for row in range(self._grid.num_rows):
            for col in range(self._grid.num_cols):
                if self.is_cell_alive(row, col):
                    return True
        return False

    def count_live_cells(self) -> int:
        return int(self._grid.to_array().sum())

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Edit a single cell in place. The generation count is unchanged."""
        self._grid.set(row, col, CellState.ALIVE if alive else CellState.DEAD)

    def get_neighbor_count(self, row: int, col: int) -> int:
        """
        Count live neighbors for the cell at (row, col).

        Each candidate neighbor is checked against the grid bounds before it
        is read, so the result is at most 3 for a corner, 5 for an edge and
        8 for an interior cell.
        """
        # validates (row, col) even when every neighbor is out of bounds
        self._grid.get(row, col)

        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self._grid.num_rows and 0 <= c < self._grid.num_cols:
                if self.is_cell_alive(r, c):
                    count += 1
        return count

    def _apply_rules(self, row: int, col: int) -> list[Operation]:
        """Operations implied by the rules for a single cell."""
        neighbors = self.get_neighbor_count(row, col)

        if self.is_cell_alive(row, col):
            if neighbors < 2:
                # underpopulation
                return [Operation(row, col, CellState.DEAD)]
            if neighbors > 3:
                # overpopulation
                return [Operation(row, col, CellState.DEAD)]
            # survival
            return []

        if neighbors == 3:
            # reproduction
            return [Operation(row, col, CellState.ALIVE)]
        return []

    def evaluate(self) -> list[Operation]:
        """
        Compute every state change for the next generation.

        Reads the current grid only; nothing is written until the returned
        operations are applied.
        """
        operations = []
        for row in range(self._grid.num_rows):
            for col in range(self._grid.num_cols):
                operations.extend(self._apply_rules(row, col))
        return operations

    def step(self) -> list[Operation]:
        """
        Advance the simulation by one generation.

        All operations are computed from the pre-step grid before any of them
        is applied. Returns the operations that were applied.
        """
        operations = self.evaluate()

        for operation in operations:
            self._grid.set(operation.row, operation.col, operation.state)

        self._generation += 1
        return operations

    def step_numpy(self) -> None:
        """
        Advance the simulation by one generation using NumPy operations.

        Vectorized double buffer: neighbors are summed over a zero-padded copy
        of the grid and the next generation replaces the current one in a
        single assignment. Produces the same result as step().
        """
        grid = self._grid.to_array()
        rows, cols = grid.shape
        padded = np.pad(grid, 1)

        neighbors = np.zeros_like(grid)
        for dr, dc in NEIGHBOR_OFFSETS:
            neighbors += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]

        birth = (grid == 0) & (neighbors == 3)
        survive = (grid == 1) & ((neighbors == 2) | (neighbors == 3))

        self._grid.assign((birth | survive).astype(np.uint8))
        self._generation += 1

    def to_array(self) -> np.ndarray:
        """Snapshot of the current grid as a (rows, cols) uint8 array."""
        return self._grid.to_array()

    def render(self) -> str:
        return str(self._grid)

    def status_report(self) -> str:
        """Generation count, grid rendering and whether any cell is alive."""
        any_alive = "true" if self.is_any_cell_alive() else "false"
        return (
            f"Generation: {self.get_generation()}\n"
            f"{self.render()}\n"
            f"Any cell alive? {any_alive}\n"
        )

    def print_status(self) -> None:
        """Print out the current simulation state."""
        print(self.status_report())

    def __repr__(self) -> str:
        return (
            f"Simulation(rows={self.num_rows}, cols={self.num_cols}, "
            f"generation={self._generation})"
        )
