"""
Seed patterns for the simulation.

Every factory returns a boolean array of shape (rows, cols) that can be passed
straight to Simulation as its initializer. A pattern that does not fit the
grid leaves the grid empty.
"""

import numpy as np


def init_random(rows: int, cols: int, density: float = 0.3, seed: int | None = None) -> np.ndarray:
    """Initialize grid with random values."""
    if seed is not None:
        np.random.seed(seed)
    return np.random.random((rows, cols)) < density


def init_block(rows: int, cols: int, row: int = 1, col: int = 1) -> np.ndarray:
    """2x2 still life with its top-left cell at (row, col)."""
    grid = np.zeros((rows, cols), dtype=bool)
    if 0 <= row and row + 1 < rows and 0 <= col and col + 1 < cols:
        grid[row:row + 2, col:col + 2] = True
    return grid


def init_blinker(rows: int, cols: int, row: int | None = None, col: int | None = None) -> np.ndarray:
    """
    Horizontal period-2 oscillator: three live cells starting at (row, col).

    Centered on the grid when no position is given.
    """
    if row is None:
        row = rows // 2
    if col is None:
        col = cols // 2 - 1

    grid = np.zeros((rows, cols), dtype=bool)
    if 0 <= row < rows and 0 <= col and col + 2 < cols:
        grid[row, col:col + 3] = True
    return grid


def init_glider(rows: int, cols: int, row: int = 1, col: int = 1) -> np.ndarray:
    """Initialize grid with a glider pattern."""
    grid = np.zeros((rows, cols), dtype=bool)

    # Glider pattern
    #   #
    #     #
    # # # #
    if 0 <= row and row + 2 < rows and 0 <= col and col + 2 < cols:
        grid[row, col + 1] = True
        grid[row + 1, col + 2] = True
        grid[row + 2, col:col + 3] = True

    return grid


def init_glider_gun(rows: int, cols: int) -> np.ndarray:
    """Initialize grid with a Gosper Glider Gun."""
    grid = np.zeros((rows, cols), dtype=bool)

    if cols < 40 or rows < 20:
        print("Grid too small for glider gun, need at least 20x40 (rows x cols)")
        return grid

    oy, ox = 5, 1  # Offset

    grid[oy:oy + 2, ox:ox + 2] = True                                  # left block
    grid[oy:oy + 3, ox + 10] = True                                    # spine
    grid[oy - 1, ox + 11] = grid[oy + 3, ox + 11] = True               # tips
    grid[oy - 2, ox + 12:ox + 14] = grid[oy + 4, ox + 12:ox + 14] = True
    grid[oy + 1, ox + 14] = True
    grid[oy - 1, ox + 15] = grid[oy + 3, ox + 15] = True
    grid[oy:oy + 3, ox + 16] = True
    grid[oy + 1, ox + 17] = True
    grid[oy - 2:oy + 1, ox + 20:ox + 22] = True                        # center block
    grid[oy - 3, ox + 22] = grid[oy + 1, ox + 22] = True
    grid[oy - 4, ox + 24] = grid[oy - 3, ox + 24] = True
    grid[oy + 1, ox + 24] = grid[oy + 2, ox + 24] = True
    grid[oy - 2:oy, ox + 34:ox + 36] = True                            # right block

    return grid


def init_empty(rows: int, cols: int) -> np.ndarray:
    return np.zeros((rows, cols), dtype=bool)


PATTERNS = {
    "random": init_random,
    "empty": init_empty,
    "block": init_block,
    "blinker": init_blinker,
    "glider": init_glider,
    "gun": init_glider_gun,
}


def make_pattern(name: str, rows: int, cols: int, seed: int | None = None) -> np.ndarray:
    """Build the named pattern. Only "random" uses the seed."""
    try:
        factory = PATTERNS[name]
    except KeyError:
        raise ValueError(f"Unknown pattern {name!r}, choose from: {', '.join(PATTERNS)}") from None

    if factory is init_random:
        return init_random(rows, cols, seed=seed)
    return factory(rows, cols)
