"""Conway's Game of Life on a bounded grid."""

from .cell_state import CellState
from .grid import Grid
from .operation import Operation
from .simulation import Simulation

__all__ = ["CellState", "Grid", "Operation", "Simulation"]
