"""
Game move utilities for the 2048 game, providing the move directions and a check of whether a grid
can still change.
"""

from enum import Enum

from numpy import any as np_any
from numpy import ndarray


class Direction(str, Enum):
    """
    Direction toward which every tile of the grid slides.

    LEFT: Slide toward column 0.
    UP: Slide toward row 0.
    RIGHT: Slide toward the last column.
    DOWN: Slide toward the last row.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


def can_move(grid: ndarray) -> bool:
    """
    Check if any direction can still change the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid to check.

    Returns
    -------
    bool
        False only when the grid is full and no two adjacent cells share a value.

    Notes
    -----
    - The test is direction-agnostic: it looks at emptiness and at the right and lower
      neighbours of every cell, without simulating any move.
    """
    if np_any(grid == 0):
        return True

    # ##>: Equal right neighbour or equal lower neighbour.
    return bool(np_any(grid[:, :-1] == grid[:, 1:]) or np_any(grid[:-1] == grid[1:]))
