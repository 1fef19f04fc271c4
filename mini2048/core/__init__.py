# -*- coding: utf-8 -*-
"""
This module provides the pure grid engine of the 2048 game.

It includes functions for creating grids, spawning random tiles, transposing and reversing grids,
sliding and merging rows, applying directional moves, listing the moves that change a grid and
checking whether a grid can still change.
"""

from .gameboard import (
    GRID_SIZE,
    TILE_SPAWN_PROBS,
    add_random_tile,
    create_empty_grid,
    legal_moves,
    move,
    reverse_rows,
    slide_and_merge,
    transpose,
)
from .gamemove import Direction, can_move

__all__ = [
    "GRID_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "create_empty_grid",
    "add_random_tile",
    "transpose",
    "reverse_rows",
    "slide_and_merge",
    "move",
    "can_move",
    "legal_moves",
]
