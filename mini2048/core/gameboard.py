"""
Core functionality for the 2048 game, including grid construction, tile spawning and directional moves.
"""

from numpy import argwhere, array_equal, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from mini2048.core.gamemove import Direction

# ##>: The grid is always 4x4.
GRID_SIZE = 4

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator, used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def create_empty_grid() -> ndarray:
    """
    Create a grid with every cell empty.

    Returns
    -------
    ndarray
        A ``GRID_SIZE`` x ``GRID_SIZE`` array of zeros.
    """
    return zeros((GRID_SIZE, GRID_SIZE), dtype=int64)


def add_random_tile(grid: ndarray, rng: Generator | None = None) -> ndarray:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The current game grid. It is not modified.
    rng : Generator, optional
        Source of randomness. Defaults to the module-level generator.

    Returns
    -------
    ndarray
        A new grid holding the added tile, or ``grid`` itself when it has no empty cell.

    Notes
    -----
    - The cell is drawn first, uniformly among empty cells, then the value:
      2 with probability 0.9, 4 with probability 0.1.
    - A full grid consumes no draw.
    """
    available_cells = argwhere(grid == 0)
    if len(available_cells) == 0:
        return grid

    rng = rng if rng is not None else _GENERATOR
    row, col = available_cells[int(rng.integers(len(available_cells)))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4

    new_grid = grid.copy()
    new_grid[row, col] = value
    return new_grid


def transpose(grid: ndarray) -> ndarray:
    """Swap rows and columns, returning a new grid."""
    return grid.T.copy()


def reverse_rows(grid: ndarray) -> ndarray:
    """Reverse the order of the cells in every row, returning a new grid."""
    return grid[:, ::-1].copy()


def slide_and_merge(row: ndarray) -> tuple[ndarray, int]:
    """
    Slide one row toward index 0, merge adjacent equal values and compute the score.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row of the grid.

    Returns
    -------
    merged_row : ndarray
        The new row, padded with zeros on the right to its original length.
    score : int
        The sum of the values produced by merging.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Each tile merges at most once: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    non_zero = row[row != 0]
    result = zeros(len(row), dtype=row.dtype)
    score = 0

    # ##: Iterate over the compacted row and merge values.
    i, j = 0, 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result[j] = merged
            score += int(merged)
            i += 2
        else:
            result[j] = non_zero[i]
            i += 1
        j += 1

    return result, score


def move(grid: ndarray, direction: Direction | str) -> tuple[ndarray, int]:
    """
    Slide and merge every tile toward the edge named by ``direction``.

    Parameters
    ----------
    grid : ndarray
        The current game grid. It is not modified.
    direction : Direction or str
        The edge toward which tiles slide.

    Returns
    -------
    new_grid : ndarray
        The grid after the move, before any new tile is added.
    score : int
        The score obtained from all merges of the move.

    Raises
    ------
    ValueError
        If ``direction`` is not one of the four directions.

    Notes
    -----
    Every direction is reduced to a left slide: the grid is transposed and/or its rows reversed,
    each row goes through ``slide_and_merge``, then the inverse transform is applied. For ``DOWN``
    the forward transform is transpose then reverse, so the inverse is reverse then transpose.
    """
    direction = Direction(direction)
    if direction == Direction.UP:
        oriented = transpose(grid)
    elif direction == Direction.DOWN:
        oriented = reverse_rows(transpose(grid))
    elif direction == Direction.RIGHT:
        oriented = reverse_rows(grid)
    else:
        oriented = grid

    result = zeros(oriented.shape, dtype=oriented.dtype)
    score = 0
    for i, row in enumerate(oriented):
        result[i], row_score = slide_and_merge(row)
        score += row_score

    if direction == Direction.UP:
        return transpose(result), score
    if direction == Direction.DOWN:
        return transpose(reverse_rows(result)), score
    if direction == Direction.RIGHT:
        return reverse_rows(result), score
    return result, score


def legal_moves(grid: ndarray) -> list[Direction]:
    """
    Determine the directions whose move would change the grid.

    Parameters
    ----------
    grid : ndarray
        The current game grid.

    Returns
    -------
    list[Direction]
        Legal directions, in the order left, up, right, down. Empty once the game is over.
    """
    return [direction for direction in Direction if not array_equal(move(grid, direction)[0], grid)]
