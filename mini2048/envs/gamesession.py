"""2048 game session holding the grid, the score and the game-over flag."""

import logging

from numpy import any as np_any
from numpy import array_equal, asarray, int64, integer, issubdtype, ndarray
from numpy.random import Generator, default_rng

from mini2048.core.gameboard import GRID_SIZE, add_random_tile, create_empty_grid, move
from mini2048.core.gamemove import Direction, can_move
from mini2048.envs.config import SessionConfiguration
from mini2048.utils.share import share_message

logger = logging.getLogger(__name__)


def _freeze(grid: ndarray) -> ndarray:
    """Return a read-only int64 copy of ``grid``."""
    frozen = asarray(grid, dtype=int64).copy()
    frozen.flags.writeable = False
    return frozen


def _check_grid(grid: ndarray, score: int) -> None:
    """
    Validate a grid and a score given by the caller.

    Raises
    ------
    ValueError
        If the grid is not an integer ``GRID_SIZE`` x ``GRID_SIZE`` array, holds a value that is not 0
        or a power of two greater than or equal to 2, or if the score is not a non-negative integer.
    """
    if not issubdtype(grid.dtype, integer):
        raise ValueError(f'grid must hold integers, got dtype {grid.dtype}')
    if grid.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f'grid must have shape ({GRID_SIZE}, {GRID_SIZE}), got {grid.shape}')
    if np_any(grid < 0):
        raise ValueError('grid values must be non-negative')
    tiles = grid[grid != 0]
    if np_any((tiles < 2) | ((tiles & (tiles - 1)) != 0)):
        raise ValueError(f'tiles must be powers of two >= 2, got {sorted(set(tiles.tolist()))}')
    if isinstance(score, bool) or not isinstance(score, (int, integer)):
        raise ValueError(f'score must be an integer, got {score!r}')
    if score < 0:
        raise ValueError(f'score must be >= 0, got {score}')


class GameSession:
    """
    A single game of 2048.

    The session owns the current grid, the cumulative score and the game-over flag, and changes them
    only through ``apply_move``. Grids exposed by the session are read-only.
    """

    # ##: Current game state.
    _grid: ndarray
    _score: int
    _game_over: bool
    _moves: int

    def __init__(
        self,
        config: SessionConfiguration | None = None,
        rng: Generator | None = None,
        grid: ndarray | None = None,
        score: int = 0,
    ):
        """
        Start a new session.

        Parameters
        ----------
        config : SessionConfiguration, optional
            Session configuration (default is ``SessionConfiguration()``).
        rng : Generator, optional
            Source of randomness for tile spawning. Defaults to a generator seeded with ``config.seed``.
        grid : ndarray, optional
            Starting grid. When omitted, the session starts from an empty grid with
            ``config.initial_tiles`` random tiles.
        score : int, optional
            Starting score, only meaningful together with ``grid`` (default is 0).
        """
        self.config = config if config is not None else SessionConfiguration()
        self._rng = rng if rng is not None else default_rng(self.config.seed)

        if grid is None:
            self._start(self._initial_grid(), 0)
        else:
            grid = asarray(grid)
            _check_grid(grid, score)
            self._start(grid, score)

    @classmethod
    def from_grid(
        cls,
        grid: ndarray,
        score: int = 0,
        config: SessionConfiguration | None = None,
        rng: Generator | None = None,
    ) -> 'GameSession':
        """
        Start a session from a given grid instead of a fresh one.

        Raises
        ------
        ValueError
            If the grid or the score are not valid game values.
        """
        return cls(config=config, rng=rng, grid=grid, score=score)

    def _initial_grid(self) -> ndarray:
        """Empty grid with ``config.initial_tiles`` random tiles."""
        grid = create_empty_grid()
        for _ in range(self.config.initial_tiles):
            grid = add_random_tile(grid, rng=self._rng)
        return grid

    def _start(self, grid: ndarray, score: int) -> None:
        self._grid = _freeze(grid)
        self._score = int(score)
        self._moves = 0
        self._game_over = not can_move(self._grid)

    @property
    def grid(self) -> ndarray:
        """The current grid, read-only."""
        return self._grid

    @property
    def score(self) -> int:
        """The cumulative score."""
        return self._score

    @property
    def game_over(self) -> bool:
        """True once no direction can change the grid. Final for the session."""
        return self._game_over

    @property
    def moves(self) -> int:
        """Number of moves committed since the session started."""
        return self._moves

    def apply_move(self, direction: Direction | str) -> bool:
        """
        Apply a move to the session.

        Parameters
        ----------
        direction : Direction or str
            The direction of the move.

        Returns
        -------
        bool
            True if the move was committed, False if it was a no-op.

        Notes
        -----
        - Once the game is over, every move is a no-op.
        - A move that changes no cell is a no-op: the score is untouched and no tile is spawned.
        - Otherwise one random tile is added, the score grows by the merge score and the
          game-over flag is recomputed.
        """
        direction = Direction(direction)
        if self._game_over:
            logger.debug('Move %s ignored, the game is over.', direction.value)
            return False

        new_grid, score = move(self._grid, direction)
        if array_equal(new_grid, self._grid):
            logger.debug('Move %s ignored, the grid did not change.', direction.value)
            return False

        # ##: Commit the move with one new tile.
        self._grid = _freeze(add_random_tile(new_grid, rng=self._rng))
        self._score += score
        self._moves += 1
        self._game_over = not can_move(self._grid)
        logger.debug('Move %s committed: +%d, score %d.', direction.value, score, self._score)

        if self._game_over:
            logger.info('Game over after %d moves with score %d.', self._moves, self._score)
        return True

    def summary(self) -> str:
        """Shareable summary of the session's score."""
        return share_message(self._score, self.config.share_url)

    def render(self) -> None:
        """
        Render the game grid. This method prints the current grid to the console.
        """
        for row in self._grid.tolist():
            print(' \t'.join(map(str, row)))
