# -*- coding: utf-8 -*-
"""
Play 2048 Game in the terminal.
"""
import argparse
import logging

from mini2048.core import legal_moves
from mini2048.envs import GameSession, SessionConfiguration

# ##: Keys bound to each direction.
KEYS = {"w": "up", "a": "left", "s": "down", "d": "right"}


def step(session: GameSession, direction: str):
    """
    Applied move into the game.

    Parameters
    ----------
    session: GameSession
        The game session

    direction: str
        Direction to apply
    """
    if not session.apply_move(direction):
        print("nothing moved")
        return None

    print(f"score={session.score}")
    session.render()
    if session.game_over:
        print("game over!")
        print(session.summary())


def key_handler(session: GameSession, key: str) -> GameSession | None:
    """
    Handle one line typed by the player.

    Parameters
    ----------
    session: GameSession
        The game session

    key: str
        Line to handle

    Returns
    -------
    GameSession or None
        The session to keep playing, a new one after a restart, or None when the player asked to quit.
    """
    key = key.strip().lower()

    if key in ("q", "quit"):
        return None

    if key in ("r", "reset"):
        session = GameSession(session.config)
        session.render()
        return session

    direction = KEYS.get(key, key)
    if direction in ("up", "down", "left", "right"):
        step(session, direction)
    else:
        print(f"unknown key {key!r}, legal moves: {[move.value for move in legal_moves(session.grid)]}")
    return session


if __name__ == "__main__":
    # ## ----> Get arguments.
    parser = argparse.ArgumentParser()
    parser.add_argument("--seed", help="Seed of the tile generator", required=False, type=int, default=None)
    parser.add_argument("--verbose", help="Log every move", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    game = GameSession(SessionConfiguration(seed=args.seed))
    game.render()

    # ## ----> Blocking input loop, Ctrl-D or Ctrl-C quits.
    while game is not None:
        try:
            line = input("move (w/a/s/d, r to restart, q to quit): ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        game = key_handler(game, line)
