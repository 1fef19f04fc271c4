# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `GameSession` class, which holds the grid, the score and the game-over flag of one game,
and its `SessionConfiguration`.
"""

from .config import SessionConfiguration
from .gamesession import GameSession

__all__ = ["GameSession", "SessionConfiguration"]
