# -*- coding: utf-8 -*-
"""
Deterministic game-state core of the 2048 sliding-tile puzzle.
"""

from .core import Direction
from .envs import GameSession, SessionConfiguration

__all__ = ["Direction", "GameSession", "SessionConfiguration"]
