# -*- coding: utf-8 -*-
"""
Session specific configuration.
"""
from dataclasses import dataclass


@dataclass
class SessionConfiguration:
    """
    Configuration of a game session.
    """

    seed: int | None = None  # Seed of the session's generator, random when None
    initial_tiles: int = 2  # Tiles placed on the empty grid at start
    share_url: str | None = None  # Link appended to the end-of-game summary
