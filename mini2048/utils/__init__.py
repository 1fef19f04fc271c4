# -*- coding: utf-8 -*-
"""
This module provides helpers around a game session, such as the shareable end-of-game summary.
"""

from .share import share_message

__all__ = ["share_message"]
