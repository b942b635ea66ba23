# -*- coding: utf-8 -*-
"""
Python implementation of a 2048 game session.

This module provides the `TwentyFortyEight` class, which owns the board and score of a game being played.
"""

from .twentyfortyeight import TwentyFortyEight

__all__ = ["TwentyFortyEight"]
