"""
Board logic for a 2048-style sliding-tile puzzle.
"""

from tileboard.config import GameConfig, GestureMode
from tileboard.core import Board, Direction, MoveResult, Tile, init_board, is_game_over, move_tiles
from tileboard.envs import TwentyFortyEight

__all__ = [
    "Board",
    "Direction",
    "GameConfig",
    "GestureMode",
    "MoveResult",
    "Tile",
    "TwentyFortyEight",
    "init_board",
    "is_game_over",
    "move_tiles",
]
