"""
Core game logic for a 2048-like board.

It includes the tile and board model, sliding and merging tiles, spawning random tiles, checking legal
directions and detecting the end of the game.
"""

from .gameboard import (
    GAME_OVER_MESSAGE,
    TILE_SPAWN_PROBS,
    add_random_tile,
    board_changed,
    has_move_left,
    init_board,
    is_game_over,
    log_alert,
    merge_line,
    move_tiles,
    slide_tiles,
)
from .gamemove import illegal_actions, legal_actions, legal_actions_mask
from .tile import BOARD_CELLS, GRID_SIZE, KEY_BINDINGS, Board, Direction, MoveResult, Tile

__all__ = [
    "BOARD_CELLS",
    "GRID_SIZE",
    "KEY_BINDINGS",
    "GAME_OVER_MESSAGE",
    "TILE_SPAWN_PROBS",
    "Board",
    "Direction",
    "MoveResult",
    "Tile",
    "add_random_tile",
    "board_changed",
    "has_move_left",
    "init_board",
    "is_game_over",
    "log_alert",
    "merge_line",
    "move_tiles",
    "slide_tiles",
    "legal_actions",
    "illegal_actions",
    "legal_actions_mask",
]
