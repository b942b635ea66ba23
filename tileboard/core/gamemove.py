"""
Game move utilities for the 2048 game, providing functions for determining legal and illegal directions.
"""

from tileboard.core.tile import Board, Direction


def legal_actions_mask(board: Board) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : Board
        The current board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    A direction is legal when a tile has an empty cell in front of it, or when two equal tiles touch along
    the direction's axis. Merges work both ways on an axis, so each axis is checked for pairs only once.
    """
    grid = board.values
    filled = grid != 0

    # ##>: Neighbouring cells along rows (west/east) and columns (north/south).
    west, east = grid[:, :-1], grid[:, 1:]
    north, south = grid[:-1, :], grid[1:, :]

    # ##>: Equal non-empty neighbours can merge in either direction of their axis.
    row_pair = bool(((west == east) & filled[:, :-1]).any())
    column_pair = bool(((north == south) & filled[:-1, :]).any())

    # ##>: A tile with an empty cell ahead can slide.
    return (
        row_pair or bool(((west == 0) & (east != 0)).any()),
        column_pair or bool(((north == 0) & (south != 0)).any()),
        row_pair or bool(((east == 0) & (west != 0)).any()),
        column_pair or bool(((south == 0) & (north != 0)).any()),
    )


def illegal_actions(board: Board) -> list[Direction]:
    """
    Directions that would leave the board unchanged.

    Parameters
    ----------
    board : Board
        The current board.

    Returns
    -------
    list[Direction]
        Illegal directions, in the order left, up, right, down.
    """
    mask = legal_actions_mask(board)
    return [direction for direction, legal in zip(Direction, mask) if not legal]


def legal_actions(board: Board) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    board : Board
        The current board.

    Returns
    -------
    list[Direction]
        Legal directions, in the order left, up, right, down.
    """
    mask = legal_actions_mask(board)
    return [direction for direction, legal in zip(Direction, mask) if legal]
