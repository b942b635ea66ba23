"""
Core functionality for the 2048 game: board initialization, tile spawning, sliding and merging, and game
termination.
"""

import logging
from typing import Callable, Optional

from numpy import all as np_all
from numpy import any as np_any
from numpy import array_equal
from numpy.random import PCG64DXSM, Generator, default_rng

from tileboard.core.tile import BOARD_CELLS, GRID_SIZE, Board, Direction, MoveResult, Tile

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Message handed to the alert callable when no move is left.
GAME_OVER_MESSAGE = 'Game over!'

# ##>: Module-level generator used when the caller does not supply one.
_GENERATOR = default_rng(PCG64DXSM())

_logger = logging.getLogger(__name__)


def log_alert(message: str) -> None:
    """Default alert: report the message through the module logger."""
    _logger.warning(message)


def line_indices(direction: Direction, line: int) -> list[int]:
    """
    Board indices of one row or column, ordered from the edge the tiles travel toward.

    Parameters
    ----------
    direction : Direction
        The move direction.
    line : int
        Row number for left/right moves, column number for up/down moves.

    Returns
    -------
    list[int]
        Four row-major indices. Index 0 of the list is the cell tiles slide into first.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        indices = [line * GRID_SIZE + offset for offset in range(GRID_SIZE)]
    else:
        indices = [line + offset * GRID_SIZE for offset in range(GRID_SIZE)]

    if direction in (Direction.RIGHT, Direction.DOWN):
        indices.reverse()
    return indices


def merge_line(line: list[Tile]) -> tuple[int, list[Tile]]:
    """
    Slide the tiles of a line toward its start and merge adjacent equal values.

    Parameters
    ----------
    line : list of Tile
        Tiles ordered from the edge they travel toward.

    Returns
    -------
    score : int
        The total value of the tiles created by merging.
    merged_line : list of Tile
        The new line, padded with empty tiles to its original length.

    Notes
    -----
    - Empty tiles are dropped before merging.
    - A tile produced by a merge does not merge again in the same call, so ``[2, 2, 2, 2]`` becomes
      ``[4, 4, 0, 0]``.
    - Positions of the returned tiles are not meaningful until the caller stamps them.
    """
    non_empty = [tile for tile in line if not tile.is_empty]
    result: list[Tile] = []
    score = 0

    i = 0
    while i < len(non_empty):
        current = non_empty[i]
        if i < len(non_empty) - 1 and current.value == non_empty[i + 1].value:
            merged = current.value * 2
            result.append(Tile(value=merged, x=current.x, y=current.y, merged=True))
            score += merged
            i += 2
        else:
            result.append(current)
            i += 1

    while len(result) < len(line):
        result.append(Tile())

    return score, result


def slide_tiles(board: Board, direction: Direction) -> MoveResult:
    """
    Slide and merge every line of the board in one direction, without spawning a tile.

    Parameters
    ----------
    board : Board
        The current board. It is not modified.
    direction : Direction
        The move direction.

    Returns
    -------
    MoveResult
        A new board with positions stamped from the row-major layout, and the score of the move.
    """
    tiles = [Tile(value=tile.value, x=index % GRID_SIZE, y=index // GRID_SIZE) for index, tile in enumerate(board)]
    score = 0

    for line in range(GRID_SIZE):
        indices = line_indices(direction, line)
        line_score, merged_line = merge_line([tiles[index] for index in indices])
        score += line_score
        for index, tile in zip(indices, merged_line):
            tiles[index] = tile

    result = Board(tiles=tiles)
    result.stamp_positions()
    return MoveResult(board=result, score=score)


def board_changed(before: Board, after: Board) -> bool:
    """Whether the two boards differ in any of their 16 row-major values."""
    return not array_equal(before.values, after.values)


def add_random_tile(
    board: Board, rng: Optional[Generator] = None, probs: dict[int, float] = TILE_SPAWN_PROBS
) -> Board:
    """
    Put a new tile (2 or 4) on a uniformly chosen empty cell.

    Parameters
    ----------
    board : Board
        The board to fill. **Modified in-place.**
    rng : Generator, optional
        Random generator; the module-level generator is used when omitted.
    probs : dict[int, float], optional
        Probability of each spawned value (default 90% for 2, 10% for 4).

    Returns
    -------
    Board
        The same board reference.

    Notes
    -----
    Nothing happens on a full board.
    """
    rng = rng if rng is not None else _GENERATOR

    # ##: Only if there are still available places.
    empty = board.empty_indices()
    if empty:
        index = empty[int(rng.integers(len(empty)))]
        value = int(rng.choice(list(probs), p=list(probs.values())))
        board[index].value = value
        _logger.debug('Spawned %d at index %d', value, index)
    return board


def init_board(
    rng: Optional[Generator] = None, probs: dict[int, float] = TILE_SPAWN_PROBS, number_tile: int = 2
) -> Board:
    """
    Create an empty board and add random tiles.

    Parameters
    ----------
    rng : Generator, optional
        Random generator for the spawned tiles.
    probs : dict[int, float], optional
        Probability of each spawned value.
    number_tile : int, optional
        Number of tiles to spawn (default is 2).

    Returns
    -------
    Board
        A fresh board, by default with exactly two tiles, usually 2's and occasionally 4's.
    """
    board = Board.empty()
    for _ in range(number_tile):
        add_random_tile(board, rng=rng, probs=probs)
    return board


def has_move_left(board: Board, wrap_adjacency: bool = False) -> bool:
    """
    Check whether any cell has an equal right or bottom neighbour.

    Parameters
    ----------
    board : Board
        The board to inspect.
    wrap_adjacency : bool, optional
        Compare cells on the flat row-major sequence, so the last cell of a row is compared with the
        first cell of the next row (default is False, which compares within rows only).

    Returns
    -------
    bool
        True if two neighbouring cells hold the same value.
    """
    if wrap_adjacency:
        flat = board.flat_values()
        return any(
            (index + 1 < BOARD_CELLS and flat[index + 1] == value)
            or (index + GRID_SIZE < BOARD_CELLS and flat[index + GRID_SIZE] == value)
            for index, value in enumerate(flat)
        )

    state = board.values
    return bool(np_any(state[:-1] == state[1:]) or np_any(state[:, :-1] == state[:, 1:]))


def is_game_over(board: Board, wrap_adjacency: bool = False) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : Board
        The board to inspect.
    wrap_adjacency : bool, optional
        See ``has_move_left``.

    Returns
    -------
    bool
        True if the board is full and no two neighbouring cells are equal.
    """
    return bool(np_all(board.values != 0)) and not has_move_left(board, wrap_adjacency=wrap_adjacency)


def move_tiles(
    board: Board,
    direction: Direction | str,
    *,
    rng: Optional[Generator] = None,
    alert: Optional[Callable[[str], None]] = None,
    wrap_adjacency: bool = False,
    probs: dict[int, float] = TILE_SPAWN_PROBS,
) -> MoveResult:
    """
    Apply a move, spawn a tile if the board changed, and raise the game-over alert.

    Parameters
    ----------
    board : Board
        The current board. It is not modified.
    direction : Direction or str
        The move direction. Member values (``'left'``) and key names (``'ArrowLeft'``) are accepted.
    rng : Generator, optional
        Random generator for the spawned tile.
    alert : callable, optional
        Called with ``GAME_OVER_MESSAGE`` when the resulting board is terminal. Defaults to ``log_alert``.
    wrap_adjacency : bool, optional
        Adjacency rule of the terminal-state check, see ``has_move_left``.
    probs : dict[int, float], optional
        Probability of each spawned value.

    Returns
    -------
    MoveResult
        The new board and the score of the move.

    Notes
    -----
    - An unknown direction leaves the board unchanged, scores 0 and spawns nothing.
    - A move that changes no cell value spawns nothing.
    """
    alert = alert if alert is not None else log_alert

    resolved = Direction.from_key(direction)
    if resolved is None:
        _logger.debug('Ignoring unknown direction %r', direction)
        result = MoveResult(board=Board.from_values(board.flat_values()), score=0)
    else:
        result = slide_tiles(board, resolved)
        if board_changed(board, result.board):
            add_random_tile(result.board, rng=rng, probs=probs)

    if is_game_over(result.board, wrap_adjacency=wrap_adjacency):
        alert(GAME_OVER_MESSAGE)

    return result
