"""
Tile and board model for the 2048 game.

A board is a fixed sequence of 16 tiles laid out row-major on a 4x4 grid. Each tile knows its own
grid position, which always matches its index in the board once a move has completed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Sequence

from numpy import array, int64, ndarray

# ##>: Grid dimensions.
GRID_SIZE = 4
BOARD_CELLS = GRID_SIZE * GRID_SIZE


class Direction(str, Enum):
    """
    Cardinal move directions.

    The declaration order matches the integer actions used elsewhere (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @classmethod
    def from_key(cls, key: object) -> Optional['Direction']:
        """
        Translate a key name into a direction.

        Parameters
        ----------
        key : object
            A direction member, a member value (``'left'``) or a browser key name (``'ArrowLeft'``).

        Returns
        -------
        Direction or None
            The matching direction, None when the key does not name one.
        """
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        return KEY_BINDINGS.get(key)


# ##>: Key names accepted by Direction.from_key.
KEY_BINDINGS: dict[str, Direction] = {
    'ArrowLeft': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
    **{direction.value: direction for direction in Direction},
}


@dataclass
class Tile:
    """One cell of the board."""

    value: int = 0
    x: int = 0
    y: int = 0
    merged: bool = False

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    def copy(self) -> 'Tile':
        return Tile(value=self.value, x=self.x, y=self.y, merged=self.merged)


def _check_cells(count: int) -> None:
    if count != BOARD_CELLS:
        raise ValueError(f'A board holds exactly {BOARD_CELLS} cells, got {count}')


@dataclass
class Board:
    """
    Row-major 4x4 board of tiles.

    Attributes
    ----------
    tiles : list of Tile
        The 16 tiles; ``tiles[y * 4 + x]`` is the tile at column ``x`` of row ``y``.
    """

    tiles: list[Tile] = field(default_factory=lambda: [Tile() for _ in range(BOARD_CELLS)])

    def __post_init__(self):
        _check_cells(len(self.tiles))

    @classmethod
    def empty(cls) -> 'Board':
        """Build a board of empty tiles stamped with their positions."""
        board = cls()
        board.stamp_positions()
        return board

    @classmethod
    def from_values(cls, values: Sequence[int] | ndarray) -> 'Board':
        """
        Build a board from 16 cell values.

        Parameters
        ----------
        values : sequence of int or ndarray
            Flat row-major values, or a 4x4 grid.

        Returns
        -------
        Board
            A board whose tiles carry the given values at their row-major positions.

        Raises
        ------
        ValueError
            If the values do not describe exactly 16 cells.
        """
        flat = array(values, dtype=int64).ravel()
        _check_cells(flat.size)
        return cls(
            tiles=[Tile(value=int(value), x=index % GRID_SIZE, y=index // GRID_SIZE) for index, value in enumerate(flat)]
        )

    @property
    def values(self) -> ndarray:
        """
        Cell values as a 4x4 array.

        Returns
        -------
        ndarray
            A fresh array; editing it does not touch the board.
        """
        return array([tile.value for tile in self.tiles], dtype=int64).reshape(GRID_SIZE, GRID_SIZE)

    def flat_values(self) -> list[int]:
        return [tile.value for tile in self.tiles]

    def empty_indices(self) -> list[int]:
        return [index for index, tile in enumerate(self.tiles) if tile.is_empty]

    def copy(self) -> 'Board':
        """Deep copy: the new board never shares tiles with this one."""
        return Board(tiles=[tile.copy() for tile in self.tiles])

    def stamp_positions(self) -> None:
        """Reset every tile's (x, y) from its index."""
        for index, tile in enumerate(self.tiles):
            tile.x = index % GRID_SIZE
            tile.y = index // GRID_SIZE

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]


class MoveResult(NamedTuple):
    """Board produced by a move and the score the move earned."""

    board: Board
    score: int
