"""
Keyboard handling for a 2048 game session.
"""

import logging
from typing import Optional

from tileboard.core.tile import Direction, MoveResult
from tileboard.envs.twentyfortyeight import TwentyFortyEight

_logger = logging.getLogger(__name__)

# ##>: Key that starts a new game.
RESET_KEY = 'backspace'


def key_handler(game: TwentyFortyEight, key: str) -> Optional[MoveResult]:
    """
    Handle a key press.

    Parameters
    ----------
    game : TwentyFortyEight
        The game session.
    key : str
        Key name, e.g. ``'ArrowLeft'``, ``'left'`` or ``'backspace'``.

    Returns
    -------
    MoveResult or None
        The result of the move, None when the key reset the game or was ignored.
    """
    _logger.debug('Pressed %s', key)

    if key == RESET_KEY:
        game.reset()
        return None

    direction = Direction.from_key(key)
    if direction is not None:
        return game.move(direction)
    return None
