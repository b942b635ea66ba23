"""
Touch swipe handling.

A swipe is recorded in two steps: the touch-start point, then the first touch-move point, which is taken as
the end of the gesture. The displacement between them is turned into one or two moves on the game.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from tileboard.config import GestureMode
from tileboard.core.tile import Direction, MoveResult
from tileboard.envs.twentyfortyeight import TwentyFortyEight

_logger = logging.getLogger(__name__)


class TouchPoint(NamedTuple):
    """Screen coordinates of a touch."""

    x: float
    y: float


def _horizontal(delta: float) -> Direction:
    return Direction.LEFT if delta > 0 else Direction.RIGHT


def _vertical(delta: float) -> Direction:
    return Direction.UP if delta > 0 else Direction.DOWN


def swipe_directions(
    start: TouchPoint, end: TouchPoint, mode: GestureMode = GestureMode.DOMINANT_AXIS
) -> list[Direction]:
    """
    Translate a swipe into move directions.

    Parameters
    ----------
    start : TouchPoint
        Where the touch began.
    end : TouchPoint
        Where the touch ended.
    mode : GestureMode, optional
        Translation rule (default is ``GestureMode.DOMINANT_AXIS``).

    Returns
    -------
    list[Direction]
        The moves to issue, in order.

    Notes
    -----
    - Deltas are ``start - end``: a positive horizontal delta means LEFT, a positive vertical delta UP.
    - In dominant-axis mode, ties go to the horizontal axis and a zero-length swipe yields no move.
    - In both-axes mode, a horizontal then a vertical move are always issued; a zero delta counts as
      negative.

    Examples
    --------
    >>> swipe_directions(TouchPoint(100, 100), TouchPoint(40, 100))
    [<Direction.LEFT: 'left'>]
    """
    delta_x = start.x - end.x
    delta_y = start.y - end.y

    if mode == GestureMode.BOTH_AXES:
        return [_horizontal(delta_x), _vertical(delta_y)]

    if delta_x == 0 and delta_y == 0:
        return []
    if abs(delta_x) >= abs(delta_y):
        return [_horizontal(delta_x)]
    return [_vertical(delta_y)]


@dataclass
class GestureSession:
    """
    Gesture state owned by the user interface.

    Attributes
    ----------
    game : TwentyFortyEight
        The game the swipes are applied to.
    mode : GestureMode, optional
        Translation rule for swipes; the game's ``config.gesture_mode`` when omitted.
    x_down, y_down : float or None
        Recorded touch-start point, None when no gesture is in progress.
    """

    game: TwentyFortyEight
    mode: Optional[GestureMode] = None
    x_down: Optional[float] = field(default=None)
    y_down: Optional[float] = field(default=None)

    def __post_init__(self):
        self.mode = GestureMode(self.mode) if self.mode is not None else self.game.config.gesture_mode

    @property
    def in_progress(self) -> bool:
        return self.x_down is not None and self.y_down is not None

    def clear(self) -> None:
        self.x_down = None
        self.y_down = None


def handle_touch_start(session: GestureSession, point: TouchPoint) -> None:
    """Record the start of a gesture, replacing any gesture still in progress."""
    session.x_down, session.y_down = point.x, point.y


def handle_touch_move(session: GestureSession, point: TouchPoint) -> list[MoveResult]:
    """
    Complete the gesture in progress and apply its moves to the game.

    Parameters
    ----------
    session : GestureSession
        The gesture state; its start point is cleared.
    point : TouchPoint
        The end of the gesture.

    Returns
    -------
    list[MoveResult]
        One result per issued move; empty when no gesture was in progress.
    """
    if not session.in_progress:
        return []

    directions = swipe_directions(TouchPoint(session.x_down, session.y_down), point, mode=session.mode)
    session.clear()

    _logger.debug('Swipe translated to %s', [direction.value for direction in directions])
    return [session.game.move(direction) for direction in directions]
