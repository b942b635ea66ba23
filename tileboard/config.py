"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import isclose
from typing import Optional


class GestureMode(str, Enum):
    """
    How a swipe is turned into moves.

    DOMINANT_AXIS: One move along the axis with the larger displacement.
    BOTH_AXES: One horizontal and one vertical move per swipe, chosen by sign only.
    """

    DOMINANT_AXIS = 'dominant_axis'
    BOTH_AXES = 'both_axes'


@dataclass
class GameConfig:
    """Settings of a game session."""

    # ##>: Board setup.
    initial_tiles: int = 2  # Tiles spawned by a reset
    tile_spawn_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})

    # ##>: Input handling.
    gesture_mode: GestureMode = GestureMode.DOMINANT_AXIS

    # ##>: Terminal-state check compares across row boundaries when True.
    wrap_adjacency: bool = False

    # ##>: Notification.
    game_over_message: str = 'Game over!'

    # ##>: Seed of the session's random generator (None for fresh entropy).
    seed: Optional[int] = None

    def __post_init__(self):
        if self.initial_tiles <= 0:
            raise ValueError(f'initial_tiles must be > 0, got {self.initial_tiles}')
        if not self.tile_spawn_probs or not isclose(sum(self.tile_spawn_probs.values()), 1.0):
            raise ValueError(f'tile_spawn_probs must sum to 1, got {self.tile_spawn_probs}')
        self.gesture_mode = GestureMode(self.gesture_mode)
