"""
Tests for the 2048 game session and its configuration.

Tests cover session state management, score accumulation, seeding, and the game-over alert.
"""

import io
from contextlib import redirect_stdout
from unittest import TestCase, main

import numpy as np

from tileboard.config import GameConfig, GestureMode
from tileboard.core.tile import Board, Direction
from tileboard.envs import TwentyFortyEight

TERMINAL = [2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536]


class TestEnvironmentInterface(TestCase):
    """Test TwentyFortyEight class API and state management."""

    def setUp(self):
        """Initialize fresh session before each test."""
        self.alerts = []
        self.env = TwentyFortyEight(alert=self.alerts.append)

    def test_reset_state_initialization(self):
        """Reset initializes board with exactly 2 tiles and zero score."""
        obs = self.env.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        values = obs.values
        self.assertEqual(np.count_nonzero(values), 2)
        self.assertTrue(np.all((values[values != 0] == 2) | (values[values != 0] == 4)))

        # ##>: Reward and score reset to zero.
        self.assertEqual(self.env.reward, 0)
        self.assertEqual(self.env.score, 0)
        self.assertFalse(self.env.is_finished)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.env.reset(seed=42).values
        board2 = self.env.reset(seed=42).values
        np.testing.assert_array_equal(board1, board2)

    def test_config_seed_reproducibility(self):
        """Sessions built with the same seed replay the same game."""
        env1 = TwentyFortyEight(GameConfig(seed=5))
        env2 = TwentyFortyEight(GameConfig(seed=5))
        for direction in [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN] * 3:
            env1.step(direction)
            env2.step(direction)
        np.testing.assert_array_equal(env1.values, env2.values)
        self.assertEqual(env1.score, env2.score)

    def test_step_return_signature(self):
        """Step returns tuple of (board, reward, done)."""
        obs, reward, done = self.env.step(Direction.LEFT)
        self.assertIsInstance(obs, Board)
        self.assertIsInstance(reward, int)
        self.assertIsInstance(done, bool)

    def test_score_accumulates(self):
        """Each move's reward is added to the running score."""
        self.env._current_state = Board.from_values([2, 2] + [0] * 14)
        _, reward, _ = self.env.step(Direction.LEFT)
        self.assertEqual(reward, 4)

        self.env._current_state = Board.from_values([8, 8] + [0] * 14)
        _, reward, _ = self.env.step('left')
        self.assertEqual(reward, 16)
        self.assertEqual(self.env.score, 20)

    def test_previous_board_not_reused(self):
        """Each move replaces the board with a new one."""
        before = self.env.observation
        before_values = before.values
        self.env._current_state = before
        self.env.step(Direction.RIGHT)
        np.testing.assert_array_equal(before.values, before_values)

    def test_game_over_alert(self):
        """The game-over message goes to the session's alert."""
        self.env._current_state = Board.from_values(TERMINAL)
        _, reward, done = self.env.step(Direction.LEFT)
        self.assertEqual(reward, 0)
        self.assertTrue(done)
        self.assertEqual(self.alerts, ['Game over!'])

    def test_game_over_logged_once(self):
        """A single game over produces a single INFO record."""
        self.env._current_state = Board.from_values(TERMINAL)
        with self.assertLogs('tileboard', level='INFO') as logs:
            self.env.step(Direction.LEFT)
        self.assertEqual(sum('Game over' in line for line in logs.output), 1)

    def test_custom_game_over_message(self):
        """The configured message replaces the default one."""
        alerts = []
        env = TwentyFortyEight(GameConfig(game_over_message='No more moves'), alert=alerts.append)
        env._current_state = Board.from_values(TERMINAL)
        env.step(Direction.UP)
        self.assertEqual(alerts, ['No more moves'])

    def test_initial_tiles(self):
        """The number of tiles spawned by a reset is configurable."""
        env = TwentyFortyEight(GameConfig(initial_tiles=5, seed=0))
        self.assertEqual(np.count_nonzero(env.values), 5)

    def test_max_tile_and_legal_moves(self):
        """Derived properties follow the current board."""
        self.env._current_state = Board.from_values([2, 0, 0, 0, 2, 0, 0, 0, 128] + [0] * 7)
        self.assertEqual(self.env.max_tile, 128)
        self.assertNotIn(Direction.LEFT, self.env.legal_moves)
        self.assertIn(Direction.UP, self.env.legal_moves)

    def test_render(self):
        """Render prints one tab-separated line per row."""
        self.env._current_state = Board.from_values(TERMINAL)
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            self.env.render()
        lines = buffer.getvalue().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[0], '2 \t4 \t8 \t16')


class TestGameConfig(TestCase):
    """Test configuration validation."""

    def test_defaults(self):
        config = GameConfig()
        self.assertEqual(config.initial_tiles, 2)
        self.assertEqual(config.tile_spawn_probs, {2: 0.9, 4: 0.1})
        self.assertEqual(config.gesture_mode, GestureMode.DOMINANT_AXIS)
        self.assertFalse(config.wrap_adjacency)

    def test_gesture_mode_from_string(self):
        self.assertEqual(GameConfig(gesture_mode='both_axes').gesture_mode, GestureMode.BOTH_AXES)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            GameConfig(initial_tiles=0)
        with self.assertRaises(ValueError):
            GameConfig(tile_spawn_probs={2: 0.5, 4: 0.1})
        with self.assertRaises(ValueError):
            GameConfig(tile_spawn_probs={})
        with self.assertRaises(ValueError):
            GameConfig(gesture_mode='diagonal')

    def test_wrap_adjacency_session(self):
        """The session's terminal check follows the configured adjacency rule."""
        board = Board.from_values([2, 4, 8, 16, 16, 2, 4, 8, 2, 4, 8, 16, 16, 2, 4, 8])
        env = TwentyFortyEight(GameConfig(wrap_adjacency=True))
        env._current_state = board
        self.assertFalse(env.is_finished)

        env = TwentyFortyEight()
        env._current_state = board
        self.assertTrue(env.is_finished)


if __name__ == '__main__':
    main()
