"""2048 game session owning a board, its running score and its random generator."""

import logging
from typing import Callable, Optional

from numpy import ndarray
from numpy.random import Generator, default_rng

from tileboard.config import GameConfig
from tileboard.core.gameboard import init_board, is_game_over, log_alert, move_tiles
from tileboard.core.gamemove import legal_actions
from tileboard.core.tile import Board, Direction, MoveResult

_logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game session.

    This class keeps the state a user interface needs between moves: the current board, the reward of the
    last move and the running score. Every move goes through ``move_tiles``, so the board is replaced rather
    than edited, and the game-over alert is raised on the session's alert callable.
    """

    # ##: Current game state.
    _current_state: Optional[Board] = None
    _current_reward: int = 0
    _score: int = 0

    def __init__(self, config: Optional[GameConfig] = None, alert: Optional[Callable[[str], None]] = None):
        """
        Initialize the 2048 game board.

        Parameters
        ----------
        config : GameConfig, optional
            Session settings (default is ``GameConfig()``).
        alert : callable, optional
            Receives the game-over message. Defaults to logging it.
        """
        self.config = config if config is not None else GameConfig()
        self._alert = alert if alert is not None else log_alert
        self._rng: Generator = default_rng(self.config.seed)

        self.reset(seed=self.config.seed)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the board is full and no merge is possible, False otherwise.
        """
        return is_game_over(self._current_state, wrap_adjacency=self.config.wrap_adjacency)

    @property
    def observation(self) -> Board:
        """
        Get the current board.

        Returns
        -------
        Board
            The board produced by the last reset or move.
        """
        return self._current_state

    @property
    def values(self) -> ndarray:
        return self._current_state.values

    @property
    def reward(self) -> int:
        """Score earned by the last move."""
        return self._current_reward

    @property
    def score(self) -> int:
        """Score accumulated since the last reset."""
        return self._score

    @property
    def max_tile(self) -> int:
        return int(self.values.max())

    @property
    def legal_moves(self) -> list[Direction]:
        return legal_actions(self._current_state)

    def reset(self, seed: Optional[int] = None) -> Board:
        """
        Initialize an empty board and add the initial random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the session's generator, making the new game reproducible.

        Returns
        -------
        Board
            The new board.

        Notes
        -----
        - The initial board has ``config.initial_tiles`` tiles, typically 2's.
        - There's a small chance (10% by default) that an initial tile is a 4.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._current_state = init_board(
            rng=self._rng, probs=self.config.tile_spawn_probs, number_tile=self.config.initial_tiles
        )
        self._current_reward = 0
        self._score = 0
        _logger.info('New game started')
        return self.observation

    def move(self, direction: Direction | str) -> MoveResult:
        """
        Apply a move to the board and return the raw move result.

        Parameters
        ----------
        direction : Direction or str
            The direction to move in. Unknown directions leave the board unchanged.

        Returns
        -------
        MoveResult
            The new board and the score earned by the move.
        """
        result = move_tiles(
            self._current_state,
            direction,
            rng=self._rng,
            alert=self._notify,
            wrap_adjacency=self.config.wrap_adjacency,
            probs=self.config.tile_spawn_probs,
        )
        self._current_state = result.board
        self._current_reward = result.score
        self._score += result.score
        return result

    def step(self, direction: Direction | str) -> tuple[Board, int, bool]:
        """
        Apply the selected direction to the board.

        Parameters
        ----------
        direction : Direction or str
            The direction to move in.

        Returns
        -------
        tuple[Board, int, bool]
            A tuple containing:
            - The updated board (Board)
            - The score obtained from this move (int)
            - Whether the game has finished after this move (bool)

        Notes
        -----
        A new tile (2 or 4) is added to the board only after a move that changed it.
        """
        self.move(direction)
        return self.observation, self.reward, self.is_finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self.values.tolist():
            print(' \t'.join(map(str, row)))

    def _notify(self, _message: str) -> None:
        _logger.info('Game over')
        self._alert(self.config.game_over_message)
