import logging
from typing import Optional

from config import DEFAULT_ROWS, DEFAULT_COLUMNS, LINE_LENGTH
from models.enums import Owner
from models.move import Move
from models.state import Draw, InProgress, Outcome, Win
from .board_logic import GameBoard

logger = logging.getLogger(__name__)


class GameController:
    """
    Turn sequencing and end-of-game detection on top of a GameBoard.

    submit_move() is the only way a game advances: it validates, places the
    mark, re-evaluates the outcome and hands the turn over in one step, so a
    caller never sees a half-applied move. Win and Draw are terminal until
    reset() is called.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS, line_length: int = LINE_LENGTH,
                 board: Optional[GameBoard] = None):
        if line_length < 1:
            raise ValueError(f"Line length must be at least 1, got {line_length}")
        self._board = board if board is not None else GameBoard(rows, columns)
        self._line_length = line_length
        self._current_owner = Owner.A
        self._outcome: Outcome = InProgress()
        self._move_count = 0
        if board is None:
            logger.info("New game started with board size %dx%d", rows, columns)

    @classmethod
    def from_snapshot(cls, board: GameBoard, current_owner: Owner, move_count: int,
                      line_length: int = LINE_LENGTH) -> "GameController":
        """Build a game around an already populated board (used when loading)."""
        game = cls(line_length=line_length, board=board)
        game.load_snapshot(board, current_owner, move_count)
        return game

    @property
    def board(self) -> GameBoard:
        return self._board

    @property
    def current_owner(self) -> Owner:
        return self._current_owner

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def line_length(self) -> int:
        return self._line_length

    @property
    def is_game_over(self) -> bool:
        return self._outcome.is_terminal

    def status_message(self) -> str:
        return self._outcome.message

    def submit_move(self, move: Move) -> bool:
        """
        Play move for the current owner.

        Returns False without touching anything if the game is over or the
        move is illegal. On success the move counter goes up, the outcome is
        recomputed and, while the game is still running, the turn passes to
        the other owner. The last mover stays current once the game ends.
        """
        if self.is_game_over:
            logger.warning("Attempted move %s when game is over", move)
            return False

        if not self._board.apply_move(move, self._current_owner):
            return False

        self._move_count += 1
        self.recompute_outcome()

        if not self.is_game_over:
            self._current_owner = self._current_owner.opposite()
            logger.debug("Player switched to %s", self._current_owner.value)

        return True

    def recompute_outcome(self) -> Outcome:
        winner: Optional[Owner] = self._board.find_winner(self._line_length)
        if winner is not None:
            self._outcome = Win(winner)
        elif self._board.is_full():
            self._outcome = Draw()
        else:
            self._outcome = InProgress()

        if self._outcome.is_terminal:
            logger.info("Game ended: %s", self._outcome.message)
        return self._outcome

    def reset(self):
        self._board.clear()
        self._current_owner = Owner.A
        self._outcome = InProgress()
        self._move_count = 0
        logger.info("Game reset")

    def load_snapshot(self, board: GameBoard, current_owner: Owner, move_count: int):
        """
        Replace board, turn owner and counter wholesale.

        Everything is checked before anything is assigned, so a rejected
        snapshot leaves this game as it was. The outcome is always recomputed
        from the new board.
        """
        if not isinstance(board, GameBoard):
            raise TypeError(f"Expected a GameBoard, got {board!r}")
        current_owner = Owner(current_owner)
        if move_count < 0:
            raise ValueError(f"Move count cannot be negative, got {move_count}")

        self._board = board
        self._current_owner = current_owner
        self._move_count = move_count
        self.recompute_outcome()
        logger.info("Snapshot loaded: %dx%d board, %s to move, %d moves",
                    board.rows, board.columns, current_owner.value, move_count)
