import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from models.enums import Owner
from models.move import Move
from .board_logic import GameBoard

logger = logging.getLogger(__name__)


class AIStrategy(ABC):
    """Move-selection policy. Implementations only read the board."""

    name = "AI"

    @abstractmethod
    def choose_move(self, board: GameBoard) -> Optional[Move]:
        """Return the chosen move, or None when no move is possible."""


class RandomAI(AIStrategy):
    """AI with random strategy"""
    # picks uniformly among board.empty_positions(); with a fixed seed the
    # choice is reproducible because that list is in row-major order

    name = "Random AI"

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed)

    def choose_move(self, board: GameBoard) -> Optional[Move]:
        valid_moves = board.empty_positions()
        if not valid_moves:
            logger.warning("No valid moves available")
            return None

        move = self.random.choice(valid_moves)
        logger.info("AI chose move: %s", move)
        return move


class AIPlayer:
    """
    Plays one owner using a swappable strategy.

    The player never looks at which strategy it holds; it only asks it for a
    move and refuses to pass on one the board would reject.
    """

    def __init__(self, strategy: AIStrategy, owner: Owner = Owner.B):
        self.strategy = strategy
        self.owner = owner

    @property
    def strategy(self) -> AIStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: AIStrategy):
        self._strategy = strategy
        logger.info("AI strategy set to %s", strategy.name)

    @property
    def strategy_name(self) -> str:
        return self._strategy.name

    def make_move(self, board: GameBoard) -> Optional[Move]:
        move = self._strategy.choose_move(board)
        if move is None:
            return None
        if not board.is_legal_move(move, self.owner):
            logger.error("%s proposed illegal move %s", self._strategy.name, move)
            return None
        return move
