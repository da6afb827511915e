import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from database import Database
from models.board_cell import BoardCell
from models.cell import Mark
from models.enums import Owner
from models.saved_game import SavedGame
from .board_logic import GameBoard
from .game_controller import GameController

logger = logging.getLogger(__name__)


class GameRepository:
    def __init__(self, database: Database):
        self.database = database

    def save_game(self, name: str, game: GameController) -> bool:
        # Enregistre la partie sous ce nom, en remplaçant une éventuelle sauvegarde existante
        name = (name or "").strip()
        if not name:
            logger.warning("Refusing to save a game without a name")
            return False

        rows, columns = game.board.dimensions()
        cells = [
            BoardCell(row_index=move.row, col_index=move.column, owner=mark.owner)
            for move, mark in game.board.occupied_cells()
        ]

        try:
            with self.database.session() as session:
                with session.begin():
                    existing = session.query(SavedGame).filter(SavedGame.name == name).first()
                    if existing:
                        session.delete(existing)
                        session.flush()  # free the unique name before inserting again

                    saved = SavedGame(
                        name=name,
                        row_count=rows,
                        column_count=columns,
                        current_owner=game.current_owner,
                        move_count=game.move_count,
                        line_length=game.line_length,
                        outcome=game.outcome.to_tag(),
                        cells=cells,
                    )
                    session.add(saved)
        except SQLAlchemyError:
            logger.exception("Failed to save game '%s'", name)
            return False

        logger.info("Game '%s' saved successfully (%d cells)", name, len(cells))
        return True

    def load_game(self, name: str) -> Optional[GameController]:
        """
        Rebuild a saved game, or return None if it is missing or unreadable.

        The stored outcome column is ignored; the returned game recomputes its
        outcome from the restored board.
        """
        try:
            with self.database.session() as session:
                saved = session.query(SavedGame).filter(SavedGame.name == name).first()
                if saved is None:
                    logger.warning("Game '%s' not found", name)
                    return None

                board = GameBoard(saved.row_count, saved.column_count)
                for cell in saved.cells:
                    if not board.is_in_bounds(cell.row_index, cell.col_index):
                        raise ValueError(
                            f"Stored cell ({cell.row_index}, {cell.col_index}) is outside "
                            f"a {saved.row_count}x{saved.column_count} board"
                        )
                    board.set(cell.row_index, cell.col_index, Mark(Owner(cell.owner)))

                game = GameController.from_snapshot(
                    board,
                    Owner(saved.current_owner),
                    saved.move_count,
                    saved.line_length,
                )
        except (SQLAlchemyError, LookupError, ValueError):
            # LookupError covers enum values the column type cannot map back
            logger.exception("Failed to load game '%s'", name)
            return None

        logger.info("Game '%s' loaded successfully", name)
        return game

    def delete_game(self, name: str) -> bool:
        try:
            with self.database.session() as session:
                with session.begin():
                    saved = session.query(SavedGame).filter(SavedGame.name == name).first()
                    if saved is None:
                        return False
                    session.delete(saved)
        except SQLAlchemyError:
            logger.exception("Failed to delete game '%s'", name)
            return False

        logger.info("Game '%s' deleted", name)
        return True

    def list_saved_games(self) -> List[str]:
        """Saved game names, most recently saved first."""
        try:
            with self.database.session() as session:
                rows = (
                    session.query(SavedGame.name)
                    .order_by(SavedGame.saved_at.desc(), SavedGame.id.desc())
                    .all()
                )
        except SQLAlchemyError:
            logger.exception("Failed to list saved games")
            return []
        return [name for (name,) in rows]

    def list_saved_game_details(self) -> List[dict]:
        try:
            with self.database.session() as session:
                saved_games = (
                    session.query(SavedGame)
                    .order_by(SavedGame.saved_at.desc(), SavedGame.id.desc())
                    .all()
                )
                return [saved.to_dict() for saved in saved_games]
        except SQLAlchemyError:
            logger.exception("Failed to list saved games")
            return []

    def game_exists(self, name: str) -> bool:
        try:
            with self.database.session() as session:
                return session.query(SavedGame.id).filter(SavedGame.name == name).first() is not None
        except SQLAlchemyError:
            logger.exception("Failed to check game existence")
            return False
