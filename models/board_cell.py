# models/board_cell.py
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import relationship

from database import Base
from .enums import Owner


class BoardCell(Base):
    """One occupied cell of a saved game. Empty cells are not stored."""
    __tablename__ = "board_cells"
    __table_args__ = (
        UniqueConstraint("game_id", "row_index", "col_index", name="uq_board_cell_position"),
    )

    id = Column(Integer, primary_key=True, index=True)
    game_id = Column(Integer, ForeignKey("saved_games.id", ondelete="CASCADE"), nullable=False)
    row_index = Column(Integer, nullable=False)
    col_index = Column(Integer, nullable=False)
    owner = Column(SQLEnum(Owner, name="owner_enum"), nullable=False)

    game = relationship("SavedGame", back_populates="cells")
