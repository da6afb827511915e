# models/saved_game.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import relationship

from database import Base
from .enums import Owner


class SavedGame(Base):
    __tablename__ = "saved_games"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    row_count = Column(Integer, nullable=False, default=15)
    column_count = Column(Integer, nullable=False, default=15)
    current_owner = Column(SQLEnum(Owner, name="owner_enum"), nullable=False)
    move_count = Column(Integer, nullable=False, default=0)
    line_length = Column(Integer, nullable=False, default=5)
    outcome = Column(String(32), nullable=True)  # display only, never read back into a game
    saved_at = Column(DateTime, default=datetime.now)

    cells = relationship(
        "BoardCell",
        back_populates="game",
        cascade="all, delete-orphan",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "rows": self.row_count,
            "columns": self.column_count,
            "current_owner": self.current_owner.value if self.current_owner else None,
            "move_count": self.move_count,
            "line_length": self.line_length,
            "outcome": self.outcome,
            "saved_at": self.saved_at.isoformat() if self.saved_at else None,
        }
