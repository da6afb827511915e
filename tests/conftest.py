import pytest

from database import Database
from models.cell import Mark
from services.board_logic import GameBoard
from services.game_repository import GameRepository


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'gomoku_test.db'}")
    db.init_schema()
    yield db
    db.close()


@pytest.fixture
def repository(database):
    return GameRepository(database)


@pytest.fixture
def board():
    return GameBoard(15, 15)


def place_line(board, owner, start, direction, length):
    row, col = start
    d_row, d_col = direction
    for i in range(length):
        board.set(row + i * d_row, col + i * d_col, Mark(owner))


def draw_pattern(rows=15, columns=15):
    """
    Owner A and B cells of a full board with no run longer than two.

    Horizontal runs come in pairs, rows alternate, and both diagonals
    change owner at least every second step.
    """
    a_cells, b_cells = [], []
    for row in range(rows):
        for col in range(columns):
            if (col // 2 + row) % 2 == 0:
                a_cells.append((row, col))
            else:
                b_cells.append((row, col))
    return a_cells, b_cells
