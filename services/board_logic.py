import logging
from typing import Iterator, List, Optional, Tuple

from config import DEFAULT_ROWS, DEFAULT_COLUMNS, LINE_LENGTH
from models.cell import EMPTY, CellValue, Empty, Mark
from models.enums import Owner
from models.move import Move

logger = logging.getLogger(__name__)

# Forward and semi-forward directions only: right, down, down-right, down-left.
# A line is always reached from its first cell in row-major order through one of these.
WIN_DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


class GameBoard:
    """
    Rectangular grid of cells for a five-in-a-row game.

    The board knows nothing about turns or outcomes. It stores cell values,
    checks bounds and occupancy, places marks and finds completed lines.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.grid: List[List[CellValue]] = [[EMPTY for _ in range(columns)] for _ in range(rows)]
        logger.info("Created new board with size %dx%d", rows, columns)

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def is_in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def get(self, row: int, col: int) -> CellValue:
        """
        Return the value stored at (row, col).

        Out-of-bounds coordinates read as EMPTY. That default is only for
        rendering and scanning; callers validating a write must use
        is_in_bounds / is_legal_move instead.
        """
        if not self.is_in_bounds(row, col):
            return EMPTY
        return self.grid[row][col]

    def set(self, row: int, col: int, value: CellValue):
        """
        Overwrite a cell without any occupancy or turn check.

        This is the board-editor and load-from-storage path. Out-of-bounds
        coordinates are ignored.
        """
        if not isinstance(value, (Empty, Mark)):
            raise TypeError(f"Cell value must be Empty or Mark, got {value!r}")
        if not self.is_in_bounds(row, col):
            logger.debug("Ignoring set outside the board at (%d, %d)", row, col)
            return
        self.grid[row][col] = value
        logger.debug("Cell set at (%d, %d) to %s", row, col, value)

    def is_legal_move(self, move: Move, owner: Optional[Owner] = None) -> bool:
        # owner does not affect legality: any player may take any empty cell
        return self.is_in_bounds(move.row, move.column) and self.grid[move.row][move.column] == EMPTY

    def apply_move(self, move: Move, owner: Owner) -> bool:
        """Place a mark for owner. Returns False and changes nothing if the move is illegal."""
        if not self.is_legal_move(move, owner):
            logger.warning("Invalid move attempted: %s by %s", move, owner.value)
            return False
        self.grid[move.row][move.column] = Mark(owner)
        logger.info("Move made at %s by %s", move, owner.value)
        return True

    def empty_positions(self) -> List[Move]:
        """All empty cells in row-major order. Deterministic consumers rely on this order."""
        return [
            Move(row, col)
            for row in range(self.rows)
            for col in range(self.columns)
            if self.grid[row][col] == EMPTY
        ]

    def occupied_cells(self) -> Iterator[Tuple[Move, Mark]]:
        for row in range(self.rows):
            for col in range(self.columns):
                cell = self.grid[row][col]
                if isinstance(cell, Mark):
                    yield Move(row, col), cell

    def is_full(self) -> bool:
        return all(cell != EMPTY for line in self.grid for cell in line)

    def clear(self):
        self.grid = [[EMPTY for _ in range(self.columns)] for _ in range(self.rows)]
        logger.info("Board cleared")

    def find_winner(self, line_length: int = LINE_LENGTH) -> Optional[Owner]:
        """
        Return the owner of the first qualifying line, or None.

        Cells are scanned in row-major order and, for each occupied cell, the
        directions right, down, down-right, down-left are tried in that order.
        If both owners hold a line (only possible through editing), the one
        reached first in that scan is reported.
        """
        line = self.find_winning_line(line_length)
        if line is None:
            return None
        first = line[0]
        return self.grid[first.row][first.column].owner

    def find_winning_line(self, line_length: int = LINE_LENGTH) -> Optional[List[Move]]:
        if line_length < 1:
            raise ValueError(f"Line length must be at least 1, got {line_length}")

        for row in range(self.rows):
            for col in range(self.columns):
                cell = self.grid[row][col]
                if cell == EMPTY:
                    continue
                for d_row, d_col in WIN_DIRECTIONS:
                    # a run continuing from an earlier cell was already counted from there
                    if self.get(row - d_row, col - d_col) == cell:
                        continue
                    if self._count_run(row, col, d_row, d_col, cell, line_length) >= line_length:
                        logger.info("Winner found: %s", cell.owner.value)
                        return [Move(row + i * d_row, col + i * d_col) for i in range(line_length)]
        return None

    def _count_run(self, row: int, col: int, d_row: int, d_col: int, cell: Mark, limit: int) -> int:
        """Consecutive cells equal to cell starting at (row, col), capped at limit."""
        count = 0
        while count < limit:
            r, c = row + count * d_row, col + count * d_col
            if not self.is_in_bounds(r, c) or self.grid[r][c] != cell:
                break
            count += 1
        return count

    def copy(self) -> "GameBoard":
        new_board = GameBoard.__new__(GameBoard)
        new_board.rows = self.rows
        new_board.columns = self.columns
        new_board.grid = [list(line) for line in self.grid]
        return new_board

    def render(self) -> str:
        """Text grid with column numbers on top and row numbers on the left."""
        lines = ["   " + "".join(f"{col:2d} " for col in range(self.columns))]
        for row in range(self.rows):
            cells = "".join(f" {self.grid[row][col].symbol} " for col in range(self.columns))
            lines.append(f"{row:2d} {cells}")
        return "\n".join(lines)

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        if not isinstance(other, GameBoard):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self.grid == other.grid
