from typing import Optional, Tuple

from models.cell import EMPTY, CellValue, Mark
from models.enums import Owner
from models.move import Move


def _two_ints(text: str) -> Tuple[int, int]:
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers, got {text!r}")
    return int(parts[0]), int(parts[1])


def parse_move(text: str) -> Move:
    """'7 3' -> Move(7, 3). Raises ValueError on anything else."""
    row, col = _two_ints(text)
    return Move(row, col)


def parse_board_size(text: str, default: Tuple[int, int]) -> Tuple[int, int]:
    # blank input means "use the default size"
    if not text.strip():
        return default
    rows, columns = _two_ints(text)
    if rows <= 0 or columns <= 0:
        raise ValueError(f"Board size must be positive, got {rows}x{columns}")
    return rows, columns


def parse_owner(text: str) -> Optional[Owner]:
    """Board-editor player code: '1' -> A, '2' -> B, '0' -> None (empty)."""
    codes = {"0": None, "1": Owner.A, "2": Owner.B}
    if text not in codes:
        raise ValueError(f"Player must be 0, 1 or 2, got {text!r}")
    return codes[text]


def cell_for_owner(owner: Optional[Owner]) -> CellValue:
    return EMPTY if owner is None else Mark(owner)
