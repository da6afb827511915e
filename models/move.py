from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """
    A (row, column) coordinate pair.

    Nothing about the type guarantees the move is legal; that is decided
    against a specific board.
    """
    row: int
    column: int

    def __str__(self):
        return f"Move({self.row}, {self.column})"
