from enum import Enum


class Owner(str, Enum):
    A = "A"
    B = "B"

    def opposite(self) -> "Owner":
        return Owner.B if self == Owner.A else Owner.A

    @property
    def symbol(self) -> str:
        """Board character: X for A, O for B."""
        return "X" if self == Owner.A else "O"

    @property
    def label(self) -> str:
        return "Player 1" if self == Owner.A else "Player 2"
