from dataclasses import dataclass
from typing import Union

from .enums import Owner


@dataclass(frozen=True)
class InProgress:
    is_terminal = False

    @property
    def message(self) -> str:
        return "Game in progress..."

    def to_tag(self) -> str:
        return "in_progress"


@dataclass(frozen=True)
class Win:
    owner: Owner
    is_terminal = True

    @property
    def message(self) -> str:
        return f"{self.owner.label} ({self.owner.symbol}) wins!"

    def to_tag(self) -> str:
        return f"win_{self.owner.value}"


@dataclass(frozen=True)
class Draw:
    is_terminal = True

    @property
    def message(self) -> str:
        return "Game is a draw!"

    def to_tag(self) -> str:
        return "draw"


Outcome = Union[InProgress, Win, Draw]
