from dataclasses import dataclass
from typing import Union

from .enums import Owner

EMPTY_SYMBOL = "."


@dataclass(frozen=True)
class Empty:
    @property
    def symbol(self) -> str:
        return EMPTY_SYMBOL

    def __str__(self):
        return "Empty"


@dataclass(frozen=True)
class Mark:
    owner: Owner

    @property
    def symbol(self) -> str:
        return self.owner.symbol

    def __str__(self):
        return f"Mark({self.owner.value})"


EMPTY = Empty()

CellValue = Union[Empty, Mark]
