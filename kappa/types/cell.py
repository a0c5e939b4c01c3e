from __future__ import annotations

from kappa import Value
from kappa.errors import KappaNameError


class _EmptyCell:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


EMPTY = _EmptyCell()


class Cell:
    """A single shared slot holding one captured variable.

    Every closure that captured the variable holds the same Cell, so a store
    through one of them is seen by all the others.
    """

    __slots__ = ("value",)

    def __init__(self, value: Value = EMPTY):
        self.value = value

    def get(self) -> Value:
        if self.value is EMPTY:
            raise KappaNameError("cell is empty")
        return self.value

    def set(self, value: Value) -> None:
        self.value = value

    def clear(self) -> None:
        self.value = EMPTY

    def is_empty(self) -> bool:
        return self.value is EMPTY

    def __repr__(self) -> str:
        if self.value is EMPTY:
            return f"<cell at {id(self):#x}: empty>"
        return f"<cell at {id(self):#x}: {type(self.value).__name__} object>"
