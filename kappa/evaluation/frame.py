from __future__ import annotations

import builtins
from collections.abc import Mapping
from typing import Tuple

from kappa import Namespace, Value
from kappa.errors import KappaNameError
from kappa.types.cell import Cell
from kappa.types.code import Code


class Frame:
    """One activation of a code object under the host evaluator.

    Locals are the call's fresh namespace; free variables resolve through the
    closure cells, matched by position in code.freevars.
    """

    __slots__ = ("code", "globals", "locals", "closure")

    def __init__(self, code: Code, globals: Namespace, locals: Namespace, closure: Tuple[Cell, ...] = ()):
        self.code = code
        self.globals = globals
        self.locals = locals
        self.closure = closure

    # Locals
    def load_fast(self, name: str) -> Value:
        try:
            return self.locals[name]
        except KeyError:
            raise KappaNameError(f"local variable '{name}' referenced before assignment") from None

    def store_fast(self, name: str, value: Value) -> None:
        self.locals[name] = value

    # Free variables
    def cell(self, name: str) -> Cell:
        try:
            idx = self.code.freevars.index(name)
        except ValueError:
            raise KappaNameError(f"'{name}' is not a free variable of {self.code.name}()") from None
        if idx >= len(self.closure):
            raise KappaNameError(f"free variable '{name}' of {self.code.name}() has no closure cell")
        return self.closure[idx]

    def deref(self, name: str) -> Value:
        cell = self.cell(name)
        if cell.is_empty():
            raise KappaNameError(
                f"free variable '{name}' referenced before assignment in enclosing scope"
            )
        return cell.value

    def store_deref(self, name: str, value: Value) -> None:
        self.cell(name).set(value)

    # Globals, then builtins
    def load_global(self, name: str) -> Value:
        if name in self.globals:
            return self.globals[name]
        w_builtins = self.globals.get("__builtins__", builtins)
        if isinstance(w_builtins, Mapping):
            if name in w_builtins:
                return w_builtins[name]
        elif hasattr(w_builtins, name):
            return getattr(w_builtins, name)
        raise KappaNameError(f"name '{name}' is not defined")

    def __repr__(self) -> str:
        return f"<Frame {self.code.name} locals={sorted(self.locals)}>"
