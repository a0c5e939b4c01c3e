from __future__ import annotations

# Public surface for the object model
from .cell import Cell
from .code import Code
from .descriptor import GetSetProperty, TypeDef
from .method import Method
from .function import Function, make_function

__all__ = [
    "Cell",
    "Code",
    "GetSetProperty",
    "TypeDef",
    "Method",
    "Function",
    "make_function",
]
