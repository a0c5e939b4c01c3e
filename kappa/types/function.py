"""
Function objects.

Function objects and code objects should not be confused with each other.
A Code is the compiled, immutable body of one source fragment. A Function is
created every time the definition of that fragment is evaluated: it pairs the
code with the globals it was defined in, its defaults and the closure cells
captured from the enclosing activation. Many functions may share one code.

The attributes program code can see (__code__, __defaults__, __name__, ...)
are exposed through Function.typedef, built once at import time; every setter
validates its value before touching the object.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Optional, Tuple

from kappa import Namespace, Value
from kappa.config import trace_calls
from kappa.errors import KappaTypeError, KappaValueError
from kappa.runtime_context import get_evaluator
from kappa.types.cell import Cell
from kappa.types.code import Code
from kappa.types.descriptor import GetSetProperty, TypeDef
from kappa.types.method import Method

logger = logging.getLogger(__name__)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _check_string_dict(attr: str, value: Any, mapping_type: type = Mapping) -> Mapping:
    if not isinstance(value, mapping_type):
        raise KappaTypeError(f"{attr} must be set to a dict object, not '{_type_name(value)}'")
    for key in value:
        if not isinstance(key, str):
            raise KappaTypeError(f"{attr} must have string keys, not '{_type_name(key)}'")
    return value


def _check_string(attr: str, value: Any) -> str:
    if not isinstance(value, str):
        raise KappaTypeError(f"{attr} must be set to a string object, not '{_type_name(value)}'")
    return value


class Function:
    """A code object captured with some environment: a dictionary of globals,
    default arguments, keyword-only defaults and a closure of cells."""

    __slots__ = (
        "code",
        "globals",
        "defaults",
        "kwdefaults",
        "closure",
        "doc",
        "name",
        "qualname",
        "module",
        "w_dict",
        "annotations",
        "__weakref__",
    )

    typedef: TypeDef

    def __init__(self, code: Code, globals: Namespace, qualname: str = "", *, closure: Sequence[Cell] = ()):
        self.code: Code = code
        # Shared with the defining module, never copied
        self.globals: Namespace = globals
        self.defaults: Optional[Tuple[Value, ...]] = None
        self.kwdefaults: Optional[Mapping[str, Value]] = None
        self.closure: Tuple[Cell, ...] = tuple(closure)
        assert not self.closure or len(self.closure) == len(code.freevars), (
            f"{code.name}() built with {len(self.closure)} closure cells for {len(code.freevars)} free vars"
        )
        self.doc: Value = code.getdocstring()
        self.module: Value = globals["__name__"] if "__name__" in globals else None
        self.name: str = code.name
        self.qualname: str = qualname or code.name
        self.w_dict: Optional[Mapping[str, Value]] = None
        self.annotations: Optional[Mapping[str, Value]] = None

    def __repr__(self) -> str:
        return f"<function {self.qualname} at {id(self):#x}>"

    # --- Calling ---
    def call(self, args: Sequence[Value] = (), kwargs: Optional[Mapping[str, Value]] = None) -> Value:
        """Run the code through the installed evaluator.

        Argument binding, arity checks and execution all belong to the evaluator;
        whatever it raises reaches the caller untouched.
        """
        if kwargs is None:
            kwargs = {}
        evaluate = get_evaluator()
        if trace_calls():
            logger.debug("call %s: %d positional, keywords=%s", self.qualname, len(args), sorted(kwargs))
        return evaluate(self.code, self.globals, {}, args, kwargs, self.defaults, self.kwdefaults, self.closure)

    def __call__(self, *args: Value, **kwargs: Value) -> Value:
        return self.call(args, kwargs)

    # --- Binding ---
    def bind(self, instance: Any, owner: Any = None) -> Function | Method:
        """Read this function off an owner: bound to instance, or itself when there is none."""
        if instance is None:
            return self
        if trace_calls():
            logger.debug("bind %s to %s instance", self.qualname, _type_name(instance))
        return Method(self, instance)

    def __get__(self, instance: Any, owner: Any = None) -> Function | Method:
        return self.bind(instance, owner)

    # --- Instance dictionary, used by the object model for unknown attributes ---
    def getdict(self, create: bool = False) -> Optional[Mapping[str, Value]]:
        if self.w_dict is None and create:
            self.w_dict = {}
        return self.w_dict

    # --- Accessors (see Function.typedef below) ---
    def fget_code(self) -> Code:
        return self.code

    def fset_code(self, value: Value) -> None:
        # Not legal to set __code__ to anything other than a code object
        if not isinstance(value, Code):
            raise KappaTypeError(f"__code__ must be set to a code object, not '{_type_name(value)}'")
        nfree = len(value.freevars)
        nclosure = len(self.closure)
        if nfree != nclosure:
            raise KappaValueError(f"{self.name}() requires a code object with {nclosure} free vars, not {nfree}")
        logger.debug("%s: __code__ replaced by %r", self.qualname, value)
        self.code = value

    def fget_defaults(self) -> Optional[Tuple[Value, ...]]:
        return self.defaults

    def fset_defaults(self, value: Value) -> None:
        # Any ordered sequence, but text is not a sequence of defaults
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
            raise KappaTypeError(f"__defaults__ must be set to a tuple object, not '{_type_name(value)}'")
        self.defaults = tuple(value)

    def fdel_defaults(self) -> None:
        self.defaults = None

    def fget_kwdefaults(self) -> Optional[Mapping[str, Value]]:
        return self.kwdefaults

    def fset_kwdefaults(self, value: Value) -> None:
        self.kwdefaults = _check_string_dict("__kwdefaults__", value)

    def fdel_kwdefaults(self) -> None:
        self.kwdefaults = None

    def fget_annotations(self) -> Optional[Mapping[str, Value]]:
        return self.annotations

    def fset_annotations(self, value: Value) -> None:
        self.annotations = _check_string_dict("__annotations__", value)

    def fdel_annotations(self) -> None:
        self.annotations = None

    def fget_dict(self) -> Optional[Mapping[str, Value]]:
        return self.w_dict

    def fset_dict(self, value: Value) -> None:
        self.w_dict = _check_string_dict("__dict__", value, MutableMapping)

    def fdel_dict(self) -> None:
        self.w_dict = None

    def fget_name(self) -> str:
        return self.name

    def fset_name(self, value: Value) -> None:
        self.name = _check_string("__name__", value)

    def fget_qualname(self) -> str:
        return self.qualname

    def fset_qualname(self, value: Value) -> None:
        self.qualname = _check_string("__qualname__", value)

    def fget_doc(self) -> Value:
        return self.doc

    def fset_doc(self, value: Value) -> None:
        self.doc = value

    def fdel_doc(self) -> None:
        self.doc = None

    def fget_module(self) -> Value:
        return self.module

    def fset_module(self, value: Value) -> None:
        self.module = value

    def fdel_module(self) -> None:
        self.module = None

    def fget_globals(self) -> Namespace:
        return self.globals

    def fget_closure(self) -> Optional[Tuple[Cell, ...]]:
        return self.closure or None


def make_function(
    code: Code,
    globals: Namespace,
    qualname: str = "",
    defaults: Optional[Sequence[Value]] = None,
    kwdefaults: Optional[Mapping[str, Value]] = None,
    annotations: Optional[Mapping[str, Value]] = None,
    closure: Sequence[Cell] = (),
) -> Function:
    """Build a function the way a MAKE_FUNCTION instruction would.

    Unlike the bare constructor, the closure is checked against the code's free
    variables and every optional part goes through its validating setter.
    """
    closure = tuple(closure)
    for cell in closure:
        if not isinstance(cell, Cell):
            raise KappaTypeError(f"closure must contain cell objects, not '{_type_name(cell)}'")
    if len(closure) != len(code.freevars):
        raise KappaValueError(
            f"{code.name}() requires a closure of {len(code.freevars)} cells, not {len(closure)}"
        )
    func = Function(code, globals, qualname, closure=closure)
    if defaults is not None:
        func.fset_defaults(defaults)
    if kwdefaults is not None:
        func.fset_kwdefaults(kwdefaults)
    if annotations is not None:
        func.fset_annotations(annotations)
    return func


Function.typedef = TypeDef(
    "function",
    Function,
    doc="function(code, globals, qualname='')\n\nCreate a function object from a code object and a dictionary.",
    __code__=GetSetProperty(Function.fget_code, Function.fset_code),
    __defaults__=GetSetProperty(Function.fget_defaults, Function.fset_defaults, Function.fdel_defaults),
    __kwdefaults__=GetSetProperty(Function.fget_kwdefaults, Function.fset_kwdefaults, Function.fdel_kwdefaults),
    __annotations__=GetSetProperty(
        Function.fget_annotations, Function.fset_annotations, Function.fdel_annotations
    ),
    __dict__=GetSetProperty(Function.fget_dict, Function.fset_dict, Function.fdel_dict),
    __name__=GetSetProperty(Function.fget_name, Function.fset_name),
    __qualname__=GetSetProperty(Function.fget_qualname, Function.fset_qualname),
    __doc__=GetSetProperty(Function.fget_doc, Function.fset_doc, Function.fdel_doc),
    __module__=GetSetProperty(Function.fget_module, Function.fset_module, Function.fdel_module),
    __globals__=GetSetProperty(Function.fget_globals),
    __closure__=GetSetProperty(Function.fget_closure),
)
