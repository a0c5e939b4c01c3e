"""Code artifacts: the immutable, shareable half of a function.

One Code object exists per source fragment; any number of Function objects
may reference it, each with its own globals, defaults and closure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from kappa.errors import KappaValueError


@dataclass(frozen=True, eq=False)
class Code:
    """A compiled function body.

    consts[0], when it is a string, doubles as the docstring. freevars lists the
    names captured from enclosing scopes; its length is the closure arity every
    Function built from this code must match.

    varnames is laid out positional names first, then keyword-only names, then
    the *args name (if varargs) and the **kwargs name (if varkeywords).
    """

    name: str
    consts: Tuple[Any, ...] = ()
    freevars: Tuple[str, ...] = ()
    varnames: Tuple[str, ...] = ()
    argcount: int = 0
    kwonlyargcount: int = 0
    varargs: bool = False
    varkeywords: bool = False
    # Host-executable body, called as body(frame) by the host evaluator
    body: Optional[Callable[..., Any]] = None
    filename: str = "<unknown>"

    def __post_init__(self):
        # Accept lists from callers but keep the artifact immutable
        object.__setattr__(self, "consts", tuple(self.consts))
        object.__setattr__(self, "freevars", tuple(self.freevars))
        object.__setattr__(self, "varnames", tuple(self.varnames))
        needed = self.argcount + self.kwonlyargcount + int(self.varargs) + int(self.varkeywords)
        if len(self.varnames) < needed:
            raise KappaValueError(
                f"code object {self.name!r} declares {needed} parameters but only {len(self.varnames)} varnames"
            )

    @property
    def positional_names(self) -> Tuple[str, ...]:
        return self.varnames[: self.argcount]

    @property
    def kwonly_names(self) -> Tuple[str, ...]:
        return self.varnames[self.argcount : self.argcount + self.kwonlyargcount]

    @property
    def varargs_name(self) -> Optional[str]:
        if not self.varargs:
            return None
        return self.varnames[self.argcount + self.kwonlyargcount]

    @property
    def varkeywords_name(self) -> Optional[str]:
        if not self.varkeywords:
            return None
        return self.varnames[self.argcount + self.kwonlyargcount + int(self.varargs)]

    def getdocstring(self) -> Any:
        if self.consts and isinstance(self.consts[0], str):
            return self.consts[0]
        return None

    def __repr__(self) -> str:
        return f"<code object {self.name} at {id(self):#x}, file {self.filename!r}>"
