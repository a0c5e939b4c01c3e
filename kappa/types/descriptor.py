"""Attribute descriptors for kappa objects.

A TypeDef is the fixed table of named accessors a class exposes to the host
object model. Each entry is a GetSetProperty with a getter and an optional
setter and deleter. Tables are built once, when the defining module is
imported, and are the only dispatch point for the names they list; anything
else an object carries lives in its instance dictionary.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional

from kappa import Value
from kappa.errors import KappaAttributeError, KappaTypeError

Getter = Callable[[Any], Value]
Setter = Callable[[Any, Value], None]
Deleter = Callable[[Any], None]


class GetSetProperty:
    """One named accessor: get always, set and delete when provided."""

    __slots__ = ("fget", "fset", "fdel", "doc", "name", "reqcls")

    def __init__(
        self,
        fget: Getter,
        fset: Optional[Setter] = None,
        fdel: Optional[Deleter] = None,
        doc: Optional[str] = None,
    ):
        self.fget = fget
        self.fset = fset
        self.fdel = fdel
        self.doc = doc
        # Filled in when the owning TypeDef is built
        self.name = "<generic property>"
        self.reqcls: Optional[type] = None

    def _typecheck(self, obj: Any) -> None:
        if self.reqcls is not None and not isinstance(obj, self.reqcls):
            raise KappaTypeError(
                f"descriptor '{self.name}' for '{self.reqcls.__name__}' objects "
                f"doesn't apply to a '{type(obj).__name__}' object"
            )

    def get(self, obj: Any) -> Value:
        self._typecheck(obj)
        return self.fget(obj)

    def set(self, obj: Any, value: Value) -> None:
        self._typecheck(obj)
        if self.fset is None:
            raise KappaAttributeError(f"readonly attribute '{self.name}'")
        self.fset(obj, value)

    def delete(self, obj: Any) -> None:
        self._typecheck(obj)
        if self.fdel is None:
            raise KappaAttributeError(f"cannot delete attribute '{self.name}'")
        self.fdel(obj)

    @property
    def is_writable(self) -> bool:
        return self.fset is not None

    @property
    def is_deletable(self) -> bool:
        return self.fdel is not None

    def __repr__(self) -> str:
        owner = self.reqcls.__name__ if self.reqcls is not None else "?"
        return f"<attribute '{self.name}' of '{owner}' objects>"


class TypeDef:
    """The accessor table for one kappa type, keyed by attribute name."""

    def __init__(self, name: str, cls: Optional[type] = None, doc: Optional[str] = None, **rawdict: GetSetProperty):
        self.name = name
        self.cls = cls
        self.doc = doc
        self.rawdict: Dict[str, GetSetProperty] = {}
        for key, prop in rawdict.items():
            if not isinstance(prop, GetSetProperty):
                raise TypeError(f"TypeDef {name!r}: {key} must be a GetSetProperty, not {type(prop).__name__}")
            prop.name = key
            prop.reqcls = cls
            self.rawdict[key] = prop

    def lookup(self, name: str) -> Optional[GetSetProperty]:
        return self.rawdict.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.rawdict

    def __iter__(self) -> Iterator[str]:
        return iter(self.rawdict)

    def __len__(self) -> int:
        return len(self.rawdict)

    def __repr__(self) -> str:
        return f"<TypeDef {self.name!r} ({len(self.rawdict)} attributes)>"
