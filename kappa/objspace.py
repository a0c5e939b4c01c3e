"""Attribute access as the host object model performs it.

For kappa objects the type's TypeDef is consulted first, then the instance
dictionary. Objects without a TypeDef are host-native and use Python's own
attribute protocol.
"""

from __future__ import annotations

from typing import Any, Optional

from kappa import Value
from kappa.errors import KappaAttributeError
from kappa.types.descriptor import GetSetProperty, TypeDef


def get_typedef(obj: Any) -> Optional[TypeDef]:
    return getattr(type(obj), "typedef", None)


def type_name(obj: Any) -> str:
    typedef = get_typedef(obj)
    return typedef.name if typedef is not None else type(obj).__name__


def lookup_descriptor(obj: Any, name: str) -> Optional[GetSetProperty]:
    typedef = get_typedef(obj)
    if typedef is None:
        return None
    return typedef.lookup(name)


def _getdict(obj: Any, create: bool = False):
    getdict = getattr(obj, "getdict", None)
    if getdict is None:
        return None
    return getdict(create)


def _no_attribute(obj: Any, name: str) -> KappaAttributeError:
    return KappaAttributeError(f"'{type_name(obj)}' object has no attribute '{name}'")


def get_attribute(obj: Any, name: str) -> Value:
    typedef = get_typedef(obj)
    if typedef is None:
        try:
            return getattr(obj, name)
        except AttributeError:
            raise _no_attribute(obj, name) from None
    descr = typedef.lookup(name)
    if descr is not None:
        return descr.get(obj)
    w_dict = _getdict(obj)
    if w_dict is not None and name in w_dict:
        return w_dict[name]
    raise _no_attribute(obj, name)


def set_attribute(obj: Any, name: str, value: Value) -> None:
    typedef = get_typedef(obj)
    if typedef is None:
        try:
            setattr(obj, name, value)
        except AttributeError:
            raise _no_attribute(obj, name) from None
        return
    descr = typedef.lookup(name)
    if descr is not None:
        descr.set(obj, value)
        return
    w_dict = _getdict(obj, create=True)
    if w_dict is None:
        raise _no_attribute(obj, name)
    w_dict[name] = value


def delete_attribute(obj: Any, name: str) -> None:
    typedef = get_typedef(obj)
    if typedef is None:
        try:
            delattr(obj, name)
        except AttributeError:
            raise _no_attribute(obj, name) from None
        return
    descr = typedef.lookup(name)
    if descr is not None:
        descr.delete(obj)
        return
    w_dict = _getdict(obj)
    if w_dict is None or name not in w_dict:
        raise _no_attribute(obj, name)
    del w_dict[name]


def has_attribute(obj: Any, name: str) -> bool:
    try:
        get_attribute(obj, name)
    except AttributeError:
        return False
    return True
