"""Bound methods: a function paired with the instance it was read from."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from kappa import Value
from kappa.types.descriptor import GetSetProperty, TypeDef


class Method:
    """A function bound to a specific instance.

    Calling the method calls the function with the instance prepended to the
    positional arguments.
    """

    __slots__ = ("function", "instance", "__weakref__")

    typedef: TypeDef

    def __init__(self, function: Any, instance: Any):
        self.function = function
        self.instance = instance

    def call(self, args: Sequence[Value] = (), kwargs: Optional[Mapping[str, Value]] = None) -> Value:
        if kwargs is None:
            kwargs = {}
        return self.function(self.instance, *args, **kwargs)

    def __call__(self, *args: Value, **kwargs: Value) -> Value:
        return self.call(args, kwargs)

    def bind(self, instance: Any, owner: Any = None) -> Method:
        # already bound
        return self

    def __get__(self, instance: Any, owner: Any = None) -> Method:
        return self.bind(instance, owner)

    def _function_attr(self, name: str) -> Value:
        from kappa.objspace import get_attribute
        return get_attribute(self.function, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Method):
            return NotImplemented
        return self.function == other.function and self.instance is other.instance

    def __hash__(self) -> int:
        return hash((self.function, id(self.instance)))

    def __repr__(self) -> str:
        try:
            qualname = self._function_attr("__qualname__")
        except AttributeError:
            qualname = "?"
        return f"<bound method {qualname} of {self.instance!r}>"

    def fget_func(self) -> Any:
        return self.function

    def fget_self(self) -> Any:
        return self.instance

    def fget_name(self) -> Value:
        return self._function_attr("__name__")

    def fget_qualname(self) -> Value:
        return self._function_attr("__qualname__")

    def fget_doc(self) -> Value:
        return self._function_attr("__doc__")


Method.typedef = TypeDef(
    "method",
    Method,
    doc="method(function, instance)\n\nCreate a bound instance method object.",
    __func__=GetSetProperty(Method.fget_func),
    __self__=GetSetProperty(Method.fget_self),
    __name__=GetSetProperty(Method.fget_name),
    __qualname__=GetSetProperty(Method.fget_qualname),
    __doc__=GetSetProperty(Method.fget_doc),
)
