from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence, Tuple

from kappa import Namespace, Value
from kappa.runtime_context import get_evaluator
from kappa.types.cell import Cell
from kappa.types.code import Code


class Evaluator(Protocol):
    """Anything that can run a code object for a function call.

    Failures raised here are opaque to the function object and reach the
    caller unchanged.
    """

    def __call__(
        self,
        code: Code,
        globals: Namespace,
        locals: Namespace,
        args: Sequence[Value],
        kwargs: Mapping[str, Value],
        defaults: Optional[Tuple[Value, ...]],
        kwdefaults: Optional[Mapping[str, Value]],
        closure: Tuple[Cell, ...],
    ) -> Value:
        ...


def evaluate(
    code: Code,
    globals: Namespace,
    locals: Namespace,
    args: Sequence[Value] = (),
    kwargs: Optional[Mapping[str, Value]] = None,
    defaults: Optional[Tuple[Value, ...]] = None,
    kwdefaults: Optional[Mapping[str, Value]] = None,
    closure: Tuple[Cell, ...] = (),
) -> Value:
    """Run code through the currently installed evaluator."""
    return get_evaluator()(
        code, globals, locals, args, kwargs if kwargs is not None else {}, defaults, kwdefaults, closure
    )
