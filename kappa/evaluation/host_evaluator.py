from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from kappa import Namespace, Value
from kappa.errors import KappaEvaluatorError
from kappa.evaluation.bind import bind_arguments
from kappa.evaluation.frame import Frame
from kappa.types.cell import Cell
from kappa.types.code import Code


class HostEvaluator:
    """
    Evaluator for code objects whose body is a host Python callable.

    Binds the call's arguments into the fresh locals, wraps everything in a
    Frame, and runs code.body(frame). Whatever the body raises propagates.
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
        if code.body is None:
            raise KappaEvaluatorError(f"code object {code.name!r} has no host body to run")
        bind_arguments(code, args, kwargs, defaults, kwdefaults, locals)
        frame = Frame(code, globals, locals, closure)
        return code.body(frame)

    def __repr__(self) -> str:
        return "<HostEvaluator>"
