from __future__ import annotations

from .bind import bind_arguments
from .evaluator import Evaluator, evaluate
from .frame import Frame
from .host_evaluator import HostEvaluator

__all__ = [
    "bind_arguments",
    "Evaluator",
    "evaluate",
    "Frame",
    "HostEvaluator",
]
