from __future__ import annotations

import importlib
import logging
from typing import Optional

from kappa import EvaluatorFn
from kappa.config import get_evaluator_spec
from kappa.errors import KappaEvaluatorError

logger = logging.getLogger(__name__)

# NOTE: For now this is process-global, like the rest of the host object model.
_current_evaluator: Optional[EvaluatorFn] = None


def set_evaluator(evaluator: Optional[EvaluatorFn]) -> None:
    global _current_evaluator
    _current_evaluator = evaluator


def reset_evaluator() -> None:
    set_evaluator(None)


def get_evaluator() -> EvaluatorFn:
    """Return the installed evaluator, resolving the configured default on first use."""
    global _current_evaluator
    if _current_evaluator is None:
        _current_evaluator = load_default_evaluator()
    return _current_evaluator


def load_default_evaluator() -> EvaluatorFn:
    spec = get_evaluator_spec()
    if spec is None:
        from kappa.evaluation.host_evaluator import HostEvaluator
        logger.debug("Using the host evaluator")
        return HostEvaluator()
    return load_evaluator(spec)


def load_evaluator(spec: str) -> EvaluatorFn:
    """Import 'module:attribute' and return the evaluator it names.

    A class is instantiated with no arguments; any other callable is used as-is.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise KappaEvaluatorError(f"Evaluator must be given as 'module:attribute', not {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise KappaEvaluatorError(f"Cannot import evaluator module {module_name!r}: {e}") from e
    try:
        target = getattr(module, attr)
    except AttributeError:
        raise KappaEvaluatorError(f"Module {module_name!r} has no evaluator {attr!r}") from None
    if isinstance(target, type):
        target = target()
    if not callable(target):
        raise KappaEvaluatorError(f"Evaluator {spec!r} is not callable")
    logger.debug("Loaded evaluator %s", spec)
    return target
