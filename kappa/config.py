from __future__ import annotations
import logging
import os
from typing import Optional

_TRUTHY = ("1", "true", "yes", "on")

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def trace_calls() -> bool:
    """True when every function call and bind should be logged at DEBUG."""
    return flag_from_env('KAPPA_TRACE_CALLS')


def get_evaluator_spec() -> Optional[str]:
    """The 'module:attribute' name of the default evaluator, if configured."""
    raw = os.environ.get('KAPPA_EVALUATOR')
    if not raw or not raw.strip():
        return None
    return raw.strip()


def get_log_level() -> int:
    raw = os.environ.get('KAPPA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for names it does not know
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> logging.Logger:
    """Apply KAPPA_LOG_LEVEL to the package logger and return it."""
    logger = logging.getLogger('kappa')
    logger.setLevel(get_log_level())
    return logger
