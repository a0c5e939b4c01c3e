# Core type aliases for kappa's object model.
# Runtime values are plain Python objects; nothing here wraps them.
#
# Naming guidance:
# - Value:     any runtime value flowing through a function call.
# - Namespace: a string-keyed mapping used for globals, locals and __dict__.

import logging
from typing import Any, Callable, MutableMapping

# Runtime value alias
Value = Any
Namespace = MutableMapping[str, Value]

# Evaluator function type: (code, globals, locals, args, kwargs, defaults, kwdefaults, closure) -> Value
EvaluatorFn = Callable[..., Value]

logging.getLogger(__name__).addHandler(logging.NullHandler())
