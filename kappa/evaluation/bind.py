"""Argument binding for the host evaluator.

Single source of truth for how the arguments of one call map onto the
parameters of a code object:

- positional arguments fill the leading parameters in order
- keyword arguments fill parameters by name
- trailing positional parameters left unfilled take their defaults
- keyword-only parameters left unfilled take their kwdefaults
- surplus positionals go to *args and unknown keywords to **kwargs, when the
  code declares them

This module is compiled by Cython when a compiler is available.
"""

from __future__ import annotations

from kappa.errors import KappaArityError


def _format_names(names):
    quoted = [f"'{n}'" for n in names]
    if len(quoted) == 1:
        return quoted[0]
    if len(quoted) == 2:
        return f"{quoted[0]} and {quoted[1]}"
    return ", ".join(quoted[:-1]) + ", and " + quoted[-1]


def _missing_message(name, missing, kind):
    plural = "s" if len(missing) > 1 else ""
    return f"{name}() missing {len(missing)} required {kind} argument{plural}: {_format_names(missing)}"


def _too_many_message(code, nargs, defaults):
    argcount = code.argcount
    ndefaults = len(defaults) if defaults else 0
    if ndefaults and ndefaults <= argcount:
        takes = f"from {argcount - ndefaults} to {argcount}"
    else:
        takes = str(argcount)
    plural = "" if takes == "1" else "s"
    was = "was" if nargs == 1 else "were"
    return f"{code.name}() takes {takes} positional argument{plural} but {nargs} {was} given"


def bind_arguments(code, args, kwargs, defaults=None, kwdefaults=None, scope=None):
    """Bind args/kwargs to code's parameters, writing them into scope.

    Returns the scope mapping. Raises KappaArityError when the call does not
    fit the parameter list; scope may be partially filled in that case.
    """
    if scope is None:
        scope = {}
    name = code.name
    positional = code.positional_names
    kwonly = code.kwonly_names
    argcount = code.argcount
    args = tuple(args)
    nargs = len(args)

    # Positional parameters, then the *args overflow
    for i in range(min(nargs, argcount)):
        scope[positional[i]] = args[i]
    if nargs > argcount:
        if not code.varargs:
            raise KappaArityError(_too_many_message(code, nargs, defaults))
        scope[code.varargs_name] = args[argcount:]
    elif code.varargs:
        scope[code.varargs_name] = ()

    # Keywords
    extra = None
    if code.varkeywords:
        extra = {}
        scope[code.varkeywords_name] = extra
    if kwargs:
        for key, value in kwargs.items():
            if key in positional or key in kwonly:
                if key in scope:
                    raise KappaArityError(f"{name}() got multiple values for argument '{key}'")
                scope[key] = value
            elif extra is not None:
                extra[key] = value
            else:
                raise KappaArityError(f"{name}() got an unexpected keyword argument '{key}'")

    # Trailing defaults for positional parameters nobody supplied
    if nargs < argcount:
        ndefaults = len(defaults) if defaults else 0
        first_default = argcount - ndefaults
        missing = []
        for i in range(nargs, argcount):
            pname = positional[i]
            if pname in scope:
                continue
            if i >= first_default:
                scope[pname] = defaults[i - first_default]
            else:
                missing.append(pname)
        if missing:
            raise KappaArityError(_missing_message(name, missing, "positional"))

    # Keyword-only defaults
    if kwonly:
        missing = []
        for pname in kwonly:
            if pname in scope:
                continue
            if kwdefaults is not None and pname in kwdefaults:
                scope[pname] = kwdefaults[pname]
            else:
                missing.append(pname)
        if missing:
            raise KappaArityError(_missing_message(name, missing, "keyword-only"))

    return scope
