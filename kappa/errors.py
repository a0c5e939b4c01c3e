class KappaError(Exception):
    """ Base class for all kappa errors"""
    pass

class KappaTypeError(KappaError, TypeError):
    """ Raised when a value has the wrong type for the slot it is assigned to"""

class KappaValueError(KappaError, ValueError):
    """ Raised when a value has the right type but breaks a structural invariant"""

class KappaAttributeError(KappaError, AttributeError):
    """ Raised when an attribute is missing, readonly or cannot be deleted"""

class KappaArityError(KappaTypeError):
    """ Raised when the arguments passed to a function do not match its parameters"""

class KappaNameError(KappaError, NameError):
    """ Raised when a name or captured variable is read before it is bound"""

class KappaEvaluatorError(KappaError):
    """ Raised when no evaluator can run a code object"""
