class SkimError(Exception):
    """ Base class for all Skim errors"""
    pass

class SkimSyntaxError(SkimError):
    """ Raised by the lexer or reader for malformed program text"""

class SkimEvaluationError(SkimError):
    """ Raised when evaluating a form fails"""

class SkimUnboundVariable(SkimEvaluationError):
    """ Raised when a symbol is looked up or set before it is bound"""

class SkimInvalidSymbol(SkimEvaluationError):
    """ Raised when a non-symbol is used where a name is required"""

class SkimArityError(SkimEvaluationError):
    """ Raised when the number of arguments passed to a form or procedure is incorrect"""

class SkimTypeError(SkimEvaluationError):
    """ Raised when the types of arguments passed to a procedure are incorrect"""

class SkimBooleanError(SkimTypeError):
    """ Raised when a condition does not evaluate to 0/1"""

class SkimDivideByZero(SkimEvaluationError):
    """ Raised by / and modulo when the divisor is zero"""

class SkimNotCallable(SkimEvaluationError):
    """ Raised when applying a value that is neither a closure nor a primitive"""

class SkimIntegerOverflow(SkimEvaluationError):
    """ Raised when an integer result does not fit in 64 bits"""

class SkimConfigError(SkimError):
    """ Raised when a SKIM_* environment setting cannot be used"""
