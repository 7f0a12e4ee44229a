

class DotLispError(Exception):
    """ Base class for all dotlisp errors"""
    pass


class EvalError(DotLispError):
    """ Base class for errors raised while evaluating an expression"""
    pass


# -------------------------------
# Categories
# -------------------------------
class DotLispSyntaxError(DotLispError):
    """ Raised when the input is not a well formed s-expression"""

class DotLispInvalidSymbol(EvalError):
    """ Raised when an invalid symbol is used"""

class DotLispUnboundSymbol(EvalError):
    """ Raised when a symbol is used before it is bound"""

class DotLispFormError(EvalError):
    """ Raised when a special form or call has the wrong shape"""

class DotLispArityError(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class DotLispTypeError(EvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class DotLispArithmeticError(EvalError):
    """ Raised when integer arithmetic cannot be performed"""

class DotLispNameError(EvalError):
    """ Raised when a function is used before it is defined"""


# -------------------------------
# Parse errors
# -------------------------------
class MalformedInput(DotLispSyntaxError):
    pass


# -------------------------------
# Identifier errors
# -------------------------------
class InvalidIdentifier(DotLispInvalidSymbol):
    def __init__(self, token: str):
        super().__init__(f"'{token}' is not a valid identifier")
        self.token = token

class IllegalFunctionName(DotLispInvalidSymbol):
    def __init__(self, rendered: str):
        super().__init__(f"'{rendered}' is an illegal function name")
        self.rendered = rendered

class UnboundIdentifier(DotLispUnboundSymbol):
    def __init__(self, name: str):
        super().__init__(f"{name} is not bound")
        self.name = name


# -------------------------------
# Form errors
# -------------------------------
class MalformedConditional(DotLispFormError):
    pass

class MalformedDefun(DotLispFormError):
    pass

class NestedDefunForbidden(DotLispFormError):
    def __init__(self):
        super().__init__("no nested DEFUNs allowed")

class BadArguments(DotLispFormError):
    def __init__(self, name: str):
        super().__init__(f"'{name}' has bad arguments")
        self.name = name


# -------------------------------
# Arity, type and arithmetic errors
# -------------------------------
class ArityMismatch(DotLispArityError):
    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(
            f"{name} expects {expected} parameters, but {actual} were provided"
        )
        self.name = name
        self.expected = expected
        self.actual = actual

class OperandNotPair(DotLispTypeError):
    def __init__(self, name: str):
        super().__init__(f"{name} cannot be performed on an atom")
        self.name = name

class AtomsOnly(DotLispTypeError):
    def __init__(self, name: str = "EQ"):
        super().__init__(f"{name}: atoms only")
        self.name = name

class NonIntegerOperand(DotLispTypeError):
    def __init__(self, name: str):
        super().__init__(f"{name}: integers only")
        self.name = name

class IntegerTooLarge(DotLispArithmeticError):
    """ Raised when an integer has more digits than the host can convert"""
    def __init__(self, name: str):
        super().__init__(f"{name}: integer too large")
        self.name = name

class DivisionByZero(DotLispArithmeticError):
    def __init__(self, name: str):
        super().__init__(f"{name}: division by zero")
        self.name = name


# -------------------------------
# Lookup errors
# -------------------------------
class UndefinedFunction(DotLispNameError):
    def __init__(self, name: str):
        super().__init__(f"'{name}' is not defined")
        self.name = name

class NoMatchingClause(DotLispNameError):
    def __init__(self):
        super().__init__("no conditional clause evaluated to T")


class RecursionDepthExceeded(EvalError):
    """ Raised when evaluation exhausts the Python call stack"""
    def __init__(self):
        super().__init__("maximum recursion depth exceeded")
