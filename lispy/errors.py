from __future__ import annotations


class LispyError(Exception):
    """ Base class for all lispy errors"""
    pass


class LispySyntaxError(LispyError):
    """ Raised by the reader on malformed input"""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line})"


class LispyEvaluationError(LispyError):
    """ Raised when a well-formed expression cannot be evaluated"""


class LispyUnboundSymbol(LispyEvaluationError):
    """ Raised when a symbol is evaluated before it is bound"""


class LispyUnboundVariable(LispyEvaluationError):
    """ Raised when setvalue targets a symbol that is not bound"""


class LispyNotCallable(LispyEvaluationError):
    """ Raised when the head of an application is not a function"""


class LispyArityError(LispyEvaluationError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class LispyTypeError(LispyEvaluationError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class LispyDepthError(LispyEvaluationError):
    """ Raised when evaluation nests deeper than the configured ceiling"""


class LispyInternalError(LispyError):
    """ Raised when a value that must never escape the reader reaches the printer"""


class LispyExit(SystemExit):
    """ Raised by (exit). Not a LispyError: it must unwind every handler."""

    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status
