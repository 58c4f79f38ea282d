from __future__ import annotations

from tinylisp import SExpression


class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""
    pass

class ReaderError(TinyLispError):
    """ Raised when source text cannot be read into an expression"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position

class IncompleteInput(ReaderError):
    """ Raised when the source ends inside an unclosed list"""

class InvalidSymbol(TinyLispError):
    """ Raised when something other than a Symbol is used as a binding name"""

class UnboundSymbol(TinyLispError, KeyError):
    """ Raised when looking up a name that has no binding"""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""

class EvalError(TinyLispError):
    """ Base class for errors raised while evaluating an expression"""

class TypeMismatch(EvalError):
    """ Raised when a conditional's condition does not evaluate to a Boolean"""

    def __init__(self, form: SExpression, value: SExpression):
        from tinylisp.printer import to_string
        super().__init__(
            f"type mismatch: condition of {to_string(form)} evaluated to "
            f"{to_string(value)}, expected #t or #f"
        )
        self.form = form
        self.value = value

class EvaluationDepthExceeded(EvalError):
    """ Raised when expression nesting exhausts the interpreter's call stack"""
