from typing import Optional


class ExpressionError(Exception):
    """Base class for everything that can abort a single expression request."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        return self.message


class ParseError(ExpressionError, ValueError):
    pass


class EvaluationError(ExpressionError, ArithmeticError):
    pass


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)
