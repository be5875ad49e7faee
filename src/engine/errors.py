"""
Exceptions raised by the expression engine.
All of them are validation failures: nothing is retried, callers decide how to report.
"""


class ExpressionError(ValueError):
    """Base class for every evaluation failure."""


class EmptyStackError(ExpressionError):
    """Pop or peek attempted on an empty stack."""

    def __init__(self, message: str = "stack is empty"):
        super().__init__(message)


class InsufficientOperandsError(ExpressionError):
    """An operator needs more operands than the stack holds."""

    def __init__(self, operator: str, required: int, available: int):
        self.operator = operator
        self.required = required
        self.available = available
        super().__init__(
            f"insufficient operands for {operator} operation: "
            f"need {required}, have {available}"
        )


class UnknownTokenError(ExpressionError):
    """Token is neither a known operator nor a parseable literal."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown token: {token}")


class InvalidExpressionError(ExpressionError):
    """Evaluation finished without reducing the stack to a single value."""

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(f"invalid expression: expected 1 result, got {remaining}")
