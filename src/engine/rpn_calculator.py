"""
Reverse Polish Notation calculator over a numeric stack.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import logging

from .errors import InsufficientOperandsError, InvalidExpressionError, UnknownTokenError
from .operators import ArithmeticOperator
from .stack import Stack

logger = logging.getLogger(__name__)

ArithmeticItem = Union[float, ArithmeticOperator]


@dataclass(frozen=True)
class EvaluationStep:
    """
    Stack state recorded after one token was processed.

    Attributes:
        token: Token that was processed
        stack: Stack contents afterwards, bottom first
    """
    token: str
    stack: tuple


class RPNEvaluator:
    """
    Evaluates space-delimited RPN arithmetic, e.g. ``"3 4 + 5 6 + *"``.

    Supported operators: ``+ - * / ^ **``. Every other token must parse
    as a floating-point literal.
    """

    def __init__(self):
        self.stack: Stack[float] = Stack()

    @staticmethod
    def resolve(token: str) -> Optional[ArithmeticItem]:
        """Map a token to its operator or numeric value, or None if it is neither."""
        op = ArithmeticOperator.from_token(token)
        if op is not None:
            return op
        try:
            return float(token)
        except ValueError:
            return None

    def evaluate_token(self, token: str):
        """
        Process a single token: apply an operator or push a literal.

        Args:
            token: Operator symbol or numeric literal

        Raises:
            InsufficientOperandsError: Operator with fewer than two values on the stack
            UnknownTokenError: Token is neither an operator nor a number
        """
        self._apply(token, self.resolve(token))

    def _apply(self, token: str, item: Optional[ArithmeticItem]):
        if item is None:
            raise UnknownTokenError(token)
        if isinstance(item, ArithmeticOperator):
            self._apply_binary(item, token)
        else:
            self.stack.push(item)

    def _apply_binary(self, op: ArithmeticOperator, token: str):
        if self.stack.size() < op.arity:
            raise InsufficientOperandsError(token, op.arity, self.stack.size())

        # Top of stack is the right-hand operand
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(op.apply(a, b))

    def evaluate_expression(self, expression: str) -> float:
        """
        Evaluate a whole RPN expression.

        Args:
            expression: Whitespace-separated tokens

        Returns:
            The single value left on the stack

        Raises:
            InvalidExpressionError: Zero or several values remain at the end
        """
        result, _ = self._run(expression, record=False)
        return result

    def trace_expression(self, expression: str) -> Tuple[float, List[EvaluationStep]]:
        """Evaluate and also return the stack after every token."""
        return self._run(expression, record=True)

    def _run(self, expression: str, record: bool) -> Tuple[float, List[EvaluationStep]]:
        resolved = [(token, self.resolve(token)) for token in expression.split()]

        self.stack.clear()
        steps: List[EvaluationStep] = []

        for token, item in resolved:
            self._apply(token, item)
            if record:
                steps.append(EvaluationStep(token, self.stack.snapshot()))

        if self.stack.size() != 1:
            raise InvalidExpressionError(self.stack.size())

        result = self.stack.peek()
        logger.debug(f"RPN '{expression}' evaluated to {result}")
        return result, steps


def evaluate_arithmetic_rpn(expression: str) -> float:
    """Evaluate an RPN arithmetic expression with a fresh evaluator."""
    return RPNEvaluator().evaluate_expression(expression)
