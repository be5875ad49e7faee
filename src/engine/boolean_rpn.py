"""
Boolean RPN evaluation over T/F literals and AND/OR/NOT.
"""

from typing import Iterable, List, Optional, Tuple, Union

from .errors import InsufficientOperandsError, InvalidExpressionError, UnknownTokenError
from .operators import FALSE_LITERAL, TRUE_LITERAL, BooleanOperator
from .rpn_calculator import EvaluationStep
from .stack import Stack

BooleanItem = Union[bool, BooleanOperator]

_LITERALS = {TRUE_LITERAL: True, FALSE_LITERAL: False}


class BooleanRPNEvaluator:
    """Evaluates postfix token sequences such as ``['T', 'F', 'OR', 'T', 'AND']``."""

    def __init__(self):
        self.stack: Stack[bool] = Stack()

    @staticmethod
    def resolve(token: str) -> Optional[BooleanItem]:
        """Map a token to its truth value or operator, or None if it is neither."""
        if token in _LITERALS:
            return _LITERALS[token]
        return BooleanOperator.from_token(token)

    def evaluate_token(self, token: str):
        """
        Process one postfix token.

        Raises:
            InsufficientOperandsError: Operator without enough operands
            UnknownTokenError: Token is not T, F, AND, OR or NOT
        """
        self._apply(token, self.resolve(token))

    def _apply(self, token: str, item: Optional[BooleanItem]):
        if item is None:
            raise UnknownTokenError(token)
        if isinstance(item, bool):
            self.stack.push(item)
            return

        if self.stack.size() < item.arity:
            raise InsufficientOperandsError(item.value, item.arity, self.stack.size())

        if item.arity == 1:
            self.stack.push(item.apply(self.stack.pop()))
        else:
            second = self.stack.pop()
            first = self.stack.pop()
            self.stack.push(item.apply(first, second))

    def evaluate_sequence(self, tokens: Iterable[str]) -> bool:
        """
        Evaluate a full postfix sequence.

        Returns:
            The single remaining truth value

        Raises:
            InvalidExpressionError: Stack does not hold exactly one value at the end
        """
        result, _ = self._run(tokens, record=False)
        return result

    def trace_sequence(self, tokens: Iterable[str]) -> Tuple[bool, List[EvaluationStep]]:
        """Evaluate and also return the stack after every token."""
        return self._run(tokens, record=True)

    def _run(self, tokens: Iterable[str], record: bool) -> Tuple[bool, List[EvaluationStep]]:
        # Tokens are classified once; unknown ones raise when the loop reaches them
        resolved = [(token, self.resolve(token)) for token in tokens]

        self.stack.clear()
        steps: List[EvaluationStep] = []

        for token, item in resolved:
            self._apply(token, item)
            if record:
                steps.append(EvaluationStep(token, self.stack.snapshot()))

        if self.stack.size() != 1:
            raise InvalidExpressionError(self.stack.size())

        return self.stack.pop(), steps
