"""
Fixed operator tables for the arithmetic and boolean evaluators.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Optional
import operator

import numpy as np

TRUE_LITERAL = 'T'
FALSE_LITERAL = 'F'
OPEN_PAREN = '('
CLOSE_PAREN = ')'

# Operator precedence for boolean queries; '(' sits below every operator
PRECEDENCE = MappingProxyType({
    'NOT': 3,
    'AND': 2,
    'OR': 1,
    OPEN_PAREN: 0,
})


def _divide(a: float, b: float) -> float:
    """IEEE division: x/0 gives +-inf, 0/0 gives nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(a) / np.float64(b))


# Multiplications carried out one by one before the rest of the exponent
# is applied in a single np.power call
EXACT_POWER_STEPS = 1 << 16


def _flip_for_parity(value: float, negative_base: bool, remaining: int) -> float:
    """Sign of value after `remaining` more multiplications by a base of that sign."""
    return -value if negative_base and remaining % 2 else value


def _repeated_power(base: float, exponent: float) -> float:
    """
    Raise base by repeated multiplication.

    The exponent is truncated toward zero; negative and non-finite
    exponents run no iterations and give 1.0.

    The loop stops once the result reaches 0, inf or nan, since further
    multiplications only change its sign. At most EXACT_POWER_STEPS
    multiplications are done one at a time.
    """
    result = 1.0
    if not np.isfinite(exponent):
        return result

    count = int(exponent)
    if count <= 0:
        return result

    negative_base = np.signbit(base)
    if abs(base) == 1.0:
        return _flip_for_parity(1.0, negative_base, count)

    steps = min(count, EXACT_POWER_STEPS)
    for done in range(1, steps + 1):
        result *= base
        if result == 0.0 or not np.isfinite(result):
            return _flip_for_parity(result, negative_base, count - done)

    remaining = count - steps
    if remaining:
        with np.errstate(over='ignore', under='ignore', invalid='ignore'):
            magnitude = float(np.power(np.float64(abs(base)), np.float64(remaining)))
        result = _flip_for_parity(result * magnitude, negative_base, remaining)
    return result


class ArithmeticOperator(Enum):
    """Binary arithmetic operators, keyed by their accepted symbols."""
    ADD = ('+',)
    SUBTRACT = ('-',)
    MULTIPLY = ('*',)
    DIVIDE = ('/',)
    POWER = ('^', '**')

    @property
    def symbols(self):
        return self.value

    @property
    def arity(self) -> int:
        return 2

    def apply(self, a: float, b: float) -> float:
        """Apply as op(a, b), where b was the most recently pushed operand."""
        return _ARITHMETIC_RULES[self](a, b)

    @classmethod
    def from_token(cls, token: str) -> Optional['ArithmeticOperator']:
        return _ARITHMETIC_SYMBOLS.get(token)


class BooleanOperator(Enum):
    """Boolean query operators. Matching is case-sensitive."""
    AND = 'AND'
    OR = 'OR'
    NOT = 'NOT'

    @property
    def arity(self) -> int:
        return 1 if self is BooleanOperator.NOT else 2

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.value]

    def apply(self, *operands: bool) -> bool:
        if self is BooleanOperator.NOT:
            return not operands[0]
        first, second = operands
        if self is BooleanOperator.AND:
            return first and second
        return first or second

    @classmethod
    def from_token(cls, token: str) -> Optional['BooleanOperator']:
        return _BOOLEAN_KEYWORDS.get(token)


_ARITHMETIC_RULES = {
    ArithmeticOperator.ADD: operator.add,
    ArithmeticOperator.SUBTRACT: operator.sub,
    ArithmeticOperator.MULTIPLY: operator.mul,
    ArithmeticOperator.DIVIDE: _divide,
    ArithmeticOperator.POWER: _repeated_power,
}

_ARITHMETIC_SYMBOLS: Dict[str, ArithmeticOperator] = {
    symbol: op for op in ArithmeticOperator for symbol in op.symbols
}

_BOOLEAN_KEYWORDS: Dict[str, BooleanOperator] = {op.value: op for op in BooleanOperator}

KEYWORDS = frozenset(_BOOLEAN_KEYWORDS)
