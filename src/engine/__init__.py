"""
Expression engine: RPN arithmetic and boolean query matching.
"""

from .errors import (
    ExpressionError,
    EmptyStackError,
    InsufficientOperandsError,
    UnknownTokenError,
    InvalidExpressionError
)
from .stack import Stack
from .operators import ArithmeticOperator, BooleanOperator, PRECEDENCE, KEYWORDS
from .rpn_calculator import EvaluationStep, RPNEvaluator, evaluate_arithmetic_rpn
from .boolean_rpn import BooleanRPNEvaluator
from .converter import InfixToRPNConverter
from .query_parser import TermSubstitutor, Tokenizer
from .matcher import QueryTrace, BooleanQueryMatcher, match_boolean_query

__all__ = [
    'ExpressionError',
    'EmptyStackError',
    'InsufficientOperandsError',
    'UnknownTokenError',
    'InvalidExpressionError',

    'Stack',
    'ArithmeticOperator',
    'BooleanOperator',
    'PRECEDENCE',
    'KEYWORDS',
    'EvaluationStep',
    'RPNEvaluator',
    'evaluate_arithmetic_rpn',
    'BooleanRPNEvaluator',
    'TermSubstitutor',
    'Tokenizer',
    'InfixToRPNConverter',
    'QueryTrace',
    'BooleanQueryMatcher',
    'match_boolean_query',
]
