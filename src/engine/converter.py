"""
Infix to postfix conversion for boolean queries (Shunting-Yard).
"""

from typing import List, Mapping, Optional, Sequence
import logging

from .operators import CLOSE_PAREN, KEYWORDS, OPEN_PAREN, PRECEDENCE

logger = logging.getLogger(__name__)


class InfixToRPNConverter:
    """
    Converts infix boolean tokens to RPN order.

    All operators, NOT included, pop operators of equal or higher precedence
    before being pushed, so ``NOT NOT T`` becomes ``NOT T NOT``.
    Unbalanced parentheses are not reported here; the evaluator rejects
    whatever they produce.
    """

    def __init__(self, precedence: Optional[Mapping[str, int]] = None):
        """
        Initialize converter.

        Args:
            precedence: Operator precedence table (default: NOT > AND > OR > '(')
        """
        self.precedence = precedence if precedence is not None else PRECEDENCE

    def convert(self, tokens: Sequence[str]) -> List[str]:
        """
        Convert a token sequence to postfix.

        Args:
            tokens: Infix tokens, e.g. ['(', 'T', 'OR', 'F', ')', 'AND', 'T']

        Returns:
            Postfix tokens, e.g. ['T', 'F', 'OR', 'T', 'AND']
        """
        output: List[str] = []
        operators: List[str] = []

        for token in tokens:
            if token == OPEN_PAREN:
                operators.append(token)
            elif token == CLOSE_PAREN:
                while operators and operators[-1] != OPEN_PAREN:
                    output.append(operators.pop())
                # Drop the matching '(' if there is one
                if operators:
                    operators.pop()
            elif token in KEYWORDS:
                while operators and self.precedence[operators[-1]] >= self.precedence[token]:
                    output.append(operators.pop())
                operators.append(token)
            else:
                output.append(token)

        while operators:
            output.append(operators.pop())

        logger.debug(f"Converted {list(tokens)} to RPN {output}")
        return output
