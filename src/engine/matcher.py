"""
Boolean query matching: term substitution, tokenizing, RPN conversion, evaluation.
"""

from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Mapping, Optional, Tuple
import logging

from .boolean_rpn import BooleanRPNEvaluator
from .converter import InfixToRPNConverter
from .errors import ExpressionError
from .operators import KEYWORDS, PRECEDENCE
from .query_parser import TermSubstitutor, Tokenizer
from .rpn_calculator import EvaluationStep

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryTrace:
    """
    Every intermediate stage of matching one query against one document.

    Attributes:
        query: Original infix query
        document: Document text
        substituted: Query with terms replaced by T/F
        tokens: Tokenized substituted query
        rpn: Tokens in postfix order
        steps: Boolean stack after each postfix token
        result: Final truth value
    """
    query: str
    document: str
    substituted: str
    tokens: Tuple[str, ...]
    rpn: Tuple[str, ...]
    steps: Tuple[EvaluationStep, ...]
    result: bool


class BooleanQueryMatcher:
    """
    Matches infix boolean queries against document text.

    Sample usage:
        matcher = BooleanQueryMatcher()
        matcher.match("(python OR java) AND guide", "Java guide tutorial")  # True
    """

    def __init__(self, precedence: Optional[Mapping[str, int]] = None,
                 keywords: Optional[AbstractSet[str]] = None):
        """
        Initialize matcher.

        Args:
            precedence: Operator precedence table for the converter
            keywords: Reserved operator words for substitution and tokenizing
        """
        keywords = keywords if keywords is not None else KEYWORDS
        self.substitutor = TermSubstitutor(keywords)
        self.tokenizer = Tokenizer(keywords)
        self.converter = InfixToRPNConverter(precedence if precedence is not None else PRECEDENCE)

    def to_rpn(self, query: str, document: str) -> List[str]:
        """Substitute, tokenize and convert a query without evaluating it."""
        substituted = self.substitutor.substitute(query, document)
        return self.converter.convert(self.tokenizer.tokenize(substituted))

    def match(self, query: str, document: str) -> bool:
        """
        Check whether a document satisfies a query.

        Raises:
            ExpressionError: The substituted query does not evaluate cleanly
        """
        rpn = self.to_rpn(query, document)
        # Fresh evaluator per call keeps repeated matches independent
        result = BooleanRPNEvaluator().evaluate_sequence(rpn)
        logger.debug(f"Query '{query}' on '{document}': {result}")
        return result

    def trace(self, query: str, document: str) -> QueryTrace:
        """Run the full pipeline and keep every intermediate stage."""
        substituted = self.substitutor.substitute(query, document)
        tokens = self.tokenizer.tokenize(substituted)
        rpn = self.converter.convert(tokens)
        result, steps = BooleanRPNEvaluator().trace_sequence(rpn)

        return QueryTrace(
            query=query,
            document=document,
            substituted=substituted,
            tokens=tuple(tokens),
            rpn=tuple(rpn),
            steps=tuple(steps),
            result=result,
        )

    def filter_documents(self, query: str, documents: Iterable[str]) -> List[str]:
        """
        Return the documents matching a query, in input order.

        Documents on which the query fails to evaluate are skipped.
        """
        matches = []
        for document in documents:
            try:
                if self.match(query, document):
                    matches.append(document)
            except ExpressionError as e:
                logger.debug(f"Skipping document '{document}' for query '{query}': {e}")
        return matches

    def explain(self, query: str, document: str) -> str:
        """
        Explain how a query is processed for one document.
        Useful for debugging.
        """
        try:
            trace = self.trace(query, document)
        except ExpressionError as e:
            return f"Failed to evaluate query: {e}"

        explanation = f"Query: {trace.query}\n"
        explanation += f"Document: {trace.document}\n"
        explanation += f"Converted: {trace.substituted}\n"
        explanation += f"Tokens: {list(trace.tokens)}\n"
        explanation += f"RPN: {list(trace.rpn)}\n"
        for i, step in enumerate(trace.steps, 1):
            explanation += f"  Step {i}: '{step.token}' -> {list(step.stack)}\n"
        explanation += f"Result: {trace.result}\n"
        return explanation


def match_boolean_query(query: str, document: str) -> bool:
    """Match a query against a document with the default operator tables."""
    return BooleanQueryMatcher().match(query, document)
