"""
Query text handling: term substitution and tokenizing of boolean queries.
"""

import logging
from typing import AbstractSet, List, Optional

from .operators import (
    CLOSE_PAREN, FALSE_LITERAL, KEYWORDS, OPEN_PAREN, TRUE_LITERAL
)

logger = logging.getLogger(__name__)


class TermSubstitutor:
    """
    Replace the search terms of a boolean query with T/F literals for one document.

    "(python OR java) AND guide" against "Java guide tutorial" becomes
    "(F OR T) AND T".

    Known limitations, kept as-is:
      - The query is scanned lower-cased while replacement is done on the
        original text, so a mixed-case term ("Python") is never replaced.
      - Lower-case "and"/"or"/"not" are ordinary terms.
      - Replacement is plain substring replacement over the whole query, so a
        term that occurs inside another word replaces that part too.
    """

    def __init__(self, keywords: Optional[AbstractSet[str]] = None):
        """
        Initialize substitutor.

        Args:
            keywords: Reserved operator words (default: AND, OR, NOT)
        """
        self.keywords = keywords if keywords is not None else KEYWORDS
        self.delimiters = {' ', OPEN_PAREN, CLOSE_PAREN}

    def substitute(self, query: str, document: str) -> str:
        """
        Substitute every term in the query by its truth value.

        Args:
            query: Infix boolean query
            document: Document text searched case-insensitively

        Returns:
            The query with each term replaced by T or F
        """
        converted = query
        document_lower = document.lower()
        word = ''

        for char in query.lower():
            # A reserved word resets the scan and swallows the next character
            if word in self.keywords:
                word = ''
                continue

            if char in self.delimiters:
                if word:
                    converted = self._replace_term(converted, word, document_lower)
                    word = ''
                continue

            word += char

        if word:
            converted = self._replace_term(converted, word, document_lower)

        return converted

    @staticmethod
    def _replace_term(text: str, term: str, document_lower: str) -> str:
        literal = TRUE_LITERAL if term in document_lower else FALSE_LITERAL
        return text.replace(term, literal)


class Tokenizer:
    """
    Split a substituted query such as "(T OR F) AND NOT T" into tokens.

    Parentheses need no surrounding spaces. Text that never completes a
    keyword is dropped at the next space or at end of input.
    """

    def __init__(self, keywords: Optional[AbstractSet[str]] = None):
        self.keywords = keywords if keywords is not None else KEYWORDS
        self.single_char_tokens = {OPEN_PAREN, CLOSE_PAREN, TRUE_LITERAL, FALSE_LITERAL}

    def tokenize(self, text: str) -> List[str]:
        tokens: List[str] = []
        word = ''

        for char in text:
            if char == ' ':
                if word:
                    logger.debug(f"Dropping incomplete token '{word}'")
                word = ''
                continue

            if not word and char in self.single_char_tokens:
                tokens.append(char)
                continue

            word += char
            if word in self.keywords:
                tokens.append(word)
                word = ''

        if word:
            logger.debug(f"Dropping incomplete token '{word}'")

        return tokens
