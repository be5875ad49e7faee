#!/usr/bin/env python
"""
Command-line entry point for the RPN expression engine.
Uses Fire for CLI and Hydra for configuration management.
"""

import os
import sys
import logging
from pathlib import Path
import fire
import hydra
from omegaconf import OmegaConf
from dotenv import load_dotenv

# Load .env variables and register resolver
load_dotenv()
OmegaConf.register_new_resolver("env", os.getenv)

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.engine import BooleanQueryMatcher, ExpressionError, RPNEvaluator
from src.data.data_loader import DocumentLoader


class EngineCLI:
    """CLI for RPN arithmetic and boolean query matching."""

    def __init__(self, config_path: str = "conf", config_name: str = "config"):
        """
        Initialize CLI with configuration.

        Args:
            config_path: Path to config directory
            config_name: Name of main config file
        """
        self.config_path = config_path
        self.config_name = config_name
        self.config = None
        self.logger = None

    def _init_config(self, overrides=None):
        """Initialize Hydra configuration."""
        with hydra.initialize(version_base=None, config_path=self.config_path):
            if overrides:
                self.config = hydra.compose(config_name=self.config_name, overrides=overrides)
            else:
                self.config = hydra.compose(config_name=self.config_name)

        # Setup logging
        logging.basicConfig(
            level=getattr(logging, self.config.logging.level),
            format=self.config.logging.format
        )
        self.logger = logging.getLogger(__name__)

    def _use_trace(self, trace):
        return self.config.output.trace if trace is None else trace

    def evaluate(self, expression: str, trace: bool = None):
        """
        Evaluate a space-delimited RPN arithmetic expression.

        Args:
            expression: RPN expression, e.g. "3 4 + 5 6 + *"
            trace: Log the stack after every token (default: output.trace)

        Returns:
            The numeric result, or None if the expression is invalid
        """
        self._init_config()
        evaluator = RPNEvaluator()

        try:
            if self._use_trace(trace):
                result, steps = evaluator.trace_expression(str(expression))
                for i, step in enumerate(steps, 1):
                    self.logger.info(f"Step {i}: Process '{step.token}' -> Stack: {list(step.stack)}")
            else:
                result = evaluator.evaluate_expression(str(expression))
        except ExpressionError as e:
            self.logger.error(f"Failed to evaluate '{expression}': {e}")
            return None

        self.logger.info(f"Result: {result}")
        return result

    def match(self, query: str, document: str, trace: bool = None):
        """
        Match a boolean query against a single document.

        Args:
            query: Infix query, e.g. "(python OR java) AND guide"
            document: Document text
            trace: Log every pipeline stage (default: output.trace)

        Returns:
            True/False, or None if the query cannot be evaluated
        """
        self._init_config()
        matcher = BooleanQueryMatcher()

        try:
            if self._use_trace(trace):
                query_trace = matcher.trace(query, document)
                self.logger.info(f"Converted Query: {query_trace.substituted}")
                self.logger.info(f"Tokenized Query: {list(query_trace.tokens)}")
                self.logger.info(f"RPN Query: {list(query_trace.rpn)}")
                result = query_trace.result
            else:
                result = matcher.match(query, document)
        except ExpressionError as e:
            self.logger.error(f"Failed to match '{query}': {e}")
            return None

        self.logger.info(f"Query: {query} ===> Document: {document} ===> {result}")
        return result

    def search(self, query: str, source_file: str = None):
        """
        Return every corpus document matching a query.

        Args:
            query: Infix boolean query
            source_file: Corpus file overriding corpus.documents (optional)
        """
        overrides = []
        if source_file:
            overrides.append(f"corpus.source_file='{source_file}'")

        self._init_config(overrides)

        documents = DocumentLoader(self.config).load_all()
        matches = BooleanQueryMatcher().filter_documents(query, documents)

        self.logger.info("="*60)
        self.logger.info(f"QUERY: {query}")
        self.logger.info("="*60)

        if not matches:
            self.logger.info("No matching documents.")
        else:
            for i, doc in enumerate(matches, 1):
                self.logger.info(f"{i}. {doc}")

        return matches

    def explain(self, query: str, document: str):
        """
        Show how a query is converted and evaluated for one document.

        Args:
            query: Infix boolean query
            document: Document text
        """
        self._init_config()
        explanation = BooleanQueryMatcher().explain(query, document)
        for line in explanation.split('\n'):
            if line.strip():
                self.logger.info(line)
        return explanation

    def show_config(self):
        """Display current configuration."""
        self._init_config()
        print(OmegaConf.to_yaml(self.config))


def main():
    """Main entry point."""
    fire.Fire(EngineCLI)


if __name__ == "__main__":
    main()
