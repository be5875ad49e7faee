"""
Tests for corpus loading and the command-line interface
Run with: pytest tests/test_cli.py -v
"""

import json
import pytest
import sys
from pathlib import Path
from omegaconf import OmegaConf

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.data.data_loader import DocumentLoader
from main import EngineCLI


def _config(**corpus):
    corpus.setdefault('source_file', None)
    return OmegaConf.create({'corpus': corpus, 'output': {'show_progress': False}})


class TestDocumentLoader:
    """Test corpus loading from configuration and files."""

    def test_inline_documents(self):
        loader = DocumentLoader(_config(documents=["Python tutorial", "C tutorial"]))
        assert loader.load_all() == ["Python tutorial", "C tutorial"]

    def test_no_documents(self):
        assert DocumentLoader(_config()).load_all() == []

    def test_text_file(self, tmp_path):
        corpus_file = tmp_path / "docs.txt"
        corpus_file.write_text("C++ Guide\n\nJava guide tutorial\n", encoding='utf-8')

        loader = DocumentLoader(_config(source_file=str(corpus_file), documents=["ignored"]))
        assert loader.load_all() == ["C++ Guide", "Java guide tutorial"]

    def test_jsonl_file(self, tmp_path):
        corpus_file = tmp_path / "docs.jsonl"
        lines = [
            json.dumps({"id": 1, "body": "Python tutorial"}),
            "{not json",
            json.dumps({"id": 2}),
            json.dumps({"id": 3, "body": "C tutorial"}),
        ]
        corpus_file.write_text("\n".join(lines), encoding='utf-8')

        loader = DocumentLoader(_config(source_file=str(corpus_file), text_field="body"))
        assert loader.load_all() == ["Python tutorial", "C tutorial"]

    def test_missing_file(self, tmp_path):
        loader = DocumentLoader(_config(source_file=str(tmp_path / "missing.txt")))
        with pytest.raises(FileNotFoundError):
            loader.load_all()


class TestEngineCLI:
    """Test CLI commands against the default configuration."""

    def setup_method(self):
        self.cli = EngineCLI()

    def test_evaluate(self):
        assert self.cli.evaluate("15 3 / 2 + 8 3 - *") == 35

    def test_evaluate_with_trace(self):
        assert self.cli.evaluate("3 2 + 4 +", trace=True) == 9

    def test_evaluate_invalid(self):
        assert self.cli.evaluate("3 2") is None
        assert self.cli.evaluate("+") is None

    def test_match(self):
        assert self.cli.match("python AND tutorial", "Python tutorial") is True
        assert self.cli.match("python AND tutorial", "C tutorial", trace=True) is False

    def test_match_invalid(self):
        assert self.cli.match("python AND", "Python tutorial") is None

    def test_search_configured_corpus(self):
        assert self.cli.search("(python OR java) AND guide") == ["Java guide tutorial"]

    def test_search_corpus_file(self, tmp_path):
        corpus_file = tmp_path / "docs.txt"
        corpus_file.write_text("python notes\njava notes\n", encoding='utf-8')

        assert self.cli.search("java", source_file=str(corpus_file)) == ["java notes"]

    def test_explain(self):
        explanation = self.cli.explain("python", "Python tutorial")
        assert "Result: True" in explanation
