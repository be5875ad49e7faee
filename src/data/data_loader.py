import json
import logging
from pathlib import Path
from typing import Iterator, List
from tqdm import tqdm

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Loads the document corpus that boolean queries are matched against."""

    def __init__(self, config):
        """
        Initialize document loader.

        Args:
            config: Hydra configuration object (uses the ``corpus`` section)
        """
        self.config = config

    def load_documents(self) -> Iterator[str]:
        """
        Load documents based on configuration.

        ``corpus.source_file`` takes priority over the inline
        ``corpus.documents`` list. Plain text files hold one document per
        line; ``.jsonl`` files hold one JSON object per line whose
        ``corpus.text_field`` is the document text.

        Yields:
            Document text strings
        """
        corpus = self.config.corpus
        source_file = corpus.get('source_file')

        if source_file is None:
            documents = list(corpus.get('documents') or [])
            logger.info(f"Using {len(documents)} documents from configuration")
            yield from documents
            return

        dataset_path = Path(source_file)
        if not dataset_path.exists():
            raise FileNotFoundError(f"Corpus file not found: {dataset_path}")

        logger.info(f"Loading corpus from: {dataset_path}")
        is_jsonl = dataset_path.suffix == '.jsonl'
        text_field = corpus.get('text_field', 'text')

        with open(dataset_path, 'r', encoding='utf-8') as f:
            for i, line in enumerate(tqdm(
                f,
                desc="Loading documents",
                disable=not self.config.get('output', {}).get('show_progress', False)
            )):
                line = line.strip()
                if not line:
                    continue

                if not is_jsonl:
                    yield line
                    continue

                try:
                    doc = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.warning(f"Error parsing line {i}: {e}")
                    continue

                if doc.get(text_field):
                    yield doc[text_field]
                else:
                    logger.warning(f"Line {i} has no '{text_field}' field")

    def load_all(self) -> List[str]:
        """Load the whole corpus into a list."""
        documents = list(self.load_documents())
        logger.info(f"Loaded {len(documents)} documents")
        return documents
