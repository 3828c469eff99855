"""
DaisyDocs Corpus Package.

Parsing, loading and querying of the documentation corpus.
"""

from daisydocs_mcp.corpus.engine import QueryEngine
from daisydocs_mcp.corpus.loader import load_store, read_corpus, read_embedded_corpus
from daisydocs_mcp.corpus.parser import CorpusError, CorpusParser, normalize_term

__all__ = [
    "CorpusError",
    "CorpusParser",
    "QueryEngine",
    "load_store",
    "normalize_term",
    "read_corpus",
    "read_embedded_corpus",
]
