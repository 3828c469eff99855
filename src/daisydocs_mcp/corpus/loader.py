"""
Corpus loading.

The daisyUI documentation ships inside the package as ``data/daisyui.txt``.
An alternate corpus file can be chosen at startup; it is read through a
FilesystemAdapter so tests never touch the disk.
"""

import logging
from importlib import resources
from pathlib import Path

from daisydocs_mcp.corpus.parser import CorpusError, CorpusParser
from daisydocs_mcp.filesystem import DefaultFilesystemAdapter, FilesystemAdapter
from daisydocs_mcp.models import DocumentStore, SearchConfig

EMBEDDED_CORPUS = "daisyui.txt"

logger = logging.getLogger(__name__)


def read_embedded_corpus() -> str:
    """Return the text of the documentation corpus bundled with the package."""
    return resources.files("daisydocs_mcp.data").joinpath(EMBEDDED_CORPUS).read_text(encoding="utf-8")


def read_corpus(path: Path | None = None, fs: FilesystemAdapter | None = None) -> str:
    """Read corpus text from a file, or the embedded corpus when no path is given.

    Args:
        path: Corpus file path, or None for the embedded corpus.
        fs: Filesystem adapter. Defaults to DefaultFilesystemAdapter.

    Returns:
        Raw corpus text.

    Raises:
        CorpusError: If the path is not an existing regular file.

    Example:
        >>> text = read_corpus()
        >>> text.startswith("#")
        True
    """
    if path is None:
        return read_embedded_corpus()

    fs = fs or DefaultFilesystemAdapter()
    if not fs.exists(path):
        raise CorpusError(f"Corpus file not found: {path}")
    if not fs.is_file(path):
        raise CorpusError(f"Corpus path is not a file: {path}")
    return fs.read_text(fs.resolve(path))


def load_store(
    path: Path | None = None,
    config: SearchConfig | None = None,
    fs: FilesystemAdapter | None = None,
) -> DocumentStore:
    """Read and parse a corpus into a DocumentStore.

    Called once at startup; the returned store is never mutated.

    Args:
        path: Corpus file path, or None for the embedded corpus.
        config: Search configuration used for parsing.
        fs: Filesystem adapter for reading ``path``.

    Returns:
        Parsed DocumentStore.

    Raises:
        CorpusError: If the file is missing, or it has no entries, or the
            duplicate policy rejects it.
    """
    source = str(path) if path else f"embedded {EMBEDDED_CORPUS}"
    store = CorpusParser(config=config).parse(read_corpus(path, fs))
    if not store.entries:
        raise CorpusError(f"Corpus {source} contains no entries")
    logger.info(f"Loaded {len(store)} components from {source}")
    return store
