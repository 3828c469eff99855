"""
Corpus parser.

Splits a raw documentation blob into named entries using a heading marker
and builds the term index in the same pass.

Format:
    ### Button
    Buttons allow the user to take actions.
    ...
    ### Card
    ...

Lines before the first heading are ignored. The heading line stays part of
its entry's body.
"""

import logging
import string
from collections.abc import Iterator

from daisydocs_mcp.models import (
    DEFAULT_SEARCH_CONFIG,
    DocumentStore,
    DuplicatePolicy,
    Entry,
    SearchConfig,
)


class CorpusError(ValueError):
    """Raised when a corpus cannot be turned into a document store."""


def normalize_term(word: str, strip_punctuation: bool = True) -> str:
    """Lowercase a word and optionally strip surrounding punctuation.

    Shared by indexing and query-term matching so both sides agree.

    Example:
        >>> normalize_term("Class.")
        'class'
    """
    word = word.lower()
    if strip_punctuation:
        word = word.strip(string.punctuation)
    return word


class CorpusParser:
    """Parser turning corpus text into an immutable DocumentStore.

    Attributes:
        config: Search configuration (heading marker, token rules, duplicate policy)
        logger: Logger instance for diagnostics

    Examples:
        ```python
        parser = CorpusParser()
        store = parser.parse("### Btn\\nUse the btn class.\\n")
        store.entries["btn"].body  # '### Btn\\nUse the btn class.'
        ```
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize parser with configuration.

        Args:
            config: Search configuration. Defaults to DEFAULT_SEARCH_CONFIG.
            logger: Logger instance. Defaults to module logger.

        Returns:
            None - initializes instance attributes.

        Raises:
            CorpusError: If the heading marker is blank.
        """
        self.config = config or DEFAULT_SEARCH_CONFIG
        self.logger = logger or logging.getLogger(__name__)
        if not self.config.heading_marker.strip():
            raise CorpusError("Heading marker must contain a non-whitespace character")

    # ==================== PUBLIC API ====================

    def parse(self, text: str) -> DocumentStore:
        """Parse corpus text into entries and a term index.

        Walks the sections in order, applies the duplicate policy to keys
        seen more than once, then tokenizes the surviving bodies so the
        index only describes entries that are actually in the store.

        Args:
            text: Full corpus text.

        Returns:
            DocumentStore holding every surviving entry and its tokens.

        Raises:
            CorpusError: If the duplicate policy is ERROR and a key repeats.

        Example:
            >>> store = CorpusParser().parse("### A\\nx\\n### A\\ny\\n")
            >>> store.entries["a"].body
            '### A\\ny'
        """
        entries: dict[str, Entry] = {}
        duplicates: list[str] = []
        policy = self.config.duplicate_policy

        for key, body in self._sections(text):
            if key in entries:
                if key not in duplicates:
                    duplicates.append(key)
                if policy is DuplicatePolicy.ERROR:
                    raise CorpusError(f"Duplicate heading in corpus: {key!r}")
                self.logger.warning(
                    f"Duplicate heading {key!r}: keeping the "
                    f"{'later' if policy is DuplicatePolicy.LAST_WINS else 'earlier'} entry"
                )
                if policy is DuplicatePolicy.FIRST_WINS:
                    continue
            entries[key] = Entry(key=key, body=body)

        index: dict[str, list[str]] = {}
        for entry in entries.values():
            for token in self.tokenize(entry.body):
                index.setdefault(token, []).append(entry.key)

        self.logger.debug(f"Parsed {len(entries)} entries, {len(index)} index terms")
        return DocumentStore.build(entries.values(), index, duplicates)

    def tokenize(self, text: str) -> list[str]:
        """Split text into index tokens.

        Words are whitespace-delimited and lowercased; surrounding
        punctuation is stripped when configured. Words shorter than
        ``min_token_length`` are dropped. Repeats are kept.

        Args:
            text: Text to tokenize.

        Returns:
            Tokens in order of appearance.

        Example:
            >>> CorpusParser().tokenize("Use the btn class.")
            ['class']
        """
        strip = self.config.strip_token_punctuation
        return [
            token
            for token in (normalize_term(word, strip) for word in text.split())
            if len(token) >= self.config.min_token_length
        ]

    @staticmethod
    def normalize_key(name: str) -> str:
        """Normalize an entry name into a store key (trimmed, lowercased)."""
        return name.strip().lower()

    # ==================== INTERNALS ====================

    def _sections(self, text: str) -> Iterator[tuple[str, str]]:
        """Yield (key, body) for each heading section in order.

        A heading with a blank name opens no section; the lines after it
        are skipped like the preamble before the first heading.
        """
        marker = self.config.heading_marker
        key: str | None = None
        lines: list[str] = []

        for line in text.splitlines():
            if line.startswith(marker):
                if key:
                    yield key, "\n".join(lines).strip()
                key = self.normalize_key(line[len(marker) :])
                if not key:
                    self.logger.warning("Skipping heading with an empty name")
                lines = [line]
            elif key:
                lines.append(line)

        if key:
            yield key, "\n".join(lines).strip()
