"""
Query engine over a parsed documentation corpus.

Answers exact lookups, listings and scored keyword searches against an
immutable DocumentStore. All operations are read-only.

Scoring (weights from SearchConfig):
    key_match_weight   if the query is a substring of the entry key
  + body_match_weight  if the query is a substring of the lowercased body
  + term_match_weight  per distinct query term indexed for the entry

Entries scoring zero are dropped; the rest are ordered by score descending,
then key ascending, and cut to ``max_results``.
"""

import logging

from daisydocs_mcp.corpus.parser import CorpusParser, normalize_term
from daisydocs_mcp.models import (
    DEFAULT_SEARCH_CONFIG,
    DocumentStore,
    Entry,
    QueryResult,
    SearchConfig,
)
from daisydocs_mcp.protocol import InvalidParamsError


class QueryEngine:
    """Read-only query interface to a DocumentStore.

    Attributes:
        store: The shared, immutable document store
        config: Scoring and ranking configuration
        logger: Logger instance for diagnostics

    Examples:
        ```python
        engine = QueryEngine(CorpusParser().parse(text))
        engine.list_components()
        engine.get_doc(" Button ")
        engine.search("button")
        ```
    """

    def __init__(
        self,
        store: DocumentStore,
        config: SearchConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize engine over an existing store.

        Args:
            store: Parsed document store, shared by reference.
            config: Search configuration. Defaults to DEFAULT_SEARCH_CONFIG.
                Should match the configuration the store was parsed with.
            logger: Logger instance. Defaults to module logger.

        Returns:
            None - initializes instance attributes.

        Raises:
            No exceptions raised.
        """
        self.store = store
        self.config = config or DEFAULT_SEARCH_CONFIG
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_text(cls, text: str, config: SearchConfig | None = None) -> "QueryEngine":
        """Parse corpus text and wrap the resulting store in an engine."""
        return cls(CorpusParser(config=config).parse(text), config=config)

    # ==================== PUBLIC API ====================

    def list_components(self) -> list[str]:
        """Return every entry key in ascending lexicographic order."""
        return self.store.keys()

    def get_doc(self, name: str) -> Entry | None:
        """Look up an entry by exact name, ignoring case and surrounding whitespace.

        Args:
            name: Component name as typed by the caller.

        Returns:
            The matching Entry, or None when no entry has that name.

        Raises:
            InvalidParamsError: If name is empty or only whitespace.

        Example:
            >>> engine.get_doc(" Button ") == engine.get_doc("button")
            True
        """
        key = CorpusParser.normalize_key(name or "")
        if not key:
            raise InvalidParamsError("Component name is required")
        entry = self.store.entries.get(key)
        if entry is None:
            self.logger.debug(f"No entry for {key!r}")
        return entry

    def search(self, query: str) -> list[QueryResult]:
        """Rank entries against a keyword query.

        Substring matches on the key dominate (weight 100 by default), body
        substring matches and indexed query terms add smaller bonuses. Each
        distinct term counts once no matter how often the index repeats the
        key for it. The query is lowercased but not trimmed, so surrounding
        whitespace takes part in substring matching.

        Args:
            query: Free-text query. An empty query matches nothing.

        Returns:
            Up to ``max_results`` QueryResults, best first, ties by key.
            Empty list for an empty query or when nothing matches.

        Raises:
            No exceptions - a miss is an empty list.

        Example:
            >>> [r.key for r in engine.search("class")]
            ['btn', 'card']
        """
        if not query:
            return []
        needle = query.lower()

        strip = self.config.strip_token_punctuation
        terms = [t for t in dict.fromkeys(normalize_term(w, strip) for w in needle.split()) if t]

        results = []
        for key, entry in self.store.entries.items():
            score = self.score(key, entry.body.lower(), needle, terms)
            if score > 0:
                results.append(QueryResult(key=key, body=entry.body, score=score))

        results.sort(key=lambda r: (-r.score, r.key))
        return results[: self.config.max_results]

    def score(self, key: str, lowered_body: str, needle: str, terms: list[str]) -> int:
        """Compute the relevance score of one entry.

        Args:
            key: Entry key.
            lowered_body: Entry body, already lowercased.
            needle: Lowercased query.
            terms: Distinct normalized query terms.

        Returns:
            Non-negative integer score.
        """
        score = 0
        if needle in key:
            score += self.config.key_match_weight
        if needle in lowered_body:
            score += self.config.body_match_weight
        score += self.config.term_match_weight * sum(
            1 for term in terms if self.store.indexed(term, key)
        )
        return score

    def suggest(self, name: str, limit: int = 5) -> list[str]:
        """Return keys of the best search hits for a name that missed a lookup."""
        if limit <= 0:
            return []
        return [result.key for result in self.search(name.strip())[:limit]]
