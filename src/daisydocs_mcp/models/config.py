"""
Configuration models for DaisyDocs MCP.

Defines corpus parsing, search scoring and server configuration with defaults.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class DuplicatePolicy(Enum):
    """How the corpus parser resolves two headings with the same key.

    Policies:
    • LAST_WINS: The later entry replaces the earlier one (default)
    • FIRST_WINS: The earlier entry is kept, later ones are dropped
    • ERROR: Parsing fails with CorpusError

    Every policy logs the duplicate and records its key on the store.
    """

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    ERROR = "error"


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for corpus parsing and search ranking.

    Attributes:
        key_match_weight: Score added when the query is a substring of the key
        body_match_weight: Score added when the query is a substring of the body
        term_match_weight: Score added per distinct query term indexed for the entry
        min_token_length: Shortest word stored in the term index
        max_results: Maximum number of ranked results returned
        heading_marker: Line prefix that starts a new entry
        duplicate_policy: Resolution for duplicate entry keys
        strip_token_punctuation: Strip surrounding punctuation from indexed words
    """

    key_match_weight: int = 100
    body_match_weight: int = 10
    term_match_weight: int = 5

    # Indexing
    min_token_length: int = 5
    heading_marker: str = "### "
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS
    strip_token_punctuation: bool = True

    # Ranking
    max_results: int = 20

    def to_dict(self) -> dict[str, Any]:
        """Convert search configuration to a plain dictionary.

        Returns:
            Dict of all fields with the duplicate policy as its string value.

        Example:
            >>> SearchConfig().to_dict()["max_results"]
            20
        """
        return {
            "key_match_weight": self.key_match_weight,
            "body_match_weight": self.body_match_weight,
            "term_match_weight": self.term_match_weight,
            "min_token_length": self.min_token_length,
            "heading_marker": self.heading_marker,
            "duplicate_policy": self.duplicate_policy.value,
            "strip_token_punctuation": self.strip_token_punctuation,
            "max_results": self.max_results,
        }


@dataclass
class ServerConfig:
    """Configuration for the MCP server.

    Attributes:
        search: Parsing and ranking configuration
        corpus_path: Alternate corpus file; None uses the embedded corpus
        max_query_length: Longest accepted string argument (DoS protection)
        max_suggestions: Suggestions offered when a lookup misses
        result_preview_length: Characters of body shown per search result
    """

    search: SearchConfig = field(default_factory=SearchConfig)
    corpus_path: Path | None = None

    # Input limits
    max_query_length: int = 1000

    # Display formatting
    max_suggestions: int = 5
    result_preview_length: int = 200

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization.

        Exports all configuration values as a plain dict for JSON
        serialization, logging, or inspection while debugging.

        Args:
            None - uses instance attributes.

        Returns:
            Dict with nested search settings, corpus path (string or None),
            input limits and display settings.

        Raises:
            No exceptions - always returns valid dict.

        Example:
            >>> config = ServerConfig()
            >>> d = config.to_dict()
            >>> d["search"]["key_match_weight"]
            100
        """
        return {
            "search": self.search.to_dict(),
            "corpus_path": str(self.corpus_path) if self.corpus_path else None,
            "max_query_length": self.max_query_length,
            "max_suggestions": self.max_suggestions,
            "result_preview_length": self.result_preview_length,
        }


# Default configuration instances
DEFAULT_SEARCH_CONFIG = SearchConfig()
DEFAULT_CONFIG = ServerConfig()
