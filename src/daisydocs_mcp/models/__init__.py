"""
DaisyDocs MCP Models.

Core data structures for the documentation corpus and server configuration.
"""

from daisydocs_mcp.models.config import (
    DEFAULT_CONFIG,
    DEFAULT_SEARCH_CONFIG,
    DuplicatePolicy,
    SearchConfig,
    ServerConfig,
)
from daisydocs_mcp.models.documents import (
    DocumentStore,
    Entry,
    QueryResult,
)

__all__ = [
    # Document models
    "Entry",
    "DocumentStore",
    "QueryResult",
    # Configuration
    "DuplicatePolicy",
    "SearchConfig",
    "ServerConfig",
    "DEFAULT_SEARCH_CONFIG",
    "DEFAULT_CONFIG",
]
