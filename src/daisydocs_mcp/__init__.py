"""
DaisyDocs MCP Server.

PURPOSE: MCP server exposing the daisyUI component documentation for lookup and search.
AI CONTEXT: This package parses a static documentation corpus into named entries,
builds a term index, ranks keyword queries, and serves everything through
JSON-RPC 2.0 tools over stdio.

PACKAGE STRUCTURE:
- server.py: MCP server with JSON-RPC 2.0 message handling
- protocol.py: Error codes, exceptions and response envelopes
- tools.py: Tool registry (schemas + handlers)
- corpus/: Corpus parsing, loading and the query engine
- models/: Data models for entries, results and configuration
- concepts.py / generators.py: Design concepts and markup helpers
- filesystem.py: Filesystem abstraction for testability

QUICK START:
    # Run MCP server
    python -m daisydocs_mcp.server

    # Use the engine directly
    from daisydocs_mcp.corpus import CorpusParser, QueryEngine
    store = CorpusParser().parse(text)
    results = QueryEngine(store).search("button")

MCP TOOLS:
1. daisyui_search - Ranked keyword search over component docs
2. daisyui_get_docs - Exact component lookup
3. daisyui_list_components - All component names
(plus concept and markup helpers, see tools.py)
"""

from daisydocs_mcp.__version__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __title__,
    __version__,
    __version_date__,
)

__all__ = [
    "__version__",
    "__version_date__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "__copyright__",
]
