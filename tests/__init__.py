"""Tests for daisydocs-mcp.

Test package containing unit and integration tests for:
- Models (configuration, entries, document store)
- Corpus parser, loader and query engine (indexing, ranking, lookup)
- Tool registry and generators (schemas, argument validation, output)
- MCP server (JSON-RPC handling, error envelopes, stdio loop)
- CLI (VS Code config management, local search commands)
"""
