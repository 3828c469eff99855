"""Version information for daisydocs-mcp."""

__version__ = "1.1.0"
__version_date__ = "2026-10-16"

__title__ = "daisydocs_mcp"
__description__ = "MCP server for searching and browsing daisyUI component documentation"

__author__ = "daisydocs contributors"

__license__ = "MIT"
__copyright__ = "Copyright 2026 daisydocs contributors"

__all__ = [
    "__version__",
    "__version_date__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "__copyright__",
]
