"""Command-line interface for daisydocs-mcp.

Provides MCP client setup, the stdio server and quick local queries.

Commands:
    install: Register the MCP server in VS Code (workspace or global)
    uninstall: Remove the MCP server registration
    serve: Run the MCP server on stdin/stdout
    search: Ranked keyword search over the documentation
    doc: Print one component's documentation
    list: Print all component names
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from daisydocs_mcp.__version__ import __version__
from daisydocs_mcp.corpus import CorpusError, QueryEngine, load_store
from daisydocs_mcp.models import ServerConfig
from daisydocs_mcp.protocol import InvalidParamsError

SERVER_KEY = "daisydocs-mcp"

# Platform constant for cross-platform detection
WINDOWS_PLATFORM = "win32"


def get_venv_python() -> str:
    """Detect the .venv Python executable used to launch the server.

    VS Code spawns the server with whatever command the config names, so
    it must be the interpreter that has daisydocs-mcp installed. Checks
    for .venv in the current working directory (Linux/macOS: bin/python,
    Windows: Scripts/python.exe) and falls back to sys.executable.

    The venv path is returned without resolving symlinks so the venv's
    site-packages are used.

    Returns:
        Full path to Python executable as string.

    Example:
        >>> 'python' in get_venv_python()
        True
    """
    venv_dir = Path.cwd() / ".venv"

    if venv_dir.exists():
        if sys.platform == WINDOWS_PLATFORM:
            venv_python = venv_dir / "Scripts" / "python.exe"
        else:
            venv_python = venv_dir / "bin" / "python"

        if venv_python.exists():
            return str(venv_python.absolute())

    return sys.executable


def get_mcp_server_config(corpus: Path | None = None) -> dict[str, object]:
    """Build the mcp.json server entry.

    Uses ``-m daisydocs_mcp.server`` module execution so the venv's
    site-packages are loaded. A custom corpus is passed through the CLI
    ``serve`` command instead.

    Args:
        corpus: Optional corpus file the server should load.

    Returns:
        Dict with 'command' (Python path) and 'args'.

    Example:
        >>> get_mcp_server_config()['args']
        ['-m', 'daisydocs_mcp.server']
    """
    if corpus is None:
        args = ["-m", "daisydocs_mcp.server"]
    else:
        args = ["-m", "daisydocs_mcp.cli", "serve", "--corpus", str(corpus.absolute())]
    return {"command": get_venv_python(), "args": args}


def get_vscode_mcp_path(global_install: bool = False, insiders: bool = False) -> Path:
    """Get the path to the VS Code mcp.json file.

    Args:
        global_install: Return the user-level path instead of the
            workspace ``.vscode/mcp.json``.
        insiders: Use the Code - Insiders user directory (global only).

    Returns:
        Path to mcp.json, whether or not it exists.

    Example:
        >>> get_vscode_mcp_path(global_install=True, insiders=True)
        PosixPath('/home/user/.config/Code - Insiders/User/mcp.json')
    """
    if global_install:
        code_dir = "Code - Insiders" if insiders else "Code"
        return Path.home() / ".config" / code_dir / "User" / "mcp.json"
    return Path.cwd() / ".vscode" / "mcp.json"


def _location(global_install: bool, insiders: bool) -> str:
    if not global_install:
        return "workspace"
    return f"global ({'Insiders' if insiders else 'stable'})"


def _read_mcp_config(mcp_path: Path) -> dict | None:
    """Load mcp.json, printing an error and returning None if it is invalid."""
    try:
        with open(mcp_path) as f:
            config = json.load(f)
    except json.JSONDecodeError:
        print(f"Error: Invalid JSON in {mcp_path}", file=sys.stderr)
        return None
    if not isinstance(config, dict):
        print(f"Error: Expected a JSON object in {mcp_path}", file=sys.stderr)
        return None
    return config


def _write_mcp_config(mcp_path: Path, config: dict) -> None:
    with open(mcp_path, "w") as f:
        json.dump(config, f, indent=2)
        f.write("\n")


def install_mcp(
    global_install: bool = False, insiders: bool = False, corpus: Path | None = None
) -> int:
    """Add the DaisyDocs server to VS Code's mcp.json.

    Creates the file if needed and keeps every other server entry.

    Args:
        global_install: Install to user-level config instead of workspace.
        insiders: Use VS Code Insiders path (only with global_install).
        corpus: Optional corpus file for the server to load.

    Returns:
        Exit code: 0 for success, 1 if the existing file is invalid JSON.

    Example:
        >>> install_mcp(global_install=False)
        0
    """
    mcp_path = get_vscode_mcp_path(global_install, insiders)
    mcp_path.parent.mkdir(parents=True, exist_ok=True)

    if mcp_path.exists():
        config = _read_mcp_config(mcp_path)
        if config is None:
            return 1
    else:
        config = {}

    config.setdefault("servers", {})[SERVER_KEY] = get_mcp_server_config(corpus)
    _write_mcp_config(mcp_path, config)

    print(f"✓ DaisyDocs MCP server installed ({_location(global_install, insiders)})")
    print(f"  Config: {mcp_path}")
    print()
    print("Reload VS Code window to activate the MCP server.")
    return 0


def uninstall_mcp(global_install: bool = False, insiders: bool = False) -> int:
    """Remove the DaisyDocs server from VS Code's mcp.json.

    Other server entries are preserved. A missing file or entry is not an
    error.

    Args:
        global_install: Remove from user-level config instead of workspace.
        insiders: Use VS Code Insiders path (only with global_install).

    Returns:
        Exit code: 0 for success, 1 if the file is invalid JSON.
    """
    mcp_path = get_vscode_mcp_path(global_install, insiders)
    location = _location(global_install, insiders)

    if not mcp_path.exists():
        print(f"No MCP config found at {mcp_path}")
        return 0

    config = _read_mcp_config(mcp_path)
    if config is None:
        return 1

    servers = config.get("servers", {})
    if SERVER_KEY in servers:
        del servers[SERVER_KEY]
        _write_mcp_config(mcp_path, config)
        print(f"✓ DaisyDocs MCP server removed ({location})")
    else:
        print(f"DaisyDocs MCP server not found in {location} config")

    return 0


def _load_engine(corpus: Path | None) -> QueryEngine | None:
    config = ServerConfig(corpus_path=corpus)
    try:
        store = load_store(config.corpus_path, config.search)
    except CorpusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None
    return QueryEngine(store, config.search)


def search_docs(query: str, corpus: Path | None = None) -> int:
    """Print ranked search results as ``score  key`` lines.

    Returns:
        Exit code: 0 when something matched, 1 on no match or corpus error.
    """
    engine = _load_engine(corpus)
    if engine is None:
        return 1
    results = engine.search(query)
    if not results:
        print(f"No results found for '{query}'")
        return 1
    for result in results:
        print(f"{result.score:>4}  {result.key}")
    return 0


def show_doc(name: str, corpus: Path | None = None) -> int:
    """Print one component's documentation.

    Returns:
        Exit code: 0 when found, 1 on miss, empty name or corpus error.
    """
    engine = _load_engine(corpus)
    if engine is None:
        return 1
    try:
        entry = engine.get_doc(name)
    except InvalidParamsError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    if entry is None:
        suggestions = engine.suggest(name)
        hint = f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""
        print(f"Documentation not found for '{name.strip()}'.{hint}", file=sys.stderr)
        return 1
    print(entry.body)
    return 0


def list_docs(corpus: Path | None = None) -> int:
    """Print every component name, one per line."""
    engine = _load_engine(corpus)
    if engine is None:
        return 1
    for key in engine.list_components():
        print(key)
    return 0


def serve(corpus: Path | None = None, verbose: bool = False) -> int:  # pragma: no cover
    """Run the MCP server on stdio until EOF."""
    from daisydocs_mcp.server import main as server_main

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    try:
        asyncio.run(server_main(ServerConfig(corpus_path=corpus)))
    except CorpusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _add_scope_flags(parser: argparse.ArgumentParser, verb: str) -> None:
    parser.add_argument(
        "--global",
        "-g",
        dest="global_install",
        action="store_true",
        help=f"{verb} user-level VS Code config instead of workspace",
    )
    parser.add_argument(
        "--insiders",
        "-i",
        dest="insiders",
        action="store_true",
        help="Use VS Code Insiders config path (only with --global)",
    )


def _add_corpus_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--corpus",
        "-c",
        type=Path,
        default=None,
        help="Documentation corpus file (default: embedded daisyUI docs)",
    )


def main() -> int:
    """CLI entry point for daisydocs-mcp commands.

    Parses sys.argv and dispatches to the command handlers.

    Returns:
        Exit code: 0 for success, non-zero for failure.

    Raises:
        SystemExit: On --version or argument errors (via argparse).

    Example:
        >>> import sys
        >>> sys.argv = ['daisydocs-mcp', 'search', 'button']
        >>> main()
        0
    """
    parser = argparse.ArgumentParser(
        prog="daisydocs-mcp",
        description="DaisyDocs MCP Server - daisyUI documentation lookup and search",
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    install_parser = subparsers.add_parser("install", help="Install MCP server configuration")
    _add_scope_flags(install_parser, "Install to")
    _add_corpus_flag(install_parser)

    uninstall_parser = subparsers.add_parser("uninstall", help="Remove MCP server configuration")
    _add_scope_flags(uninstall_parser, "Remove from")

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server on stdio")
    _add_corpus_flag(serve_parser)
    serve_parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    search_parser = subparsers.add_parser("search", help="Search the documentation")
    search_parser.add_argument("query", nargs="+", help="Search keywords")
    _add_corpus_flag(search_parser)

    doc_parser = subparsers.add_parser("doc", help="Show one component's documentation")
    doc_parser.add_argument("name", nargs="+", help="Component name")
    _add_corpus_flag(doc_parser)

    list_parser = subparsers.add_parser("list", help="List all components")
    _add_corpus_flag(list_parser)

    args = parser.parse_args()

    if args.command == "install":
        return install_mcp(args.global_install, args.insiders, args.corpus)
    elif args.command == "uninstall":
        return uninstall_mcp(args.global_install, args.insiders)
    elif args.command == "serve":
        return serve(args.corpus, args.verbose)
    elif args.command == "search":
        return search_docs(" ".join(args.query), args.corpus)
    elif args.command == "doc":
        return show_doc(" ".join(args.name), args.corpus)
    elif args.command == "list":
        return list_docs(args.corpus)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
