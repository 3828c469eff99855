"""
DaisyDocs MCP Server.

JSON-RPC 2.0 MCP server for daisyUI documentation lookup and search.
One JSON object per line on stdin, one response per line on stdout.

Architecture:
    Line → Message Handler → Tool Registry → Query Engine → Envelope

Deployment:
    - VS Code MCP extension
    - Claude Desktop
    - Any MCP-compatible client
"""

import asyncio
import json
import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

from daisydocs_mcp.__version__ import __version__
from daisydocs_mcp.concepts import ConceptEngine
from daisydocs_mcp.corpus import QueryEngine, load_store
from daisydocs_mcp.filesystem import FilesystemAdapter
from daisydocs_mcp.models import DEFAULT_CONFIG, DocumentStore, ServerConfig
from daisydocs_mcp.protocol import (
    JSONRPC_VERSION,
    MCP_VERSION,
    InvalidParamsError,
    InvalidRequestError,
    MCPError,
    MethodNotFoundError,
    ParseError,
    error_response,
    success_response,
)
from daisydocs_mcp.tools import build_registry

SERVER_NAME = "daisydocs-mcp-server"

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


class DaisyDocsMCPServer:
    """MCP server for daisyUI documentation.

    Loads the documentation corpus once, then answers requests against
    that shared, read-only store. Every failure while handling a message
    becomes an error envelope; nothing a client sends can stop the server.

    MCP Protocol Implementation:
    - initialize: Establish connection and negotiate capabilities
    - ping: Liveness check
    - tools/list: Advertise available tools
    - tools/call: Execute a tool by name
    - notifications/initialized: Client handshake acknowledgement

    Attributes:
        config: Server configuration
        logger: Logger instance
        store: Immutable document store shared by all handlers
        engine: Query engine over the store
        concepts: Design concept engine
        registry: Tool registry (the only way tools are invoked)
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        logger_instance: logging.Logger | None = None,
        store: DocumentStore | None = None,
        fs: FilesystemAdapter | None = None,
    ) -> None:
        """Initialize MCP server with corpus, engines and tool registry.

        Loads and parses the corpus unless a prebuilt store is injected.
        Provides dependency injection for testing with small corpora and
        mock filesystems.

        Args:
            config: Server configuration. Defaults to DEFAULT_CONFIG.
            logger_instance: Logger instance. Defaults to module logger.
            store: Prebuilt document store. Defaults to loading the corpus
                named by ``config.corpus_path`` (embedded when None).
            fs: Filesystem adapter used to read a corpus file.

        Returns:
            None - initializes instance attributes.

        Raises:
            CorpusError: If the corpus cannot be loaded.
            RegistryError: If the tool table does not cover every tool name.

        Example:
            >>> server = DaisyDocsMCPServer()
            >>> server = DaisyDocsMCPServer(store=CorpusParser().parse(text))
        """
        self.config = config or DEFAULT_CONFIG
        self.logger = logger_instance or logger

        if store is None:
            store = load_store(self.config.corpus_path, self.config.search, fs)
        self.store = store

        self.engine = QueryEngine(self.store, self.config.search, self.logger)
        self.concepts = ConceptEngine()
        self.registry = build_registry(self.engine, self.concepts, self.config, self.logger)

        self.methods: dict[str, Callable[[dict[str, Any]], Any]] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "notifications/initialized": self._initialized,
        }

    async def handle_message(self, message: Any) -> dict[str, Any] | None:
        """Route one decoded JSON-RPC 2.0 message to its handler.

        Central dispatcher implementing MCP protocol message routing.
        Protocol errors (invalid request, unknown method or tool, invalid
        params) and unexpected handler failures are all converted to error
        envelopes here.

        Args:
            message: Decoded JSON value of one inbound line.

        Returns:
            JSON-RPC 2.0 response dict with result or error and the
            request id mirrored. None for notifications (no ``id`` member),
            which never get a response, even on error.

        Raises:
            No exceptions - errors returned in JSON-RPC error format.

        Example:
            >>> response = await server.handle_message({
            ...     'jsonrpc': '2.0',
            ...     'id': 1,
            ...     'method': 'tools/list'
            ... })
            >>> 'result' in response
            True
        """
        is_request = isinstance(message, dict)
        message_id = message.get("id") if is_request else None
        notification = is_request and "id" not in message
        method = message.get("method") if is_request else None

        try:
            response = success_response(message_id, self._dispatch(message))
        except MCPError as e:
            self.logger.warning(f"{e.code.name} ({method}): {e.message}")
            response = error_response(message_id, e)
        except Exception as e:
            self.logger.exception(f"Error handling {method}: {e}")
            response = error_response(message_id, MCPError(f"Internal error: {e!s}"))

        if notification:
            return None
        return response

    async def handle_line(self, line: str | bytes) -> str | None:
        """Decode one transport line, dispatch it and encode the response.

        Args:
            line: One line read from the transport, as text or raw UTF-8
                bytes.

        Returns:
            Serialized JSON response, or None when there is nothing to
            send (blank line or notification).

        Raises:
            No exceptions - undecodable bytes, malformed JSON, oversized
            numbers and excessive nesting all yield a parse error envelope.

        Example:
            >>> await server.handle_line('{"jsonrpc": "2.0", "id": 1, "method": "ping"}')
            '{"jsonrpc": "2.0", "id": 1, "result": {}}'
        """
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                self.logger.error(f"Invalid UTF-8: {e}")
                return self._parse_error(e)

        line = line.strip().strip("\x00")
        if not line:
            return None

        try:
            message = json.loads(line)
        except (ValueError, RecursionError) as e:
            self.logger.error(f"Invalid JSON: {e}")
            return self._parse_error(e)

        response = await self.handle_message(message)
        if response is None:
            return None

        try:
            return json.dumps(response)
        except (TypeError, ValueError) as e:
            self.logger.exception(f"Unserializable response: {e}")
            error = MCPError(f"Internal error: {e!s}")
            return json.dumps(error_response(response.get("id"), error))

    def _parse_error(self, error: Exception) -> str:
        return json.dumps(error_response(None, ParseError("Parse error", data=str(error))))

    # ==================== DISPATCH ====================

    def _dispatch(self, message: Any) -> Any:
        """Validate the request envelope and run the method handler.

        Raises:
            InvalidRequestError: If the message is not a request object.
            MethodNotFoundError: If the method is not supported.
            InvalidParamsError: If params is not an object.
        """
        if isinstance(message, list):
            raise InvalidRequestError("Batch requests are not supported")
        if not isinstance(message, dict):
            raise InvalidRequestError("Request must be a JSON object")
        if "jsonrpc" in message and message["jsonrpc"] != JSONRPC_VERSION:
            raise InvalidRequestError(f"Unsupported jsonrpc version: {message['jsonrpc']!r}")

        message_id = message.get("id")
        if isinstance(message_id, bool) or not isinstance(message_id, (str, int, float, type(None))):
            raise InvalidRequestError("Request id must be a string, number or null")

        method = message.get("method")
        if not isinstance(method, str):
            raise InvalidRequestError("Request method must be a string")

        handler = self.methods.get(method)
        if handler is None:
            raise MethodNotFoundError(f"Unknown method: {method}", data={"method": method})

        params = message.get("params")
        if params is not None and not isinstance(params, dict):
            raise InvalidParamsError("'params' must be an object")
        return handler(params or {})

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        client = params.get("clientInfo") or {}
        if isinstance(client, dict) and client.get("name"):
            self.logger.info(f"Client connected: {client['name']} {client.get('version', '')}")
        return {
            "protocolVersion": MCP_VERSION,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {
                "name": SERVER_NAME,
                "version": __version__,
            },
        }

    def _initialized(self, params: dict[str, Any]) -> dict[str, Any]:
        self.logger.debug("Client initialization complete")
        return {}

    def _ping(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    def _tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": self.registry.catalog()}

    def _tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        """Execute a registered tool.

        Args:
            params: ``{"name": str, "arguments": object}``; arguments
                default to an empty object.

        Returns:
            MCP tool result with text content and structured content.

        Raises:
            InvalidParamsError: If params are missing or malformed, or the
                arguments fail the tool's schema.
            ToolNotFoundError: If the tool name is not registered.
        """
        if not params:
            raise InvalidParamsError("Missing params")

        tool_name = params.get("name")
        if not isinstance(tool_name, str) or not tool_name:
            raise InvalidParamsError("'name' is required and must be a string")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise InvalidParamsError("'arguments' must be an object")

        self.logger.debug(f"tools/call {tool_name}")
        return self.registry.invoke(tool_name, arguments).to_dict()

    # ==================== TRANSPORT ====================

    async def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Execute MCP server stdio event loop.

        Main server loop implementing MCP stdio transport. Reads one line,
        answers it, then reads the next. A bad message produces an error
        response and the loop keeps going; only end of input or a failure
        of the input stream itself stops it.

        Lines are read from the stream's binary buffer when it has one and
        decoded per line, so invalid UTF-8 fails that message only.

        Args:
            stdin: Input stream. Defaults to sys.stdin.
            stdout: Output stream. Defaults to sys.stdout.

        Returns:
            None - runs until EOF.

        Raises:
            No exceptions - stream errors are logged and end the loop.

        Example:
            >>> server = DaisyDocsMCPServer()
            >>> await server.run()  # Blocks until EOF
        """
        source = stdin or sys.stdin
        reader = getattr(source, "buffer", source)
        writer = stdout or sys.stdout
        loop = asyncio.get_running_loop()

        self.logger.info(f"Starting DaisyDocs MCP Server ({len(self.store)} components)...")

        while True:
            try:
                line = await loop.run_in_executor(None, reader.readline)
            except (OSError, ValueError) as e:
                self.logger.error(f"Input stream failed: {e}")
                break

            if not line:
                self.logger.info("EOF detected, shutting down")
                break

            response = await self.handle_line(line)
            if response is not None:
                print(response, file=writer, flush=True)


async def main(config: ServerConfig | None = None) -> None:  # pragma: no cover
    """Entry point for MCP server process.

    Creates DaisyDocsMCPServer instance and runs the stdio event loop.
    Called when module is executed directly or via the CLI ``serve`` command.

    Args:
        config: Server configuration. Defaults to DEFAULT_CONFIG.

    Returns:
        None - runs until EOF on stdin.

    Example:
        >>> # From command line:
        >>> # python -m daisydocs_mcp.server
    """
    server = DaisyDocsMCPServer(config=config)
    await server.run()


if __name__ == "__main__":  # pragma: no cover
    asyncio.run(main())
