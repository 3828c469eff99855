"""
JSON-RPC 2.0 protocol primitives for the MCP server.

Error codes, the exception hierarchy recovered at the dispatcher boundary,
and builders for response envelopes. A response envelope always carries
exactly one of ``result`` or ``error`` and mirrors the request ``id``.

Error kinds:
    ParseError          -32700  inbound line is not valid JSON
    InvalidRequest      -32600  JSON is not a request object
    MethodNotFound      -32601  unsupported top-level method
    ToolNotFound        -32601  unknown tool name in tools/call
    InvalidParams       -32602  required tool argument missing, empty or mistyped
    Internal            -32603  unexpected failure inside a handler

A lookup that matches nothing is not an error; tools report it as a normal
result.
"""

from enum import Enum
from typing import Any, TypeAlias

# Type alias for JSON data structures
JSONValue: TypeAlias = dict[str, "JSONValue"] | list["JSONValue"] | str | int | float | bool | None

JSONRPC_VERSION = "2.0"

# MCP Protocol version
MCP_VERSION = "2024-11-05"


class JSONRPCErrorCode(Enum):
    """Standard JSON-RPC 2.0 error codes.

    Attributes:
        PARSE_ERROR: Invalid JSON received (-32700).
        INVALID_REQUEST: JSON is not valid request object (-32600).
        METHOD_NOT_FOUND: Method or tool does not exist (-32601).
        INVALID_PARAMS: Invalid method parameters (-32602).
        INTERNAL_ERROR: Internal server error (-32603).
    """

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class MCPError(Exception):
    """Base class for errors reported through a JSON-RPC error envelope.

    Attributes:
        code: JSON-RPC error code for the envelope
        message: Human-readable message
        data: Optional structured detail
    """

    code = JSONRPCErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, data: JSONValue = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data

    def to_error(self) -> dict[str, Any]:
        """Build the ``error`` member of a response envelope."""
        error: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


class ParseError(MCPError):
    """Inbound message is not well-formed JSON."""

    code = JSONRPCErrorCode.PARSE_ERROR


class InvalidRequestError(MCPError):
    """Inbound JSON is not a request object."""

    code = JSONRPCErrorCode.INVALID_REQUEST


class MethodNotFoundError(MCPError):
    """Top-level method is not supported."""

    code = JSONRPCErrorCode.METHOD_NOT_FOUND


class ToolNotFoundError(MCPError):
    """tools/call named a tool that is not registered."""

    code = JSONRPCErrorCode.METHOD_NOT_FOUND

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}", data={"tool": tool_name})
        self.tool_name = tool_name


class InvalidParamsError(MCPError):
    """A required argument is missing or empty, or an argument is mistyped."""

    code = JSONRPCErrorCode.INVALID_PARAMS


def success_response(message_id: JSONValue, result: Any) -> dict[str, Any]:
    """Wrap a handler result in a JSON-RPC success envelope.

    Args:
        message_id: Request id, mirrored verbatim.
        result: JSON-serializable result payload.

    Returns:
        Envelope dict with ``jsonrpc``, ``id`` and ``result``.

    Example:
        >>> success_response(1, {})
        {'jsonrpc': '2.0', 'id': 1, 'result': {}}
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": message_id, "result": result}


def error_response(message_id: JSONValue, error: MCPError) -> dict[str, Any]:
    """Wrap an MCPError in a JSON-RPC error envelope.

    Args:
        message_id: Request id, mirrored verbatim (None for parse errors).
        error: The error to report.

    Returns:
        Envelope dict with ``jsonrpc``, ``id`` and ``error``.

    Example:
        >>> error_response(None, ParseError("Parse error"))["error"]["code"]
        -32700
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": message_id, "error": error.to_error()}
