"""
Tool registry for the MCP server.

Maps every tool name to its parameter schema and handler. Tool names form
a closed enum and the registry refuses to build unless it covers that enum
exactly, so the discovery catalog (tools/list) and the set of invocable
tools (tools/call) are the same set by construction.

Architecture:
    ToolName (closed set) → ToolSpec (schema + handler) → ToolRegistry
    DocsToolset supplies the handlers over a QueryEngine and ConceptEngine.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeAlias

from daisydocs_mcp import generators
from daisydocs_mcp.concepts import ConceptEngine
from daisydocs_mcp.corpus import QueryEngine
from daisydocs_mcp.models import DEFAULT_CONFIG, ServerConfig
from daisydocs_mcp.protocol import InvalidParamsError, ToolNotFoundError


class RegistryError(ValueError):
    """Raised when the tool table does not match the ToolName set."""


class ToolName(Enum):
    """Every tool the server can run."""

    LIST_COMPONENTS = "daisyui_list_components"
    GET_DOCS = "daisyui_get_docs"
    SEARCH = "daisyui_search"
    LIST_CONCEPTS = "daisyui_list_concepts"
    GET_CONCEPT = "daisyui_get_concept"
    LIST_LAYOUTS = "daisyui_list_layouts"
    SCAFFOLD_LAYOUT = "daisyui_scaffold_layout"
    IDEA_TO_UI = "daisyui_idea_to_ui"
    GENERATE_THEME = "daisyui_generate_theme"
    SCAFFOLD_FORM = "daisyui_scaffold_form"
    CREATE_TABLE = "daisyui_create_table"
    CREATE_CHART = "daisyui_create_chart"
    GET_SCRIPT = "daisyui_get_script"


@dataclass(frozen=True)
class ToolParameter:
    """Declared tool argument.

    Attributes:
        name: Argument name
        type: JSON schema type ("string" or "array")
        description: Human-readable description for clients
        required: Whether the argument must be present and non-empty
        default: Value used when an optional argument is omitted
        enum: Allowed values (compared case-insensitively), if restricted
        items: JSON schema type of array items; None allows any item
    """

    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None
    enum: tuple[str, ...] | None = None
    items: str | None = None

    def schema(self) -> dict[str, Any]:
        """Return the JSON schema for this argument."""
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if isinstance(self.default, tuple):
            schema["default"] = list(self.default)
        elif self.default is not None:
            schema["default"] = self.default
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.items is not None:
            schema["items"] = {"type": self.items}
        return schema

    def coerce(self, value: Any, max_length: int) -> Any:
        """Validate and coerce one supplied argument value.

        Numbers are accepted for string arguments and converted to text.
        Required strings and arrays must not be empty.

        Args:
            value: Raw value from the request (None when omitted).
            max_length: Longest accepted string.

        Returns:
            The coerced value, or the default for an omitted optional argument.

        Raises:
            InvalidParamsError: If the value is missing, empty, mistyped,
                too long or outside the enum.
        """
        if value is None:
            if self.required:
                raise InvalidParamsError(f"'{self.name}' is required")
            return self.default

        if self.type == "string":
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                value = str(value)
            if not isinstance(value, str):
                raise InvalidParamsError(f"'{self.name}' must be a string")
            if self.required and not value.strip():
                raise InvalidParamsError(f"'{self.name}' is required and must not be empty")
            if len(value) > max_length:
                raise InvalidParamsError(f"'{self.name}' is too long (max {max_length} characters)")
            if self.enum is not None:
                value = value.strip().lower()
                if value not in self.enum:
                    raise InvalidParamsError(
                        f"'{self.name}' must be one of: {', '.join(self.enum)}",
                        data={"allowed": list(self.enum)},
                    )
            return value

        if self.type == "array":
            if not isinstance(value, list):
                raise InvalidParamsError(f"'{self.name}' must be an array")
            if self.required and not value:
                raise InvalidParamsError(f"'{self.name}' is required and must not be empty")
            if self.items == "string" and not all(isinstance(item, str) for item in value):
                raise InvalidParamsError(f"'{self.name}' must contain only strings")
            return value

        raise InvalidParamsError(f"'{self.name}' has unsupported type {self.type!r}")


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool handler.

    Attributes:
        text: Text shown to the client
        structured: Machine-readable payload, if any
    """

    text: str
    structured: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Build the MCP tools/call result payload."""
        result: dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.structured is not None:
            result["structuredContent"] = self.structured
        return result


ToolHandler: TypeAlias = Callable[[dict[str, Any]], ToolResult]


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: name, description, parameters and handler."""

    name: ToolName
    description: str
    handler: ToolHandler
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)

    def input_schema(self) -> dict[str, Any]:
        """Return the JSON schema of the tool's argument object."""
        return {
            "type": "object",
            "properties": {p.name: p.schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def describe(self) -> dict[str, Any]:
        """Return the tools/list entry for this tool."""
        return {
            "name": self.name.value,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }

    def bind(self, arguments: dict[str, Any], max_length: int) -> dict[str, Any]:
        """Validate an argument object against the declared parameters.

        Undeclared arguments are ignored.

        Raises:
            InvalidParamsError: If any declared argument fails validation.
        """
        return {p.name: p.coerce(arguments.get(p.name), max_length) for p in self.parameters}


class ToolRegistry:
    """Exhaustive table of tools keyed by ToolName.

    Attributes:
        max_string_length: Longest string argument accepted by bind

    Examples:
        ```python
        registry = build_registry(engine, ConceptEngine())
        spec = registry.get("daisyui_search")
        result = spec.handler(spec.bind({"query": "button"}, 1000))
        ```
    """

    def __init__(self, specs: Iterable[ToolSpec], max_string_length: int = 1000) -> None:
        """Build the registry and check it covers ToolName exactly.

        Args:
            specs: One ToolSpec per ToolName member.
            max_string_length: Longest string argument accepted.

        Raises:
            RegistryError: If a tool is registered twice or a ToolName
                member has no spec.
        """
        self._specs: dict[ToolName, ToolSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise RegistryError(f"Tool registered twice: {spec.name.value}")
            self._specs[spec.name] = spec

        missing = set(ToolName) - self._specs.keys()
        if missing:
            names = ", ".join(sorted(m.value for m in missing))
            raise RegistryError(f"Tools without a registry entry: {names}")

        self.max_string_length = max_string_length

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._specs[name] for name in ToolName)

    def __contains__(self, name: object) -> bool:
        try:
            return ToolName(name) in self._specs
        except ValueError:
            return False

    def names(self) -> list[str]:
        """Return every registered tool name in declaration order."""
        return [spec.name.value for spec in self]

    def get(self, name: str) -> ToolSpec:
        """Resolve a tool name to its spec.

        Raises:
            ToolNotFoundError: If no tool has this name.
        """
        try:
            return self._specs[ToolName(name)]
        except ValueError:
            raise ToolNotFoundError(name) from None

    def catalog(self) -> list[dict[str, Any]]:
        """Return the tools/list payload: every tool with its input schema."""
        return [spec.describe() for spec in self]

    def invoke(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Resolve, validate and run a tool.

        Args:
            name: Tool name from the request.
            arguments: Argument object from the request.

        Returns:
            ToolResult from the handler.

        Raises:
            ToolNotFoundError: If the tool is unknown.
            InvalidParamsError: If arguments fail validation.
        """
        spec = self.get(name)
        return spec.handler(spec.bind(arguments, self.max_string_length))


class DocsToolset:
    """Tool handlers over the documentation, concepts and generators.

    Holds shared read-only references to the query and concept engines.
    Each handler receives the bound argument dict and returns a ToolResult.
    """

    def __init__(
        self,
        engine: QueryEngine,
        concepts: ConceptEngine,
        config: ServerConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.engine = engine
        self.concepts = concepts
        self.config = config or DEFAULT_CONFIG
        self.logger = logger or logging.getLogger(__name__)

    # ==================== DOCUMENTATION ====================

    def list_components(self, args: dict[str, Any]) -> ToolResult:
        components = self.engine.list_components()
        return ToolResult(
            text=f"## DaisyUI Components\n\n{', '.join(components)}",
            structured={"components": components, "count": len(components)},
        )

    def get_docs(self, args: dict[str, Any]) -> ToolResult:
        """Return an entry body, or a not-found message with suggestions."""
        name = args["component"]
        entry = self.engine.get_doc(name)
        if entry is not None:
            return ToolResult(
                text=entry.body,
                structured={"found": True, "key": entry.key, "body": entry.body},
            )

        suggestions = self.engine.suggest(name, self.config.max_suggestions)
        text = f"Documentation not found for '{name.strip()}'."
        if suggestions:
            text += f" Did you mean: {', '.join(suggestions)}?"
        return ToolResult(
            text=text,
            structured={"found": False, "query": name.strip(), "suggestions": suggestions},
        )

    def search(self, args: dict[str, Any]) -> ToolResult:
        """Return ranked search hits with score and a short body preview."""
        query = args["query"]
        results = self.engine.search(query)
        structured = {
            "query": query,
            "count": len(results),
            "results": [r.to_dict() for r in results],
        }
        if not results:
            return ToolResult(text=f"No results found for '{query}'", structured=structured)

        limit = self.config.result_preview_length
        lines = [f"## Search Results for '{query}'", ""]
        for result in results:
            lines.append(f"- **{result.key}** (score: {result.score})")
            preview = " ".join(result.body.splitlines()[1:2])[:limit]
            if preview:
                lines.append(f"  {preview}")
        return ToolResult(text="\n".join(lines), structured=structured)

    # ==================== CONCEPTS ====================

    def list_concepts(self, args: dict[str, Any]) -> ToolResult:
        concepts = self.concepts.list_concepts()
        return ToolResult(
            text=f"## Design Concepts\n\n{', '.join(concepts)}",
            structured={"concepts": concepts},
        )

    def get_concept(self, args: dict[str, Any]) -> ToolResult:
        name = args["concept"]
        concept = self.concepts.get_concept(name)
        if concept is None:
            available = self.concepts.list_concepts()
            return ToolResult(
                text=f"Concept '{name.strip()}' not found. Available: {', '.join(available)}",
                structured={"found": False, "query": name.strip(), "available": available},
            )
        return ToolResult(text=concept.to_markdown(), structured={"found": True, **concept.to_dict()})

    # ==================== GENERATORS ====================

    def list_layouts(self, args: dict[str, Any]) -> ToolResult:
        layouts = generators.list_layouts()
        return ToolResult(
            text=f"## Available Layouts\n\n{', '.join(layouts)}",
            structured={"layouts": layouts},
        )

    def scaffold_layout(self, args: dict[str, Any]) -> ToolResult:
        html = generators.generate_layout(args["layout"], args["title"])
        return ToolResult(text=html, structured={"layout": args["layout"]})

    def idea_to_ui(self, args: dict[str, Any]) -> ToolResult:
        layout = generators.idea_to_layout(args["prompt"])
        self.logger.debug(f"Prompt routed to {layout} layout")
        return ToolResult(text=generators.idea_to_ui(args["prompt"]), structured={"layout": layout})

    def generate_theme(self, args: dict[str, Any]) -> ToolResult:
        css = generators.generate_theme(
            args["name"].strip(), args["primary"], args["secondary"], args["accent"], args["base"]
        )
        return ToolResult(text=css)

    def scaffold_form(self, args: dict[str, Any]) -> ToolResult:
        return ToolResult(text=generators.scaffold_form(args["title"], args["fields"]))

    def create_table(self, args: dict[str, Any]) -> ToolResult:
        return ToolResult(text=generators.create_table(args["columns"]))

    def create_chart(self, args: dict[str, Any]) -> ToolResult:
        return ToolResult(text=generators.create_chart(args["type"].strip(), args["id"]))

    def get_script(self, args: dict[str, Any]) -> ToolResult:
        return ToolResult(text=generators.get_script(args["component"]))

    # ==================== REGISTRY ====================

    def specs(self) -> list[ToolSpec]:
        """Return one ToolSpec per ToolName, bound to this toolset's handlers."""
        return [
            ToolSpec(
                name=ToolName.LIST_COMPONENTS,
                description="List all documented daisyUI components.",
                handler=self.list_components,
            ),
            ToolSpec(
                name=ToolName.GET_DOCS,
                description="Get the documentation of one daisyUI component by exact name.",
                handler=self.get_docs,
                parameters=(
                    ToolParameter(
                        "component", "string", "Component name, e.g. 'button'", required=True
                    ),
                ),
            ),
            ToolSpec(
                name=ToolName.SEARCH,
                description=(
                    "Search daisyUI component docs by keyword. Results are ranked: "
                    "name matches first, then body and indexed term matches."
                ),
                handler=self.search,
                parameters=(ToolParameter("query", "string", "Search keywords", default=""),),
            ),
            ToolSpec(
                name=ToolName.LIST_CONCEPTS,
                description="List built-in design concepts.",
                handler=self.list_concepts,
            ),
            ToolSpec(
                name=ToolName.GET_CONCEPT,
                description="Explain a design concept with the classes that implement it.",
                handler=self.get_concept,
                parameters=(
                    ToolParameter(
                        "concept", "string", "Concept name, e.g. 'glassmorphism'", required=True
                    ),
                ),
            ),
            ToolSpec(
                name=ToolName.LIST_LAYOUTS,
                description="List the layout skeletons available to daisyui_scaffold_layout.",
                handler=self.list_layouts,
            ),
            ToolSpec(
                name=ToolName.SCAFFOLD_LAYOUT,
                description="Generate a modern web layout skeleton.",
                handler=self.scaffold_layout,
                parameters=(
                    ToolParameter(
                        "layout",
                        "string",
                        "Layout type",
                        required=True,
                        enum=tuple(generators.list_layouts()),
                    ),
                    ToolParameter(
                        "title", "string", "Page title", default=generators.DEFAULT_TITLE
                    ),
                ),
            ),
            ToolSpec(
                name=ToolName.IDEA_TO_UI,
                description="Turn a short product idea into a matching layout skeleton.",
                handler=self.idea_to_ui,
                parameters=(
                    ToolParameter("prompt", "string", "Idea description", required=True),
                ),
            ),
            ToolSpec(
                name=ToolName.GENERATE_THEME,
                description="Generate a daisyUI custom theme block.",
                handler=self.generate_theme,
                parameters=(
                    ToolParameter("name", "string", "Theme name", required=True),
                    ToolParameter("primary", "string", "Primary color", default="#570df8"),
                    ToolParameter("secondary", "string", "Secondary color", default="#f000b8"),
                    ToolParameter("accent", "string", "Accent color", default="#1dcdbc"),
                    ToolParameter("base", "string", "Base-100 color", default="#ffffff"),
                ),
            ),
            ToolSpec(
                name=ToolName.SCAFFOLD_FORM,
                description="Generate a form card.",
                handler=self.scaffold_form,
                parameters=(
                    ToolParameter("title", "string", "Form title", required=True),
                    ToolParameter(
                        "fields",
                        "array",
                        "Field names, or objects with name, type and label",
                        default=(),
                    ),
                ),
            ),
            ToolSpec(
                name=ToolName.CREATE_TABLE,
                description="Generate a table with the given column headers.",
                handler=self.create_table,
                parameters=(
                    ToolParameter(
                        "columns", "array", "Column headers", required=True, items="string"
                    ),
                ),
            ),
            ToolSpec(
                name=ToolName.CREATE_CHART,
                description="Generate a Chart.js canvas inside a daisyUI card.",
                handler=self.create_chart,
                parameters=(
                    ToolParameter("type", "string", "Chart.js chart type, e.g. 'bar'", required=True),
                    ToolParameter("id", "string", "Canvas element id", default="c1"),
                ),
            ),
            ToolSpec(
                name=ToolName.GET_SCRIPT,
                description="Get the JavaScript needed to open a modal or toggle a drawer.",
                handler=self.get_script,
                parameters=(
                    ToolParameter("component", "string", "'modal' or 'drawer'", required=True),
                ),
            ),
        ]


def build_registry(
    engine: QueryEngine,
    concepts: ConceptEngine | None = None,
    config: ServerConfig | None = None,
    logger: logging.Logger | None = None,
) -> ToolRegistry:
    """Create the tool registry over shared engines.

    Args:
        engine: Query engine over the loaded corpus.
        concepts: Concept engine. Defaults to the built-in concepts.
        config: Server configuration. Defaults to DEFAULT_CONFIG.
        logger: Logger instance for handlers.

    Returns:
        A ToolRegistry covering every ToolName.

    Raises:
        RegistryError: If the toolset does not cover ToolName exactly.
    """
    config = config or DEFAULT_CONFIG
    toolset = DocsToolset(engine, concepts or ConceptEngine(), config, logger)
    return ToolRegistry(toolset.specs(), max_string_length=config.max_query_length)
