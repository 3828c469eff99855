"""
Design concepts.

A small built-in catalog of visual design concepts (glassmorphism, dark mode,
...) with the daisyUI/Tailwind classes that produce them.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from daisydocs_mcp.protocol import InvalidParamsError


@dataclass(frozen=True)
class DesignConcept:
    """A named design concept.

    Attributes:
        name: Display name
        description: One-line summary
        classes: Classes that realize the concept
        suggestion: Usage advice
        snippet: Minimal HTML example
    """

    name: str
    description: str
    classes: tuple[str, ...]
    suggestion: str
    snippet: str

    def to_markdown(self) -> str:
        """Render the concept as a Markdown card."""
        return (
            f"## {self.name}\n\n"
            f"**Description:** {self.description}\n\n"
            f"**Classes:** {', '.join(self.classes)}\n\n"
            f"**Suggestion:** {self.suggestion}\n\n"
            f"```html\n{self.snippet}\n```"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "classes": list(self.classes),
            "suggestion": self.suggestion,
            "snippet": self.snippet,
        }


BUILTIN_CONCEPTS: dict[str, DesignConcept] = {
    "glassmorphism": DesignConcept(
        name="Glassmorphism",
        description="Frosted glass aesthetic with transparency and blur effects",
        classes=("glass", "backdrop-blur"),
        suggestion="Apply glass class to cards and modals for depth",
        snippet='<div class="card glass w-96 shadow-xl"><div class="card-body">Content</div></div>',
    ),
    "neumorphism": DesignConcept(
        name="Neumorphism",
        description="Soft shadows creating extruded surface effect",
        classes=("shadow-lg", "bg-base-200"),
        suggestion="Combine soft shadows with subtle gradients",
        snippet='<button class="btn shadow-lg bg-base-200">Button</button>',
    ),
    "darkmode": DesignConcept(
        name="Dark Mode",
        description="Dark color scheme with high contrast",
        classes=("bg-base-100", "text-base-content"),
        suggestion="Use data-theme attribute to toggle themes",
        snippet=(
            '<html data-theme="dark"><body class="bg-base-100 text-base-content">'
            "Content</body></html>"
        ),
    ),
    "gradient": DesignConcept(
        name="Gradients",
        description="Color transitions for visual depth",
        classes=("bg-gradient-to-r", "from-primary", "to-secondary"),
        suggestion="Use gradients sparingly on hero sections and CTAs",
        snippet='<div class="bg-gradient-to-r from-primary to-secondary p-8">Hero</div>',
    ),
    "skeleton": DesignConcept(
        name="Skeleton Loading",
        description="Placeholder UI while content loads",
        classes=("skeleton",),
        suggestion="Use skeleton class on elements for loading state",
        snippet='<div class="skeleton h-32 w-full"></div>',
    ),
    "responsive": DesignConcept(
        name="Responsive Design",
        description="Adapts layout to different screen sizes",
        classes=("sm:", "md:", "lg:", "xl:"),
        suggestion="Use responsive prefixes for breakpoint-specific styles",
        snippet='<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-4">...</div>',
    ),
}


class ConceptEngine:
    """Read-only lookup over a fixed set of design concepts."""

    def __init__(self, concepts: dict[str, DesignConcept] | None = None) -> None:
        self.concepts = MappingProxyType(dict(concepts or BUILTIN_CONCEPTS))

    def get_concept(self, query: str) -> DesignConcept | None:
        """Find a concept by key, ignoring case and surrounding whitespace.

        Raises:
            InvalidParamsError: If query is empty or only whitespace.
        """
        key = (query or "").strip().lower()
        if not key:
            raise InvalidParamsError("Concept name is required")
        return self.concepts.get(key)

    def list_concepts(self) -> list[str]:
        return sorted(self.concepts)
