"""Tests for layout/snippet generators and design concepts."""

import pytest

from daisydocs_mcp import generators
from daisydocs_mcp.concepts import BUILTIN_CONCEPTS, ConceptEngine, DesignConcept
from daisydocs_mcp.protocol import InvalidParamsError


class TestLayouts:
    """Tests for layout skeletons."""

    def test_list_layouts(self) -> None:
        """Verify the ten layouts are listed in a stable order."""
        assert generators.list_layouts() == [
            "saas",
            "blog",
            "social",
            "kanban",
            "inbox",
            "profile",
            "docs",
            "dashboard",
            "auth",
            "store",
        ]

    @pytest.mark.parametrize("layout", generators.list_layouts())
    def test_every_layout_renders_title(self, layout: str) -> None:
        """Verify each layout includes the page title."""
        assert "Acme Portal" in generators.generate_layout(layout, "Acme Portal")

    def test_unknown_layout_falls_back(self) -> None:
        """Verify unknown layout names render the saas skeleton."""
        assert generators.generate_layout("forum") == generators.generate_layout("saas")

    def test_title_escaped(self) -> None:
        """Verify HTML in titles is escaped."""
        html = generators.generate_layout("auth", '<script>alert("x")</script>')
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_empty_title_uses_default(self) -> None:
        """Verify a blank title falls back to the default."""
        assert generators.DEFAULT_TITLE in generators.generate_layout("blog", "")


class TestIdeaRouting:
    """Tests for prompt-to-layout routing."""

    @pytest.mark.parametrize(
        ("prompt", "expected"),
        [
            ("A personal BLOG about cooking", "blog"),
            ("twitter clone", "social"),
            ("Trello-like task board", "kanban"),
            ("webmail inbox", "inbox"),
            ("account settings page", "profile"),
            ("internal wiki", "docs"),
            ("startup landing page", "saas"),
            ("admin panel", "dashboard"),
            ("something else entirely", "saas"),
        ],
        ids=["blog", "social", "kanban", "inbox", "profile", "docs", "saas", "dashboard", "fallback"],
    )
    def test_idea_to_layout(self, prompt: str, expected: str) -> None:
        """Verify keywords select the layout, defaulting to saas."""
        assert generators.idea_to_layout(prompt) == expected

    def test_first_matching_layout_wins(self) -> None:
        """Verify keyword groups are checked in order."""
        assert generators.idea_to_layout("news feed") == "blog"

    def test_idea_to_ui_title(self) -> None:
        """Verify generated UI uses the fixed idea title."""
        assert generators.IDEA_TITLE in generators.idea_to_ui("admin panel")


class TestSnippets:
    """Tests for theme, form, table, chart and script generators."""

    def test_theme(self) -> None:
        """Verify the theme block names the theme and every color."""
        css = generators.generate_theme("ocean", primary="#0000ff", base="#f0f0f0")
        assert css.startswith('@plugin "daisyui/theme" {')
        assert 'name: "ocean";' in css
        assert "--color-primary: #0000ff;" in css
        assert "--color-secondary: #f000b8;" in css
        assert "--color-base-100: #f0f0f0;" in css
        assert css.endswith("}")

    def test_form_fields(self) -> None:
        """Verify string and object fields both render inputs."""
        html = generators.scaffold_form(
            "Sign up", ["username", {"name": "email", "type": "email", "label": "E-mail"}]
        )
        assert '<input type="text" name="username"' in html
        assert '<input type="email" name="email"' in html
        assert '<label class="label">E-mail</label>' in html
        assert '<h2 class="card-title justify-center">Sign up</h2>' in html

    def test_form_without_fields(self) -> None:
        """Verify a form with no fields still has a submit button."""
        html = generators.scaffold_form("Empty")
        assert "<input" not in html
        assert "Submit" in html

    def test_table(self) -> None:
        """Verify one header and one data cell per column."""
        html = generators.create_table(["Name", "Role"])
        assert "<thead><tr><th>Name</th><th>Role</th></tr></thead>" in html
        assert html.count("<td>Data</td>") == 2
        assert "table-zebra" in html

    def test_chart(self) -> None:
        """Verify canvas id and chart type are rendered."""
        html = generators.create_chart("pie", "sales")
        assert '<canvas id="sales"></canvas>' in html
        assert "type: 'pie'" in html

    @pytest.mark.parametrize(
        ("component", "expected"),
        [("modal", "showModal()"), (" Drawer ", "my-drawer"), ("tooltip", "// No script")],
        ids=["modal", "drawer", "unknown"],
    )
    def test_get_script(self, component: str, expected: str) -> None:
        """Verify known components map to scripts and others to a placeholder."""
        assert expected in generators.get_script(component)


class TestConcepts:
    """Tests for the design concept catalog."""

    def test_list_concepts(self) -> None:
        """Verify the built-in concepts are listed sorted."""
        assert ConceptEngine().list_concepts() == [
            "darkmode",
            "glassmorphism",
            "gradient",
            "neumorphism",
            "responsive",
            "skeleton",
        ]

    def test_get_concept_normalized(self) -> None:
        """Verify lookup ignores case and whitespace."""
        concept = ConceptEngine().get_concept("  SKELETON ")
        assert concept is BUILTIN_CONCEPTS["skeleton"]

    def test_get_concept_miss(self) -> None:
        """Verify unknown concepts return None."""
        assert ConceptEngine().get_concept("brutalism") is None

    def test_get_concept_blank(self) -> None:
        """Verify a blank concept name is an invalid-params error."""
        with pytest.raises(InvalidParamsError):
            ConceptEngine().get_concept(" ")

    def test_custom_catalog(self) -> None:
        """Verify a custom catalog replaces the built-ins."""
        flat = DesignConcept("Flat", "No shadows", ("shadow-none",), "Keep it simple", "<div></div>")
        engine = ConceptEngine({"flat": flat})
        assert engine.list_concepts() == ["flat"]

    def test_markdown(self) -> None:
        """Verify the Markdown card lists classes and the snippet."""
        text = BUILTIN_CONCEPTS["gradient"].to_markdown()
        assert text.startswith("## Gradients")
        assert "**Classes:** bg-gradient-to-r, from-primary, to-secondary" in text
        assert "```html\n" in text
