"""Tests for CLI module."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from daisydocs_mcp.cli import (
    WINDOWS_PLATFORM,
    get_mcp_server_config,
    get_venv_python,
    get_vscode_mcp_path,
    install_mcp,
    list_docs,
    main,
    search_docs,
    show_doc,
    uninstall_mcp,
)
from tests.sample_corpus import BTN_CARD


class TestGetVenvPython:
    """Tests for get_venv_python function."""

    @pytest.mark.parametrize(
        ("platform", "venv_subpath", "python_name", "expected_contains"),
        [
            ("linux", "bin", "python", [".venv", "python"]),
            (WINDOWS_PLATFORM, "Scripts", "python.exe", [".venv", "python.exe"]),
        ],
        ids=["linux_venv", "windows_venv"],
    )
    def test_detects_venv_python(
        self,
        tmp_path: Path,
        platform: str,
        venv_subpath: str,
        python_name: str,
        expected_contains: list[str],
    ) -> None:
        """Verify detection of venv Python path on different platforms."""
        venv_dir = tmp_path / ".venv" / venv_subpath
        venv_dir.mkdir(parents=True)
        venv_python = venv_dir / python_name
        venv_python.touch()

        with (
            patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path),
            patch("daisydocs_mcp.cli.sys.platform", platform),
        ):
            result = get_venv_python()
            for expected in expected_contains:
                assert expected in result

    @pytest.mark.parametrize(
        ("has_venv_dir", "has_python"),
        [
            (False, False),  # No .venv at all
            (True, False),  # .venv exists but no python binary
        ],
        ids=["no_venv", "venv_no_python"],
    )
    def test_fallback_to_sys_executable(
        self,
        tmp_path: Path,
        has_venv_dir: bool,
        has_python: bool,  # noqa: ARG002
    ) -> None:
        """Verify fallback to sys.executable when venv unavailable."""
        if has_venv_dir:
            (tmp_path / ".venv").mkdir()

        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = get_venv_python()
            assert result == sys.executable


class TestGetMcpServerConfig:
    """Tests for get_mcp_server_config function."""

    def test_returns_valid_config_structure(self) -> None:
        """Verify config contains required MCP server fields."""
        config = get_mcp_server_config()
        assert "command" in config
        assert "args" in config
        assert config["args"] == ["-m", "daisydocs_mcp.server"]

    def test_custom_corpus_uses_serve_command(self, tmp_path: Path) -> None:
        """Verify a custom corpus routes through the CLI serve command."""
        corpus = tmp_path / "docs.txt"
        config = get_mcp_server_config(corpus)
        assert config["args"] == ["-m", "daisydocs_mcp.cli", "serve", "--corpus", str(corpus)]


class TestGetVscodeMcpPath:
    """Tests for get_vscode_mcp_path function."""

    @pytest.mark.parametrize(
        ("global_install", "insiders", "expected_parts"),
        [
            (False, False, [".vscode", "mcp.json"]),
            (True, False, [".config", "Code", "User", "mcp.json"]),
            (True, True, [".config", "Code - Insiders", "User", "mcp.json"]),
            (False, True, [".vscode", "mcp.json"]),  # insiders ignored for workspace
        ],
        ids=["workspace_path", "global_stable", "global_insiders", "workspace_insiders_ignored"],
    )
    def test_vscode_mcp_path(
        self, tmp_path: Path, global_install: bool, insiders: bool, expected_parts: list[str]
    ) -> None:
        """Verify correct path returned for workspace vs global install."""
        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = get_vscode_mcp_path(global_install=global_install, insiders=insiders)
            for part in expected_parts:
                assert part in str(result)


class TestInstallMcp:
    """Tests for install_mcp function."""

    def test_install_creates_new_config(self, tmp_path: Path) -> None:
        """Verify install creates mcp.json when it doesn't exist."""
        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = install_mcp(global_install=False)

            assert result == 0
            mcp_path = tmp_path / ".vscode" / "mcp.json"
            assert mcp_path.exists()
            config = json.loads(mcp_path.read_text())
            assert "daisydocs-mcp" in config["servers"]

    @pytest.mark.parametrize(
        ("initial_config", "expected_servers"),
        [
            ({"servers": {"other-server": {}}}, ["other-server", "daisydocs-mcp"]),
            ({"other_key": "value"}, ["daisydocs-mcp"]),
        ],
        ids=["preserves_existing", "adds_servers_key"],
    )
    def test_install_updates_existing_config(
        self, tmp_path: Path, initial_config: dict, expected_servers: list[str]
    ) -> None:
        """Verify install preserves existing servers and handles missing keys."""
        vscode_dir = tmp_path / ".vscode"
        vscode_dir.mkdir()
        mcp_path = vscode_dir / "mcp.json"
        mcp_path.write_text(json.dumps(initial_config))

        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = install_mcp(global_install=False)

            assert result == 0
            config = json.loads(mcp_path.read_text())
            for server in expected_servers:
                assert server in config["servers"]

    def test_install_handles_invalid_json(self, tmp_path: Path) -> None:
        """Verify install fails gracefully on invalid JSON."""
        vscode_dir = tmp_path / ".vscode"
        vscode_dir.mkdir()
        (vscode_dir / "mcp.json").write_text("{ invalid json }")

        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = install_mcp(global_install=False)
            assert result == 1


class TestUninstallMcp:
    """Tests for uninstall_mcp function."""

    def test_uninstall_removes_server(self, tmp_path: Path) -> None:
        """Verify uninstall removes the daisydocs-mcp entry only."""
        vscode_dir = tmp_path / ".vscode"
        vscode_dir.mkdir()
        mcp_path = vscode_dir / "mcp.json"
        mcp_path.write_text(json.dumps({"servers": {"daisydocs-mcp": {}, "other-server": {}}}))

        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = uninstall_mcp(global_install=False)

            assert result == 0
            config = json.loads(mcp_path.read_text())
            assert "daisydocs-mcp" not in config["servers"]
            assert "other-server" in config["servers"]

    @pytest.mark.parametrize(
        ("setup", "expected_code"),
        [
            ("no_config", 0),
            ("no_server", 0),
            ("invalid_json", 1),
        ],
        ids=["missing_config", "missing_server", "invalid_json"],
    )
    def test_uninstall_edge_cases(self, tmp_path: Path, setup: str, expected_code: int) -> None:
        """Verify uninstall handles various edge cases."""
        vscode_dir = tmp_path / ".vscode"

        if setup == "no_server":
            vscode_dir.mkdir()
            (vscode_dir / "mcp.json").write_text(json.dumps({"servers": {"other-server": {}}}))
        elif setup == "invalid_json":
            vscode_dir.mkdir()
            (vscode_dir / "mcp.json").write_text("{ invalid json }")
        # "no_config" - do nothing, dir doesn't exist

        with patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path):
            result = uninstall_mcp(global_install=False)
            assert result == expected_code


class TestMain:
    """Tests for main CLI entry point."""

    @pytest.mark.parametrize(
        ("argv", "expected_exit", "check_file"),
        [
            (["daisydocs-mcp"], 0, None),
            (["daisydocs-mcp", "install"], 0, ".vscode/mcp.json"),
            (["daisydocs-mcp", "uninstall"], 0, None),
        ],
        ids=["no_command", "install", "uninstall"],
    )
    def test_main_commands(
        self, tmp_path: Path, argv: list[str], expected_exit: int, check_file: str | None
    ) -> None:
        """Verify main dispatches commands correctly."""
        with (
            patch.object(sys, "argv", argv),
            patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path),
        ):
            result = main()
            assert result == expected_exit
            if check_file:
                assert (tmp_path / check_file).exists()

    def test_main_install_global_flag(self, tmp_path: Path) -> None:
        """Verify main handles --global flag for install."""
        home_dir = tmp_path / "home"
        home_dir.mkdir()

        with (
            patch.object(sys, "argv", ["daisydocs-mcp", "install", "--global"]),
            patch("daisydocs_mcp.cli.Path.home", return_value=home_dir),
        ):
            result = main()
            assert result == 0
            global_path = home_dir / ".config" / "Code" / "User" / "mcp.json"
            assert global_path.exists()

    @pytest.mark.parametrize(
        ("command", "flags", "expected_path_part"),
        [
            ("install", ["--global", "--insiders"], "Code - Insiders"),
            ("install", ["-g", "-i"], "Code - Insiders"),
            ("uninstall", ["--global", "--insiders"], "Code - Insiders"),
        ],
        ids=["install_insiders_long", "install_insiders_short", "uninstall_insiders"],
    )
    def test_main_insiders_flag(
        self, tmp_path: Path, command: str, flags: list[str], expected_path_part: str
    ) -> None:
        """Verify main handles --insiders flag for global operations."""
        home_dir = tmp_path / "home"
        home_dir.mkdir()
        insiders_path = home_dir / ".config" / "Code - Insiders" / "User"
        insiders_path.mkdir(parents=True)

        # Pre-create config for uninstall test
        if command == "uninstall":
            mcp_json = insiders_path / "mcp.json"
            mcp_json.write_text(json.dumps({"servers": {"daisydocs-mcp": {}}}))

        with (
            patch.object(sys, "argv", ["daisydocs-mcp", command, *flags]),
            patch("daisydocs_mcp.cli.Path.home", return_value=home_dir),
        ):
            result = main()
            assert result == 0
            assert expected_path_part in str(insiders_path)

    def test_install_with_corpus(self, tmp_path: Path) -> None:
        """Verify --corpus is written into the installed server args."""
        corpus = tmp_path / "docs.txt"
        with (
            patch.object(sys, "argv", ["daisydocs-mcp", "install", "--corpus", str(corpus)]),
            patch("daisydocs_mcp.cli.Path.cwd", return_value=tmp_path),
        ):
            assert main() == 0
        config = json.loads((tmp_path / ".vscode" / "mcp.json").read_text())
        assert config["servers"]["daisydocs-mcp"]["args"][-1] == str(corpus)


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """Write the two-entry sample corpus to disk."""
    corpus = tmp_path / "docs.txt"
    corpus.write_text(BTN_CARD, encoding="utf-8")
    return corpus


class TestQueryCommands:
    """Tests for search, doc and list commands."""

    def test_search_prints_scores(self, corpus_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify search prints one score/key line per hit, best first."""
        assert search_docs("class", corpus_file) == 0
        assert capsys.readouterr().out.splitlines() == ["  15  btn", "  15  card"]

    def test_search_no_results(self, corpus_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify search exits 1 when nothing matches."""
        assert search_docs("carousel", corpus_file) == 1
        assert "No results found" in capsys.readouterr().out

    def test_show_doc(self, corpus_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify doc prints the entry body."""
        assert show_doc(" Card ", corpus_file) == 0
        assert capsys.readouterr().out == "### Card\nUse the card class for containers.\n"

    def test_show_doc_miss(self, corpus_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify a miss exits 1 and suggests related entries on stderr."""
        assert show_doc("btn class", corpus_file) == 1
        assert "Did you mean: btn, card?" in capsys.readouterr().err

    def test_show_doc_blank(self, corpus_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify a blank name is rejected."""
        assert show_doc("  ", corpus_file) == 1
        assert "Component name is required" in capsys.readouterr().err

    def test_list(self, corpus_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify list prints keys in order."""
        assert list_docs(corpus_file) == 0
        assert capsys.readouterr().out.splitlines() == ["btn", "card"]

    def test_missing_corpus(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify a missing corpus file is reported, not raised."""
        assert list_docs(tmp_path / "missing.txt") == 1
        assert "Corpus file not found" in capsys.readouterr().err

    @pytest.mark.parametrize(
        ("argv", "expected_exit", "expected_out"),
        [
            (["search", "btn", "class"], 0, "btn"),
            (["doc", "btn"], 0, "### Btn"),
            (["list"], 0, "card"),
        ],
        ids=["search", "doc", "list"],
    )
    def test_main_dispatch(
        self,
        corpus_file: Path,
        capsys: pytest.CaptureFixture[str],
        argv: list[str],
        expected_exit: int,
        expected_out: str,
    ) -> None:
        """Verify main joins words and dispatches query commands."""
        with patch.object(sys, "argv", ["daisydocs-mcp", *argv, "--corpus", str(corpus_file)]):
            assert main() == expected_exit
        assert expected_out in capsys.readouterr().out

    def test_embedded_corpus_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Verify commands default to the bundled documentation."""
        assert list_docs() == 0
        assert "button" in capsys.readouterr().out.splitlines()
