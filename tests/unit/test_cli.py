"""Tests for the base16-sh command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from base16_sh.cli import app

runner = CliRunner()


@pytest.fixture()
def invoke(data_dir: Path):
    """Invoke the CLI against the test data directory."""

    def _invoke(*args: str):
        return runner.invoke(app, ["--data-dir", str(data_dir), *args])

    return _invoke


def flat(text: str) -> str:
    """Collapse whitespace so rich line wrapping does not matter."""
    return " ".join(text.split())


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "base16-sh version" in result.output


# =============================================================================
# Listing
# =============================================================================


class TestSchemes:
    def test_alpha(self, invoke) -> None:
        result = invoke("schemes")
        assert result.exit_code == 0
        assert result.stdout.splitlines()[:2] == ["broken", "default-dark"]

    def test_color_json(self, invoke) -> None:
        result = invoke("schemes", "--order", "color", "--json")
        assert result.exit_code == 0
        names = json.loads(result.stdout)
        assert "broken" not in names
        assert names[-1] == "grayscale-dark"

    def test_missing_data_dir(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--data-dir", str(tmp_path / "missing"), "schemes"])
        assert result.exit_code == 1
        assert "Scheme directory does not exist" in flat(result.output)


class TestTemplates:
    def test_json(self, invoke) -> None:
        result = invoke("templates", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert list(data) == ["foo", "foo-extra", "tinted-shell-base16", "vim"]
        assert data["vim"]["repo"] == "base16-vim"

    def test_table(self, invoke) -> None:
        result = invoke("templates")
        assert result.exit_code == 0
        assert "base24-foo" in result.output

    def test_empty(self, data_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["--config", str(_config(tmp_path, data_dir, templates="none")), "templates"],
        )
        assert result.exit_code == 0
        assert "No templates found" in result.output


def _config(tmp_path: Path, data_dir: Path, templates: str) -> Path:
    path = tmp_path / "base16.toml"
    path.write_text(
        f'[data]\ndir = "{data_dir.as_posix()}"\n'
        f'templates_dir = "{(tmp_path / templates).as_posix()}"\n',
        encoding="utf-8",
    )
    return path


# =============================================================================
# Scheme commands
# =============================================================================


class TestShow:
    def test_raw(self, invoke) -> None:
        result = invoke("show", "monokai")
        assert result.exit_code == 0
        assert "name: Monokai" in result.stdout

    def test_raw_non_utf8_bytes(self, invoke, data_dir: Path) -> None:
        source = b"name: Caf\xe9\nauthor: x\npalette:\n  base00: '000000'\n"
        (data_dir / "schemes" / "base16" / "latin.yaml").write_bytes(source)
        result = invoke("show", "latin")
        assert result.exit_code == 0
        assert result.stdout_bytes == source

    def test_json(self, invoke) -> None:
        result = invoke("show", "dracula", "--json")
        assert result.exit_code == 0
        assert json.loads(result.stdout)["system"] == "base24"

    def test_fuzzy(self, invoke) -> None:
        result = invoke("show", "monoki")
        assert result.exit_code == 0
        assert "Resolved 'monoki' to 'monokai'" in flat(result.output)

    def test_not_found(self, invoke) -> None:
        result = invoke("show", "xyzzy123")
        assert result.exit_code == 1
        assert "Scheme 'xyzzy123' not found" in flat(result.output)

    def test_unparsable_as_json(self, invoke) -> None:
        result = invoke("show", "broken", "--json")
        assert result.exit_code == 1
        assert "Invalid scheme" in flat(result.output)


class TestVariables:
    def test_json(self, invoke) -> None:
        result = invoke("variables", "monokai", "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["base08-rgb-r"] == "249"
        assert data["scheme-slug"] == "monokai"

    def test_table(self, invoke) -> None:
        result = invoke("variables", "monokai")
        assert result.exit_code == 0
        assert "scheme-author" in result.output


class TestRender:
    def test_render(self, invoke) -> None:
        result = invoke("render", "monokai", "vim")
        assert result.exit_code == 0
        assert 'let s:gui00 = "272822"' in result.stdout
        assert "prev=grayscale-dark next=solarized-light" in result.stdout

    def test_unknown_template(self, invoke) -> None:
        result = invoke("render", "monokai", "emacs")
        assert result.exit_code == 1
        assert "Template 'emacs' not found" in flat(result.output)


class TestNeighbors:
    def test_json(self, invoke) -> None:
        result = invoke("neighbors", "dracula", "--json")
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "name": "dracula",
            "prev": "default-dark",
            "next": "grayscale-dark",
        }

    def test_first(self, invoke) -> None:
        result = invoke("neighbors", "broken", "--json")
        assert json.loads(result.stdout)["prev"] is None

    def test_pretty(self, invoke) -> None:
        result = invoke("neighbors", "monokai")
        assert result.exit_code == 0
        assert "solarized-light" in result.output
