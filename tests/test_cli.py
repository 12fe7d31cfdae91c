"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from classweave.cli import app
from classweave.config import CONFIG_FILENAME

runner = CliRunner()

PAGE = """\
tag: button
styles:
  - padding: {of: 2, at: horizontal}
  - background: {color: blue-500}
    on: [hover]
responsive:
  - on: md
    styles:
      - font: {size: lg}
children:
  - Save
"""

GLOW_STYLE_FILE = """\
from dataclasses import dataclass

from classweave.operations import StyleOperation


@dataclass(frozen=True)
class GlowParameters:
    radius: int = 4


class GlowOperation(StyleOperation[GlowParameters]):
    name = "glow"
    Parameters = GlowParameters

    def apply_classes(self, params):
        return [f"glow-{params.radius}"]


def register_styles(registry):
    registry.register("glow", GlowOperation)
"""


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory so no project config is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestRenderCommand:
    """Test the render command."""

    def test_render_to_stdout(self, isolated: Path) -> None:
        page = isolated / "page.yaml"
        page.write_text(PAGE)

        result = runner.invoke(app, ["render", str(page)])

        assert result.exit_code == 0
        assert result.output.strip() == (
            '<button class="px-2 bg-blue-500 hover:bg-blue-500 md:text-lg">Save</button>'
        )

    def test_render_to_file(self, isolated: Path) -> None:
        page = isolated / "page.yaml"
        page.write_text(PAGE)
        output = isolated / "out.html"

        result = runner.invoke(app, ["render", str(page), "-o", str(output)])

        assert result.exit_code == 0
        assert "HTML written to" in result.output
        assert output.read_text().startswith("<button")

    def test_indent_option_overrides_config(self, isolated: Path) -> None:
        (isolated / CONFIG_FILENAME).write_text("render: {indent: 4}\n")
        page = isolated / "page.yaml"
        page.write_text("tag: ul\nchildren:\n  - {tag: li, text: one}\n")

        result = runner.invoke(app, ["render", str(page), "--indent", "1"])

        assert result.exit_code == 0
        assert result.output == "<ul>\n <li>one</li>\n</ul>\n"

    def test_missing_page(self, isolated: Path) -> None:
        result = runner.invoke(app, ["render", "nonexistent.yaml"])
        assert result.exit_code == 1
        assert "Error: File not found" in result.output

    def test_invalid_page(self, isolated: Path) -> None:
        page = isolated / "page.yaml"
        page.write_text("styles: [{sparkle: {}}]\n")

        result = runner.invoke(app, ["render", str(page)])

        assert result.exit_code == 1
        assert "Unknown style concern 'sparkle'" in result.output

    def test_style_file_option(self, isolated: Path) -> None:
        (isolated / "glow.py").write_text(GLOW_STYLE_FILE)
        page = isolated / "page.yaml"
        page.write_text("styles: [{glow: {radius: 8}}]\n")

        result = runner.invoke(app, ["render", str(page), "--style-file", str(isolated / "glow.py")])

        assert result.exit_code == 0
        assert 'class="glow-8"' in result.output

    def test_both_style_options_rejected(self, isolated: Path) -> None:
        page = isolated / "page.yaml"
        page.write_text(PAGE)

        result = runner.invoke(
            app, ["render", str(page), "--style-module", "x.styles", "--style-file", "glow.py"]
        )

        assert result.exit_code == 1
        assert "Cannot specify both" in result.output

    def test_global_config_option(self, isolated: Path) -> None:
        config = isolated / "site.yaml"
        config.write_text("strict_modifiers: true\n")
        page = isolated / "page.yaml"
        page.write_text("styles: [{opacity: {value: 50}, on: peer-focus}]\n")

        result = runner.invoke(app, ["--config", str(config), "render", str(page)])

        assert result.exit_code == 1
        assert "Unknown modifier 'peer-focus'" in result.output


class TestClassesCommand:
    """Test the classes command."""

    def test_direct(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "padding", "-p", "of=4", "-p", "at=[top]", "--on", "hover"])
        assert result.exit_code == 0
        assert result.output.strip() == "pt-4 hover:pt-4"

    def test_block(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "padding", "--on", "md", "--on", "hover", "--block"])
        assert result.exit_code == 0
        assert result.output.strip() == "md:hover:p-4"

    def test_yaml_values(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "animation", "-p", "name=spin", "-p", "repeat=infinite"])
        assert result.exit_code == 0
        assert result.output.strip() == "animate-spin [animation-iteration-count:infinite]"

    def test_view_transition_has_no_unscoped_copy(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "view_transition", "-p", "type=fade", "--on", "dark"])
        assert result.exit_code == 0
        assert result.output.strip() == "dark:view-transition-fade"

    def test_unknown_concern(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "sparkle"])
        assert result.exit_code == 1
        assert "Unknown style concern 'sparkle'" in result.output

    def test_bad_parameter(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "padding", "-p", "colour=red"])
        assert result.exit_code == 1
        assert "Invalid parameters for 'padding'" in result.output

    def test_malformed_parameter(self, isolated: Path) -> None:
        result = runner.invoke(app, ["classes", "padding", "-p", "of"])
        assert result.exit_code == 1
        assert "Use key=value" in result.output


class TestListingCommands:
    """Test the concerns and modifiers commands."""

    def test_concerns(self, isolated: Path) -> None:
        result = runner.invoke(app, ["concerns"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith("padding")
        assert "length, edges" in lines[0]
        assert any(line.startswith("view_transition") and "separate" in line for line in lines)

    def test_concerns_include_style_file(self, isolated: Path) -> None:
        (isolated / "glow.py").write_text(GLOW_STYLE_FILE)
        result = runner.invoke(app, ["concerns", "--style-file", str(isolated / "glow.py")])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1].startswith("glow")

    def test_modifiers(self, isolated: Path) -> None:
        result = runner.invoke(app, ["modifiers"])
        assert result.exit_code == 0
        assert "Breakpoints:" in result.output
        assert "  md:      >= 768px" in result.output
        assert "  aria-selected:" in result.output
        assert "Custom:" not in result.output

    def test_modifiers_with_config(self, isolated: Path) -> None:
        (isolated / CONFIG_FILENAME).write_text("custom_modifiers: [group-hover]\nbreakpoints: {md: 800}\n")
        result = runner.invoke(app, ["modifiers"])
        assert result.exit_code == 0
        assert "  md:      >= 800px" in result.output
        assert "Custom:\n  group-hover:" in result.output
