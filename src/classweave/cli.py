"""Command-line interface for classweave."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
import yaml

from .builder import ResponsiveBuilder
from .config import ClassweaveConfig, discover_config, set_config_path
from .exceptions import ClassweaveError
from .loader import load_page
from .logger import setup_logger
from .markup import element
from .modifiers import Modifier
from .registry import StyleRegistry, get_default_registry

app = typer.Typer(
    name="classweave",
    help="Compose utility CSS classes from semantic style intents",
    add_completion=False,
)

StyleModuleOption = Annotated[
    str | None,
    typer.Option("--style-module", help="Python module path registering extra concerns"),
]
StyleFileOption = Annotated[
    Path | None,
    typer.Option("--style-file", help="Python file path registering extra concerns"),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show registrations, 2=show loading steps, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: classweave.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for classweave commands."""
    setup_logger(verbose)
    set_config_path(config)


@app.command()
def render(
    page: Annotated[Path, typer.Argument(help="Path to the page YAML file")],
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    indent: Annotated[
        int | None,
        typer.Option("--indent", help="Spaces per nesting level (default: from config, else compact)", min=0),
    ] = None,
    style_module: StyleModuleOption = None,
    style_file: StyleFileOption = None,
) -> None:
    """Render a YAML page description to HTML."""
    try:
        config, registry = _prepare(style_module, style_file, page)
        node = load_page(page, config=config, registry=registry)
        if indent is None and config is not None:
            indent = config.render.indent
        html_output = node.render(indent=indent)
    except ClassweaveError as e:
        _fail(str(e))

    if output:
        output.write_text(html_output + "\n", encoding="utf-8")
        typer.echo(f"HTML written to {output}")
    else:
        typer.echo(html_output)


@app.command()
def classes(
    concern: Annotated[str, typer.Argument(help="Concern name, e.g. padding or background")],
    *,
    param: Annotated[
        list[str] | None,
        typer.Option("--param", "-p", help="Concern parameter as key=value (repeatable)"),
    ] = None,
    on: Annotated[
        list[str] | None,
        typer.Option("--on", help="Modifier to apply, e.g. hover or md (repeatable)"),
    ] = None,
    block: Annotated[
        bool,
        typer.Option("--block", help="Scope the call as nested declarative blocks instead of direct chaining"),
    ] = False,
    style_module: StyleModuleOption = None,
    style_file: StyleFileOption = None,
) -> None:
    """Print the classes a single concern call produces."""
    params = _parse_params(param or [])
    try:
        config, registry = _prepare(style_module, style_file)
        modifiers = [_resolve_modifier(name, config) for name in on or []]
        if block:
            builder = ResponsiveBuilder(registry)
            with builder.scope(*modifiers):
                builder.style(concern, **params)
            result = builder.classes
        else:
            result = list(element("div", registry=registry).style(concern, on=modifiers, **params).classes)
    except ClassweaveError as e:
        _fail(str(e))
    except (ValueError, TypeError) as e:
        _fail(f"Invalid parameters for '{concern}': {e}")

    typer.echo(" ".join(result))


@app.command()
def concerns(
    style_module: StyleModuleOption = None,
    style_file: StyleFileOption = None,
) -> None:
    """List registered concerns with their combine strategy and parameters."""
    try:
        _, registry = _prepare(style_module, style_file)
    except ClassweaveError as e:
        _fail(str(e))

    width = max((len(name) for name in registry), default=0)
    for name in registry:
        operation = registry.get(name)
        parameters = _parameter_names(operation.Parameters)
        typer.echo(f"{name:<{width}}  {operation.strategy.value:<8}  {', '.join(parameters)}")


@app.command()
def modifiers() -> None:
    """List the modifier vocabulary, with breakpoint widths."""
    try:
        config = discover_config()
    except ClassweaveError as e:
        _fail(str(e))

    config = config if config is not None else ClassweaveConfig()
    typer.echo("Breakpoints:")
    for modifier, width in config.breakpoint_ladder():
        typer.echo(f"  {modifier.prefix:<8} >= {width}px")
    typer.echo("States:")
    for modifier in Modifier.states():
        typer.echo(f"  {modifier.prefix}")
    if config.custom_modifiers:
        typer.echo("Custom:")
        for modifier in config.custom_modifier_values():
            typer.echo(f"  {modifier.prefix}")


def _prepare(
    style_module: str | None,
    style_file: Path | None,
    page: Path | None = None,
) -> tuple[ClassweaveConfig | None, StyleRegistry]:
    """Discover config and load configured plus command-line style extensions."""
    if style_module and style_file:
        _fail("Cannot specify both --style-module and --style-file")

    config = discover_config(page)
    registry = get_default_registry()
    if config is not None:
        config.load_styles(registry)
    if style_module:
        registry.load_style_module(style_module)
    elif style_file:
        registry.load_style_file(style_file)
    return config, registry


def _parse_params(raw: list[str]) -> dict[str, Any]:
    """Parse ``key=value`` pairs; values are read as YAML scalars or lists."""
    params: dict[str, Any] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            _fail(f"Invalid parameter '{item}'. Use key=value")
        try:
            params[key.strip()] = yaml.safe_load(value) if value else None
        except yaml.YAMLError:
            params[key.strip()] = value
    return params


def _resolve_modifier(name: str, config: ClassweaveConfig | None) -> Modifier:
    try:
        return config.check_modifier(name) if config is not None else Modifier.parse(name)
    except ValueError as e:
        _fail(str(e))


def _parameter_names(parameters_cls: type[Any]) -> list[str]:
    if not is_dataclass(parameters_cls):
        return []
    return [f.name for f in fields(parameters_cls)]


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
