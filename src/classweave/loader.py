"""Page loading: YAML page descriptions to node trees and HTML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .builder import ResponsiveBuilder
from .config import ClassweaveConfig, discover_config
from .exceptions import PageValidationError, ParseError, UnknownConcernError
from .logger import get_logger
from .markup import Child, Node
from .modifiers import Modifier
from .registry import StyleRegistry, get_default_registry
from .schemas import NodeSchema, ResponsiveSchema, StyleSchema

DEFAULT_TAG = "div"


class PageParser:
    """Builds a node tree from a validated page description.

    ``styles`` entries use the direct surface (unscoped class plus one copy
    per modifier); ``responsive`` blocks use the builder, so their classes
    are only ever scoped.
    """

    def __init__(
        self,
        registry: StyleRegistry | None = None,
        config: ClassweaveConfig | None = None,
    ) -> None:
        self.registry = registry if registry is not None else get_default_registry()
        self.config = config

    def parse_file(self, file_path: Path | str) -> Node:
        """Parse a YAML page file into a node tree."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        get_logger().checks(f"Parsing page {path}")
        try:
            with path.open(encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Failed to parse YAML: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("YAML must contain a mapping at the root level")

        return self.parse_data(data)  # type: ignore[arg-type]

    def parse_data(self, data: dict[str, Any]) -> Node:
        """Validate and build a page from already-loaded YAML data."""
        try:
            schema = NodeSchema.model_validate(data)
        except PydanticValidationError as e:
            raise PageValidationError(f"Invalid page structure: {e}") from e

        root = self._build(schema, "page")
        if isinstance(root, str):
            return Node(tag=DEFAULT_TAG, children=(root,), registry=self.registry)
        return root

    def _build(self, schema: NodeSchema, location: str) -> Child:
        if schema.is_text:
            return schema.text or ""

        node = Node(
            tag=schema.tag or DEFAULT_TAG,
            id=schema.id,
            classes=tuple(schema.classes),
            attributes=tuple(schema.attributes.items()),
            self_closing=schema.self_closing,
            registry=self.registry,
        )

        for index, entry in enumerate(schema.styles):
            node = self._apply_style(node, entry, f"{location}.styles[{index}]")

        if schema.responsive:
            builder = ResponsiveBuilder(self.registry)
            for index, block in enumerate(schema.responsive):
                self._apply_block(builder, block, f"{location}.responsive[{index}]")
            node = node.add_classes(*builder.classes)

        children: list[Child] = []
        if schema.text is not None:
            children.append(schema.text)
        for index, child in enumerate(schema.children):
            children.append(self._build(child, f"{location}.children[{index}]"))
        return node.with_children(*children)

    def _apply_block(self, builder: ResponsiveBuilder, block: ResponsiveSchema, location: str) -> None:
        modifiers = [self._modifier(name, location) for name in block.on]
        with builder.scope(*modifiers):
            for index, entry in enumerate(block.styles):
                self._apply_style(builder, entry, f"{location}.styles[{index}]")
            builder.add_class(*block.classes)
            for index, nested in enumerate(block.nested):
                self._apply_block(builder, nested, f"{location}.nested[{index}]")

    def _apply_style(self, target: Any, entry: StyleSchema, location: str) -> Any:
        modifiers = [self._modifier(name, location) for name in entry.on]
        try:
            return target.style(entry.concern, on=modifiers, **entry.params)
        except UnknownConcernError as e:
            raise PageValidationError(f"{location}: {e}") from e
        except (ValueError, TypeError) as e:
            raise PageValidationError(f"{location}: invalid parameters for '{entry.concern}': {e}") from e

    def _modifier(self, name: str, location: str) -> Modifier:
        try:
            if self.config is not None:
                return self.config.check_modifier(name)
            return Modifier.parse(name)
        except ValueError as e:
            raise PageValidationError(f"{location}: {e}") from e


def load_page(
    path: Path | str,
    config_path: Path | None = None,
    *,
    config: ClassweaveConfig | None = None,
    registry: StyleRegistry | None = None,
) -> Node:
    """Load a page file into a node tree.

    This is the main entry point for page files. It handles:
    1. Config discovery (unless ``config`` is given)
    2. Loading the configured style modules into the registry
    3. YAML parsing, validation and node construction

    Args:
        path: Path to the page YAML file
        config_path: Optional explicit path to the config file
        config: Optional explicit config (overrides discovery)
        registry: Registry to resolve concerns in (default registry if None)

    Returns:
        Root node of the page
    """
    path = Path(path)

    if config is None:
        config = discover_config(path, config_path)

    registry = registry if registry is not None else get_default_registry()
    if config is not None:
        config.load_styles(registry)

    return PageParser(registry, config).parse_file(path)


def render_page(
    path: Path | str,
    config_path: Path | None = None,
    *,
    config: ClassweaveConfig | None = None,
    registry: StyleRegistry | None = None,
) -> str:
    """Load a page file and render it as HTML."""
    if config is None:
        config = discover_config(path, config_path)
    node = load_page(path, config=config, registry=registry)
    indent = config.render.indent if config is not None else None
    return node.render(indent=indent)


__all__ = ["PageParser", "load_page", "render_page"]
