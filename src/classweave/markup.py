"""Immutable markup nodes with the direct-chaining style surface.

Each concern method returns a new node with the concern's classes appended,
combined with any ``on=`` modifiers using the concern's strategy (merged for
everything except view transitions):

    >>> element("div").background("blue-500", on="hover").classes
    ('bg-blue-500', 'hover:bg-blue-500')

``on(...)`` runs declarative blocks against a fresh ``ResponsiveBuilder`` and
appends what they produce, which never includes an unscoped copy:

    >>> element("div").on(lambda b: b.hover(lambda b: b.background("blue-500"))).classes
    ('hover:bg-blue-500',)
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field, replace
from typing import Any, Union

from .builder import BlockContent, ResponsiveBuilder
from .combine import CombineStrategy, combine
from .concerns import ConcernMethods
from .modifiers import Modifier
from .registry import StyleRegistry, get_default_registry

# Elements that never have content or a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

Child = Union["Node", str]


@dataclass(frozen=True)
class Node(ConcernMethods):
    """An element with an ordered, append-only class list.

    Nodes are values: every method returns a modified copy. ``registry``
    selects the concern registry (the process default when None) and takes
    no part in equality.
    """

    tag: str
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Child, ...] = ()
    self_closing: bool = False
    registry: StyleRegistry | None = field(default=None, compare=False, repr=False)

    # ------------------------------------------------------------------
    # Classes
    # ------------------------------------------------------------------

    def add_classes(self, *classes: str) -> Node:
        """Append literal classes (empty strings are skipped)."""
        return replace(self, classes=self.classes + tuple(c for c in classes if c))

    def on(self, *blocks: BlockContent) -> Node:
        """Append the classes produced by declarative blocks.

        Each block is called with one shared, freshly created builder:

            node.on(lambda b: b.md(lambda b: b.padding(of=8)))
        """
        builder = ResponsiveBuilder(self.registry)
        for block in blocks:
            block(builder)
        return self.add_classes(*builder.classes)

    responsive = on

    def _style_registry(self) -> StyleRegistry:
        return self.registry if self.registry is not None else get_default_registry()

    def _add_styled(
        self, classes: list[str], modifiers: tuple[Modifier, ...], strategy: CombineStrategy
    ) -> Node:
        return self.add_classes(*combine(classes, modifiers, strategy))

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def with_children(self, *children: Child) -> Node:
        return replace(self, children=self.children + children)

    def with_attribute(self, name: str, value: str) -> Node:
        """Set an attribute, replacing an earlier value for the same name."""
        kept = tuple((k, v) for k, v in self.attributes if k != name)
        return replace(self, attributes=(*kept, (name, str(value))))

    def with_id(self, node_id: str | None) -> Node:
        return replace(self, id=node_id)

    def with_registry(self, registry: StyleRegistry | None) -> Node:
        return replace(self, registry=registry)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def class_attribute(self) -> str:
        """``class="a b"``, or an empty string when the node has no classes."""
        if not self.classes:
            return ""
        return f'class="{html.escape(" ".join(self.classes))}"'

    def _open_tag(self) -> str:
        parts = [self.tag]
        if self.id:
            parts.append(f'id="{html.escape(self.id)}"')
        class_attr = self.class_attribute()
        if class_attr:
            parts.append(class_attr)
        for name, value in self.attributes:
            parts.append(f'{name}="{html.escape(value)}"')
        return " ".join(parts)

    def render(self, indent: int | None = None) -> str:
        """Render the node and its children as HTML.

        Text is escaped. Void elements get no closing tag; ``self_closing``
        nodes render as ``<tag />``.

        Args:
            indent: Spaces per nesting level, or None for compact output
        """
        lines = self._render_lines(indent, 0)
        return "".join(lines) if indent is None else "\n".join(lines)

    def _render_lines(self, indent: int | None, depth: int) -> list[str]:
        pad = " " * (indent * depth) if indent is not None else ""
        if self.self_closing:
            return [f"{pad}<{self._open_tag()} />"]
        if self.tag in VOID_ELEMENTS:
            return [f"{pad}<{self._open_tag()}>"]

        opening = f"<{self._open_tag()}>"
        closing = f"</{self.tag}>"
        if indent is None:
            inner = "".join(
                html.escape(child, quote=False) if isinstance(child, str) else child.render()
                for child in self.children
            )
            return [f"{opening}{inner}{closing}"]

        if all(isinstance(child, str) for child in self.children):
            text = "".join(html.escape(child, quote=False) for child in self.children)  # type: ignore[arg-type]
            return [f"{pad}{opening}{text}{closing}"]

        lines = [f"{pad}{opening}"]
        child_pad = " " * (indent * (depth + 1))
        for child in self.children:
            if isinstance(child, str):
                lines.append(f"{child_pad}{html.escape(child, quote=False)}")
            else:
                lines.extend(child._render_lines(indent, depth + 1))
        lines.append(f"{pad}{closing}")
        return lines

    def __str__(self) -> str:
        return self.render()


def element(
    tag: str,
    *children: Child,
    id: str | None = None,  # noqa: A002
    classes: tuple[str, ...] | list[str] = (),
    registry: StyleRegistry | None = None,
    **attributes: Any,
) -> Node:
    """Convenience constructor.

    Keyword attributes with a trailing underscore lose it (``for_="name"``)
    and underscores become dashes (``aria_label`` -> ``aria-label``).
    None values are dropped.
    """
    attrs = tuple(
        (key.rstrip("_").replace("_", "-"), str(value))
        for key, value in attributes.items()
        if value is not None
    )
    return Node(
        tag=tag,
        id=id,
        classes=tuple(classes),
        attributes=attrs,
        children=children,
        registry=registry,
    )


__all__ = ["VOID_ELEMENTS", "Child", "Node", "element"]
