"""Block-scoped declarative builder for modifier-scoped styles.

A ``ResponsiveBuilder`` keeps a stack of active modifiers. Every concern call
made while modifiers are on the stack emits each class once, prefixed with
the whole stack in order, and never an unscoped copy:

    >>> b = ResponsiveBuilder()
    >>> with b.md():
    ...     with b.hover():
    ...         _ = b.padding(of=4)
    >>> b.classes
    ['md:hover:p-4']

Blocks also accept callables, which reads well for one-liners:

    >>> ResponsiveBuilder().sm(lambda b: b.font(size="lg")).classes
    ['sm:text-lg']
"""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Any

from .combine import CombineStrategy, combine_scoped
from .concerns import ConcernMethods, ModifiersArg
from .exceptions import ScopeError
from .modifiers import Modifier, ModifierSpec, as_modifier
from .registry import StyleRegistry, get_default_registry

BlockContent = Callable[["ResponsiveBuilder"], Any]


class ScopeBlock:
    """One or more modifiers, entered as a ``with`` block or called with contents."""

    def __init__(self, builder: ResponsiveBuilder, modifiers: tuple[Modifier, ...]) -> None:
        self._builder = builder
        self._modifiers = modifiers

    @property
    def modifiers(self) -> tuple[Modifier, ...]:
        return self._modifiers

    def __enter__(self) -> ResponsiveBuilder:
        for modifier in self._modifiers:
            self._builder.push(modifier)
        return self._builder

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for _ in self._modifiers:
            self._builder.pop()

    def __call__(self, *contents: BlockContent) -> ResponsiveBuilder:
        with self as builder:
            for content in contents:
                content(builder)
        return self._builder

    def __repr__(self) -> str:
        return f"ScopeBlock({', '.join(m.name for m in self._modifiers)})"


def _open(
    builder: ResponsiveBuilder, modifiers: tuple[Modifier, ...], contents: tuple[BlockContent, ...]
) -> Any:
    block = ScopeBlock(builder, modifiers)
    return block(*contents) if contents else block


def _scope_method(modifier: Modifier) -> Callable[..., Any]:
    def method(self: ResponsiveBuilder, *contents: BlockContent) -> ScopeBlock | ResponsiveBuilder:
        return _open(self, (modifier,), contents)

    method.__name__ = modifier.name.replace("-", "_")
    method.__doc__ = f"Scope the enclosed styles, or run ``contents``, under ``{modifier.prefix}``."
    return method


class ResponsiveBuilder(ConcernMethods):
    """Collects classes for concern calls made under a modifier stack.

    Explicit ``on=`` modifiers on a concern call open one nested scope per
    modifier under the current stack (``md:hover:p-4``, ``md:focus:p-4``).
    """

    def __init__(self, registry: StyleRegistry | None = None) -> None:
        self._registry = registry
        self._stack: list[Modifier] = []
        self._classes: list[str] = []

    # ------------------------------------------------------------------
    # Stack
    # ------------------------------------------------------------------

    def push(self, modifier: ModifierSpec) -> ResponsiveBuilder:
        self._stack.append(as_modifier(modifier))
        return self

    def pop(self) -> Modifier:
        """Remove and return the innermost modifier.

        Raises:
            ScopeError: If no modifier is active
        """
        if not self._stack:
            raise ScopeError("Cannot pop modifier: the scope stack is empty")
        return self._stack.pop()

    def scope(self, *modifiers: ModifierSpec) -> ScopeBlock:
        """Nest several modifiers at once: ``scope("md", "hover")``."""
        return ScopeBlock(self, tuple(as_modifier(m) for m in modifiers))

    def custom(self, name: str, *contents: BlockContent) -> ScopeBlock | ResponsiveBuilder:
        return _open(self, (Modifier.custom(name),), contents)

    @property
    def stack(self) -> tuple[Modifier, ...]:
        return tuple(self._stack)

    @property
    def classes(self) -> list[str]:
        return list(self._classes)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def add_class(self, *raw_classes: str) -> ResponsiveBuilder:
        """Add literal classes under the current scope."""
        self._classes.extend(combine_scoped([c for c in raw_classes if c], self._stack))
        return self

    def apply(
        self, concern: str, /, *, on: ModifiersArg = (), **params: Any
    ) -> ResponsiveBuilder:
        """Drive any registered concern by name (alias of ``style``)."""
        return self.style(concern, on=on, **params)

    def _style_registry(self) -> StyleRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    def _add_styled(
        self, classes: list[str], modifiers: tuple[Modifier, ...], strategy: CombineStrategy
    ) -> ResponsiveBuilder:
        # Blocks scope every concern the same way whatever its direct-surface strategy
        if not modifiers:
            self._classes.extend(combine_scoped(classes, self._stack))
        for modifier in modifiers:
            self._classes.extend(combine_scoped(classes, (*self._stack, modifier)))
        return self

    # ------------------------------------------------------------------
    # Built-in modifier blocks
    # ------------------------------------------------------------------

    xs = _scope_method(Modifier.XS)
    sm = _scope_method(Modifier.SM)
    md = _scope_method(Modifier.MD)
    lg = _scope_method(Modifier.LG)
    xl = _scope_method(Modifier.XL)
    xl2 = _scope_method(Modifier.XL2)

    hover = _scope_method(Modifier.HOVER)
    focus = _scope_method(Modifier.FOCUS)
    active = _scope_method(Modifier.ACTIVE)
    placeholder = _scope_method(Modifier.PLACEHOLDER)
    dark = _scope_method(Modifier.DARK)
    first = _scope_method(Modifier.FIRST)
    last = _scope_method(Modifier.LAST)
    disabled = _scope_method(Modifier.DISABLED)
    motion_reduce = _scope_method(Modifier.MOTION_REDUCE)

    aria_busy = _scope_method(Modifier.ARIA_BUSY)
    aria_checked = _scope_method(Modifier.ARIA_CHECKED)
    aria_disabled = _scope_method(Modifier.ARIA_DISABLED)
    aria_expanded = _scope_method(Modifier.ARIA_EXPANDED)
    aria_hidden = _scope_method(Modifier.ARIA_HIDDEN)
    aria_pressed = _scope_method(Modifier.ARIA_PRESSED)
    aria_readonly = _scope_method(Modifier.ARIA_READONLY)
    aria_required = _scope_method(Modifier.ARIA_REQUIRED)
    aria_selected = _scope_method(Modifier.ARIA_SELECTED)

    def __repr__(self) -> str:
        stack = ", ".join(m.name for m in self._stack)
        return f"ResponsiveBuilder(stack=[{stack}], classes={len(self._classes)})"


def responsive(*blocks: BlockContent, registry: StyleRegistry | None = None) -> list[str]:
    """Run block callables against a fresh builder and return its classes."""
    builder = ResponsiveBuilder(registry)
    for block in blocks:
        block(builder)
    return builder.classes


__all__ = ["BlockContent", "ResponsiveBuilder", "ScopeBlock", "responsive"]
