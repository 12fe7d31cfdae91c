"""Combine base utility classes with modifier prefixes.

Three strategies coexist:

- merged: keep the unscoped class and add one prefixed copy per modifier
  (``["p-4"], [hover, md] -> ["p-4", "hover:p-4", "md:p-4"]``). Used by the
  direct-chaining surface for most concerns.
- separate: one prefixed copy per modifier and no unscoped class. Used by
  concerns where an unconditional default is not meaningful.
- scoped: one class per base class with every modifier prefix concatenated in
  stack order (``md:hover:p-4``). Used by the responsive builder, where the
  stack describes a single nested scope.

With no modifiers every strategy returns the base classes unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .modifiers import Modifier


class CombineStrategy(str, Enum):
    """How a concern's classes are combined with explicit modifiers."""

    MERGED = "merged"
    SEPARATE = "separate"
    SCOPED = "scoped"


def combine_class(base_class: str, modifiers: Sequence[Modifier]) -> str:
    """Prefix a single class with every modifier, in order."""
    return "".join(m.prefix for m in modifiers) + base_class


def combine_merged(classes: Sequence[str], modifiers: Sequence[Modifier]) -> list[str]:
    if not classes:
        return []
    result = list(classes)
    for modifier in modifiers:
        result.extend(f"{modifier.prefix}{c}" for c in classes)
    return result


def combine_separate(classes: Sequence[str], modifiers: Sequence[Modifier]) -> list[str]:
    if not classes:
        return []
    if not modifiers:
        return list(classes)
    return [f"{modifier.prefix}{c}" for modifier in modifiers for c in classes]


def combine_scoped(classes: Sequence[str], modifiers: Sequence[Modifier]) -> list[str]:
    if not modifiers:
        return list(classes)
    return [combine_class(c, modifiers) for c in classes]


def combine(
    classes: Sequence[str],
    modifiers: Sequence[Modifier],
    strategy: CombineStrategy = CombineStrategy.MERGED,
) -> list[str]:
    """Combine classes with modifiers using the given strategy."""
    if strategy is CombineStrategy.SEPARATE:
        return combine_separate(classes, modifiers)
    if strategy is CombineStrategy.SCOPED:
        return combine_scoped(classes, modifiers)
    return combine_merged(classes, modifiers)


__all__ = [
    "CombineStrategy",
    "combine",
    "combine_class",
    "combine_merged",
    "combine_scoped",
    "combine_separate",
]
