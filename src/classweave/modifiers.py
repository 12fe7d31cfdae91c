"""Scoping qualifiers for utility classes: states, ARIA states and breakpoints.

A modifier serializes to the selector prefix the utility CSS framework
understands (``hover:``, ``md:``, ``aria-required:``). Breakpoints also carry
their minimum width so the ladder can be documented and sorted; the engine
never computes a min-width cascade from it.

Example:
    >>> Modifier.HOVER.prefix
    'hover:'
    >>> Modifier.parse("2xl").prefix
    '2xl:'
    >>> Modifier.custom("group-hover").prefix
    'group-hover:'
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import ClassVar, Union


class ModifierKind(str, Enum):
    """Family a modifier belongs to."""

    BREAKPOINT = "breakpoint"
    STATE = "state"
    CUSTOM = "custom"


@total_ordering
@dataclass(frozen=True)
class Modifier:
    """A scoping qualifier applied as a class-name prefix.

    Instances are immutable values; compare them by equality. Breakpoints are
    ordered by ``min_width``; ordering any other modifier raises TypeError.
    """

    name: str
    kind: ModifierKind = ModifierKind.CUSTOM
    min_width: int | None = None

    # Breakpoints
    XS: ClassVar[Modifier]
    SM: ClassVar[Modifier]
    MD: ClassVar[Modifier]
    LG: ClassVar[Modifier]
    XL: ClassVar[Modifier]
    XL2: ClassVar[Modifier]

    # States
    HOVER: ClassVar[Modifier]
    FOCUS: ClassVar[Modifier]
    ACTIVE: ClassVar[Modifier]
    PLACEHOLDER: ClassVar[Modifier]
    DARK: ClassVar[Modifier]
    FIRST: ClassVar[Modifier]
    LAST: ClassVar[Modifier]
    DISABLED: ClassVar[Modifier]
    MOTION_REDUCE: ClassVar[Modifier]

    # ARIA states
    ARIA_BUSY: ClassVar[Modifier]
    ARIA_CHECKED: ClassVar[Modifier]
    ARIA_DISABLED: ClassVar[Modifier]
    ARIA_EXPANDED: ClassVar[Modifier]
    ARIA_HIDDEN: ClassVar[Modifier]
    ARIA_PRESSED: ClassVar[Modifier]
    ARIA_READONLY: ClassVar[Modifier]
    ARIA_REQUIRED: ClassVar[Modifier]
    ARIA_SELECTED: ClassVar[Modifier]

    @property
    def prefix(self) -> str:
        """Selector prefix, colon-terminated (e.g. ``'hover:'``)."""
        return f"{self.name}:"

    @property
    def is_breakpoint(self) -> bool:
        return self.kind is ModifierKind.BREAKPOINT

    @property
    def is_state(self) -> bool:
        return self.kind is ModifierKind.STATE

    @property
    def is_custom(self) -> bool:
        return self.kind is ModifierKind.CUSTOM

    @classmethod
    def custom(cls, name: str) -> Modifier:
        """Create a modifier outside the built-in vocabulary.

        A trailing colon is tolerated so ``custom("group-hover:")`` and
        ``custom("group-hover")`` are the same modifier.

        Raises:
            ValueError: If the name is empty or contains whitespace
        """
        key = name.strip().rstrip(":")
        if not key:
            raise ValueError("Modifier name cannot be empty")
        if any(ch.isspace() for ch in key):
            raise ValueError(f"Modifier name cannot contain whitespace: {name!r}")
        return cls(name=key, kind=ModifierKind.CUSTOM)

    @classmethod
    def parse(cls, text: str) -> Modifier:
        """Resolve a modifier from its textual form.

        Built-in names are matched in their prefix spelling (``aria-required``,
        ``2xl``), their attribute spelling (``ARIA_REQUIRED``, ``xl2``) or with
        underscores; anything else becomes a custom modifier.

        Raises:
            ValueError: If the text is empty
        """
        key = text.strip().rstrip(":")
        if not key:
            raise ValueError("Modifier name cannot be empty")
        builtin = _BUILTINS.get(_normalize(key))
        if builtin is not None:
            return builtin
        return cls.custom(key)

    @classmethod
    def breakpoints(cls) -> list[Modifier]:
        """Breakpoint ladder in ascending min-width order."""
        return sorted(m for m in _ALL if m.is_breakpoint)

    @classmethod
    def states(cls) -> list[Modifier]:
        """State and ARIA state modifiers in declaration order."""
        return [m for m in _ALL if m.is_state]

    @classmethod
    def builtins(cls) -> list[Modifier]:
        """Every built-in modifier in declaration order."""
        return list(_ALL)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Modifier):
            return NotImplemented
        if self.min_width is None or other.min_width is None:
            raise TypeError(f"Only breakpoints are ordered: {self.name!r} vs {other.name!r}")
        return self.min_width < other.min_width

    def __str__(self) -> str:
        return self.name


def _normalize(name: str) -> str:
    return name.lower().replace("_", "-")


def _breakpoint(name: str, min_width: int) -> Modifier:
    return Modifier(name=name, kind=ModifierKind.BREAKPOINT, min_width=min_width)


def _state(name: str) -> Modifier:
    return Modifier(name=name, kind=ModifierKind.STATE)


Modifier.XS = _breakpoint("xs", 480)
Modifier.SM = _breakpoint("sm", 640)
Modifier.MD = _breakpoint("md", 768)
Modifier.LG = _breakpoint("lg", 1024)
Modifier.XL = _breakpoint("xl", 1280)
Modifier.XL2 = _breakpoint("2xl", 1536)

Modifier.HOVER = _state("hover")
Modifier.FOCUS = _state("focus")
Modifier.ACTIVE = _state("active")
Modifier.PLACEHOLDER = _state("placeholder")
Modifier.DARK = _state("dark")
Modifier.FIRST = _state("first")
Modifier.LAST = _state("last")
Modifier.DISABLED = _state("disabled")
Modifier.MOTION_REDUCE = _state("motion-reduce")

Modifier.ARIA_BUSY = _state("aria-busy")
Modifier.ARIA_CHECKED = _state("aria-checked")
Modifier.ARIA_DISABLED = _state("aria-disabled")
Modifier.ARIA_EXPANDED = _state("aria-expanded")
Modifier.ARIA_HIDDEN = _state("aria-hidden")
Modifier.ARIA_PRESSED = _state("aria-pressed")
Modifier.ARIA_READONLY = _state("aria-readonly")
Modifier.ARIA_REQUIRED = _state("aria-required")
Modifier.ARIA_SELECTED = _state("aria-selected")

_ALL: tuple[Modifier, ...] = (
    Modifier.XS,
    Modifier.SM,
    Modifier.MD,
    Modifier.LG,
    Modifier.XL,
    Modifier.XL2,
    Modifier.HOVER,
    Modifier.FOCUS,
    Modifier.ACTIVE,
    Modifier.PLACEHOLDER,
    Modifier.DARK,
    Modifier.FIRST,
    Modifier.LAST,
    Modifier.DISABLED,
    Modifier.MOTION_REDUCE,
    Modifier.ARIA_BUSY,
    Modifier.ARIA_CHECKED,
    Modifier.ARIA_DISABLED,
    Modifier.ARIA_EXPANDED,
    Modifier.ARIA_HIDDEN,
    Modifier.ARIA_PRESSED,
    Modifier.ARIA_READONLY,
    Modifier.ARIA_REQUIRED,
    Modifier.ARIA_SELECTED,
)

_BUILTINS: dict[str, Modifier] = {m.name: m for m in _ALL}
_BUILTINS["xl2"] = Modifier.XL2


def as_modifier(value: Modifier | str) -> Modifier:
    """Accept either a Modifier or its textual form."""
    if isinstance(value, Modifier):
        return value
    return Modifier.parse(value)


ModifierSpec = Union[Modifier, str]


def as_modifiers(value: ModifierSpec | Iterable[ModifierSpec] | None) -> tuple[Modifier, ...]:
    """Normalize a single modifier, a name or a sequence of either."""
    if value is None:
        return ()
    if isinstance(value, (Modifier, str)):
        return (as_modifier(value),)
    return tuple(as_modifier(v) for v in value)


__all__ = ["Modifier", "ModifierKind", "ModifierSpec", "as_modifier", "as_modifiers"]
