"""Shared style tokens: edges, axes and the color palette."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

_E = TypeVar("_E", bound=Enum)

_WHITESPACE = re.compile(r"\s+")

PALETTE_FAMILIES = (
    "slate",
    "gray",
    "zinc",
    "neutral",
    "stone",
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
)
SHADES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
KEYWORD_COLORS = ("white", "black", "transparent", "current", "inherit")

PERCENT = 100


class Edge(str, Enum):
    """Edge selection for spacing, insets and borders.

    The value is the suffix appended to a concern prefix (``p`` + ``t``).
    """

    ALL = ""
    TOP = "t"
    LEADING = "l"
    TRAILING = "r"
    BOTTOM = "b"
    HORIZONTAL = "x"
    VERTICAL = "y"


class Axis(str, Enum):
    """Axis selection for overflow, scroll and child spacing."""

    HORIZONTAL = "x"
    VERTICAL = "y"
    BOTH = ""


_EDGE_ALIASES = {
    "left": Edge.LEADING,
    "start": Edge.LEADING,
    "right": Edge.TRAILING,
    "end": Edge.TRAILING,
    "x": Edge.HORIZONTAL,
    "y": Edge.VERTICAL,
}


def _token_key(text: str) -> str:
    return re.sub(r"[\s_-]+", "_", text.strip()).lower()


def parse_token(enum_cls: type[_E], value: Any) -> _E:
    """Resolve an enum member from a member, name or value.

    Matching is case-insensitive and treats ``-``/``_`` alike, so
    ``"ease-in-out"``, ``"EASE_IN_OUT"`` and ``"easeInOut"``-style names all
    resolve when they spell a member name or value.

    Raises:
        ValueError: If nothing matches
    """
    if isinstance(value, enum_cls):
        return value
    if enum_cls is Edge and isinstance(value, str) and value.lower() in _EDGE_ALIASES:
        return _EDGE_ALIASES[value.lower()]  # type: ignore[return-value]

    text = str(value)
    camel_split = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", text)
    wanted = {_token_key(text), _token_key(camel_split)}
    for member in enum_cls:
        names = {_token_key(member.name)}
        if isinstance(member.value, str):
            names.add(_token_key(member.value))
        else:
            names.add(str(member.value))
        if wanted & names:
            return member
    valid = ", ".join(m.name.lower() for m in enum_cls)
    raise ValueError(f"Invalid {enum_cls.__name__} value {value!r}. Valid values: {valid}")


def parse_tokens(enum_cls: type[_E], values: Any) -> list[_E]:
    """Resolve a single token or an iterable of tokens into a list."""
    if values is None:
        return []
    if isinstance(values, (str, Enum)) or not isinstance(values, Iterable):
        return [parse_token(enum_cls, values)]
    return [parse_token(enum_cls, v) for v in values]


@dataclass(frozen=True)
class Color:
    """A color token from the utility palette.

    ``family`` is a palette family (``blue``), a keyword (``white``) or, for
    custom colors, the raw CSS value rendered in bracket syntax. Opacity is a
    fraction in ``0..1``; values outside the range are ignored when rendering.

    Examples:
        >>> Color.blue(500).value
        'blue-500'
        >>> Color.black(opacity=0.5).value
        'black/50'
        >>> Color.custom("#0af").value
        '[#0af]'
    """

    family: str
    shade: int | None = None
    opacity: float | None = None
    is_custom: bool = False

    def __post_init__(self) -> None:
        if self.is_custom:
            return
        if self.family in KEYWORD_COLORS:
            if self.shade is not None:
                raise ValueError(f"Color '{self.family}' does not take a shade")
            return
        if self.family not in PALETTE_FAMILIES:
            raise ValueError(f"Unknown color family: {self.family!r}")
        if self.shade not in SHADES:
            raise ValueError(
                f"Invalid shade {self.shade!r} for {self.family}. "
                f"Valid shades: {', '.join(str(s) for s in SHADES)}"
            )

    @classmethod
    def of(cls, family: str, shade: int | None = None, opacity: float | None = None) -> Color:
        return cls(family=family, shade=shade, opacity=opacity)

    @classmethod
    def custom(cls, raw: str, opacity: float | None = None) -> Color:
        """A color with no palette name, emitted as an arbitrary value."""
        return cls(family=raw, opacity=opacity, is_custom=True)

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse the class-name spelling of a color.

        Accepts ``blue-500``, ``blue-500/50``, ``white``, ``black/25``,
        ``[#ff0000]``, ``#ff0000`` and ``rgb(...)``-style raw values.

        Raises:
            ValueError: If the text names no palette color
        """
        value = text.strip()
        opacity: float | None = None
        match = re.match(r"^(.*)/(\d{1,3})$", value)
        # Inside brackets a slash belongs to the raw CSS value
        if match and (not value.startswith("[") or match.group(1).endswith("]")):
            value, opacity = match.group(1), int(match.group(2)) / PERCENT

        if value.startswith("[") and value.endswith("]"):
            return cls.custom(value[1:-1], opacity)
        if value.startswith("#") or "(" in value:
            return cls.custom(value, opacity)
        if value in KEYWORD_COLORS:
            return cls(family=value, opacity=opacity)

        family, _, shade = value.rpartition("-")
        if family in PALETTE_FAMILIES and shade.isdigit():
            return cls(family=family, shade=int(shade), opacity=opacity)
        raise ValueError(f"Invalid color: {text!r}")

    @property
    def value(self) -> str:
        """Class-name fragment for this color (``blue-500/50``)."""
        if self.is_custom:
            base = bracketed(self.family)
        elif self.shade is None:
            base = self.family
        else:
            base = f"{self.family}-{self.shade}"
        return f"{base}{self._opacity_suffix()}"

    def _opacity_suffix(self) -> str:
        if self.opacity is None or not 0 <= self.opacity <= 1:
            return ""
        return f"/{round(self.opacity * PERCENT)}"

    def __str__(self) -> str:
        return self.value


def _palette_factory(family: str) -> Any:
    def factory(cls: type[Color], shade: int, opacity: float | None = None) -> Color:
        return cls(family=family, shade=shade, opacity=opacity)

    factory.__name__ = family
    factory.__doc__ = f"{family.title()} palette color at the given shade."
    return classmethod(factory)


def _keyword_factory(family: str) -> Any:
    def factory(cls: type[Color], opacity: float | None = None) -> Color:
        return cls(family=family, opacity=opacity)

    factory.__name__ = family
    return classmethod(factory)


for _family in PALETTE_FAMILIES:
    setattr(Color, _family, _palette_factory(_family))
for _keyword in KEYWORD_COLORS:
    setattr(Color, _keyword, _keyword_factory(_keyword))


def bracketed(raw: object) -> str:
    """Arbitrary-value brackets with every whitespace run turned into ``_``."""
    return f"[{_WHITESPACE.sub('_', str(raw).strip())}]"


def as_color(value: Color | str) -> Color:
    """Accept either a Color or its class-name spelling."""
    if isinstance(value, Color):
        return value
    return Color.parse(value)


def signed(prefix: str, value: int) -> str:
    """Render ``prefix-value`` with a leading ``-`` for negative values."""
    if value < 0:
        return f"-{prefix}-{abs(value)}"
    return f"{prefix}-{value}"


__all__ = [
    "Axis",
    "Color",
    "Edge",
    "KEYWORD_COLORS",
    "PALETTE_FAMILIES",
    "SHADES",
    "as_color",
    "bracketed",
    "parse_token",
    "parse_tokens",
    "signed",
]
