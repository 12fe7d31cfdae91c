"""Base class and coercion helpers for style operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from ..combine import CombineStrategy
from ..parameters import StyleParameters, normalize_key
from ..tokens import Color, Edge, as_color, bracketed, parse_token, parse_tokens

P = TypeVar("P")
_E = TypeVar("_E", bound=Enum)


class StyleOperation(ABC, Generic[P]):
    """One style concern: maps a typed parameter struct to utility classes.

    Subclasses set ``name`` (the registry key), ``Parameters`` (a frozen
    dataclass) and implement ``apply_classes``. ``apply_classes`` must be a
    pure, total function: identical parameters always give identical output,
    and unset optional fields contribute no classes.

    ``strategy`` declares how the direct-chaining surface combines the result
    with explicit modifiers; the default is the merged strategy.
    """

    __slots__ = ()

    name: ClassVar[str]
    Parameters: ClassVar[type[Any]]
    strategy: ClassVar[CombineStrategy] = CombineStrategy.MERGED
    # Alternate spellings accepted by parameters_from (e.g. "of" -> "length")
    aliases: ClassVar[dict[str, str]] = {}

    @abstractmethod
    def apply_classes(self, params: P) -> list[str]:
        """Return the utility classes for the given parameters."""
        ...

    def parameters_from(self, bag: StyleParameters) -> P:
        """Build typed parameters from an untyped bag.

        Keys are matched against the Parameters dataclass fields (after alias
        resolution); omitted keys keep their dataclass defaults.

        Raises:
            ValueError: If the bag holds a key the concern does not understand
                or a value that cannot be coerced
        """
        known = {f.name for f in fields(self.Parameters)} if is_dataclass(self.Parameters) else set()
        values: dict[str, Any] = {}
        for key in bag:
            field_name = self.aliases.get(key, key)
            if field_name not in known:
                valid = ", ".join(sorted(known | set(self.aliases)))
                raise ValueError(
                    f"Unknown parameter '{key}' for '{self.name}'. Valid parameters: {valid}"
                )
            values[field_name] = bag.get(key)
        return self.Parameters(**values)

    def classes_from(self, bag: StyleParameters) -> list[str]:
        """Convenience: ``apply_classes(parameters_from(bag))``."""
        return self.apply_classes(self.parameters_from(bag))

    def build(self, **params: Any) -> P:
        """Build typed parameters from keyword arguments (aliases allowed)."""
        return self.parameters_from(StyleParameters.from_mapping(params))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, strategy={self.strategy.value!r})"


# ============================================================================
# Coercion helpers used by Parameters.__post_init__
# ============================================================================


def set_field(instance: Any, name: str, value: Any) -> None:
    """Assign to a frozen dataclass field during __post_init__."""
    object.__setattr__(instance, name, value)


def edge_tuple(value: Any) -> tuple[Edge, ...]:
    """Normalize an edge or edges; an empty selection means all edges."""
    edges = tuple(parse_tokens(Edge, value))
    return edges or (Edge.ALL,)


def token_tuple(enum_cls: type[_E], value: Any, default: _E) -> tuple[_E, ...]:
    tokens = tuple(parse_tokens(enum_cls, value))
    return tokens or (default,)


def optional_token(enum_cls: type[_E], value: Any) -> _E | None:
    if value is None:
        return None
    return parse_token(enum_cls, value)


def optional_color(value: Color | str | None) -> Color | None:
    if value is None:
        return None
    return as_color(value)


def optional_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got {value!r}")
    return int(value)


def optional_pair(value: Any) -> tuple[int | None, int | None] | None:
    """Normalize an (x, y) pair; a bare number applies to both axes."""
    if value is None:
        return None
    if isinstance(value, dict):
        return (optional_int(value.get("x")), optional_int(value.get("y")))
    if isinstance(value, Iterable) and not isinstance(value, str):
        items = list(value)
        if len(items) != 2:  # noqa: PLR2004 - an (x, y) pair
            raise ValueError(f"Expected an (x, y) pair, got {value!r}")
        return (optional_int(items[0]), optional_int(items[1]))
    number = optional_int(value)
    return (number, number)


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def arbitrary(css_property: str, raw_value: object) -> str:
    """Arbitrary-value escape token: ``[property:value]`` without whitespace."""
    return bracketed(f"{css_property}:{raw_value}")


def suffixed(prefix: str, suffix: str) -> str:
    """Join a concern prefix and a token suffix, skipping empty suffixes."""
    return f"{prefix}-{suffix}" if suffix else prefix


__all__ = [
    "StyleOperation",
    "arbitrary",
    "as_bool",
    "edge_tuple",
    "normalize_key",
    "optional_color",
    "optional_int",
    "optional_pair",
    "optional_token",
    "set_field",
    "suffixed",
    "token_tuple",
]
