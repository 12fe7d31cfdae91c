"""Untyped parameter bag shared by the page loader, the CLI and the builder."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

_T = TypeVar("_T")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_key(key: str) -> str:
    """Convert ``iterationCount`` / ``iteration-count`` to ``iteration_count``."""
    return _CAMEL_BOUNDARY.sub("_", key.strip()).replace("-", "_").lower()


class StyleParameters:
    """A keyed bag of optional style arguments.

    Setting a key to None is a no-op, so callers can forward optional
    arguments without filtering them first. Keys are normalized to snake_case.

    Example:
        >>> bag = StyleParameters.from_mapping({"length": 4, "edges": ["top"]})
        >>> bag.get("length")
        4
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None, **extra: Any) -> StyleParameters:
        params = cls()
        for key, value in {**(values or {}), **extra}.items():
            params.set(key, value)
        return params

    def set(self, key: str, value: Any) -> StyleParameters:
        if value is not None:
            self._values[normalize_key(key)] = value
        return self

    def get(self, key: str, default: _T | None = None) -> Any:
        return self._values.get(normalize_key(key), default)

    def keys(self) -> list[str]:
        return list(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"StyleParameters({self._values!r})"
