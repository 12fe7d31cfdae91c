"""Pydantic schemas for YAML page descriptions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _as_str_list(v: Any) -> list[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [str(item) for item in v]  # type: ignore[misc]
    return [str(v)]


def _restore_on_key(data: Any) -> Any:
    """YAML 1.1 reads a bare ``on:`` key as the boolean True; map it back."""
    if isinstance(data, dict) and "on" not in data and any(key is True for key in data):
        entry = dict(data)  # type: ignore[arg-type]
        entry["on"] = entry.pop(True)
        return entry
    return data


class StyleSchema(BaseModel):
    """One concern call.

    Written in YAML as a single-key mapping from concern to parameters, with
    an optional ``on`` list of modifiers:

        - padding: {of: 4, at: [top]}
          on: [hover]
        - flex          # no parameters
    """

    concern: str
    params: dict[str, Any] = Field(default_factory=dict)
    on: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def unpack_concern_key(cls, data: Any) -> Any:
        """Turn ``{padding: {...}, on: [...]}`` into explicit fields."""
        if isinstance(data, str):
            return {"concern": data}
        data = _restore_on_key(data)
        if not isinstance(data, dict) or "concern" in data:
            return data
        entry = dict(data)  # type: ignore[arg-type]
        on = entry.pop("on", None)
        if len(entry) != 1:
            raise ValueError(
                f"Style entry must name exactly one concern, got: {', '.join(map(str, entry)) or 'none'}"
            )
        concern, params = next(iter(entry.items()))
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ValueError(f"Parameters for '{concern}' must be a mapping, got {params!r}")
        return {"concern": concern, "params": params, "on": on}

    @field_validator("on", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        return _as_str_list(v)


class ResponsiveSchema(BaseModel):
    """A declarative block: styles scoped under every modifier in ``on``."""

    model_config = ConfigDict(extra="forbid")

    on: list[str]
    styles: list[StyleSchema] = Field(default_factory=list)
    classes: list[str] = Field(default_factory=list)
    nested: list[ResponsiveSchema] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def restore_on_key(cls, data: Any) -> Any:
        return _restore_on_key(data)

    @field_validator("on", "classes", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        return _as_str_list(v)

    @field_validator("on")
    @classmethod
    def require_modifier(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("Responsive block needs at least one modifier in 'on'")
        return v


class NodeSchema(BaseModel):
    """An element, or a bare text child when only ``text`` is given."""

    model_config = ConfigDict(extra="forbid")

    tag: str | None = None
    id: str | None = None
    classes: list[str] = Field(default_factory=list)
    text: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    self_closing: bool = False
    styles: list[StyleSchema] = Field(default_factory=list)
    responsive: list[ResponsiveSchema] = Field(default_factory=list)
    children: list[NodeSchema] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def allow_bare_text(cls, data: Any) -> Any:
        """Plain strings in ``children`` are text nodes."""
        if isinstance(data, (str, int, float)) and not isinstance(data, bool):
            return {"text": str(data)}
        return data

    @field_validator("classes", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Ensure value is a list."""
        return _as_str_list(v)

    @field_validator("attributes", mode="before")
    @classmethod
    def stringify_attributes(cls, v: Any) -> Any:
        """YAML numbers and booleans become attribute strings."""
        if isinstance(v, dict):
            return {
                str(key): ("" if value is True else str(value))
                for key, value in v.items()  # type: ignore[misc]
                if value is not None and value is not False
            }
        return v

    @property
    def is_text(self) -> bool:
        """True for a text-only entry (no tag, no styling, no children)."""
        return (
            self.tag is None
            and self.text is not None
            and not (self.id or self.classes or self.attributes or self.styles)
            and not (self.responsive or self.children or self.self_closing)
        )


ResponsiveSchema.model_rebuild()
NodeSchema.model_rebuild()
