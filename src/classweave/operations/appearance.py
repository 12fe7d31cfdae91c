"""Appearance concerns: background, opacity, shadow, ring and cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..tokens import Color, as_color, parse_token
from .base import StyleOperation, optional_color, optional_int, optional_token, set_field


class ShadowSize(str, Enum):
    NONE = "none"
    XS2 = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"


class CursorType(str, Enum):
    AUTO = "auto"
    DEFAULT = "default"
    POINTER = "pointer"
    WAIT = "wait"
    TEXT = "text"
    MOVE = "move"
    NOT_ALLOWED = "not-allowed"
    GRAB = "grab"
    GRABBING = "grabbing"


@dataclass(frozen=True)
class BackgroundParameters:
    color: Color

    def __post_init__(self) -> None:
        set_field(self, "color", as_color(self.color))


class BackgroundOperation(StyleOperation[BackgroundParameters]):
    """Background color: ``bg-blue-500``, ``bg-black/50``, ``bg-[#0af]``."""

    name = "background"
    Parameters = BackgroundParameters

    def apply_classes(self, params: BackgroundParameters) -> list[str]:
        return [f"bg-{params.color.value}"]


@dataclass(frozen=True)
class OpacityParameters:
    value: int

    def __post_init__(self) -> None:
        set_field(self, "value", int(self.value))


class OpacityOperation(StyleOperation[OpacityParameters]):
    name = "opacity"
    Parameters = OpacityParameters

    def apply_classes(self, params: OpacityParameters) -> list[str]:
        return [f"opacity-{params.value}"]


@dataclass(frozen=True)
class ShadowParameters:
    size: ShadowSize | None = None
    color: Color | None = None

    def __post_init__(self) -> None:
        set_field(self, "size", optional_token(ShadowSize, self.size))
        set_field(self, "color", optional_color(self.color))


class ShadowOperation(StyleOperation[ShadowParameters]):
    """Box shadow. Size defaults to ``md``; color is an independent class."""

    name = "shadow"
    Parameters = ShadowParameters

    def apply_classes(self, params: ShadowParameters) -> list[str]:
        size = params.size or ShadowSize.MD
        classes = [f"shadow-{size.value}"]
        if params.color is not None:
            classes.append(f"shadow-{params.color.value}")
        return classes


@dataclass(frozen=True)
class RingParameters:
    size: int | None = 1
    color: Color | None = None

    def __post_init__(self) -> None:
        set_field(self, "size", optional_int(self.size))
        set_field(self, "color", optional_color(self.color))


class RingOperation(StyleOperation[RingParameters]):
    name = "ring"
    Parameters = RingParameters
    aliases = {"width": "size"}

    def apply_classes(self, params: RingParameters) -> list[str]:
        size = 1 if params.size is None else params.size
        classes = [f"ring-{size}"]
        if params.color is not None:
            classes.append(f"ring-{params.color.value}")
        return classes


@dataclass(frozen=True)
class CursorParameters:
    type: CursorType

    def __post_init__(self) -> None:
        set_field(self, "type", parse_token(CursorType, self.type))


class CursorOperation(StyleOperation[CursorParameters]):
    name = "cursor"
    Parameters = CursorParameters

    def apply_classes(self, params: CursorParameters) -> list[str]:
        return [f"cursor-{params.type.value}"]
