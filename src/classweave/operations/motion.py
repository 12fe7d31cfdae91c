"""Motion concerns: transform, transition and animation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..tokens import parse_token, signed
from .base import (
    StyleOperation,
    arbitrary,
    optional_int,
    optional_pair,
    optional_token,
    set_field,
    suffixed,
)


@dataclass(frozen=True)
class TransformParameters:
    scale: tuple[int | None, int | None] | None = None
    rotate: int | None = None
    translate: tuple[int | None, int | None] | None = None
    skew: tuple[int | None, int | None] | None = None

    def __post_init__(self) -> None:
        set_field(self, "scale", optional_pair(self.scale))
        set_field(self, "rotate", optional_int(self.rotate))
        set_field(self, "translate", optional_pair(self.translate))
        set_field(self, "skew", optional_pair(self.skew))


class TransformOperation(StyleOperation[TransformParameters]):
    """2D transforms. Pairs are ``(x, y)``; a single number applies to both.

    Rotation, translation and skew are signed (``-rotate-45``); scale is a
    percentage and never negative.
    """

    name = "transform"
    Parameters = TransformParameters

    def apply_classes(self, params: TransformParameters) -> list[str]:
        classes = ["transform"]
        if params.scale is not None:
            x, y = params.scale
            if x is not None:
                classes.append(f"scale-x-{x}")
            if y is not None:
                classes.append(f"scale-y-{y}")
        if params.rotate is not None:
            classes.append(signed("rotate", params.rotate))
        for prefix, pair in (("translate", params.translate), ("skew", params.skew)):
            if pair is None:
                continue
            x, y = pair
            if x is not None:
                classes.append(signed(f"{prefix}-x", x))
            if y is not None:
                classes.append(signed(f"{prefix}-y", y))
        return classes


class TransitionProperty(str, Enum):
    DEFAULT = ""
    ALL = "all"
    COLORS = "colors"
    OPACITY = "opacity"
    SHADOW = "shadow"
    TRANSFORM = "transform"
    NONE = "none"


class Easing(str, Enum):
    LINEAR = "linear"
    IN = "in"
    OUT = "out"
    IN_OUT = "in-out"


@dataclass(frozen=True)
class TransitionParameters:
    property: TransitionProperty = TransitionProperty.DEFAULT
    duration: int | None = None
    easing: Easing | None = None
    delay: int | None = None

    def __post_init__(self) -> None:
        set_field(self, "property", _transition_property(self.property))
        set_field(self, "duration", optional_int(self.duration))
        set_field(self, "easing", _easing(self.easing))
        set_field(self, "delay", optional_int(self.delay))


def _transition_property(value: Any) -> TransitionProperty:
    if value is None:
        return TransitionProperty.DEFAULT
    return parse_token(TransitionProperty, value)


def _easing(value: Any) -> Easing | None:
    # "ease-in-out" and "in-out" are both accepted
    if isinstance(value, str) and value.lower().startswith("ease"):
        value = value[4:].lstrip("-_") or "in-out"
    return optional_token(Easing, value)


class TransitionOperation(StyleOperation[TransitionParameters]):
    name = "transition"
    Parameters = TransitionParameters
    aliases = {"on": "property", "timing": "easing"}

    def apply_classes(self, params: TransitionParameters) -> list[str]:
        classes = [suffixed("transition", params.property.value)]
        if params.duration is not None:
            classes.append(f"duration-{params.duration}")
        if params.easing is not None:
            classes.append(f"ease-{params.easing.value}")
        if params.delay is not None:
            classes.append(f"delay-{params.delay}")
        return classes


# ============================================================================
# Animation
# ============================================================================

BUILTIN_ANIMATIONS = (
    "fade-in",
    "fade-out",
    "slide-up",
    "slide-down",
    "slide-left",
    "slide-right",
    "scale-up",
    "scale-down",
    "bounce",
    "pulse",
    "spin",
    "ping",
)

TIMING_KEYWORDS = ("linear", "ease", "ease-in", "ease-out", "ease-in-out", "step-start", "step-end")


class AnimationDirection(str, Enum):
    NORMAL = "normal"
    REVERSE = "reverse"
    ALTERNATE = "alternate"
    ALTERNATE_REVERSE = "alternate-reverse"


class FillMode(str, Enum):
    NONE = "none"
    FORWARDS = "forwards"
    BACKWARDS = "backwards"
    BOTH = "both"


class PlayState(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"


def _animation_name(value: Any) -> str:
    name = str(value).strip().replace("_", "-")
    if not name or any(ch.isspace() for ch in name):
        raise ValueError(f"Invalid animation name: {value!r}")
    return name


def _timing(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    lowered = text.lower().replace("_", "-")
    if lowered in TIMING_KEYWORDS:
        return lowered
    # cubic-bezier(...), steps(...) and other raw timing functions pass through
    return text


def _iteration_count(value: Any) -> int | str | None:
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip().lower() == "infinite":
            return "infinite"
        return int(value)
    if isinstance(value, bool):
        raise ValueError(f"Invalid iteration count: {value!r}")
    return int(value)


@dataclass(frozen=True)
class AnimationParameters:
    """``name`` is either a built-in animation or any custom keyframe name.

    Durations and delays are milliseconds.
    """

    name: str
    duration: int | None = None
    timing: str | None = None
    delay: int | None = None
    iteration_count: int | str | None = None
    direction: AnimationDirection | None = None
    fill_mode: FillMode | None = None
    play_state: PlayState | None = None

    def __post_init__(self) -> None:
        set_field(self, "name", _animation_name(self.name))
        set_field(self, "duration", optional_int(self.duration))
        set_field(self, "timing", _timing(self.timing))
        set_field(self, "delay", optional_int(self.delay))
        set_field(self, "iteration_count", _iteration_count(self.iteration_count))
        set_field(self, "direction", optional_token(AnimationDirection, self.direction))
        set_field(self, "fill_mode", optional_token(FillMode, self.fill_mode))
        set_field(self, "play_state", optional_token(PlayState, self.play_state))

    @property
    def is_builtin(self) -> bool:
        return self.name in BUILTIN_ANIMATIONS


class AnimationOperation(StyleOperation[AnimationParameters]):
    """Named animation plus arbitrary-value escapes for its timing details.

    Example:
        >>> op = AnimationOperation()
        >>> op.apply_classes(op.build(name="spin-slow", duration=1500))
        ['animate-spin-slow', '[animation-duration:1500ms]']
    """

    name = "animation"
    Parameters = AnimationParameters
    aliases = {
        "custom": "name",
        "type": "name",
        "easing": "timing",
        "repeat": "iteration_count",
        "iterations": "iteration_count",
        "fill": "fill_mode",
    }

    def apply_classes(self, params: AnimationParameters) -> list[str]:
        classes = [f"animate-{params.name}"]
        if params.duration is not None:
            classes.append(arbitrary("animation-duration", f"{params.duration}ms"))
        if params.timing is not None:
            classes.append(arbitrary("animation-timing-function", params.timing))
        if params.delay is not None:
            classes.append(arbitrary("animation-delay", f"{params.delay}ms"))
        if params.iteration_count is not None:
            classes.append(arbitrary("animation-iteration-count", params.iteration_count))
        if params.direction is not None:
            classes.append(arbitrary("animation-direction", params.direction.value))
        if params.fill_mode is not None:
            classes.append(arbitrary("animation-fill-mode", params.fill_mode.value))
        if params.play_state is not None:
            classes.append(arbitrary("animation-play-state", params.play_state.value))
        return classes
