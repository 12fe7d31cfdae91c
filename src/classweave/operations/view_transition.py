"""View transitions: the one built-in concern with no unscoped default."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..combine import CombineStrategy
from .base import StyleOperation, optional_int, optional_token, set_field


class TransitionType(str, Enum):
    FADE = "fade"
    SLIDE = "slide"
    SLIDE_UP = "slide-up"
    SLIDE_DOWN = "slide-down"
    SLIDE_LEFT = "slide-left"
    SLIDE_RIGHT = "slide-right"
    SCALE = "scale"
    SCALE_UP = "scale-up"
    SCALE_DOWN = "scale-down"
    FLIP = "flip"
    FLIP_HORIZONTAL = "flip-horizontal"
    FLIP_VERTICAL = "flip-vertical"
    NONE = "none"


class SlideDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ScaleOrigin(str, Enum):
    CENTER = "center"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


class TransitionTiming(str, Enum):
    """Timing curves, named by slug so class names stay whitespace-free."""

    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    CIRC_IN = "circ-in"
    CIRC_OUT = "circ-out"
    CIRC_IN_OUT = "circ-in-out"
    BACK_IN = "back-in"
    BACK_OUT = "back-out"
    BACK_IN_OUT = "back-in-out"

    @property
    def curve(self) -> str:
        """The CSS timing function the slug stands for."""
        return _CURVES.get(self, self.value)


_CURVES = {
    TransitionTiming.CIRC_IN: "cubic-bezier(0.55, 0, 1, 0.45)",
    TransitionTiming.CIRC_OUT: "cubic-bezier(0, 0.55, 0.45, 1)",
    TransitionTiming.CIRC_IN_OUT: "cubic-bezier(0.85, 0, 0.15, 1)",
    TransitionTiming.BACK_IN: "cubic-bezier(0.36, 0, 0.66, -0.56)",
    TransitionTiming.BACK_OUT: "cubic-bezier(0.34, 1.56, 0.64, 1)",
    TransitionTiming.BACK_IN_OUT: "cubic-bezier(0.68, -0.6, 0.32, 1.6)",
}


class TransitionBehavior(str, Enum):
    AUTO = "auto"
    SMOOTH = "smooth"
    INSTANT = "instant"


_SCALE_TYPES = frozenset({TransitionType.SCALE, TransitionType.SCALE_UP, TransitionType.SCALE_DOWN})

_NAME_PATTERN = re.compile(r"^[A-Za-z_][\w-]*$")


def _transition_name(value: Any) -> str | None:
    if value is None:
        return None
    name = str(value).strip()
    if not _NAME_PATTERN.match(name):
        raise ValueError(f"Invalid view transition name: {value!r}")
    return name


@dataclass(frozen=True)
class ViewTransitionParameters:
    name: str | None = None
    type: TransitionType | None = None
    slide_direction: SlideDirection | None = None
    scale_origin: ScaleOrigin | None = None
    timing: TransitionTiming | None = None
    duration: int | None = None
    delay: int | None = None
    behavior: TransitionBehavior | None = None

    def __post_init__(self) -> None:
        set_field(self, "name", _transition_name(self.name))
        set_field(self, "type", optional_token(TransitionType, self.type))
        set_field(self, "slide_direction", optional_token(SlideDirection, self.slide_direction))
        set_field(self, "scale_origin", optional_token(ScaleOrigin, self.scale_origin))
        set_field(self, "timing", optional_token(TransitionTiming, self.timing))
        set_field(self, "duration", optional_int(self.duration))
        set_field(self, "delay", optional_int(self.delay))
        set_field(self, "behavior", optional_token(TransitionBehavior, self.behavior))


class ViewTransitionOperation(StyleOperation[ViewTransitionParameters]):
    """View-transition hints.

    Slide direction only applies to the plain ``slide`` type and the origin
    only to the scale types; both are dropped otherwise. Under explicit
    modifiers the classes are emitted once per modifier with no unscoped copy.
    """

    name = "view_transition"
    Parameters = ViewTransitionParameters
    strategy = CombineStrategy.SEPARATE
    aliases = {"direction": "slide_direction", "origin": "scale_origin", "transition": "type"}

    def apply_classes(self, params: ViewTransitionParameters) -> list[str]:
        classes: list[str] = []
        if params.name is not None:
            classes.append(f"view-transition-name-{params.name}")
        if params.type is not None:
            classes.append(f"view-transition-{params.type.value}")
            if params.type is TransitionType.SLIDE and params.slide_direction is not None:
                classes.append(f"view-transition-slide-{params.slide_direction.value}")
            if params.type in _SCALE_TYPES and params.scale_origin is not None:
                classes.append(f"view-transition-origin-{params.scale_origin.value}")
        if params.timing is not None:
            classes.append(f"view-transition-timing-{params.timing.value}")
        if params.duration is not None:
            classes.append(f"view-transition-duration-{params.duration}")
        if params.delay is not None:
            classes.append(f"view-transition-delay-{params.delay}")
        if params.behavior is not None:
            classes.append(f"view-transition-behavior-{params.behavior.value}")
        return classes
