"""Built-in style operations, one per style concern."""

from __future__ import annotations

from .appearance import (
    BackgroundOperation,
    CursorOperation,
    CursorType,
    OpacityOperation,
    RingOperation,
    ShadowOperation,
    ShadowSize,
)
from .base import StyleOperation
from .border import (
    BorderOperation,
    BorderRadiusOperation,
    BorderStyle,
    OutlineOperation,
    RadiusSide,
    RadiusSize,
)
from .layout import (
    Align,
    Direction,
    DisplayOperation,
    DisplayType,
    FlexOperation,
    FrameOperation,
    GridFlow,
    GridOperation,
    Grow,
    Justify,
    OverflowOperation,
    OverflowType,
    PositionOperation,
    PositionType,
    SizingValue,
    VisibilityOperation,
    ZIndexOperation,
)
from .motion import (
    AnimationDirection,
    AnimationOperation,
    Easing,
    FillMode,
    PlayState,
    TransformOperation,
    TransitionOperation,
    TransitionProperty,
)
from .scroll import ScrollBehavior, ScrollOperation, SnapAlign, SnapStop, SnapType
from .spacing import MarginsOperation, PaddingOperation, SpacingOperation
from .typography import (
    DecorationStyle,
    FontOperation,
    FontSize,
    FontWeight,
    Leading,
    TextAlignment,
    TextDecoration,
    TextWrap,
    Tracking,
)
from .view_transition import (
    ScaleOrigin,
    SlideDirection,
    TransitionBehavior,
    TransitionTiming,
    TransitionType,
    ViewTransitionOperation,
)

# Registration order of the default registry
BUILTIN_OPERATIONS: tuple[type[StyleOperation], ...] = (
    PaddingOperation,
    MarginsOperation,
    SpacingOperation,
    BackgroundOperation,
    FontOperation,
    BorderOperation,
    BorderRadiusOperation,
    OutlineOperation,
    RingOperation,
    ShadowOperation,
    OpacityOperation,
    ZIndexOperation,
    PositionOperation,
    DisplayOperation,
    FlexOperation,
    GridOperation,
    VisibilityOperation,
    FrameOperation,
    OverflowOperation,
    CursorOperation,
    TransformOperation,
    TransitionOperation,
    AnimationOperation,
    ScrollOperation,
    ViewTransitionOperation,
)

__all__ = [
    "BUILTIN_OPERATIONS",
    "Align",
    "AnimationDirection",
    "AnimationOperation",
    "BackgroundOperation",
    "BorderOperation",
    "BorderRadiusOperation",
    "BorderStyle",
    "CursorOperation",
    "CursorType",
    "DecorationStyle",
    "Direction",
    "DisplayOperation",
    "DisplayType",
    "Easing",
    "FillMode",
    "FlexOperation",
    "FontOperation",
    "FontSize",
    "FontWeight",
    "FrameOperation",
    "GridFlow",
    "GridOperation",
    "Grow",
    "Justify",
    "Leading",
    "MarginsOperation",
    "OpacityOperation",
    "OutlineOperation",
    "OverflowOperation",
    "OverflowType",
    "PaddingOperation",
    "PlayState",
    "PositionOperation",
    "PositionType",
    "RadiusSide",
    "RadiusSize",
    "RingOperation",
    "ScaleOrigin",
    "ScrollBehavior",
    "ScrollOperation",
    "ShadowOperation",
    "ShadowSize",
    "SizingValue",
    "SlideDirection",
    "SnapAlign",
    "SnapStop",
    "SnapType",
    "SpacingOperation",
    "StyleOperation",
    "TextAlignment",
    "TextDecoration",
    "TextWrap",
    "Tracking",
    "TransformOperation",
    "TransitionBehavior",
    "TransitionOperation",
    "TransitionProperty",
    "TransitionTiming",
    "TransitionType",
    "ViewTransitionOperation",
    "VisibilityOperation",
    "ZIndexOperation",
]
