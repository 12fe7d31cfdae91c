"""Scroll behavior, scroll margins/padding and scroll snapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..tokens import Edge, signed
from .base import StyleOperation, edge_tuple, optional_int, optional_token, set_field


class ScrollBehavior(str, Enum):
    AUTO = "auto"
    SMOOTH = "smooth"


class SnapAlign(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    NONE = "align-none"


class SnapStop(str, Enum):
    NORMAL = "normal"
    ALWAYS = "always"


class SnapType(str, Enum):
    NONE = "none"
    X = "x"
    Y = "y"
    BOTH = "both"
    MANDATORY = "mandatory"
    PROXIMITY = "proximity"


# Scroll utilities use logical start/end suffixes
_SCROLL_EDGE_SUFFIXES = {
    Edge.ALL: "",
    Edge.TOP: "t",
    Edge.BOTTOM: "b",
    Edge.LEADING: "s",
    Edge.TRAILING: "e",
    Edge.HORIZONTAL: "x",
    Edge.VERTICAL: "y",
}


@dataclass(frozen=True)
class ScrollParameters:
    behavior: ScrollBehavior | None = None
    margin: int | None = None
    margin_edges: tuple[Edge, ...] = (Edge.ALL,)
    padding: int | None = None
    padding_edges: tuple[Edge, ...] = (Edge.ALL,)
    snap_align: SnapAlign | None = None
    snap_stop: SnapStop | None = None
    snap_type: SnapType | None = None

    def __post_init__(self) -> None:
        set_field(self, "behavior", optional_token(ScrollBehavior, self.behavior))
        set_field(self, "margin", optional_int(self.margin))
        set_field(self, "margin_edges", edge_tuple(self.margin_edges))
        set_field(self, "padding", optional_int(self.padding))
        set_field(self, "padding_edges", edge_tuple(self.padding_edges))
        set_field(self, "snap_align", optional_token(SnapAlign, self.snap_align))
        set_field(self, "snap_stop", optional_token(SnapStop, self.snap_stop))
        set_field(self, "snap_type", optional_token(SnapType, self.snap_type))


class ScrollOperation(StyleOperation[ScrollParameters]):
    name = "scroll"
    Parameters = ScrollParameters
    aliases = {"snap": "snap_type", "align": "snap_align", "stop": "snap_stop"}

    def apply_classes(self, params: ScrollParameters) -> list[str]:
        classes: list[str] = []
        if params.behavior is not None:
            classes.append(f"scroll-{params.behavior.value}")
        if params.margin is not None:
            classes.extend(
                signed(f"scroll-m{_SCROLL_EDGE_SUFFIXES[edge]}", params.margin)
                for edge in params.margin_edges
            )
        if params.padding is not None:
            classes.extend(
                f"scroll-p{_SCROLL_EDGE_SUFFIXES[edge]}-{params.padding}"
                for edge in params.padding_edges
            )
        if params.snap_align is not None:
            classes.append(f"snap-{params.snap_align.value}")
        if params.snap_stop is not None:
            classes.append(f"snap-{params.snap_stop.value}")
        if params.snap_type is not None:
            classes.append(f"snap-{params.snap_type.value}")
        return classes
