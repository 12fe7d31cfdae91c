"""Border concerns: border, border radius and outline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..tokens import Color, Edge
from .base import (
    StyleOperation,
    edge_tuple,
    optional_color,
    optional_int,
    optional_token,
    set_field,
    suffixed,
    token_tuple,
)


class BorderStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    HIDDEN = "hidden"
    NONE = "none"
    # Borders between children instead of around the element
    DIVIDE = "divide"


class RadiusSize(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    FULL = "full"


class RadiusSide(str, Enum):
    ALL = ""
    TOP = "t"
    RIGHT = "r"
    BOTTOM = "b"
    LEFT = "l"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"


@dataclass(frozen=True)
class BorderParameters:
    width: int | None = 1
    edges: tuple[Edge, ...] = (Edge.ALL,)
    style: BorderStyle | None = None
    color: Color | None = None

    def __post_init__(self) -> None:
        set_field(self, "width", optional_int(self.width))
        set_field(self, "edges", edge_tuple(self.edges))
        set_field(self, "style", optional_token(BorderStyle, self.style))
        set_field(self, "color", optional_color(self.color))


class BorderOperation(StyleOperation[BorderParameters]):
    """Border width per edge, plus independent style and color classes.

    The ``divide`` style switches to child dividers: ``divide-x-{w}`` for the
    horizontal edge selection, ``divide-y-{w}`` otherwise.
    """

    name = "border"
    Parameters = BorderParameters
    aliases = {"of": "width", "at": "edges", "edge": "edges"}

    def apply_classes(self, params: BorderParameters) -> list[str]:
        classes: list[str] = []
        dividing = params.style is BorderStyle.DIVIDE

        for edge in params.edges:
            if dividing:
                if params.width is not None:
                    axis = "x" if edge is Edge.HORIZONTAL else "y"
                    classes.append(f"divide-{axis}-{params.width}")
                continue
            prefix = suffixed("border", edge.value)
            classes.append(prefix if params.width is None else f"{prefix}-{params.width}")

        if params.style is not None and not dividing:
            classes.append(f"border-{params.style.value}")
        if params.color is not None:
            classes.append(f"border-{params.color.value}")
        return classes


@dataclass(frozen=True)
class BorderRadiusParameters:
    size: RadiusSize | None = RadiusSize.MD
    sides: tuple[RadiusSide, ...] = (RadiusSide.ALL,)

    def __post_init__(self) -> None:
        set_field(self, "size", optional_token(RadiusSize, self.size))
        set_field(self, "sides", token_tuple(RadiusSide, self.sides, RadiusSide.ALL))


class BorderRadiusOperation(StyleOperation[BorderRadiusParameters]):
    """Corner rounding: ``rounded-md``, ``rounded-tl-lg``, bare ``rounded``."""

    name = "border_radius"
    Parameters = BorderRadiusParameters
    aliases = {"at": "sides", "side": "sides"}

    def apply_classes(self, params: BorderRadiusParameters) -> list[str]:
        classes: list[str] = []
        for side in params.sides:
            token = suffixed("rounded", side.value)
            if params.size is not None:
                token = f"{token}-{params.size.value}"
            classes.append(token)
        return classes


@dataclass(frozen=True)
class OutlineParameters:
    width: int | None = None
    style: BorderStyle | None = None
    color: Color | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        set_field(self, "width", optional_int(self.width))
        set_field(self, "style", optional_token(BorderStyle, self.style))
        set_field(self, "color", optional_color(self.color))
        set_field(self, "offset", optional_int(self.offset))


class OutlineOperation(StyleOperation[OutlineParameters]):
    name = "outline"
    Parameters = OutlineParameters

    def apply_classes(self, params: OutlineParameters) -> list[str]:
        classes: list[str] = []
        if params.width is not None:
            classes.append(f"outline-{params.width}")
        if params.style is not None:
            classes.append(f"outline-{params.style.value}")
        if params.color is not None:
            classes.append(f"outline-{params.color.value}")
        if params.offset is not None:
            classes.append(f"outline-offset-{params.offset}")
        # Nothing requested still means "show an outline"
        return classes or ["outline"]
