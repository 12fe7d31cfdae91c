"""Layout concerns: display, flex, grid, visibility, position, z-index,
overflow and frame sizing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..tokens import Axis, Edge, bracketed, parse_token, signed
from .base import (
    StyleOperation,
    as_bool,
    edge_tuple,
    optional_int,
    optional_token,
    set_field,
    suffixed,
)


class DisplayType(str, Enum):
    """Display value, spelled as its utility class."""

    NONE = "hidden"
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    FLEX = "flex"
    INLINE_FLEX = "inline-flex"
    GRID = "grid"
    INLINE_GRID = "inline-grid"
    TABLE = "table"
    TABLE_CELL = "table-cell"
    TABLE_ROW = "table-row"
    CONTENTS = "contents"


class Direction(str, Enum):
    ROW = "flex-row"
    COLUMN = "flex-col"
    ROW_REVERSE = "flex-row-reverse"
    COLUMN_REVERSE = "flex-col-reverse"


class Justify(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


class Align(str, Enum):
    START = "start"
    END = "end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class Grow(str, Enum):
    ZERO = "grow-0"
    ONE = "grow"


class GridFlow(str, Enum):
    ROW = "row"
    COL = "col"
    ROW_DENSE = "row-dense"
    COL_DENSE = "col-dense"


class PositionType(str, Enum):
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"


class OverflowType(str, Enum):
    AUTO = "auto"
    HIDDEN = "hidden"
    CLIP = "clip"
    VISIBLE = "visible"
    SCROLL = "scroll"


@dataclass(frozen=True)
class DisplayParameters:
    type: DisplayType

    def __post_init__(self) -> None:
        set_field(self, "type", parse_token(DisplayType, self.type))


class DisplayOperation(StyleOperation[DisplayParameters]):
    name = "display"
    Parameters = DisplayParameters

    def apply_classes(self, params: DisplayParameters) -> list[str]:
        return [params.type.value]


@dataclass(frozen=True)
class FlexParameters:
    direction: Direction | None = None
    justify: Justify | None = None
    align: Align | None = None
    grow: Grow | None = None

    def __post_init__(self) -> None:
        set_field(self, "direction", optional_token(Direction, self.direction))
        set_field(self, "justify", optional_token(Justify, self.justify))
        set_field(self, "align", optional_token(Align, self.align))
        set_field(self, "grow", _grow(self.grow))


def _grow(value: Any) -> Grow | None:
    if value is None or isinstance(value, Grow):
        return value
    if isinstance(value, int):
        return Grow.ONE if value else Grow.ZERO
    return parse_token(Grow, value)


class FlexOperation(StyleOperation[FlexParameters]):
    """Flex container: always ``flex``, then direction, justify, align, grow."""

    name = "flex"
    Parameters = FlexParameters

    def apply_classes(self, params: FlexParameters) -> list[str]:
        classes = ["flex"]
        if params.direction is not None:
            classes.append(params.direction.value)
        if params.justify is not None:
            classes.append(f"justify-{params.justify.value}")
        if params.align is not None:
            classes.append(f"items-{params.align.value}")
        if params.grow is not None:
            classes.append(params.grow.value)
        return classes


@dataclass(frozen=True)
class GridParameters:
    columns: int | None = None
    rows: int | None = None
    flow: GridFlow | None = None
    column_span: int | None = None
    row_span: int | None = None

    def __post_init__(self) -> None:
        set_field(self, "columns", optional_int(self.columns))
        set_field(self, "rows", optional_int(self.rows))
        set_field(self, "flow", optional_token(GridFlow, self.flow))
        set_field(self, "column_span", optional_int(self.column_span))
        set_field(self, "row_span", optional_int(self.row_span))


class GridOperation(StyleOperation[GridParameters]):
    name = "grid"
    Parameters = GridParameters
    aliases = {"cols": "columns", "col_span": "column_span"}

    def apply_classes(self, params: GridParameters) -> list[str]:
        classes = ["grid"]
        if params.columns is not None:
            classes.append(f"grid-cols-{params.columns}")
        if params.rows is not None:
            classes.append(f"grid-rows-{params.rows}")
        if params.flow is not None:
            classes.append(f"grid-flow-{params.flow.value}")
        if params.column_span is not None:
            classes.append(f"col-span-{params.column_span}")
        if params.row_span is not None:
            classes.append(f"row-span-{params.row_span}")
        return classes


@dataclass(frozen=True)
class VisibilityParameters:
    is_hidden: bool = True

    def __post_init__(self) -> None:
        set_field(self, "is_hidden", as_bool(self.is_hidden))


class VisibilityOperation(StyleOperation[VisibilityParameters]):
    name = "visibility"
    Parameters = VisibilityParameters
    aliases = {"hidden": "is_hidden"}

    def apply_classes(self, params: VisibilityParameters) -> list[str]:
        return ["hidden"] if params.is_hidden else []


_INSET_PREFIXES = {
    Edge.ALL: "inset",
    Edge.TOP: "top",
    Edge.LEADING: "left",
    Edge.TRAILING: "right",
    Edge.BOTTOM: "bottom",
    Edge.HORIZONTAL: "inset-x",
    Edge.VERTICAL: "inset-y",
}


@dataclass(frozen=True)
class PositionParameters:
    type: PositionType | None = None
    edges: tuple[Edge, ...] = (Edge.ALL,)
    offset: int | None = None

    def __post_init__(self) -> None:
        set_field(self, "type", optional_token(PositionType, self.type))
        set_field(self, "edges", edge_tuple(self.edges))
        set_field(self, "offset", optional_int(self.offset))


class PositionOperation(StyleOperation[PositionParameters]):
    """Position type plus one inset class per edge.

    Negative offsets follow the spacing sign rule: ``-top-4``.
    """

    name = "position"
    Parameters = PositionParameters
    aliases = {"at": "edges", "edge": "edges", "length": "offset"}

    def apply_classes(self, params: PositionParameters) -> list[str]:
        classes: list[str] = []
        if params.type is not None:
            classes.append(params.type.value)
        if params.offset is not None:
            classes.extend(signed(_INSET_PREFIXES[edge], params.offset) for edge in params.edges)
        return classes


@dataclass(frozen=True)
class ZIndexParameters:
    value: int

    def __post_init__(self) -> None:
        set_field(self, "value", int(self.value))


class ZIndexOperation(StyleOperation[ZIndexParameters]):
    name = "z_index"
    Parameters = ZIndexParameters

    def apply_classes(self, params: ZIndexParameters) -> list[str]:
        return [signed("z", params.value)]


@dataclass(frozen=True)
class OverflowParameters:
    type: OverflowType
    axis: Axis = Axis.BOTH

    def __post_init__(self) -> None:
        set_field(self, "type", parse_token(OverflowType, self.type))
        set_field(self, "axis", parse_token(Axis, self.axis))


class OverflowOperation(StyleOperation[OverflowParameters]):
    name = "overflow"
    Parameters = OverflowParameters

    def apply_classes(self, params: OverflowParameters) -> list[str]:
        return [f"{suffixed('overflow', params.axis.value)}-{params.type.value}"]


# ============================================================================
# Frame sizing
# ============================================================================

SIZING_KEYWORDS = frozenset(
    {
        # constants
        "auto",
        "px",
        "full",
        # viewport units
        "screen",
        "dvw",
        "lvw",
        "svw",
        "dvh",
        "lvh",
        "svh",
        # content sizes
        "min",
        "max",
        "fit",
        # container sizes
        "3xs",
        "2xs",
        "xs",
        "sm",
        "md",
        "lg",
        "xl",
        "2xl",
        "3xl",
        "4xl",
        "5xl",
        "6xl",
        "7xl",
    }
)


@dataclass(frozen=True)
class SizingValue:
    """A width/height token: spacing step, fraction, keyword or arbitrary value.

    Examples:
        >>> SizingValue.spacing(64).token
        '64'
        >>> SizingValue.fraction(1, 2).token
        '1/2'
        >>> SizingValue.character(60).token
        '[60ch]'
    """

    token: str

    @classmethod
    def spacing(cls, value: int) -> SizingValue:
        return cls(str(value))

    @classmethod
    def fraction(cls, numerator: int, denominator: int) -> SizingValue:
        return cls(f"{numerator}/{denominator}")

    @classmethod
    def keyword(cls, name: str) -> SizingValue:
        if name not in SIZING_KEYWORDS:
            raise ValueError(f"Unknown sizing keyword: {name!r}")
        return cls(name)

    @classmethod
    def character(cls, count: int) -> SizingValue:
        return cls(f"[{count}ch]")

    @classmethod
    def custom(cls, raw: str) -> SizingValue:
        return cls(bracketed(raw))

    @classmethod
    def parse(cls, value: Any) -> SizingValue:
        """Coerce ints, fractions, keywords, ``60ch`` and raw CSS lengths."""
        if isinstance(value, SizingValue):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid sizing value: {value!r}")
        if isinstance(value, int):
            return cls.spacing(value)
        text = str(value).strip()
        if text.isdigit():
            return cls(text)
        if re.fullmatch(r"\d+/\d+", text):
            return cls(text)
        if text in SIZING_KEYWORDS:
            return cls(text)
        match = re.fullmatch(r"(\d+)ch", text)
        if match:
            return cls.character(int(match.group(1)))
        if text.startswith("[") and text.endswith("]"):
            return cls(text)
        return cls.custom(text)

    def __str__(self) -> str:
        return self.token


def _optional_sizing(value: Any) -> SizingValue | None:
    return None if value is None else SizingValue.parse(value)


@dataclass(frozen=True)
class FrameParameters:
    width: SizingValue | None = None
    height: SizingValue | None = None
    min_width: SizingValue | None = None
    max_width: SizingValue | None = None
    min_height: SizingValue | None = None
    max_height: SizingValue | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "min_width", "max_width", "min_height", "max_height"):
            set_field(self, name, _optional_sizing(getattr(self, name)))


_FRAME_PREFIXES = (
    ("width", "w"),
    ("height", "h"),
    ("min_width", "min-w"),
    ("max_width", "max-w"),
    ("min_height", "min-h"),
    ("max_height", "max-h"),
)


class FrameOperation(StyleOperation[FrameParameters]):
    name = "frame"
    Parameters = FrameParameters

    def apply_classes(self, params: FrameParameters) -> list[str]:
        classes: list[str] = []
        for field_name, prefix in _FRAME_PREFIXES:
            value = getattr(params, field_name)
            if value is not None:
                classes.append(f"{prefix}-{value.token}")
        return classes
