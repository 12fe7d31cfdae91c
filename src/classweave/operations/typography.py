"""Typography: the font concern."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..tokens import Color, bracketed
from .base import StyleOperation, optional_color, optional_token, set_field


class FontSize(str, Enum):
    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"
    XL5 = "5xl"
    XL6 = "6xl"
    XL7 = "7xl"
    XL8 = "8xl"
    XL9 = "9xl"


class FontWeight(str, Enum):
    THIN = "thin"
    EXTRA_LIGHT = "extralight"
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRA_BOLD = "extrabold"
    BLACK = "black"


class TextAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class Tracking(str, Enum):
    TIGHTER = "tighter"
    TIGHT = "tight"
    NORMAL = "normal"
    WIDE = "wide"
    WIDER = "wider"
    WIDEST = "widest"


class Leading(str, Enum):
    NONE = "none"
    TIGHT = "tight"
    SNUG = "snug"
    NORMAL = "normal"
    RELAXED = "relaxed"
    LOOSE = "loose"


class TextDecoration(str, Enum):
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"
    NONE = "no-underline"


class DecorationStyle(str, Enum):
    SOLID = "solid"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"


class TextWrap(str, Enum):
    WRAP = "wrap"
    NOWRAP = "nowrap"
    BALANCE = "balance"
    PRETTY = "pretty"


FONT_FAMILIES = ("sans", "serif", "mono")


@dataclass(frozen=True)
class FontParameters:
    size: FontSize | None = None
    weight: FontWeight | None = None
    alignment: TextAlignment | None = None
    tracking: Tracking | None = None
    leading: Leading | None = None
    decoration: TextDecoration | None = None
    decoration_style: DecorationStyle | None = None
    wrap: TextWrap | None = None
    color: Color | None = None
    family: str | None = None

    def __post_init__(self) -> None:
        set_field(self, "size", optional_token(FontSize, self.size))
        set_field(self, "weight", optional_token(FontWeight, self.weight))
        set_field(self, "alignment", optional_token(TextAlignment, self.alignment))
        set_field(self, "tracking", optional_token(Tracking, self.tracking))
        set_field(self, "leading", optional_token(Leading, self.leading))
        set_field(self, "decoration", optional_token(TextDecoration, self.decoration))
        set_field(self, "decoration_style", optional_token(DecorationStyle, self.decoration_style))
        set_field(self, "wrap", optional_token(TextWrap, self.wrap))
        set_field(self, "color", optional_color(self.color))


class FontOperation(StyleOperation[FontParameters]):
    """Text size, weight, alignment, spacing, decoration, wrapping, color
    and family, each an independent class in that order.

    Families other than ``sans``/``serif``/``mono`` are emitted as arbitrary
    values: ``font-[Inter]``.
    """

    name = "font"
    Parameters = FontParameters
    aliases = {"align": "alignment", "line_height": "leading", "letter_spacing": "tracking"}

    def apply_classes(self, params: FontParameters) -> list[str]:
        classes: list[str] = []
        if params.size is not None:
            classes.append(f"text-{params.size.value}")
        if params.weight is not None:
            classes.append(f"font-{params.weight.value}")
        if params.alignment is not None:
            classes.append(f"text-{params.alignment.value}")
        if params.tracking is not None:
            classes.append(f"tracking-{params.tracking.value}")
        if params.leading is not None:
            classes.append(f"leading-{params.leading.value}")
        if params.decoration is not None:
            classes.append(params.decoration.value)
        if params.decoration_style is not None:
            classes.append(f"decoration-{params.decoration_style.value}")
        if params.wrap is not None:
            classes.append(f"text-{params.wrap.value}")
        if params.color is not None:
            classes.append(f"text-{params.color.value}")
        if params.family:
            if params.family in FONT_FAMILIES:
                classes.append(f"font-{params.family}")
            else:
                classes.append(f"font-{bracketed(params.family)}")
        return classes
