"""Example style extensions for classweave pages.

Registers a ``card`` concern on the default registry. Pages next to
``classweave.yaml`` pick it up automatically; elsewhere pass the file
explicitly:

Usage:
    classweave render examples/landing.yaml
    classweave classes card -p elevation=lg --style-file examples/site_styles.py
"""

from __future__ import annotations

from dataclasses import dataclass

from classweave import register_style
from classweave.operations import ShadowSize, StyleOperation
from classweave.operations.base import optional_int, optional_token, set_field


@dataclass(frozen=True)
class CardParameters:
    elevation: ShadowSize | None = ShadowSize.MD
    padding: int | None = 6

    def __post_init__(self) -> None:
        set_field(self, "elevation", optional_token(ShadowSize, self.elevation))
        set_field(self, "padding", optional_int(self.padding))


@register_style("card")
class CardOperation(StyleOperation[CardParameters]):
    """Surface card: rounded corners, white background, shadow and padding."""

    name = "card"
    Parameters = CardParameters
    aliases = {"shadow": "elevation"}

    def apply_classes(self, params: CardParameters) -> list[str]:
        classes = ["rounded-lg", "bg-white"]
        if params.elevation is not None:
            classes.append(f"shadow-{params.elevation.value}")
        if params.padding is not None:
            classes.append(f"p-{params.padding}")
        return classes
