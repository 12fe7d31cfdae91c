"""Spacing concerns: padding, margins and child spacing."""

from __future__ import annotations

from dataclasses import dataclass

from ..tokens import Axis, Edge, parse_token, signed
from .base import StyleOperation, as_bool, edge_tuple, optional_int, set_field


def edge_prefix(prefix: str, edge: Edge) -> str:
    """``p`` + ``t`` -> ``pt``; the all-edges selection keeps the bare prefix."""
    return f"{prefix}{edge.value}"


@dataclass(frozen=True)
class PaddingParameters:
    length: int | None = 4
    edges: tuple[Edge, ...] = (Edge.ALL,)

    def __post_init__(self) -> None:
        set_field(self, "length", optional_int(self.length))
        set_field(self, "edges", edge_tuple(self.edges))


class PaddingOperation(StyleOperation[PaddingParameters]):
    """Padding on one or more edges: ``p-4``, ``pt-2``, ``px-6``."""

    name = "padding"
    Parameters = PaddingParameters
    aliases = {"of": "length", "at": "edges", "edge": "edges"}

    def apply_classes(self, params: PaddingParameters) -> list[str]:
        if params.length is None:
            return []
        return [f"{edge_prefix('p', edge)}-{params.length}" for edge in params.edges]


@dataclass(frozen=True)
class MarginsParameters:
    length: int | None = 4
    edges: tuple[Edge, ...] = (Edge.ALL,)
    auto: bool = False

    def __post_init__(self) -> None:
        set_field(self, "length", optional_int(self.length))
        set_field(self, "edges", edge_tuple(self.edges))
        set_field(self, "auto", as_bool(self.auto))


class MarginsOperation(StyleOperation[MarginsParameters]):
    """Margins on one or more edges.

    Negative lengths keep the edge suffix and gain a leading ``-``
    (``-mt-4``); ``auto`` takes precedence over the length (``mx-auto``).
    """

    name = "margins"
    Parameters = MarginsParameters
    aliases = {"of": "length", "at": "edges", "edge": "edges"}

    def apply_classes(self, params: MarginsParameters) -> list[str]:
        classes: list[str] = []
        for edge in params.edges:
            prefix = edge_prefix("m", edge)
            if params.auto:
                classes.append(f"{prefix}-auto")
            elif params.length is not None:
                classes.append(signed(prefix, params.length))
        return classes


@dataclass(frozen=True)
class SpacingParameters:
    length: int | None = 4
    axis: Axis = Axis.BOTH

    def __post_init__(self) -> None:
        set_field(self, "length", optional_int(self.length))
        set_field(self, "axis", parse_token(Axis, self.axis))


class SpacingOperation(StyleOperation[SpacingParameters]):
    """Space between children along an axis: ``space-x-4``, ``space-y-4``."""

    name = "spacing"
    Parameters = SpacingParameters
    aliases = {"of": "length", "along": "axis", "direction": "axis"}

    def apply_classes(self, params: SpacingParameters) -> list[str]:
        if params.length is None:
            return []
        axes = (Axis.HORIZONTAL, Axis.VERTICAL) if params.axis is Axis.BOTH else (params.axis,)
        return [signed(f"space-{axis.value}", params.length) for axis in axes]
