"""Concern methods shared by both authoring surfaces.

``Node`` (direct chaining) and ``ResponsiveBuilder`` (declarative blocks)
inherit the same method per built-in concern from ``ConcernMethods``, so the
two surfaces cannot drift apart: each method only assembles the concern's
typed parameters and hands the resulting classes to the surface, which
decides how to scope them.

Every method takes ``on=`` (a modifier, a modifier name or a sequence of
either). The direct surface combines with those modifiers using the
concern's own strategy; the builder treats them as an inline nested scope.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, Union

from .combine import CombineStrategy
from .logger import get_logger
from .modifiers import Modifier, ModifierSpec, as_modifiers
from .operations import (
    Align,
    AnimationDirection,
    BorderStyle,
    CursorType,
    DecorationStyle,
    Direction,
    DisplayType,
    Easing,
    FillMode,
    FontSize,
    FontWeight,
    GridFlow,
    Grow,
    Justify,
    Leading,
    OverflowType,
    PlayState,
    PositionType,
    RadiusSide,
    RadiusSize,
    ScaleOrigin,
    ScrollBehavior,
    ShadowSize,
    SizingValue,
    SlideDirection,
    SnapAlign,
    SnapStop,
    SnapType,
    StyleOperation,
    TextAlignment,
    TextDecoration,
    TextWrap,
    Tracking,
    TransitionBehavior,
    TransitionProperty,
    TransitionTiming,
    TransitionType,
)
from .parameters import StyleParameters
from .tokens import Axis, Color, Edge

if TYPE_CHECKING:
    from .registry import StyleRegistry

_S = TypeVar("_S", bound="ConcernMethods")

ModifiersArg = Union[ModifierSpec, Iterable[ModifierSpec], None]
EdgesArg = Union[Edge, str, Sequence[Union[Edge, str]]]
ColorArg = Union[Color, str]
SizingArg = Union[SizingValue, int, str, None]
PairArg = Union[int, Sequence[int], dict, None]


class ConcernMethods:
    """Mixin providing one method per built-in concern.

    Subclasses implement ``_style_registry`` and ``_add_styled`` (receives the
    unscoped classes, the explicit modifiers and the concern's combine
    strategy).
    """

    __slots__ = ()

    def _style_registry(self) -> StyleRegistry:
        raise NotImplementedError

    def _add_styled(
        self: _S, classes: list[str], modifiers: tuple[Modifier, ...], strategy: CombineStrategy
    ) -> _S:
        raise NotImplementedError

    def _concern(self: _S, concern: str, on: ModifiersArg, /, **fields: Any) -> _S:
        operation = self._style_registry().get(concern)
        classes = operation.apply_classes(operation.Parameters(**fields))
        return self._emit(operation, classes, on)

    def _emit(self: _S, operation: StyleOperation[Any], classes: list[str], on: ModifiersArg) -> _S:
        modifiers = as_modifiers(on)
        get_logger().classes(operation.name, [m.name for m in modifiers], classes)
        return self._add_styled(classes, modifiers, operation.strategy)

    def style(self: _S, concern: str, /, *, on: ModifiersArg = (), **params: Any) -> _S:
        """Apply any registered concern by name, including third-party ones.

        Parameters go through the operation's untyped adapter, so aliases and
        string tokens are accepted (``style("padding", of=2, at="top")``).
        """
        operation = self._style_registry().get(concern)
        return self._emit(operation, operation.classes_from(StyleParameters.from_mapping(params)), on)

    # ------------------------------------------------------------------
    # Spacing
    # ------------------------------------------------------------------

    def padding(self: _S, of: int | None = 4, *, at: EdgesArg = (), on: ModifiersArg = ()) -> _S:
        """Padding of ``of`` spacing units on the edges in ``at`` (all by default)."""
        return self._concern("padding", on, length=of, edges=at)

    def margins(
        self: _S,
        of: int | None = 4,
        *,
        at: EdgesArg = (),
        auto: bool = False,
        on: ModifiersArg = (),
    ) -> _S:
        """Margins; negative lengths give ``-m*`` classes, ``auto`` gives ``m*-auto``."""
        return self._concern("margins", on, length=of, edges=at, auto=auto)

    def spacing(self: _S, of: int | None = 4, *, along: Axis | str = Axis.BOTH, on: ModifiersArg = ()) -> _S:
        return self._concern("spacing", on, length=of, axis=along)

    # ------------------------------------------------------------------
    # Appearance
    # ------------------------------------------------------------------

    def background(self: _S, color: ColorArg, *, on: ModifiersArg = ()) -> _S:
        return self._concern("background", on, color=color)

    def opacity(self: _S, value: int, *, on: ModifiersArg = ()) -> _S:
        return self._concern("opacity", on, value=value)

    def shadow(
        self: _S, size: ShadowSize | str | None = None, *, color: ColorArg | None = None, on: ModifiersArg = ()
    ) -> _S:
        return self._concern("shadow", on, size=size, color=color)

    def ring(self: _S, size: int | None = 1, *, color: ColorArg | None = None, on: ModifiersArg = ()) -> _S:
        return self._concern("ring", on, size=size, color=color)

    def cursor(self: _S, type: CursorType | str, *, on: ModifiersArg = ()) -> _S:  # noqa: A002
        return self._concern("cursor", on, type=type)

    # ------------------------------------------------------------------
    # Borders
    # ------------------------------------------------------------------

    def border(
        self: _S,
        of: int | None = 1,
        *,
        at: EdgesArg = (),
        style: BorderStyle | str | None = None,
        color: ColorArg | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern("border", on, width=of, edges=at, style=style, color=color)

    def rounded(
        self: _S,
        size: RadiusSize | str | None = RadiusSize.MD,
        *,
        at: RadiusSide | str | Sequence[RadiusSide | str] = (),
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern("border_radius", on, size=size, sides=at)

    def outline(
        self: _S,
        *,
        width: int | None = None,
        style: BorderStyle | str | None = None,
        color: ColorArg | None = None,
        offset: int | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern("outline", on, width=width, style=style, color=color, offset=offset)

    # ------------------------------------------------------------------
    # Typography
    # ------------------------------------------------------------------

    def font(  # noqa: PLR0913 - one argument per independent font class
        self: _S,
        *,
        size: FontSize | str | None = None,
        weight: FontWeight | str | None = None,
        alignment: TextAlignment | str | None = None,
        tracking: Tracking | str | None = None,
        leading: Leading | str | None = None,
        decoration: TextDecoration | str | None = None,
        decoration_style: DecorationStyle | str | None = None,
        wrap: TextWrap | str | None = None,
        color: ColorArg | None = None,
        family: str | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern(
            "font",
            on,
            size=size,
            weight=weight,
            alignment=alignment,
            tracking=tracking,
            leading=leading,
            decoration=decoration,
            decoration_style=decoration_style,
            wrap=wrap,
            color=color,
            family=family,
        )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def display(self: _S, type: DisplayType | str, *, on: ModifiersArg = ()) -> _S:  # noqa: A002
        return self._concern("display", on, type=type)

    def flex(
        self: _S,
        *,
        direction: Direction | str | None = None,
        justify: Justify | str | None = None,
        align: Align | str | None = None,
        grow: Grow | int | str | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern("flex", on, direction=direction, justify=justify, align=align, grow=grow)

    def grid(
        self: _S,
        *,
        columns: int | None = None,
        rows: int | None = None,
        flow: GridFlow | str | None = None,
        column_span: int | None = None,
        row_span: int | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern(
            "grid", on, columns=columns, rows=rows, flow=flow, column_span=column_span, row_span=row_span
        )

    def hidden(self: _S, is_hidden: bool = True, *, on: ModifiersArg = ()) -> _S:
        return self._concern("visibility", on, is_hidden=is_hidden)

    def position(
        self: _S,
        type: PositionType | str | None = None,  # noqa: A002
        *,
        at: EdgesArg = (),
        offset: int | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern("position", on, type=type, edges=at, offset=offset)

    def z_index(self: _S, value: int, *, on: ModifiersArg = ()) -> _S:
        return self._concern("z_index", on, value=value)

    def overflow(
        self: _S, type: OverflowType | str, *, axis: Axis | str = Axis.BOTH, on: ModifiersArg = ()  # noqa: A002
    ) -> _S:
        return self._concern("overflow", on, type=type, axis=axis)

    def frame(
        self: _S,
        *,
        width: SizingArg = None,
        height: SizingArg = None,
        min_width: SizingArg = None,
        max_width: SizingArg = None,
        min_height: SizingArg = None,
        max_height: SizingArg = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern(
            "frame",
            on,
            width=width,
            height=height,
            min_width=min_width,
            max_width=max_width,
            min_height=min_height,
            max_height=max_height,
        )

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------

    def transform(
        self: _S,
        *,
        scale: PairArg = None,
        rotate: int | None = None,
        translate: PairArg = None,
        skew: PairArg = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern("transform", on, scale=scale, rotate=rotate, translate=translate, skew=skew)

    def transition(
        self: _S,
        property: TransitionProperty | str = TransitionProperty.DEFAULT,  # noqa: A002
        *,
        duration: int | None = None,
        easing: Easing | str | None = None,
        delay: int | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern(
            "transition", on, property=property, duration=duration, easing=easing, delay=delay
        )

    def animate(  # noqa: PLR0913 - mirrors the CSS animation longhands
        self: _S,
        name: str,
        *,
        duration: int | None = None,
        timing: str | None = None,
        delay: int | None = None,
        iteration_count: int | str | None = None,
        direction: AnimationDirection | str | None = None,
        fill_mode: FillMode | str | None = None,
        play_state: PlayState | str | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        """Named animation; durations and delays are milliseconds.

        Any name is accepted; names outside the built-in set refer to custom
        keyframes (``animate("spin-slow", duration=1500)``).
        """
        return self._concern(
            "animation",
            on,
            name=name,
            duration=duration,
            timing=timing,
            delay=delay,
            iteration_count=iteration_count,
            direction=direction,
            fill_mode=fill_mode,
            play_state=play_state,
        )

    def scroll(  # noqa: PLR0913
        self: _S,
        *,
        behavior: ScrollBehavior | str | None = None,
        margin: int | None = None,
        margin_edges: EdgesArg = (),
        padding: int | None = None,
        padding_edges: EdgesArg = (),
        snap_align: SnapAlign | str | None = None,
        snap_stop: SnapStop | str | None = None,
        snap_type: SnapType | str | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        return self._concern(
            "scroll",
            on,
            behavior=behavior,
            margin=margin,
            margin_edges=margin_edges,
            padding=padding,
            padding_edges=padding_edges,
            snap_align=snap_align,
            snap_stop=snap_stop,
            snap_type=snap_type,
        )

    def view_transition(  # noqa: PLR0913
        self: _S,
        name: str | None = None,
        *,
        type: TransitionType | str | None = None,  # noqa: A002
        slide_direction: SlideDirection | str | None = None,
        scale_origin: ScaleOrigin | str | None = None,
        timing: TransitionTiming | str | None = None,
        duration: int | None = None,
        delay: int | None = None,
        behavior: TransitionBehavior | str | None = None,
        on: ModifiersArg = (),
    ) -> _S:
        """View-transition hints. Under modifiers there is no unscoped copy."""
        return self._concern(
            "view_transition",
            on,
            name=name,
            type=type,
            slide_direction=slide_direction,
            scale_origin=scale_origin,
            timing=timing,
            duration=duration,
            delay=delay,
            behavior=behavior,
        )


__all__ = ["ConcernMethods", "ModifiersArg"]
