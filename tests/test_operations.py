"""Tests for the built-in style operations."""

from __future__ import annotations

from typing import Any

import pytest

from classweave.combine import CombineStrategy
from classweave.operations import (
    BorderRadiusOperation,
    PaddingOperation,
    SizingValue,
    TransitionTiming,
)
from classweave.operations.border import BorderOperation, BorderParameters, BorderRadiusParameters
from classweave.operations.spacing import PaddingParameters
from classweave.parameters import StyleParameters
from classweave.registry import StyleRegistry
from classweave.tokens import Color, Edge


def classes(registry: StyleRegistry, concern: str, **params: Any) -> list[str]:
    operation = registry.get(concern)
    return operation.apply_classes(operation.build(**params))


class TestSpacing:
    """Test padding, margins and child spacing."""

    def test_padding_default(self, registry: StyleRegistry) -> None:
        assert classes(registry, "padding") == ["p-4"]

    def test_padding_on_top(self, registry: StyleRegistry) -> None:
        assert classes(registry, "padding", length=4, edges=["top"]) == ["pt-4"]

    def test_padding_aliases(self, registry: StyleRegistry) -> None:
        assert classes(registry, "padding", of=2, at=["horizontal", "vertical"]) == ["px-2", "py-2"]

    def test_all_edge_equals_omitted_edges(self) -> None:
        """Explicitly selecting all edges is the same as selecting none."""
        op = PaddingOperation()
        explicit = op.apply_classes(PaddingParameters(length=4, edges=(Edge.ALL,)))
        omitted = op.apply_classes(PaddingParameters(length=4, edges=()))
        assert explicit == omitted == ["p-4"]

    def test_padding_without_length_is_empty(self) -> None:
        assert PaddingOperation().apply_classes(PaddingParameters(length=None)) == []

    def test_negative_margin(self, registry: StyleRegistry) -> None:
        assert classes(registry, "margins", length=-4, edges="top") == ["-mt-4"]

    def test_auto_margin(self, registry: StyleRegistry) -> None:
        assert classes(registry, "margins", auto=True, edges="horizontal") == ["mx-auto"]

    def test_spacing_both_axes(self, registry: StyleRegistry) -> None:
        assert classes(registry, "spacing", length=2) == ["space-x-2", "space-y-2"]

    def test_spacing_negative_single_axis(self, registry: StyleRegistry) -> None:
        assert classes(registry, "spacing", length=-2, axis="x") == ["-space-x-2"]


class TestAppearance:
    """Test background, opacity, shadow, ring and cursor."""

    def test_background(self, registry: StyleRegistry) -> None:
        assert classes(registry, "background", color="blue-500") == ["bg-blue-500"]

    def test_background_with_color_object(self, registry: StyleRegistry) -> None:
        assert classes(registry, "background", color=Color.black(opacity=0.5)) == ["bg-black/50"]

    def test_background_with_spaced_custom_color(self, registry: StyleRegistry) -> None:
        assert classes(registry, "background", color=Color.custom("rgb(0 0 0)")) == ["bg-[rgb(0_0_0)]"]
        assert classes(registry, "background", color="rgb(12 34 56)") == ["bg-[rgb(12_34_56)]"]

    def test_background_requires_color(self, registry: StyleRegistry) -> None:
        with pytest.raises(TypeError):
            classes(registry, "background")

    def test_opacity(self, registry: StyleRegistry) -> None:
        assert classes(registry, "opacity", value=80) == ["opacity-80"]

    def test_shadow_defaults_to_md(self, registry: StyleRegistry) -> None:
        assert classes(registry, "shadow") == ["shadow-md"]

    def test_shadow_size_and_color_are_independent(self, registry: StyleRegistry) -> None:
        assert classes(registry, "shadow", size="lg", color="black/25") == ["shadow-lg", "shadow-black/25"]

    def test_ring(self, registry: StyleRegistry) -> None:
        assert classes(registry, "ring") == ["ring-1"]
        assert classes(registry, "ring", width=2, color="blue-500") == ["ring-2", "ring-blue-500"]

    def test_cursor(self, registry: StyleRegistry) -> None:
        assert classes(registry, "cursor", type="not-allowed") == ["cursor-not-allowed"]


class TestBorders:
    """Test border, border radius and outline."""

    def test_border_default(self, registry: StyleRegistry) -> None:
        assert classes(registry, "border") == ["border-1"]

    def test_border_edges_style_color(self, registry: StyleRegistry) -> None:
        result = classes(
            registry, "border", width=2, edges=["top", "bottom"], style="dashed", color="gray-200"
        )
        assert result == ["border-t-2", "border-b-2", "border-dashed", "border-gray-200"]

    def test_border_without_width(self) -> None:
        assert BorderOperation().apply_classes(BorderParameters(width=None)) == ["border"]

    def test_divide(self, registry: StyleRegistry) -> None:
        assert classes(registry, "border", width=2, edges="horizontal", style="divide") == ["divide-x-2"]
        assert classes(registry, "border", width=1, style="divide") == ["divide-y-1"]

    def test_radius(self, registry: StyleRegistry) -> None:
        assert classes(registry, "border_radius") == ["rounded-md"]
        assert classes(registry, "border_radius", size="full", at="top_left") == ["rounded-tl-full"]
        assert classes(registry, "border_radius", size="2xl") == ["rounded-2xl"]

    def test_radius_without_size(self) -> None:
        op = BorderRadiusOperation()
        assert op.apply_classes(BorderRadiusParameters(size=None)) == ["rounded"]

    def test_outline(self, registry: StyleRegistry) -> None:
        assert classes(registry, "outline") == ["outline"]
        assert classes(registry, "outline", width=2, style="dashed", color="blue-500", offset=2) == [
            "outline-2",
            "outline-dashed",
            "outline-blue-500",
            "outline-offset-2",
        ]


class TestLayout:
    """Test display, flex, grid, visibility, position, z-index, overflow, frame."""

    def test_display(self, registry: StyleRegistry) -> None:
        assert classes(registry, "display", type="none") == ["hidden"]
        assert classes(registry, "display", type="inline-flex") == ["inline-flex"]

    def test_flex(self, registry: StyleRegistry) -> None:
        assert classes(registry, "flex") == ["flex"]
        assert classes(
            registry, "flex", direction="column", justify="between", align="center", grow=1
        ) == ["flex", "flex-col", "justify-between", "items-center", "grow"]
        assert classes(registry, "flex", grow=0) == ["flex", "grow-0"]

    def test_grid(self, registry: StyleRegistry) -> None:
        assert classes(registry, "grid", columns=3, flow="row-dense", col_span=2) == [
            "grid",
            "grid-cols-3",
            "grid-flow-row-dense",
            "col-span-2",
        ]

    def test_visibility(self, registry: StyleRegistry) -> None:
        assert classes(registry, "visibility") == ["hidden"]
        assert classes(registry, "visibility", hidden=False) == []

    def test_position_with_insets(self, registry: StyleRegistry) -> None:
        assert classes(registry, "position", type="absolute", at=["top", "leading"], offset=0) == [
            "absolute",
            "top-0",
            "left-0",
        ]

    def test_position_inset_sign_rules(self, registry: StyleRegistry) -> None:
        assert classes(registry, "position", offset=4) == ["inset-4"]
        assert classes(registry, "position", edges="top", offset=-4) == ["-top-4"]
        assert classes(registry, "position", edges="horizontal", offset=2) == ["inset-x-2"]

    def test_z_index(self, registry: StyleRegistry) -> None:
        assert classes(registry, "z_index", value=10) == ["z-10"]
        assert classes(registry, "z_index", value=-5) == ["-z-5"]

    def test_overflow(self, registry: StyleRegistry) -> None:
        assert classes(registry, "overflow", type="hidden") == ["overflow-hidden"]
        assert classes(registry, "overflow", type="auto", axis="x") == ["overflow-x-auto"]

    def test_frame(self, registry: StyleRegistry) -> None:
        result = classes(registry, "frame", width="full", height="screen", max_width="2xl", min_height=0)
        assert result == ["w-full", "h-screen", "max-w-2xl", "min-h-0"]

    @pytest.mark.parametrize(
        ("value", "token"),
        [
            (64, "64"),
            ("1/2", "1/2"),
            ("fit", "fit"),
            ("60ch", "[60ch]"),
            ("50%", "[50%]"),
            ("calc(100% - 2rem)", "[calc(100%_-_2rem)]"),
        ],
    )
    def test_sizing_values(self, value: Any, token: str) -> None:
        assert SizingValue.parse(value).token == token


class TestTypography:
    """Test the font concern."""

    def test_font_basics(self, registry: StyleRegistry) -> None:
        assert classes(registry, "font", size="lg", weight="bold", alignment="center", color="gray-700") == [
            "text-lg",
            "font-bold",
            "text-center",
            "text-gray-700",
        ]

    def test_large_sizes(self, registry: StyleRegistry) -> None:
        assert classes(registry, "font", size="xl2") == ["text-2xl"]
        assert classes(registry, "font", size="9xl") == ["text-9xl"]

    def test_decoration_tracking_wrap(self, registry: StyleRegistry) -> None:
        assert classes(
            registry, "font", tracking="wide", leading="relaxed", decoration="line-through", wrap="balance"
        ) == ["tracking-wide", "leading-relaxed", "line-through", "text-balance"]

    def test_family(self, registry: StyleRegistry) -> None:
        assert classes(registry, "font", family="mono") == ["font-mono"]
        assert classes(registry, "font", family="Inter Var") == ["font-[Inter_Var]"]

    def test_empty_font_is_empty(self, registry: StyleRegistry) -> None:
        assert classes(registry, "font") == []


class TestMotion:
    """Test transform, transition and animation."""

    def test_transform(self, registry: StyleRegistry) -> None:
        assert classes(registry, "transform", scale=110, rotate=-45) == [
            "transform",
            "scale-x-110",
            "scale-y-110",
            "-rotate-45",
        ]

    def test_transform_pairs(self, registry: StyleRegistry) -> None:
        assert classes(registry, "transform", translate={"x": 4}) == ["transform", "translate-x-4"]
        assert classes(registry, "transform", skew=[3, -6]) == ["transform", "skew-x-3", "-skew-y-6"]

    def test_transition(self, registry: StyleRegistry) -> None:
        assert classes(registry, "transition") == ["transition"]
        assert classes(
            registry, "transition", property="colors", duration=300, easing="ease-in-out", delay=100
        ) == ["transition-colors", "duration-300", "ease-in-out", "delay-100"]

    def test_custom_animation_escape(self, registry: StyleRegistry) -> None:
        """Values without a canonical utility use bracket syntax."""
        result = classes(registry, "animation", name="spin-slow", duration=1500)
        assert "animate-spin-slow" in result
        assert "[animation-duration:1500ms]" in result

    def test_escape_has_no_whitespace(self, registry: StyleRegistry) -> None:
        result = classes(registry, "animation", name="wobble", timing="steps(4,\tend)\n")
        assert result == ["animate-wobble", "[animation-timing-function:steps(4,_end)]"]

    def test_full_animation(self, registry: StyleRegistry) -> None:
        result = classes(
            registry,
            "animation",
            name="fade-in",
            duration=500,
            timing="cubic-bezier(0.4, 0, 0.2, 1)",
            delay=100,
            iteration_count="infinite",
            direction="alternate",
            fill_mode="forwards",
            play_state="paused",
        )
        assert result == [
            "animate-fade-in",
            "[animation-duration:500ms]",
            "[animation-timing-function:cubic-bezier(0.4,_0,_0.2,_1)]",
            "[animation-delay:100ms]",
            "[animation-iteration-count:infinite]",
            "[animation-direction:alternate]",
            "[animation-fill-mode:forwards]",
            "[animation-play-state:paused]",
        ]
        assert not any(" " in c for c in result)

    def test_camel_case_parameter_names(self, registry: StyleRegistry) -> None:
        op = registry.get("animation")
        bag = StyleParameters.from_mapping({"name": "bounce", "iterationCount": 3})
        assert op.classes_from(bag) == ["animate-bounce", "[animation-iteration-count:3]"]


class TestScroll:
    """Test the scroll concern."""

    def test_scroll(self, registry: StyleRegistry) -> None:
        result = classes(
            registry,
            "scroll",
            behavior="smooth",
            margin=4,
            margin_edges="top",
            padding=2,
            padding_edges=["leading", "trailing"],
            snap_align="start",
            snap_stop="always",
            snap_type="mandatory",
        )
        assert result == [
            "scroll-smooth",
            "scroll-mt-4",
            "scroll-ps-2",
            "scroll-pe-2",
            "snap-start",
            "snap-always",
            "snap-mandatory",
        ]

    def test_negative_scroll_margin(self, registry: StyleRegistry) -> None:
        assert classes(registry, "scroll", margin=-2) == ["-scroll-m-2"]


class TestViewTransition:
    """Test the view transition concern."""

    def test_uses_separate_strategy(self, registry: StyleRegistry) -> None:
        assert registry.get("view_transition").strategy is CombineStrategy.SEPARATE

    def test_slide(self, registry: StyleRegistry) -> None:
        result = classes(
            registry, "view_transition", name="hero", type="slide", direction="left", timing="back-out", duration=300
        )
        assert result == [
            "view-transition-name-hero",
            "view-transition-slide",
            "view-transition-slide-left",
            "view-transition-timing-back-out",
            "view-transition-duration-300",
        ]

    def test_direction_only_applies_to_slide(self, registry: StyleRegistry) -> None:
        assert classes(registry, "view_transition", type="fade", direction="left") == ["view-transition-fade"]

    def test_origin_applies_to_scale_types(self, registry: StyleRegistry) -> None:
        assert classes(registry, "view_transition", type="scale-up", origin="top-left") == [
            "view-transition-scale-up",
            "view-transition-origin-top-left",
        ]

    def test_timing_curve(self) -> None:
        assert TransitionTiming.BACK_OUT.curve == "cubic-bezier(0.34, 1.56, 0.64, 1)"
        assert TransitionTiming.LINEAR.curve == "linear"


class TestParameterAdapter:
    """Test the untyped parameter adapter shared by every operation."""

    def test_unknown_parameter_raises(self, registry: StyleRegistry) -> None:
        with pytest.raises(ValueError, match="Unknown parameter 'colour' for 'background'"):
            classes(registry, "background", colour="blue-500")

    def test_invalid_token_raises(self, registry: StyleRegistry) -> None:
        with pytest.raises(ValueError, match="Invalid"):
            classes(registry, "padding", edges=["diagonal"])

    @pytest.mark.parametrize(
        "concern",
        ["padding", "margins", "spacing", "border", "border_radius", "shadow", "ring", "flex", "grid"],
    )
    def test_default_parameters_are_deterministic(self, registry: StyleRegistry, concern: str) -> None:
        """Identical parameters always give identical output."""
        assert classes(registry, concern) == classes(registry, concern)
