"""Tests for the modifier vocabulary."""

from __future__ import annotations

import pytest

from classweave.modifiers import Modifier, ModifierKind, as_modifier, as_modifiers


class TestModifierPrefix:
    """Test prefix serialization."""

    @pytest.mark.parametrize(
        ("modifier", "prefix"),
        [
            (Modifier.HOVER, "hover:"),
            (Modifier.MD, "md:"),
            (Modifier.XL2, "2xl:"),
            (Modifier.MOTION_REDUCE, "motion-reduce:"),
            (Modifier.ARIA_REQUIRED, "aria-required:"),
        ],
    )
    def test_builtin_prefix(self, modifier: Modifier, prefix: str) -> None:
        """Built-in modifiers serialize to their framework prefix."""
        assert modifier.prefix == prefix

    def test_custom_prefix(self) -> None:
        """Custom modifiers keep their name and gain a colon."""
        assert Modifier.custom("group-hover").prefix == "group-hover:"

    def test_custom_tolerates_trailing_colon(self) -> None:
        """A trailing colon does not produce a double colon."""
        assert Modifier.custom("peer-focus:") == Modifier.custom("peer-focus")

    @pytest.mark.parametrize("name", ["", "   ", ":"])
    def test_custom_rejects_empty_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            Modifier.custom(name)

    def test_custom_rejects_whitespace(self) -> None:
        with pytest.raises(ValueError, match="cannot contain whitespace"):
            Modifier.custom("group hover")


class TestModifierFamilies:
    """Test breakpoint/state partitioning and ordering."""

    def test_kinds(self) -> None:
        assert Modifier.SM.kind is ModifierKind.BREAKPOINT
        assert Modifier.HOVER.kind is ModifierKind.STATE
        assert Modifier.custom("x").kind is ModifierKind.CUSTOM

    def test_breakpoint_ladder_is_ascending(self) -> None:
        """breakpoints() returns the ladder narrowest first."""
        names = [m.name for m in Modifier.breakpoints()]
        assert names == ["xs", "sm", "md", "lg", "xl", "2xl"]

    def test_breakpoints_are_ordered(self) -> None:
        assert Modifier.SM < Modifier.MD < Modifier.LG
        assert max(Modifier.XS, Modifier.XL2) == Modifier.XL2

    def test_states_cannot_be_ordered(self) -> None:
        """Ordering only means something for breakpoints."""
        with pytest.raises(TypeError):
            _ = Modifier.HOVER < Modifier.FOCUS

    def test_states_include_aria(self) -> None:
        states = Modifier.states()
        assert Modifier.ARIA_SELECTED in states
        assert Modifier.MD not in states

    def test_equality_is_by_value(self) -> None:
        assert Modifier.parse("hover") == Modifier.HOVER
        assert Modifier.custom("hover") != Modifier.HOVER


class TestModifierParse:
    """Test textual modifier resolution."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("md", Modifier.MD),
            ("2xl", Modifier.XL2),
            ("xl2", Modifier.XL2),
            ("HOVER", Modifier.HOVER),
            ("aria_required", Modifier.ARIA_REQUIRED),
            ("motion-reduce:", Modifier.MOTION_REDUCE),
        ],
    )
    def test_parse_builtin(self, text: str, expected: Modifier) -> None:
        assert Modifier.parse(text) == expected

    def test_parse_unknown_is_custom(self) -> None:
        modifier = Modifier.parse("group-hover")
        assert modifier.is_custom
        assert modifier.prefix == "group-hover:"

    def test_parse_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            Modifier.parse("  ")

    def test_as_modifiers_accepts_single_and_sequences(self) -> None:
        assert as_modifiers(None) == ()
        assert as_modifiers("hover") == (Modifier.HOVER,)
        assert as_modifiers(Modifier.MD) == (Modifier.MD,)
        assert as_modifiers(["md", Modifier.FOCUS]) == (Modifier.MD, Modifier.FOCUS)

    def test_as_modifier_passthrough(self) -> None:
        assert as_modifier(Modifier.DARK) is Modifier.DARK
