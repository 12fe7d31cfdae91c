"""Tests for the concern registry and style extension loading."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

from classweave.exceptions import RegistrationError, UnknownConcernError
from classweave.markup import element
from classweave.operations import BUILTIN_OPERATIONS, PaddingOperation, StyleOperation
from classweave.registry import (
    StyleRegistry,
    create_default_registry,
    get_default_registry,
    register_style,
    set_default_registry,
)


@dataclass(frozen=True)
class GlowParameters:
    radius: int = 4


class GlowOperation(StyleOperation[GlowParameters]):
    name = "glow"
    Parameters = GlowParameters
    aliases = {"of": "radius"}

    def apply_classes(self, params: GlowParameters) -> list[str]:
        return [f"glow-{params.radius}"]


HALO_STYLE_FILE = '''
import sys
from dataclasses import dataclass

from classweave.operations import StyleOperation


@dataclass(frozen=True)
class HaloParameters:
    size: int = 2


class HaloOperation(StyleOperation[HaloParameters]):
    name = "halo"
    Parameters = HaloParameters

    def apply_classes(self, params):
        return [f"halo-{params.size}"]


def register_styles(registry):
    registry.register("halo", HaloOperation)
'''


class TestRegistration:
    """Test registering and replacing concerns."""

    def test_builtins_in_registration_order(self, registry: StyleRegistry) -> None:
        assert registry.names() == [op.name for op in BUILTIN_OPERATIONS]
        assert len(registry) == 25

    def test_register_instance(self) -> None:
        registry = StyleRegistry()
        operation = GlowOperation()
        assert registry.register("glow", operation) is operation
        assert "glow" in registry

    def test_register_class_instantiates(self) -> None:
        registry = StyleRegistry()
        registered = registry.register("glow", GlowOperation)
        assert isinstance(registered, GlowOperation)

    def test_register_as_decorator(self) -> None:
        registry = StyleRegistry()

        @registry.register("sparkle")
        class SparkleOperation(GlowOperation):
            name = "sparkle"

        assert isinstance(registry.get("sparkle"), SparkleOperation)

    def test_duplicate_name_raises(self, registry: StyleRegistry) -> None:
        with pytest.raises(RegistrationError, match="already registered"):
            registry.register("padding", PaddingOperation)

    def test_replace(self, registry: StyleRegistry) -> None:
        registry.register("padding", GlowOperation, replace=True)
        assert isinstance(registry.get("padding"), GlowOperation)

    def test_invalid_name_raises(self) -> None:
        with pytest.raises(RegistrationError, match="valid identifier"):
            StyleRegistry().register("not a name", GlowOperation)

    def test_non_operation_raises(self) -> None:
        with pytest.raises(RegistrationError, match="not a StyleOperation"):
            StyleRegistry().register("thing", object)  # type: ignore[call-overload]

    def test_unregister(self, registry: StyleRegistry) -> None:
        registry.unregister("cursor")
        assert "cursor" not in registry
        with pytest.raises(UnknownConcernError):
            registry.unregister("cursor")


class TestFreezing:
    """Test read-only registries."""

    def test_frozen_registry_rejects_changes(self, registry: StyleRegistry) -> None:
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistrationError, match="frozen"):
            registry.register("glow", GlowOperation)
        with pytest.raises(RegistrationError, match="frozen"):
            registry.unregister("padding")

    def test_copy_is_unfrozen(self, registry: StyleRegistry) -> None:
        clone = registry.freeze().copy()
        assert not clone.frozen
        clone.register("glow", GlowOperation)
        assert "glow" in clone
        assert "glow" not in registry


class TestLookup:
    """Test resolving concerns by name."""

    def test_unknown_concern_lists_registered_names(self, registry: StyleRegistry) -> None:
        with pytest.raises(UnknownConcernError) as exc_info:
            registry.get("sparkle")
        message = str(exc_info.value)
        assert message.startswith("Unknown style concern 'sparkle'")
        assert "padding" in message

    def test_unknown_concern_is_a_key_error(self, registry: StyleRegistry) -> None:
        with pytest.raises(KeyError):
            registry.get("sparkle")

    def test_attribute_access(self, registry: StyleRegistry) -> None:
        assert registry.padding is registry.get("padding")

    def test_unknown_attribute_raises_attribute_error(self, registry: StyleRegistry) -> None:
        with pytest.raises(AttributeError, match="Unknown style concern"):
            _ = registry.sparkle

    def test_third_party_concern_works_on_both_surfaces(self, registry: StyleRegistry) -> None:
        registry.register("glow", GlowOperation)
        node = element("div", registry=registry).style("glow", of=8, on="hover")
        assert node.classes == ("glow-8", "hover:glow-8")
        scoped = element("div", registry=registry).on(lambda b: b.md(lambda b: b.style("glow")))
        assert scoped.classes == ("md:glow-4",)


class TestDefaultRegistry:
    """Test the process-wide registry."""

    def test_default_registry_is_shared(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_register_style_targets_default(self) -> None:
        @register_style("glow")
        class _Glow(GlowOperation):
            pass

        assert "glow" in get_default_registry()
        assert element("div").style("glow").classes == ("glow-4",)

    def test_set_default_registry(self) -> None:
        custom = create_default_registry()
        custom.register("glow", GlowOperation)
        set_default_registry(custom)
        assert get_default_registry() is custom
        set_default_registry(None)
        assert "glow" not in get_default_registry()


class TestStyleFiles:
    """Test loading third-party concerns from Python files."""

    def test_load_style_file_calls_hook(self, tmp_path: Path, registry: StyleRegistry) -> None:
        style_file = tmp_path / "halo_styles.py"
        style_file.write_text(HALO_STYLE_FILE)

        registry.load_style_file(style_file)

        operation = registry.get("halo")
        assert operation.apply_classes(operation.build(size=3)) == ["halo-3"]

    def test_style_file_runs_once_per_registry(self, tmp_path: Path, registry: StyleRegistry) -> None:
        style_file = tmp_path / "halo_styles.py"
        style_file.write_text(HALO_STYLE_FILE)

        first = registry.load_style_file(style_file)
        second = registry.load_style_file(str(style_file))
        assert first is second

    def test_missing_style_file_raises(self, tmp_path: Path, registry: StyleRegistry) -> None:
        with pytest.raises(RegistrationError, match="Style file not found"):
            registry.load_style_file(tmp_path / "nope.py")

    def test_missing_style_module_raises(self, registry: StyleRegistry) -> None:
        with pytest.raises(RegistrationError, match="Could not import style module"):
            registry.load_style_module("classweave_no_such_styles")

    def test_failing_style_file_is_wrapped(self, tmp_path: Path, registry: StyleRegistry) -> None:
        style_file = tmp_path / "broken_styles.py"
        style_file.write_text("raise RuntimeError('boom')\n")

        with pytest.raises(RegistrationError, match="Error executing style file .*boom"):
            registry.load_style_file(style_file)

        assert "classweave_styles_broken_styles" not in sys.modules

    def test_fixed_style_file_loads_after_failure(self, tmp_path: Path, registry: StyleRegistry) -> None:
        style_file = tmp_path / "halo_styles.py"
        style_file.write_text("this is not python\n")
        with pytest.raises(RegistrationError):
            registry.load_style_file(style_file)

        style_file.write_text(HALO_STYLE_FILE)
        registry.load_style_file(style_file)

        assert "halo" in registry
