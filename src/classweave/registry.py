"""Central registry of style operations keyed by concern name.

Every authoring surface resolves concerns through a registry, so the direct
chaining surface and the responsive builder can never disagree about what a
concern produces. Third-party concerns are added with ``register`` (or the
module-level ``register_style`` decorator, which targets the default
registry) and become available to both surfaces, page files and the CLI.

Example:
    >>> registry = create_default_registry()
    >>> padding = registry.padding
    >>> padding.apply_classes(padding.build(length=2))
    ['p-2']
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from types import ModuleType
from typing import Any, TypeVar, overload

from .exceptions import RegistrationError, UnknownConcernError
from .logger import get_logger
from .operations import BUILTIN_OPERATIONS, StyleOperation

_O = TypeVar("_O", bound="StyleOperation[Any] | type[StyleOperation[Any]]")


def _instantiate(operation: StyleOperation[Any] | type[StyleOperation[Any]]) -> StyleOperation[Any]:
    if isinstance(operation, type):
        if not issubclass(operation, StyleOperation):
            raise RegistrationError(f"{operation.__name__} is not a StyleOperation subclass")
        return operation()
    if not isinstance(operation, StyleOperation):
        raise RegistrationError(f"{operation!r} is not a StyleOperation")
    return operation


class StyleRegistry:
    """Mapping from concern name to its (stateless) style operation."""

    def __init__(self) -> None:
        self._operations: dict[str, StyleOperation[Any]] = {}
        self._frozen = False
        self._style_modules: dict[str, ModuleType] = {}
        self._style_files: dict[Path, ModuleType] = {}

    @overload
    def register(
        self, name: str, operation: None = None, *, replace: bool = False
    ) -> Callable[[_O], _O]: ...

    @overload
    def register(
        self,
        name: str,
        operation: StyleOperation[Any] | type[StyleOperation[Any]],
        *,
        replace: bool = False,
    ) -> StyleOperation[Any]: ...

    def register(
        self,
        name: str,
        operation: StyleOperation[Any] | type[StyleOperation[Any]] | None = None,
        *,
        replace: bool = False,
    ) -> StyleOperation[Any] | Callable[[_O], _O]:
        """Register an operation under a concern name.

        Accepts either an operation instance or a StyleOperation subclass
        (instantiated with no arguments). Without ``operation`` this returns
        a class decorator.

        Args:
            name: Concern name; must be a valid Python identifier
            operation: Operation instance or class
            replace: Allow overriding an existing registration

        Returns:
            The registered operation instance, or a decorator

        Raises:
            RegistrationError: If the registry is frozen, the name is invalid,
                or the name is taken and ``replace`` is False

        Examples:
            registry.register("glow", GlowOperation())

            @registry.register("glow")
            class GlowOperation(StyleOperation[GlowParameters]):
                ...
        """
        if operation is None:

            def decorator(target: _O) -> _O:
                self.register(name, target, replace=replace)
                return target

            return decorator

        instance, action = self._store(name, operation, replace)
        get_logger().changes(f"{action} concern '{name}' -> {type(instance).__name__}")
        return instance

    def _store(
        self, name: str, operation: StyleOperation[Any] | type[StyleOperation[Any]], replace: bool
    ) -> tuple[StyleOperation[Any], str]:
        if self._frozen:
            raise RegistrationError(f"Cannot register '{name}': registry is frozen")
        if not name.isidentifier():
            raise RegistrationError(f"Concern name must be a valid identifier: {name!r}")
        if name in self._operations and not replace:
            raise RegistrationError(
                f"Concern '{name}' is already registered "
                f"({type(self._operations[name]).__name__}); pass replace=True to override"
            )

        instance = _instantiate(operation)
        action = "Replaced" if name in self._operations else "Registered"
        self._operations[name] = instance
        return instance, action

    def unregister(self, name: str) -> None:
        """Remove a concern.

        Raises:
            RegistrationError: If the registry is frozen
            UnknownConcernError: If the concern is not registered
        """
        if self._frozen:
            raise RegistrationError(f"Cannot unregister '{name}': registry is frozen")
        self.get(name)
        del self._operations[name]
        get_logger().changes(f"Unregistered concern '{name}'")

    def freeze(self) -> StyleRegistry:
        """Make the registry read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> StyleOperation[Any]:
        """Look up the operation for a concern.

        Raises:
            UnknownConcernError: If no operation is registered under ``name``
        """
        try:
            return self._operations[name]
        except KeyError:
            known = ", ".join(self._operations) or "(none)"
            raise UnknownConcernError(
                f"Unknown style concern '{name}'. Registered concerns: {known}"
            ) from None

    def names(self) -> list[str]:
        """Concern names in registration order."""
        return list(self._operations)

    def copy(self) -> StyleRegistry:
        """Unfrozen copy sharing the (stateless) operation instances."""
        clone = StyleRegistry()
        clone._operations = dict(self._operations)
        clone._style_modules = dict(self._style_modules)
        clone._style_files = dict(self._style_files)
        return clone

    def __getattr__(self, name: str) -> StyleOperation[Any]:
        # Only reached for names that are not real attributes
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.get(name)
        except UnknownConcernError as e:
            raise AttributeError(str(e)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._operations))

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"StyleRegistry({len(self._operations)} concerns{state})"

    # ------------------------------------------------------------------
    # Extension loading
    # ------------------------------------------------------------------

    def load_style_module(self, module: str) -> ModuleType:
        """Import a module by dotted path so its registrations run.

        Modules normally register against the default registry via
        ``register_style``; a module may instead define
        ``register_styles(registry)``, which is called with this registry
        (once per registry).
        """
        if module in self._style_modules:
            return self._style_modules[module]
        get_logger().checks(f"Loading style module {module}")
        try:
            imported = importlib.import_module(module)
        except ImportError as e:
            raise RegistrationError(f"Could not import style module '{module}': {e}") from e
        self._style_modules[module] = imported
        self._call_hook(imported)
        return imported

    def load_style_file(self, path: Path | str) -> ModuleType:
        """Execute a Python file so its registrations run.

        Each file runs at most once per registry; later calls return the
        module from the first run.

        Raises:
            RegistrationError: If the file cannot be loaded
        """
        style_path = Path(path).resolve()
        if style_path in self._style_files:
            return self._style_files[style_path]
        get_logger().checks(f"Loading style file {style_path}")
        if not style_path.is_file():
            raise RegistrationError(f"Style file not found: {path}")
        spec = importlib.util.spec_from_file_location(f"classweave_styles_{style_path.stem}", style_path)
        if spec is None or spec.loader is None:
            raise RegistrationError(f"Could not load style file: {path}")
        user_module = importlib.util.module_from_spec(spec)
        # Dataclasses in the file resolve their annotations through sys.modules
        sys.modules[spec.name] = user_module
        try:
            spec.loader.exec_module(user_module)
        except Exception as e:
            sys.modules.pop(spec.name, None)
            raise RegistrationError(f"Error executing style file {path}: {e}") from e
        self._style_files[style_path] = user_module
        self._call_hook(user_module)
        return user_module

    def _call_hook(self, module: ModuleType) -> None:
        hook = getattr(module, "register_styles", None)
        if callable(hook):
            hook(self)


def create_default_registry() -> StyleRegistry:
    """Build a fresh registry holding every built-in concern."""
    registry = StyleRegistry()
    # Built-ins are reported as one summary line
    for operation_cls in BUILTIN_OPERATIONS:
        registry._store(operation_cls.name, operation_cls, replace=False)
    get_logger().checks(f"Registry created with {len(registry)} built-in concerns")
    return registry


_default_registry: StyleRegistry | None = None


def get_default_registry() -> StyleRegistry:
    """Process-wide registry used when no explicit registry is given."""
    global _default_registry  # noqa: PLW0603 - lazily created singleton
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def set_default_registry(registry: StyleRegistry | None) -> None:
    """Replace the process-wide registry; None restores a fresh one lazily."""
    global _default_registry  # noqa: PLW0603 - lazily created singleton
    _default_registry = registry


@overload
def register_style(name: str, operation: None = None, *, replace: bool = False) -> Callable[[_O], _O]: ...


@overload
def register_style(
    name: str,
    operation: StyleOperation[Any] | type[StyleOperation[Any]],
    *,
    replace: bool = False,
) -> StyleOperation[Any]: ...


def register_style(
    name: str,
    operation: StyleOperation[Any] | type[StyleOperation[Any]] | None = None,
    *,
    replace: bool = False,
) -> StyleOperation[Any] | Callable[[_O], _O]:
    """Register a concern on the default registry.

    Examples:
        @register_style("glow")
        class GlowOperation(StyleOperation[GlowParameters]):
            name = "glow"
            ...
    """
    return get_default_registry().register(name, operation, replace=replace)


__all__ = [
    "StyleRegistry",
    "create_default_registry",
    "get_default_registry",
    "register_style",
    "set_default_registry",
]
