"""classweave - compose utility CSS classes from semantic style intents."""

from __future__ import annotations

from .builder import ResponsiveBuilder, ScopeBlock, responsive
from .combine import CombineStrategy, combine, combine_merged, combine_scoped, combine_separate
from .config import ClassweaveConfig, discover_config, load_config
from .exceptions import (
    ClassweaveError,
    ConfigError,
    PageValidationError,
    ParseError,
    RegistrationError,
    ScopeError,
    UnknownConcernError,
)
from .loader import PageParser, load_page, render_page
from .markup import Node, element
from .modifiers import Modifier, ModifierKind
from .operations import SizingValue, StyleOperation
from .parameters import StyleParameters
from .registry import (
    StyleRegistry,
    create_default_registry,
    get_default_registry,
    register_style,
    set_default_registry,
)
from .tokens import Axis, Color, Edge

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "ClassweaveConfig",
    "ClassweaveError",
    "Color",
    "CombineStrategy",
    "ConfigError",
    "Edge",
    "Modifier",
    "ModifierKind",
    "Node",
    "PageParser",
    "PageValidationError",
    "ParseError",
    "RegistrationError",
    "ResponsiveBuilder",
    "ScopeBlock",
    "ScopeError",
    "SizingValue",
    "StyleOperation",
    "StyleParameters",
    "StyleRegistry",
    "UnknownConcernError",
    "combine",
    "combine_merged",
    "combine_scoped",
    "combine_separate",
    "create_default_registry",
    "discover_config",
    "element",
    "get_default_registry",
    "load_config",
    "load_page",
    "register_style",
    "render_page",
    "responsive",
    "set_default_registry",
]
