"""Project configuration (classweave.yaml).

The configuration file names third-party style modules to load, declares
custom modifiers and optional rendering settings:

    style_modules: [my_site.styles]
    style_files: [styles/extra.py]
    custom_modifiers: [group-hover, peer-focus]
    strict_modifiers: true
    breakpoints: {sm: 600}
    render: {indent: 2}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, PrivateAttr, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .logger import get_logger
from .modifiers import Modifier
from .registry import StyleRegistry

CONFIG_FILENAME = "classweave.yaml"


class _ConfigState:
    """Config path selected on the command line (``--config``)."""

    def __init__(self) -> None:
        self.config_path: Path | None = None


_state = _ConfigState()


def get_config_path() -> Path | None:
    """Get the global config path."""
    return _state.config_path


def set_config_path(path: Path | None) -> None:
    """Set the global config path."""
    _state.config_path = path


class RenderConfig(BaseModel):
    """HTML rendering options."""

    indent: int | None = Field(default=None, ge=0)  # None renders compact HTML


class ClassweaveConfig(BaseModel):
    """Validated contents of classweave.yaml."""

    style_modules: list[str] = Field(default_factory=list)
    style_files: list[Path] = Field(default_factory=list)
    custom_modifiers: list[str] = Field(default_factory=list)
    # Reject page modifiers that are neither built in nor declared above
    strict_modifiers: bool = False
    breakpoints: dict[str, int] = Field(default_factory=dict)
    render: RenderConfig = Field(default_factory=RenderConfig)

    _source: Path | None = PrivateAttr(default=None)

    @field_validator("style_modules", "style_files", "custom_modifiers", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[Any]:
        """Ensure value is a list."""
        if v is None:
            return []
        if isinstance(v, list):
            return v  # type: ignore[return-value]
        return [v]

    @field_validator("custom_modifiers")
    @classmethod
    def check_custom_modifiers(cls, v: list[str]) -> list[str]:
        names = []
        for name in v:
            modifier = Modifier.parse(name)
            if not modifier.is_custom:
                raise ValueError(f"'{name}' is a built-in modifier, not a custom one")
            names.append(modifier.name)
        return names

    @field_validator("breakpoints")
    @classmethod
    def check_breakpoints(cls, v: dict[str, int]) -> dict[str, int]:
        known = {m.name for m in Modifier.breakpoints()}
        for name, width in v.items():
            if Modifier.parse(name).name not in known:
                raise ValueError(f"Unknown breakpoint '{name}'. Valid breakpoints: {', '.join(sorted(known))}")
            if width <= 0:
                raise ValueError(f"Breakpoint '{name}' must have a positive width, got {width}")
        return {Modifier.parse(name).name: width for name, width in v.items()}

    @property
    def source(self) -> Path | None:
        """File this configuration was loaded from, if any."""
        return self._source

    @property
    def base_dir(self) -> Path:
        """Directory relative style files are resolved against."""
        return self._source.parent if self._source is not None else Path.cwd()

    def breakpoint_ladder(self) -> list[tuple[Modifier, int]]:
        """Breakpoints with their (possibly overridden) widths, narrowest first."""
        ladder = [(m, self.breakpoints.get(m.name, m.min_width or 0)) for m in Modifier.breakpoints()]
        return sorted(ladder, key=lambda item: item[1])

    def custom_modifier_values(self) -> list[Modifier]:
        return [Modifier.custom(name) for name in self.custom_modifiers]

    def check_modifier(self, name: str) -> Modifier:
        """Resolve a modifier name, enforcing ``strict_modifiers``.

        Raises:
            ValueError: If strict and the name is neither built in nor declared
        """
        modifier = Modifier.parse(name)
        if self.strict_modifiers and modifier.is_custom and modifier.name not in self.custom_modifiers:
            raise ValueError(
                f"Unknown modifier '{name}'. Declare it under custom_modifiers in {CONFIG_FILENAME}"
            )
        return modifier

    def load_styles(self, registry: StyleRegistry) -> None:
        """Load every configured style module and file into the registry."""
        for module in self.style_modules:
            registry.load_style_module(module)
        for style_file in self.style_files:
            path = style_file if style_file.is_absolute() else self.base_dir / style_file
            registry.load_style_file(path)


def load_config(config_path: Path | str) -> ClassweaveConfig:
    """Load configuration from a YAML file.

    An empty file yields the default configuration.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or does not
            validate
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    get_logger().checks(f"Loading config {config_path}")
    try:
        with config_path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the root level")

    try:
        config = ClassweaveConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
    config._source = config_path.resolve()
    return config


def discover_config(
    page_path: Path | str | None = None,
    config_path: Path | str | None = None,
) -> ClassweaveConfig | None:
    """Find and load the configuration for a page.

    Search order:
    1. Explicit config_path argument
    2. Global config path (set via CLI --config)
    3. Page directory / classweave.yaml
    4. Current directory / classweave.yaml

    Explicitly requested files must exist; discovered ones are optional.

    Raises:
        ConfigError: If an explicitly requested file is missing or invalid
    """
    # 1. Explicit argument
    if config_path is not None:
        return load_config(config_path)

    # 2. Global context
    ctx_config = get_config_path()
    if ctx_config is not None:
        return load_config(ctx_config)

    # 3. Page directory
    if page_path is not None:
        dir_config = Path(page_path).parent / CONFIG_FILENAME
        if dir_config.exists():
            return load_config(dir_config)

    # 4. Current directory
    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return None


__all__ = [
    "CONFIG_FILENAME",
    "ClassweaveConfig",
    "RenderConfig",
    "discover_config",
    "get_config_path",
    "load_config",
    "set_config_path",
]
