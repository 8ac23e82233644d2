"""Configuration loading and management for Capture Inventory.

Configuration sources are merged in priority order:
    1. Defaults (defined in InventoryConfig)
    2. Global config (~/.capture-inventory.toml)
    3. Project config (./capture-inventory.toml)
    4. Explicit config file
    5. Environment variables (INVENTORY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, grouping_mode="namePlusType")
    >>> config.verbosity
    'verbose'
    >>> config.grouping_mode
    'namePlusType'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, InventoryError
from .variants.models import GroupingMode

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

GLOBAL_CONFIG_NAME = ".capture-inventory.toml"
PROJECT_CONFIG_NAME = "capture-inventory.toml"
ENV_PREFIX = "INVENTORY_"


@dataclass(frozen=True)
class InventoryConfig:
    """Settings for a derivation run.

    None of these change what a component or style *is*; they only choose
    which evidence is in scope and how the exploratory views are cut.

    Attributes:
        grouping_mode: Default granularity for the bucketed variant view
            (``nameOnly``, ``namePlusType`` or ``nameTypePrimitives``).
        stable_representatives: Pick each component's representative record
            by smallest record id instead of first-encountered.
        project_id: Restrict evidence to one audit project (None = all).
        verbosity: Logging verbosity level.
    """

    grouping_mode: str = GroupingMode.NAME_ONLY.value
    stable_representatives: bool = False
    project_id: Optional[str] = None
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        valid_modes = [m.value for m in GroupingMode]
        if self.grouping_mode not in valid_modes:
            raise InvalidConfigError(
                "grouping_mode",
                self.grouping_mode,
                f"must be one of: {', '.join(valid_modes)}",
            )
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity",
                self.verbosity,
                f"must be one of: {', '.join(_VERBOSITY_LEVELS)}",
            )
        if not isinstance(self.stable_representatives, bool):
            raise InvalidConfigError(
                "stable_representatives", self.stable_representatives, "must be true or false"
            )
        if self.project_id is not None:
            if not isinstance(self.project_id, str):
                raise InvalidConfigError("project_id", self.project_id, "must be a string")
            if not self.project_id.strip():
                raise InvalidConfigError("project_id", self.project_id, "must not be blank")

    @property
    def mode(self) -> GroupingMode:
        """Grouping mode as an enum member."""
        return GroupingMode(self.grouping_mode)


def load_config(config_file: Optional[Path] = None, **overrides) -> InventoryConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated InventoryConfig instance

    Raises:
        InventoryError: If a config file is invalid or missing, or a key is unknown
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except InventoryError:
            raise
        except Exception as e:
            raise InventoryError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except InventoryError:
            raise
        except Exception as e:
            raise InventoryError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise InventoryError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except InventoryError:
            raise
        except Exception as e:
            raise InventoryError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return InventoryConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise InventoryError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from INVENTORY_* environment variables.

    Supported environment variables:
        INVENTORY_GROUPING_MODE: nameOnly/namePlusType/nameTypePrimitives
        INVENTORY_STABLE_REPRESENTATIVES: bool (true/false/1/0)
        INVENTORY_PROJECT_ID: str
        INVENTORY_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(InventoryConfig)

    result: dict[str, Any] = {}

    for field_name in InventoryConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InventoryError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)
