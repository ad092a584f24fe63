"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_MAX_INPUT_LENGTH

TOOL_NAME = "group-variant"


@dataclass
class GroupVariantConfig:
    """Configuration for the ``group-variant`` command.

    The control characters of the grouped-variant syntax are fixed and are
    not part of the configuration.

    Attributes:
        max_input_length: Maximum number of characters accepted per fragment.
        strict: Whether malformed groups make the command fail instead of
            being passed through as literal text.
        line_mode: Whether standard input is split into one fragment per line.

    Examples:
        GroupVariantConfig(max_input_length=4096, strict=True)
    """

    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    strict: bool = False
    line_mode: bool = True


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_input_length` must be a positive integer")
    """


def load_config(search_path: Path) -> GroupVariantConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.group-variant]`` table from `pyproject.toml` and the
    ``[group-variant]`` or ``[tool.group-variant]`` table from
    `.group-variant.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        GroupVariantConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("frontend"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", TOOL_NAME)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{TOOL_NAME}.toml",
            table_paths=[(TOOL_NAME,), ("tool", TOOL_NAME)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return GroupVariantConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> GroupVariantConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> GroupVariantConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys use dashes; dataclass fields use underscores.
    fields: dict[str, object] = {}
    for key, value in raw_config.items():
        name = key.replace("-", "_")
        if name in fields:
            raise ConfigError(
                f"Duplicate `{name}` setting in `[{table_display}]` of {config_file}"
            )
        fields[name] = value

    try:
        return GroupVariantConfig(**fields)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: GroupVariantConfig) -> None:
    """Validate a `GroupVariantConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the input limit is not a positive integer or a flag is
            not a boolean.

    Examples:
        validate_config(GroupVariantConfig(max_input_length=80))
    """
    value = config.max_input_length
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("`max_input_length` must be an integer")
    if value <= 0:
        raise ConfigError("`max_input_length` must be a positive integer")

    for key in ("strict", "line_mode"):
        if not isinstance(getattr(config, key), bool):
            raise ConfigError(f"`{key}` must be a boolean")


def apply_overrides(config: GroupVariantConfig, **overrides: object) -> GroupVariantConfig:
    """Apply override values to a `GroupVariantConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        GroupVariantConfig: New configuration with the provided overrides
        applied. The original configuration is returned when no changes are
        supplied.

    Raises:
        TypeError: If an override name is not defined on `GroupVariantConfig`.

    Examples:
        updated = apply_overrides(config, strict=True, max_input_length=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> GroupVariantConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        GroupVariantConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), strict=True)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
