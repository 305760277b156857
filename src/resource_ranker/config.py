"""Configuration loading and management for Resource Ranker.

Configuration sources are merged in priority order:
    1. Defaults (defined in RankerConfig)
    2. Global config (~/.resource-ranker.toml)
    3. Project config (./resource-ranker.toml)
    4. Explicit config file
    5. Environment variables (RANKER_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(limit=5, extension="kt")
    >>> config.limit
    5
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import InvalidConfigError, ResourceRankerError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

# Keyword, whitespace, then anything on the line up to the next opening brace
DEFAULT_CLASS_PATTERN = r"class\s+.*?(?=\{)"

GLOBAL_CONFIG_NAME = ".resource-ranker.toml"
PROJECT_CONFIG_NAME = "resource-ranker.toml"
ENV_PREFIX = "RANKER_"


@dataclass(frozen=True)
class RankerConfig:
    """Configuration for a ranking run.

    Attributes:
        Scanning:
            extension: Source file extension to scan (without the dot)
            class_pattern: Regex locating class declarations; the match must
                stop right before the body's opening brace
            strip_literals: Blank string and comment contents before the
                brace-depth scan

        Output:
            limit: Entries per ranking; 0 or negative shows everything
            verbosity: Logging verbosity level (quiet, normal, verbose)
            log_file: Also append log records to this file

        File filtering:
            exclude_patterns: Glob patterns (relative to the root) to skip
            follow_symlinks: Descend into symlinked directories
            max_file_size_mb: Files larger than this are skipped
            encoding: Text encoding used to read source files
    """

    # Scanning
    extension: str = "dart"
    class_pattern: str = DEFAULT_CLASS_PATTERN
    strip_literals: bool = False

    # Output
    limit: int = 10
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    # File filtering
    exclude_patterns: list[str] = field(default_factory=list)
    follow_symlinks: bool = False
    max_file_size_mb: float = 10.0
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.extension.lstrip("."):
            raise ValueError("extension must not be empty")

        try:
            re.compile(self.class_pattern)
        except re.error as e:
            raise ValueError(f"class_pattern is not a valid regex: {e}")

        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")

        if self.verbosity not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITY_LEVELS)}")

    @property
    def suffix(self) -> str:
        """File suffix including the leading dot, e.g. '.dart'."""
        return "." + self.extension.lstrip(".")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> RankerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask files.

    Returns:
        Validated RankerConfig instance

    Raises:
        InvalidConfigError: If a RANKER_* variable cannot be parsed
        ResourceRankerError: If a config source is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ResourceRankerError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ResourceRankerError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ResourceRankerError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ResourceRankerError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return RankerConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ResourceRankerError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from RANKER_* environment variables.

    Supported environment variables:
        RANKER_EXTENSION: str
        RANKER_CLASS_PATTERN: str
        RANKER_STRIP_LITERALS: bool (true/false/1/0)
        RANKER_LIMIT: int
        RANKER_VERBOSITY: quiet/normal/verbose
        RANKER_LOG_FILE: str
        RANKER_FOLLOW_SYMLINKS: bool
        RANKER_MAX_FILE_SIZE_MB: float
        RANKER_ENCODING: str

    Returns:
        Dict of field_name -> parsed_value for any RANKER_* vars found.
    """
    type_hints = get_type_hints(RankerConfig)

    result: dict[str, Any] = {}

    for field_name in RankerConfig.__dataclass_fields__:
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
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the type is not settable from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] parses as X
    if origin is Union:
        args = [arg for arg in type_hint.__args__ if arg is not type(None)]
        if len(args) == 1:
            return _parse_env_value(value, args[0])
        return None

    # Lists (exclude_patterns) are file-only
    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ResourceRankerError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ResourceRankerError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
