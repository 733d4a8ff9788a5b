"""Filter configuration for note trees.

Defines which file extensions belong to the note library and which
directory names are skipped when reading a tree. Defaults are bundled
with the package (data/filters.toml) and can be overridden per key in
~/.config/notedir/filters.toml.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from notedir.core.paths import get_filter_config_path

logger = logging.getLogger(__name__)


class FilterConfigError(Exception):
    """Base exception for filter configuration errors."""


class FilterConfigNotFoundError(FilterConfigError):
    """Raised when a filter configuration file does not exist."""


class FilterConfigParseError(FilterConfigError):
    """Raised when a filter configuration file is not valid TOML."""


class FilterConfigValidationError(FilterConfigError):
    """Raised when filter configuration content is invalid."""


class FilterConfig(BaseModel):
    """Allow-list of note extensions and ignored directory patterns.

    Instances are immutable, so a loaded configuration can be shared
    between threads without locking.

    Attributes:
        filetypes: File extensions (with leading dot) that are kept.
        ignore_dirs: Regular expressions; a directory whose name matches
            any of them (case-insensitively) is skipped.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    filetypes: Annotated[
        tuple[str, ...],
        Field(default_factory=tuple, description="Allowed file extensions"),
    ]
    ignore_dirs: Annotated[
        tuple[str, ...],
        Field(default_factory=tuple, description="Ignored directory patterns"),
    ]

    @field_validator("filetypes")
    @classmethod
    def validate_filetypes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that every extension starts with a dot."""
        for ext in v:
            if not ext.startswith("."):
                msg = f"File extension must start with '.': {ext!r}"
                raise ValueError(msg)
        return v

    @field_validator("ignore_dirs")
    @classmethod
    def validate_ignore_dirs(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that every directory pattern is a valid regular expression."""
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                msg = f"Invalid directory pattern {pattern!r}: {e}"
                raise ValueError(msg) from None
        return v


def _read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file, translating failures into FilterConfigError."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise FilterConfigNotFoundError(f"Filter config not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise FilterConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise FilterConfigError(f"Failed to read filter config {path}: {e}") from e


def load_bundled_filter_data() -> dict[str, Any]:
    """Load the raw default filter settings shipped with the package.

    Returns:
        Dictionary from the bundled data/filters.toml, or an empty
        dictionary if the resource cannot be read.
    """
    try:
        raw = resources.files("notedir.data").joinpath("filters.toml").read_text("utf-8")
        return tomllib.loads(raw)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load bundled filter config - installation may be corrupted: %s", e)
        return {}


def load_filter_config(path: Path | None = None) -> FilterConfig:
    """Load and validate a filter configuration file.

    Keys present in the file replace the bundled defaults; missing keys
    keep them.

    Args:
        path: Path to the TOML file. If None, uses the user config path.

    Returns:
        Validated FilterConfig.

    Raises:
        FilterConfigNotFoundError: If the file doesn't exist.
        FilterConfigParseError: If the TOML syntax is invalid.
        FilterConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_filter_config_path()
    data = {**load_bundled_filter_data(), **_read_toml(config_path)}

    try:
        return FilterConfig.model_validate(data)
    except ValidationError as e:
        raise FilterConfigValidationError(f"Invalid filter config {config_path}: {e}") from e


def _load_default_filter_config() -> FilterConfig:
    """Load bundled defaults merged with the user's overrides, if any."""
    user_path = get_filter_config_path()

    try:
        config = load_filter_config(user_path)
    except FilterConfigNotFoundError:
        return FilterConfig.model_validate(load_bundled_filter_data())
    except FilterConfigError as e:
        logger.warning("Ignoring user filter config, using defaults: %s", e)
        return FilterConfig.model_validate(load_bundled_filter_data())

    logger.debug("Loaded user filter overrides from %s", user_path)
    return config


# Module-level cached configuration
_cached_config: FilterConfig | None = None


def get_filter_config() -> FilterConfig:
    """Get the process-wide filter configuration, loading it on first use.

    Returns:
        Cached FilterConfig instance.
    """
    global _cached_config
    if _cached_config is None:
        _cached_config = _load_default_filter_config()
    return _cached_config


def reload_filter_config() -> FilterConfig:
    """Force reload the filter configuration from disk.

    Returns:
        Newly loaded FilterConfig instance.
    """
    global _cached_config
    _cached_config = _load_default_filter_config()
    return _cached_config
