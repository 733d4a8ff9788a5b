"""Configuration for notedir.

This module exports the filter configuration model and its loaders.
"""

from notedir.configs.filters import (
    FilterConfig,
    FilterConfigError,
    FilterConfigNotFoundError,
    FilterConfigParseError,
    FilterConfigValidationError,
    get_filter_config,
    load_filter_config,
    reload_filter_config,
)

__all__ = [
    "FilterConfig",
    "FilterConfigError",
    "FilterConfigNotFoundError",
    "FilterConfigParseError",
    "FilterConfigValidationError",
    "get_filter_config",
    "load_filter_config",
    "reload_filter_config",
]
