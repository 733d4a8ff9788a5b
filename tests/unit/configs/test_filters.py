"""Tests for filter configuration models and loaders."""

import logging
from pathlib import Path

import pytest
from notedir.configs.filters import (
    FilterConfig,
    FilterConfigNotFoundError,
    FilterConfigParseError,
    FilterConfigValidationError,
    get_filter_config,
    load_bundled_filter_data,
    load_filter_config,
    reload_filter_config,
)
from pydantic import ValidationError


class TestFilterConfig:
    """Tests for FilterConfig model."""

    def test_defaults_are_empty(self) -> None:
        """A bare FilterConfig allows nothing and ignores nothing."""
        config = FilterConfig()
        assert config.filetypes == ()
        assert config.ignore_dirs == ()

    def test_lists_coerced_to_tuples(self) -> None:
        """Lists from TOML are stored as tuples."""
        config = FilterConfig.model_validate({"filetypes": [".md"], "ignore_dirs": ["^_"]})
        assert config.filetypes == (".md",)
        assert config.ignore_dirs == ("^_",)

    def test_extension_requires_dot(self) -> None:
        """Extensions without a leading dot are rejected."""
        with pytest.raises(ValidationError, match="must start with '.'"):
            FilterConfig(filetypes=("md",))

    def test_invalid_pattern_rejected(self) -> None:
        """Patterns that don't compile are rejected."""
        with pytest.raises(ValidationError, match="Invalid directory pattern"):
            FilterConfig(ignore_dirs=("[unclosed",))

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            FilterConfig(ignore_files=(".tmp",))  # type: ignore[call-arg]

    def test_frozen(self, filter_config: FilterConfig) -> None:
        """Configurations are immutable after load."""
        with pytest.raises(ValidationError):
            filter_config.filetypes = (".doc",)  # type: ignore[misc]


class TestLoadBundledFilterData:
    """Tests for load_bundled_filter_data function."""

    def test_bundled_defaults(self) -> None:
        """Bundled defaults allow Markdown and text and skip hidden directories."""
        data = load_bundled_filter_data()
        assert data["filetypes"] == [".md", ".markdown", ".txt"]
        assert data["ignore_dirs"] == ["^\\."]


class TestLoadFilterConfig:
    """Tests for load_filter_config function."""

    def test_full_file(self, tmp_path: Path) -> None:
        """Both keys are read from the file."""
        path = tmp_path / "filters.toml"
        path.write_text('filetypes = [".org"]\nignore_dirs = ["^_"]\n')

        config = load_filter_config(path)

        assert config.filetypes == (".org",)
        assert config.ignore_dirs == ("^_",)

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        """Missing keys fall back to the bundled defaults."""
        path = tmp_path / "filters.toml"
        path.write_text('filetypes = [".md"]\n')

        config = load_filter_config(path)

        assert config.filetypes == (".md",)
        assert config.ignore_dirs == ("^\\.",)

    def test_empty_list_overrides(self, tmp_path: Path) -> None:
        """An explicit empty list replaces the default."""
        path = tmp_path / "filters.toml"
        path.write_text("ignore_dirs = []\n")

        config = load_filter_config(path)

        assert config.ignore_dirs == ()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FilterConfigNotFoundError."""
        with pytest.raises(FilterConfigNotFoundError, match="not found"):
            load_filter_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises FilterConfigParseError."""
        path = tmp_path / "filters.toml"
        path.write_text("not valid [ toml syntax")

        with pytest.raises(FilterConfigParseError, match="Invalid TOML"):
            load_filter_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise FilterConfigValidationError."""
        path = tmp_path / "filters.toml"
        path.write_text('filetypes = ["md"]\n')

        with pytest.raises(FilterConfigValidationError, match="Invalid filter config"):
            load_filter_config(path)

    def test_default_path_is_user_config(self, isolated_config: Path) -> None:
        """Without a path, the user config file is loaded."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "filters.toml").write_text('filetypes = [".rst"]\n')

        config = load_filter_config()

        assert config.filetypes == (".rst",)


class TestGetFilterConfig:
    """Tests for get_filter_config and reload_filter_config."""

    def test_bundled_defaults_without_user_file(self) -> None:
        """Without a user file, the bundled defaults are used."""
        config = get_filter_config()
        assert config.filetypes == (".md", ".markdown", ".txt")
        assert config.ignore_dirs == ("^\\.",)

    def test_cached(self) -> None:
        """Repeated calls return the same instance."""
        assert get_filter_config() is get_filter_config()

    def test_user_overrides_applied(self, isolated_config: Path) -> None:
        """User file keys replace the bundled ones."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "filters.toml").write_text('ignore_dirs = ["^_attachments$"]\n')

        config = get_filter_config()

        assert config.ignore_dirs == ("^_attachments$",)
        assert config.filetypes == (".md", ".markdown", ".txt")

    def test_invalid_user_file_falls_back(
        self, isolated_config: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An invalid user file is logged and the bundled defaults are used."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "filters.toml").write_text('filetypes = ["md"]\n')

        with caplog.at_level(logging.WARNING, logger="notedir.configs.filters"):
            config = get_filter_config()

        assert config.filetypes == (".md", ".markdown", ".txt")
        assert "Ignoring user filter config" in caplog.text

    def test_reload_picks_up_changes(self, isolated_config: Path) -> None:
        """reload_filter_config re-reads the user file."""
        first = get_filter_config()

        isolated_config.mkdir(parents=True)
        (isolated_config / "filters.toml").write_text('filetypes = [".org"]\n')

        assert get_filter_config() is first
        reloaded = reload_filter_config()
        assert reloaded.filetypes == (".org",)
        assert get_filter_config() is reloaded
