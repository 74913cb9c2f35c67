"""
Test configuration management.
"""

from pathlib import Path

import pytest

from photo_sorter import config as config_module
from photo_sorter.config import (
    DEFAULT_DESTINATION_ROOT,
    SorterSettings,
    get_settings,
    load_config,
)
from photo_sorter.errors import ConfigError
from photo_sorter.models import RelocationMode, SiblingMatch, YearSource


@pytest.fixture
def no_default_config(monkeypatch):
    """Make sure no config file on the test machine is picked up."""
    monkeypatch.setattr(config_module, "CONFIG_SEARCH_PATHS", [])


class TestSorterSettings:
    """Test the SorterSettings dataclass."""

    def test_defaults(self):
        settings = SorterSettings()

        assert settings.destination_root == DEFAULT_DESTINATION_ROOT
        assert settings.mode is RelocationMode.COPY
        assert settings.sibling_match is SiblingMatch.STEM
        assert settings.year_source is YearSource.CLOCK
        assert settings.unknown_model == "UnknownCamera"
        assert settings.skip_hidden is True
        assert settings.dry_run is False
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_from_dict(self, tmp_path):
        settings = SorterSettings.from_dict({
            "destination_root": str(tmp_path),
            "mode": "move-siblings",
            "sibling_match": "prefix",
            "year_source": "capture",
            "unknown_model": "NoCamera",
            "skip_hidden": False,
            "dry_run": True,
            "log_level": "debug",
        })

        assert settings.destination_root == tmp_path
        assert settings.mode is RelocationMode.MOVE_WITH_SIBLINGS
        assert settings.sibling_match is SiblingMatch.PREFIX
        assert settings.year_source is YearSource.CAPTURE
        assert settings.unknown_model == "NoCamera"
        assert settings.skip_hidden is False
        assert settings.dry_run is True
        assert settings.log_level == "DEBUG"

    def test_from_dict_expands_home(self):
        settings = SorterSettings.from_dict({"destination_root": "~/Library"})

        assert settings.destination_root == Path.home() / "Library"

    def test_from_dict_ignores_unknown_keys(self, caplog):
        settings = SorterSettings.from_dict({"colour": "blue"})

        assert settings == SorterSettings()
        assert "Ignoring unknown config key: colour" in caplog.text

    def test_from_dict_invalid_mode(self):
        with pytest.raises(ConfigError, match="Invalid configuration value"):
            SorterSettings.from_dict({"mode": "symlink"})

    def test_with_overrides_skips_none(self, tmp_path):
        """Test that unset command-line options keep configured values."""
        base = SorterSettings(destination_root=tmp_path, mode=RelocationMode.MOVE)

        settings = base.with_overrides(destination_root=None, mode=None, dry_run=True)

        assert settings.destination_root == tmp_path
        assert settings.mode is RelocationMode.MOVE
        assert settings.dry_run is True
        assert base.dry_run is False

    def test_to_dict(self, tmp_path):
        settings = SorterSettings(destination_root=tmp_path, mode=RelocationMode.MOVE)

        data = settings.to_dict()

        assert data["destination_root"] == str(tmp_path)
        assert data["mode"] == "move"
        assert data["sibling_match"] == "stem"
        assert data["year_source"] == "clock"
        assert data["log_file"] is None

    def test_to_dict_round_trip(self, tmp_path):
        settings = SorterSettings(destination_root=tmp_path, year_source=YearSource.CAPTURE)

        assert SorterSettings.from_dict(settings.to_dict()) == settings


class TestLoadConfig:
    """Test load_config()."""

    def test_explicit_file(self, tmp_path):
        config_file = tmp_path / "photo_sorter.yaml"
        config_file.write_text("mode: move\ndestination_root: /photos\n")

        assert load_config(config_file) == {"mode": "move", "destination_root": "/photos"}

    def test_explicit_file_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_no_default_file(self, no_default_config):
        assert load_config() == {}

    def test_default_search_path(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("unknown_model: Mystery\n")
        monkeypatch.setattr(config_module, "CONFIG_SEARCH_PATHS", [tmp_path / "nope.yaml", config_file])

        assert load_config() == {"unknown_model": "Mystery"}

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(config_file) == {}

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("mode: [copy\n")

        with pytest.raises(ConfigError, match="Cannot read config file"):
            load_config(config_file)

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- copy\n- move\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config(config_file)


class TestGetSettings:
    """Test get_settings()."""

    def test_overrides_beat_file(self, tmp_path):
        config_file = tmp_path / "photo_sorter.yaml"
        config_file.write_text("mode: move\ndestination_root: /from/file\n")

        settings = get_settings(config_file, destination_root=tmp_path / "cli", mode=None)

        assert settings.destination_root == tmp_path / "cli"
        assert settings.mode is RelocationMode.MOVE

    def test_defaults_without_file(self, no_default_config):
        assert get_settings() == SorterSettings()
