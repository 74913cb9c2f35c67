"""
Configuration management for photo-sorter.

Configuration is optional. When present it is a YAML file such as:

    destination_root: ~/Pictures
    mode: move-siblings
    sibling_match: stem
    year_source: clock
    unknown_model: UnknownCamera

Command-line arguments override any value read from the file.
"""

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from photo_sorter.destination import DEFAULT_UNKNOWN_MODEL
from photo_sorter.errors import ConfigError
from photo_sorter.models.enums import RelocationMode, SiblingMatch, YearSource

logger = logging.getLogger(__name__)

# Default locations to search for a config file
CONFIG_SEARCH_PATHS = [
    Path("photo_sorter.yaml"),
    Path.home() / ".photo_sorter" / "config.yaml",
]

DEFAULT_DESTINATION_ROOT = Path.home() / "Pictures"


@dataclass
class SorterSettings:
    """
    Resolved settings for a sorting run.

    Attributes:
        destination_root: Base directory of the sorted library
        mode: Copy, move, or move together with sibling files
        sibling_match: How siblings are recognized in move-siblings mode
        year_source: Year from the wall clock (reference behavior) or from the photo
        unknown_model: Directory name used when the Model tag is missing
        skip_hidden: Skip dotfiles in the source directory
        dry_run: Only log planned relocations
        log_level: Logging level name
        log_file: Optional log file path
    """
    destination_root: Path = field(default_factory=lambda: DEFAULT_DESTINATION_ROOT)
    mode: RelocationMode = RelocationMode.COPY
    sibling_match: SiblingMatch = SiblingMatch.STEM
    year_source: YearSource = YearSource.CLOCK
    unknown_model: str = DEFAULT_UNKNOWN_MODEL
    skip_hidden: bool = True
    dry_run: bool = False
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SorterSettings":
        """
        Create settings from a configuration dictionary.

        Unknown keys are ignored with a warning.

        Raises:
            ConfigError: If a value is invalid

        Example:
            >>> settings = SorterSettings.from_dict({"mode": "move"})
            >>> settings.mode
            <RelocationMode.MOVE: 'move'>
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown config key: %s", key)

        values = {key: value for key, value in data.items() if key in known and value is not None}
        return cls().with_overrides(**values)

    def with_overrides(self, **overrides: Any) -> "SorterSettings":
        """
        Return a copy with the given values replaced.

        None values are skipped so unset command-line options keep the
        configured value. String values are coerced to the field types.
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        try:
            if "destination_root" in values:
                values["destination_root"] = Path(values["destination_root"]).expanduser()
            if "log_file" in values:
                values["log_file"] = Path(values["log_file"]).expanduser()
            if "mode" in values:
                values["mode"] = RelocationMode(values["mode"])
            if "sibling_match" in values:
                values["sibling_match"] = SiblingMatch(values["sibling_match"])
            if "year_source" in values:
                values["year_source"] = YearSource(values["year_source"])
            if "unknown_model" in values:
                values["unknown_model"] = str(values["unknown_model"])
            if "log_level" in values:
                values["log_level"] = str(values["log_level"]).upper()
            return replace(self, **values)
        except (ValueError, TypeError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (enums as values, paths as strings)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Path):
                data[key] = str(value)
            elif hasattr(value, "value"):
                data[key] = value.value
        return data


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Specific path to config file. If None, searches default
            locations and returns an empty dictionary when none exists.

    Returns:
        Dictionary containing configuration.

    Raises:
        ConfigError: If an explicit config file does not exist or any file
            cannot be parsed.
    """
    path_to_load = None

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        path_to_load = config_path
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                path_to_load = path
                break

    if not path_to_load:
        logger.debug("No config file found, using defaults")
        return {}

    logger.info("Loading config from %s", path_to_load)

    try:
        with open(path_to_load, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path_to_load}: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path_to_load} must contain a mapping")

    return config


def get_settings(config_path: Optional[Path] = None, **overrides: Any) -> SorterSettings:
    """
    Load the config file (if any) and apply overrides on top.

    Args:
        config_path: Optional explicit config file
        **overrides: Values from the command line; None means "not given"

    Returns:
        Resolved SorterSettings
    """
    settings = SorterSettings.from_dict(load_config(config_path))
    return settings.with_overrides(**overrides)
