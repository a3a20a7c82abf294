"""
YAML settings loader for tini.

Engine settings live in a small YAML mapping such as:

    encoding: utf-8
    int_bits: 64
    blank_lines: 1
    delimiter: " = "
    list_joiner: ", "

This module finds, loads, validates and saves that file.
"""

from pathlib import Path
from typing import Dict, Any, List, Optional, Union
import logging
from dataclasses import dataclass

import yaml
from pydantic import ValidationError

from ..errors import SettingsError
from ..models.settings import TiniSettings


logger = logging.getLogger(__name__)


@dataclass
class SettingsLoadResult:
    """
    Result of a settings load.

    Attributes:
        settings: The validated settings
        settings_path: File the settings came from, None for defaults
        is_default: Whether default settings were used
    """
    settings: TiniSettings
    settings_path: Optional[Path]
    is_default: bool


class SettingsLoader:
    """
    Find and load tini settings from YAML files.

    Without an explicit path the loader searches DEFAULT_SETTINGS_NAMES in each
    search path and falls back to default settings when none is found.
    """

    DEFAULT_SETTINGS_NAMES = [
        '.tini.yaml',
        '.tini.yml',
        'tini.yaml',
        'tini.yml'
    ]

    def __init__(self, search_paths: Optional[List[Path]] = None):
        self.search_paths = search_paths if search_paths is not None else [Path.cwd()]
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, settings_path: Optional[Union[str, Path]] = None) -> SettingsLoadResult:
        """
        Load settings from a file, or search for one.

        Args:
            settings_path: Settings file to use. If None, searches default names.

        Returns:
            SettingsLoadResult with validated settings

        Raises:
            SettingsError: If the file is missing, unreadable or invalid
        """
        if settings_path:
            settings_path = Path(settings_path)
            if not settings_path.exists():
                raise SettingsError(f"Settings file not found: {settings_path}")
            data = self._load_yaml_file(settings_path)
        else:
            settings_path = self._find_settings_file()
            data = self._load_yaml_file(settings_path) if settings_path else {}

        try:
            settings = TiniSettings.from_dict(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {settings_path or 'defaults'}: {e}") from e

        self.logger.info(f"Settings loaded from {settings_path or 'defaults'}")
        return SettingsLoadResult(
            settings=settings,
            settings_path=settings_path,
            is_default=settings_path is None
        )

    def _find_settings_file(self) -> Optional[Path]:
        for search_path in self.search_paths:
            for name in self.DEFAULT_SETTINGS_NAMES:
                candidate = Path(search_path) / name
                if candidate.is_file():
                    self.logger.info(f"Found settings file: {candidate}")
                    return candidate

        self.logger.info("No settings file found, using defaults")
        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML settings file.

        Raises:
            SettingsError: If the file cannot be read, parsed or is not a mapping
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, IOError) as e:
            raise SettingsError(f"Cannot read settings file {file_path}: {e}") from e

        if not content.strip():
            self.logger.warning(f"Settings file is empty: {file_path}")
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML syntax in {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file must contain a YAML mapping, got {type(data).__name__}")
        return data

    def save(self, settings: TiniSettings, output_path: Union[str, Path]) -> None:
        """
        Save settings to a YAML file.

        Raises:
            SettingsError: If the file cannot be written
        """
        output_path = Path(output_path)
        content = "# tini engine settings\n" + yaml.safe_dump(
            settings.to_dict(), default_flow_style=False, sort_keys=False
        )
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except (OSError, IOError) as e:
            raise SettingsError(f"Cannot write settings file {output_path}: {e}") from e

        self.logger.info(f"Settings saved to {output_path}")


def load_settings(settings_path: Optional[Union[str, Path]] = None) -> TiniSettings:
    """
    Convenience function to load settings.

    Args:
        settings_path: Settings file (optional, searched in the current directory)

    Returns:
        Validated TiniSettings
    """
    return SettingsLoader().load(settings_path).settings


def save_settings(settings: TiniSettings, output_path: Union[str, Path]) -> None:
    """Convenience function to save settings as YAML."""
    SettingsLoader().save(settings, output_path)
