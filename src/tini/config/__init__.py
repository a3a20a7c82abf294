"""
Parsing and settings package for tini.

This package turns INI text and files into documents, writes them back,
and loads engine settings from YAML.
"""

from .parser import (
    IniParser,
    loads,
    load,
    dumps,
    dump
)
from .loader import (
    SettingsLoader,
    SettingsLoadResult,
    load_settings,
    save_settings
)

__all__ = [
    'IniParser',
    'loads',
    'load',
    'dumps',
    'dump',
    'SettingsLoader',
    'SettingsLoadResult',
    'load_settings',
    'save_settings'
]
