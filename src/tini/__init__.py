"""
tini - a tiny INI engine

Parses a line-oriented, section-keyed INI dialect into an ordered document,
answers typed queries (bool, int, float, text and lists of those), builds
documents fluently and writes them back to text.
"""

from .errors import (
    TiniError,
    ParseError,
    IniSyntaxError,
    MisplacedEntry,
    SectionNotFound,
    KeyNotFound,
    TypeMismatch,
    HeterogeneousList,
    IntegerOverflow,
    InvalidName,
    InvalidValue,
    IoFailure,
    SettingsError
)
from .models import Document, Section, TiniSettings, TypedValue, ValueKind
from .tools.builder import IniBuilder
from .config import IniParser, loads, load, dumps, dump, load_settings, save_settings

__version__ = "0.1.0"

__all__ = [
    'Document', 'Section', 'TiniSettings', 'TypedValue', 'ValueKind',
    'IniBuilder', 'IniParser',
    'loads', 'load', 'dumps', 'dump', 'load_settings', 'save_settings',
    'TiniError', 'ParseError', 'IniSyntaxError', 'MisplacedEntry',
    'SectionNotFound', 'KeyNotFound', 'TypeMismatch', 'HeterogeneousList',
    'IntegerOverflow', 'InvalidName', 'InvalidValue', 'IoFailure', 'SettingsError'
]
