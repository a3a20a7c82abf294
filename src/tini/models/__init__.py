"""
Data models for tini.

This module contains the document, value and settings structures.
"""

from .values import TypedValue, ValueKind
from .settings import TiniSettings
from .document import Document, Section

__all__ = ['Document', 'Section', 'TiniSettings', 'TypedValue', 'ValueKind']
