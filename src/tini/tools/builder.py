"""
Fluent builder for tini documents.

The builder tracks a current section the same way the parser does, so both
paths mutate a Document through the same calls.
"""

import logging
from typing import Any, Iterable, Optional

from ..errors import MisplacedEntry
from ..models.document import Document
from ..models.settings import TiniSettings
from .lists import SEPARATOR, format_scalar, join_items


logger = logging.getLogger(__name__)


class IniBuilder:
    """
    Build a Document by chaining section() and item() calls.

    Example:
        document = (IniBuilder()
                    .section("floats").item("consts", "3.1416, 2.7183")
                    .section("integers").item_vec("lost", [4, 8, 15, 16, 23, 42])
                    .build())
    """

    def __init__(self, settings: Optional[TiniSettings] = None):
        self._document = Document(settings=settings or TiniSettings())
        self._current: Optional[str] = None

    @classmethod
    def new(cls, settings: Optional[TiniSettings] = None) -> 'IniBuilder':
        """Start from an empty document."""
        return cls(settings)

    @property
    def current_section(self) -> Optional[str]:
        """Name of the section item() writes into, or None before any section()."""
        return self._current

    def section(self, name: str) -> 'IniBuilder':
        """Create or select a section and make it current."""
        if name in self._document:
            logger.debug(f"Reopening section [{name}]")
        self._document.add_section(name)
        self._current = name
        return self

    def item(self, key: str, value: Any) -> 'IniBuilder':
        """
        Set a key in the current section.

        Raises:
            MisplacedEntry: If no section has been started
            InvalidValue: If value is not a bool, int, float or str
        """
        if self._current is None:
            raise MisplacedEntry(line=f"{key} = {value}")
        if not isinstance(value, str):
            value = format_scalar(value)
        self._document.set(self._current, key, value)
        return self

    def item_vec(self, key: str, values: Iterable[Any], sep: str = SEPARATOR,
                 joiner: Optional[str] = None) -> 'IniBuilder':
        """Set a key in the current section to a list of values."""
        if joiner is None:
            joiner = self._document.settings.list_joiner if sep == SEPARATOR else sep
        return self.item(key, join_items(values, sep, joiner))

    def build(self) -> Document:
        return self._document
