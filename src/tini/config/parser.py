"""
INI parser for tini.

This module turns INI text into a Document and writes documents back to disk.
Parsing is all-or-nothing: the first malformed or misplaced line aborts the
parse and no partial document is returned.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from ..errors import IniSyntaxError, InvalidName, InvalidValue, IoFailure, MisplacedEntry
from ..models.document import Document
from ..models.settings import TiniSettings
from ..tools.builder import IniBuilder
from ..tools.serializer import serialize
from ..tools.tokenizer import LineKind, classify_line


logger = logging.getLogger(__name__)

BOM = '\ufeff'


class IniParser:
    """
    Line-driven parser with two states: no active section, or in a section.

    The parser drives an IniBuilder, so the current-section cursor and every
    insertion rule are shared with documents built in code.
    """

    def __init__(self, settings: Optional[TiniSettings] = None):
        """
        Initialize the parser.

        Args:
            settings: Settings attached to parsed documents (defaults if None)
        """
        self.settings = settings or TiniSettings()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def parse(self, text: str) -> Document:
        """
        Parse INI text into a Document.

        Args:
            text: Complete INI text

        Returns:
            The assembled Document

        Raises:
            IniSyntaxError: On the first malformed line
            MisplacedEntry: On an entry before any section header
        """
        builder = IniBuilder(self.settings)
        document = builder.build()

        for line_number, line in enumerate(text.lstrip(BOM).split('\n'), start=1):
            line = line.rstrip('\r')
            parsed = classify_line(line, line_number)

            if parsed.kind is LineKind.BLANK:
                continue

            if parsed.kind is LineKind.SECTION:
                builder.section(parsed.name)

            elif parsed.kind is LineKind.ENTRY:
                current = builder.current_section
                if current is None:
                    raise MisplacedEntry(line_number, line)
                if parsed.key in document.get_section(current):
                    self.logger.debug(f"line {line_number}: overwriting [{current}] {parsed.key}")
                try:
                    builder.item(parsed.key, parsed.value)
                except (InvalidName, InvalidValue) as e:
                    raise IniSyntaxError(line_number, line) from e

            else:
                raise IniSyntaxError(line_number, line)

        self.logger.debug(f"Parsed {len(document)} sections")
        return document

    def read(self, path: Union[str, Path]) -> Document:
        """
        Read and parse an INI file.

        Raises:
            IoFailure: If the file cannot be read or decoded
            IniSyntaxError, MisplacedEntry: If the content is invalid
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding=self.settings.encoding, newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailure(path, f"Cannot read INI file {path}: {e}") from e

        if not content.strip():
            self.logger.warning(f"INI file is empty: {path}")

        document = self.parse(content)
        self.logger.info(f"Loaded {len(document)} sections from {path}")
        return document

    def write(self, document: Document, path: Union[str, Path]) -> None:
        """
        Serialize a document and write it to a file.

        Raises:
            IoFailure: If the file cannot be written or encoded
        """
        path = Path(path)
        content = serialize(document)
        if content:
            content += '\n'

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding=document.settings.encoding) as f:
                f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise IoFailure(path, f"Cannot write INI file {path}: {e}") from e

        self.logger.info(f"Saved {len(document)} sections to {path}")


def loads(text: str, settings: Optional[TiniSettings] = None) -> Document:
    """
    Convenience function to parse INI text.

    Args:
        text: INI text
        settings: Optional engine settings

    Returns:
        Parsed Document
    """
    return IniParser(settings).parse(text)


def load(path: Union[str, Path], settings: Optional[TiniSettings] = None) -> Document:
    """Convenience function to read an INI file."""
    return IniParser(settings).read(path)


def dumps(document: Document) -> str:
    """Convenience function to render a document as INI text."""
    return serialize(document)


def dump(document: Document, path: Union[str, Path]) -> None:
    """Convenience function to write a document to an INI file."""
    IniParser(document.settings).write(document, path)
