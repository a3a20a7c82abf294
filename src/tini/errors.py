"""
Error taxonomy for the tini configuration engine.

Parse-time errors abort the whole parse. Query-time errors are raised per call
and never touch the document.
"""

from typing import Any, List, Optional


class TiniError(Exception):
    """Base class for every error raised by tini."""
    pass


class ParseError(TiniError):
    """Raised when a line cannot be accepted while assembling a document."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}: {line!r}"
        super().__init__(message)


class IniSyntaxError(ParseError):
    """A line that is neither blank, a comment, a section header nor an entry."""

    def __init__(self, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__("malformed line", line_number, line)


class MisplacedEntry(ParseError):
    """An entry appeared before any section header."""

    def __init__(self, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__("entry outside of any section", line_number, line)


class SectionNotFound(TiniError):
    """A lookup named a section the document does not have."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Section not found: [{section}]")


class KeyNotFound(TiniError):
    """A lookup named a key its section does not have."""

    def __init__(self, section: str, key: str):
        self.section = section
        self.key = key
        super().__init__(f"Key not found: [{section}] {key}")


class TypeMismatch(TiniError):
    """The requested type disagrees with the inferred type of a raw value."""

    def __init__(self, expected: Any, actual: Any, raw: str):
        self.expected = expected
        self.actual = actual
        self.raw = raw
        super().__init__(f"Expected {expected.value}, got {actual.value} for {raw!r}")


class HeterogeneousList(TiniError):
    """A list item disagrees with the requested item type."""

    def __init__(self, expected: Any, items: List[Any]):
        self.expected = expected
        self.items = items
        kinds = ", ".join(item.kind.value for item in items)
        super().__init__(f"Expected a list of {expected.value}, got [{kinds}]")


class IntegerOverflow(TiniError):
    """An integer literal does not fit in the configured signed width."""

    def __init__(self, raw: str, bits: int):
        self.raw = raw
        self.bits = bits
        super().__init__(f"Integer {raw!r} does not fit in {bits} bits")


class InvalidName(TiniError, ValueError):
    """A section name or key outside the identifier character set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid identifier: {name!r}")


class InvalidValue(TiniError, ValueError):
    """A raw value or list item that cannot be written and read back unchanged."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r}: {reason}")


class IoFailure(TiniError):
    """Reading or writing the underlying file failed. The OS error is the cause."""

    def __init__(self, path: Any, message: str):
        self.path = path
        super().__init__(message)


class SettingsError(TiniError):
    """Raised when engine settings cannot be loaded or validated."""
    pass
