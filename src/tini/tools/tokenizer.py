"""
Line classifier for the tini INI dialect.

Every input line is classified on its own as blank, section header, entry or
malformed. Comments start at the first unescaped ';' and run to end of line.
"""

import re
from enum import Enum
from typing import Optional
from dataclasses import dataclass


COMMENT = ';'
ESCAPE = '\\'

# letters, digits and _ . , : ( ) { } - # @ & * |
_IDENTIFIER = re.compile(r'[\w.,:(){}\-#@&*|]+')


class LineKind(Enum):
    """Classification of a single input line."""
    BLANK = "blank"
    SECTION = "section"
    ENTRY = "entry"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ParsedLine:
    """
    Result of classifying one line.

    Attributes:
        kind: Line classification
        line_number: 1-based position in the input (0 when unknown)
        text: The original line
        name: Section name for SECTION lines
        key: Entry key for ENTRY lines
        value: Trimmed raw value for ENTRY lines
    """
    kind: LineKind
    line_number: int
    text: str
    name: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None


def is_identifier(text: str) -> bool:
    """Check whether text is a valid section name or key."""
    return bool(text) and _IDENTIFIER.fullmatch(text) is not None


def strip_comment(line: str) -> str:
    """Drop everything from the first unescaped comment marker."""
    backslashes = 0
    for index, char in enumerate(line):
        if char == COMMENT and backslashes % 2 == 0:
            return line[:index]
        backslashes = backslashes + 1 if char == ESCAPE else 0
    return line


def classify_line(line: str, line_number: int = 0) -> ParsedLine:
    """
    Classify a single line of INI text.

    Args:
        line: The line without its trailing newline
        line_number: Position of the line in the input, used in errors

    Returns:
        ParsedLine describing the line
    """
    content = strip_comment(line).strip()

    if not content:
        return ParsedLine(LineKind.BLANK, line_number, line)

    if content.startswith('['):
        name = content[1:-1]
        if content.endswith(']') and is_identifier(name):
            return ParsedLine(LineKind.SECTION, line_number, line, name=name)
        return ParsedLine(LineKind.MALFORMED, line_number, line)

    if '=' in content:
        key, value = content.split('=', 1)
        key = key.strip()
        if is_identifier(key):
            return ParsedLine(LineKind.ENTRY, line_number, line, key=key, value=value.strip())

    return ParsedLine(LineKind.MALFORMED, line_number, line)
