"""
Comma-list splitting and escaping.

A raw value is a list when it holds at least one unescaped separator. A
separator preceded by an odd run of backslashes is literal; the escaping
backslash is removed when splitting and added back when joining.
"""

import math
from typing import Any, Iterable, Iterator, List, Tuple

from ..errors import InvalidValue


SEPARATOR = ','
ESCAPE = '\\'
DEFAULT_JOINER = ', '


def _check_separator(sep: str) -> None:
    if not sep or ESCAPE in sep:
        raise ValueError(f"Invalid list separator: {sep!r}")


def _scan(raw: str, sep: str) -> Iterator[Tuple[str, bool]]:
    """Yield (item, closed) pairs; closed is False only for the tail."""
    _check_separator(sep)
    current: List[str] = []
    backslashes = 0
    index = 0
    while index < len(raw):
        if raw.startswith(sep, index):
            index += len(sep)
            if backslashes % 2:
                current[-1] = sep
                backslashes = 0
                continue
            yield ''.join(current).strip(), True
            current = []
            backslashes = 0
            continue
        char = raw[index]
        current.append(char)
        backslashes = backslashes + 1 if char == ESCAPE else 0
        index += 1
    yield ''.join(current).strip(), False


def split_items(raw: str, sep: str = SEPARATOR) -> List[str]:
    """
    Split a raw value into trimmed list items.

    Args:
        raw: Raw value as stored in the document
        sep: Item separator

    Returns:
        Items with escaping removed. A trailing empty item is dropped, so an
        empty raw value gives an empty list.
    """
    items = []
    for item, closed in _scan(raw, sep):
        if closed or item:
            items.append(item)
    return items


def is_list(raw: str, sep: str = SEPARATOR) -> bool:
    """Check whether raw holds at least one unescaped separator."""
    return any(closed for _, closed in _scan(raw, sep))


def escape_item(item: str, sep: str = SEPARATOR) -> str:
    """
    Escape literal separators in a single list item.

    Raises:
        InvalidValue: If the item would not read back unchanged
    """
    _check_separator(sep)
    if not item:
        raise InvalidValue(item, "empty list items cannot be written")
    if item != item.strip():
        raise InvalidValue(item, "list items cannot have surrounding whitespace")
    if '\n' in item or '\r' in item:
        raise InvalidValue(item, "list items must fit on one line")
    if item.endswith(ESCAPE) or ESCAPE + sep in item:
        raise InvalidValue(item, "a backslash cannot precede a separator")
    return item.replace(sep, ESCAPE + sep)


def format_scalar(value: Any) -> str:
    """Render a Python scalar the way the inferencer reads it back."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidValue(repr(value), "only finite floats can be written")
        return repr(value)
    if isinstance(value, (int, str)):
        return str(value)
    raise InvalidValue(repr(value), "only bool, int, float and str values can be written; use item_vec for lists")


def join_items(items: Iterable[Any], sep: str = SEPARATOR, joiner: str = DEFAULT_JOINER) -> str:
    """
    Join items into a raw list value, escaping literal separators.

    Args:
        items: Scalars or strings to join
        sep: Item separator the value will be split on
        joiner: Text placed between items; must contain sep

    Returns:
        Raw value that split_items turns back into the same items
    """
    if joiner.strip() != sep:
        raise ValueError(f"Joiner {joiner!r} does not match separator {sep!r}")
    return joiner.join(escape_item(format_scalar(item), sep) for item in items)
