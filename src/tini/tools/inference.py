"""
Value inference for raw INI values.

A raw string is matched against an ordered rule table; the first rule that
matches decides the scalar kind. Anything no rule matches is text.
"""

import re
from typing import Any, Callable, List, Tuple

from ..errors import IntegerOverflow, TypeMismatch
from ..models.values import TypedValue, ValueKind, kind_for_type


DEFAULT_INT_BITS = 64
# 2**127 has 39 digits; longer literals overflow every supported width
MAX_INT_DIGITS = 39

BOOLEAN_PATTERN = re.compile(r'true|false')
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
FLOAT_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?')

# Order matters: 'true' is never text and a bare integer is never a float.
INFERENCE_RULES: List[Tuple[ValueKind, re.Pattern, Callable[[str], Any]]] = [
    (ValueKind.BOOLEAN, BOOLEAN_PATTERN, lambda s: s == 'true'),
    (ValueKind.INTEGER, INTEGER_PATTERN, int),
    (ValueKind.FLOAT, FLOAT_PATTERN, float),
]


def check_int_range(raw: str, value: int, int_bits: int) -> int:
    """Ensure value fits in a signed integer of int_bits."""
    half = 1 << (int_bits - 1)
    if not -half <= value < half:
        raise IntegerOverflow(raw, int_bits)
    return value


def infer(raw: str, int_bits: int = DEFAULT_INT_BITS) -> TypedValue:
    """
    Infer the scalar kind of a raw value and convert it.

    Args:
        raw: Raw value or list item
        int_bits: Width of the signed integer type

    Returns:
        TypedValue holding the kind and converted value

    Raises:
        IntegerOverflow: If an integer literal does not fit in int_bits
    """
    text = raw.strip()
    for kind, pattern, convert in INFERENCE_RULES:
        if pattern.fullmatch(text):
            if kind is ValueKind.INTEGER and len(text.lstrip('+-').lstrip('0')) > MAX_INT_DIGITS:
                raise IntegerOverflow(text, int_bits)
            value = convert(text)
            if kind is ValueKind.INTEGER:
                value = check_int_range(text, value, int_bits)
            return TypedValue(kind=kind, value=value)
    return TypedValue(kind=ValueKind.TEXT, value=text)


def coerce(raw: str, python_type: type, int_bits: int = DEFAULT_INT_BITS) -> Any:
    """
    Convert a raw value to python_type.

    Every value can be read as text, which returns the trimmed raw string.
    Booleans, integers and floats must match the inferred kind exactly.

    Raises:
        TypeMismatch: If the inferred kind is not the requested one
        IntegerOverflow: If an integer literal does not fit in int_bits
        TypeError: If python_type is not bool, int, float or str
    """
    expected = kind_for_type(python_type)
    if expected is ValueKind.TEXT:
        return raw.strip()
    typed = infer(raw, int_bits)
    if typed.kind is not expected:
        raise TypeMismatch(expected, typed.kind, raw)
    return typed.value
