"""
Typed value models for tini.

The document stores raw strings only. A TypedValue is produced on demand by
the inferencer and handed to the caller; it is never stored back.
"""

from typing import Union
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class ValueKind(Enum):
    """Scalar kinds, listed in inference precedence order."""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"


_KIND_BY_TYPE = {
    bool: ValueKind.BOOLEAN,
    int: ValueKind.INTEGER,
    float: ValueKind.FLOAT,
    str: ValueKind.TEXT,
}


def kind_for_type(python_type: type) -> ValueKind:
    """Map a requested Python type to the scalar kind it accepts."""
    try:
        return _KIND_BY_TYPE[python_type]
    except (KeyError, TypeError):
        raise TypeError(f"Unsupported value type: {python_type!r}") from None


class TypedValue(BaseModel):
    """
    A raw value after inference.

    Attributes:
        kind: The inferred scalar kind
        value: The converted Python value (bool, int, float or str)
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind = Field(..., description="Inferred scalar kind")
    value: Union[bool, int, float, str] = Field(..., description="Converted value")

    def is_a(self, python_type: type) -> bool:
        """Check whether this value satisfies a request for python_type."""
        return self.kind is kind_for_type(python_type)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.value!r})"
