"""
Engine settings for tini.

These settings govern how documents are typed, read from disk and written
back. They can be loaded from a YAML file through tini.config.parser.
"""

from typing import Dict, Any
import codecs
from pydantic import BaseModel, Field, field_validator


SUPPORTED_INT_BITS = (8, 16, 32, 64, 128)


class TiniSettings(BaseModel):
    """
    Settings shared by the parser, the accessor layer and the serializer.

    Attributes:
        encoding: Text encoding used when reading and writing files
        int_bits: Width of the signed integer type used for integer values
        blank_lines: Number of blank lines written between sections
        delimiter: Text written between a key and its value
        list_joiner: Text written between list items
    """

    encoding: str = Field("utf-8", description="Text encoding for file I/O")
    int_bits: int = Field(64, description="Signed integer width in bits")
    blank_lines: int = Field(1, ge=0, le=10, description="Blank lines between sections")
    delimiter: str = Field(" = ", description="Text between a key and its value")
    list_joiner: str = Field(", ", description="Text between list items")

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings unknown to the codec registry."""
        try:
            return codecs.lookup(v).name
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")

    @field_validator('int_bits')
    @classmethod
    def validate_int_bits(cls, v: int) -> int:
        if v not in SUPPORTED_INT_BITS:
            raise ValueError(f"int_bits must be one of {SUPPORTED_INT_BITS}, got {v}")
        return v

    @field_validator('delimiter')
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if v.strip() != '=' or '\n' in v:
            raise ValueError(f"Delimiter must be '=' with optional spaces, got {v!r}")
        return v

    @field_validator('list_joiner')
    @classmethod
    def validate_list_joiner(cls, v: str) -> str:
        if v.strip() != ',' or '\n' in v:
            raise ValueError(f"List joiner must be ',' with optional spaces, got {v!r}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TiniSettings':
        """Create settings from a dictionary."""
        return cls.model_validate(data)
