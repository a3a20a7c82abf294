"""
Document model for tini.

A Document is an ordered collection of Sections, each an ordered mapping of
keys to raw string values. Typed access re-derives every value from its raw
string on each call; nothing is cached.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..errors import (
    HeterogeneousList,
    InvalidName,
    InvalidValue,
    KeyNotFound,
    SectionNotFound,
)
from ..tools.inference import coerce, infer
from ..tools.lists import SEPARATOR, split_items
from ..tools.serializer import serialize
from ..tools.tokenizer import is_identifier, strip_comment
from .settings import TiniSettings
from .values import TypedValue, ValueKind, kind_for_type


_UNSET = object()


def validate_identifier(name: str) -> str:
    """Return name unchanged if it is a valid section name or key."""
    if not isinstance(name, str) or not is_identifier(name):
        raise InvalidName(name)
    return name


def normalize_value(value: str) -> str:
    """Trim a raw value and make sure it reads back unchanged."""
    if not isinstance(value, str):
        raise InvalidValue(repr(value), "raw values must be strings")
    if '\n' in value or '\r' in value:
        raise InvalidValue(value, "values must fit on one line")
    if strip_comment(value) != value:
        raise InvalidValue(value, "unescaped ';' starts a comment")
    return value.strip()


class Section(BaseModel):
    """
    A named, ordered mapping of keys to raw values.

    Attributes:
        name: Section name, written as [name]
        entries: Raw values by key, in insertion order
    """

    name: str = Field(..., description="Section name")
    entries: Dict[str, str] = Field(default_factory=dict, description="Raw values by key")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the section name against the identifier character set."""
        if not is_identifier(v):
            raise ValueError(f"Invalid section name: {v!r}")
        return v

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a key. An overwritten key keeps its position."""
        self.entries[validate_identifier(key)] = normalize_value(value)

    def remove(self, key: str) -> bool:
        return self.entries.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self.entries)

    def values(self) -> List[str]:
        return list(self.entries.values())

    def items(self) -> List[Tuple[str, str]]:
        return list(self.entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return f"[{self.name}]"


class Document(BaseModel):
    """
    In-memory configuration document.

    Sections keep insertion order, which only matters for serialization.
    Every mutation goes through set() or add_section(), so the parser and the
    builder share one path for name and value validation.

    Attributes:
        section_map: Sections by name, in insertion order
        settings: Settings used for typed access and serialization
    """

    section_map: Dict[str, Section] = Field(default_factory=dict, description="Sections by name")
    settings: TiniSettings = Field(default_factory=TiniSettings, description="Engine settings")

    # --- mutation ---

    def add_section(self, name: str) -> Section:
        """Create a section, or return the existing one with that name."""
        section = self.section_map.get(validate_identifier(name))
        if section is None:
            section = Section(name=name)
            self.section_map[name] = section
        return section

    def set(self, section: str, key: str, value: str) -> None:
        """Set a raw value, creating the section if absent."""
        validate_identifier(key)
        value = normalize_value(value)
        self.add_section(section).set(key, value)

    def remove_section(self, name: str) -> bool:
        return self.section_map.pop(name, None) is not None

    def remove_key(self, section: str, key: str) -> bool:
        target = self.section_map.get(section)
        return target is not None and target.remove(key)

    # --- lookup and iteration ---

    def get_section(self, name: str) -> Optional[Section]:
        return self.section_map.get(name)

    def sections(self) -> List[Section]:
        """Sections in document order."""
        return list(self.section_map.values())

    def section_names(self) -> List[str]:
        return list(self.section_map)

    def items(self) -> Iterator[Tuple[str, Section]]:
        return iter(list(self.section_map.items()))

    def iter_section(self, name: str) -> Iterator[Tuple[str, str]]:
        """Iterate (key, raw value) pairs of one section."""
        section = self.section_map.get(name)
        if section is None:
            raise SectionNotFound(name)
        return iter(section.items())

    def __contains__(self, name: object) -> bool:
        return name in self.section_map

    def __len__(self) -> int:
        return len(self.section_map)

    # --- typed access ---

    def get_raw(self, section: str, key: str) -> str:
        """
        Get the raw string stored for a key.

        Raises:
            SectionNotFound: If the section does not exist
            KeyNotFound: If the key does not exist in the section
        """
        target = self.section_map.get(section)
        if target is None:
            raise SectionNotFound(section)
        raw = target.get(key)
        if raw is None:
            raise KeyNotFound(section, key)
        return raw

    def get(self, section: str, key: str, type_: type = str, *, fallback: Any = _UNSET) -> Any:
        """
        Get a scalar value converted to type_.

        Args:
            section: Section name
            key: Key within the section
            type_: One of bool, int, float, str
            fallback: Returned instead of raising when the section or key is missing

        Raises:
            SectionNotFound, KeyNotFound: If the value is missing and no fallback is given
            TypeMismatch: If the raw value is not of the requested kind
            IntegerOverflow: If an integer does not fit in settings.int_bits
        """
        try:
            raw = self.get_raw(section, key)
        except (SectionNotFound, KeyNotFound):
            if fallback is _UNSET:
                raise
            return fallback
        return coerce(raw, type_, self.settings.int_bits)

    def get_vec(self, section: str, key: str, type_: type = str, *,
                sep: str = SEPARATOR, fallback: Any = _UNSET) -> List[Any]:
        """
        Get a list value with every item converted to type_.

        A scalar raw value is a one-element list. Requesting str returns the
        trimmed items whatever kind they infer as.

        Raises:
            SectionNotFound, KeyNotFound: If the value is missing and no fallback is given
            HeterogeneousList: If any item is not of the requested kind
            IntegerOverflow: If an integer item does not fit in settings.int_bits
        """
        expected = kind_for_type(type_)
        try:
            raw = self.get_raw(section, key)
        except (SectionNotFound, KeyNotFound):
            if fallback is _UNSET:
                raise
            return fallback
        if expected is ValueKind.TEXT:
            return split_items(raw, sep)
        items = [infer(item, self.settings.int_bits) for item in split_items(raw, sep)]
        if any(item.kind is not expected for item in items):
            raise HeterogeneousList(expected, items)
        return [item.value for item in items]

    def get_value(self, section: str, key: str) -> TypedValue:
        """Infer a scalar value without requesting a type."""
        return infer(self.get_raw(section, key), self.settings.int_bits)

    def get_values(self, section: str, key: str, sep: str = SEPARATOR) -> List[TypedValue]:
        """Infer every list item without requesting a type."""
        raw = self.get_raw(section, key)
        return [infer(item, self.settings.int_bits) for item in split_items(raw, sep)]

    # --- conversion ---

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Convert to nested plain dictionaries, keeping order."""
        return {name: dict(section.entries) for name, section in self.section_map.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Any]], settings: Optional[TiniSettings] = None) -> 'Document':
        """Create a document from nested dictionaries of raw values."""
        document = cls(settings=settings or TiniSettings())
        for name, entries in data.items():
            document.add_section(name)
            for key, value in entries.items():
                document.set(name, key, value)
        return document

    def __str__(self) -> str:
        return serialize(self)
