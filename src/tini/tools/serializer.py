"""
Text serializer for tini documents.
"""

from typing import Any, List


def serialize_section(name: str, entries: Any, delimiter: str = " = ") -> str:
    """Render one section header followed by its entries."""
    lines = [f"[{name}]"]
    for key, value in entries:
        lines.append(f"{key}{delimiter}{value}")
    return "\n".join(lines)


def serialize(document: Any) -> str:
    """
    Render a document as INI text.

    Sections are written in document order, entries in insertion order, with
    settings.blank_lines blank lines between sections. Comments are not kept.

    Args:
        document: The Document to render

    Returns:
        INI text without a trailing newline
    """
    settings = document.settings
    blocks: List[str] = [
        serialize_section(section.name, section.items(), settings.delimiter)
        for section in document.sections()
    ]
    return ("\n" * (settings.blank_lines + 1)).join(blocks)
