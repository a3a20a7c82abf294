"""
Text-level tools for tini: line classification, value inference and lists.
"""

from .tokenizer import LineKind, ParsedLine, classify_line
from .inference import infer, coerce
from .lists import split_items, join_items, escape_item
