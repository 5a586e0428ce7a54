"""Formatter for RON (Rusty Object Notation) files"""
from __future__ import annotations

from importlib import metadata

from .builder import StructuralError
from .config import Config
from .core import format_text, parse
from .document import (
    Atom,
    Document,
    FieldsVariant,
    Item,
    List,
    Map,
    TupleVariant,
    Value,
)

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)

__all__ = (
    "Atom",
    "Config",
    "Document",
    "FieldsVariant",
    "Item",
    "List",
    "Map",
    "StructuralError",
    "TupleVariant",
    "Value",
    "format_text",
    "parse",
)
