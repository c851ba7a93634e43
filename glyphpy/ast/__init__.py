"""Typed AST for Glyph documents."""

from glyphpy.ast.model import (
    BodyItem,
    Delimiter,
    Document,
    Element,
    Identifier,
    InterpolatedString,
    Language,
    Number,
    Percentage,
    PlainString,
    Property,
    Value,
    ValueKind,
    partition_items,
    value_kind,
)
from glyphpy.ast.views import ElementView, find_element, iter_elements

__all__ = [
    "BodyItem",
    "Delimiter",
    "Document",
    "Element",
    "ElementView",
    "Identifier",
    "InterpolatedString",
    "Language",
    "Number",
    "Percentage",
    "PlainString",
    "Property",
    "Value",
    "ValueKind",
    "find_element",
    "iter_elements",
    "partition_items",
    "value_kind",
]
