"""AST data model for Glyph source."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from glyphpy.text import TextRange


class ValueKind(StrEnum):
    PLAIN_STRING = "plain_string"
    INTERPOLATED_STRING = "interpolated_string"
    NUMBER = "number"
    PERCENTAGE = "percentage"
    IDENTIFIER = "identifier"


class Delimiter(StrEnum):
    """Delimiter pair used for an element body."""

    BRACE = "brace"
    PAREN = "paren"

    @property
    def open(self) -> str:
        return "{" if self is Delimiter.BRACE else "("

    @property
    def close(self) -> str:
        return "}" if self is Delimiter.BRACE else ")"


@dataclass(frozen=True, slots=True)
class PlainString:
    """`"text"`; the body is kept verbatim."""

    text: str
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class InterpolatedString:
    """`d"text"`; interpolation is left to the lowering stage, only the raw body is kept."""

    text: str
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Number:
    value: float
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Percentage:
    """`50%`; `value` holds the numeral without the percent sign."""

    value: float
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Identifier:
    """Bare word value such as `true` or the hyphenated `top-to-bottom`."""

    text: str
    range: TextRange | None = field(default=None, compare=False, repr=False)

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(self.text.split("-"))


@dataclass(frozen=True, slots=True)
class Property:
    name: str
    value: Value
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Element:
    """`@Kind name { ... }` with its properties and children in source order."""

    kind: str
    name: str
    properties: tuple[Property, ...] = ()
    children: tuple[Element, ...] = ()
    delimiter: Delimiter = field(default=Delimiter.BRACE, compare=False)
    range: TextRange | None = field(default=None, compare=False, repr=False)

    @property
    def is_empty(self) -> bool:
        return not self.properties and not self.children

    def get(self, name: str) -> Value | None:
        """Value of the last property called `name`, if any."""
        for prop in reversed(self.properties):
            if prop.name == name:
                return prop.value
        return None

    def property_map(self) -> dict[str, Value]:
        return {prop.name: prop.value for prop in self.properties}

    def property_multimap(self) -> dict[str, list[Value]]:
        result: dict[str, list[Value]] = {}
        for prop in self.properties:
            result.setdefault(prop.name, []).append(prop.value)
        return result


@dataclass(frozen=True, slots=True)
class Language:
    """Leading `@name value` or `@name value("url")` directive."""

    name: str
    value: str
    url: str | None = None
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Document:
    language: Language
    root: Element
    range: TextRange | None = field(default=None, compare=False, repr=False)


type Value = PlainString | InterpolatedString | Number | Percentage | Identifier
type BodyItem = Property | Element


def value_kind(value: Value) -> ValueKind:
    match value:
        case PlainString():
            return ValueKind.PLAIN_STRING
        case InterpolatedString():
            return ValueKind.INTERPOLATED_STRING
        case Number():
            return ValueKind.NUMBER
        case Percentage():
            return ValueKind.PERCENTAGE
        case Identifier():
            return ValueKind.IDENTIFIER
        case _:
            raise TypeError(f"Not a Glyph value: {value!r}")


def partition_items(items: list[BodyItem]) -> tuple[tuple[Property, ...], tuple[Element, ...]]:
    """Split a mixed body into properties and children, each keeping source order."""
    properties: list[Property] = []
    children: list[Element] = []
    for item in items:
        if isinstance(item, Property):
            properties.append(item)
        else:
            children.append(item)
    return tuple(properties), tuple(children)


__all__ = [
    "BodyItem",
    "Delimiter",
    "Document",
    "Element",
    "Identifier",
    "InterpolatedString",
    "Language",
    "Number",
    "Percentage",
    "PlainString",
    "Property",
    "Value",
    "ValueKind",
    "partition_items",
    "value_kind",
]
