"""AST consumer views built on top of canonical AST nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from glyphpy.ast.model import Element, Value


@dataclass(frozen=True, slots=True)
class ElementView:
    """Explicit consumer view over an `Element`."""

    element: Element

    @property
    def kind(self) -> str:
        return self.element.kind

    @property
    def name(self) -> str:
        return self.element.name

    def as_object(self) -> dict[str, Value]:
        return self.element.property_map()

    def as_multimap(self) -> dict[str, list[Value]]:
        return self.element.property_multimap()

    def get_value(self, name: str) -> Value | None:
        return self.element.get(name)

    def children_of_kind(self, kind: str) -> list[ElementView]:
        return [ElementView(child) for child in self.element.children if child.kind == kind]

    def child(self, name: str) -> ElementView | None:
        for candidate in self.element.children:
            if candidate.name == name:
                return ElementView(candidate)
        return None

    def descendants(self) -> Iterator[ElementView]:
        for element in iter_elements(self.element):
            if element is not self.element:
                yield ElementView(element)


def iter_elements(root: Element) -> Iterator[Element]:
    """Depth-first, pre-order walk over `root` and all nested children."""
    stack = [root]
    while stack:
        element = stack.pop()
        yield element
        stack.extend(reversed(element.children))


def find_element(root: Element, name: str) -> Element | None:
    for element in iter_elements(root):
        if element.name == name:
            return element
    return None


__all__ = ["ElementView", "find_element", "iter_elements"]
