"""Document tree model implementation."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union


@dataclass
class Attribute:
    """A named attribute value of an element."""

    name: str
    value: str


@dataclass
class Text:
    """A run of character data inside an element."""

    value: str


@dataclass
class Child:
    """A nested element inside an element."""

    element: "Element"


ContentNode = Union[Text, Child]


@dataclass
class Element:
    """
    An element of a document tree.

    Holds the element name, its attributes and its content nodes in
    document order. The builder methods mirror the usual tree APIs so
    trees can be assembled by hand in code and in tests.
    """

    name: str
    attributes: List[Attribute] = field(default_factory=list)
    content: List[ContentNode] = field(default_factory=list)

    def add_element(self, name: str) -> "Element":
        """
        Append a new child element and return it.

        Args:
            name: Name of the child element

        Returns:
            The newly created child Element
        """
        child = Element(name)
        self.content.append(Child(child))
        return child

    def add_text(self, value: str) -> "Element":
        """Append a text node."""
        self.content.append(Text(value))
        return self

    def set_text(self, value: str) -> "Element":
        """Replace all content with a single text node."""
        self.content = [Text(value)]
        return self

    def add_attribute(self, name: str, value: str) -> "Element":
        """Add an attribute, replacing the value of an existing one with the same name."""
        for attribute in self.attributes:
            if attribute.name == name:
                attribute.value = value
                return self
        self.attributes.append(Attribute(name, value))
        return self

    def attribute(self, name: str) -> Optional[str]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute.value
        return None

    def elements(self, name: Optional[str] = None) -> Iterator["Element"]:
        """Iterate over child elements, optionally only those with the given name."""
        for node in self.content:
            if isinstance(node, Child) and (name is None or node.element.name == name):
                yield node.element

    @property
    def text(self) -> str:
        """Concatenated value of the direct text nodes."""
        return "".join(node.value for node in self.content if isinstance(node, Text))


@dataclass
class Document:
    """A document holding exactly one root element."""

    root: Element

    @classmethod
    def with_root(cls, name: str) -> "Document":
        """Create a document with an empty root element of the given name."""
        return cls(Element(name))
