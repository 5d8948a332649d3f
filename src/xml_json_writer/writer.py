"""Document tree to JSON writer."""

import io
import logging
import sys
from typing import List, NamedTuple, Optional, TextIO, Tuple, Union
from .classifier import ContentClassifier
from .error_handler import ErrorHandler
from .escaping import quote
from .models import Child, Document, Element, Text
from .naming import sanitize
from .types import Convention, ContentShape, JSONWriterInterface, TEXT_KEY


class PendingElement(NamedTuple):
    """An element whose value is still to be written at the given depth."""
    element: Element
    depth: int


# A token is either literal JSON text or an element still to be expanded.
Token = Union[str, PendingElement]


class JSONWriter(JSONWriterInterface):
    """
    Writes document trees as JSON following one of the mapping conventions.

    The tree is walked depth-first and JSON text is written to the sink as
    the walk goes. Every convention goes through the same traversal; the
    Convention value only decides attribute key prefixes, whether elements
    are always objects, and how text inside mixed-content arrays is wrapped.
    """

    def __init__(self, out: Optional[TextIO] = None,
                 convention: Convention = Convention.BASIC,
                 indent: Optional[Union[int, str]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON writer.

        Args:
            out: Text sink with a write method (default: standard output)
            convention: Mapping convention to write with
            indent: Optional indentation (spaces or string) putting each
                entry on its own line
            logger: Optional logger instance
        """
        self.out = out if out is not None else sys.stdout
        self.convention = convention
        self.indent = " " * indent if isinstance(indent, int) else indent
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.classifier = ContentClassifier(self.logger)
        self._uses_default_sink = out is None

    def write(self, node: Union[Document, Element]) -> None:
        """
        Write a document or element as a single JSON object.

        The output is an object with one key, the sanitized root element
        name, mapped to the root element's value.

        Args:
            node: Document or root Element to write

        Raises:
            InvalidInputError: If the tree has empty element or attribute names
            OSError: Any failure of the sink, unchanged
        """
        self.error_handler.check_document(node, self.convention)
        root = node.root if isinstance(node, Document) else node

        self.logger.info(f"Writing element {root.name!r} as {self.convention.value} JSON")
        try:
            self._emit(self._object([(sanitize(root.name), [PendingElement(root, 1)])], 0))
        except Exception as e:
            self.logger.error(f"Failed to write JSON output: {e}")
            raise

    def flush(self) -> None:
        self.out.flush()

    def close(self) -> None:
        """Flush, and close the sink unless it is the default standard output."""
        if self._uses_default_sink:
            self.out.flush()
        else:
            self.out.close()

    def __enter__(self) -> "JSONWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _emit(self, tokens: List[Token]) -> None:
        """Write tokens in order, expanding pending elements in place."""
        # Explicit stack, trees may nest deeper than the interpreter's recursion limit.
        stack = list(reversed(tokens))
        while stack:
            token = stack.pop()
            if isinstance(token, PendingElement):
                stack.extend(reversed(self._element_tokens(token.element, token.depth)))
            else:
                self.out.write(token)

    def _element_tokens(self, element: Element, depth: int) -> List[Token]:
        """Tokens of the JSON value of an element, children left pending."""
        classification = self.classifier.classify(element)
        members = self._attribute_members(element)

        if classification.shape is ContentShape.TEXT:
            if not members and not self.convention.forces_object:
                return [quote(classification.text)]
            members.append((TEXT_KEY, [quote(classification.text)]))
            return self._object(members, depth)

        if classification.shape is ContentShape.OBJECT:
            for name, elements in classification.groups.items():
                members.append((name, self._group_tokens(elements, depth + 1)))
            return self._object(members, depth)

        if members:
            items = [self._mixed_item_tokens(node, depth + 2) for node in classification.nodes]
            members.append((TEXT_KEY, self._array(items, depth + 1)))
            return self._object(members, depth)
        items = [self._mixed_item_tokens(node, depth + 1) for node in classification.nodes]
        return self._array(items, depth)

    def _attribute_members(self, element: Element) -> List[Tuple[str, List[Token]]]:
        prefix = self.convention.attribute_prefix
        return [
            (prefix + attribute.name, [quote(attribute.value)])
            for attribute in element.attributes
        ]

    def _group_tokens(self, elements: List[Element], depth: int) -> List[Token]:
        if len(elements) == 1:
            return [PendingElement(elements[0], depth)]
        return self._array([[PendingElement(element, depth + 1)] for element in elements], depth)

    def _mixed_item_tokens(self, node: Union[Text, Child], depth: int) -> List[Token]:
        if isinstance(node, Text):
            if self.convention.wraps_array_text:
                return self._object([(TEXT_KEY, [quote(node.value)])], depth)
            return [quote(node.value)]

        element = node.element
        return self._object([(sanitize(element.name), [PendingElement(element, depth + 1)])], depth)

    def _object(self, members: List[Tuple[str, List[Token]]], depth: int) -> List[Token]:
        entries = [[f"{quote(key)}: "] + value for key, value in members]
        return self._container("{", "}", entries, depth)

    def _array(self, items: List[List[Token]], depth: int) -> List[Token]:
        return self._container("[", "]", items, depth)

    def _container(self, opening: str, closing: str,
                   entries: List[List[Token]], depth: int) -> List[Token]:
        if not entries:
            return [opening + closing]

        tokens: List[Token] = [opening]
        for index, entry in enumerate(entries):
            if index:
                tokens.append(",")
            tokens.append(self._break(depth + 1))
            tokens.extend(entry)
        tokens.append(self._break(depth))
        tokens.append(closing)
        return tokens

    def _break(self, depth: int) -> str:
        if self.indent is None:
            return " "
        return "\n" + self.indent * depth


def to_json(node: Union[Document, Element],
            convention: Convention = Convention.BASIC,
            indent: Optional[Union[int, str]] = None) -> str:
    """
    Convert a document or element to a JSON string.

    Args:
        node: Document or root Element to convert
        convention: Mapping convention to use
        indent: Optional indentation for multi-line output

    Returns:
        JSON text
    """
    buffer = io.StringIO()
    JSONWriter(buffer, convention=convention, indent=indent).write(node)
    return buffer.getvalue()
