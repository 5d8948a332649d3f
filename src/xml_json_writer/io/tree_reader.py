"""Builds document trees from ElementTree elements."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Tuple, Union
from ..models import Attribute, Child, Document, Element, Text

logger = logging.getLogger(__name__)


def _shallow_copy(node: ET.Element) -> Element:
    return Element(
        node.tag,
        attributes=[Attribute(name, value) for name, value in node.attrib.items()],
    )


def element_from_etree(node: ET.Element) -> Element:
    """
    Convert an ElementTree element into an Element.

    Leading text and the tail of every child become Text nodes in document
    order. Comments and processing instructions are skipped, their tails
    are kept. Namespaced tags keep ElementTree's ``{uri}local`` form.

    Args:
        node: ElementTree element

    Returns:
        Element with the same name, attributes and content
    """
    root = _shallow_copy(node)

    # Explicit stack, documents may nest deeper than the interpreter's recursion limit.
    pending: List[Tuple[ET.Element, Element]] = [(node, root)]
    while pending:
        source, element = pending.pop()
        if source.text:
            element.content.append(Text(source.text))

        for child in source:
            if isinstance(child.tag, str):
                converted = _shallow_copy(child)
                element.content.append(Child(converted))
                pending.append((child, converted))
            if child.tail:
                element.content.append(Text(child.tail))

    return root


def document_from_string(xml_text: Union[str, bytes]) -> Document:
    """Parse XML text into a Document."""
    return Document(element_from_etree(ET.fromstring(xml_text)))


def document_from_file(path: Union[str, Path], encoding: Optional[str] = None) -> Document:
    """
    Parse an XML file into a Document.

    Args:
        path: Path to the XML file
        encoding: Optional encoding overriding the XML declaration

    Raises:
        ET.ParseError: If the file is not well-formed XML
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.debug(f"Parsing XML file {path}")
    if encoding:
        parser = ET.XMLParser(encoding=encoding)
        tree = ET.parse(str(path), parser=parser)
    else:
        tree = ET.parse(str(path))
    return Document(element_from_etree(tree.getroot()))
