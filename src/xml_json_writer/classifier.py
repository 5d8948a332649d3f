"""Content classification deciding the JSON shape of an element."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from .models import Child, ContentNode, Element, Text
from .naming import sanitize
from .types import ContentShape


@dataclass
class Classification:
    """Result of classifying an element's content."""
    shape: ContentShape
    nodes: List[ContentNode]
    text: str = ""
    groups: Dict[str, List[Element]] = field(default_factory=dict)
    has_attributes: bool = False


class ContentClassifier:
    """
    Classifier for element content.

    Applies the whitespace rules to an element's content nodes and decides
    whether the element maps to a single text value, an object of named
    child groups, or a mixed-content array.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, element: Element) -> Classification:
        """
        Classify the content of an element.

        Args:
            element: Element to classify

        Returns:
            Classification with the shape and the significant content nodes
        """
        nodes = self.significant_nodes(element.content)
        texts = [node for node in nodes if isinstance(node, Text)]
        child_count = len(nodes) - len(texts)

        if child_count == 0 and len(texts) <= 1:
            shape = ContentShape.TEXT
        elif not texts:
            shape = ContentShape.OBJECT
        else:
            shape = ContentShape.MIXED

        classification = Classification(
            shape=shape,
            nodes=nodes,
            text=texts[0].value if shape is ContentShape.TEXT and texts else "",
            groups=self.group_children(nodes) if shape is ContentShape.OBJECT else {},
            has_attributes=bool(element.attributes),
        )
        self.logger.debug(f"Element {element.name!r} classified as {shape.value} "
                          f"({len(texts)} text, {child_count} element nodes)")
        return classification

    @staticmethod
    def significant_nodes(content: List[ContentNode]) -> List[ContentNode]:
        """
        Drop whitespace-only text and trim the remaining text nodes.

        A text node that is the only content of its element is kept even
        when it trims to an empty string.
        """
        if len(content) == 1 and isinstance(content[0], Text):
            return [Text(content[0].value.strip())]

        nodes: List[ContentNode] = []
        for node in content:
            if isinstance(node, Text):
                value = node.value.strip()
                if value:
                    nodes.append(Text(value))
            else:
                nodes.append(node)
        return nodes

    @staticmethod
    def group_children(nodes: List[ContentNode]) -> Dict[str, List[Element]]:
        """
        Group child elements by sanitized name in first-occurrence order.

        Raw names that sanitize to the same key share one group.
        """
        groups: Dict[str, List[Element]] = {}
        for node in nodes:
            if isinstance(node, Child):
                groups.setdefault(sanitize(node.element.name), []).append(node.element)
        return groups
