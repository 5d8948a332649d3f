"""Document tree models read by the JSON writer."""

from .document import Attribute, Child, ContentNode, Document, Element, Text

__all__ = ["Attribute", "Child", "ContentNode", "Document", "Element", "Text"]
