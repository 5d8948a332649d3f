"""
XML JSON Writer - Document tree to JSON transcoding.

Writes element trees as JSON following the basic, Rabbitfish or
Badgerfish XML to JSON conventions.
"""

__version__ = "1.0.0"

from .escaping import escape
from .models import Attribute, Child, Document, Element, Text
from .naming import sanitize
from .types import Convention, InvalidInputError, ProcessingError
from .writer import JSONWriter, to_json

__all__ = [
    "JSONWriter",
    "to_json",
    "Convention",
    "Document",
    "Element",
    "Attribute",
    "Text",
    "Child",
    "sanitize",
    "escape",
    "InvalidInputError",
    "ProcessingError",
]
