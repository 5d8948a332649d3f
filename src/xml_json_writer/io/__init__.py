"""Reading document trees from XML sources."""

from .tree_reader import document_from_file, document_from_string, element_from_etree

__all__ = ["document_from_file", "document_from_string", "element_from_etree"]
