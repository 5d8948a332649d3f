"""Pytest configuration and fixtures."""

import re
import pytest
import tempfile
from pathlib import Path
from xml_json_writer.models import Document, Element


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def normalize():
    """Collapse whitespace runs so outputs compare independent of layout."""
    def _normalize(text: str) -> str:
        return re.sub(r"\s+", " ", text.strip())
    return _normalize


@pytest.fixture
def nested_document():
    """<alice><bob>charlie</bob><david>edgar</david></alice>"""
    doc = Document.with_root("alice")
    doc.root.add_element("bob").set_text("charlie")
    doc.root.add_element("david").set_text("edgar")
    return doc


@pytest.fixture
def mixed_document():
    """<alice>bob<charlie>david</charlie>edgar</alice>"""
    doc = Document.with_root("alice")
    doc.root.add_text("bob")
    doc.root.add_element("charlie").set_text("david")
    doc.root.add_text("edgar")
    return doc


@pytest.fixture
def catalog_document():
    """A small catalog mixing attributes, repeated elements and mixed content."""
    catalog = Element("catalog")
    catalog.add_attribute("version", "2")
    for title, year in [("Dune", "1965"), ("Solaris", "1961")]:
        book = catalog.add_element("book")
        book.add_attribute("year", year)
        book.add_element("title").set_text(title)
    note = catalog.add_element("note")
    note.add_text("See ")
    note.add_element("ref").set_text("index")
    note.add_text(" for more.")
    return Document(catalog)


@pytest.fixture
def sample_xml_file(temp_dir):
    """Write a small XML file and return its path."""
    path = temp_dir / "sample.xml"
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<alice id="a1">\n'
        '  <bob>charlie</bob>\n'
        '  <bob>david</bob>\n'
        '</alice>\n',
        encoding="utf-8",
    )
    return path
