"""Tests for error handler."""

import logging
import pytest
from xml_json_writer.error_handler import ErrorHandler
from xml_json_writer.models import Attribute, Child, Document, Element, Text
from xml_json_writer.types import Convention, ErrorType, InvalidInputError, ProcessingError


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_valid_document(self, catalog_document):
        result = self.error_handler.validate_document(catalog_document)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_validate_element_without_document(self):
        assert self.error_handler.validate_document(Element("alice")).is_valid

    def test_empty_root_name(self):
        result = self.error_handler.validate_document(Document(Element("")))

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.NAME
        assert result.errors[0].location == "/"

    def test_empty_names_reported_with_location(self):
        root = Element("alice")
        root.add_element("bob")
        second = root.add_element("bob")
        second.add_element("")
        second.attributes.append(Attribute("", "x"))

        result = self.error_handler.validate_document(root)

        assert not result.is_valid
        locations = [error.location for error in result.errors]
        assert "/alice/bob[2]/@" in locations
        assert "/alice/bob[2]/" in locations
        assert all(error.type == ErrorType.NAME for error in result.errors)

    def test_non_string_values(self):
        root = Element("alice", attributes=[Attribute("id", 7)], content=[Text(None)])

        result = self.error_handler.validate_document(root)

        assert [error.type for error in result.errors] == [ErrorType.VALUE, ErrorType.VALUE]
        assert result.errors[0].location == "/alice/@id"
        assert result.errors[1].location == "/alice/text()[1]"

    def test_unsupported_content_node(self):
        root = Element("alice", content=["bob"])

        result = self.error_handler.validate_document(root)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE

    def test_root_must_be_element(self):
        result = self.error_handler.validate_document(Document("alice"))

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE

    def test_colliding_names_warned(self):
        root = Element("r", content=[Child(Element("a-b")), Child(Element("a_b"))])

        result = self.error_handler.validate_document(root)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "'a_b'" in result.warnings[0]

    def test_check_document_raises(self):
        with pytest.raises(InvalidInputError) as excinfo:
            self.error_handler.check_document(Element(""))

        assert isinstance(excinfo.value, ProcessingError)
        assert excinfo.value.context == excinfo.value.errors
        assert "Element name" in str(excinfo.value)

    def test_check_document_logs_warnings(self, caplog):
        root = Element("r", content=[Child(Element("a-b")), Child(Element("a_b"))])

        with caplog.at_level(logging.WARNING):
            result = self.error_handler.check_document(root)

        assert result.is_valid
        assert "grouped together" in caplog.text

    def test_attribute_and_element_key_collision_warned(self):
        """Test BASIC output warning when an attribute and a child share a key."""
        root = Element("alice", attributes=[Attribute("bob", "1")])
        root.add_element("bob").set_text("2")
        root.add_element("bob").set_text("3")

        basic = self.error_handler.validate_document(root, Convention.BASIC)
        rabbit = self.error_handler.validate_document(root, Convention.RABBIT_FISH)

        assert basic.is_valid
        assert len(basic.warnings) == 1
        assert "Attribute 'bob' and element 'bob'" in basic.warnings[0]
        assert rabbit.warnings == []
        assert self.error_handler.validate_document(root).warnings == []

    def test_deeply_nested_tree(self):
        """Test validation walking nesting far beyond the recursion limit."""
        root = Element("a")
        current = root
        for _ in range(2999):
            current = current.add_element("a")
        current.add_element("")

        result = self.error_handler.validate_document(root)

        assert not result.is_valid
        assert result.errors[0].location == "/a" * 3000 + "/"
