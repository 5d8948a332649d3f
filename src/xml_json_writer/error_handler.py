"""Error handling implementation for the XML to JSON writer."""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union
from .models import Child, Document, Element, Text
from .naming import sanitize
from .types import (
    Convention,
    ValidationResult,
    ValidationError,
    InvalidInputError,
    ErrorType
)


class ErrorHandler:
    """
    Input validation for JSON writer operations.

    Walks a document tree before anything is written and reports every
    violation of the input contract, so that a broken tree never ends up
    as half-written or malformed JSON.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_document(self, node: Union[Document, Element],
                          convention: Optional[Convention] = None) -> ValidationResult:
        """
        Validate a document or element tree.

        Args:
            node: Document or root Element to validate
            convention: Optional convention the tree is about to be written
                with, enabling warnings about keys that would collide

        Returns:
            ValidationResult with validation details
        """
        errors: List[ValidationError] = []
        warnings: List[str] = []

        if isinstance(node, Document):
            root = node.root
        else:
            root = node

        if not isinstance(root, Element):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Document root must be an Element, got {type(root).__name__}",
                location="/"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Explicit stack, trees may nest deeper than the interpreter's recursion limit.
        pending: List[Tuple[Element, str]] = [(root, f"/{root.name}")]
        while pending:
            element, location = pending.pop()
            children = self._validate_element(element, location, convention, errors, warnings)
            pending.extend(reversed(children))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def check_document(self, node: Union[Document, Element],
                       convention: Optional[Convention] = None) -> ValidationResult:
        """
        Validate a tree and raise when it cannot be written.

        Raises:
            InvalidInputError: If the tree breaks the input contract
        """
        result = self.validate_document(node, convention)
        for warning in result.warnings:
            self.logger.warning(warning)

        if not result.is_valid:
            summary = "; ".join(
                f"{error.message} at {error.location}" for error in result.errors
            )
            self.logger.error(f"Invalid document tree: {summary}")
            raise InvalidInputError(f"Invalid document tree: {summary}", result.errors)
        return result

    def _validate_element(self, element: Element, location: str,
                          convention: Optional[Convention],
                          errors: List[ValidationError],
                          warnings: List[str]) -> List[Tuple[Element, str]]:
        """
        Validate one element without descending into its children.

        Returns:
            The child elements still to validate, with their locations
        """
        if not self._is_non_empty_string(element.name):
            errors.append(ValidationError(
                type=ErrorType.NAME,
                message="Element name must be a non-empty string",
                location=location
            ))

        attribute_keys: Dict[str, str] = {}
        for attribute in element.attributes:
            if not self._is_non_empty_string(attribute.name):
                errors.append(ValidationError(
                    type=ErrorType.NAME,
                    message="Attribute name must be a non-empty string",
                    location=f"{location}/@"
                ))
                continue
            if not isinstance(attribute.value, str):
                errors.append(ValidationError(
                    type=ErrorType.VALUE,
                    message=f"Attribute value must be a string, "
                            f"got {type(attribute.value).__name__}",
                    location=f"{location}/@{attribute.name}"
                ))
            if convention is not None:
                attribute_keys[convention.attribute_prefix + attribute.name] = attribute.name

        children: List[Tuple[Element, str]] = []
        seen: Dict[str, int] = {}
        raw_names: Dict[str, List[str]] = {}
        text_index = 0
        for node in element.content:
            if isinstance(node, Text):
                text_index += 1
                if not isinstance(node.value, str):
                    errors.append(ValidationError(
                        type=ErrorType.VALUE,
                        message=f"Text value must be a string, got {type(node.value).__name__}",
                        location=f"{location}/text()[{text_index}]"
                    ))
            elif isinstance(node, Child) and isinstance(node.element, Element):
                child = node.element
                seen[child.name] = seen.get(child.name, 0) + 1
                child_location = f"{location}/{child.name}"
                if seen[child.name] > 1:
                    child_location += f"[{seen[child.name]}]"

                if self._is_non_empty_string(child.name):
                    key = sanitize(child.name)
                    names = raw_names.setdefault(key, [])
                    if names and child.name not in names:
                        warnings.append(
                            f"Element names {names[0]!r} and {child.name!r} under {location} "
                            f"both map to key {key!r} and are grouped together"
                        )
                    if not names and key in attribute_keys:
                        warnings.append(
                            f"Attribute {attribute_keys[key]!r} and element {child.name!r} "
                            f"under {location} both map to key {key!r} "
                            f"in {convention.value} output"
                        )
                    if child.name not in names:
                        names.append(child.name)

                children.append((child, child_location))
            else:
                errors.append(ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Unsupported content node {type(node).__name__}",
                    location=location
                ))
        return children

    @staticmethod
    def _is_non_empty_string(value: Any) -> bool:
        return isinstance(value, str) and value != ""
