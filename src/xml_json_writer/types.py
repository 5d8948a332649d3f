"""Core type definitions for the XML to JSON writer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class Convention(Enum):
    """Enumeration of supported XML to JSON mapping conventions."""
    BASIC = "basic"
    RABBIT_FISH = "rabbit-fish"
    BADGER_FISH = "badger-fish"

    @property
    def attribute_prefix(self) -> str:
        """Prefix put in front of attribute names used as object keys."""
        return "" if self is Convention.BASIC else "@"

    @property
    def forces_object(self) -> bool:
        """Whether every element is written as an object, never a bare string."""
        return self is Convention.BADGER_FISH

    @property
    def wraps_array_text(self) -> bool:
        """Whether text entries of a mixed-content array are wrapped as objects."""
        return self is Convention.BADGER_FISH

    @classmethod
    def from_name(cls, name: str) -> "Convention":
        """
        Look up a convention by a loosely spelled name.

        Accepts the enum member name ("RABBIT_FISH"), its value
        ("rabbit-fish") and the unseparated form ("rabbitfish").

        Raises:
            ValueError: If the name matches no convention
        """
        key = name.strip().lower().replace("_", "").replace("-", "")
        for convention in cls:
            if convention.value.replace("-", "") == key:
                return convention
        choices = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown convention {name!r}, expected one of: {choices}")


class ContentShape(Enum):
    """Shape of the JSON value an element's content maps to."""
    TEXT = "text"
    OBJECT = "object"
    MIXED = "mixed"


class ErrorType(Enum):
    """Enumeration of error types."""
    NAME = "name"
    VALUE = "value"
    STRUCTURE = "structure"


# The text key is shared by every convention.
TEXT_KEY = "$"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class InvalidInputError(ProcessingError):
    """Raised when a document tree breaks the writer's input contract."""

    def __init__(self, message: str, errors: Optional[List[ValidationError]] = None):
        errors = errors or []
        error_type = errors[0].type if errors else ErrorType.STRUCTURE
        super().__init__(message, error_type, context=errors)
        self.errors = errors


class JSONWriterInterface(ABC):
    """Abstract interface for document to JSON writers."""

    @abstractmethod
    def write(self, node: Any) -> None:
        """Write a document or element as JSON to the underlying sink."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush the underlying sink."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the underlying sink."""
        pass
