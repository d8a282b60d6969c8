"""Argument exceptions raised while assigning property values."""

from typing import Optional

from .base import DddCommonsError


class InvalidArgumentError(DddCommonsError, ValueError):
    """Raised when a value supplied for a property is not acceptable."""
    pass


class TypeMismatchError(InvalidArgumentError):
    """Raised when a value cannot be coerced to the property's declared type."""

    def __init__(self, property_name: str, expected_type: str, actual_type: str):
        super().__init__(
            f'Property "{property_name}" must be of the type {expected_type}, {actual_type} given.',
            details={
                "property": property_name,
                "expected_type": expected_type,
                "actual_type": actual_type,
            },
        )
        self.property_name = property_name
        self.expected_type = expected_type
        self.actual_type = actual_type


class ValidationError(InvalidArgumentError):
    """Raised when a value violates a business rule declared by the type."""

    def __init__(self, message: str, property_name: Optional[str] = None):
        super().__init__(message, details={"property": property_name} if property_name else None)
        self.property_name = property_name
