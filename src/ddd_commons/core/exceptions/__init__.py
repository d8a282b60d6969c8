"""Exceptions module for ddd-commons.

This module provides the complete exception hierarchy for ddd-commons,
organized by property access, argument and serialization concerns.
"""

from .base import (
    DddCommonsError,
    create_error_response,
)

from .properties import (
    PropertyError,
    UnknownPropertyError,
    PropertyNotConnectedToFieldError,
    PropertyNotReadableError,
    PropertyNotWritableError,
    PropertyHasNoAccessibleGetterError,
    PropertyHasNoAccessibleSetterError,
)

from .validation import (
    InvalidArgumentError,
    TypeMismatchError,
    ValidationError,
)

from .serialization import (
    SerializationError,
    DeserializationError,
)

__all__ = [
    # Base
    "DddCommonsError",
    "create_error_response",

    # Property access
    "PropertyError",
    "UnknownPropertyError",
    "PropertyNotConnectedToFieldError",
    "PropertyNotReadableError",
    "PropertyNotWritableError",
    "PropertyHasNoAccessibleGetterError",
    "PropertyHasNoAccessibleSetterError",

    # Arguments
    "InvalidArgumentError",
    "TypeMismatchError",
    "ValidationError",

    # Serialization
    "SerializationError",
    "DeserializationError",
]
