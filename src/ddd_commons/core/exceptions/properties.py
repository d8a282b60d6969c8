"""Property access exceptions.

Raised by the DTO engine when a property does not exist, is not wired to a
field or accessor, or is closed for reading or writing.
"""

from typing import Optional

from .base import DddCommonsError


class PropertyError(DddCommonsError):
    """Base class for property access errors."""

    def __init__(self, message: str, property_name: str, owner: Optional[str] = None):
        super().__init__(
            message,
            details={"property": property_name, "owner": owner},
        )
        self.property_name = property_name
        self.owner = owner


class UnknownPropertyError(PropertyError):
    """Raised when a property name is not part of the type's catalog."""

    def __init__(self, property_name: str, owner: Optional[str] = None):
        super().__init__(f'Property "{property_name}" does not exist.', property_name, owner)


class PropertyNotConnectedToFieldError(PropertyError):
    """Raised when a declared property has neither a backing field nor an accessor.

    This signals a misconfigured type rather than a denied access.
    """

    def __init__(self, property_name: str, owner: Optional[str] = None):
        super().__init__(
            f'Property "{property_name}" is not connected with the appropriate class field.',
            property_name,
            owner,
        )


class PropertyNotReadableError(PropertyError):
    """Raised when reading a write-only property."""

    def __init__(self, property_name: str, owner: Optional[str] = None):
        super().__init__(f'Property "{property_name}" is not readable.', property_name, owner)


class PropertyNotWritableError(PropertyError):
    """Raised when writing a read-only property."""

    def __init__(self, property_name: str, owner: Optional[str] = None):
        super().__init__(f'Property "{property_name}" is not writable.', property_name, owner)


class PropertyHasNoAccessibleGetterError(PropertyError):
    """Raised when a readable property is routed through a getter nobody may call."""

    def __init__(self, property_name: str, owner: Optional[str] = None):
        super().__init__(
            f'Property "{property_name}" does not have accessible getter.',
            property_name,
            owner,
        )


class PropertyHasNoAccessibleSetterError(PropertyError):
    """Raised when a writable property is routed through a setter nobody may call."""

    def __init__(self, property_name: str, owner: Optional[str] = None):
        super().__init__(
            f'Property "{property_name}" does not have accessible setter.',
            property_name,
            owner,
        )
