"""Accessor resolution for DTO properties.

Every read and write of a DTO property is routed here. The precedence is
always the same: an explicit accessor method first, the backing field
second, an error third. Outside callers may only use public accessors and
only in the directions the property declares; the privileged paths used by
construction and serialization ignore both restrictions.
"""

from typing import Any, Optional

from ..exceptions import (
    PropertyHasNoAccessibleGetterError,
    PropertyHasNoAccessibleSetterError,
    PropertyNotConnectedToFieldError,
    PropertyNotReadableError,
    PropertyNotWritableError,
)
from .catalog import PropertyCatalog
from .coercion import TypeCoercer, get_type_coercer
from .descriptors import PropertyDescriptor, ReadMode, WriteMode


class AccessorResolver:
    """Routes property access of one DTO type through its catalog."""

    def __init__(self, catalog: PropertyCatalog, coercer: Optional[TypeCoercer] = None):
        self.catalog = catalog
        self.coercer = coercer or get_type_coercer()

    # Reads

    def read(self, instance: Any, name: str) -> Any:
        """Read a property on behalf of an outside caller.

        Raises:
            UnknownPropertyError: The property does not exist
            PropertyNotReadableError: The property is write-only
            PropertyHasNoAccessibleGetterError: The getter is not public
        """
        descriptor = self.catalog.require(name)

        if descriptor.read_mode is ReadMode.NONE:
            raise PropertyNotReadableError(name, self.catalog.owner_name)

        if descriptor.read_mode is ReadMode.GETTER:
            if not descriptor.getter_public:
                raise PropertyHasNoAccessibleGetterError(name, self.catalog.owner_name)
            return descriptor.getter(instance)

        return instance.__dict__[descriptor.field_name]

    def exists(self, instance: Any, name: str) -> bool:
        """Return True if the property reads as a non-None value.

        Goes through the outside read path, so it raises the same
        access errors as ``read``.
        """
        return self.read(instance, name) is not None

    def read_raw(self, instance: Any, descriptor: PropertyDescriptor) -> Any:
        """Read the stored value of a property, bypassing access control.

        The backing field wins; a virtual property is read through its getter
        whatever its visibility; a virtual property without getter reads as None.
        """
        if descriptor.has_backing_field:
            return instance.__dict__[descriptor.field_name]
        if descriptor.getter is not None:
            return descriptor.getter(instance)
        return None

    # Writes

    def write(self, instance: Any, name: str, value: Any) -> None:
        """Write a property on behalf of an outside caller.

        Raises:
            UnknownPropertyError: The property does not exist
            PropertyNotWritableError: The property is read-only
            PropertyHasNoAccessibleSetterError: The setter is not public
            TypeMismatchError: The value cannot be coerced
            ValidationError: The property's validator rejected the value
        """
        descriptor = self.catalog.require(name)

        if descriptor.write_mode is WriteMode.NONE:
            raise PropertyNotWritableError(name, self.catalog.owner_name)

        if descriptor.write_mode is WriteMode.SETTER and not descriptor.setter_public:
            raise PropertyHasNoAccessibleSetterError(name, self.catalog.owner_name)

        self._assign(instance, descriptor, value)

    def unset(self, instance: Any, name: str) -> None:
        """Reset a property to None through the outside write path."""
        self.write(instance, name, None)

    def initialize(self, instance: Any, name: str, value: Any) -> None:
        """Assign an initial value during construction.

        Declared write access and accessor visibility are ignored; a property
        with neither setter nor field cannot be initialized.

        Raises:
            PropertyNotConnectedToFieldError: No setter and no backing field
        """
        descriptor = self.catalog.require(name)

        if descriptor.setter is None and not descriptor.has_backing_field:
            raise PropertyNotConnectedToFieldError(name, self.catalog.owner_name)

        self._assign(instance, descriptor, value)

    def _assign(self, instance: Any, descriptor: PropertyDescriptor, value: Any) -> None:
        # Coercion failures short-circuit before storage and validation
        if descriptor.setter is not None:
            value = self.coercer.coerce(descriptor.name, value, descriptor.setter_type)
            descriptor.setter(instance, value)
        else:
            value = self.coercer.coerce(descriptor.name, value, descriptor.declared_type)
            instance.__dict__[descriptor.field_name] = value

        if descriptor.validator is not None:
            descriptor.validator(instance)
