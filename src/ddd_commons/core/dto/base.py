"""Data transfer object base types.

A DTO is a bag of properties whose reads and writes are individually access
controlled and optionally routed through accessor methods. Properties are
declared with ``Property`` in the class body; attribute syntax
(``dto.name``, ``dto.name = value``, ``del dto.name``) and the explicit
``get``/``set``/``has``/``unset`` methods share the same rules.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..assertions import AssertionConcern
from ..exceptions import DeserializationError, UnknownPropertyError
from .accessors import AccessorResolver
from .catalog import PropertyCatalog, get_catalog
from .serialization import (
    DtoSerializer,
    to_flat_dict,
    to_json,
    to_nested_dict,
    to_string,
)

logger = logging.getLogger(__name__)

D = TypeVar("D", bound="Dto")


class Dto(AssertionConcern):
    """Base data transfer object.

    Construction assigns every input key through the privileged write path,
    so read-only properties and non-public setters can be initialized.
    Unknown keys are rejected before anything is assigned.

    Args:
        properties: Mapping of property name (or alias) to initial value
        **kwargs: Additional initial values
    """

    __hash__ = None  # mutable

    def __init__(self, properties: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        data: Dict[str, Any] = dict(properties or {})
        data.update(kwargs)

        resolver = self._resolver()
        catalog = resolver.catalog

        for field in catalog.fields():
            self.__dict__[field.name] = field.initial_value()

        assignments = []
        for key, value in data.items():
            descriptor = catalog.resolve_key(key)
            if descriptor is None:
                self._handle_unknown_property(key)
                continue
            assignments.append((descriptor.name, value))

        for name, value in assignments:
            resolver.initialize(self, name, value)

    def _handle_unknown_property(self, key: str) -> None:
        raise UnknownPropertyError(key, type(self).__name__)

    @classmethod
    def _resolver(cls) -> AccessorResolver:
        return AccessorResolver(get_catalog(cls))

    @classmethod
    def catalog(cls) -> PropertyCatalog:
        """Get the property catalog of this type."""
        return get_catalog(cls)

    @classmethod
    def property_names(cls) -> List[str]:
        """Get the names of all properties in catalog order."""
        return get_catalog(cls).names()

    @classmethod
    def from_dict(cls: Type[D], data: Mapping[str, Any]) -> D:
        """Create a DTO from a mapping of initial values."""
        return cls(data)

    # Property access

    def get(self, name: str) -> Any:
        """Read a property through its public read route."""
        return self._resolver().read(self, name)

    def set(self, name: str, value: Any) -> None:
        """Write a property through its public write route."""
        self._resolver().write(self, name, value)

    def has(self, name: str) -> bool:
        """Return True if the property reads as a non-None value.

        Raises the same access errors as ``get``.
        """
        return self._resolver().exists(self, name)

    def unset(self, name: str) -> None:
        """Reset a property to None through its public write route."""
        self._resolver().unset(self, name)

    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dict of stored property values."""
        return to_flat_dict(self)

    def to_nested_dict(self) -> Dict[str, Any]:
        """Convert to a dict with nested DTOs converted recursively."""
        return to_nested_dict(self)

    def to_json(self, **kwargs: Any) -> str:
        """Convert to compact JSON text."""
        return to_json(self, **kwargs)

    def to_string(self) -> str:
        """Render a stable human readable dump."""
        return to_string(self)

    def serialize(self) -> bytes:
        """Serialize to an opaque byte form."""
        return DtoSerializer().serialize(self)

    @classmethod
    def deserialize(cls: Type[D], data: bytes) -> D:
        """Restore an instance produced by ``serialize`` without re-validating it."""
        instance = DtoSerializer().deserialize(data)
        if not isinstance(instance, cls):
            raise DeserializationError(
                f"Serialized data holds {type(instance).__name__}, expected {cls.__name__}",
                data_size=len(data),
            )
        return instance

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self.to_dict().items())
        return f"{type(self).__name__}({values})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dto):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()


class WeakDto(Dto):
    """DTO that ignores unknown keys in its construction input."""

    def _handle_unknown_property(self, key: str) -> None:
        logger.debug(f"Ignoring unknown property {key!r} for {type(self).__name__}")
