"""Property declarations for DTO types.

A DTO type lists its accessible properties explicitly in the class body::

    class UserDto(Dto):
        name = Property(str)
        email = Property(str, access=Access.READ)
        password = Property(str, access=Access.WRITE)
        full_name = Property(access=Access.READ, field=None)

        @full_name.getter
        def get_full_name(self) -> str:
            return self._name.title()

        @password.validator
        def _validate_password(self) -> None:
            self.assert_argument_length(self._password, 8, 64, "Password length is invalid.")

Each ``Property`` is backed by the instance attribute ``_<name>`` unless
``field`` says otherwise; ``field=None`` declares a virtual property that only
exists through its accessors. Accessor methods whose name starts with an
underscore are non-public: the engine uses them while constructing and
serializing an object, never for outside reads or writes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

_DEFAULT_FIELD = object()


class Access(str, Enum):
    """Documented access of a property."""
    READ_WRITE = "read_write"
    READ = "read"
    WRITE = "write"

    @property
    def readable(self) -> bool:
        return self is not Access.WRITE

    @property
    def writable(self) -> bool:
        return self is not Access.READ


class ReadMode(str, Enum):
    """How an outside read reaches a property's value."""
    NONE = "none"
    DIRECT = "direct"
    GETTER = "getter"


class WriteMode(str, Enum):
    """How an outside write reaches a property's value."""
    NONE = "none"
    DIRECT = "direct"
    SETTER = "setter"


class Visibility(str, Enum):
    """Visibility class of a backing field, following Python naming conventions."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def of(cls, name: Optional[str]) -> "Visibility":
        """Derive visibility from an attribute name."""
        if not name or not name.startswith("_"):
            return cls.PUBLIC
        if name.startswith("__") and not name.endswith("__"):
            return cls.PRIVATE
        return cls.PROTECTED


def is_public_name(name: str) -> bool:
    """Return True if an accessor name may be called from outside the object."""
    return not name.startswith("_")


@dataclass(frozen=True)
class PropertyDescriptor:
    """Computed, immutable metadata of one property of one DTO type."""

    name: str
    field_name: Optional[str]
    has_backing_field: bool
    declared_type: Any
    read_mode: ReadMode
    write_mode: WriteMode
    visibility: Visibility
    alias: Optional[str] = None
    getter: Optional[Callable[..., Any]] = None
    getter_public: bool = False
    setter: Optional[Callable[..., Any]] = None
    setter_public: bool = False
    setter_type: Any = None
    validator: Optional[Callable[[Any], Any]] = None

    @property
    def is_virtual(self) -> bool:
        return not self.has_backing_field

    @property
    def readable(self) -> bool:
        return self.read_mode is not ReadMode.NONE

    @property
    def writable(self) -> bool:
        return self.write_mode is not WriteMode.NONE


class Property:
    """Declares an accessible property on a DTO type.

    Args:
        type_: Declared type; direct field writes are coerced to it (None = no coercion).
            When a setter is registered, values are coerced to the annotation of the
            setter's value parameter instead and this type is not used; an
            unannotated setter receives values as given.
        default: Initial field value; unhashable (mutable) values are rejected,
            use default_factory for them
        default_factory: Callable producing the initial field value
        access: Documented access (read/write, read-only, write-only)
        field: Backing attribute name; None for a virtual property
        getter: Name of the getter method
        setter: Name of the setter method
        validator: Name of a validation method, or a callable taking the DTO
        alias: Alternative key accepted in construction input
        doc: Human readable description
    """

    def __init__(
        self,
        type_: Any = None,
        *,
        default: Any = None,
        default_factory: Optional[Callable[[], Any]] = None,
        access: Access = Access.READ_WRITE,
        field: Any = _DEFAULT_FIELD,
        getter: Optional[str] = None,
        setter: Optional[str] = None,
        validator: Union[str, Callable[[Any], Any], None] = None,
        alias: Optional[str] = None,
        doc: Optional[str] = None,
    ):
        if default is not None and default_factory is not None:
            raise ValueError("Cannot specify both default and default_factory")
        if default is not None and type(default).__hash__ is None:
            raise ValueError(
                f"Mutable default {type(default).__name__} is not allowed, use default_factory"
            )

        self.name: Optional[str] = None
        self.type = type_
        self.default = default
        self.default_factory = default_factory
        self.access = Access(access)
        self._field = field
        self.getter_name = getter
        self.setter_name = setter
        self.validator_ref = validator
        self.alias = alias
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @property
    def field_name(self) -> Optional[str]:
        if self._field is _DEFAULT_FIELD:
            return f"_{self.name}" if self.name else None
        return self._field

    # Accessor registration

    def getter(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``func`` as this property's getter."""
        self.getter_name = func.__name__
        return func

    def setter(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``func`` as this property's setter."""
        self.setter_name = func.__name__
        return func

    def validator(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``func`` as this property's validation hook."""
        self.validator_ref = func.__name__
        return func

    # Descriptor protocol

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.set(self.name, value)

    def __delete__(self, instance: Any) -> None:
        instance.unset(self.name)

    def __repr__(self) -> str:
        return f"Property(name={self.name!r}, type={self.type!r}, access={self.access.value})"
