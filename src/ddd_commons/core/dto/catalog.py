"""Property catalogs for DTO types.

A catalog is the ordered, read-only set of property descriptors of one
concrete DTO type plus the table of backing fields its instances own. It is
built lazily on first use and cached for the life of the process.
"""

import inspect
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..exceptions import (
    PropertyHasNoAccessibleGetterError,
    PropertyHasNoAccessibleSetterError,
    PropertyNotConnectedToFieldError,
    UnknownPropertyError,
)
from .descriptors import (
    Property,
    PropertyDescriptor,
    ReadMode,
    Visibility,
    WriteMode,
    is_public_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """A backing field owned by every instance of a DTO type."""

    name: str
    default: Any = None
    default_factory: Optional[Callable[[], Any]] = None

    def initial_value(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


def _setter_value_type(setter: Callable[..., Any]) -> Any:
    """Return the annotation of a setter's value parameter, or None.

    Annotations that cannot be evaluated at runtime (names imported only under
    ``TYPE_CHECKING``) disable coercion for that setter.
    """
    try:
        signature = inspect.signature(setter, eval_str=True)
    except NameError as e:
        logger.debug(f"Unresolvable annotation on {setter.__qualname__}, coercion disabled: {e}")
        return None
    parameters = list(signature.parameters.values())
    if len(parameters) < 2:
        return None
    annotation = parameters[1].annotation
    if annotation is inspect.Parameter.empty or annotation is Any:
        return None
    return annotation


class PropertyCatalog:
    """Ordered property descriptors and backing fields of one DTO type."""

    def __init__(
        self,
        owner: type,
        descriptors: List[PropertyDescriptor],
        fields: List[FieldSpec],
    ):
        self.owner = owner
        self._descriptors: Dict[str, PropertyDescriptor] = {d.name: d for d in descriptors}
        self._aliases: Dict[str, str] = {d.alias: d.name for d in descriptors if d.alias}
        self._fields: Tuple[FieldSpec, ...] = tuple(fields)

    @property
    def owner_name(self) -> str:
        return self.owner.__name__

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __iter__(self) -> Iterator[PropertyDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)

    def names(self) -> List[str]:
        return list(self._descriptors)

    def fields(self) -> Tuple[FieldSpec, ...]:
        return self._fields

    def get(self, name: str) -> Optional[PropertyDescriptor]:
        return self._descriptors.get(name)

    def require(self, name: str) -> PropertyDescriptor:
        """Return the descriptor for ``name`` or raise UnknownPropertyError."""
        descriptor = self._descriptors.get(name)
        if descriptor is None:
            raise UnknownPropertyError(name, self.owner_name)
        return descriptor

    def resolve_key(self, key: str) -> Optional[PropertyDescriptor]:
        """Resolve an input key (property name or alias) to its descriptor."""
        descriptor = self._descriptors.get(key)
        if descriptor is None and key in self._aliases:
            descriptor = self._descriptors[self._aliases[key]]
        return descriptor

    @classmethod
    def build(cls, owner: type) -> "PropertyCatalog":
        """Build the catalog of ``owner`` from its Property declarations.

        Raises:
            PropertyNotConnectedToFieldError: a property has no route to a value
            PropertyHasNoAccessibleGetterError: a declared getter does not exist
            PropertyHasNoAccessibleSetterError: a declared setter does not exist
        """
        declarations: Dict[str, Property] = {}
        for klass in reversed(owner.__mro__):
            for attr_name, value in vars(klass).items():
                if isinstance(value, Property):
                    declarations[attr_name] = value

        fields: Dict[str, FieldSpec] = {}
        descriptors: List[PropertyDescriptor] = []
        for name, declaration in declarations.items():
            field_name = declaration.field_name
            if field_name is not None and field_name not in fields:
                fields[field_name] = FieldSpec(
                    name=field_name,
                    default=declaration.default,
                    default_factory=declaration.default_factory,
                )
            descriptors.append(cls._describe(owner, name, declaration))

        return cls(owner, descriptors, list(fields.values()))

    @staticmethod
    def _describe(owner: type, name: str, declaration: Property) -> PropertyDescriptor:
        owner_name = owner.__name__
        field_name = declaration.field_name
        has_field = field_name is not None

        getter = None
        if declaration.getter_name:
            getter = getattr(owner, declaration.getter_name, None)
            if not callable(getter):
                raise PropertyHasNoAccessibleGetterError(name, owner_name)

        setter = None
        if declaration.setter_name:
            setter = getattr(owner, declaration.setter_name, None)
            if not callable(setter):
                raise PropertyHasNoAccessibleSetterError(name, owner_name)

        if not has_field and getter is None and setter is None:
            raise PropertyNotConnectedToFieldError(name, owner_name)

        if not declaration.access.readable:
            read_mode = ReadMode.NONE
        elif getter is not None:
            read_mode = ReadMode.GETTER
        elif has_field:
            read_mode = ReadMode.DIRECT
        else:
            raise PropertyNotConnectedToFieldError(name, owner_name)

        if not declaration.access.writable:
            write_mode = WriteMode.NONE
        elif setter is not None:
            write_mode = WriteMode.SETTER
        elif has_field:
            write_mode = WriteMode.DIRECT
        else:
            raise PropertyNotConnectedToFieldError(name, owner_name)

        validator = declaration.validator_ref
        if isinstance(validator, str):
            resolved = getattr(owner, validator, None)
            if not callable(resolved):
                raise PropertyNotConnectedToFieldError(name, owner_name)
            validator = resolved

        return PropertyDescriptor(
            name=name,
            field_name=field_name,
            has_backing_field=has_field,
            declared_type=declaration.type,
            read_mode=read_mode,
            write_mode=write_mode,
            visibility=Visibility.of(field_name),
            alias=declaration.alias,
            getter=getter,
            getter_public=getter is not None and is_public_name(declaration.getter_name),
            setter=setter,
            setter_public=setter is not None and is_public_name(declaration.setter_name),
            setter_type=_setter_value_type(setter) if setter is not None else None,
            validator=validator,
        )


class CatalogRegistry:
    """Process-wide cache of property catalogs keyed by concrete type.

    Catalogs are built at most once per type; concurrent first touches are
    serialized by a lock, later lookups are lock-free. Failed builds are not
    cached so the defect is reported on every use.
    """

    def __init__(self):
        self._catalogs: Dict[type, PropertyCatalog] = {}
        self._lock = Lock()

    def get(self, owner: type) -> PropertyCatalog:
        catalog = self._catalogs.get(owner)
        if catalog is not None:
            return catalog

        with self._lock:
            catalog = self._catalogs.get(owner)
            if catalog is None:
                catalog = PropertyCatalog.build(owner)
                self._catalogs[owner] = catalog
                logger.debug(
                    f"Built property catalog for {owner.__qualname__} "
                    f"with {len(catalog)} properties"
                )
        return catalog

    def __contains__(self, owner: object) -> bool:
        return owner in self._catalogs

    def clear(self) -> None:
        """Drop all cached catalogs (primarily for testing)."""
        with self._lock:
            self._catalogs.clear()


# Global registry instance
_registry = CatalogRegistry()


def get_catalog_registry() -> CatalogRegistry:
    """Get global catalog registry instance."""
    return _registry


def get_catalog(owner: type) -> PropertyCatalog:
    """Get the property catalog of a DTO type."""
    return _registry.get(owner)
