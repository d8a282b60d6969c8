"""DTO engine: property declarations, catalogs, accessor resolution,
coercion and serialization."""

from .descriptors import (
    Access,
    Property,
    PropertyDescriptor,
    ReadMode,
    Visibility,
    WriteMode,
)
from .catalog import (
    CatalogRegistry,
    FieldSpec,
    PropertyCatalog,
    get_catalog,
    get_catalog_registry,
)
from .coercion import TypeCoercer, get_type_coercer
from .accessors import AccessorResolver
from .serialization import (
    DtoJSONEncoder,
    DtoSerializer,
    to_flat_dict,
    to_json,
    to_nested_dict,
    to_string,
)
from .base import Dto, WeakDto

__all__ = [
    # Declarations
    "Access",
    "Property",
    "PropertyDescriptor",
    "ReadMode",
    "Visibility",
    "WriteMode",

    # Catalog
    "CatalogRegistry",
    "FieldSpec",
    "PropertyCatalog",
    "get_catalog",
    "get_catalog_registry",

    # Access and coercion
    "AccessorResolver",
    "TypeCoercer",
    "get_type_coercer",

    # Serialization
    "DtoJSONEncoder",
    "DtoSerializer",
    "to_flat_dict",
    "to_json",
    "to_nested_dict",
    "to_string",

    # Base types
    "Dto",
    "WeakDto",
]
