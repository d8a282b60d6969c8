"""DDD-Commons - Base classes for Domain-Driven-Design applications.

This library provides data transfer objects with access-controlled
properties, query objects built on them, and a thin application service
base wired to background execution, units of work and domain events.
"""

from .__version__ import __version__

from .config import (
    DddCommonsSettings,
    get_settings,
    setup_logging,
)

from .core.exceptions import (
    # Base Exception
    DddCommonsError,

    # Property access
    PropertyError,
    UnknownPropertyError,
    PropertyNotConnectedToFieldError,
    PropertyNotReadableError,
    PropertyNotWritableError,
    PropertyHasNoAccessibleGetterError,
    PropertyHasNoAccessibleSetterError,

    # Arguments
    InvalidArgumentError,
    TypeMismatchError,
    ValidationError,

    # Utility Functions
    create_error_response,
)

from .core.dto import (
    Access,
    Dto,
    DtoSerializer,
    Property,
    WeakDto,
)

from .application import (
    AbstractQuery,
    ApplicationService,
    ApplicationServiceContext,
)

from .model import Language

__all__ = [
    "__version__",

    # Configuration
    "DddCommonsSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "DddCommonsError",
    "PropertyError",
    "UnknownPropertyError",
    "PropertyNotConnectedToFieldError",
    "PropertyNotReadableError",
    "PropertyNotWritableError",
    "PropertyHasNoAccessibleGetterError",
    "PropertyHasNoAccessibleSetterError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "ValidationError",
    "create_error_response",

    # DTO engine
    "Access",
    "Dto",
    "DtoSerializer",
    "Property",
    "WeakDto",

    # Application
    "AbstractQuery",
    "ApplicationService",
    "ApplicationServiceContext",

    # Model
    "Language",
]
