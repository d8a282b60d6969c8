"""Application layer: service base class, collaborator protocols and queries."""

from .protocols import AsyncRunner, DomainEventPublisher, UnitOfWork
from .application_service import ApplicationService, ApplicationServiceContext
from .type_conversion import TypeConversionMixin
from .query import AbstractQuery

__all__ = [
    "AsyncRunner",
    "DomainEventPublisher",
    "UnitOfWork",
    "ApplicationService",
    "ApplicationServiceContext",
    "TypeConversionMixin",
    "AbstractQuery",
]
