"""Base class for application services."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence, TypeVar

from .protocols import AsyncRunner, DomainEventPublisher, UnitOfWork

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ApplicationServiceContext:
    """Collaborators shared by application services."""

    async_runner: AsyncRunner
    unit_of_work: UnitOfWork
    event_publisher: DomainEventPublisher


class ApplicationService:
    """Base application service.

    Wires use cases to background execution, atomic execution and
    domain event publishing.
    """

    def __init__(self, context: ApplicationServiceContext):
        self._context = context

    @property
    def async_runner(self) -> AsyncRunner:
        return self._context.async_runner

    @property
    def unit_of_work(self) -> UnitOfWork:
        return self._context.unit_of_work

    @property
    def event_publisher(self) -> DomainEventPublisher:
        return self._context.event_publisher

    def run_async(self, callback: Callable[..., Any], params: Sequence[Any] = ()) -> None:
        """Schedule ``callback(*params)`` without waiting for it."""
        logger.debug(f"{type(self).__name__}: scheduling {getattr(callback, '__name__', callback)!r}")
        self.async_runner.run(callback, list(params))

    def execute_atomically(self, callback: Callable[[], T]) -> T:
        """Execute ``callback`` inside the unit of work and return its result."""
        return self.unit_of_work.execute(callback)
