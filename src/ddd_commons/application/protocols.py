"""Application protocols for ddd-commons.

Contracts of the collaborators an application service works with. They are
injected explicitly; nothing in the library looks them up globally.
"""

from abc import abstractmethod
from typing import Any, Callable, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class AsyncRunner(Protocol):
    """Schedules work to run outside the caller's flow."""

    @abstractmethod
    def run(self, callback: Callable[..., Any], params: Sequence[Any] = ()) -> None:
        """Schedule ``callback(*params)``; the result is never observed."""
        ...


@runtime_checkable
class UnitOfWork(Protocol):
    """Executes a callback atomically."""

    @abstractmethod
    def execute(self, callback: Callable[[], T]) -> T:
        """Run ``callback`` so its effects are all-or-nothing and return its result."""
        ...


@runtime_checkable
class DomainEventPublisher(Protocol):
    """Dispatches domain events to their subscribers."""

    @abstractmethod
    def publish(self, event: Any) -> None:
        """Publish a domain event."""
        ...
