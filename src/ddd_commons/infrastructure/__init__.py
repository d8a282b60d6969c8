"""Infrastructure implementations of application collaborators."""

from .async_runner import ThreadPoolAsyncRunner
from .events import PublisherMetrics, SimpleDomainEventPublisher
from .localization import InMemoryTranslator, Translator

__all__ = [
    "ThreadPoolAsyncRunner",
    "PublisherMetrics",
    "SimpleDomainEventPublisher",
    "InMemoryTranslator",
    "Translator",
]
