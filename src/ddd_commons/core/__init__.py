"""Core building blocks of ddd-commons: exceptions, assertions and the DTO engine."""

from .assertions import AssertionConcern
from .dto import Access, Dto, Property, WeakDto

__all__ = [
    "AssertionConcern",
    "Access",
    "Dto",
    "Property",
    "WeakDto",
]
