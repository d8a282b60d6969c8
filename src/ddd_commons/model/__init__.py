"""Domain model value objects shared by services."""

from .language import Language

__all__ = ["Language"]
