"""Localization contracts and implementations."""

from .translator import InMemoryTranslator, Translation, Translator

__all__ = ["InMemoryTranslator", "Translation", "Translator"]
