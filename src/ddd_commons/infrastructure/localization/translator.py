"""Translation contract and an in-memory implementation."""

from abc import abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

Translation = Union[str, List[str]]


@runtime_checkable
class Translator(Protocol):
    """Looks up translated messages."""

    @abstractmethod
    def get(
        self,
        key: str,
        replacements: Optional[Mapping[str, str]] = None,
        locale: Optional[str] = None,
    ) -> Translation:
        """Get the translation for the given key.

        Args:
            key: The string to translate or its unique identifier
            replacements: Key-value pairs to replace ``:key`` placeholders with
            locale: Locale to translate into; the translator's default if None

        Returns:
            The translated string, or a list of strings for list entries
        """
        ...


class InMemoryTranslator:
    """Translator over per-locale nested dicts addressed by dotted keys.

    Example:
        translator = InMemoryTranslator({
            "en": {"users": {"greeting": "Hello, :name!"}},
        }, default_locale="en")
        translator.get("users.greeting", {"name": "Ann"})  # "Hello, Ann!"

    A key missing from both the requested and the fallback locale is
    returned unchanged.
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, Any]],
        default_locale: str,
        fallback_locale: Optional[str] = None,
    ):
        self._messages: Dict[str, Mapping[str, Any]] = dict(messages)
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale

    def get(
        self,
        key: str,
        replacements: Optional[Mapping[str, str]] = None,
        locale: Optional[str] = None,
    ) -> Translation:
        locales = [locale or self.default_locale]
        if self.fallback_locale and self.fallback_locale not in locales:
            locales.append(self.fallback_locale)

        for candidate in locales:
            value = self._lookup(candidate, key)
            if isinstance(value, str):
                return self._replace(value, replacements or {})
            if isinstance(value, list):
                return [self._replace(str(item), replacements or {}) for item in value]

        return key

    def _lookup(self, locale: str, key: str) -> Any:
        node: Any = self._messages.get(locale)
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    @staticmethod
    def _replace(message: str, replacements: Mapping[str, str]) -> str:
        # Longest first so ":name" does not clobber ":name_full"
        for name in sorted(replacements, key=len, reverse=True):
            message = message.replace(f":{name}", str(replacements[name]))
        return message
