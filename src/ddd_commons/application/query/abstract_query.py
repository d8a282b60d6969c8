"""Base class for read-side query objects.

A query is built from raw request parameters (usually strings) and
normalizes them into paging bounds, sort specs, field lists, a timezone
offset, a language and a couple of flags. All properties are read-only;
they are filled once by the non-public setters during construction.
Unknown request parameters are ignored.
"""

from typing import Any, ClassVar, Dict, List, Mapping, Optional

from ...config.settings import get_settings
from ...core.dto import Access, Property, WeakDto
from ...model.language import Language
from ..type_conversion import TypeConversionMixin

SORT_ASC = "ASC"
SORT_DESC = "DESC"


class AbstractQuery(WeakDto, TypeConversionMixin):
    """Base query with paging, sorting, field selection and localization."""

    DEFAULT_PAGE_SIZE: ClassVar[int] = 10
    DEFAULT_PAGE_MAX_SIZE: ClassVar[int] = 1000

    _page_max_size: ClassVar[Optional[int]] = None

    keyword = Property(Optional[str], access=Access.READ)
    limit = Property(Optional[int], access=Access.READ)
    offset = Property(Optional[int], access=Access.READ)
    page = Property(Optional[int], access=Access.READ)
    sort = Property(Optional[Dict[str, str]], access=Access.READ)
    group = Property(Optional[List[str]], access=Access.READ)
    fields = Property(Optional[List[str]], access=Access.READ)
    timezone = Property(
        Optional[int],
        access=Access.READ,
        doc="The desired timezone offset in minutes.",
    )
    language = Property(Optional[Language], access=Access.READ)
    without_count = Property(bool, access=Access.READ, default=False, alias="withoutCount")
    without_items = Property(bool, access=Access.READ, default=False, alias="withoutItems")

    def __init__(self, properties: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        super().__init__(properties, **kwargs)
        if self._limit is None:
            self._limit = self.get_default_page_size()

    @classmethod
    def get_default_page_size(cls) -> int:
        """Page size used when no usable limit is given.

        A subclass overriding DEFAULT_PAGE_SIZE wins over the settings.
        """
        for klass in cls.__mro__:
            if klass is AbstractQuery:
                break
            if "DEFAULT_PAGE_SIZE" in vars(klass):
                return klass.DEFAULT_PAGE_SIZE
        return get_settings().default_page_size

    @classmethod
    def get_page_max_size(cls) -> int:
        if cls._page_max_size is None:
            return get_settings().page_max_size
        return cls._page_max_size

    @classmethod
    def set_page_max_size(cls, size: int = DEFAULT_PAGE_MAX_SIZE) -> None:
        cls._page_max_size = size

    def contains_field(self, field: str) -> bool:
        """Return True if no fields were requested or ``field`` is among them."""
        return not self._fields or field in self._fields

    def contains_sort_field(self, field: str) -> bool:
        """Return True if ``field`` is part of the sort spec."""
        return bool(self._sort) and field in self._sort

    def uses_field(self, field: str) -> bool:
        """Return True if ``field`` is requested either as a regular or a sort field."""
        return self.contains_field(field) or self.contains_sort_field(field)

    @classmethod
    def _to_absolute_integer(cls, value: Any) -> Optional[int]:
        if not cls.is_numeric(value):
            return None
        number = cls.to_integer(value)
        return abs(number) if number is not None else None

    # Setters

    @keyword.setter
    def _set_keyword(self, keyword: Any) -> None:
        self._keyword = self.to_string_or_none(keyword)

    @limit.setter
    def _set_limit(self, limit: Any) -> None:
        size = self._to_absolute_integer(limit)
        self._limit = size if size is not None else self.get_default_page_size()

        if self._limit > self.get_page_max_size():
            self._limit = self.get_page_max_size()

    @offset.setter
    def _set_offset(self, offset: Any) -> None:
        self._offset = self._to_absolute_integer(offset)

    @page.setter
    def _set_page(self, page: Any) -> None:
        self._page = self._to_absolute_integer(page)

    @sort.setter
    def _set_sort(self, sort: Any) -> None:
        if not isinstance(sort, str) or sort == "":
            return

        items: Dict[str, str] = {}
        for item in sort.split(","):
            item = item.strip()
            if item == "":
                continue

            first = item[0]
            if first == "-":
                name, direction = item[1:].lstrip(), SORT_DESC
            elif first == "+":
                name, direction = item[1:].lstrip(), SORT_ASC
            else:
                name, direction = item, SORT_ASC

            if name:
                items[name] = direction

        self._sort = items or None

    @group.setter
    def _set_group(self, fields: Any) -> None:
        self._group = self.to_csv_list(fields)

    @fields.setter
    def _set_fields(self, fields: Any) -> None:
        self._fields = self.to_csv_list(fields)

    @timezone.setter
    def _set_timezone(self, timezone: Any) -> None:
        self._timezone = self.to_integer(timezone) if self.is_numeric(timezone) else None

    @language.setter
    def _set_language(self, language: Optional[str]) -> None:
        self._language = Language.from_code(language) if language is not None else None

    @without_count.setter
    def _set_without_count(self, flag: Any) -> None:
        self._without_count = self.to_boolean(flag)

    @without_items.setter
    def _set_without_items(self, flag: Any) -> None:
        self._without_items = self.to_boolean(flag)
