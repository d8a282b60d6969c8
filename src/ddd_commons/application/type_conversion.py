"""Loose conversions for raw request input.

Query strings and form posts deliver everything as text; these helpers turn
such input into numbers, flags and lists without raising.
"""

import math
import re
from typing import Any, List, Optional

NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
TRUE_VALUES = frozenset({"true", "1", "on"})


class TypeConversionMixin:
    """Mixin with conversions for raw scalar input."""

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """Return True for ints, floats and numeric strings; bools are not numeric."""
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return True
        if isinstance(value, str):
            return NUMERIC_PATTERN.match(value) is not None
        return False

    @classmethod
    def to_integer(cls, value: Any, default: Optional[int] = None) -> Optional[int]:
        """Convert numeric input to int, truncating fractions; otherwise return ``default``."""
        if isinstance(value, bool):
            return int(value)
        if not cls.is_numeric(value):
            return default
        if isinstance(value, str):
            if INTEGER_PATTERN.match(value):
                return int(value.strip())
            value = float(value)
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)

    @staticmethod
    def to_boolean(value: Any) -> bool:
        """Return True for True, non-zero numbers and "true", "1" or "on" in any case."""
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        if isinstance(value, (int, float)):
            return value != 0
        return str(value).strip().lower() in TRUE_VALUES

    @staticmethod
    def to_string_or_none(value: Any) -> Optional[str]:
        """Convert scalars to str; anything else becomes None."""
        if isinstance(value, bool):
            return "1" if value else ""
        if isinstance(value, (str, int, float)):
            return str(value)
        return None

    @staticmethod
    def to_csv_list(value: Any) -> Optional[List[str]]:
        """Split a comma separated string into trimmed, non-empty items."""
        if not isinstance(value, str) or value == "":
            return None
        items = [item.strip() for item in value.split(",")]
        return [item for item in items if item] or None
