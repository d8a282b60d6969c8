"""Assertion helpers for property validation hooks.

Each helper raises ValidationError carrying the caller's message when the
checked condition does not hold. Numeric bound checks treat None as
"not set" and let it pass.
"""

import re
from collections.abc import Sized
from typing import Any, Container, Optional, Pattern, Union

from .exceptions import ValidationError


class AssertionConcern:
    """Mixin providing argument assertions for validation hooks."""

    def assert_argument_not_null(self, value: Any, message: str) -> None:
        if value is None:
            raise ValidationError(message)

    def assert_argument_not_empty(self, value: Any, message: str) -> None:
        if value is None:
            raise ValidationError(message)
        if isinstance(value, str):
            if not value.strip():
                raise ValidationError(message)
        elif isinstance(value, Sized) and len(value) == 0:
            raise ValidationError(message)

    def assert_argument_max(self, value: Any, maximum: Any, message: str) -> None:
        if value is not None and value > maximum:
            raise ValidationError(message)

    def assert_argument_min(self, value: Any, minimum: Any, message: str) -> None:
        if value is not None and value < minimum:
            raise ValidationError(message)

    def assert_argument_range(self, value: Any, minimum: Any, maximum: Any, message: str) -> None:
        if value is not None and not minimum <= value <= maximum:
            raise ValidationError(message)

    def assert_argument_length(
        self,
        value: Optional[Sized],
        minimum: int,
        maximum: Optional[int],
        message: str,
    ) -> None:
        if value is None:
            return
        length = len(value)
        if length < minimum or (maximum is not None and length > maximum):
            raise ValidationError(message)

    def assert_argument_true(self, value: Any, message: str) -> None:
        if value is not True:
            raise ValidationError(message)

    def assert_argument_false(self, value: Any, message: str) -> None:
        if value is not False:
            raise ValidationError(message)

    def assert_argument_equals(self, value: Any, expected: Any, message: str) -> None:
        if value != expected:
            raise ValidationError(message)

    def assert_argument_pattern(
        self,
        value: Optional[str],
        pattern: Union[str, Pattern[str]],
        message: str,
    ) -> None:
        if value is None:
            return
        if not isinstance(value, str) or re.fullmatch(pattern, value) is None:
            raise ValidationError(message)

    def assert_argument_in(self, value: Any, choices: Container[Any], message: str) -> None:
        if value not in choices:
            raise ValidationError(message)
