"""Type coercion for DTO property assignment.

Values are converted with pydantic in lax mode, which gives the usual
scalar widening and narrowing rules: numeric strings become ints or floats,
numbers become strings, boolean-ish strings become bools, enum values become
members. Anything pydantic rejects surfaces as TypeMismatchError.
"""

import dataclasses
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Optional, is_typeddict

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import TypeMismatchError

COERCION_CONFIG = ConfigDict(
    arbitrary_types_allowed=True,
    coerce_numbers_to_str=True,
)


def _accepts_config(target: Any) -> bool:
    # pydantic refuses a config for types that carry their own
    if isinstance(target, type) and issubclass(target, BaseModel):
        return False
    if dataclasses.is_dataclass(target) or is_typeddict(target):
        return False
    return True


@lru_cache(maxsize=256)
def get_type_adapter(target: Any) -> TypeAdapter:
    """Get a cached TypeAdapter for a declared type."""
    if _accepts_config(target):
        return TypeAdapter(target, config=COERCION_CONFIG)
    return TypeAdapter(target)


def type_name(target: Any) -> str:
    """Human readable name of a declared type."""
    if isinstance(target, type):
        return target.__name__
    return str(target).replace("typing.", "")


def value_type_name(value: Any) -> str:
    """Human readable name of a value's runtime type."""
    if value is None:
        return "None"
    return type(value).__name__


def _is_dto_type(target: Any) -> bool:
    from .base import Dto

    return isinstance(target, type) and issubclass(target, Dto)


class TypeCoercer:
    """Converts property values to their declared types."""

    def coerce(self, property_name: str, value: Any, target: Any) -> Any:
        """Coerce ``value`` to ``target``.

        Args:
            property_name: Property being assigned, used in error messages
            value: Incoming value
            target: Declared type, or None/Any for no coercion

        Returns:
            The coerced value

        Raises:
            TypeMismatchError: If the value cannot be converted
        """
        if target is None or target is Any:
            return value

        if _is_dto_type(target):
            return self._coerce_dto(property_name, value, target)

        try:
            return get_type_adapter(target).validate_python(value)
        except PydanticValidationError as e:
            raise TypeMismatchError(
                property_name, type_name(target), value_type_name(value)
            ) from e

    def _coerce_dto(self, property_name: str, value: Any, target: type) -> Any:
        if value is None or isinstance(value, target):
            return value
        if isinstance(value, Mapping):
            return target(value)
        raise TypeMismatchError(property_name, type_name(target), value_type_name(value))


_default_coercer: Optional[TypeCoercer] = None


def get_type_coercer() -> TypeCoercer:
    """Get the shared coercer instance."""
    global _default_coercer

    if _default_coercer is None:
        _default_coercer = TypeCoercer()
    return _default_coercer
