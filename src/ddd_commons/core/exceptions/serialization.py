"""Serialization exceptions for the opaque DTO byte form."""

from typing import Any, Optional

from .base import DddCommonsError


class SerializationError(DddCommonsError):
    """Raised when an object cannot be turned into bytes."""

    def __init__(
        self,
        message: str,
        serializer_type: str = "pickle",
        original_error: Optional[Exception] = None,
        value_type: Optional[str] = None,
    ):
        super().__init__(
            message,
            details={"serializer_type": serializer_type, "value_type": value_type},
        )
        self.serializer_type = serializer_type
        self.original_error = original_error


class DeserializationError(DddCommonsError):
    """Raised when bytes cannot be turned back into an object."""

    def __init__(
        self,
        message: str,
        serializer_type: str = "pickle",
        original_error: Optional[Exception] = None,
        data_size: Optional[int] = None,
    ):
        super().__init__(
            message,
            details={"serializer_type": serializer_type, "data_size": data_size},
        )
        self.serializer_type = serializer_type
        self.original_error = original_error
