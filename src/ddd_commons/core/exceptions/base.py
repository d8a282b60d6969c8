"""Base exceptions for ddd-commons.

This module defines the root of the exception hierarchy for the ddd-commons
library. All exceptions inherit from DddCommonsError and include an error code
and structured details so that callers can translate them into responses.
"""

from typing import Any, Dict, Optional


class DddCommonsError(Exception):
    """Base exception for all ddd-commons errors.

    All exceptions in the ddd-commons library inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: DddCommonsError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The ddd-commons exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
