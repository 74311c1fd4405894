"""
Exceptions raised by the Forte SDK.

InvalidArgumentError is raised synchronously, before any network call, when
a caller passes malformed arguments. Everything deriving from APIError
describes an outcome of talking to the platform and surfaces through the
Future returned by the resource accessors.
"""

from typing import Any, Dict, Optional


class ForteError(Exception):
    """Base exception for all Forte SDK errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgumentError(ForteError, ValueError):
    """A method argument failed validation.

    ``field_path`` names the offending argument, e.g. ``scope.branch`` or
    ``credentials.bearer_token``.
    """

    def __init__(self, field_path: str, reason: Optional[str] = None):
        super().__init__(reason or f"Invalid argument: {field_path}", details=field_path)
        self.field_path = field_path


class ConfigurationError(ForteError):
    """Stored configuration is missing or incomplete."""


class APIError(ForteError):
    """Request to the Forte API failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        details: Optional[str] = None,
        response: Any = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.response_data = response_data or {}
        self.response = response

    @property
    def result(self) -> Dict[str, Any]:
        """Decoded error body returned by the server, if any."""
        return self.response_data


class AuthenticationError(APIError):
    """Authentication failed or credentials were rejected."""


class PermissionDeniedError(APIError):
    """The authenticated caller may not access the resource."""


class NotFoundError(APIError):
    """The requested resource does not exist."""


class ValidationError(APIError):
    """The server rejected the request payload."""
