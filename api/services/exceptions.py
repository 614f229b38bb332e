"""
Domain errors raised by the service layer.

Each error carries the HTTP status and a stable error_type code; the
error handlers in api.middleware.error_handler turn them into responses.
"""
from typing import Optional


class MetaverseError(Exception):
    """Base class for client-visible domain errors."""

    status_code: int = 400
    error_type: str = "error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(MetaverseError):
    """Malformed or missing input, detected before touching persistence."""

    status_code = 400
    error_type = "validation_error"


class AuthenticationError(MetaverseError):
    """Missing or invalid credential."""

    status_code = 401
    error_type = "authentication_error"


class InvalidCredentialsError(AuthenticationError):
    """Sign-in with an unknown username or a wrong password."""

    status_code = 403
    error_type = "invalid_credentials"


class AuthorizationError(MetaverseError):
    """Valid identity without the required role or ownership."""

    status_code = 403
    error_type = "authorization_error"


class NotFoundError(MetaverseError):
    """A referenced entity id does not exist."""

    status_code = 400
    error_type = "not_found"


class ConflictError(MetaverseError):
    """Duplicate unique key."""

    status_code = 400
    error_type = "conflict"


class OutOfBoundsError(MetaverseError):
    """Placement coordinates outside the space grid."""

    status_code = 400
    error_type = "out_of_bounds"
