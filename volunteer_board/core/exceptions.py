# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain error taxonomy.

Every error carries a machine-readable ``reason`` that the HTTP layer
returns verbatim so clients can pick a localized message.
"""


class VolunteerBoardError(Exception):
    """Base class for all expected failures."""

    status_code: int = 400
    reason: str = "error"

    def __init__(self, reason: str | None = None, message: str | None = None) -> None:
        if reason is not None:
            self.reason = reason
        self.message = message or self.reason
        super().__init__(self.message)


class ValidationError(VolunteerBoardError):
    """Missing input or ineligible date."""
    status_code = 400
    reason = "invalid_input"


class CapacityError(VolunteerBoardError):
    """The requested day already holds the maximum number of volunteers."""
    status_code = 409
    reason = "day_full"


class DuplicateError(VolunteerBoardError):
    """The phone number is already registered for that day."""
    status_code = 409
    reason = "already_registered"


class NotFoundError(VolunteerBoardError):
    status_code = 404
    reason = "not_found"


class AuthError(VolunteerBoardError):
    """Bad or unconfigured admin secret."""
    status_code = 401
    reason = "invalid_password"


class AdminNotConfiguredError(AuthError):
    """No admin secret is configured; admin actions are refused."""
    status_code = 503
    reason = "admin_not_configured"


class StoreError(VolunteerBoardError):
    """Underlying persistence failure. Never exposes driver detail to clients."""
    status_code = 500
    reason = "internal_server_error"
