"""Application error types.

Every error carries a client-facing message and the HTTP status it maps to.
The handlers in ``admin_dashboard.main`` render them as ``{"error": message}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API clients."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCredentials(AppError):
    status_code = 401

    def __init__(self, message: str = "invalid email or password"):
        super().__init__(message)


class AccountInactive(AppError):
    status_code = 401

    def __init__(self, message: str = "your account is inactive"):
        super().__init__(message)


class DuplicateField(AppError):
    status_code = 400


class InvalidFormat(AppError):
    status_code = 400


class NotFound(AppError):
    status_code = 404


class InvalidToken(AppError):
    """Raised by the token codec; never shown to clients as-is."""
    status_code = 401


class Unauthenticated(AppError):
    status_code = 401


class Forbidden(AppError):
    status_code = 403

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


class InternalError(AppError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
