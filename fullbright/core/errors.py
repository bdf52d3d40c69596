"""Service errors and their HTTP mapping.

Each error carries the HTTP status code and the short ``status`` word placed in
the JSON body, so routes can let them propagate to the app's exception handler.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    status = "error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(ServiceError):
    """A required request field is absent or blank."""

    status_code = 400

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field.capitalize()} required")


class InvalidValueError(ServiceError):
    """A field is present but its value is not acceptable."""

    status_code = 400


class UsernameTakenError(ServiceError):
    status_code = 409

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username already registered")


class UnknownUserError(ServiceError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("User not found")


class UserBannedError(ServiceError):
    status_code = 403
    status = "banned"

    def __init__(self) -> None:
        super().__init__("User is banned")


class HardwareMismatchError(ServiceError):
    status_code = 403
    status = "denied"

    def __init__(self) -> None:
        super().__init__("HWID mismatch")


class AdminAuthError(ServiceError):
    status_code = 403
    status = "denied"

    def __init__(self) -> None:
        super().__init__("Admin access denied")


class StorageError(ServiceError):
    """Database failure. The message is generic; details are only logged."""

    status_code = 500

    def __init__(self, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__("Internal server error")
