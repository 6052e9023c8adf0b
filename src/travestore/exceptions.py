"""Application exceptions raised by services and caught at the app boundary.

Services raise these to signal bad client input or missing records.
The error translator in errors.py turns them into the standard
error envelope: {"success": false, "error": "..."}.
"""


class AppError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when a create payload breaks a required-field or price rule."""

    status_code = 400


class InvalidIdError(AppError):
    """Raised when a path identifier is not a well-formed ObjectId."""

    status_code = 400


class NotFoundError(AppError):
    """Raised when a requested entity does not exist."""

    status_code = 404
