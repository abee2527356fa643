"""
Application error hierarchy.

Services and route handlers raise these; api/error_handlers.py renders them
as the standard error envelope:

    {"error": {"message": "...", "status": 404}}
"""


class JoblyError(Exception):
    """Base error carrying an HTTP status code and a client-facing message."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message=None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class BadRequestError(JoblyError):
    """400: malformed or illogical input (empty update, duplicate key, bad range)."""
    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(JoblyError):
    """401: missing, invalid or insufficient credentials."""
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(JoblyError):
    """404"""
    status_code = 404
    default_message = "Not Found"
