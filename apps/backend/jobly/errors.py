"""Error kinds raised by the job store and auth layers.

Each error carries the HTTP status the app's exception handler maps it to.
Store-level failures (connectivity, constraint violations) are not wrapped
and reach the caller unchanged.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse


class JoblyError(Exception):
    """Base error with an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | list[str] = "") -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    """Raised for client-input problems, e.g. an empty update payload."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str | list[str] = "Bad Request") -> None:
        super().__init__(message)


class NotFoundError(JoblyError):
    """Raised when the targeted row does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """Raised when a request lacks a valid admin token."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


def error_body(message: str | list[str], status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.status_code),
    )
