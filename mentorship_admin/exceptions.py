"""Error taxonomy shared by the routers.

Every error a route raises on purpose is an ``ApiException``. The handlers
registered in ``main.py`` turn them into a JSON body of the form
``{<field>: <message>, "kind": <kind>, "correlation_id": <id>}``. ``field`` is
``"message"`` for most errors and ``"error"`` where clients already match on
that key (profile and mentor/mentee lookups).
"""
import enum
from typing import Optional


class ErrorKind(str, enum.Enum):
    validation = "validation"
    not_found = "not_found"
    persistence = "persistence"
    unauthorized = "unauthorized"
    forbidden = "forbidden"


class ApiException(Exception):
    status_code = 500
    kind = ErrorKind.persistence

    def __init__(self, message: str, field: str = "message"):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_body(self) -> dict:
        return {self.field: self.message, "kind": self.kind.value}


class ValidationException(ApiException):
    status_code = 400
    kind = ErrorKind.validation


class NotFoundException(ApiException):
    status_code = 404
    kind = ErrorKind.not_found


class UnauthorizedException(ApiException):
    status_code = 401
    kind = ErrorKind.unauthorized


class ForbiddenException(ApiException):
    status_code = 403
    kind = ErrorKind.forbidden


class PersistenceException(ApiException):
    """A database operation failed.

    ``message`` is the user-safe text. ``cause`` is the underlying error; it is
    always logged and only replaces ``message`` in the response when
    ``expose_cause`` is set by the route and the deployment allows it.
    """

    status_code = 500
    kind = ErrorKind.persistence

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        expose_cause: bool = False,
        field: str = "message",
    ):
        super().__init__(message, field=field)
        self.cause = cause
        self.expose_cause = expose_cause

    def client_message(self, allow_exposure: bool) -> str:
        if self.expose_cause and allow_exposure and self.cause is not None:
            return str(self.cause)
        return self.message
