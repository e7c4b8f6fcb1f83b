"""HTTP-facing error carrying a status, a code and a message."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from .errors import (
    AgentForgeError,
    CircularBiasError,
    NotFoundError,
    ParseError,
    RegressionGateFailed,
    ScoreGateFailed,
    StabilityGateFailed,
    ValidationError,
)

_log = logging.getLogger(__name__)


class ApiError(Exception):
    """An error that renders as a JSON body with an HTTP status."""

    def __init__(self, status: HTTPStatus, code: str, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.message = message

    @classmethod
    def not_found(cls, message: str) -> ApiError:
        return cls(HTTPStatus.NOT_FOUND, "NOT_FOUND", message)

    @classmethod
    def bad_request(cls, message: str) -> ApiError:
        return cls(HTTPStatus.BAD_REQUEST, "BAD_REQUEST", message)

    @classmethod
    def internal(cls, message: str) -> ApiError:
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", message)

    @classmethod
    def conflict(cls, message: str) -> ApiError:
        return cls(HTTPStatus.CONFLICT, "CONFLICT", message)

    @classmethod
    def unprocessable(cls, message: str) -> ApiError:
        return cls(HTTPStatus.UNPROCESSABLE_ENTITY, "UNPROCESSABLE_ENTITY", message)

    @classmethod
    def from_error(cls, error: AgentForgeError) -> ApiError:
        """Map a package error to the matching HTTP error; hide internal details."""
        if isinstance(error, NotFoundError):
            return cls.not_found(str(error))
        if isinstance(error, (ValidationError, ParseError, CircularBiasError)):
            return cls.bad_request(str(error))
        if isinstance(error, (ScoreGateFailed, RegressionGateFailed, StabilityGateFailed)):
            return cls.unprocessable(str(error))
        _log.error("Internal server error: %s", error)
        return cls.internal("An unexpected error occurred")

    def to_response(self) -> tuple[HTTPStatus, dict[str, Any]]:
        """Return the status and the JSON body of this error."""
        return self.status, {"error": {"code": self.code, "message": self.message}}