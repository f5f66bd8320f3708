"""Failure taxonomy surfaced by :class:`usersearch.client.SearchClient`."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    BAD_REQUEST = "bad_request"
    AUTHORIZATION = "authorization"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    DECODE = "decode"
    UNEXPECTED_STATUS = "unexpected_status"


class SearchClientError(RuntimeError):
    """Base for every failure ``find_users`` reports."""

    kind: ClassVar[ErrorKind]


class InvalidRequestError(SearchClientError):
    """Rejected locally; no request was sent."""

    kind = ErrorKind.INVALID_REQUEST


class BadRequestError(SearchClientError):
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or f"unknown bad request error: {reason}")
        self.reason = reason


class BadOrderFieldError(BadRequestError):
    pass


class AuthorizationError(SearchClientError):
    kind = ErrorKind.AUTHORIZATION

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(SearchClientError):
    """No HTTP response was obtained."""

    kind = ErrorKind.TRANSPORT


class SearchTimeoutError(TransportError):
    kind = ErrorKind.TIMEOUT


class DecodeError(SearchClientError):
    kind = ErrorKind.DECODE

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedStatusError(SearchClientError):
    kind = ErrorKind.UNEXPECTED_STATUS

    def __init__(self, status_code: int, detail: str = "") -> None:
        message = f"unexpected status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "AuthorizationError",
    "BadOrderFieldError",
    "BadRequestError",
    "DecodeError",
    "ErrorKind",
    "InvalidRequestError",
    "SearchClientError",
    "SearchTimeoutError",
    "TransportError",
    "UnexpectedStatusError",
]
