"""Domain-specific exceptions raised on the serving side."""

from __future__ import annotations

from usersearch.domain.models import ErrorReason


class ServiceError(Exception):
    pass


class QueryValidationError(ServiceError):
    """The request names an order field, direction or page bound we cannot serve."""

    def __init__(self, reason: ErrorReason, detail: str = "") -> None:
        super().__init__(detail or reason.value)
        self.reason = reason


class RecordSourceError(ServiceError):
    pass


__all__ = ["QueryValidationError", "RecordSourceError", "ServiceError"]
