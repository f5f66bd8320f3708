"""Pydantic models shared by the search endpoint and the search client."""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict


class OrderBy(IntEnum):
    """Sort direction; travels as a bare integer in the ``order_by`` parameter."""

    ASC = -1
    AS_IS = 0
    DESC = 1


class OrderField(str, Enum):
    ID = "Id"
    AGE = "Age"
    NAME = "Name"


DEFAULT_ORDER_FIELD = OrderField.NAME

ACCESS_TOKEN_HEADER = "AccessToken"


class ErrorReason(str, Enum):
    # Shared by a bad order field and a bad order direction.
    BAD_ORDER_FIELD = "ErrorBadOrderField"
    BAD_PAGINATION = "ErrorBadPagination"


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int
    about: str
    gender: str


class SearchRequest(BaseModel):
    query: str = ""
    order_field: str = ""
    order_by: int = OrderBy.AS_IS
    limit: int = 0
    offset: int = 0

    def to_params(self) -> dict[str, str]:
        return {
            "query": self.query,
            "order_field": self.order_field,
            "order_by": str(int(self.order_by)),
            "limit": str(self.limit),
            "offset": str(self.offset),
        }


class SearchResponse(BaseModel):
    users: list[User]
    next_page: bool = False


class SearchErrorResponse(BaseModel):
    error: str


__all__ = [
    "ACCESS_TOKEN_HEADER",
    "DEFAULT_ORDER_FIELD",
    "ErrorReason",
    "OrderBy",
    "OrderField",
    "SearchErrorResponse",
    "SearchRequest",
    "SearchResponse",
    "User",
]
