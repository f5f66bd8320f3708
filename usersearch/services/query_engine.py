"""Filtering, ordering and paging over an in-memory user collection."""

from __future__ import annotations

from typing import Callable, Sequence

from usersearch.domain.models import (
    DEFAULT_ORDER_FIELD,
    ErrorReason,
    OrderBy,
    OrderField,
    SearchRequest,
    User,
)
from usersearch.services.exceptions import QueryValidationError

_SORT_KEYS: dict[OrderField, Callable[[User], int | str]] = {
    OrderField.ID: lambda user: user.id,
    OrderField.AGE: lambda user: user.age,
    OrderField.NAME: lambda user: user.name,
}


def validate_order(order_field: str, order_by: int) -> tuple[OrderField, OrderBy]:
    """Resolve raw order parameters, rejecting anything outside the known sets.

    An empty ``order_field`` means ordering by name. Both failure modes report
    ``ErrorReason.BAD_ORDER_FIELD``; clients key on that single code.
    """

    try:
        field = OrderField(order_field) if order_field else DEFAULT_ORDER_FIELD
    except ValueError as exc:
        raise QueryValidationError(
            ErrorReason.BAD_ORDER_FIELD, f"unknown order field: {order_field!r}"
        ) from exc

    try:
        direction = OrderBy(order_by)
    except ValueError as exc:
        raise QueryValidationError(
            ErrorReason.BAD_ORDER_FIELD, f"unknown order direction: {order_by!r}"
        ) from exc

    return field, direction


def filter_users(users: Sequence[User], query: str) -> list[User]:
    if not query:
        return list(users)
    return [user for user in users if query in user.name or query in user.about]


def sort_users(users: Sequence[User], field: OrderField, direction: OrderBy) -> list[User]:
    if direction is OrderBy.AS_IS:
        return list(users)
    return sorted(users, key=_SORT_KEYS[field], reverse=direction is OrderBy.DESC)


def check_page_bounds(offset: int, limit: int) -> None:
    if offset < 0 or limit < 0:
        raise QueryValidationError(
            ErrorReason.BAD_PAGINATION, f"negative page bounds: offset={offset} limit={limit}"
        )


def validate_request(request: SearchRequest) -> tuple[OrderField, OrderBy]:
    """Check everything that can be rejected without looking at any records."""

    field, direction = validate_order(request.order_field, request.order_by)
    check_page_bounds(request.offset, request.limit)
    return field, direction


def paginate(users: Sequence[User], offset: int, limit: int) -> list[User]:
    """Slice a page from ``users``.

    The page starts at ``offset`` and ends at ``min(limit, len(users))``, so
    ``limit`` bounds the end position rather than the page length. An offset
    at or past that end yields an empty page.
    """

    check_page_bounds(offset, limit)
    total = len(users)
    if offset > total:
        return []
    return list(users[offset : min(limit, total)])


def run_query(users: Sequence[User], request: SearchRequest) -> list[User]:
    field, direction = validate_request(request)
    matched = filter_users(users, request.query)
    ordered = sort_users(matched, field, direction)
    return paginate(ordered, request.offset, request.limit)


__all__ = [
    "check_page_bounds",
    "filter_users",
    "paginate",
    "run_query",
    "sort_users",
    "validate_order",
    "validate_request",
]
