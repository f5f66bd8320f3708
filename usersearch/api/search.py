"""HTTP search endpoint."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.responses import PlainTextResponse

from usersearch.domain.models import ACCESS_TOKEN_HEADER, SearchRequest, User
from usersearch.logging import logger
from usersearch.services.query_engine import run_query, validate_request
from usersearch.services.records import RecordStore

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

router = APIRouter(tags=["search"])


def parse_int(raw: str | None) -> int:
    """Parse a query-string integer; anything that is not a 64-bit integer becomes 0."""

    if raw is None or not _INTEGER.fullmatch(raw):
        return 0
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


# Sync on purpose: the first call reads and parses the dataset.
@router.get("/", response_model=list[User])
def search_users(
    access_token: str | None = Header(default=None, alias=ACCESS_TOKEN_HEADER),
    order_field: str = "",
    order_by: str | None = None,
    offset: str | None = None,
    limit: str | None = None,
    query: str = "",
    store: RecordStore = Depends(get_record_store),
):
    """Filter, order and page the user records."""

    if not access_token:
        logger.info("search_request_rejected", reason="missing_access_token")
        return PlainTextResponse("incorrect AccessToken", status_code=status.HTTP_401_UNAUTHORIZED)

    search_request = SearchRequest(
        query=query,
        order_field=order_field,
        order_by=parse_int(order_by),
        offset=parse_int(offset),
        limit=parse_int(limit),
    )
    validate_request(search_request)
    page = run_query(store.all(), search_request)
    logger.info(
        "search_completed",
        order_field=search_request.order_field,
        order_by=search_request.order_by,
        offset=search_request.offset,
        limit=search_request.limit,
        returned=len(page),
    )
    return page


__all__ = ["get_record_store", "parse_int", "router"]
