"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from usersearch.api import search
from usersearch.domain.models import SearchErrorResponse
from usersearch.logging import logger
from usersearch.services.exceptions import QueryValidationError, RecordSourceError
from usersearch.services.records import RecordStore


async def _query_validation_error(request: Request, exc: QueryValidationError) -> JSONResponse:
    logger.info("search_request_invalid", reason=exc.reason.value, detail=str(exc))
    body = SearchErrorResponse(error=exc.reason.value)
    return JSONResponse(body.model_dump(), status_code=status.HTTP_400_BAD_REQUEST)


async def _record_source_error(request: Request, exc: RecordSourceError) -> PlainTextResponse:
    logger.error("record_source_failed", error=str(exc))
    return PlainTextResponse(
        "server error occurred", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def create_app(record_store: RecordStore) -> FastAPI:
    app = FastAPI(title="usersearch", version="0.1.0")
    app.state.record_store = record_store
    app.include_router(search.router)
    app.add_exception_handler(QueryValidationError, _query_validation_error)
    app.add_exception_handler(RecordSourceError, _record_source_error)
    return app


__all__ = ["create_app"]
