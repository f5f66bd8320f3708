"""Typed client for the user search endpoint."""

from __future__ import annotations

import httpx
from pydantic import TypeAdapter, ValidationError

from usersearch.client.errors import (
    AuthorizationError,
    BadOrderFieldError,
    BadRequestError,
    DecodeError,
    InvalidRequestError,
    SearchTimeoutError,
    TransportError,
    UnexpectedStatusError,
)
from usersearch.config import ClientSettings
from usersearch.domain.models import (
    ACCESS_TOKEN_HEADER,
    ErrorReason,
    SearchErrorResponse,
    SearchRequest,
    SearchResponse,
    User,
)
from usersearch.logging import logger

_USERS = TypeAdapter(list[User])


class SearchClient:
    """Single-attempt search calls with every outcome mapped onto ``SearchClientError``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ClientSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ClientSettings()

    async def find_users(self, request: SearchRequest) -> SearchResponse:
        if request.limit < 0:
            raise InvalidRequestError("limit must be >= 0")
        if request.offset < 0:
            raise InvalidRequestError("offset must be >= 0")

        # The server treats limit as an end position; ask for one record past
        # offset + limit to learn whether another page exists.
        params = request.to_params()
        params["limit"] = str(request.offset + request.limit + 1)

        response = await self._send(params)
        users = self._decode(response, request)

        next_page = len(users) > request.limit
        if next_page:
            users = users[: request.limit]
        return SearchResponse(users=users, next_page=next_page)

    async def _send(self, params: dict[str, str]) -> httpx.Response:
        try:
            return await self._client.get(
                str(self._settings.base_url),
                params=params,
                headers=self._headers(),
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("search_client_request_failed", error_kind="timeout", error=str(exc))
            raise SearchTimeoutError(
                f"timeout after {self._settings.request_timeout_seconds}s: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("search_client_request_failed", error_kind="transport", error=str(exc))
            raise TransportError(f"search request failed: {exc}") from exc

    def _decode(self, response: httpx.Response, request: SearchRequest) -> list[User]:
        status_code = response.status_code
        if status_code in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
            raise AuthorizationError(status_code, "bad AccessToken")

        if status_code == httpx.codes.BAD_REQUEST:
            try:
                error = SearchErrorResponse.model_validate_json(response.content)
            except ValidationError as exc:
                raise DecodeError(status_code, "cant unpack error json") from exc
            if error.error == ErrorReason.BAD_ORDER_FIELD.value:
                raise BadOrderFieldError(
                    error.error, f"order field {request.order_field!r} invalid"
                )
            raise BadRequestError(error.error)

        if not response.is_success:
            raise UnexpectedStatusError(status_code, response.text[:500])

        try:
            return _USERS.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(status_code, "cant unpack result json") from exc

    def _headers(self) -> dict[str, str]:
        token = self._settings.access_token
        if token is None:
            return {}
        return {ACCESS_TOKEN_HEADER: token.get_secret_value()}


__all__ = ["SearchClient"]
