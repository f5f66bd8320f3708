from usersearch.client.errors import (
    AuthorizationError,
    BadOrderFieldError,
    BadRequestError,
    DecodeError,
    ErrorKind,
    InvalidRequestError,
    SearchClientError,
    SearchTimeoutError,
    TransportError,
    UnexpectedStatusError,
)
from usersearch.client.search_client import SearchClient

__all__ = [
    "AuthorizationError",
    "BadOrderFieldError",
    "BadRequestError",
    "DecodeError",
    "ErrorKind",
    "InvalidRequestError",
    "SearchClient",
    "SearchClientError",
    "SearchTimeoutError",
    "TransportError",
    "UnexpectedStatusError",
]
