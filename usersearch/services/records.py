"""Read-only user record source backed by an XML document."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence
from xml.etree import ElementTree as ET

from usersearch.domain.models import User
from usersearch.logging import logger
from usersearch.services.exceptions import RecordSourceError


def parse_users(document: bytes | str) -> list[User]:
    """Decode ``<root><row>...</row></root>`` into users, keeping document order."""

    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise RecordSourceError(f"Record source is not valid XML: {exc}") from exc

    users: list[User] = []
    for row in root.iter("row"):
        try:
            users.append(
                User(
                    id=int(_text(row, "id")),
                    name=f"{_text(row, 'first_name')} {_text(row, 'last_name')}",
                    age=int(_text(row, "age")),
                    about=_text(row, "about"),
                    gender=_text(row, "gender"),
                )
            )
        except ValueError as exc:
            raise RecordSourceError(f"Malformed record row: {exc}") from exc
    return users


def _text(row: ET.Element, tag: str) -> str:
    return row.findtext(tag) or ""


class RecordStore:
    """Loads the dataset on first use and serves the same immutable tuple after that.

    A failed load is not cached, so the next request tries the file again.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._users: tuple[User, ...] | None = None

    def all(self) -> Sequence[User]:
        if self._users is None:
            self._users = tuple(self._load())
            logger.info("record_source_loaded", path=str(self._path), count=len(self._users))
        return self._users

    def _load(self) -> list[User]:
        try:
            payload = self._path.read_bytes()
        except OSError as exc:
            raise RecordSourceError(f"Cannot read record source {self._path}: {exc}") from exc
        return parse_users(payload)


__all__ = ["RecordStore", "parse_users"]
