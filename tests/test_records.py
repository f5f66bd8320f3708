"""Tests for loading user records from the XML source."""

from __future__ import annotations

import pytest

from usersearch.services.exceptions import RecordSourceError
from usersearch.services.records import RecordStore, parse_users


def test_parse_users_joins_names_and_ignores_extra_fields(users):
    first = users[0]
    assert first.id == 0
    assert first.name == "Boyd Wolf"
    assert first.age == 22
    assert first.gender == "male"
    assert first.about.startswith("Nulla cillum")


def test_store_keeps_document_order(users):
    assert [user.id for user in users] == list(range(8))


def test_store_serves_cached_tuple(store):
    assert store.all() is store.all()


def test_parse_users_rejects_invalid_xml():
    with pytest.raises(RecordSourceError):
        parse_users(b"{")


def test_parse_users_rejects_non_numeric_age():
    document = "<root><row><id>1</id><age>old</age></row></root>"
    with pytest.raises(RecordSourceError):
        parse_users(document)


def test_missing_file_is_not_cached(tmp_path):
    path = tmp_path / "dataset.xml"
    store = RecordStore(path)
    with pytest.raises(RecordSourceError):
        store.all()

    path.write_text(
        "<root><row><id>3</id><first_name>Ann</first_name><last_name>Lee</last_name>"
        "<age>40</age><about>x</about><gender>female</gender></row></root>",
        encoding="utf-8",
    )
    loaded = store.all()
    assert [user.name for user in loaded] == ["Ann Lee"]
