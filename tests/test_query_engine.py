"""Unit tests for the filter/order/page pipeline."""

from __future__ import annotations

import pytest

from usersearch.domain.models import ErrorReason, OrderBy, OrderField, SearchRequest
from usersearch.services.exceptions import QueryValidationError
from usersearch.services.query_engine import (
    filter_users,
    paginate,
    run_query,
    sort_users,
    validate_order,
    validate_request,
)


def _ids(users):
    return [user.id for user in users]


def test_validate_order_defaults_to_name():
    assert validate_order("", 0) == (OrderField.NAME, OrderBy.AS_IS)


def test_validate_order_resolves_known_values():
    assert validate_order("Age", -1) == (OrderField.AGE, OrderBy.ASC)
    assert validate_order("Id", 1) == (OrderField.ID, OrderBy.DESC)


@pytest.mark.parametrize("order_field", ["incorrect", "name", "ID", "About"])
def test_validate_order_rejects_unknown_field(order_field):
    with pytest.raises(QueryValidationError) as exc_info:
        validate_order(order_field, 0)
    assert exc_info.value.reason is ErrorReason.BAD_ORDER_FIELD


@pytest.mark.parametrize("order_by", [999, 2, -2])
def test_validate_order_rejects_unknown_direction_with_same_reason(order_by):
    with pytest.raises(QueryValidationError) as exc_info:
        validate_order("Name", order_by)
    assert exc_info.value.reason is ErrorReason.BAD_ORDER_FIELD


def test_filter_empty_query_keeps_everything(users):
    assert filter_users(users, "") == users


def test_filter_matches_name_or_about(users):
    assert _ids(filter_users(users, "Boyd")) == [0, 5]
    assert _ids(filter_users(users, "moll")) == [1, 3, 5, 7]


def test_filter_is_case_sensitive_and_literal(users):
    assert filter_users(users, "boyd") == []
    assert filter_users(users, "Boy.") == []


def test_sort_as_is_preserves_source_order(users):
    assert _ids(sort_users(users, OrderField.AGE, OrderBy.AS_IS)) == _ids(users)


def test_sort_by_age_is_stable(users):
    ordered = sort_users(users, OrderField.AGE, OrderBy.ASC)
    assert _ids(ordered) == [1, 5, 0, 2, 3, 7, 4, 6]

    descending = sort_users(users, OrderField.AGE, OrderBy.DESC)
    assert _ids(descending) == [6, 4, 3, 7, 2, 0, 1, 5]


def test_sort_by_name_uses_ordinal_order(users):
    names = [user.name for user in sort_users(users, OrderField.NAME, OrderBy.ASC)]
    assert names == sorted(names)
    assert names[0] == "Boyd Wolf"


def test_sort_by_id_descending(users):
    assert _ids(sort_users(users, OrderField.ID, OrderBy.DESC)) == list(range(7, -1, -1))


def test_paginate_limit_bounds_end_position(users):
    assert _ids(paginate(users, 0, 3)) == [0, 1, 2]
    assert _ids(paginate(users, 1, 3)) == [1, 2]
    assert _ids(paginate(users, 0, 99)) == _ids(users)


def test_paginate_offset_at_or_past_end_is_empty(users):
    assert paginate(users, len(users), 99) == []
    assert paginate(users, len(users) + 5, 99) == []
    assert paginate(users, 5, 3) == []


def test_paginate_rejects_negative_bounds(users):
    with pytest.raises(QueryValidationError) as exc_info:
        paginate(users, -1, 3)
    assert exc_info.value.reason is ErrorReason.BAD_PAGINATION


def test_run_query_age_ascending_with_query(users):
    request = SearchRequest(query="moll", order_field="Age", order_by=OrderBy.ASC, limit=3)
    page = run_query(users, request)
    assert _ids(page) == [1, 5, 3]
    assert all("moll" in user.name or "moll" in user.about for user in page)


def test_run_query_name_descending_with_query(users):
    request = SearchRequest(query="ita", order_field="Name", order_by=OrderBy.DESC, limit=3)
    names = [user.name for user in run_query(users, request)]
    assert names == ["Rita Gillespie", "Octavia Boyd", "Nita Sharpe"]


def test_run_query_validates_before_touching_records():
    with pytest.raises(QueryValidationError):
        run_query([], SearchRequest(order_field="incorrect", limit=5))


def test_run_query_is_repeatable(users):
    request = SearchRequest(query="e", order_field="Id", order_by=OrderBy.DESC, limit=5)
    assert run_query(users, request) == run_query(users, request)


def test_validate_request_checks_order_then_bounds():
    assert validate_request(SearchRequest(order_field="Id", order_by=1, limit=2)) == (
        OrderField.ID,
        OrderBy.DESC,
    )
    with pytest.raises(QueryValidationError) as exc_info:
        validate_request(SearchRequest(order_field="bad", offset=-1))
    assert exc_info.value.reason is ErrorReason.BAD_ORDER_FIELD
    with pytest.raises(QueryValidationError) as exc_info:
        validate_request(SearchRequest(limit=-1))
    assert exc_info.value.reason is ErrorReason.BAD_PAGINATION
