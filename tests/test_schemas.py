# tests/test_schemas.py

from datetime import datetime, timedelta, timezone

import pydantic
import pytest

from app.core.errors import format_validation_errors
from app.db.models.tasks import Priority
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskListQuery, to_utc, MAX_PAGE


def test_to_utc():
    naive = datetime(2024, 1, 1, 12, 0)
    assert to_utc(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    paris = datetime(2024, 1, 1, 13, 0, tzinfo=timezone(timedelta(hours=1)))
    converted = to_utc(paris)
    assert converted.tzinfo == timezone.utc
    assert converted.hour == 12

    assert to_utc(None) is None


def test_create_accepts_camel_case_due_date():
    payload = TaskCreateIn.model_validate({"title": "A", "dueDate": "2024-01-15T23:59:59Z"})
    assert payload.due_date == datetime(2024, 1, 15, 23, 59, 59, tzinfo=timezone.utc)
    assert payload.priority == Priority.medium
    assert payload.description == ""


def test_create_strips_title():
    assert TaskCreateIn(title="  hello ").title == "hello"


def test_update_changes_only_contains_sent_fields():
    payload = TaskUpdateIn.model_validate({"completed": True})
    assert payload.changes() == {"completed": True}

    payload = TaskUpdateIn.model_validate({"description": None, "dueDate": None})
    assert payload.changes() == {"description": "", "due_date": None}


@pytest.mark.parametrize("field", ["title", "completed", "priority"])
def test_update_rejects_null_for_required_columns(field):
    with pytest.raises(pydantic.ValidationError) as exc:
        TaskUpdateIn.model_validate({field: None})
    assert f"{field} must not be null" in format_validation_errors(exc.value.errors())


def test_list_query_defaults():
    q = TaskListQuery()
    assert (q.sort_by, q.sort_order, q.page, q.limit) == ("created_at", "DESC", 1, 10)
    assert q.offset == 0
    assert TaskListQuery(page=3, limit=5).offset == 10


def test_list_query_normalises_input():
    q = TaskListQuery(sort_order="asc", search="   ")
    assert q.sort_order == "ASC"
    assert q.search is None
    # un terme non vide est gardé tel quel, espaces compris
    assert TaskListQuery(search=" a").search == " a"


@pytest.mark.parametrize(
    "kwargs", [{"page": 0}, {"page": MAX_PAGE + 1}, {"limit": 0}, {"limit": 101}, {"sort_by": "id"}]
)
def test_list_query_rejects_out_of_range(kwargs):
    with pytest.raises(pydantic.ValidationError):
        TaskListQuery(**kwargs)


def test_format_validation_errors_drops_location_prefix():
    errors = [
        {"loc": ("body", "title"), "msg": "Field required"},
        {"loc": ("query", "limit"), "msg": "Value error, too big"},
    ]
    assert format_validation_errors(errors) == "title: Field required; limit: too big"
