# tests/test_task_service.py

import pytest

from app.core.errors import NotFoundError
from app.db.models.tasks import Priority
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskListQuery
from app.features.tasks.services import total_pages


@pytest.mark.parametrize(
    "total, limit, expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (12, 5, 3)],
)
def test_total_pages(total, limit, expected):
    assert total_pages(total, limit) == expected


def test_create_and_get(service):
    task = service.create(TaskCreateIn(title="  A  ", description="d"))
    fetched = service.get(task.id)
    assert fetched.title == "A"
    assert fetched.description == "d"
    assert fetched.priority == Priority.medium
    assert fetched.completed is False


def test_get_missing_raises_not_found(service):
    with pytest.raises(NotFoundError) as exc:
        service.get(123)
    assert exc.value.status_code == 404
    assert exc.value.message == "Task not found"


def test_update_is_partial_and_refreshes_updated_at(service):
    task = service.create(TaskCreateIn(title="A", description="keep me", priority="low"))
    before = task.updated_at

    updated = service.update(task.id, TaskUpdateIn(completed=True))
    assert updated.completed is True
    assert updated.title == "A"
    assert updated.description == "keep me"
    assert updated.priority == Priority.low
    assert updated.updated_at > before


def test_update_and_delete_missing_raise_not_found(service):
    with pytest.raises(NotFoundError):
        service.update(5, TaskUpdateIn(title="B"))
    with pytest.raises(NotFoundError):
        service.delete(5)


def test_delete(service):
    task = service.create(TaskCreateIn(title="A"))
    service.delete(task.id)
    with pytest.raises(NotFoundError):
        service.get(task.id)


def test_list_returns_page_metadata(service):
    for i in range(12):
        service.create(TaskCreateIn(title=f"T{i}"))

    page = service.list(TaskListQuery(limit=5, page=3))
    assert page.total == 12
    assert page.total_pages == 3
    assert page.current_page == 3
    assert len(page.tasks) == 2

    dumped = page.model_dump(by_alias=True)
    assert set(dumped) == {"tasks", "total", "totalPages", "currentPage"}


def test_list_without_matches(service):
    page = service.list(TaskListQuery(search="ghost"))
    assert page.tasks == []
    assert page.total == 0
    assert page.total_pages == 0
