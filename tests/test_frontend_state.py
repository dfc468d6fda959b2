# tests/test_frontend_state.py

import pytest

from app.frontend.state import TaskBoard, TaskBoardError


@pytest.fixture()
def board(client) -> TaskBoard:
    # TestClient est un httpx.Client : le TaskBoard parle directement à l'app
    b = TaskBoard(client)
    b.load()
    return b


def test_empty_board_shows_one_page(board):
    assert board.tasks == []
    assert board.total == 0
    assert board.total_pages == 1
    assert board.current_page == 1
    assert not board.has_prev
    assert not board.has_next


def test_add_reloads_and_paginates(board):
    for i in range(7):
        board.add(f"Task {i}")

    assert board.total == 7
    assert board.total_pages == 2
    assert len(board.tasks) == 5
    # le plus récent en tête
    assert board.tasks[0]["title"] == "Task 6"

    board.next_page()
    assert board.current_page == 2
    assert len(board.tasks) == 2
    assert not board.has_next

    board.next_page()  # déjà à la dernière page
    assert board.current_page == 2

    board.prev_page()
    assert board.current_page == 1
    board.prev_page()
    assert board.current_page == 1


def test_add_resets_to_first_page(board):
    for i in range(6):
        board.add(f"Task {i}")
    board.next_page()
    assert board.current_page == 2

    board.add("Newest")
    assert board.current_page == 1
    assert board.tasks[0]["title"] == "Newest"


def test_add_blank_title_is_a_no_op(board, client):
    assert board.add("   ") is None
    assert client.get("/api/tasks").json()["total"] == 0


def test_toggle_and_filters(board):
    board.add("a")
    b = board.add("b")
    board.toggle(b["id"], True)
    assert board.completed_on_page == 1

    board.set_filter("completed")
    assert [t["title"] for t in board.tasks] == ["b"]
    assert board.current_page == 1

    board.set_filter("active")
    assert [t["title"] for t in board.tasks] == ["a"]

    board.set_filter("all")
    assert board.total == 2


def test_unknown_filter(board):
    with pytest.raises(TaskBoardError):
        board.set_filter("someday")


def test_edit_updates_and_reloads(board):
    created = board.add("draft", description="d")
    board.edit(created["id"], title="final", description="done", priority="high", completed=True)

    task = board.find(created["id"])
    assert task["title"] == "final"
    assert task["priority"] == "high"
    assert task["completed"] is True


def test_edit_title_only_keeps_other_fields(board):
    created = board.add("draft", description="keep me", priority="high")
    board.toggle(created["id"], True)

    updated = board.edit(created["id"], title="renamed")
    assert updated["title"] == "renamed"
    assert updated["description"] == "keep me"
    assert updated["priority"] == "high"
    assert updated["completed"] is True
    assert board.find(created["id"])["description"] == "keep me"


def test_edit_rejects_blank_title_locally(board):
    created = board.add("keep")
    with pytest.raises(TaskBoardError, match="cannot be empty"):
        board.edit(created["id"], title="  ")
    assert board.find(created["id"])["title"] == "keep"


def test_delete_last_task_of_last_page_steps_back(board):
    for i in range(6):
        board.add(f"Task {i}")
    board.next_page()
    assert board.current_page == 2
    only = board.tasks[0]

    board.delete(only["id"])
    assert board.current_page == 1
    assert board.total_pages == 1
    assert len(board.tasks) == 5


def test_server_errors_are_surfaced(board):
    with pytest.raises(TaskBoardError, match="Task not found"):
        board.toggle(999, True)
    with pytest.raises(TaskBoardError, match="Task not found"):
        board.delete(999)
