"""Tests for list and todo mutations and positional lookups."""

import pytest

from todolists.core.errors import ListNotFound, NotFoundError, TodoNotFound
from todolists.core.validation import Errors, Ok
from todolists.services import lists_service
from todolists.services.session_store import SessionState


@pytest.fixture
def session():
    return {"lists": [
        {"name": "Groceries", "todos": [{"name": "Milk", "completed": False}, {"name": "Eggs", "completed": True}]},
        {"name": "Work", "todos": []},
    ]}


@pytest.fixture
def state(session):
    return SessionState(session)


def test_create_list_appends_and_commits(state, session):
    assert lists_service.create_list(state, "Home") == Ok()
    assert session["lists"][-1] == {"name": "Home", "todos": []}


def test_create_list_rejects_duplicate(state, session):
    result = lists_service.create_list(state, "work")
    assert isinstance(result, Errors)
    assert len(session["lists"]) == 2


def test_rename_list(state, session):
    assert lists_service.rename_list(state, 1, "Office") == Ok()
    assert session["lists"][1]["name"] == "Office"


def test_rename_list_to_other_lists_name_fails(state, session):
    assert isinstance(lists_service.rename_list(state, 1, "GROCERIES"), Errors)
    assert session["lists"][1]["name"] == "Work"


def test_rename_list_to_its_own_name_fails(state, session):
    assert isinstance(lists_service.rename_list(state, 1, "work"), Errors)
    assert isinstance(lists_service.rename_list(state, 1, "Work"), Errors)
    assert session["lists"][1]["name"] == "Work"


def test_delete_list_shifts_ids(state, session):
    removed = lists_service.delete_list(state, 0)
    assert removed.name == "Groceries"
    assert [l["name"] for l in session["lists"]] == ["Work"]
    assert state.lists[0].id == 0


def test_add_and_delete_todo(state, session):
    assert lists_service.add_todo(state, 1, "Report") == Ok()
    assert session["lists"][1]["todos"] == [{"name": "Report", "completed": False}]

    removed = lists_service.delete_todo(state, 1, 0)
    assert removed.name == "Report"
    assert session["lists"][1]["todos"] == []


def test_add_todo_rejects_empty_name(state, session):
    assert isinstance(lists_service.add_todo(state, 1, ""), Errors)
    assert session["lists"][1]["todos"] == []


def test_set_todo_completed(state, session):
    lists_service.set_todo_completed(state, 0, 0, True)
    assert session["lists"][0]["todos"][0]["completed"] is True
    lists_service.set_todo_completed(state, 0, 1, False)
    assert session["lists"][0]["todos"][1]["completed"] is False


def test_complete_all(state, session):
    lists_service.complete_all(state, 0)
    assert all(todo["completed"] for todo in session["lists"][0]["todos"])


@pytest.mark.parametrize("list_id", [2, 99, -1])
def test_out_of_range_list_raises_not_found(state, list_id):
    with pytest.raises(ListNotFound):
        lists_service.get_list(state, list_id)


@pytest.mark.parametrize("todo_id", [2, -1])
def test_out_of_range_todo_raises_not_found(state, todo_id):
    with pytest.raises(TodoNotFound) as excinfo:
        lists_service.delete_todo(state, 0, todo_id)
    assert isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.status_code == 404
