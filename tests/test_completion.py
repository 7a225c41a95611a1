"""Tests for completion classification — pure functions over models."""

from todolists.core.completion import (
    all_todos_complete,
    completion_ratio,
    is_list_complete,
    list_completion_status,
    todo_completion_status,
)
from todolists.core.models import Todo, TodoList


def test_empty_list_is_not_complete():
    assert is_list_complete(TodoList(name="Empty")) is False


def test_list_with_all_todos_done_is_complete():
    todo_list = TodoList(name="Done", todos=[Todo("a", completed=True)])
    assert is_list_complete(todo_list) is True
    assert list_completion_status(todo_list) == "complete"


def test_list_with_an_open_todo_is_not_complete():
    todo_list = TodoList(name="Mixed", todos=[Todo("a", completed=True), Todo("b", completed=False)])
    assert is_list_complete(todo_list) is False
    assert list_completion_status(todo_list) is None


def test_all_todos_complete_is_vacuously_true():
    assert all_todos_complete([]) is True


def test_todo_completion_status():
    assert todo_completion_status(Todo("a", completed=True)) == "complete"
    assert todo_completion_status(Todo("a")) is None


def test_completion_ratio_counts_remaining_over_total():
    assert completion_ratio([Todo("a", completed=False), Todo("b", completed=True)]) == "1/2"
    assert completion_ratio([]) == "0/0"
