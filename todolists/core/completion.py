from typing import Iterable, Optional, Sequence

from .models import Todo, TodoList


COMPLETE = "complete"


def all_todos_complete(todos: Iterable[Todo]) -> bool:
    return all(todo.completed for todo in todos)


def is_list_complete(todo_list: TodoList) -> bool:
    """A list is complete when it has at least one todo and every todo is done."""
    return bool(todo_list.todos) and all_todos_complete(todo_list.todos)


def list_completion_status(todo_list: TodoList) -> Optional[str]:
    return COMPLETE if is_list_complete(todo_list) else None


def todo_completion_status(todo: Todo) -> Optional[str]:
    return COMPLETE if todo.completed else None


def completion_ratio(todos: Sequence[Todo]) -> str:
    """Return "remaining/total" for a list's todos, e.g. "1/2"."""
    remaining = sum(1 for todo in todos if not todo.completed)
    return f"{remaining}/{len(todos)}"
