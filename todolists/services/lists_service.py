import logging

from ..core.errors import ListNotFound, TodoNotFound
from ..core.models import Todo, TodoList
from ..core.validation import ValidationResult, is_valid, validate_list_name, validate_todo_name
from .session_store import SessionState


logger = logging.getLogger(__name__)


def get_list(state: SessionState, list_id: int) -> TodoList:
    """Resolve a list by position.

    Raises:
        ListNotFound: if ``list_id`` is negative or past the end
    """
    if not 0 <= list_id < len(state.lists):
        raise ListNotFound(list_id)
    return state.lists[list_id]


def get_todo(state: SessionState, list_id: int, todo_id: int) -> Todo:
    todo_list = get_list(state, list_id)
    if not 0 <= todo_id < len(todo_list.todos):
        raise TodoNotFound(list_id, todo_id)
    return todo_list.todos[todo_id]


def create_list(state: SessionState, name: str) -> ValidationResult:
    result = validate_list_name(name, state.lists)
    if is_valid(result):
        state.lists.append(TodoList(name=name, id=len(state.lists)))
        state.commit()
        logger.info(f"Created list {len(state.lists) - 1}")
    return result


def rename_list(state: SessionState, list_id: int, name: str) -> ValidationResult:
    todo_list = get_list(state, list_id)
    result = validate_list_name(name, state.lists)
    if is_valid(result):
        todo_list.name = name
        state.commit()
        logger.info(f"Renamed list {list_id}")
    return result


def delete_list(state: SessionState, list_id: int) -> TodoList:
    todo_list = get_list(state, list_id)
    del state.lists[list_id]
    state.commit()
    logger.info(f"Deleted list {list_id}; {len(state.lists)} remaining")
    return todo_list


def add_todo(state: SessionState, list_id: int, name: str) -> ValidationResult:
    todo_list = get_list(state, list_id)
    result = validate_todo_name(name)
    if is_valid(result):
        todo_list.todos.append(Todo(name=name, completed=False, id=len(todo_list.todos)))
        state.commit()
        logger.info(f"Added todo to list {list_id}")
    return result


def delete_todo(state: SessionState, list_id: int, todo_id: int) -> Todo:
    todo = get_todo(state, list_id, todo_id)
    del state.lists[list_id].todos[todo_id]
    state.commit()
    logger.info(f"Deleted todo {todo_id} from list {list_id}")
    return todo


def set_todo_completed(state: SessionState, list_id: int, todo_id: int, completed: bool) -> Todo:
    todo = get_todo(state, list_id, todo_id)
    todo.completed = completed
    state.commit()
    return todo


def complete_all(state: SessionState, list_id: int) -> TodoList:
    todo_list = get_list(state, list_id)
    for todo in todo_list.todos:
        todo.completed = True
    state.commit()
    logger.info(f"Completed all {len(todo_list.todos)} todos in list {list_id}")
    return todo_list
