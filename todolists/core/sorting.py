from typing import Callable, List, Sequence, Tuple, TypeVar

from .completion import is_list_complete
from .models import Todo, TodoList


T = TypeVar("T")


def _partition(items: Sequence[T], is_complete: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    incomplete: List[T] = []
    complete: List[T] = []
    for item in items:
        (complete if is_complete(item) else incomplete).append(item)
    return incomplete, complete


def sort_lists(lists: Sequence[TodoList]) -> List[TodoList]:
    """Order lists incomplete first, complete last, keeping relative order.

    Each list's ``id`` is set to its index before sorting so that links and
    forms keep addressing the underlying session position.
    """
    for index, todo_list in enumerate(lists):
        todo_list.id = index
    incomplete, complete = _partition(lists, is_list_complete)
    return incomplete + complete


def sort_todos(todos: Sequence[Todo]) -> List[Todo]:
    """Display order for one list's todos; ids stay their array index."""
    incomplete, complete = _partition(todos, lambda todo: todo.completed)
    return incomplete + complete
