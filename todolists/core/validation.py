import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Union

from .models import TodoList


logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100

LIST_NAME_LENGTH_ERROR = "The list name must be between 1 and 100 characters long."
LIST_NAME_TAKEN_ERROR = "There is already a list by that name."
TODO_NAME_LENGTH_ERROR = "The todo must be between 1 and 100 characters long."


@dataclass(frozen=True)
class Ok:
    """Successful validation."""


@dataclass(frozen=True)
class Errors:
    """Failed validation carrying user-facing messages."""

    messages: List[str] = field(default_factory=list)


ValidationResult = Union[Ok, Errors]


def is_valid(result: ValidationResult) -> bool:
    return isinstance(result, Ok)


def _length_ok(name: str) -> bool:
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH


def validate_list_name(
    name: str,
    existing_lists: Iterable[TodoList],
) -> ValidationResult:
    """Check a list name for length and case-insensitive uniqueness.

    The length check runs first; only one message is ever returned.

    Args:
        name: Stripped list name as submitted
        existing_lists: Lists already in the session, including one being
            renamed, so a rename to its own name in any case is rejected

    Returns:
        Ok, or Errors with a single message
    """
    if not _length_ok(name):
        logger.debug(f"List name rejected: length {len(name)}")
        return Errors([LIST_NAME_LENGTH_ERROR])

    lowered = name.lower()
    for index, todo_list in enumerate(existing_lists):
        if todo_list.name.lower() == lowered:
            logger.debug(f"List name rejected: duplicate of list {index}")
            return Errors([LIST_NAME_TAKEN_ERROR])

    return Ok()


def validate_todo_name(name: str) -> ValidationResult:
    if not _length_ok(name):
        logger.debug(f"Todo name rejected: length {len(name)}")
        return Errors([TODO_NAME_LENGTH_ERROR])
    return Ok()
