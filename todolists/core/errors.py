"""Error types raised by the list service and mapped to responses in middleware."""


class NotFoundError(Exception):
    """A list or todo addressed by position does not exist."""

    status_code = 404

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ListNotFound(NotFoundError):
    def __init__(self, list_id: int):
        super().__init__("The specified list was not found.")
        self.list_id = list_id


class TodoNotFound(NotFoundError):
    def __init__(self, list_id: int, todo_id: int):
        super().__init__("The specified todo was not found.")
        self.list_id = list_id
        self.todo_id = todo_id
