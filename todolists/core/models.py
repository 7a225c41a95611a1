from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Todo:
    """A single item in a list. ``id`` is its position and is never serialized."""

    name: str
    completed: bool = False
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: Optional[int] = None) -> "Todo":
        return cls(name=str(data.get("name", "")), completed=bool(data.get("completed", False)), id=index)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "completed": self.completed}


@dataclass
class TodoList:
    """A named, ordered collection of todos. ``id`` is its position in the session."""

    name: str
    todos: List[Todo] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: Optional[int] = None) -> "TodoList":
        todos = [Todo.from_dict(todo, i) for i, todo in enumerate(data.get("todos") or [])]
        return cls(name=str(data.get("name", "")), todos=todos, id=index)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "todos": [todo.to_dict() for todo in self.todos]}

    def reindex_todos(self) -> None:
        for index, todo in enumerate(self.todos):
            todo.id = index
