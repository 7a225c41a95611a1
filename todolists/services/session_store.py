import json
import logging
from base64 import b64encode
from typing import Any, Dict, List, MutableMapping, Union

from fastapi import Request

from ..core.models import TodoList


logger = logging.getLogger(__name__)

LISTS_KEY = "lists"
FLASH_KEYS = ("error", "success")

# Browsers drop cookies over ~4 KB; leave room for the signature and attributes
COOKIE_WARN_BYTES = 3500

FlashMessage = Union[str, List[str]]


class SessionState:
    """Typed view over the session payload.

    Lists are loaded once from the session and written back by ``commit``.
    Positional ids are assigned on load and kept in step on deletion; they
    never reach the serialized payload.
    """

    def __init__(self, session: MutableMapping[str, Any]):
        self._session = session
        raw = session.get(LISTS_KEY)
        if raw is None:
            raw = []
            session[LISTS_KEY] = raw
        self.lists: List[TodoList] = [TodoList.from_dict(data, index) for index, data in enumerate(raw)]

    def reindex(self) -> None:
        for index, todo_list in enumerate(self.lists):
            todo_list.id = index
            todo_list.reindex_todos()

    def payload_size(self) -> int:
        """Encoded size of the session as the cookie transport will write it."""
        return len(b64encode(json.dumps(dict(self._session)).encode("utf-8")))

    def commit(self) -> None:
        self.reindex()
        self._session[LISTS_KEY] = [todo_list.to_dict() for todo_list in self.lists]
        size = self.payload_size()
        if size > COOKIE_WARN_BYTES:
            logger.warning(f"Session payload is {size} bytes across {len(self.lists)} lists; browsers may drop the cookie")

    def flash(self, key: str, message: FlashMessage) -> None:
        if key not in FLASH_KEYS:
            raise ValueError(f"Unknown flash key: {key}")
        self._session[key] = message

    def pop_flash(self) -> Dict[str, FlashMessage]:
        """Return and clear pending flash messages so each renders once."""
        return {key: self._session.pop(key) for key in FLASH_KEYS if key in self._session}


def get_session_state(request: Request) -> SessionState:
    return SessionState(request.session)
