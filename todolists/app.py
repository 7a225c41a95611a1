import logging
from datetime import datetime

from fastapi import Depends, FastAPI, Form, Request
from starlette.middleware.sessions import SessionMiddleware

from .core.completion import is_list_complete
from .core.config import Config
from .core.errors import NotFoundError
from .core.http import render, see_other
from .core.middleware import global_exception_handler, log_requests, not_found_handler
from .core.sorting import sort_lists, sort_todos
from .core.validation import Errors
from .services import lists_service
from .services.session_store import SessionState, get_session_state


logger = logging.getLogger(__name__)


def _render_list(request: Request, state: SessionState, list_id: int, *, todo: str = ""):
    todo_list = lists_service.get_list(state, list_id)
    return render(request, "list.html", {
        "list": todo_list,
        "todos": sort_todos(todo_list.todos),
        "complete": is_list_complete(todo_list),
        "todo": todo,
        "flash": state.pop_flash(),
    })


def _render_errors(request: Request, state: SessionState, result: Errors, template_name: str, context: dict):
    state.flash("error", result.messages)
    ctx = dict(context)
    ctx["flash"] = state.pop_flash()
    return render(request, template_name, ctx)


# Initialize FastAPI
app = FastAPI(title="Todo Lists")

app.add_middleware(
    SessionMiddleware,
    secret_key=Config.SESSION_SECRET,
    session_cookie=Config.SESSION_COOKIE,
    max_age=Config.SESSION_MAX_AGE,
    https_only=Config.is_production(),
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(NotFoundError)
async def _not_found_handler(request, exc):
    return await not_found_handler(request, exc)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/")
async def root():
    return see_other("/lists")


@app.get("/lists")
async def show_lists(request: Request, state: SessionState = Depends(get_session_state)):
    """View all lists, incomplete ones first."""
    return render(request, "lists.html", {
        "lists": sort_lists(state.lists),
        "flash": state.pop_flash(),
    })


@app.post("/lists")
async def create_list(
    request: Request,
    list_name: str = Form(""),
    state: SessionState = Depends(get_session_state),
):
    list_name = list_name.strip()

    result = lists_service.create_list(state, list_name)
    if isinstance(result, Errors):
        return _render_errors(request, state, result, "new_list.html", {"list_name": list_name})

    state.flash("success", "The list has been created.")
    return see_other("/lists")


@app.get("/lists/new")
async def new_list(request: Request, state: SessionState = Depends(get_session_state)):
    return render(request, "new_list.html", {"list_name": "", "flash": state.pop_flash()})


@app.get("/lists/{list_id}")
async def show_list(request: Request, list_id: int, state: SessionState = Depends(get_session_state)):
    return _render_list(request, state, list_id)


@app.get("/lists/{list_id}/edit")
async def edit_list(request: Request, list_id: int, state: SessionState = Depends(get_session_state)):
    todo_list = lists_service.get_list(state, list_id)
    return render(request, "edit_list.html", {
        "list": todo_list,
        "list_name": todo_list.name,
        "flash": state.pop_flash(),
    })


@app.post("/lists/{list_id}")
async def update_list(
    request: Request,
    list_id: int,
    list_name: str = Form(""),
    state: SessionState = Depends(get_session_state),
):
    list_name = list_name.strip()

    result = lists_service.rename_list(state, list_id, list_name)
    if isinstance(result, Errors):
        todo_list = lists_service.get_list(state, list_id)
        return _render_errors(request, state, result, "edit_list.html", {"list": todo_list, "list_name": list_name})

    state.flash("success", "The list name has been updated.")
    return see_other(f"/lists/{list_id}")


@app.post("/lists/{list_id}/delete")
async def delete_list(list_id: int, state: SessionState = Depends(get_session_state)):
    lists_service.delete_list(state, list_id)
    state.flash("success", "The list has been deleted.")
    return see_other("/lists")


@app.post("/lists/{list_id}/todos")
async def add_todo(
    request: Request,
    list_id: int,
    todo: str = Form(""),
    state: SessionState = Depends(get_session_state),
):
    text = todo.strip()

    result = lists_service.add_todo(state, list_id, text)
    if isinstance(result, Errors):
        state.flash("error", result.messages)
        return _render_list(request, state, list_id, todo=text)

    state.flash("success", "The todo was added.")
    return see_other(f"/lists/{list_id}")


@app.post("/lists/{list_id}/todos/{todo_id}/delete")
async def delete_todo(list_id: int, todo_id: int, state: SessionState = Depends(get_session_state)):
    todo = lists_service.delete_todo(state, list_id, todo_id)
    todo_list = lists_service.get_list(state, list_id)
    state.flash("success", f'Todo "{todo.name}" was deleted from {todo_list.name}.')
    return see_other(f"/lists/{list_id}")


@app.post("/lists/{list_id}/todos/{todo_id}")
async def update_todo(
    list_id: int,
    todo_id: int,
    completed: str = Form("false"),
    state: SessionState = Depends(get_session_state),
):
    is_completed = completed == "true"
    lists_service.set_todo_completed(state, list_id, todo_id, is_completed)
    state.flash("success", "The todo has been updated.")
    return see_other(f"/lists/{list_id}")


@app.post("/lists/{list_id}/complete_all")
async def complete_all(list_id: int, state: SessionState = Depends(get_session_state)):
    todo_list = lists_service.complete_all(state, list_id)
    state.flash("success", f'All todos for list "{todo_list.name}" were marked complete.')
    return see_other(f"/lists/{list_id}")


@app.get("/health")
async def health_check():
    """Basic liveness check."""
    return {
        "status": "healthy",
        "service": "todo-lists",
        "environment": Config.ENVIRONMENT,
        "timestamp": datetime.now().isoformat(),
    }
