import logging
import time
from typing import Callable

from fastapi import Request
from fastapi.responses import HTMLResponse

from .errors import NotFoundError
from .http import render


logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


def _request_id(request: Request) -> str:
    return f"{int(time.time() * 1000)}-{id(request)}"


def describe_target(request: Request) -> str:
    """Name the list/todo a request addressed, e.g. "list=0 todo=2"."""
    params = request.scope.get("path_params") or {}
    parts = [f"{label}={params[key]}" for key, label in (("list_id", "list"), ("todo_id", "todo")) if key in params]
    return " ".join(parts) or "-"


async def log_requests(request: Request, call_next: Callable):
    """Log every mutation, plus reads that fail or run slow.

    Path params are filled in by the router, so the target is read after
    ``call_next`` returns.
    """
    start_time = time.monotonic()
    request_id = _request_id(request)

    try:
        response = await call_next(request)
    except Exception as e:
        elapsed = time.monotonic() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} target={describe_target(request)} failed after {elapsed:.2f}s: {e}")
        raise

    elapsed = time.monotonic() - start_time
    message = f"[{request_id}] {request.method} {request.url.path} target={describe_target(request)} status={response.status_code} {elapsed:.2f}s"
    if response.status_code >= 500:
        logger.error(message)
    elif response.status_code >= 400:
        logger.warning(message)
    elif request.method == "POST" or elapsed > SLOW_REQUEST_SECONDS:
        logger.info(message)
    return response


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return render(request, "not_found.html", {"message": exc.message}, status_code=exc.status_code)


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)

    return HTMLResponse(status_code=500, content="<h1>Internal server error</h1>")
