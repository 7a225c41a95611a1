import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from .completion import completion_ratio, list_completion_status, todo_completion_status


logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    completion_ratio=completion_ratio,
    list_completion_status=list_completion_status,
    todo_completion_status=todo_completion_status,
)


def see_other(url: str) -> RedirectResponse:
    """Redirect after a successful POST so a reload does not resubmit the form."""
    return RedirectResponse(url=url, status_code=303)


def render(
    request: Request,
    template_name: str,
    context: Optional[Dict[str, Any]] = None,
    *,
    status_code: int = 200,
):
    ctx = dict(context or {})
    ctx.setdefault("flash", {})
    try:
        return templates.TemplateResponse(request, template_name, ctx, status_code=status_code)
    except Exception as e:
        logger.error(f"Failed to render template {template_name}: {e}")
        raise
