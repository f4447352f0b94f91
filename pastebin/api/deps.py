# pastebin/api/deps.py

from datetime import datetime
from pathlib import Path
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from pastebin.core.security import resolve_identity


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

ANONYMOUS = "Anonymous"


def _format_timestamp(value: int) -> str:
    return datetime.fromtimestamp(value).strftime("%Y-%m-%d %H:%M")


# Created once at import and shared read-only by every request.
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["timestamp"] = _format_timestamp


def get_current_user(request: Request) -> Optional[str]:
    return resolve_identity(request)


def require_user(username: Optional[str] = Depends(get_current_user)) -> str:
    """
    JSON routes answer anonymous callers with 401.
    Page routes check get_current_user themselves and redirect to /login.
    """
    if username is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )
    return username


def render(
    request: Request,
    name: str,
    username: Optional[str],
    context: dict | None = None,
    status_code: int = 200,
):
    page = {"user_status": username or ANONYMOUS, "logged_in": username is not None}
    page.update(context or {})
    return templates.TemplateResponse(request, name, page, status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)
