# pastebin/api/comments.py

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session
from pastebin.api.deps import get_current_user, redirect, render
from pastebin.core.errors import PastebinError
from pastebin.crud import comments
from pastebin.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/comment/{title}")
def create_comment(
    title: str,
    request: Request,
    content: str = Form(""),
    username: Optional[str] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if username is None:
        return redirect("/login")

    try:
        comments.create(db, username, title, content)
    except PastebinError as e:
        if e.status_code >= 500:
            logger.error("Error adding comment to %r", title, exc_info=True)
        return render(request, "error.html", username, {"message": e.detail}, status_code=e.status_code)
    return redirect(f"/paste/{title}")
