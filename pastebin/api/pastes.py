# pastebin/api/pastes.py

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session
from pastebin.api.deps import get_current_user, redirect, render
from pastebin.core.errors import PastebinError, StorageError
from pastebin.crud import comments, pastes
from pastebin.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
def index(
    request: Request,
    username: Optional[str] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Lists every paste. A failing query renders an empty list instead of an error page.
    """
    try:
        rows = pastes.list_all(db)
    except StorageError:
        logger.error("Error fetching pastes", exc_info=True)
        rows = []
    return render(request, "index.html", username, {"pastes": rows})


@router.get("/paste/{title}")
def view_paste(
    title: str,
    request: Request,
    username: Optional[str] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        paste = pastes.get_by_title_and_increment_views(db, title)
        if paste is None:
            return render(request, "error.html", username, {"message": "Paste not found"}, status_code=404)
        thread = comments.list_by_paste_title(db, title)
    except StorageError:
        logger.error("Error fetching paste %r", title, exc_info=True)
        return render(request, "error.html", username, {"message": "Error fetching paste"}, status_code=500)

    return render(request, "paste.html", username, {"paste": paste, "comments": thread})


# -------------------------------
# Paste creation
# -------------------------------

@router.get("/create")
def create_form(request: Request, username: Optional[str] = Depends(get_current_user)):
    if username is None:
        return redirect("/login")
    return render(request, "create.html", username)


@router.post("/create")
def create_paste(
    request: Request,
    title: str = Form(""),
    content: str = Form(""),
    username: Optional[str] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if username is None:
        return redirect("/login")

    try:
        pastes.create(db, username, title, content)
    except PastebinError as e:
        if e.status_code >= 500:
            logger.error("Error creating paste %r", title, exc_info=True)
        return render(
            request,
            "create.html",
            username,
            {"error": e.detail, "title": title, "content": content},
            status_code=e.status_code,
        )
    return redirect(f"/paste/{title}")
