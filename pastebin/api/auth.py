# pastebin/api/auth.py

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session
from pastebin.api.deps import get_current_user, redirect, render, require_user
from pastebin.core.errors import PastebinError
from pastebin.core.security import login_response, logout_response
from pastebin.crud import users
from pastebin.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter()


class User(BaseModel):
    username: str


# -------------------------------
# Login
# -------------------------------

@router.get("/login")
def login_form(request: Request, username: Optional[str] = Depends(get_current_user)):
    if username is not None:
        return redirect("/")
    return render(request, "login.html", None)


@router.post("/login")
def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        user = users.authenticate_user(db, username, password)
    except PastebinError as e:
        if e.status_code >= 500:
            logger.error("Login lookup failed for %s", username, exc_info=True)
        return render(request, "login.html", None, {"error": e.detail}, status_code=e.status_code)

    if not user:
        logger.info("Failed login for %s", username)
        return render(
            request,
            "login.html",
            None,
            {"error": "Incorrect username or password", "username": username},
            status_code=401,
        )
    return login_response(redirect("/"), user.username)


# -------------------------------
# Registration
# -------------------------------

@router.get("/register")
def register_form(request: Request, username: Optional[str] = Depends(get_current_user)):
    if username is not None:
        return redirect("/")
    return render(request, "register.html", None)


@router.post("/register")
def register(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    db: Session = Depends(get_db),
):
    try:
        user = users.create_user(db, username, password)
    except PastebinError as e:
        if e.status_code >= 500:
            logger.error("Registration failed for %s", username, exc_info=True)
        return render(
            request,
            "register.html",
            None,
            {"error": e.detail, "username": username},
            status_code=e.status_code,
        )
    return login_response(redirect("/"), user.username)


# -------------------------------
# Logout
# -------------------------------

@router.get("/logout")
def logout_form(request: Request, username: Optional[str] = Depends(get_current_user)):
    if username is None:
        return redirect("/")
    return render(request, "logout.html", username)


@router.post("/logout")
def logout():
    return logout_response(redirect("/"))


@router.get("/users/me", response_model=User)
def read_users_me(current_user: str = Depends(require_user)):
    return {"username": current_user}
