# pastebin/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from fastapi import Request, Response
from jose import JWTError, jwt
from passlib.context import CryptContext
from pastebin.core.config import (
    SECRET_KEY,
    ALGORITHM,
    SESSION_COOKIE_NAME,
    SESSION_EXPIRE_MINUTES,
    COOKIE_SECURE,
)


logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# -------------------------------
# Passwords
# -------------------------------

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# -------------------------------
# Session cookie
# -------------------------------

def create_access_token(username: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=SESSION_EXPIRE_MINUTES))
    return jwt.encode({"sub": username, "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> str | None:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    username = payload.get("sub")
    return username if isinstance(username, str) and username else None


def resolve_identity(request: Request) -> str | None:
    """
    Returns the username carried by the signed session cookie,
    or None for anonymous requests and tampered or expired cookies.
    """
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        return None
    username = decode_access_token(token)
    if username is None:
        logger.debug("Ignoring invalid session cookie")
    return username


def login_response(response: Response, username: str) -> Response:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        create_access_token(username),
        max_age=SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=COOKIE_SECURE,
    )
    return response


def logout_response(response: Response) -> Response:
    response.delete_cookie(SESSION_COOKIE_NAME, httponly=True, samesite="lax", secure=COOKIE_SECURE)
    return response
