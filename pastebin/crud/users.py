# pastebin/crud/users.py

import logging
from typing import Optional
from passlib.exc import PasswordSizeError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from pastebin.core.errors import DuplicateUsername, InvalidPassword, InvalidUsername, StorageError
from pastebin.core.security import get_password_hash, verify_password
from pastebin.core.validation import is_valid_username
from pastebin.models.user import User


logger = logging.getLogger(__name__)


def get_by_username(db: Session, username: str) -> Optional[User]:
    try:
        return db.query(User).filter(User.username == username).first()
    except SQLAlchemyError as e:
        raise StorageError() from e


def create_user(db: Session, username: str, password: str) -> User:
    if not is_valid_username(username):
        raise InvalidUsername()
    if not password:
        raise InvalidPassword()
    if get_by_username(db, username) is not None:
        raise DuplicateUsername()

    try:
        hashed_password = get_password_hash(password)
    except PasswordSizeError as e:
        raise InvalidPassword() from e

    user = User(username=username, hashed_password=hashed_password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # A concurrent registration won the race for this username.
        if get_by_username(db, username) is not None:
            raise DuplicateUsername() from e
        raise StorageError() from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e

    db.refresh(user)
    logger.info("Registered user %s", username)
    return user


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    """
    Returns the user on a correct password, None otherwise.
    Malformed usernames raise InvalidUsername without touching the database.
    """
    if not is_valid_username(username):
        raise InvalidUsername()
    user = get_by_username(db, username)
    if not user:
        return None
    try:
        if not verify_password(password, user.hashed_password):
            return None
    except PasswordSizeError:
        return None
    return user
