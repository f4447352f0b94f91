# pastebin/crud/pastes.py

import logging
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from pastebin.core.errors import DuplicateTitle, InvalidTitle, StorageError
from pastebin.core.validation import MAX_TITLE_LENGTH, is_valid_title
from pastebin.models.paste import Paste


logger = logging.getLogger(__name__)


def list_all(db: Session) -> List[Paste]:
    try:
        return db.query(Paste).order_by(Paste.id.asc()).all()
    except SQLAlchemyError as e:
        raise StorageError() from e


def get_by_title(db: Session, title: str) -> Optional[Paste]:
    try:
        return db.query(Paste).filter(Paste.title == title).first()
    except SQLAlchemyError as e:
        raise StorageError() from e


def create(db: Session, creator_username: str, title: str, content: str) -> Paste:
    """
    Inserts a paste and commits before returning.
    The existence check is advisory; the unique constraint on title decides.
    """
    if not title or len(title) > MAX_TITLE_LENGTH or not is_valid_title(title):
        raise InvalidTitle()
    if get_by_title(db, title) is not None:
        raise DuplicateTitle()

    paste = Paste(creator_username=creator_username, title=title, content=content)
    db.add(paste)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if get_by_title(db, title) is not None:
            raise DuplicateTitle() from e
        raise StorageError() from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e

    db.refresh(paste)
    logger.info("Paste %r created by %s", title, creator_username)
    return paste


def get_by_title_and_increment_views(db: Session, title: str) -> Optional[Paste]:
    """
    Increments the view counter and returns the updated row in one
    UPDATE ... RETURNING statement, so concurrent views are never lost.
    """
    stmt = (
        update(Paste)
        .where(Paste.title == title)
        .values(views=Paste.views + 1)
        .returning(Paste)
    )
    try:
        paste = db.scalars(stmt).first()
        if paste is not None:
            db.expunge(paste)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e
    return paste
