# pastebin/crud/comments.py

import logging
from typing import List
from sqlalchemy import insert, literal, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from pastebin.core.errors import InvalidComment, PasteNotFound, StorageError
from pastebin.models.comment import Comment
from pastebin.models.paste import Paste, unix_now


logger = logging.getLogger(__name__)


def create(db: Session, creator_username: str, paste_title: str, content: str) -> None:
    """
    Resolves the paste title and inserts the comment in a single
    INSERT ... SELECT; no inserted row means the paste does not exist.
    """
    if not content.strip():
        raise InvalidComment()

    source = (
        select(
            literal(creator_username),
            literal(content),
            Paste.id,
            literal(unix_now()),
        )
        .where(Paste.title == paste_title)
    )
    stmt = insert(Comment.__table__).from_select(
        ["creator_username", "content", "paste_id", "created_at"],
        source,
    )
    try:
        result = db.execute(stmt)
        if result.rowcount == 0:
            db.rollback()
            raise PasteNotFound()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError() from e

    logger.info("Comment added to %r by %s", paste_title, creator_username)


def list_by_paste_title(db: Session, title: str) -> List[Comment]:
    try:
        return (
            db.query(Comment)
            .join(Paste, Comment.paste_id == Paste.id)
            .filter(Paste.title == title)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )
    except SQLAlchemyError as e:
        raise StorageError() from e
