# pastebin/models/comment.py

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from . import Base


class Comment(Base):
    """
    Append-only note on a paste.
    paste_id refers to the paste without owning it; a paste's comments are
    always queried, never stored on the paste.
    """
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    creator_username = Column(String(64), ForeignKey("users.username"), nullable=False)
    paste_id = Column(Integer, ForeignKey("pastes.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(Integer, nullable=False)
