# pastebin/models/paste.py

import time
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from . import Base


def unix_now() -> int:
    return int(time.time())


class Paste(Base):
    __tablename__ = "pastes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), unique=True, nullable=False, index=True)
    creator_username = Column(String(64), ForeignKey("users.username"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(Integer, nullable=False, default=unix_now)
    views = Column(Integer, nullable=False, default=0, server_default="0")
