# pastebin/models/user.py

from datetime import datetime
from sqlalchemy import Column, String, DateTime
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    The username doubles as the session identity.
    """
    __tablename__ = "users"

    username = Column(String(64), primary_key=True)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.now)
