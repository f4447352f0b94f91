# pastebin/core/config.py

import os
import secrets
from dotenv import load_dotenv


load_dotenv()


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/pastebin.db")

# Without a configured key every process signs with its own, so sessions
# end when the server restarts and are not shared between workers.
SECRET_KEY_GENERATED = not os.getenv("JWT_SECRET_KEY")
SECRET_KEY = os.getenv("JWT_SECRET_KEY") or secrets.token_urlsafe(32)
ALGORITHM = "HS256"

SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")
SESSION_EXPIRE_MINUTES = int(os.getenv("SESSION_EXPIRE_MINUTES", "1440"))
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() in ("1", "true", "yes")

MAX_FORM_BYTES = int(os.getenv("MAX_FORM_BYTES", str(64 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
