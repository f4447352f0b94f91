# pastebin/core/validation.py

import re


TITLE_PATTERN = re.compile(r"[A-Za-z0-9._()]*")

MAX_TITLE_LENGTH = 255
MAX_USERNAME_LENGTH = 64


def is_valid_title(candidate: str) -> bool:
    """
    True when every character is an ASCII letter, digit, '.', '_', '(' or ')'.
    The empty string passes; length limits are applied by the callers.
    """
    return TITLE_PATTERN.fullmatch(candidate) is not None


def is_valid_username(candidate: str) -> bool:
    return 0 < len(candidate) <= MAX_USERNAME_LENGTH and is_valid_title(candidate)
