# pastebin/core/errors.py


class PastebinError(Exception):
    """
    Base class for failures raised by the stores.
    Route handlers translate each subclass into an HTTP status.
    """
    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.detail)
        self.detail = detail or self.detail


class InvalidTitle(PastebinError):
    status_code = 400
    detail = "Invalid title: use letters, digits, '.', '_', '(' and ')'"


class InvalidUsername(PastebinError):
    status_code = 400
    detail = "Invalid username: use letters, digits, '.', '_', '(' and ')'"


class InvalidComment(PastebinError):
    status_code = 400
    detail = "Comment cannot be empty"


class DuplicateTitle(PastebinError):
    status_code = 409
    detail = "Paste with this title already exists"


class DuplicateUsername(PastebinError):
    status_code = 409
    detail = "User exists"


class PasteNotFound(PastebinError):
    status_code = 404
    detail = "Paste not found"


class StorageError(PastebinError):
    status_code = 500
    detail = "Storage failure"


class InvalidPassword(PastebinError):
    status_code = 400
    detail = "Password must be between 1 and 4096 characters"
