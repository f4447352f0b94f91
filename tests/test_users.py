import pytest

from pastebin.core.errors import DuplicateUsername, InvalidPassword, InvalidUsername
from pastebin.crud import users


def test_create_and_authenticate(db):
    users.create_user(db, "carol", "pw")
    assert users.authenticate_user(db, "carol", "pw").username == "carol"
    assert users.authenticate_user(db, "carol", "wrong") is None
    assert users.authenticate_user(db, "nobody", "pw") is None


def test_duplicate_username(db, alice):
    with pytest.raises(DuplicateUsername):
        users.create_user(db, "alice", "other")


def test_oversized_password(db, alice):
    with pytest.raises(InvalidPassword):
        users.create_user(db, "bob", "p" * 5000)
    assert users.get_by_username(db, "bob") is None
    assert users.authenticate_user(db, "alice", "p" * 5000) is None


def test_malformed_username_on_authenticate(db):
    with pytest.raises(InvalidUsername):
        users.authenticate_user(db, "bad name", "pw")
