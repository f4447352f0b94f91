import threading

import pytest

from pastebin.core.errors import DuplicateTitle, InvalidTitle
from pastebin.crud import pastes
from pastebin.database import SessionLocal


def test_create_and_list_in_insertion_order(db, alice):
    pastes.create(db, "alice", "first", "one")
    pastes.create(db, "alice", "second", "two")

    rows = pastes.list_all(db)
    assert [p.title for p in rows] == ["first", "second"]
    assert rows[0].views == 0
    assert rows[0].creator_username == "alice"
    assert rows[0].created_at > 0


def test_duplicate_title_is_rejected(db, alice):
    pastes.create(db, "alice", "dup", "one")
    with pytest.raises(DuplicateTitle):
        pastes.create(db, "alice", "dup", "two")

    assert pastes.get_by_title(db, "dup").content == "one"


def test_unique_constraint_decides_when_precheck_misses(db, alice, monkeypatch):
    pastes.create(db, "alice", "dup", "one")

    real_get = pastes.get_by_title
    calls = []

    def stale_get(session, title):
        calls.append(title)
        if len(calls) == 1:
            return None
        return real_get(session, title)

    monkeypatch.setattr(pastes, "get_by_title", stale_get)
    with pytest.raises(DuplicateTitle):
        pastes.create(db, "alice", "dup", "two")
    assert len(calls) == 2


@pytest.mark.parametrize("title", ["", "has space", "slash/path", "x" * 256])
def test_invalid_titles_are_rejected(db, alice, title):
    with pytest.raises(InvalidTitle):
        pastes.create(db, "alice", title, "content")
    assert pastes.list_all(db) == []


def test_increment_returns_updated_row(db, alice):
    pastes.create(db, "alice", "notes.txt", "hello")

    first = pastes.get_by_title_and_increment_views(db, "notes.txt")
    second = pastes.get_by_title_and_increment_views(db, "notes.txt")

    assert first.content == "hello"
    assert first.views == 1
    assert second.views == 2


def test_increment_missing_paste_returns_none(db):
    assert pastes.get_by_title_and_increment_views(db, "missing") is None


def test_concurrent_views_are_not_lost(db, alice):
    pastes.create(db, "alice", "hot", "content")
    n = 10
    errors = []

    def view():
        session = SessionLocal()
        try:
            pastes.get_by_title_and_increment_views(session, "hot")
        except Exception as e:
            errors.append(e)
        finally:
            session.close()

    threads = [threading.Thread(target=view) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    db.expire_all()
    assert pastes.get_by_title(db, "hot").views == n
