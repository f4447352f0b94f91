import pytest

from pastebin.core.errors import InvalidComment, PasteNotFound
from pastebin.crud import comments, pastes
from pastebin.models.comment import Comment


def test_comment_on_missing_paste_is_rejected(db, alice):
    with pytest.raises(PasteNotFound):
        comments.create(db, "alice", "missing", "hi")
    assert db.query(Comment).count() == 0


def test_empty_comment_is_rejected(db, alice):
    pastes.create(db, "alice", "p", "content")
    with pytest.raises(InvalidComment):
        comments.create(db, "alice", "p", "   ")


def test_comments_listed_chronologically(db, alice):
    pastes.create(db, "alice", "p", "content")
    pastes.create(db, "alice", "other", "content")
    comments.create(db, "alice", "p", "first")
    comments.create(db, "alice", "other", "elsewhere")
    comments.create(db, "alice", "p", "second")

    thread = comments.list_by_paste_title(db, "p")
    assert [c.content for c in thread] == ["first", "second"]
    assert all(c.paste_id == pastes.get_by_title(db, "p").id for c in thread)


def test_list_for_missing_paste_is_empty(db):
    assert comments.list_by_paste_title(db, "missing") == []
