from datetime import datetime

import pytest
from domain.entities.note import Note
from domain.entities.pagination import PaginationMetadata
from domain.policies.ownership import caller_owns_note


def test_create_new_assigns_id_and_strips_text():
    note = Note.create_new(title="  Monday  ", content=" Rain again \n", owner="alice")

    assert note.id
    assert note.owner == "alice"
    assert note.title == "Monday"
    assert note.content == "Rain again"
    assert note.image_key is None
    assert note.audio_key is None
    assert note.created_at == note.updated_at


def test_create_new_generates_distinct_ids():
    first = Note.create_new(title="a", content="b", owner="alice")
    second = Note.create_new(title="a", content="b", owner="alice")

    assert first.id != second.id


@pytest.mark.parametrize(
    "title, content",
    [("", "body"), ("   ", "body"), ("title", ""), ("title", "\n\t ")],
)
def test_blank_title_or_content_is_rejected(title, content):
    with pytest.raises(ValueError):
        Note.create_new(title=title, content=content, owner="alice")


def test_title_longer_than_column_is_rejected():
    with pytest.raises(ValueError, match="255"):
        Note.create_new(title="x" * 256, content="body", owner="alice")


def test_owner_is_required():
    with pytest.raises(ValueError):
        Note.create_new(title="t", content="c", owner="")


def test_has_attachments():
    plain = Note.create_new(title="t", content="c", owner="alice")
    with_audio = Note.create_new(title="t", content="c", owner="alice", audio_key="k.webm")

    assert not plain.has_attachments()
    assert with_audio.has_attachments()


def test_empty_attachment_keys_are_stored_as_none():
    note = Note.create_new(title="t", content="c", owner="alice", image_key="")

    assert note.image_key is None


def test_is_owned_by():
    note = Note.create_new(title="t", content="c", owner="alice")

    assert note.is_owned_by("alice")
    assert not note.is_owned_by("bob")
    assert not note.is_owned_by("")


class TestCallerOwnsNote:
    def _note(self, owner="alice"):
        now = datetime.utcnow()
        return Note(
            id="n-1",
            owner=owner,
            title="t",
            content="c",
            created_at=now,
            updated_at=now,
        )

    def test_owner_passes(self):
        assert caller_owns_note("alice", self._note())

    def test_other_caller_is_rejected(self):
        assert not caller_owns_note("bob", self._note())

    def test_missing_note_is_rejected(self):
        assert not caller_owns_note("alice", None)

    def test_anonymous_caller_is_rejected(self):
        assert not caller_owns_note(None, self._note())
        assert not caller_owns_note("", self._note())

    def test_comparison_is_exact(self):
        assert not caller_owns_note("Alice", self._note())


def test_pagination_metadata():
    meta = PaginationMetadata.calculate(current_page=2, total_notes=25, notes_per_page=10)

    assert meta.total_pages == 3
    assert meta.has_next
    assert meta.has_previous
    assert meta.offset == 10


def test_pagination_metadata_for_empty_listing():
    meta = PaginationMetadata.calculate(current_page=1, total_notes=0, notes_per_page=10)

    assert meta.total_pages == 1
    assert not meta.has_next
    assert not meta.has_previous
