import asyncio
import logging
from datetime import datetime, timedelta

import pytest
from domain.entities.note import Note
from domain.services.note_service import NoteError, NoteNotFoundError, NoteService
from infrastructure.repositories.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)


def run(coro):
    return asyncio.run(coro)


class FailingRepository(SqlAlchemyNoteRepository):
    async def create_note(self, db_session, note):
        raise RuntimeError("disk full")


@pytest.fixture
def repository():
    return SqlAlchemyNoteRepository()


@pytest.fixture
def service(repository):
    return NoteService(repository)


def _seed(repository, db_session, owner, count, start=None):
    start = start or datetime(2024, 1, 1, 8, 0, 0)
    notes = []
    for index in range(count):
        created = start + timedelta(minutes=index)
        note = Note(
            id=f"{owner}-{index:03d}",
            owner=owner,
            title=f"Entry {index}",
            content=f"Body {index}",
            created_at=created,
            updated_at=created,
        )
        notes.append(run(repository.create_note(db_session, note)))
    return notes


def test_create_then_list_round_trip(service, db_session):
    created = run(service.create_note(db_session, owner="alice", title="T", content="C"))

    notes, pagination = run(service.list_notes_paginated(db_session, "alice", 1, 100))

    assert [note.id for note in notes] == [created.id]
    assert notes[0].title == "T"
    assert notes[0].content == "C"
    assert notes[0].image_key is None
    assert notes[0].audio_key is None
    assert pagination.total_notes == 1


def test_create_keeps_attachment_keys(service, db_session):
    created = run(
        service.create_note(
            db_session,
            owner="alice",
            title="T",
            content="C",
            image_key="a.png",
            audio_key="b.webm",
        )
    )

    assert created.image_key == "a.png"
    assert created.audio_key == "b.webm"


def test_create_rejects_blank_content(service, db_session):
    with pytest.raises(ValueError):
        run(service.create_note(db_session, owner="alice", title="T", content="  "))


def test_create_wraps_store_failures(db_session):
    service = NoteService(FailingRepository())

    with pytest.raises(NoteError, match="disk full"):
        run(service.create_note(db_session, owner="alice", title="T", content="C"))


def test_listing_is_scoped_to_owner_and_in_creation_order(service, repository, db_session):
    alice_notes = _seed(repository, db_session, "alice", 3)
    _seed(repository, db_session, "bob", 2)

    notes, _ = run(service.list_notes_paginated(db_session, "alice", 1, 100))

    assert [note.id for note in notes] == [note.id for note in alice_notes]


def test_listing_pages(service, repository, db_session):
    _seed(repository, db_session, "alice", 5)

    notes, pagination = run(service.list_notes_paginated(db_session, "alice", 2, 2))

    assert [note.id for note in notes] == ["alice-002", "alice-003"]
    assert pagination.total_pages == 3
    assert pagination.has_next
    assert pagination.has_previous


@pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (1, 101)])
def test_listing_rejects_bad_pagination(service, db_session, page, limit):
    with pytest.raises(ValueError):
        run(service.list_notes_paginated(db_session, "alice", page, limit))


def test_get_note_hides_other_owners_notes(service, db_session):
    created = run(service.create_note(db_session, owner="alice", title="T", content="C"))

    with pytest.raises(NoteNotFoundError) as wrong_owner:
        run(service.get_note(db_session, created.id, "bob"))
    with pytest.raises(NoteNotFoundError) as missing:
        run(service.get_note(db_session, "missing", "bob"))

    assert str(wrong_owner.value) == f"Note {created.id} not found"
    assert str(missing.value) == "Note missing not found"


def test_delete_removes_exactly_one_note(service, repository, db_session):
    notes = _seed(repository, db_session, "alice", 3)

    assert run(service.delete_note(db_session, notes[1].id, "alice"))

    remaining, _ = run(service.list_notes_paginated(db_session, "alice", 1, 100))
    assert [note.id for note in remaining] == [notes[0].id, notes[2].id]


def test_delete_by_non_owner_is_not_found(service, repository, db_session):
    notes = _seed(repository, db_session, "alice", 1)

    with pytest.raises(NoteNotFoundError):
        run(service.delete_note(db_session, notes[0].id, "bob"))

    assert run(repository.get_note_by_id(db_session, notes[0].id)) is not None


def test_delete_reports_attachments_left_in_storage(service, db_session, caplog):
    with_image = run(
        service.create_note(
            db_session, owner="alice", title="T", content="C", image_key="a.png"
        )
    )
    plain = run(service.create_note(db_session, owner="alice", title="P", content="C"))

    with caplog.at_level(logging.INFO, logger="domain.services.note_service"):
        run(service.delete_note(db_session, plain.id, "alice"))
        run(service.delete_note(db_session, with_image.id, "alice"))

    left = [r.getMessage() for r in caplog.records if "left in storage" in r.getMessage()]
    assert left == [f"Attachments of note {with_image.id} are left in storage"]
