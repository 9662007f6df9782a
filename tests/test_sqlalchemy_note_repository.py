import asyncio

import pytest
from domain.entities.note import Note
from infrastructure.models.note_orm import NoteORM
from infrastructure.repositories.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def repository():
    return SqlAlchemyNoteRepository()


def test_create_persists_all_fields(repository, db_session):
    note = Note.create_new(
        title="Garden", content="Tomatoes!", owner="alice", image_key="x.jpg"
    )

    created = run(repository.create_note(db_session, note))

    row = db_session.query(NoteORM).filter(NoteORM.id == note.id).one()
    assert created.id == note.id
    assert row.owner == "alice"
    assert row.title == "Garden"
    assert row.content == "Tomatoes!"
    assert row.image_key == "x.jpg"
    assert row.audio_key is None


def test_get_note_by_id_is_not_owner_scoped(repository, db_session):
    note = run(repository.create_note(db_session, Note.create_new("t", "c", "alice")))

    found = run(repository.get_note_by_id(db_session, note.id))

    assert found.owner == "alice"
    assert run(repository.get_note_by_id(db_session, "unknown")) is None


def test_list_returns_total_count(repository, db_session):
    for index in range(3):
        run(repository.create_note(db_session, Note.create_new(f"t{index}", "c", "alice")))

    notes, total = run(repository.list_notes_by_owner(db_session, "alice", 1, 2))

    assert len(notes) == 2
    assert total == 3


def test_delete_is_owner_scoped(repository, db_session):
    note = run(repository.create_note(db_session, Note.create_new("t", "c", "alice")))

    assert run(repository.delete_note(db_session, note.id, "bob")) is False
    assert run(repository.delete_note(db_session, note.id, "alice")) is True
    assert run(repository.delete_note(db_session, note.id, "alice")) is False
    assert db_session.query(NoteORM).count() == 0


def test_create_rolls_back_on_duplicate_id(repository, db_session):
    note = Note.create_new("t", "c", "alice")
    run(repository.create_note(db_session, note))

    with pytest.raises(Exception):
        run(repository.create_note(db_session, note))

    assert db_session.query(NoteORM).count() == 1


def test_list_second_page_skips_first(repository, db_session):
    for index in range(3):
        run(repository.create_note(db_session, Note.create_new(f"t{index}", "c", "alice")))

    first, _ = run(repository.list_notes_by_owner(db_session, "alice", 1, 2))
    second, total = run(repository.list_notes_by_owner(db_session, "alice", 2, 2))

    assert total == 3
    assert len(second) == 1
    assert second[0].id not in {note.id for note in first}
