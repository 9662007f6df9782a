import asyncio
import logging

import pytest
from application.functions import share_note_handler
from application.functions.share_note_handler import (
    InvalidShareEvent,
    handler,
    parse_share_event,
)
from domain.entities.note import Note
from domain.entities.share import DENIED_MESSAGE, FAILED_MESSAGE, SHARED_MESSAGE
from infrastructure.repositories.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)
from utils.dependencies import create_session_factory


@pytest.fixture
def note(session_factory):
    db = session_factory()
    try:
        return asyncio.run(
            SqlAlchemyNoteRepository().create_note(
                db, Note.create_new("Trip", "Mountains were huge", "alice")
            )
        )
    finally:
        db.close()


def _event(note_id, username="alice", recipient="friend@example.com"):
    return {
        "arguments": {"noteId": note_id, "recipientEmail": recipient},
        "identity": {"username": username},
    }


def _invoke(event, settings, email_gateway, session_factory):
    return handler(
        event,
        None,
        settings=settings,
        email_gateway=email_gateway,
        session_factory=session_factory,
    )


def test_owner_event_shares(note, settings, email_gateway, session_factory):
    message = _invoke(_event(note.id), settings, email_gateway, session_factory)

    assert message == SHARED_MESSAGE
    assert email_gateway.sent[0]["text_body"] == "Title: Trip\n\nContent: Mountains were huge"


def test_other_identity_is_denied(note, settings, email_gateway, session_factory):
    message = _invoke(_event(note.id, username="eve"), settings, email_gateway, session_factory)

    assert message == DENIED_MESSAGE
    assert email_gateway.attempts == 0


def test_malformed_event_fails_without_sending(settings, email_gateway, session_factory):
    message = _invoke({"arguments": {}}, settings, email_gateway, session_factory)

    assert message == FAILED_MESSAGE
    assert email_gateway.attempts == 0


def test_parse_share_event_requires_identity():
    with pytest.raises(InvalidShareEvent):
        parse_share_event({"arguments": {"noteId": "n", "recipientEmail": "r@x.io"}})


def test_parse_share_event():
    assert parse_share_event(_event("n-1")) == ("n-1", "friend@example.com", "alice")


def test_denied_share_logs_warning(note, settings, email_gateway, session_factory, caplog):
    with caplog.at_level(logging.WARNING, logger=share_note_handler.__name__):
        _invoke(_event(note.id, username="eve"), settings, email_gateway, session_factory)

    assert "finished with status denied" in caplog.text


def test_handler_inside_running_loop_returns_failed(note, settings, email_gateway, session_factory):
    async def invoke_from_loop():
        return _invoke(_event(note.id), settings, email_gateway, session_factory)

    message = asyncio.run(invoke_from_loop())

    assert message == FAILED_MESSAGE
    assert email_gateway.attempts == 0


def test_handler_disposes_engine_it_created(monkeypatch, settings, email_gateway):
    factory = create_session_factory("sqlite://")
    disposed = []
    monkeypatch.setattr(factory.kw["bind"], "dispose", lambda: disposed.append(True))
    monkeypatch.setattr(
        share_note_handler, "create_session_factory", lambda url: factory
    )

    message = handler(_event("unknown"), None, settings=settings, email_gateway=email_gateway)

    assert message == FAILED_MESSAGE
    assert disposed == [True]


def test_handler_leaves_injected_engine_open(note, settings, email_gateway, session_factory):
    _invoke(_event(note.id), settings, email_gateway, session_factory)

    assert _invoke(_event(note.id), settings, email_gateway, session_factory) == SHARED_MESSAGE
