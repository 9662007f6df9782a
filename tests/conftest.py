from typing import Dict, List, Tuple

import pytest
from domain.gateways.email_gateway import EmailDeliveryError, EmailGateway
from domain.gateways.storage_gateway import StorageError, StorageGateway
from fastapi.testclient import TestClient
from infrastructure.models.base import Base
from main import create_app
from utils.config import Settings
from utils.dependencies import create_session_factory

SENDER = "diary@example.com"


class FakeEmailGateway(EmailGateway):
    """Records every send; raises when ``fail`` is set."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: List[Dict[str, str]] = []
        self.attempts = 0

    async def send_email(self, sender, recipient, subject, text_body):
        self.attempts += 1
        if self.fail:
            raise EmailDeliveryError("MessageRejected: Email address is not verified")
        self.sent.append(
            {
                "sender": sender,
                "recipient": recipient,
                "subject": subject,
                "text_body": text_body,
            }
        )


class FakeStorageGateway(StorageGateway):
    """In-memory object store that keeps an ordered log of calls."""

    def __init__(self, events: List[Tuple[str, str]] = None, fail_put: bool = False):
        self.objects: Dict[str, Tuple[bytes, str]] = {}
        self.events = events if events is not None else []
        self.fail_put = fail_put

    async def put_object(self, key, data, content_type):
        if self.fail_put:
            raise StorageError(f"Failed to upload {key}")
        self.objects[key] = (data, content_type)
        self.events.append(("put", key))

    async def get_signed_url(self, key):
        if key not in self.objects:
            raise StorageError(f"No such key: {key}")
        return f"https://attachments.test/{key}?signature=abc"


@pytest.fixture
def session_factory():
    factory = create_session_factory("sqlite://")
    Base.metadata.create_all(bind=factory.kw["bind"])
    return factory


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def email_gateway():
    return FakeEmailGateway()


@pytest.fixture
def storage_gateway():
    return FakeStorageGateway()


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", share_sender_email=SENDER)


@pytest.fixture
def app(settings, email_gateway, session_factory):
    return create_app(
        settings=settings, email_gateway=email_gateway, session_factory=session_factory
    )


@pytest.fixture
def client(app):
    return TestClient(app)
