import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.settings import ContactRelaySettings  # noqa: E402
from tests.helpers.email_sender import RecordingEmailSender  # noqa: E402


@pytest.fixture
def settings():
    return ContactRelaySettings(
        sender_address="relay@example.com",
        sender_secret="app-password-1234",
        receiver_address="owner@example.com",
    )


@pytest.fixture
def recording_sender():
    return RecordingEmailSender()


@pytest.fixture
def app(settings, recording_sender):
    from webapp import create_app

    app = create_app(settings, sender=recording_sender)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
