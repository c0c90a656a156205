import pytest
from fastapi.testclient import TestClient

from email_relay.main import create_app
from email_relay.presentation.dependencies import get_email_port, get_log_recorder
from email_relay.settings import Settings
from tests.fakes import TOKEN, FakeEmailPort, FakeLogRecorder


@pytest.fixture()
def app_and_deps():
    app = create_app(Settings(token=TOKEN, _env_file=None))
    email_port = FakeEmailPort()
    recorder = FakeLogRecorder()

    app.dependency_overrides[get_email_port] = lambda: email_port
    app.dependency_overrides[get_log_recorder] = lambda: recorder

    try:
        yield app, email_port, recorder
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)
