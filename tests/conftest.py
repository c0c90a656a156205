import itertools

import pytest

from email_relay.application.record_emails import EmailLogRecorder
from tests.fakes import FakeEmailPort, FakeLogStore


@pytest.fixture()
def email_port():
    return FakeEmailPort()


@pytest.fixture()
def log_store():
    return FakeLogStore()


@pytest.fixture()
def ticking_recorder(log_store):
    """Recorder whose clock advances by one millisecond per email, from 1."""
    counter = itertools.count(1)
    return EmailLogRecorder(log_store, clock=lambda: next(counter))
