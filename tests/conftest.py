from datetime import datetime, timedelta, timezone

import pytest

from firehawk import create_app
from firehawk.storage import MessageStore


class StepClock:
    """Clock that moves forward one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


VALID_MESSAGE = {
    'name': 'Ana',
    'email': 'ana@x.com',
    'subject': 'Hi',
    'message': '1234567890',
}


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store(clock):
    return MessageStore(clock=clock)


@pytest.fixture
def app(store):
    return create_app('testing', store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def valid_message():
    return dict(VALID_MESSAGE)
