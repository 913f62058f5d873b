import os

os.environ.setdefault("API_KEY", "test-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient

from puenjai.main import create_app
from puenjai.services.database_service import DatabaseService
from puenjai.services.reply_service import ReplyService
from puenjai.services.retry_service import RetryOrchestrator


class RecordingSleep:
    def __init__(self):
        self.waits = []

    async def __call__(self, seconds):
        self.waits.append(seconds)


class ScriptedChain:
    """Returns or raises the scripted outcomes in order."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def generate_reply(self, name, message):
        self.calls.append((name, message))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def scripted_chain():
    return ScriptedChain


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'heartbreak.db'}"


@pytest.fixture
def make_client(database_url):
    opened = []

    def _make(outcomes, max_retries=5, database_service=None):
        chain = ScriptedChain(outcomes)
        sleep = RecordingSleep()
        orchestrator = RetryOrchestrator(max_retries=max_retries, sleep=sleep, rand=lambda: 0.0)
        app = create_app(
            database_service=database_service or DatabaseService(database_url),
            reply_service=ReplyService(chain, orchestrator),
        )
        client = TestClient(app)
        client.__enter__()
        opened.append(client)
        return client, chain, sleep

    yield _make

    for client in opened:
        client.__exit__(None, None, None)
