import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rabbitmq_management_api import RabbitMQManager  # noqa: E402
from rabbitmq_management_api.utils.http import create_client  # noqa: E402

BROKER_CONFIG = {
    "host": "http://broker",
    "port": 15672,
    "user": "guest",
    "password": "guest",
}


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep broker settings from the host environment out of the tests.

    Removes every ``RABBITMQ_*`` variable and runs each test from an
    empty directory so no ``.env`` file is picked up.
    """
    for name in ("HOST", "PORT", "USER", "USERNAME", "PASSWORD", "TIMEOUT"):
        monkeypatch.delenv(f"RABBITMQ_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    yield


class RecordingHandler:
    """``httpx.MockTransport`` handler that records every request.

    Answers every request with the configured status and body.
    """

    def __init__(self, status_code: int = 200, text: str = "[]"):
        self.status_code = status_code
        self.text = text
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        """Path and query of the last request, exactly as sent on the wire."""
        return self.last.url.raw_path.decode("ascii")


@pytest.fixture
def broker_config():
    """A complete configuration mapping."""
    return dict(BROKER_CONFIG)


@pytest.fixture
def recorder():
    return RecordingHandler()


@pytest.fixture
def client(recorder):
    """Transport client wired to the recording handler."""
    c = create_client(BROKER_CONFIG, transport=httpx.MockTransport(recorder))
    yield c
    c.close()


@pytest.fixture
def manager(recorder):
    """Manager whose resources all talk to the recording handler."""
    with RabbitMQManager(BROKER_CONFIG, transport=httpx.MockTransport(recorder)) as m:
        yield m
