from __future__ import annotations

from pathlib import Path

import pytest
import requests

CONFIG_TEXT = """\
# Akamai credentials
fastpurge_host=fp.example
fastpurge_client_secret=fp-secret
fastpurge_client_token=fp-client
fastpurge_access_token=fp-access

eccu_host=eccu.example
eccu_client_secret=eccu-secret
eccu_client_token=eccu-client
eccu_access_token=eccu-access
"""


@pytest.fixture
def config() -> dict[str, str]:
    return {
        "fastpurge_host": "fp.example",
        "fastpurge_client_secret": "fp-secret",
        "fastpurge_client_token": "fp-client",
        "fastpurge_access_token": "fp-access",
        "eccu_host": "eccu.example",
        "eccu_client_secret": "eccu-secret",
        "eccu_client_token": "eccu-client",
        "eccu_access_token": "eccu-access",
    }


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "akamai.properties"
    path.write_text(CONFIG_TEXT)
    return path


class FakeResponse:
    def __init__(self, status_code: int, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session, replies with queued statuses."""

    def __init__(self, *replies: int | Exception):
        self.replies = list(replies)
        self.calls = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return None

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        reply = self.replies.pop(0) if self.replies else 201
        if isinstance(reply, Exception):
            raise reply
        return FakeResponse(reply, f'{{"httpStatus": {reply}}}')


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
