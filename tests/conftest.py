"""Root conftest — shared test configuration."""

import json
import os
from base64 import b64decode

# Fix the environment before the app reads its configuration
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["ENVIRONMENT"] = "development"

import pytest
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner

from todolists.app import app
from todolists.core.config import Config


@pytest.fixture
def client():
    """Fresh client per test, so every test starts with an empty session."""
    return TestClient(app)


def read_session(client: TestClient) -> dict:
    """Decode the signed session cookie the app last set on ``client``."""
    cookie = client.cookies.get(Config.SESSION_COOKIE)
    if not cookie:
        return {}
    signer = TimestampSigner(Config.SESSION_SECRET)
    data = signer.unsign(cookie.encode("utf-8"), max_age=Config.SESSION_MAX_AGE)
    return json.loads(b64decode(data))


def create_list(client: TestClient, name: str, todos=()) -> None:
    """Create a list through the HTTP surface and add ``todos`` to it."""
    client.post("/lists", data={"list_name": name})
    list_id = len(read_session(client)["lists"]) - 1
    for todo in todos:
        client.post(f"/lists/{list_id}/todos", data={"todo": todo})
