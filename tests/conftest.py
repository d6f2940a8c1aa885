import json
import os

import httpx
import pytest
from dotenv import load_dotenv

from marvbot.config import Settings


@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

def _truthy(v: str | None) -> bool:
    return v is not None and v.strip().lower() not in ("", "0", "false", "no")

@pytest.fixture(scope="session")
def allow_integration(_load_env) -> bool:
    # Depends on _load_env to ensure .env is loaded first
    return _truthy(os.getenv("RUN_INTEGRATION_TESTS"))

@pytest.fixture(scope="session")
def openai_api_key(_load_env) -> str | None:
    key = os.getenv("OPENAI_API_KEY")
    if not key or key == "sk-...":
        return None
    return key

@pytest.fixture
def settings():
    """
    Explicit settings for unit tests. Init kwargs win over env/.env/yaml,
    so a developer's local config never leaks in.
    """
    return Settings(
        token="tok123",
        group_id="42",
        gpt_token="sk-test",
        chatbot_name="Marv",
        trigger_word="!marv",
        api_root="https://api.groupme.test/v3",
        poll_interval=1.0,
        http_max_attempts=1,
        exit_on_error=True,
        completion_model="gpt-3.5-turbo-instruct",
    )

def _group_body(last_message_id="100", nickname="Alice", text="hello", count=10):
    """A GroupMe GET /groups/:id body trimmed to the fields we read plus a few we don't."""
    return {
        "meta": {"code": 200},
        "response": {
            "id": "42",
            "group_id": "42",
            "name": "Friends",
            "type": "private",
            "phone_number": "+1 5555555555",
            "pinned": False,
            "office_mode": False,
            "created_at": 1660000000,
            "updated_at": 1660000100,
            "messages": {
                "count": count,
                "last_message_id": last_message_id,
                "last_message_created_at": 1660000100,
                "preview": {
                    "nickname": nickname,
                    "text": text,
                    "image_url": None,
                    "attachments": [],
                },
            },
            "members": [{"user_id": "1", "nickname": "Alice"}, {"user_id": "2", "nickname": "MarvBot"}],
            "share_url": None,
        },
    }

@pytest.fixture
def recorded():
    """Requests seen by the mock GroupMe transport."""
    return []

@pytest.fixture
def make_http(recorded):
    """
    Build an httpx.Client whose transport answers from `handler`
    and records every request.
    """
    clients = []

    def _make(handler, base_url="https://api.groupme.test/v3"):
        def _record(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return handler(request)
        client = httpx.Client(base_url=base_url, transport=httpx.MockTransport(_record))
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()

def _json_response(body, status_code=200):
    return httpx.Response(status_code, content=json.dumps(body).encode(), headers={"content-type": "application/json"})

@pytest.fixture
def group_body():
    return _group_body

@pytest.fixture
def json_response():
    return _json_response
