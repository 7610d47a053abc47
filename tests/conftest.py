import json

import pytest
from fastapi.testclient import TestClient

from cardclash.main import create_app
from cardclash.services.store import DeckStore, SessionStore, seeded_deck_store, seeded_session_store
from cardclash.settings import Settings

TEACHER = {"username": "teacher", "password": "s3cret"}

def question(text="2+2?", answer="B", **overrides):
    q = {
        "questionText": text,
        "optionA": "3", "optionB": "4", "optionC": "5", "optionD": "6",
        "correctAnswer": answer,
    }
    q.update(overrides)
    return q

def deck_json(*questions) -> str:
    return json.dumps({"questions": list(questions)})

@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ENVIRONMENT="development",
        SESSION_SECRET="test-secret",
        ADMIN_USERNAME=TEACHER["username"],
        ADMIN_PASSWORD=TEACHER["password"],
        RATE_LIMIT="1000/minute",
        HTTPS_ENABLED=False,
    )

@pytest.fixture
def deck_store() -> DeckStore:
    return seeded_deck_store()

@pytest.fixture
def session_store() -> SessionStore:
    return seeded_session_store()

@pytest.fixture
def app(settings, deck_store, session_store):
    return create_app(settings, deck_store=deck_store, session_store=session_store)

@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c

@pytest.fixture
def teacher(client):
    r = client.post("/login", data=TEACHER, follow_redirects=False)
    assert r.status_code == 303
    return client
