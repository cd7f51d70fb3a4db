import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATELIMIT_ENABLED"] = "false"

from app import app as flask_app  # noqa: E402
from models import db  # noqa: E402


@pytest.fixture
def app():
    flask_app.config["TESTING"] = True
    with flask_app.app_context():
        db.create_all()
    yield flask_app
    with flask_app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def submit(client):
    def _submit(answers):
        resp = client.post("/api/surveys", json={"responses": answers})
        assert resp.status_code == 200
        return resp.get_json()
    return _submit
