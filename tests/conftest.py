from datetime import datetime, timezone

import pytest

from blogsite import create_app
from blogsite.config import TestConfig
from blogsite.errors import ExternalServiceError
from blogsite.extensions import db


class FakeMailRelay:
    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, subject, text, to=None):
        if self.fail:
            raise ExternalServiceError("Mail relay error")
        self.sent.append({"subject": subject, "text": text, "to": to})


class FakeUploadSigner:
    def __init__(self):
        self.fail = False

    def generate_upload_url(self):
        if self.fail:
            raise ExternalServiceError("Could not sign upload URL")
        return {
            "url": "https://uploads.example.test/banner.jpg?signature=abc",
            "expires_at": datetime(2030, 1, 1, tzinfo=timezone.utc),
        }


@pytest.fixture
def app():
    app = create_app(TestConfig)
    app.extensions["mail_relay"] = FakeMailRelay()
    app.extensions["upload_signer"] = FakeUploadSigner()

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signup(client):
    def _signup(email="a@b.com", password="Abc123", fullname="Alice Doe"):
        response = client.post("/signup", json={
            "fullname": fullname,
            "email": email,
            "password": password,
        })
        assert response.status_code == 200, response.get_json()
        return response.get_json()
    return _signup


def _bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_blog(client):
    def _create_blog(token, **fields):
        payload = {
            "title": "Hello World",
            "des": "desc",
            "banner": "https://img.example.test/banner.jpg",
            "tags": ["x"],
            "content": {"blocks": [{"type": "paragraph", "data": {"text": "hi"}}]},
            "draft": False,
        }
        payload.update(fields)
        return client.post("/create-blog", json=payload, headers=_bearer(token))
    return _create_blog


@pytest.fixture
def bearer():
    return _bearer
