import pytest
import requests

from bloglist_app.services import api


class FakeResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else b"{}"
        self.text = "" if payload is None else str(payload)

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    responses = {}

    def fake(method):
        def send(url, **kwargs):
            recorded.append((method, url, kwargs))
            return responses.get(method, FakeResponse(200, {}))
        return send

    for method in ("get", "post", "put", "delete"):
        monkeypatch.setattr(requests, method, fake(method))
    monkeypatch.setattr(api, "API_URL", "http://api.test")
    return recorded, responses


def test_login_posts_credentials(calls):
    recorded, responses = calls
    responses["post"] = FakeResponse(200, {"token": "abc", "username": "root", "name": "Superuser"})

    result = api.login_user("root", "sekred")

    assert result["token"] == "abc"
    method, url, kwargs = recorded[0]
    assert (method, url) == ("post", "http://api.test/api/login")
    assert kwargs["json"] == {"username": "root", "password": "sekred"}


def test_create_blog_sends_bearer_token(calls):
    recorded, responses = calls
    responses["post"] = FakeResponse(200, {"id": 3, "likes": 0})

    api.create_blog("abc", "title", "author", "http://example.com")

    method, url, kwargs = recorded[0]
    assert url == "http://api.test/api/blogs"
    assert kwargs["headers"] == {"Authorization": "bearer abc"}
    assert "likes" not in kwargs["json"]


def test_like_blog_increments_likes(calls):
    recorded, responses = calls
    responses["put"] = FakeResponse(200, {"id": 3, "likes": 8})

    updated = api.like_blog({"id": 3, "likes": 7})

    assert updated["likes"] == 8
    method, url, kwargs = recorded[0]
    assert (method, url) == ("put", "http://api.test/api/blogs/3")
    assert kwargs["json"] == {"likes": 8}


def test_delete_blog_returns_none_on_204(calls):
    recorded, responses = calls
    responses["delete"] = FakeResponse(204)

    assert api.delete_blog("abc", 3) is None
    assert recorded[0][2]["headers"] == {"Authorization": "bearer abc"}


def test_error_response_raises_api_error(calls):
    _, responses = calls
    responses["delete"] = FakeResponse(403, {"error": "only the creator can delete a blog"})

    with pytest.raises(api.ApiError) as excinfo:
        api.delete_blog("abc", 3)

    assert excinfo.value.status_code == 403
    assert excinfo.value.message == "only the creator can delete a blog"
