"""Tests for the Supabase identity provider and object store clients.

HTTP is replaced with a stub session that records requests and returns
canned responses.
"""

import pytest
import requests

from core.config import Settings
from core.exceptions import ConfigurationError, PersistenceError, Unauthorized, ValidationError
from services.identity_provider import SupabaseIdentityProvider
from services.object_store import SupabaseObjectStore


class StubResponse:
    def __init__(self, status_code, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class StubSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def _call(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._call("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._call("POST", url, **kwargs)


@pytest.fixture
def settings():
    return Settings(SUPABASE_URL="https://proj.supabase.co/", SUPABASE_SERVICE_ROLE_KEY="service-key")


def test_verify_returns_identity(settings):
    http = StubSession(StubResponse(200, {"id": "abc-123", "email": "a@b.co"}))
    identity = SupabaseIdentityProvider(settings, session=http).verify("tok")

    assert identity.id == "abc-123" and identity.email == "a@b.co"
    method, url, kwargs = http.calls[0]
    assert url == "https://proj.supabase.co/auth/v1/user"
    assert kwargs["headers"]["Authorization"] == "Bearer tok"
    assert kwargs["headers"]["apikey"] == "service-key"


def test_verify_rejected_token(settings):
    http = StubSession(StubResponse(401, {"msg": "invalid JWT"}))
    with pytest.raises(Unauthorized):
        SupabaseIdentityProvider(settings, session=http).verify("tok")


def test_verify_transport_error_is_unauthorized(settings):
    http = StubSession(error=requests.ConnectionError("down"))
    with pytest.raises(Unauthorized):
        SupabaseIdentityProvider(settings, session=http).verify("tok")


def test_unconfigured_provider():
    with pytest.raises(ConfigurationError):
        SupabaseIdentityProvider(Settings(SUPABASE_URL="", SUPABASE_SERVICE_ROLE_KEY="")).verify("tok")


def test_register_error_message_is_surfaced(settings):
    http = StubSession(StubResponse(422, {"msg": "User already registered"}))
    with pytest.raises(ValidationError) as exc_info:
        SupabaseIdentityProvider(settings, session=http).register("a@b.co", "secret1")
    assert exc_info.value.message == "User already registered"


def test_login_bad_credentials(settings):
    http = StubSession(StubResponse(400, {"error": "invalid_grant", "error_description": "Invalid login credentials"}))
    with pytest.raises(Unauthorized) as exc_info:
        SupabaseIdentityProvider(settings, session=http).login("a@b.co", "nope")
    assert exc_info.value.message == "Invalid login credentials"
    assert http.calls[0][1].endswith("/auth/v1/token?grant_type=password")


def test_upload_returns_public_url(settings):
    http = StubSession(StubResponse(200, {"Key": "progress-photos/u/1_a.png"}))
    url = SupabaseObjectStore(settings, session=http).upload("u/1_a.png", b"img", "image/png")

    assert url == "https://proj.supabase.co/storage/v1/object/public/progress-photos/u/1_a.png"
    method, upload_url, kwargs = http.calls[0]
    assert upload_url == "https://proj.supabase.co/storage/v1/object/progress-photos/u/1_a.png"
    assert kwargs["data"] == b"img"
    assert kwargs["headers"]["Content-Type"] == "image/png"


def test_upload_rejected_is_persistence_error(settings):
    http = StubSession(StubResponse(413, text="Payload too large"))
    with pytest.raises(PersistenceError) as exc_info:
        SupabaseObjectStore(settings, session=http).upload("u/big.png", b"x", "image/png")
    assert "Payload too large" in exc_info.value.message


@pytest.mark.parametrize("response", [
    StubResponse(200, None, text="<html>gateway</html>"),
    StubResponse(200, ["not", "a", "user"]),
    StubResponse(200, {"email": "a@b.co"}),
])
def test_verify_unusable_user_body_is_unauthorized(settings, response):
    with pytest.raises(Unauthorized):
        SupabaseIdentityProvider(settings, session=StubSession(response)).verify("tok")
