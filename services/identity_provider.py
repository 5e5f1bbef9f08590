"""Identity provider client.

Credential issuance and verification are delegated to Supabase Auth over its
REST API. The service keeps no credential state of its own.
"""

from typing import Any, Dict, Protocol

import requests

from core.config import Settings
from core.exceptions import ConfigurationError, Unauthorized, ValidationError
from core.logger import get_logger
from schemas.auth_schema import Identity

logger = get_logger("services.identity_provider")


class IdentityProvider(Protocol):
    def verify(self, token: str) -> Identity:
        """Return the identity owning ``token``; raise Unauthorized if rejected."""
        ...

    def register(self, email: str, password: str) -> Dict[str, Any]:
        ...

    def login(self, email: str, password: str) -> Dict[str, Any]:
        ...


def _error_message(response: requests.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if not isinstance(body, dict):
        return default
    for key in ("msg", "error_description", "message", "error"):
        if body.get(key):
            return str(body[key])
    return default


class SupabaseIdentityProvider:
    """Supabase Auth (GoTrue) endpoints under ``<SUPABASE_URL>/auth/v1``."""

    def __init__(self, settings: Settings, session: requests.Session = None):
        self.base_url = settings.SUPABASE_URL.rstrip("/")
        self.api_key = settings.SUPABASE_SERVICE_ROLE_KEY
        self.timeout = settings.PROVIDER_TIMEOUT_SECONDS
        self.http = session or requests.Session()

    def _url(self, path: str) -> str:
        if not self.base_url or not self.api_key:
            raise ConfigurationError("Identity provider is not configured", config_key="SUPABASE_URL")
        return f"{self.base_url}/auth/v1{path}"

    def verify(self, token: str) -> Identity:
        url = self._url("/user")
        try:
            response = self.http.get(
                url,
                headers={"apikey": self.api_key, "Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Token verification request failed: %s", exc)
            raise Unauthorized("Unable to verify token") from exc

        if response.status_code != 200:
            logger.info("Token rejected by identity provider (%s)", response.status_code)
            raise Unauthorized("Invalid or expired token")

        try:
            user = response.json()
        except ValueError as exc:
            logger.error("Identity provider returned a non-JSON user body")
            raise Unauthorized("Unable to verify token") from exc
        if not isinstance(user, dict) or not user.get("id"):
            raise Unauthorized("Invalid or expired token")
        return Identity(id=str(user["id"]), email=user.get("email"))

    def register(self, email: str, password: str) -> Dict[str, Any]:
        url = self._url("/signup")
        try:
            response = self.http.post(
                url,
                json={"email": email, "password": password},
                headers={"apikey": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ValidationError(f"Registration failed: {exc}") from exc

        if response.status_code >= 400:
            raise ValidationError(_error_message(response, "Registration failed"))
        return response.json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        url = self._url("/token?grant_type=password")
        try:
            response = self.http.post(
                url,
                json={"email": email, "password": password},
                headers={"apikey": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise Unauthorized(f"Login failed: {exc}") from exc

        if response.status_code >= 400:
            raise Unauthorized(_error_message(response, "Invalid login credentials"))
        return response.json()
