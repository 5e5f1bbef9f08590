"""Object storage for progress photos (Supabase Storage REST API)."""

from typing import Protocol
from urllib.parse import quote

import requests

from core.config import Settings
from core.exceptions import ConfigurationError, PersistenceError
from core.logger import get_logger

logger = get_logger("services.object_store")


class ObjectStore(Protocol):
    def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Store ``data`` at ``path`` and return its public URL."""
        ...


class SupabaseObjectStore:
    def __init__(self, settings: Settings, session: requests.Session = None):
        self.base_url = settings.SUPABASE_URL.rstrip("/")
        self.api_key = settings.SUPABASE_SERVICE_ROLE_KEY
        self.bucket = settings.PROGRESS_PHOTO_BUCKET
        self.timeout = settings.PROVIDER_TIMEOUT_SECONDS
        self.http = session or requests.Session()

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{quote(path)}"

    def upload(self, path: str, data: bytes, content_type: str) -> str:
        if not self.base_url or not self.api_key:
            raise ConfigurationError("Object storage is not configured", config_key="SUPABASE_URL")

        url = f"{self.base_url}/storage/v1/object/{self.bucket}/{quote(path)}"
        try:
            response = self.http.post(
                url,
                data=data,
                headers={
                    "apikey": self.api_key,
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": content_type or "application/octet-stream",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise PersistenceError(f"Photo upload failed: {exc}", operation="upload") from exc

        if response.status_code >= 400:
            logger.error("Upload of %s rejected (%s): %s", path, response.status_code, response.text)
            raise PersistenceError(f"Photo upload failed: {response.text or response.status_code}", operation="upload")
        return self.public_url(path)
