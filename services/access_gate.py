"""Bearer-token gate in front of every identity-scoped operation."""

from typing import Optional

from core.exceptions import Unauthorized
from schemas.auth_schema import Identity
from services.identity_provider import IdentityProvider


class AccessControlGate:
    """Resolve a bearer token to an Identity through the identity provider.

    The gate holds no credential state; each call asks the provider.
    """

    def __init__(self, provider: IdentityProvider):
        self.provider = provider

    def authenticate(self, bearer_token: Optional[str]) -> Identity:
        if bearer_token is None or not bearer_token.strip():
            raise Unauthorized("Missing Authorization header")

        identity = self.provider.verify(bearer_token.strip())
        if identity is None or not identity.id:
            raise Unauthorized("Invalid or expired token")
        return identity
