"""Authentication service - business logic for session tokens."""

import logging
import typing as t
from datetime import timedelta

from app.core.auth import create_access_token
from app.core.config import SETTINGS
from app.schemas.auth import SessionIdentity

LOGGER: logging.Logger = logging.getLogger(__name__)


class AuthService:
    """Service class for session token operations."""

    @staticmethod
    def token_lifetime() -> timedelta:
        """Validity window of a freshly minted token.

        Returns:
            timedelta: How long the token and its cookie stay valid.
        """
        return timedelta(minutes=SETTINGS.access_token_expire_minutes)

    def issue_token(self, identity: SessionIdentity) -> str:
        """Mint a session token for the supplied identity.

        Args:
            identity (SessionIdentity): The identity sent by the client.

        Returns:
            str: The signed JWT.
        """
        claims: t.Dict[str, t.Any] = identity.model_dump(mode="json")
        claims["sub"] = identity.email
        LOGGER.debug("Issuing session token for %s", identity.email)
        return create_access_token(claims, expires_delta=self.token_lifetime())
