"""Authentication utilities and dependencies."""

import logging
import typing as t
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from jose import JWTError, jwt

from app.core.config import SETTINGS
from app.schemas.auth import TokenData

LOGGER: logging.Logger = logging.getLogger(__name__)

TOKEN_COOKIE: APIKeyCookie = APIKeyCookie(
    name=SETTINGS.token_cookie_name, auto_error=False
)


def create_access_token(
    data: t.Dict[str, t.Any], expires_delta: timedelta | None = None
) -> str:
    """Create a JWT access token.

    Args:
        data (t.Dict[str, t.Any]):
            The data to encode in the token.
        expires_delta (timedelta | None):
            Optional expiration time for the token.

    Returns:
        str: The encoded JWT token.
    """
    to_encode: t.Dict[str, t.Any] = data.copy()
    expire: datetime
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=SETTINGS.access_token_expire_minutes
        )
    to_encode.update({"exp": expire})
    return str(
        jwt.encode(to_encode, SETTINGS.secret_key, algorithm=SETTINGS.algorithm)
    )


def decode_access_token(token: str) -> TokenData:
    """Verify a JWT and extract the caller identity.

    Args:
        token (str): The JWT token.

    Returns:
        TokenData: The identity carried by the token.

    Raises:
        JWTError: If the token is malformed, expired, badly signed or
            carries no email.
    """
    payload: t.Dict[str, t.Any] = jwt.decode(
        token, SETTINGS.secret_key, algorithms=[SETTINGS.algorithm]
    )
    email: t.Any = payload.get("email")
    if not isinstance(email, str) or not email:
        raise JWTError("Token does not carry an email")
    return TokenData(email=email, name=payload.get("name"))


def cookie_settings() -> t.Dict[str, t.Any]:
    """Security attributes of the session cookie.

    Production serves the frontend from another site, so the cookie must be
    secure and cross-site; elsewhere it stays same-site.

    Returns:
        t.Dict[str, t.Any]: Keyword arguments for ``set_cookie``.
    """
    return {
        "httponly": True,
        "secure": SETTINGS.is_production,
        "samesite": "none" if SETTINGS.is_production else "strict",
        "path": "/",
    }


async def get_current_principal(
    token: t.Annotated[str | None, Depends(TOKEN_COOKIE)],
) -> TokenData:
    """Get the caller identity from the session cookie.

    Args:
        token (str | None): The JWT token from the session cookie.

    Returns:
        TokenData: The authenticated caller.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized access",
        )

    try:
        return decode_access_token(token)
    except JWTError as exc:
        LOGGER.debug("Rejected session token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        ) from exc


def ensure_principal(principal: TokenData, email: str) -> None:
    """Ensure the caller only reads resources owned by itself.

    Args:
        principal (TokenData): The authenticated caller.
        email (str): The owner email the caller asked for.
    """
    if principal.email != email:
        LOGGER.info(
            "Caller %s denied access to resources of %s",
            principal.email,
            email,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden"
        )
