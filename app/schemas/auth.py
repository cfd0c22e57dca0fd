"""Pydantic schemas for session tokens."""

from pydantic import BaseModel, ConfigDict, EmailStr


class TokenData(BaseModel):
    """JWT token payload data identifying the caller."""

    email: str
    name: str | None = None


class SessionIdentity(BaseModel):
    """Identity payload a client exchanges for a session cookie.

    Any additional claims sent by the client are signed into the token as-is.
    """

    model_config = ConfigDict(extra="allow")

    email: EmailStr
    name: str | None = None


class SessionResult(BaseModel):
    """Result of a session cookie operation."""

    success: bool
