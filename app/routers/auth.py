"""Session cookie endpoints."""

from fastapi import APIRouter, Response

from app.core.auth import cookie_settings
from app.core.config import SETTINGS
from app.schemas.auth import SessionIdentity, SessionResult
from app.services import AuthService

ROUTER: APIRouter = APIRouter(tags=["Authentication"])


@ROUTER.post("/jwt", response_model=SessionResult)
async def issue_session_cookie(
    identity: SessionIdentity, response: Response
) -> SessionResult:
    """Mint a session token and store it in an http-only cookie.

    Args:
        identity (SessionIdentity): The identity of the signed-in user.
        response (Response): The outgoing response.

    Returns:
        SessionResult: Success flag.
    """
    service: AuthService = AuthService()
    response.set_cookie(
        key=SETTINGS.token_cookie_name,
        value=service.issue_token(identity),
        max_age=int(service.token_lifetime().total_seconds()),
        **cookie_settings(),
    )
    return SessionResult(success=True)


@ROUTER.post("/logout", response_model=SessionResult)
async def logout(response: Response) -> SessionResult:
    """Clear the session cookie.

    Args:
        response (Response): The outgoing response.

    Returns:
        SessionResult: Success flag.
    """
    response.delete_cookie(key=SETTINGS.token_cookie_name, **cookie_settings())
    return SessionResult(success=True)
