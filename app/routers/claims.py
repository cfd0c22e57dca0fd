"""Food request (claim) endpoints."""

import typing as t

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import ensure_principal, get_current_principal
from app.core.database import get_db
from app.schemas.auth import TokenData
from app.schemas.claim import FoodClaimCreate, FoodClaimResponse
from app.schemas.results import InsertResult
from app.services import (
    ClaimConflictError,
    ClaimIdentityMismatchError,
    ClaimService,
    ListingNotFoundError,
)

ROUTER: APIRouter = APIRouter(tags=["Food Requests"])


@ROUTER.get("/request-foods", response_model=t.List[FoodClaimResponse])
async def list_my_claims(
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    principal: t.Annotated[TokenData, Depends(get_current_principal)],
    email: str = Query(..., description="Requester email"),
) -> t.List[FoodClaimResponse]:
    """List the claims submitted by the caller.

    Args:
        db (AsyncSession): The database session.
        principal (TokenData): The authenticated caller.
        email (str): Requester email, must be the caller's.

    Returns:
        t.List[FoodClaimResponse]: The caller's claims.
    """
    ensure_principal(principal, email)
    return await ClaimService(db).list_claims_by_requester(email)


@ROUTER.post("/request-foods", response_model=InsertResult)
async def submit_claim(
    claim_data: FoodClaimCreate,
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    principal: t.Annotated[TokenData, Depends(get_current_principal)],
) -> InsertResult:
    """Request a listing on behalf of the caller.

    Args:
        claim_data (FoodClaimCreate): The claim data.
        db (AsyncSession): The database session.
        principal (TokenData): The authenticated caller.

    Returns:
        InsertResult: Acknowledgement with the new claim ID.
    """
    try:
        return await ClaimService(db).submit_claim(principal.email, claim_data)
    except ClaimIdentityMismatchError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        ) from exc
    except ListingNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except ClaimConflictError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc
