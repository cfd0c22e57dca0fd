"""Food listing endpoints."""

import typing as t

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import ensure_principal, get_current_principal
from app.core.database import get_db
from app.schemas.auth import TokenData
from app.schemas.listing import (
    FoodListingCreate,
    FoodListingResponse,
    FoodListingUpdate,
)
from app.schemas.results import DeleteResult, InsertResult, UpdateResult
from app.services import (
    ListingNotFoundError,
    ListingOwnershipError,
    ListingService,
    build_listing_query,
)

ROUTER: APIRouter = APIRouter(tags=["Food Listings"])


@ROUTER.get("/all-foods", response_model=t.List[FoodListingResponse])
async def search_listings(
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    available: str | None = Query(
        None,
        description="Only return listings that are still available "
        "(any non-empty value)",
    ),
    search: str | None = Query(
        None, description="Filter by food name (case-insensitive, partial)"
    ),
    sort: str | None = Query(
        None, description="Sort by expiration date: 'asc' or 'dsc'"
    ),
) -> t.List[FoodListingResponse]:
    """Search listings with optional filters and ordering.

    Args:
        db (AsyncSession):
            The database session.
        available (str | None):
            Only return listings that are still available.
        search (str | None):
            Filter by food name (case-insensitive, partial).
        sort (str | None):
            Sort by expiration date: 'asc' or 'dsc'.

    Returns:
        t.List[FoodListingResponse]: Every matching listing.
    """
    return await ListingService(db).list_listings(
        build_listing_query(available=available, search=search, sort=sort)
    )


@ROUTER.get("/foods", response_model=t.List[FoodListingResponse])
async def list_all_listings(
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
) -> t.List[FoodListingResponse]:
    """List every listing without filters.

    Args:
        db (AsyncSession): The database session.

    Returns:
        t.List[FoodListingResponse]: All listings.
    """
    return await ListingService(db).list_all()


@ROUTER.get("/featured-foods", response_model=t.List[FoodListingResponse])
async def list_featured_listings(
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
) -> t.List[FoodListingResponse]:
    """List the largest available donations.

    Args:
        db (AsyncSession): The database session.

    Returns:
        t.List[FoodListingResponse]: The featured listings.
    """
    return await ListingService(db).list_featured()


@ROUTER.get("/manage-my-foods", response_model=t.List[FoodListingResponse])
async def list_my_listings(
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    principal: t.Annotated[TokenData, Depends(get_current_principal)],
    email: str = Query(..., description="Donator email"),
) -> t.List[FoodListingResponse]:
    """List the caller's own listings, newest first.

    Args:
        db (AsyncSession): The database session.
        principal (TokenData): The authenticated caller.
        email (str): Donator email, must be the caller's.

    Returns:
        t.List[FoodListingResponse]: The caller's listings.
    """
    ensure_principal(principal, email)
    return await ListingService(db).list_by_owner(email)


@ROUTER.get("/all-foods/{listing_id}", response_model=FoodListingResponse)
async def get_listing(
    listing_id: int,
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    _: t.Annotated[TokenData, Depends(get_current_principal)],
) -> FoodListingResponse:
    """Get a specific listing by ID.

    Args:
        listing_id (int): The ID of the listing.
        db (AsyncSession): The database session.

    Returns:
        FoodListingResponse: The listing.
    """
    try:
        return await ListingService(db).get_listing(listing_id)
    except ListingNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@ROUTER.post("/all-foods", response_model=InsertResult)
async def create_listing(
    listing_data: FoodListingCreate,
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    principal: t.Annotated[TokenData, Depends(get_current_principal)],
) -> InsertResult:
    """Create a new listing.

    Args:
        listing_data (FoodListingCreate): The listing data.
        db (AsyncSession): The database session.
        principal (TokenData): The authenticated caller.

    Returns:
        InsertResult: Acknowledgement with the new listing ID.
    """
    return await ListingService(db).create_listing(
        listing_data, caller_email=principal.email
    )


@ROUTER.patch("/all-foods/{listing_id}", response_model=UpdateResult)
async def update_listing(
    listing_id: int,
    listing_data: FoodListingUpdate,
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    principal: t.Annotated[TokenData, Depends(get_current_principal)],
) -> UpdateResult:
    """Update the caller's own listing.

    Args:
        listing_id (int): The ID of the listing.
        listing_data (FoodListingUpdate): The fields to change.
        db (AsyncSession): The database session.
        principal (TokenData): The authenticated caller.

    Returns:
        UpdateResult: Acknowledgement of the update.
    """
    try:
        return await ListingService(db).update_listing(
            listing_id, principal.email, listing_data
        )
    except ListingNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except ListingOwnershipError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exc),
        ) from exc


@ROUTER.delete("/all-foods/{listing_id}", response_model=DeleteResult)
async def delete_listing(
    listing_id: int,
    db: t.Annotated[AsyncSession, Depends(get_db, scope="function")],
    principal: t.Annotated[TokenData, Depends(get_current_principal)],
) -> DeleteResult:
    """Delete the caller's own listing.

    Args:
        listing_id (int): The ID of the listing.
        db (AsyncSession): The database session.
        principal (TokenData): The authenticated caller.

    Returns:
        DeleteResult: Acknowledgement with the number of deleted listings.
    """
    try:
        return await ListingService(db).delete_listing(
            listing_id, principal.email
        )
    except ListingOwnershipError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(exc),
        ) from exc
