"""Services package."""

from app.services.auth_service import AuthService
from app.services.claim_service import (
    ClaimConflictError,
    ClaimIdentityMismatchError,
    ClaimService,
)
from app.services.listing_query import (
    ListingQuery,
    SortDirection,
    build_listing_query,
)
from app.services.listing_service import (
    ListingNotFoundError,
    ListingOwnershipError,
    ListingService,
)

__all__ = [
    "AuthService",
    "ClaimConflictError",
    "ClaimIdentityMismatchError",
    "ClaimService",
    "ListingNotFoundError",
    "ListingOwnershipError",
    "ListingQuery",
    "ListingService",
    "SortDirection",
    "build_listing_query",
]
