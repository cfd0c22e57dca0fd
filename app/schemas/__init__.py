"""Schemas package."""

from app.schemas.auth import SessionIdentity, SessionResult, TokenData
from app.schemas.claim import FoodClaimCreate, FoodClaimResponse
from app.schemas.listing import (
    Donator,
    FoodListingCreate,
    FoodListingResponse,
    FoodListingUpdate,
)
from app.schemas.results import DeleteResult, InsertResult, UpdateResult

__all__ = [
    "DeleteResult",
    "Donator",
    "FoodClaimCreate",
    "FoodClaimResponse",
    "FoodListingCreate",
    "FoodListingResponse",
    "FoodListingUpdate",
    "InsertResult",
    "SessionIdentity",
    "SessionResult",
    "TokenData",
    "UpdateResult",
]
