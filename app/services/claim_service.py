"""Claim service - business logic for requesting food listings."""

import logging
import typing as t

from sqlalchemy import CursorResult, exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import FoodClaim, FoodListing, ListingStatus
from app.schemas.claim import FoodClaimCreate, FoodClaimResponse
from app.schemas.results import InsertResult
from app.services.listing_service import ListingNotFoundError
from app.utils.dates import to_utc, utc_now

LOGGER: logging.Logger = logging.getLogger(__name__)


class ClaimIdentityMismatchError(Exception):
    """Raised when a claim is submitted on behalf of another user."""

    def __init__(self) -> None:
        super().__init__("Claims can only be submitted for yourself")


class ClaimConflictError(Exception):
    """Raised when the requested listing is no longer available."""

    food_id: int

    def __init__(self, food_id: int) -> None:
        """Initialize ClaimConflictError.

        Args:
            food_id (int): The ID of the listing that was already claimed.
        """
        self.food_id = food_id
        super().__init__(
            f"Food listing with ID {food_id} is no longer available"
        )


class ClaimService:
    """Service class for food claim operations.

    A claim touches two tables: the listing leaves ``Available`` and a claim
    row is recorded. Both writes go through the session handed to the
    service, so they are committed or rolled back together by whoever owns
    the session (``get_db`` for HTTP requests).
    """

    db: AsyncSession

    def __init__(self, db: AsyncSession) -> None:
        """Initialize ClaimService.

        Args:
            db (AsyncSession): The database session.
        """
        self.db = db

    @staticmethod
    def convert_claim_to_response(claim: FoodClaim) -> FoodClaimResponse:
        """Convert FoodClaim model to FoodClaimResponse schema.

        Args:
            claim (FoodClaim): The food claim model.

        Returns:
            FoodClaimResponse: The food claim response schema.
        """
        return FoodClaimResponse(
            id=claim.id,
            food_id=claim.food_id,
            user_email=claim.user_email,
            status=claim.status,
            request_date=to_utc(claim.request_date),
            additional_notes=claim.additional_notes,
            details=claim.details or {},
            created_at=to_utc(claim.created_at),
        )

    async def _transition_listing(
        self, food_id: int, target: ListingStatus
    ) -> None:
        """Move a listing out of availability if nobody got there first.

        Args:
            food_id (int): The ID of the listing.
            target (ListingStatus): The status to move the listing into.

        Raises:
            ListingNotFoundError: If the listing does not exist.
            ClaimConflictError: If the listing is no longer Available.
        """
        result: CursorResult[t.Any] = t.cast(
            CursorResult[t.Any],
            await self.db.execute(
                update(FoodListing)
                .where(
                    FoodListing.id == food_id,
                    FoodListing.status == ListingStatus.AVAILABLE,
                )
                .values(status=target)
                .execution_options(synchronize_session=False)
            ),
        )
        if result.rowcount == 1:
            return

        listing_exists: bool = bool(
            (
                await self.db.execute(
                    select(exists().where(FoodListing.id == food_id))
                )
            ).scalar()
        )
        if not listing_exists:
            raise ListingNotFoundError(food_id)
        raise ClaimConflictError(food_id)

    async def submit_claim(
        self, caller_email: str, payload: FoodClaimCreate
    ) -> InsertResult:
        """Record a claim and take the listing out of availability.

        Args:
            caller_email (str): The authenticated caller.
            payload (FoodClaimCreate): The claim sent by the caller.

        Returns:
            InsertResult: Acknowledgement carrying the new claim ID.

        Raises:
            ClaimIdentityMismatchError: If the payload names another user.
            ListingNotFoundError: If the listing does not exist.
            ClaimConflictError: If the listing was already claimed.
        """
        if payload.user_email != caller_email:
            LOGGER.warning(
                "%s attempted to claim listing %d as %s",
                caller_email,
                payload.food_id,
                payload.user_email,
            )
            raise ClaimIdentityMismatchError()

        try:
            await self._transition_listing(payload.food_id, payload.status)
        except ClaimConflictError:
            LOGGER.info(
                "Claim by %s on listing %d lost the race",
                caller_email,
                payload.food_id,
            )
            raise

        claim: FoodClaim = FoodClaim(
            food_id=payload.food_id,
            user_email=payload.user_email,
            status=payload.status,
            request_date=to_utc(payload.request_date or utc_now()),
            additional_notes=payload.additional_notes,
            details=payload.details,
        )
        self.db.add(claim)
        await self.db.flush()

        LOGGER.info(
            "Claim %d recorded: %s requested listing %d",
            claim.id,
            claim.user_email,
            claim.food_id,
        )
        return InsertResult(inserted_id=claim.id)

    async def list_claims_by_requester(
        self, email: str
    ) -> t.List[FoodClaimResponse]:
        """List the claims submitted by a user.

        Args:
            email (str): The requester email.

        Returns:
            t.List[FoodClaimResponse]: The user's claims, oldest first.
        """
        claims: t.Sequence[FoodClaim] = (
            (
                await self.db.execute(
                    select(FoodClaim)
                    .where(FoodClaim.user_email == email)
                    .order_by(FoodClaim.id.asc())
                )
            )
            .scalars()
            .all()
        )
        return [self.convert_claim_to_response(claim) for claim in claims]
