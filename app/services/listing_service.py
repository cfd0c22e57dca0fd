"""Listing service - business logic for the food catalog."""

import logging
import typing as t

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import SETTINGS
from app.core.models import FoodListing, ListingStatus
from app.schemas.listing import (
    Donator,
    FoodListingCreate,
    FoodListingResponse,
    FoodListingUpdate,
)
from app.schemas.results import DeleteResult, InsertResult, UpdateResult
from app.services.listing_query import ListingQuery
from app.utils.dates import to_utc

LOGGER: logging.Logger = logging.getLogger(__name__)


class ListingNotFoundError(Exception):
    """Raised when a listing is not found."""

    listing_id: int

    def __init__(self, listing_id: int) -> None:
        """Initialize ListingNotFoundError.

        Args:
            listing_id (int): The ID of the missing listing.
        """
        self.listing_id = listing_id
        super().__init__(f"Food listing with ID {listing_id} not found")


class ListingOwnershipError(Exception):
    """Raised when a caller modifies a listing donated by someone else."""

    listing_id: int

    def __init__(self, listing_id: int) -> None:
        """Initialize ListingOwnershipError.

        Args:
            listing_id (int): The ID of the listing.
        """
        self.listing_id = listing_id
        super().__init__(
            f"Food listing with ID {listing_id} belongs to another donator"
        )


class ListingService:
    """Service class for food listing operations."""

    db: AsyncSession

    def __init__(self, db: AsyncSession) -> None:
        """Initialize ListingService.

        Args:
            db (AsyncSession): The database session.
        """
        self.db = db

    @staticmethod
    def convert_listing_to_response(
        listing: FoodListing,
    ) -> FoodListingResponse:
        """Convert FoodListing model to FoodListingResponse schema.

        Args:
            listing (FoodListing): The food listing model.

        Returns:
            FoodListingResponse: The food listing response schema.
        """
        return FoodListingResponse(
            id=listing.id,
            food_name=listing.food_name,
            food_img=listing.food_img,
            food_quantity=listing.food_quantity,
            location=listing.location,
            expire_date=to_utc(listing.expire_date),
            additional_notes=listing.additional_notes,
            status=listing.status,
            donator=Donator(
                donator_email=listing.donator_email,
                donator_name=listing.donator_name,
                donator_image=listing.donator_image,
            ),
            created_at=to_utc(listing.created_at),
            updated_at=to_utc(listing.updated_at or listing.created_at),
        )

    async def _fetch(self, listing_id: int) -> FoodListing | None:
        """Load a listing row by ID.

        Args:
            listing_id (int): The ID of the listing.

        Returns:
            FoodListing | None: The listing, or None when it does not exist.
        """
        return (
            await self.db.execute(
                select(FoodListing).where(FoodListing.id == listing_id)
            )
        ).scalar_one_or_none()

    async def _list(
        self, query: Select[t.Tuple[FoodListing]]
    ) -> t.List[FoodListingResponse]:
        """Run a listing select and convert the rows.

        Args:
            query (Select[t.Tuple[FoodListing]]): The statement to execute.

        Returns:
            t.List[FoodListingResponse]: The converted listings.
        """
        listings: t.Sequence[FoodListing] = (
            (await self.db.execute(query)).scalars().all()
        )
        return [self.convert_listing_to_response(item) for item in listings]

    async def list_listings(
        self, query: ListingQuery
    ) -> t.List[FoodListingResponse]:
        """List listings matching a search.

        Args:
            query (ListingQuery): Filter and ordering to apply.

        Returns:
            t.List[FoodListingResponse]: Every matching listing.
        """
        return await self._list(query.statement())

    async def list_all(self) -> t.List[FoodListingResponse]:
        """List every listing without filtering.

        Returns:
            t.List[FoodListingResponse]: All listings in store order.
        """
        return await self._list(select(FoodListing))

    async def list_featured(
        self, limit: int | None = None
    ) -> t.List[FoodListingResponse]:
        """List the largest available donations.

        Args:
            limit (int | None): Maximum number of listings, defaults to the
                configured featured limit.

        Returns:
            t.List[FoodListingResponse]:
                Available listings by descending quantity.
        """
        return await self._list(
            select(FoodListing)
            .where(FoodListing.status == ListingStatus.AVAILABLE)
            .order_by(FoodListing.food_quantity.desc(), FoodListing.id.asc())
            .limit(limit if limit is not None else SETTINGS.featured_limit)
        )

    async def list_by_owner(self, email: str) -> t.List[FoodListingResponse]:
        """List the listings donated by a user, newest first.

        Args:
            email (str): The donator email.

        Returns:
            t.List[FoodListingResponse]: The donator's listings.
        """
        return await self._list(
            select(FoodListing)
            .where(FoodListing.donator_email == email)
            .order_by(FoodListing.id.desc())
        )

    async def get_listing(self, listing_id: int) -> FoodListingResponse:
        """Get a specific listing by ID.

        Args:
            listing_id (int): The ID of the listing.

        Returns:
            FoodListingResponse: The food listing response schema.
        """
        listing: FoodListing | None = await self._fetch(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        return self.convert_listing_to_response(listing)

    async def create_listing(
        self, data: FoodListingCreate, caller_email: str | None = None
    ) -> InsertResult:
        """Create a new listing.

        Args:
            data (FoodListingCreate): The listing to store.
            caller_email (str | None): The authenticated caller, if any.

        Returns:
            InsertResult: Acknowledgement carrying the new listing ID.
        """
        donator_email: str = data.donator.donator_email
        if caller_email is not None and caller_email != donator_email:
            LOGGER.warning(
                "%s created a listing on behalf of %s",
                caller_email,
                donator_email,
            )

        listing: FoodListing = FoodListing(
            food_name=data.food_name,
            food_img=data.food_img,
            food_quantity=data.food_quantity,
            location=data.location,
            expire_date=to_utc(data.expire_date),
            additional_notes=data.additional_notes,
            status=data.status,
            donator_email=data.donator.donator_email,
            donator_name=data.donator.donator_name,
            donator_image=data.donator.donator_image,
        )
        self.db.add(listing)
        await self.db.flush()
        await self.db.refresh(listing)

        LOGGER.info(
            "Listing %d created by %s", listing.id, listing.donator_email
        )
        return InsertResult(inserted_id=listing.id)

    async def update_listing(
        self,
        listing_id: int,
        caller_email: str,
        data: FoodListingUpdate,
    ) -> UpdateResult:
        """Update the editable fields of a caller's own listing.

        Args:
            listing_id (int): The ID of the listing.
            caller_email (str): The authenticated caller.
            data (FoodListingUpdate): The fields to change.

        Returns:
            UpdateResult: Acknowledgement of the update.

        Raises:
            ListingNotFoundError: If the listing does not exist.
            ListingOwnershipError: If the caller is not the donator.
        """
        listing: FoodListing | None = await self._fetch(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        if listing.donator_email != caller_email:
            LOGGER.warning(
                "%s attempted to update listing %d", caller_email, listing_id
            )
            raise ListingOwnershipError(listing_id)

        changes: t.Dict[str, t.Any] = data.model_dump(exclude_unset=True)
        if changes.get("expire_date") is not None:
            changes["expire_date"] = to_utc(changes["expire_date"])
        # Required columns cannot be cleared
        for required in ("food_name", "food_quantity", "expire_date"):
            if required in changes and changes[required] is None:
                del changes[required]

        modified: bool = False
        for field, value in changes.items():
            current: t.Any = getattr(listing, field)
            if field == "expire_date":
                current = to_utc(current)
            if current != value:
                setattr(listing, field, value)
                modified = True

        await self.db.flush()
        return UpdateResult(matched_count=1, modified_count=int(modified))

    async def delete_listing(
        self, listing_id: int, caller_email: str
    ) -> DeleteResult:
        """Delete a caller's own listing.

        Deleting an ID that no longer exists is not an error.

        Args:
            listing_id (int): The ID of the listing.
            caller_email (str): The authenticated caller.

        Returns:
            DeleteResult: Acknowledgement with the number of deleted rows.

        Raises:
            ListingOwnershipError: If the caller is not the donator.
        """
        listing: FoodListing | None = await self._fetch(listing_id)
        if listing is None:
            return DeleteResult(deleted_count=0)
        if listing.donator_email != caller_email:
            LOGGER.warning(
                "%s attempted to delete listing %d", caller_email, listing_id
            )
            raise ListingOwnershipError(listing_id)

        await self.db.delete(listing)
        await self.db.flush()
        LOGGER.info("Listing %d deleted by %s", listing_id, caller_email)
        return DeleteResult(deleted_count=1)
