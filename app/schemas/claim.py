"""Pydantic schemas for food claims."""

import typing as t
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.core.models import ListingStatus


class FoodClaimCreate(BaseModel):
    """Schema for requesting a food listing.

    Fields beyond the declared ones (requested quantity, pickup details...)
    are accepted and stored with the claim.
    """

    model_config = ConfigDict(extra="allow")

    food_id: int
    user_email: EmailStr
    status: ListingStatus = ListingStatus.REQUESTED
    request_date: datetime | None = None
    additional_notes: str | None = Field(None, max_length=1000)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: ListingStatus) -> ListingStatus:
        """Ensure a claim moves its listing out of availability.

        Args:
            v (ListingStatus): The target status of the listing.

        Returns:
            ListingStatus: The validated status.
        """
        if v == ListingStatus.AVAILABLE:
            raise ValueError("A claim cannot mark a listing as Available")
        return v

    @property
    def details(self) -> t.Dict[str, t.Any]:
        """Caller-supplied metadata outside the declared fields."""
        return dict(self.model_extra or {})


class FoodClaimResponse(BaseModel):
    """Schema for food claim response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    food_id: int
    user_email: str
    status: ListingStatus
    request_date: datetime
    additional_notes: str | None = None
    details: t.Dict[str, t.Any]
    created_at: datetime
