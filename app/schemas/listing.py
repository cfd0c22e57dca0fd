"""Pydantic schemas for food listings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from app.core.models import ListingStatus


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Donator(CamelModel):
    """Owner of a listing."""

    donator_email: EmailStr
    donator_name: str | None = Field(None, max_length=255)
    donator_image: str | None = Field(None, max_length=1000)


class FoodListingBase(CamelModel):
    """Base food listing schema."""

    food_name: str = Field(..., min_length=1, max_length=255)
    food_img: str | None = Field(None, max_length=1000)
    food_quantity: int = Field(..., ge=0)
    location: str | None = Field(None, max_length=255)
    expire_date: datetime
    additional_notes: str | None = Field(None, max_length=1000)


class FoodListingCreate(FoodListingBase):
    """Schema for creating a new food listing."""

    donator: Donator
    status: ListingStatus = ListingStatus.AVAILABLE


class FoodListingUpdate(CamelModel):
    """Schema for updating a food listing.

    Only the fields sent by the client are changed. Owner and status are
    deliberately absent.
    """

    food_name: str | None = Field(None, min_length=1, max_length=255)
    food_img: str | None = Field(None, max_length=1000)
    food_quantity: int | None = Field(None, ge=0)
    location: str | None = Field(None, max_length=255)
    expire_date: datetime | None = None
    additional_notes: str | None = Field(None, max_length=1000)


class FoodListingResponse(FoodListingBase):
    """Schema for food listing response."""

    id: int
    status: ListingStatus
    donator: Donator
    created_at: datetime
    updated_at: datetime
