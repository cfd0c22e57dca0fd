"""SQLAlchemy database models."""

import enum
import typing as t
from datetime import datetime

from sqlalchemy import (
    JSON,
    DateTime,
    Enum,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class ListingStatus(str, enum.Enum):
    """Availability status of a food listing."""

    AVAILABLE = "Available"
    REQUESTED = "Requested"


class FoodListing(Base):  # pylint: disable=too-few-public-methods
    """Food donation listed by a donor."""

    __tablename__ = "food_listings"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    food_name: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    food_img: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    food_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1
    )
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    expire_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[ListingStatus] = mapped_column(
        Enum(ListingStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ListingStatus.AVAILABLE,
    )

    # Donator (owner); never changed after creation
    donator_email: Mapped[str] = mapped_column(String(255), nullable=False)
    donator_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    donator_image: Mapped[str | None] = mapped_column(
        String(1000), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),  # pylint: disable=not-callable
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),  # pylint: disable=not-callable
        onupdate=func.now(),  # pylint: disable=not-callable
    )

    __table_args__ = (
        Index("ix_food_listings_donator_email", "donator_email"),
        Index("ix_food_listings_status_quantity", "status", "food_quantity"),
    )


class FoodClaim(Base):  # pylint: disable=too-few-public-methods
    """Request made by a user for a food listing."""

    __tablename__ = "food_claims"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    # Plain column, not a foreign key: claims outlive deleted listings
    food_id: Mapped[int] = mapped_column(Integer, nullable=False)
    user_email: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[ListingStatus] = mapped_column(
        Enum(ListingStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    request_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    details: Mapped[t.Dict[str, t.Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),  # pylint: disable=not-callable
    )

    __table_args__ = (
        Index("ix_food_claims_user_email", "user_email"),
        Index("ix_food_claims_food_id", "food_id"),
    )
