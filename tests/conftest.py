"""Shared test fixtures - in-memory database and HTTP client.

Every test gets a fresh in-memory SQLite database installed on the
application state, so requests go through the real ``get_db`` dependency
and its commit/rollback handling.
"""

import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import typing as t

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

from app.core.database import DatabaseSessionManager
from app.core.models import FoodClaim, FoodListing, ListingStatus
from app.main import APPLICATION
from tests.factories import BASE_DATE, token_for


@pytest.fixture
async def database():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    APPLICATION.state.database = manager
    yield manager
    APPLICATION.state.database = None
    await manager.close()


@pytest.fixture
async def client(database):
    async with AsyncClient(
        transport=ASGITransport(app=APPLICATION), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def login(client):
    """Switch the client's session cookie to the given email."""

    def _login(email: str) -> None:
        client.cookies.set("token", token_for(email))

    return _login


@pytest.fixture
def seed_listing(database):
    """Insert a listing directly and return its ID."""

    async def _seed(**overrides: t.Any) -> int:
        values: t.Dict[str, t.Any] = {
            "food_name": "Rice Pack",
            "food_quantity": 5,
            "expire_date": BASE_DATE,
            "status": ListingStatus.AVAILABLE,
            "donator_email": "donor@x.com",
            "donator_name": "Donor",
        }
        values.update(overrides)
        async with database.session_maker() as session:
            listing = FoodListing(**values)
            session.add(listing)
            await session.commit()
            return listing.id

    return _seed


@pytest.fixture
def fetch_listing(database):
    """Read a listing back in a fresh session."""

    async def _fetch(listing_id: int) -> FoodListing | None:
        async with database.session_maker() as session:
            return (
                await session.execute(
                    select(FoodListing).where(FoodListing.id == listing_id)
                )
            ).scalar_one_or_none()

    return _fetch


@pytest.fixture
def fetch_claims(database):
    """Read every claim for a listing in a fresh session."""

    async def _fetch(food_id: int) -> t.List[FoodClaim]:
        async with database.session_maker() as session:
            return list(
                (
                    await session.execute(
                        select(FoodClaim).where(FoodClaim.food_id == food_id)
                    )
                )
                .scalars()
                .all()
            )

    return _fetch
