"""Claim workflow - listing transition and claim record stay consistent."""

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import ListingStatus
from tests.factories import claim_payload


async def test_claim_records_request_and_updates_listing(
    client, login, seed_listing, fetch_listing, fetch_claims
):
    listing_id = await seed_listing()
    login("hungry@x.com")

    res = await client.post("/request-foods", json=claim_payload(listing_id))

    assert res.status_code == 200
    body = res.json()
    assert body["acknowledged"] is True
    claims = await fetch_claims(listing_id)
    assert [claim.id for claim in claims] == [body["inserted_id"]]
    assert claims[0].user_email == "hungry@x.com"
    assert claims[0].status == ListingStatus.REQUESTED
    assert claims[0].details == {"requested_quantity": 2}
    listing = await fetch_listing(listing_id)
    assert listing.status == ListingStatus.REQUESTED


async def test_claim_for_someone_else_is_unauthorized(
    client, login, seed_listing, fetch_listing, fetch_claims
):
    listing_id = await seed_listing()
    login("hungry@x.com")

    res = await client.post(
        "/request-foods",
        json=claim_payload(listing_id, user_email="victim@x.com"),
    )

    assert res.status_code == 401
    assert await fetch_claims(listing_id) == []
    assert (await fetch_listing(listing_id)).status == ListingStatus.AVAILABLE


async def test_claim_requires_token(client, seed_listing):
    listing_id = await seed_listing()

    res = await client.post("/request-foods", json=claim_payload(listing_id))

    assert res.status_code == 401


async def test_second_claim_conflicts(
    client, login, seed_listing, fetch_claims
):
    listing_id = await seed_listing()
    login("hungry@x.com")
    await client.post("/request-foods", json=claim_payload(listing_id))

    login("late@x.com")
    res = await client.post(
        "/request-foods",
        json=claim_payload(listing_id, user_email="late@x.com"),
    )

    assert res.status_code == 409
    claims = await fetch_claims(listing_id)
    assert [claim.user_email for claim in claims] == ["hungry@x.com"]


async def test_claim_on_missing_listing_is_404(client, login, fetch_claims):
    login("hungry@x.com")

    res = await client.post("/request-foods", json=claim_payload(404))

    assert res.status_code == 404
    assert await fetch_claims(404) == []


async def test_claim_cannot_mark_listing_available(
    client, login, seed_listing
):
    listing_id = await seed_listing()
    login("hungry@x.com")

    res = await client.post(
        "/request-foods", json=claim_payload(listing_id, status="Available")
    )

    assert res.status_code == 422


async def test_failed_claim_insert_rolls_back_listing(
    client, login, seed_listing, fetch_listing, fetch_claims, monkeypatch
):
    listing_id = await seed_listing()
    login("hungry@x.com")
    # request_date is NOT NULL, so the claim insert fails after the
    # listing has already been moved to Requested
    monkeypatch.setattr(
        "app.services.claim_service.to_utc", lambda value: None
    )

    res = await client.post("/request-foods", json=claim_payload(listing_id))

    assert res.status_code == 500
    assert res.json() == {"message": "Internal storage error"}
    assert await fetch_claims(listing_id) == []
    assert (await fetch_listing(listing_id)).status == ListingStatus.AVAILABLE


async def test_list_my_requests(client, login, seed_listing):
    first = await seed_listing(food_name="Rice Pack")
    second = await seed_listing(food_name="Bread")
    other = await seed_listing(food_name="Milk")
    login("hungry@x.com")
    await client.post("/request-foods", json=claim_payload(first))
    await client.post("/request-foods", json=claim_payload(second))
    login("other@x.com")
    await client.post(
        "/request-foods", json=claim_payload(other, user_email="other@x.com")
    )

    login("hungry@x.com")
    res = await client.get(
        "/request-foods", params={"email": "hungry@x.com"}
    )

    assert res.status_code == 200
    items = res.json()
    assert [item["food_id"] for item in items] == [first, second]
    assert items[0]["details"] == {"requested_quantity": 2}
    assert items[0]["additional_notes"] == "Pick up after 6pm"


async def test_cannot_list_someone_elses_requests(client, login):
    login("hungry@x.com")

    res = await client.get("/request-foods", params={"email": "other@x.com"})

    assert res.status_code == 403


async def test_failed_commit_is_reported_as_storage_error(
    client, login, seed_listing, fetch_listing, fetch_claims, monkeypatch
):
    listing_id = await seed_listing()
    login("hungry@x.com")

    async def broken_commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(AsyncSession, "commit", broken_commit)

    res = await client.post("/request-foods", json=claim_payload(listing_id))

    assert res.status_code == 500
    assert res.json() == {"message": "Internal storage error"}
    assert await fetch_claims(listing_id) == []
    assert (await fetch_listing(listing_id)).status == ListingStatus.AVAILABLE
