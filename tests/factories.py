"""Test data builders."""

import typing as t
from datetime import datetime, timedelta, timezone

from app.core.auth import create_access_token

BASE_DATE = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


def token_for(email: str, **claims: t.Any) -> str:
    """Mint a session token for tests."""
    return create_access_token({"email": email, "sub": email, **claims})


def days(n: int) -> datetime:
    return BASE_DATE + timedelta(days=n)


def listing_payload(**overrides: t.Any) -> t.Dict[str, t.Any]:
    """JSON body for POST /all-foods."""
    payload: t.Dict[str, t.Any] = {
        "foodName": "Rice Pack",
        "foodImg": "https://img.example.com/rice.png",
        "foodQuantity": 5,
        "location": "Dhaka",
        "expireDate": BASE_DATE.isoformat(),
        "additionalNotes": "Sealed",
        "donator": {
            "donatorEmail": "donor@x.com",
            "donatorName": "Donor",
            "donatorImage": "https://img.example.com/donor.png",
        },
    }
    payload.update(overrides)
    return payload


def claim_payload(food_id: int, **overrides: t.Any) -> t.Dict[str, t.Any]:
    """JSON body for POST /request-foods."""
    payload: t.Dict[str, t.Any] = {
        "food_id": food_id,
        "user_email": "hungry@x.com",
        "status": "Requested",
        "additional_notes": "Pick up after 6pm",
        "requested_quantity": 2,
    }
    payload.update(overrides)
    return payload
