"""Session tokens - minting, cookie policy and verification."""

from datetime import timedelta

import pytest
from jose import JWTError, jwt

from app.core.auth import create_access_token, decode_access_token
from app.core.config import SETTINGS
from tests.factories import token_for


def test_decode_round_trips_identity():
    principal = decode_access_token(token_for("a@x.com", name="Alice"))

    assert principal.email == "a@x.com"
    assert principal.name == "Alice"


def test_expired_token_is_rejected():
    token = create_access_token(
        {"email": "a@x.com"}, expires_delta=timedelta(seconds=-10)
    )

    with pytest.raises(JWTError):
        decode_access_token(token)


def test_token_signed_with_another_key_is_rejected():
    token = jwt.encode(
        {"email": "a@x.com"}, "not-the-secret", algorithm=SETTINGS.algorithm
    )

    with pytest.raises(JWTError):
        decode_access_token(token)


def test_token_without_email_is_rejected():
    with pytest.raises(JWTError):
        decode_access_token(create_access_token({"sub": "someone"}))


async def test_jwt_sets_http_only_cookie(client):
    res = await client.post(
        "/jwt", json={"email": "a@x.com", "name": "Alice", "photo": "p.png"}
    )

    assert res.status_code == 200
    assert res.json() == {"success": True}
    cookie = res.headers["set-cookie"]
    assert cookie.startswith("token=")
    assert "HttpOnly" in cookie
    assert "SameSite=strict" in cookie
    assert "Secure" not in cookie
    assert f"Max-Age={SETTINGS.access_token_expire_minutes * 60}" in cookie

    token = cookie.split(";", 1)[0].split("=", 1)[1]
    claims = jwt.decode(
        token, SETTINGS.secret_key, algorithms=[SETTINGS.algorithm]
    )
    assert claims["email"] == "a@x.com"
    assert claims["photo"] == "p.png"


async def test_jwt_cookie_is_cross_site_in_production(client, monkeypatch):
    monkeypatch.setattr(SETTINGS, "environment", "production")

    res = await client.post("/jwt", json={"email": "a@x.com"})

    cookie = res.headers["set-cookie"]
    assert "Secure" in cookie
    assert "SameSite=none" in cookie


async def test_jwt_requires_an_email(client):
    res = await client.post("/jwt", json={"name": "Nobody"})

    assert res.status_code == 422


async def test_logout_clears_cookie_without_token(client):
    res = await client.post("/logout")

    assert res.status_code == 200
    assert res.json() == {"success": True}
    cookie = res.headers["set-cookie"]
    assert cookie.startswith("token=")
    assert "Max-Age=0" in cookie


async def test_missing_token_is_unauthenticated(client):
    res = await client.get("/manage-my-foods", params={"email": "a@x.com"})

    assert res.status_code == 401
    assert res.json()["detail"] == "Unauthorized access"


async def test_invalid_token_is_forbidden(client):
    client.cookies.set("token", "not-a-jwt")

    res = await client.get("/manage-my-foods", params={"email": "a@x.com"})

    assert res.status_code == 403
    assert res.json()["detail"] == "Forbidden access"


async def test_expired_token_is_forbidden(client):
    client.cookies.set(
        "token",
        create_access_token(
            {"email": "a@x.com"}, expires_delta=timedelta(minutes=-1)
        ),
    )

    res = await client.get("/manage-my-foods", params={"email": "a@x.com"})

    assert res.status_code == 403


async def test_cookie_from_jwt_authenticates_later_calls(client):
    await client.post("/jwt", json={"email": "a@x.com"})

    res = await client.get("/manage-my-foods", params={"email": "a@x.com"})

    assert res.status_code == 200
    assert res.json() == []


async def test_principal_cannot_read_other_users_listings(
    client, login, seed_listing
):
    await seed_listing(donator_email="a@x.com")
    login("b@x.com")

    res = await client.get("/manage-my-foods", params={"email": "a@x.com"})

    assert res.status_code == 403
    assert res.json() == {"detail": "Forbidden"}
