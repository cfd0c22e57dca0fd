"""Routers package."""

from fastapi import APIRouter

from app.routers import auth, claims, foods

ROUTER: APIRouter = APIRouter()

ROUTER.include_router(auth.ROUTER)
ROUTER.include_router(foods.ROUTER)
ROUTER.include_router(claims.ROUTER)

__all__ = ["auth", "claims", "foods", "ROUTER"]
