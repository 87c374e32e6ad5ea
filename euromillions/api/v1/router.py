"""Aggregate API v1 router."""

from fastapi import APIRouter

from euromillions.api.v1.endpoints import games, statistics

api_router = APIRouter()

api_router.include_router(statistics.router, prefix="/stats", tags=["statistics"])
api_router.include_router(games.router, tags=["games"])
