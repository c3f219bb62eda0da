"""Health controller - Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy", "service": "geodiscovery-api"}


@router.get("/ping")
async def ping() -> str:
    return "pong"
