"""Fixed gym listing — GET /gyms serves a constant list of gym names."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["gyms"])

GYMS: tuple[str, ...] = ("Gym A", "Gym B", "Gym C")


@router.get("/gyms", name="GetGyms", status_code=200)
async def get_gyms() -> list[str]:
    """Return the fixed gym listing."""
    return list(GYMS)
