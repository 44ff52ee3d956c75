"""Listing pages — GET / renders gyms fetched from the listing API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from backend.middleware.request_id import get_request_id
from backend.models.gym import ErrorViewModel, GymListView
from backend.services.gym_client import GymClient, UpstreamError
from backend.services.renderer import render_error, render_gym_list

logger = logging.getLogger(__name__)

router = APIRouter(tags=["home"])

# Error pages must never be cached
_NO_STORE = "no-store, no-cache"


def get_gym_client(request: Request) -> GymClient:
    """The GymClient the web app was built with."""
    return request.app.state.gym_client


def error_response(request: Request) -> HTMLResponse:
    """Render the generic error page for this request. It is served as a normal 200 page."""
    view = ErrorViewModel(request_id=get_request_id(request))
    return HTMLResponse(
        content=render_error(view),
        headers={"Cache-Control": _NO_STORE, "Pragma": "no-cache"},
    )


@router.get("/", response_class=HTMLResponse)
@router.get("/home", response_class=HTMLResponse, include_in_schema=False)
@router.get("/home/index", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, client: GymClient = Depends(get_gym_client)) -> HTMLResponse:
    """
    Render the gym listing.

    One GET to the listing API per page view. Any upstream failure renders
    the generic error page instead.
    """
    try:
        gyms = await client.fetch_gyms()
    except UpstreamError as e:
        logger.warning("Gym listing unavailable from %s (status=%s): %s", e.url, e.status_code, e)
        return error_response(request)

    return HTMLResponse(content=render_gym_list(GymListView(gyms=gyms)))


@router.get("/home/error", response_class=HTMLResponse)
async def error(request: Request) -> HTMLResponse:
    """Render the generic error page directly."""
    return error_response(request)
