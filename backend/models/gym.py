"""Gym listing models for the listing page and the error page."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GymListView(BaseModel):
    """What the listing page renders."""

    model_config = ConfigDict(frozen=True)

    gyms: list[str]


class ErrorViewModel(BaseModel):
    """What the error page renders. Carries the request id for diagnostics."""

    model_config = ConfigDict(frozen=True)

    request_id: str | None = None

    @property
    def show_request_id(self) -> bool:
        return bool(self.request_id)
