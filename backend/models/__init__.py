"""
Pydantic models for the gym listings service.

All data shapes defined here. No imports from routes or services.
"""

from backend.models.gym import ErrorViewModel, GymListView

__all__ = [
    "GymListView",
    "ErrorViewModel",
]
