"""Custom exception hierarchy for the heat-load engine."""

from __future__ import annotations


class HeatLoadError(Exception):
    """Base exception for all heat-load errors."""


class ValidationError(HeatLoadError):
    """Raised when a room lacks a required numeric field.

    Only area, height and target temperature have no fallback policy, so
    this is the single structural error the engine surfaces to callers.
    """

    def __init__(self, room_id: str, field: str) -> None:
        self.room_id = room_id
        self.field = field
        super().__init__(f"Room '{room_id}' is missing a valid '{field}'")


class RecordNotFoundError(HeatLoadError):
    """Raised when a stored heat-load calculation does not exist."""
