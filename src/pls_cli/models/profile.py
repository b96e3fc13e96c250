"""User profile model, collected once on first run."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Profile(BaseModel):
    """Who the user is and whether they want weather in their greeting."""

    name: str
    weather: bool = Field(default=False)
    weather_specific_location: str | None = Field(
        default=None, description="Empty or None lets the provider geolocate by IP"
    )
