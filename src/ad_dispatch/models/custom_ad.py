"""Custom (in-house) ad schema models using Pydantic."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Orientation(str, Enum):
    portrait = "portrait"
    landscape = "landscape"


class CustomAd(BaseModel):
    """One in-house promotion in the custom ad rotation."""

    ad_id: str = Field(..., min_length=1, description="Unique identifier for the custom ad")
    headline: str = Field(..., description="Headline shown above the artwork")
    image: str = Field(..., description="Image asset name or URL for the ad artwork")
    app_url: str = Field(..., description="Store link opened when the ad is tapped")
    app_id: str | None = Field(
        default=None,
        description="Store identifier of the promoted app, if it has one",
    )
