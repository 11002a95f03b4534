"""Custom ad inventory models."""

from .custom_ad import CustomAd, Orientation

__all__ = [
    "CustomAd",
    "Orientation",
]
