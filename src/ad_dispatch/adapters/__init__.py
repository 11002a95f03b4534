"""Concrete adapter implementations."""

from .custom_rotation import CustomAdRotation, InventoryError, load_inventory
from .network import RecordingNetworkProvider

__all__ = [
    "CustomAdRotation",
    "InventoryError",
    "RecordingNetworkProvider",
    "load_inventory",
]
