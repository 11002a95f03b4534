"""Port: renderer for custom (in-house) ads."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models.custom_ad import Orientation
from .delegate import AdsDelegate


@runtime_checkable
class CustomAdProvider(Protocol):
    """Shows in-house ads in place of network interstitials."""

    delegate: AdsDelegate | None

    def show(self) -> None: ...

    def remove(self) -> None: ...

    def adjust_for_orientation(self, orientation: Orientation | None = None) -> None: ...
