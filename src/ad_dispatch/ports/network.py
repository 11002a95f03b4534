"""Port: third-party ad network SDK bridge."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models.custom_ad import Orientation
from .delegate import AdsDelegate


@runtime_checkable
class NetworkAdProvider(Protocol):
    """Banner, interstitial and rewarded video ads from an ad network."""

    delegate: AdsDelegate | None

    @property
    def is_rewarded_video_ready(self) -> bool: ...

    def show_banner(self, delay: float = 0.0) -> None: ...

    def show_interstitial(self) -> None: ...

    def show_rewarded_video(self) -> None: ...

    def remove_banner(self) -> None: ...

    def remove_all(self) -> None: ...

    def adjust_for_orientation(self, orientation: Orientation | None = None) -> None: ...
