"""Custom ad rotation: in-house promotions shown round-robin."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..models.custom_ad import CustomAd, Orientation
from ..observability import get_logger
from ..ports.delegate import AdsDelegate

_LOGGER = get_logger("custom")


class InventoryError(ValueError):
    """Raised when a custom ad inventory file cannot be loaded."""


def load_inventory(path: Path) -> list[CustomAd]:
    """Load custom ads from a JSON list. Raises InventoryError on bad input."""
    if not path.is_file():
        raise InventoryError(f"custom ads file not found or not a regular file: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise InventoryError(f"invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InventoryError(f"cannot read {path}: {e}") from e
    if not isinstance(raw, list):
        raise InventoryError("JSON file must contain a list of custom ad objects.")
    ads: list[CustomAd] = []
    for i, item in enumerate(raw):
        try:
            ads.append(CustomAd.model_validate(item))
        except ValidationError as e:
            raise InventoryError(f"invalid custom ad at index {i}: {e}") from e
    return ads


class CustomAdRotation:
    """Shows one custom ad at a time, cycling through the inventory."""

    def __init__(self, ads: list[CustomAd] | None = None, delegate: AdsDelegate | None = None) -> None:
        self._ads = list(ads or [])
        self._next_index = 0
        self.delegate = delegate
        self.current: CustomAd | None = None
        self.orientation = Orientation.portrait

    @property
    def ads(self) -> list[CustomAd]:
        return list(self._ads)

    @property
    def is_showing(self) -> bool:
        return self.current is not None

    def show(self) -> None:
        if not self._ads:
            _LOGGER.warning("custom_ad_inventory_empty")
            return
        self.current = self._ads[self._next_index]
        self._next_index = (self._next_index + 1) % len(self._ads)
        _LOGGER.info(
            "custom_ad_shown",
            extra={"ad_id": self.current.ad_id, "orientation": self.orientation.value},
        )
        if self.delegate is not None:
            self.delegate.ad_did_open()

    def tap(self) -> None:
        """User tapped the visible ad: report its store link and close it."""
        if self.current is None:
            return
        app_url = self.current.app_url
        if self.delegate is not None:
            self.delegate.custom_ad_clicked(app_url)
        self.close()

    def close(self) -> None:
        """User dismissed the visible ad."""
        if self.current is None:
            return
        self.current = None
        if self.delegate is not None:
            self.delegate.ad_did_close()

    def remove(self) -> None:
        # No close callback: removal is not a user dismissal.
        self.current = None

    def adjust_for_orientation(self, orientation: Orientation | None = None) -> None:
        if orientation is not None:
            self.orientation = orientation
