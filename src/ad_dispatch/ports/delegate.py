"""Port: ad lifecycle callbacks delivered to the app."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AdsDelegate(Protocol):
    """Receives lifecycle events from every ad provider."""

    def ad_did_open(self) -> None: ...

    def ad_did_close(self) -> None: ...

    def custom_ad_clicked(self, app_url: str) -> None: ...

    def ad_did_reward_user(self, reward_amount: int) -> None: ...
