"""Network provider for platforms without an SDK bridge.

Records every call instead of talking to an ad network, so the manager can
run headless (CLI simulation, tests) with the same contract as a real SDK.
"""

from __future__ import annotations

from ..models.custom_ad import Orientation
from ..observability import get_logger
from ..ports.delegate import AdsDelegate

_LOGGER = get_logger("network")


class RecordingNetworkProvider:
    """NetworkAdProvider that logs and records calls."""

    def __init__(
        self,
        rewarded_video_ready: bool = False,
        reward_amount: int = 1,
        delegate: AdsDelegate | None = None,
    ) -> None:
        self.rewarded_video_ready = rewarded_video_ready
        self.reward_amount = reward_amount
        self.delegate = delegate
        self.calls: list[tuple[str, object]] = []
        self.banner_visible = False
        self.orientation: Orientation | None = None

    @property
    def is_rewarded_video_ready(self) -> bool:
        return self.rewarded_video_ready

    def show_banner(self, delay: float = 0.0) -> None:
        self._record("show_banner", delay)
        self.banner_visible = True

    def show_interstitial(self) -> None:
        self._record("show_interstitial")
        if self.delegate is not None:
            self.delegate.ad_did_open()

    def show_rewarded_video(self) -> None:
        self._record("show_rewarded_video")
        if not self.rewarded_video_ready:
            _LOGGER.info("rewarded_video_not_ready")
            return
        if self.delegate is not None:
            self.delegate.ad_did_open()
            self.delegate.ad_did_reward_user(self.reward_amount)

    def close_interstitial(self) -> None:
        """Simulate the user dismissing a full-screen ad."""
        self._record("close_interstitial")
        if self.delegate is not None:
            self.delegate.ad_did_close()

    def remove_banner(self) -> None:
        self._record("remove_banner")
        self.banner_visible = False

    def remove_all(self) -> None:
        self._record("remove_all")
        self.banner_visible = False

    def adjust_for_orientation(self, orientation: Orientation | None = None) -> None:
        self._record("adjust_for_orientation", orientation)
        self.orientation = orientation

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _record(self, name: str, arg: object = None) -> None:
        self.calls.append((name, arg))
        _LOGGER.debug("network_call", extra={"call": name})
