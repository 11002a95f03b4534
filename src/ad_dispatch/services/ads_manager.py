"""AdsManager — the app-facing ad facade.

Decides per interstitial request whether a custom ad or the network ad is
shown, and forwards banner, rewarded video, removal and orientation calls
to the providers. Provider failures propagate to the caller unchanged.
"""

from __future__ import annotations

import threading
from typing import Any

from ..domain.dispatch_policy import (
    DispatchOutcome,
    DispatchState,
    InterstitialDecision,
    InterstitialPolicy,
)
from ..models.custom_ad import Orientation
from ..observability import log_decision, log_forward
from ..ports.custom import CustomAdProvider
from ..ports.delegate import AdsDelegate
from ..ports.network import NetworkAdProvider


class AdsManager:
    """Owns the dispatch state for one session and drives both providers."""

    def __init__(
        self,
        network_provider: NetworkAdProvider,
        custom_provider: CustomAdProvider,
        custom_ads_interval: int = 0,
        max_custom_ads_per_session: int = 0,
        policy: InterstitialPolicy | None = None,
    ) -> None:
        self._network = network_provider
        self._custom = custom_provider
        self._policy = policy or InterstitialPolicy()
        self._state = DispatchState(custom_ads_interval, max_custom_ads_per_session)
        self._lock = threading.Lock()
        self._delegate: AdsDelegate | None = None

    # --- setup ---

    def configure(self, custom_ads_interval: int, max_custom_ads_per_session: int) -> None:
        """Set how often a custom ad is mixed in and how many per session."""
        with self._lock:
            self._state.custom_ad_interval = custom_ads_interval
            self._state.custom_ad_max_per_session = max_custom_ads_per_session

    @property
    def delegate(self) -> AdsDelegate | None:
        return self._delegate

    def set_delegate(self, delegate: AdsDelegate | None) -> None:
        """Hand the same delegate to both providers."""
        self._delegate = delegate
        self._custom.delegate = delegate
        self._network.delegate = delegate

    # --- read-only state ---

    @property
    def is_removed_ads(self) -> bool:
        with self._lock:
            return self._state.is_removed_ads

    @property
    def is_rewarded_video_ready(self) -> bool:
        return self._network.is_rewarded_video_ready

    @property
    def state(self) -> dict[str, Any]:
        with self._lock:
            return self._state.snapshot()

    # --- ads ---

    def show_banner(self, delay: float = 0.0) -> None:
        with self._lock:
            removed = self._state.is_removed_ads
        if removed:
            return
        log_forward("show_banner", {"delay": delay})
        self._network.show_banner(delay)

    def request_interstitial(self, interval: int = 0) -> InterstitialDecision:
        """Show a custom or network interstitial, or nothing.

        ``interval`` throttles this call site: only every ``interval``-th
        call gets through. 0 disables throttling.
        """
        with self._lock:
            decision = self._policy.evaluate(self._state, interval)
        log_decision(decision, interval)

        if decision.outcome is DispatchOutcome.custom:
            self._custom.show()
        elif decision.outcome is DispatchOutcome.network:
            self._network.show_interstitial()
        return decision

    def request_rewarded_video(self) -> None:
        # Not gated: ad-free users can still opt into rewards.
        log_forward("show_rewarded_video")
        self._network.show_rewarded_video()

    # --- removal ---

    def remove_banner(self) -> None:
        log_forward("remove_banner")
        self._network.remove_banner()

    def remove_all(self) -> None:
        """Turn ads off for the rest of the session and tear down both providers."""
        with self._lock:
            self._state.is_removed_ads = True
        log_forward("remove_all")
        self._custom.remove()
        self._network.remove_all()

    # --- lifecycle ---

    def adjust_for_orientation(self, orientation: Orientation | None = None) -> None:
        """Call after an orientation change (e.g. landscape to portrait)."""
        log_forward(
            "adjust_for_orientation",
            {"orientation": orientation.value if orientation else None},
        )
        self._custom.adjust_for_orientation(orientation)
        self._network.adjust_for_orientation(orientation)
