"""Interstitial dispatch policy: when a custom ad replaces a network ad."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DispatchOutcome(str, Enum):
    custom = "custom"
    network = "network"
    throttled = "throttled"
    ads_removed = "ads_removed"


@dataclass(frozen=True)
class InterstitialDecision:
    """Decision returned by the policy for one interstitial request."""

    outcome: DispatchOutcome
    reason: str
    custom_ad_counter: int
    custom_ad_shown_counter: int
    interval_counter: int

    @property
    def shows_ad(self) -> bool:
        return self.outcome in (DispatchOutcome.custom, DispatchOutcome.network)

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "reason": self.reason,
            "custom_ad_counter": self.custom_ad_counter,
            "custom_ad_shown_counter": self.custom_ad_shown_counter,
            "interval_counter": self.interval_counter,
        }


class DispatchState:
    """Session counters and flags owned by a single ads manager."""

    def __init__(self, custom_ad_interval: int = 0, custom_ad_max_per_session: int = 0) -> None:
        self.custom_ad_interval = custom_ad_interval
        self.custom_ad_max_per_session = custom_ad_max_per_session
        self._custom_ad_counter = 0
        self.custom_ad_shown_counter = 0
        self.interval_counter = 0
        self.is_removed_ads = False

    @property
    def custom_ad_counter(self) -> int:
        return self._custom_ad_counter

    @custom_ad_counter.setter
    def custom_ad_counter(self, value: int) -> None:
        # Assigning the interval itself stores 0.
        if value == self.custom_ad_interval:
            value = 0
        self._custom_ad_counter = value

    def snapshot(self) -> dict[str, int | bool]:
        return {
            "custom_ad_interval": self.custom_ad_interval,
            "custom_ad_max_per_session": self.custom_ad_max_per_session,
            "custom_ad_counter": self.custom_ad_counter,
            "custom_ad_shown_counter": self.custom_ad_shown_counter,
            "interval_counter": self.interval_counter,
            "is_removed_ads": self.is_removed_ads,
        }


class InterstitialPolicy:
    """Counter-driven choice between a custom ad and a network interstitial.

    A slot is custom-eligible when ``custom_ad_counter`` is 0 or equal to
    ``custom_ad_interval`` and fewer than ``custom_ad_max_per_session``
    custom ads have been shown. The counter advances on every request that
    gets past the removed-ads guard and the call-site throttle.
    """

    def evaluate(self, state: DispatchState, interval: int = 0) -> InterstitialDecision:
        """Advance ``state`` for one request and return what should be shown."""
        if state.is_removed_ads:
            return self._decision(state, DispatchOutcome.ads_removed, "ads_removed")

        if interval != 0:
            state.interval_counter += 1
            if state.interval_counter < interval:
                return self._decision(state, DispatchOutcome.throttled, "interval_not_reached")
            state.interval_counter = 0

        if self.custom_slot_open(state):
            state.custom_ad_shown_counter += 1
            outcome, reason = DispatchOutcome.custom, "custom_slot"
        elif state.custom_ad_shown_counter >= state.custom_ad_max_per_session:
            outcome, reason = DispatchOutcome.network, "session_cap_reached"
        else:
            outcome, reason = DispatchOutcome.network, "network_slot"

        state.custom_ad_counter += 1
        return self._decision(state, outcome, reason)

    def custom_slot_open(self, state: DispatchState) -> bool:
        """True if the next request past the throttle would show a custom ad."""
        at_slot = (
            state.custom_ad_counter == 0
            or state.custom_ad_counter == state.custom_ad_interval
        )
        return at_slot and state.custom_ad_shown_counter < state.custom_ad_max_per_session

    @staticmethod
    def _decision(state: DispatchState, outcome: DispatchOutcome, reason: str) -> InterstitialDecision:
        return InterstitialDecision(
            outcome=outcome,
            reason=reason,
            custom_ad_counter=state.custom_ad_counter,
            custom_ad_shown_counter=state.custom_ad_shown_counter,
            interval_counter=state.interval_counter,
        )
