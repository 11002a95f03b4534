"""Domain layer for ad dispatch."""

from .dispatch_policy import (
    DispatchOutcome,
    DispatchState,
    InterstitialDecision,
    InterstitialPolicy,
)

__all__ = [
    "DispatchOutcome",
    "DispatchState",
    "InterstitialDecision",
    "InterstitialPolicy",
]
