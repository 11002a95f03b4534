"""ad_dispatch application package."""

from .domain import DispatchOutcome, DispatchState, InterstitialDecision, InterstitialPolicy
from .models import CustomAd, Orientation
from .services import AdsManager

__version__ = "0.1.0"
__all__ = [
    "AdsManager",
    "CustomAd",
    "DispatchOutcome",
    "DispatchState",
    "InterstitialDecision",
    "InterstitialPolicy",
    "Orientation",
]
