"""Services: the ads manager; the dispatch policy lives in domain."""

from ..domain.dispatch_policy import InterstitialPolicy
from .ads_manager import AdsManager

__all__ = [
    "AdsManager",
    "InterstitialPolicy",
]
