"""Port interfaces (Protocols).

The ads manager depends only on these, never on a concrete SDK bridge.
"""

from .custom import CustomAdProvider
from .delegate import AdsDelegate
from .network import NetworkAdProvider

__all__ = [
    "AdsDelegate",
    "CustomAdProvider",
    "NetworkAdProvider",
]
