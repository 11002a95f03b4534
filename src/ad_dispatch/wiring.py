"""Composition root — single place where all wiring happens.

Call ``build_ads_manager()`` to get an AdsManager with the network provider
registered for the configured platform and the custom ad rotation loaded
from the configured inventory file.
"""

from __future__ import annotations

from typing import Callable

from .adapters.custom_rotation import CustomAdRotation, load_inventory
from .adapters.network import RecordingNetworkProvider
from .config.runtime import DispatchSettings, get_settings
from .ports.network import NetworkAdProvider
from .services.ads_manager import AdsManager

NetworkProviderFactory = Callable[[DispatchSettings], NetworkAdProvider]

_NETWORK_PROVIDERS: dict[str, NetworkProviderFactory] = {
    "headless": lambda s: RecordingNetworkProvider(rewarded_video_ready=s.rewarded_video_ready),
}


def register_network_provider(platform: str, factory: NetworkProviderFactory) -> None:
    """Register the SDK bridge used for ``platform`` (e.g. 'ios', 'tvos')."""
    _NETWORK_PROVIDERS[platform] = factory


def build_network_provider(settings: DispatchSettings) -> NetworkAdProvider:
    factory = _NETWORK_PROVIDERS.get(settings.platform)
    if factory is None:
        raise ValueError(
            f"no network provider registered for platform {settings.platform!r}; "
            "call register_network_provider() first"
        )
    return factory(settings)


def build_custom_rotation(settings: DispatchSettings) -> CustomAdRotation:
    ads = load_inventory(settings.custom_ads_file) if settings.custom_ads_file else []
    return CustomAdRotation(ads)


def build_ads_manager(settings: DispatchSettings | None = None) -> AdsManager:
    """Construct an AdsManager configured from settings."""
    settings = settings or get_settings()
    return AdsManager(
        network_provider=build_network_provider(settings),
        custom_provider=build_custom_rotation(settings),
        custom_ads_interval=settings.custom_ads_interval,
        max_custom_ads_per_session=settings.max_custom_ads_per_session,
    )
