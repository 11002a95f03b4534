"""Tests for DispatchSettings loading and the composition root."""

import json

import pytest
from pydantic import ValidationError

from ad_dispatch import wiring
from ad_dispatch.adapters.network import RecordingNetworkProvider
from ad_dispatch.config.runtime import DispatchSettings
from ad_dispatch.domain.dispatch_policy import DispatchOutcome


def _settings(**kwargs) -> DispatchSettings:
    return DispatchSettings(_env_file=None, **kwargs)


class TestDispatchSettings:
    def test_defaults(self):
        settings = _settings()
        assert settings.custom_ads_interval == 0
        assert settings.max_custom_ads_per_session == 0
        assert settings.platform == "headless"
        assert settings.custom_ads_file is None
        assert settings.log_level == "INFO"

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("AD_DISPATCH_CUSTOM_ADS_INTERVAL", "4")
        monkeypatch.setenv("AD_DISPATCH_MAX_CUSTOM_ADS_PER_SESSION", "2")
        monkeypatch.setenv("AD_DISPATCH_PLATFORM", "tvos")
        monkeypatch.setenv("AD_DISPATCH_LOG_LEVEL", "debug")
        settings = _settings()
        assert settings.custom_ads_interval == 4
        assert settings.max_custom_ads_per_session == 2
        assert settings.platform == "tvos"
        assert settings.log_level == "DEBUG"

    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            _settings(platform="android")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            _settings(log_level="chatty")


class TestWiring:
    def test_headless_manager_uses_configured_rotation(self):
        manager = wiring.build_ads_manager(
            _settings(custom_ads_interval=3, max_custom_ads_per_session=2)
        )
        outcomes = [manager.request_interstitial().outcome for _ in range(4)]
        assert outcomes == [
            DispatchOutcome.custom,
            DispatchOutcome.network,
            DispatchOutcome.network,
            DispatchOutcome.custom,
        ]

    def test_headless_provider_reports_readiness(self):
        manager = wiring.build_ads_manager(_settings(rewarded_video_ready=True))
        assert manager.is_rewarded_video_ready is True

    def test_unregistered_platform_fails(self, monkeypatch):
        monkeypatch.setattr(wiring, "_NETWORK_PROVIDERS", {"headless": lambda s: RecordingNetworkProvider()})
        with pytest.raises(ValueError, match="ios"):
            wiring.build_ads_manager(_settings(platform="ios"))

    def test_registered_platform_provider_is_used(self, monkeypatch):
        monkeypatch.setattr(wiring, "_NETWORK_PROVIDERS", dict(wiring._NETWORK_PROVIDERS))
        provider = RecordingNetworkProvider()
        wiring.register_network_provider("tvos", lambda s: provider)
        manager = wiring.build_ads_manager(_settings(platform="tvos"))
        manager.request_interstitial()
        assert provider.call_names() == ["show_interstitial"]

    def test_custom_rotation_loaded_from_file(self, tmp_path):
        path = tmp_path / "ads.json"
        path.write_text(
            json.dumps([
                {"ad_id": "a", "headline": "A", "image": "AdA", "app_url": "https://apps.example.com/a"},
            ]),
            encoding="utf-8",
        )
        rotation = wiring.build_custom_rotation(_settings(custom_ads_file=path))
        assert [ad.ad_id for ad in rotation.ads] == ["a"]
