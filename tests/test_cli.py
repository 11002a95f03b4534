"""Tests for the ad-dispatch CLI."""

import json
from pathlib import Path

import pytest

from ad_dispatch import cli
from ad_dispatch.config.runtime import get_settings

_SAMPLE_INVENTORY = Path(__file__).resolve().parent.parent / "data" / "custom_ads.json"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("CUSTOM_ADS_INTERVAL", "MAX_CUSTOM_ADS_PER_SESSION", "PLATFORM", "CUSTOM_ADS_FILE"):
        monkeypatch.delenv(f"AD_DISPATCH_{name}", raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _json_lines(out: str) -> list[dict]:
    return [json.loads(line) for line in out.splitlines() if line.startswith("{")]


def test_simulate_prints_each_decision(capsys):
    cli.main(["simulate", "--calls", "6", "--custom-interval", "3", "--max-custom", "2"])
    rows = _json_lines(capsys.readouterr().out)
    assert [r["call"] for r in rows] == [1, 2, 3, 4, 5, 6]
    assert [r["outcome"] for r in rows] == ["custom", "network", "network", "custom", "network", "network"]


def test_simulate_with_call_site_interval(capsys):
    cli.main(["simulate", "--calls", "4", "--interval", "2"])
    rows = _json_lines(capsys.readouterr().out)
    assert [r["outcome"] for r in rows] == ["throttled", "network", "throttled", "network"]


def test_simulate_remove_after():
    rows = cli.simulate(4, custom_interval=2, max_custom=5, remove_after=2)
    assert [r["outcome"] for r in rows] == ["custom", "network", "ads_removed", "ads_removed"]


def test_simulate_uses_settings_from_env(monkeypatch):
    monkeypatch.setenv("AD_DISPATCH_CUSTOM_ADS_INTERVAL", "1")
    monkeypatch.setenv("AD_DISPATCH_MAX_CUSTOM_ADS_PER_SESSION", "2")
    rows = cli.simulate(3)
    assert [r["outcome"] for r in rows] == ["custom", "custom", "network"]


def test_config_prints_settings(capsys):
    cli.main(["config"])
    data = json.loads(capsys.readouterr().out)
    assert data["platform"] == "headless"
    assert data["custom_ads_interval"] == 0


def test_inventory_lists_ads(capsys):
    cli.main(["inventory", "--file", str(_SAMPLE_INVENTORY)])
    out = capsys.readouterr().out
    assert "2 custom ads" in out
    assert "angry-flappy" in out


def test_inventory_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["inventory", "--file", str(tmp_path / "missing.json")])
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_simulate_bad_inventory_exits(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("AD_DISPATCH_CUSTOM_ADS_FILE", str(tmp_path / "missing.json"))
    with pytest.raises(SystemExit) as exc:
        cli.main(["simulate", "--calls", "2"])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "not found" in captured.err
    assert captured.out == ""


def test_inventory_non_utf8_file_exits(tmp_path, capsys):
    path = tmp_path / "ads.json"
    path.write_bytes(b"[\xff\xfe]")
    with pytest.raises(SystemExit) as exc:
        cli.main(["inventory", "--file", str(path)])
    assert exc.value.code == 1
    assert "cannot read" in capsys.readouterr().err


def test_inventory_directory_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["inventory", "--file", str(tmp_path)])
    assert exc.value.code == 1
    assert "not a regular file" in capsys.readouterr().err
