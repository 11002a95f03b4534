"""Observability: structured dispatch logs and an in-process metrics counter."""

from __future__ import annotations

import logging
import threading
from typing import Any

from .domain.dispatch_policy import InterstitialDecision

_LOGGER = logging.getLogger("ad_dispatch")

# decisions[outcome] = count, forwards[call] = count
METRICS: dict[str, dict[str, int]] = {"decisions": {}, "forwards": {}}
_METRICS_LOCK = threading.Lock()


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the package logger at ``level``."""
    if not _LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        _LOGGER.addHandler(handler)
    _LOGGER.setLevel(level.upper())


def log_decision(decision: InterstitialDecision, interval: int) -> None:
    """Emit an interstitial decision and count it by outcome."""
    payload = decision.to_dict()
    payload["interval"] = interval
    _LOGGER.info("interstitial_decision", extra=payload)
    _bump("decisions", payload["outcome"])


def log_forward(call: str, extra: dict[str, Any] | None = None) -> None:
    """Emit a pass-through call to a provider and count it."""
    payload: dict[str, Any] = {"call": call}
    if extra:
        payload.update(extra)
    _LOGGER.debug(call, extra=payload)
    _bump("forwards", call)


def metrics_snapshot() -> dict[str, dict[str, int]]:
    with _METRICS_LOCK:
        return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    with _METRICS_LOCK:
        for counts in METRICS.values():
            counts.clear()


def _bump(kind: str, key: str) -> None:
    with _METRICS_LOCK:
        counts = METRICS[kind]
        counts[key] = counts.get(key, 0) + 1
