"""Environment driven switches.

Values are read on every call so tests can monkeypatch the environment.
"""
from __future__ import annotations

import os

__all__ = ["reject_separator_in_values", "metrics_enabled"]


def _env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on", "y"}


def reject_separator_in_values() -> bool:
    """Refuse field values containing ``|`` (the format has no escaping)."""
    return _env_bool("QR_PAYMENT_REJECT_SEPARATOR", "1")


def metrics_enabled() -> bool:
    return _env_bool("QR_PAYMENT_METRICS", "1")
