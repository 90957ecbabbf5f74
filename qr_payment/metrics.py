"""Prometheus counters for encode / parse activity.

Nothing here starts an HTTP server; embedders expose the default registry
themselves (e.g. ``prometheus_client.make_asgi_app``).
"""
from __future__ import annotations

from typing import Any, Dict, Tuple, Type

from prometheus_client import Counter

from . import config

__all__ = [
    "get_metric",
    "payments_encoded_total",
    "payments_parsed_total",
    "payment_parse_failures_total",
    "record_encoded",
    "record_parsed",
    "record_parse_failure",
]

# Registration helper (avoid duplicate collectors on re-import)
_METRICS: Dict[Tuple[Type[Any], str], Any] = {}


def get_metric(cls: Type[Any], name: str, *args, **kwargs):
    key = (cls, name)
    if key in _METRICS:
        return _METRICS[key]
    metric = cls(name, *args, **kwargs)
    _METRICS[key] = metric
    return metric


payments_encoded_total = get_metric(
    Counter,
    "qr_payments_encoded_total",
    "Payments serialized into an ST00012 line",
)

payments_parsed_total = get_metric(
    Counter,
    "qr_payments_parsed_total",
    "ST00012 lines parsed into a payment",
)

payment_parse_failures_total = get_metric(
    Counter,
    "qr_payment_parse_failures_total",
    "ST00012 lines rejected by the parser",
    ["reason"],
)


def record_encoded() -> None:
    if config.metrics_enabled():
        payments_encoded_total.inc()


def record_parsed() -> None:
    if config.metrics_enabled():
        payments_parsed_total.inc()


def record_parse_failure(reason: str) -> None:
    if config.metrics_enabled():
        payment_parse_failures_total.labels(reason=reason).inc()
