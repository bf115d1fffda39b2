# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Provider registry keyed by provider-kind tag."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models import MetricSpec
from .base import MetricProvider
from .web import WebMetricProvider, new_web_metric_provider

ProviderFactory = Callable[..., MetricProvider]

PROVIDERS: dict[str, ProviderFactory] = {
    WebMetricProvider.provider_type: new_web_metric_provider,
}


def register_provider(kind: str, factory: ProviderFactory) -> None:
    """Register `factory(metric, **options)` for metrics whose `provider` equals `kind`."""
    if not kind:
        raise ValueError("provider kind must be non-empty")
    PROVIDERS[kind] = factory


def new_provider(metric: MetricSpec, **options: Any) -> MetricProvider:
    """
    Build the provider for `metric`.

    Raises ValueError for an unregistered kind; factory errors (such as an
    invalid JSONPath) propagate since they are fatal to provider setup.
    """
    factory = PROVIDERS.get(metric.provider)
    if factory is None:
        known = ", ".join(sorted(PROVIDERS)) or "none"
        raise ValueError(f"unknown metric provider {metric.provider!r} (known: {known})")
    return factory(metric, **options)


__all__ = ["PROVIDERS", "ProviderFactory", "new_provider", "register_provider"]
