# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Metric providers."""

from .base import MetricProvider
from .registry import PROVIDERS, new_provider, register_provider
from .web import WebMetricProvider, new_web_metric_provider

__all__ = [
    "PROVIDERS",
    "MetricProvider",
    "WebMetricProvider",
    "new_provider",
    "new_web_metric_provider",
    "register_provider",
]
