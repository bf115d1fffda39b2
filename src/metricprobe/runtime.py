# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade for running metric probes."""

from __future__ import annotations

from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .evaluation import ConditionEvaluator, evaluate_condition
from .http.client import HttpClient
from .models import AnalysisContext, Measurement, MetricSpec
from .providers import MetricProvider, new_provider


class MetricProbe:
    """
    Convenience wrapper that wires settings, an optional shared HTTP client and
    the condition evaluator into per-metric providers.

    Without a shared client every run gets its own client bound to the metric's
    timeout, closed once the run completes.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        settings: HttpSettings | None = None,
        evaluator: ConditionEvaluator | None = None,
    ):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client
        self.evaluator = evaluator or evaluate_condition

    def provider_for(self, metric: MetricSpec) -> MetricProvider:
        return new_provider(
            metric,
            http_client=self.http_client,
            settings=self.http_settings,
            evaluator=self.evaluator,
        )

    def run(self, metric: MetricSpec, context: AnalysisContext | None = None) -> Measurement:
        provider = self.provider_for(metric)
        try:
            return provider.run(context or AnalysisContext(), metric)
        finally:
            if self.http_client is None:
                owned = getattr(provider, "http_client", None)
                with suppress(Exception):
                    if hasattr(owned, "close"):
                        owned.close()

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> MetricProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
