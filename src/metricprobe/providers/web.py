# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Web metric provider.

Fetches a JSON document with a single GET, extracts one value with a
precompiled JSONPath, and classifies it against the metric's success and
failure conditions.

Known caveat: any 2xx status passes the transport gate, but a status other
than exactly 200 is still reported as an Error once the body has been parsed.
"""

from __future__ import annotations

import logging

from ..config import HttpSettings
from ..errors import ConditionError, ParseError, PathError, ProbeError, StatusError, TransportError, URLError
from ..evaluation import ConditionEvaluator, evaluate_condition, resolve_phase
from ..extraction import CompiledPath, coerce_value, compile_path, extract
from ..http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    build_request_headers,
    new_web_metric_http_client,
    validate_metric_url,
)
from ..models import (
    WEB_METRIC_PROVIDER,
    AnalysisContext,
    Measurement,
    MetricSpec,
    Phase,
    finish_measurement,
    mark_measurement_error,
    start_measurement,
)
from .base import MetricProvider

logger = logging.getLogger(__name__)

LoggerLike = logging.Logger | logging.LoggerAdapter


class WebMetricProvider(MetricProvider):
    """Runs web metrics. Holds only immutable state, so one instance may serve concurrent calls."""

    provider_type = WEB_METRIC_PROVIDER

    def __init__(
        self,
        http_client: HttpClient,
        json_path: CompiledPath,
        *,
        evaluator: ConditionEvaluator | None = None,
        log: LoggerLike | None = None,
    ):
        self.http_client = http_client
        self.json_path = json_path
        self.evaluator = evaluator or evaluate_condition
        self.log = log or logger

    def run(self, context: AnalysisContext, metric: MetricSpec) -> Measurement:
        measurement = start_measurement()

        try:
            request = self._build_request(metric)
        except URLError as exc:
            return self._error(context, metric, measurement, exc)

        response = self._send(request)
        if not response.ok:
            return self._error(context, metric, measurement, TransportError(response.error_message or "request failed"))
        if not response.is_success_status:
            return self._error(
                context,
                metric,
                measurement,
                StatusError(f"received status code {response.status_code}", response.status_code),
                response,
            )

        try:
            raw_value = extract(response.content, self.json_path)
        except (ParseError, PathError) as exc:
            return self._error(context, metric, measurement, exc, response)

        if response.status_code != 200:
            return self._error(
                context,
                metric,
                measurement,
                StatusError(f"unexpected status code {response.status_code}, expected 200", response.status_code),
                response,
            )

        extracted = coerce_value(raw_value)
        metadata = {"status_code": response.status_code, "value_kind": extracted.kind.value}

        try:
            phase = resolve_phase(
                extracted.value,
                metric.success_condition,
                metric.failure_condition,
                self.evaluator,
            )
        except ConditionError as exc:
            self.log.warning("Metric %s (%s): %s", metric.name or metric.url, context.label, exc.describe())
            metadata["error_category"] = exc.category
            return finish_measurement(measurement, raw_value, Phase.ERROR, message=exc.describe(), metadata=metadata)

        self.log.debug(
            "Metric %s (%s): value=%r kind=%s phase=%s",
            metric.name or metric.url,
            context.label,
            raw_value,
            extracted.kind.value,
            phase.value,
        )
        return finish_measurement(measurement, raw_value, phase, metadata=metadata)

    def resume(self, context: AnalysisContext, metric: MetricSpec, measurement: Measurement) -> Measurement:
        self.log.warning("WebMetric provider should not execute the Resume method")
        return measurement

    def terminate(self, context: AnalysisContext, metric: MetricSpec, measurement: Measurement) -> Measurement:
        self.log.warning("WebMetric provider should not execute the Terminate method")
        return measurement

    def garbage_collect(self, context: AnalysisContext, metric: MetricSpec, limit: int) -> None:
        return None

    def _build_request(self, metric: MetricSpec) -> HttpRequest:
        return HttpRequest(
            url=validate_metric_url(metric.url),
            method="GET",
            headers=build_request_headers(metric.headers),
            timeout=metric.resolved_timeout,
        )

    def _send(self, request: HttpRequest) -> HttpResponse:
        try:
            return self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(ok=False, error_message=str(exc) or type(exc).__name__, error_type=type(exc).__name__)

    def _error(
        self,
        context: AnalysisContext,
        metric: MetricSpec,
        measurement: Measurement,
        error: ProbeError,
        response: HttpResponse | None = None,
    ) -> Measurement:
        self.log.debug("Metric %s (%s) errored: %s", metric.name or metric.url, context.label, error.describe())
        metadata: dict[str, int] = {}
        if response is not None and response.status_code is not None:
            metadata["status_code"] = response.status_code
        return mark_measurement_error(measurement, error, metadata=metadata)


def new_web_metric_provider(
    metric: MetricSpec,
    *,
    http_client: HttpClient | None = None,
    settings: HttpSettings | None = None,
    evaluator: ConditionEvaluator | None = None,
    log: LoggerLike | None = None,
) -> WebMetricProvider:
    """
    Build a provider for `metric`, compiling its JSONPath up front.

    Raises PathError when the expression does not compile. Without an explicit
    client, an httpx client bound to the metric timeout is created.
    """
    json_path = compile_path(metric.json_path)
    client = http_client or new_web_metric_http_client(metric, settings)
    return WebMetricProvider(client, json_path, evaluator=evaluator, log=log)


__all__ = ["WebMetricProvider", "new_web_metric_provider"]
