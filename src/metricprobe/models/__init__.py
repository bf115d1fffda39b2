# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for metricprobe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .analysis import AnalysisContext
from .measurement import Measurement, Phase, finish_measurement, mark_measurement_error, start_measurement
from .metric import WEB_METRIC_PROVIDER, MetricSpec
from .value import ExtractedValue, Primitive, PrimitiveKind, kind_of

__all__ = [
    "AnalysisContext",
    "ExtractedValue",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "Measurement",
    "MetricSpec",
    "Phase",
    "Primitive",
    "PrimitiveKind",
    "WEB_METRIC_PROVIDER",
    "finish_measurement",
    "kind_of",
    "mark_measurement_error",
    "start_measurement",
]
