# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
metricprobe package entrypoint.

This package fetches a JSON document from a metric endpoint, extracts a single
value with JSONPath, infers its primitive type and classifies it against
success/failure conditions into a Successful, Failed, Inconclusive or Error
measurement. HTTP behavior is abstracted behind an injectable client
interface, the condition evaluator is an injectable callable, and domain
objects are modeled with typed dataclasses.
"""

from .config import HttpSettings, load_http_settings
from .errors import ConditionError, ParseError, PathError, ProbeError, StatusError, TransportError, URLError
from .evaluation import classify, evaluate_condition, resolve_phase
from .extraction import coerce, compile_path, extract
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
    new_web_metric_http_client,
)
from .log import setup_logging
from .models import AnalysisContext, ExtractedValue, Measurement, MetricSpec, Phase, PrimitiveKind
from .providers import MetricProvider, WebMetricProvider, new_provider, new_web_metric_provider, register_provider
from .runtime import MetricProbe
from .version import __version__

__all__ = [
    "AnalysisContext",
    "ConditionError",
    "ExtractedValue",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "Measurement",
    "MetricProbe",
    "MetricProvider",
    "MetricSpec",
    "ParseError",
    "PathError",
    "Phase",
    "PrimitiveKind",
    "ProbeError",
    "StatusError",
    "StubHttpClient",
    "TransportError",
    "URLError",
    "WebMetricProvider",
    "classify",
    "coerce",
    "compile_path",
    "create_default_http_client",
    "evaluate_condition",
    "extract",
    "load_http_settings",
    "new_provider",
    "new_web_metric_http_client",
    "new_web_metric_provider",
    "register_provider",
    "resolve_phase",
    "setup_logging",
    "__version__",
]
