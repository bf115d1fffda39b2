# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client, new_web_metric_http_client
from .headers import build_request_headers, header_value, parse_header_line, set_header
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import validate_metric_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "build_request_headers",
    "create_default_http_client",
    "header_value",
    "new_web_metric_http_client",
    "parse_header_line",
    "set_header",
    "validate_metric_url",
]
