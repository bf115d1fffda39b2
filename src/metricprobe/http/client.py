# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factories."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Protocol

from ..config import HttpSettings, load_http_settings, resolve_timeout
from .models import HttpRequest, HttpResponse

if TYPE_CHECKING:
    from ..models.metric import MetricSpec


class HttpClient(Protocol):
    """Minimal protocol for issuing HTTP requests."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """Factory for the default httpx-backed client."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())


def new_web_metric_http_client(metric: MetricSpec, settings: HttpSettings | None = None) -> HttpClient:
    """Build an httpx-backed client bound to the metric's timeout (10s when unset)."""
    base = settings or load_http_settings()
    return create_default_http_client(replace(base, timeout=resolve_timeout(metric.timeout)))
