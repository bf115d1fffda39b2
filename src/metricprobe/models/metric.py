# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Metric definition model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..config import resolve_timeout

WEB_METRIC_PROVIDER = "WebMetric"

HeaderPairs = tuple[tuple[str, str], ...]


def _first(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _header_pairs(raw: Any) -> HeaderPairs:
    if not raw:
        return ()
    if isinstance(raw, Mapping):
        return tuple((str(k), "" if v is None else str(v)) for k, v in raw.items())
    pairs: list[tuple[str, str]] = []
    for item in raw:
        if isinstance(item, Mapping):
            key, value = item.get("key"), item.get("value")
        else:
            key, value = item
        if key is None:
            continue
        pairs.append((str(key), "" if value is None else str(value)))
    return tuple(pairs)


@dataclass(frozen=True)
class MetricSpec:
    """
    Immutable description of one web metric.

    `headers` is an ordered sequence of pairs; later pairs overwrite earlier
    ones with the same (case-insensitive) name when the request is built.
    An empty condition string means "not configured".
    """

    url: str
    json_path: str
    name: str = ""
    headers: HeaderPairs = ()
    timeout: float = 0
    success_condition: str = ""
    failure_condition: str = ""
    provider: str = WEB_METRIC_PROVIDER

    @property
    def resolved_timeout(self) -> float:
        return resolve_timeout(self.timeout)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MetricSpec:
        """
        Build a MetricSpec from a flat mapping or the nested controller shape.

        The nested shape keeps conditions at the top level and the endpoint under
        `provider.web`. Both camelCase and snake_case keys are accepted.
        """
        if not isinstance(data, Mapping):
            raise ValueError("metric definition must be a mapping")

        provider_kind = WEB_METRIC_PROVIDER
        endpoint: Mapping[str, Any] = data
        provider = data.get("provider")
        if isinstance(provider, Mapping):
            web = provider.get("web")
            if not isinstance(web, Mapping):
                kinds = ", ".join(sorted(str(k) for k in provider)) or "none"
                raise ValueError(f"metric provider must define 'web' (got: {kinds})")
            endpoint = web
        elif isinstance(provider, str) and provider:
            provider_kind = provider

        url = _first(endpoint, "url")
        json_path = _first(endpoint, "jsonPath", "json_path", "jsonpath")
        if not url:
            raise ValueError("metric definition is missing 'url'")
        if not json_path:
            raise ValueError("metric definition is missing 'jsonPath'")

        raw_timeout = _first(endpoint, "timeoutSeconds", "timeout", default=0)
        try:
            timeout = float(raw_timeout)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid timeout {raw_timeout!r}") from exc

        return cls(
            url=str(url),
            json_path=str(json_path),
            name=str(_first(data, "name", default="")),
            headers=_header_pairs(_first(endpoint, "headers")),
            timeout=timeout,
            success_condition=str(_first(data, "successCondition", "success_condition", default="")),
            failure_condition=str(_first(data, "failureCondition", "failure_condition", default="")),
            provider=provider_kind,
        )
