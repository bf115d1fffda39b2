# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for metric endpoints."""

from __future__ import annotations

from urllib.parse import urlsplit

from ..errors import URLError

ALLOWED_SCHEMES = ("http", "https")


def validate_metric_url(url: str | None) -> str:
    """
    Return `url` stripped of surrounding whitespace if it can be fetched with GET.

    Raises URLError for empty input, unparseable input, a scheme other than
    http/https, or a missing host.
    """
    raw = str(url or "").strip()
    if not raw:
        raise URLError("metric URL is empty")
    try:
        parts = urlsplit(raw)
        # Accessing .port validates the port component.
        parts.port  # noqa: B018
    except ValueError as exc:
        raise URLError(f"could not parse URL {raw!r}: {exc}") from exc
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise URLError(f"unsupported URL scheme {parts.scheme!r} in {raw!r}")
    if not parts.hostname:
        raise URLError(f"URL {raw!r} has no host")
    return raw


__all__ = ["ALLOWED_SCHEMES", "validate_metric_url"]
