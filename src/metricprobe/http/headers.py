# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110). Metric headers arrive
as ordered (key, value) pairs; setting a key replaces any earlier entry that
matches it case-insensitively, so the last pair for a name wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set `name` on `headers`, dropping any existing key that differs only by case."""
    lower = name.lower()
    for existing in [key for key in headers if key.lower() == lower]:
        del headers[existing]
    headers[name] = value


def build_request_headers(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Apply header pairs in order with per-name set semantics."""
    headers: dict[str, str] = {}
    for name, value in pairs:
        if not name:
            continue
        set_header(headers, str(name), "" if value is None else str(value))
    return headers


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default
    lower = name.lower()
    for key, value in headers.items():
        if key is not None and str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


def parse_header_line(line: str) -> tuple[str, str]:
    """
    Split a `Name: value` string into a header pair.

    Raises ValueError when the name is missing.
    """
    name, sep, value = str(line).partition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"invalid header {line!r}, expected 'Name: value'")
    return name, value.strip()


__all__ = ["build_request_headers", "header_value", "parse_header_line", "set_header"]
