# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Primitive inference for extracted values.

Conversion is attempted as int64, then float64, then bool, and finally the raw
string is returned. Integers must never come back as floats: condition
expressions can depend on the type.
"""

from __future__ import annotations

import math
import re

from ..models.value import ExtractedValue, Primitive

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INF_WORDS = {"inf", "infinity"}
_TRUE_WORDS = {"1", "t", "true"}
_FALSE_WORDS = {"0", "f", "false"}


def parse_int64(raw: str) -> int | None:
    if not _INT_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float64(raw: str) -> float | None:
    if not raw or not raw.isascii() or "_" in raw or raw != raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    # float() saturates out-of-range literals to infinity; treat that as a range error.
    if math.isinf(value) and raw.lstrip("+-").lower() not in _INF_WORDS:
        return None
    return value


def parse_bool(raw: str) -> bool | None:
    lowered = raw.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    return None


def coerce(raw: str) -> Primitive:
    """Return the most specific primitive for `raw`. Never raises."""
    raw = "" if raw is None else str(raw)

    as_int = parse_int64(raw)
    if as_int is not None:
        return as_int

    as_float = parse_float64(raw)
    if as_float is not None:
        return as_float

    as_bool = parse_bool(raw)
    if as_bool is not None:
        return as_bool

    return raw


def coerce_value(raw: str) -> ExtractedValue:
    return ExtractedValue(raw=raw, value=coerce(raw))


__all__ = ["INT64_MAX", "INT64_MIN", "coerce", "coerce_value", "parse_bool", "parse_float64", "parse_int64"]
