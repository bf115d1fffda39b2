# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import math

import pytest

from metricprobe.extraction import coerce, coerce_value, compile_path, extract, render_value
from metricprobe.extraction.coerce import INT64_MAX, INT64_MIN
from metricprobe.models import PrimitiveKind


def test_coerce_examples_follow_precedence():
    assert coerce("42") == 42 and type(coerce("42")) is int
    assert coerce("42.5") == 42.5 and type(coerce("42.5")) is float
    assert coerce("true") is True
    assert coerce("abc") == "abc"


@pytest.mark.parametrize(
    "raw, expected, kind",
    [
        ("0", 0, PrimitiveKind.INT64),
        ("1", 1, PrimitiveKind.INT64),
        ("-7", -7, PrimitiveKind.INT64),
        ("+12", 12, PrimitiveKind.INT64),
        (str(INT64_MAX), INT64_MAX, PrimitiveKind.INT64),
        (str(INT64_MIN), INT64_MIN, PrimitiveKind.INT64),
        ("1e3", 1000.0, PrimitiveKind.FLOAT64),
        (".5", 0.5, PrimitiveKind.FLOAT64),
        ("-0.25", -0.25, PrimitiveKind.FLOAT64),
        ("TRUE", True, PrimitiveKind.BOOL),
        ("True", True, PrimitiveKind.BOOL),
        ("t", True, PrimitiveKind.BOOL),
        ("False", False, PrimitiveKind.BOOL),
        ("F", False, PrimitiveKind.BOOL),
        ("", "", PrimitiveKind.STRING),
        ("yes", "yes", PrimitiveKind.STRING),
    ],
)
def test_coerce_kinds(raw, expected, kind):
    extracted = coerce_value(raw)
    assert extracted.value == expected
    assert extracted.kind is kind
    assert extracted.raw == raw


def test_integer_strings_never_become_floats_or_bools():
    for raw in ("1", "0", "42", "-1"):
        assert coerce_value(raw).kind is PrimitiveKind.INT64


def test_int64_overflow_falls_through_to_float():
    value = coerce(str(INT64_MAX + 1))
    assert isinstance(value, float)


def test_float_overflow_falls_through_to_string():
    assert coerce("1e400") == "1e400"


def test_special_float_words():
    assert math.isinf(coerce("inf"))
    assert coerce("-Infinity") == float("-inf")
    assert math.isnan(coerce("NaN"))


@pytest.mark.parametrize("raw", [" 42", "42 ", "1_000", "4 2", "0x10", "12abc"])
def test_non_canonical_numbers_stay_strings(raw):
    assert coerce(raw) == raw


@pytest.mark.parametrize(
    "body, text, kind",
    [
        (b'{"v": 7}', "7", PrimitiveKind.INT64),
        (b'{"v": 42.5}', "42.5", PrimitiveKind.FLOAT64),
        (b'{"v": true}', "true", PrimitiveKind.BOOL),
        (b'{"v": false}', "false", PrimitiveKind.BOOL),
        (b'{"v": "abc"}', "abc", PrimitiveKind.STRING),
    ],
)
def test_extracted_text_survives_coercion_and_rendering(body, text, kind):
    raw = extract(body, compile_path("$.v"))
    assert raw == text
    extracted = coerce_value(raw)
    assert extracted.kind is kind
    assert render_value(extracted.value) == text


@pytest.mark.parametrize("raw", ["٤٢", "４２", "1.٥"])
def test_non_ascii_digits_stay_strings(raw):
    assert coerce_value(raw).kind is PrimitiveKind.STRING
