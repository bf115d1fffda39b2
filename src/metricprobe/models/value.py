# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Extracted value models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Primitive = int | float | bool | str


class PrimitiveKind(str, Enum):
    INT64 = "Int64"
    FLOAT64 = "Float64"
    BOOL = "Bool"
    STRING = "String"


def kind_of(value: Primitive) -> PrimitiveKind:
    # bool is a subclass of int, check it first.
    if isinstance(value, bool):
        return PrimitiveKind.BOOL
    if isinstance(value, int):
        return PrimitiveKind.INT64
    if isinstance(value, float):
        return PrimitiveKind.FLOAT64
    return PrimitiveKind.STRING


@dataclass(frozen=True)
class ExtractedValue:
    raw: str
    value: Primitive

    @property
    def kind(self) -> PrimitiveKind:
        return kind_of(self.value)
