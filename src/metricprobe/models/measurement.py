# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Measurement domain models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..errors import ProbeError


class Phase(str, Enum):
    SUCCESSFUL = "Successful"
    FAILED = "Failed"
    INCONCLUSIVE = "Inconclusive"
    ERROR = "Error"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Measurement:
    """
    Result of one probe call.

    `finished_at` stays None when the call did not complete normally (URL,
    transport, status or extraction failure).
    """

    started_at: datetime
    phase: Phase | None = None
    value: str = ""
    finished_at: datetime | None = None
    message: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value if self.phase else None,
            "value": self.value,
            "message": self.message,
            "startedAt": self.started_at.isoformat(),
            "finishedAt": self.finished_at.isoformat() if self.finished_at else None,
            "metadata": dict(self.metadata),
        }


def start_measurement() -> Measurement:
    return Measurement(started_at=utc_now())


def mark_measurement_error(
    measurement: Measurement,
    error: ProbeError | Exception | str,
    *,
    metadata: dict[str, Any] | None = None,
) -> Measurement:
    """Return a copy of `measurement` in the Error phase carrying a diagnostic message."""
    merged = dict(measurement.metadata)
    if metadata:
        merged.update(metadata)
    if isinstance(error, ProbeError):
        message = error.describe()
        merged["error_category"] = error.category
    elif isinstance(error, Exception):
        message = str(error) or type(error).__name__
    else:
        message = str(error)
    return replace(measurement, phase=Phase.ERROR, message=message, metadata=merged)


def finish_measurement(
    measurement: Measurement,
    value: str,
    phase: Phase,
    *,
    message: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> Measurement:
    """Return a completed copy of `measurement` stamped with the current time."""
    merged = dict(measurement.metadata)
    if metadata:
        merged.update(metadata)
    return replace(
        measurement,
        value=value,
        phase=phase,
        message=message,
        finished_at=utc_now(),
        metadata=merged,
    )
