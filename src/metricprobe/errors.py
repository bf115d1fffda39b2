# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for a single probe call.

Every failure inside a probe run is raised as one of these exceptions and
collapsed into an Error-phase Measurement at the provider boundary. The
category string survives in the measurement message and metadata.
"""

from __future__ import annotations


class ProbeError(Exception):
    """Base class for probe failures."""

    category: str = "ProbeError"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        """Return a `<category>: <detail>` diagnostic string."""
        return f"{self.category}: {self.message}" if self.message else self.category


class URLError(ProbeError):
    """The metric URL cannot be used for a GET request."""

    category = "URLError"


class TransportError(ProbeError):
    """Network failure or timeout before a status code was received."""

    category = "TransportError"


class StatusError(ProbeError):
    """The endpoint answered with a status code that is not accepted."""

    category = "StatusError"

    def __init__(self, message: str = "", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ProbeError):
    """The response body is not a JSON document."""

    category = "ParseError"


class PathError(ProbeError):
    """The JSONPath expression is invalid or does not resolve against the document."""

    category = "PathError"


class ConditionError(ProbeError):
    """A success or failure condition could not be evaluated to a boolean."""

    category = "ConditionError"


__all__ = [
    "ConditionError",
    "ParseError",
    "PathError",
    "ProbeError",
    "StatusError",
    "TransportError",
    "URLError",
]
