# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
JSON body extraction.

Paths are compiled once with jsonpath-ng (extended grammar, so filter
expressions work) and evaluated per response. Brace-wrapped template paths
such as `{.status.count}` are accepted and unwrapped before compilation.

A path that matches several nodes renders every match joined by a single
space. Callers that need one scalar should write a path that selects one.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any

from jsonpath_ng.ext import parse as parse_jsonpath

from ..errors import ParseError, PathError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledPath:
    expression: str
    normalized: str
    _compiled: Any

    def find(self, document: Any) -> list[Any]:
        return [match.value for match in self._compiled.find(document)]


def normalize_path(expression: str) -> str:
    path = str(expression or "").strip()
    if path.startswith("{") and path.endswith("}"):
        path = path[1:-1].strip()
    if path.startswith(".") or path.startswith("["):
        path = f"${path}"
    return path


def compile_path(expression: str) -> CompiledPath:
    """Compile a JSONPath expression. Raises PathError when it is empty or invalid."""
    normalized = normalize_path(expression)
    if not normalized:
        raise PathError("JSONPath expression is empty")
    try:
        compiled = parse_jsonpath(normalized)
    except Exception as exc:  # noqa: BLE001
        raise PathError(f"invalid JSONPath expression {expression!r}: {exc}") from exc
    return CompiledPath(expression=str(expression), normalized=normalized, _compiled=compiled)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} is out of range")
    return value


def parse_json_body(body: bytes | str | None) -> Any:
    """Decode a response body as JSON. Raises ParseError on empty or malformed input."""
    if not body:
        raise ParseError("response body is empty")
    try:
        return json.loads(body, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except RecursionError as exc:
        raise ParseError("could not parse JSON body: nesting is too deep") from exc
    except ValueError as exc:
        raise ParseError(f"could not parse JSON body: {exc}") from exc


def render_value(value: Any) -> str:
    """Render a matched JSON node as text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def extract(body: bytes | str | None, path: CompiledPath) -> str:
    """
    Parse `body` and evaluate `path` against it.

    Raises ParseError when the body is not JSON and PathError when the path
    does not resolve.
    """
    document = parse_json_body(body)
    try:
        matches = path.find(document)
    except Exception as exc:  # noqa: BLE001
        raise PathError(f"could not evaluate {path.expression!r}: {exc}") from exc
    if not matches:
        raise PathError(f"{path.expression!r} not found in response body")
    if len(matches) > 1:
        logger.debug("JSONPath %s matched %d nodes; joining them", path.expression, len(matches))
    try:
        return " ".join(render_value(match) for match in matches)
    except RecursionError as exc:
        raise ParseError(f"could not render {path.expression!r}: nesting is too deep") from exc


__all__ = ["CompiledPath", "compile_path", "extract", "normalize_path", "parse_json_body", "render_value"]
