# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Value extraction: JSONPath evaluation and primitive inference."""

from .coerce import coerce, coerce_value
from .jsonpath import CompiledPath, compile_path, extract, parse_json_body, render_value

__all__ = [
    "CompiledPath",
    "coerce",
    "coerce_value",
    "compile_path",
    "extract",
    "parse_json_body",
    "render_value",
]
