# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Analysis context handed to providers by the calling controller."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AnalysisContext:
    """Identifies the analysis run a measurement belongs to. Providers only read it for logging."""

    name: str | None = None
    namespace: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        if self.namespace and self.name:
            return f"{self.namespace}/{self.name}"
        return self.name or "-"
