# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Provider base class shared by every metric provider kind."""

from abc import ABC, abstractmethod

from ..models import AnalysisContext, Measurement, MetricSpec


class MetricProvider(ABC):
    """
    Contract the analysis controller dispatches against.

    `run` takes one measurement. Providers that measure asynchronously use
    `resume` to poll and `terminate` to cancel; `garbage_collect` prunes any
    external state down to `limit` entries.
    """

    provider_type: str = "base"

    def type(self) -> str:
        return self.provider_type

    @abstractmethod
    def run(self, context: AnalysisContext, metric: MetricSpec) -> Measurement: ...

    @abstractmethod
    def resume(self, context: AnalysisContext, metric: MetricSpec, measurement: Measurement) -> Measurement: ...

    @abstractmethod
    def terminate(self, context: AnalysisContext, metric: MetricSpec, measurement: Measurement) -> Measurement: ...

    @abstractmethod
    def garbage_collect(self, context: AnalysisContext, metric: MetricSpec, limit: int) -> None: ...

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(type={self.provider_type!r})"
