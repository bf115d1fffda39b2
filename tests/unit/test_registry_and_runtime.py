# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from metricprobe.http import StubHttpClient
from metricprobe.models import AnalysisContext, Measurement, MetricSpec, Phase, start_measurement
from metricprobe.providers import PROVIDERS, MetricProvider, WebMetricProvider, new_provider, register_provider
from metricprobe.runtime import MetricProbe

URL = "http://metrics.local/api"


class ConstantProvider(MetricProvider):
    provider_type = "Constant"

    def __init__(self, phase):
        self.phase = phase

    def run(self, context, metric):
        return Measurement(started_at=start_measurement().started_at, phase=self.phase, value="1")

    def resume(self, context, metric, measurement):
        return measurement

    def terminate(self, context, metric, measurement):
        return measurement

    def garbage_collect(self, context, metric, limit):
        return None


def test_new_provider_selects_web_metric():
    provider = new_provider(MetricSpec(url=URL, json_path="$.x"), http_client=StubHttpClient())
    assert isinstance(provider, WebMetricProvider)
    assert provider.type() == "WebMetric"


def test_new_provider_rejects_unknown_kind():
    with pytest.raises(ValueError, match="unknown metric provider 'Datadog'"):
        new_provider(MetricSpec(url=URL, json_path="$.x", provider="Datadog"))


def test_register_provider_dispatches_by_kind(monkeypatch):
    monkeypatch.setitem(PROVIDERS, "Constant", lambda metric, **options: ConstantProvider(Phase.INCONCLUSIVE))
    provider = new_provider(MetricSpec(url=URL, json_path="$.x", provider="Constant"), http_client=None)
    assert provider.type() == "Constant"
    assert provider.run(AnalysisContext(), MetricSpec(url=URL, json_path="$.x")).phase is Phase.INCONCLUSIVE


def test_register_provider_requires_kind():
    with pytest.raises(ValueError):
        register_provider("", lambda metric, **options: ConstantProvider(Phase.FAILED))


def test_metric_probe_runs_with_shared_client_and_closes_it():
    client = StubHttpClient()
    client.add_json(URL, '{"count": 7}')
    metric = MetricSpec(url=URL, json_path="$.count", success_condition="result >= 5")

    with MetricProbe(http_client=client) as probe:
        measurement = probe.run(metric, AnalysisContext(name="run-1"))
        assert measurement.phase is Phase.SUCCESSFUL
        assert measurement.value == "7"
        assert client.closed is False

    assert client.closed is True


def test_metric_probe_closes_per_run_clients(monkeypatch):
    created = []

    def fake_client_factory(metric, settings=None):
        client = StubHttpClient()
        client.add_json(metric.url, '{"up": true}')
        created.append((client, settings))
        return client

    monkeypatch.setattr("metricprobe.providers.web.new_web_metric_http_client", fake_client_factory)
    probe = MetricProbe()
    measurement = probe.run(MetricSpec(url=URL, json_path="$.up", success_condition="result == true"))

    assert measurement.phase is Phase.SUCCESSFUL
    assert measurement.metadata["value_kind"] == "Bool"
    assert len(created) == 1
    client, settings = created[0]
    assert client.closed is True
    assert settings is probe.http_settings


def test_metric_probe_uses_injected_evaluator():
    client = StubHttpClient()
    client.add_json(URL, '{"count": 7}')
    probe = MetricProbe(http_client=client, evaluator=lambda value, expression: value > 100)
    measurement = probe.run(MetricSpec(url=URL, json_path="$.count", success_condition="ignored"))
    assert measurement.phase is Phase.FAILED
