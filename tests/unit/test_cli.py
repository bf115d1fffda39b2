# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from metricprobe.cli.main import _truncate_text_bytes, build_metric, build_parser, main
from metricprobe.http import StubHttpClient
from metricprobe.runtime import MetricProbe

URL = "http://metrics.local/api"


@pytest.fixture
def stub_client(monkeypatch):
    client = StubHttpClient()

    class StubMetricProbe(MetricProbe):
        def __init__(self, settings=None):
            super().__init__(http_client=client, settings=settings)

    monkeypatch.setattr("metricprobe.cli.main.MetricProbe", StubMetricProbe)
    return client


def test_build_parser_defaults():
    args = build_parser().parse_args([URL, "--jsonpath", "$.count"])
    assert args.url == URL
    assert args.header == []
    assert args.json is False
    metric = build_metric(args)
    assert metric.json_path == "$.count"
    assert metric.success_condition == ""


def test_main_json_output_successful(stub_client, capsys):
    stub_client.add_json(URL, '{"count": 7}')
    code = main([URL, "--jsonpath", "$.count", "--success", "result >= 5", "-H", "X-Token: abc", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["phase"] == "Successful"
    assert payload["value"] == "7"
    assert payload["finishedAt"] is not None
    assert stub_client.requests[0].headers == {"X-Token": "abc"}


def test_main_exit_codes_follow_phase(stub_client, capsys):
    stub_client.add_json(URL, '{"count": 2}')
    assert main([URL, "--jsonpath", "$.count", "--success", "result >= 5"]) == 1
    assert main([URL, "--jsonpath", "$.count", "--success", "result > 5", "--failure", "result < 1"]) == 3
    assert main([URL, "--jsonpath", "$.missing"]) == 4
    output = capsys.readouterr().out
    assert "[metricprobe] Phase: Failed" in output
    assert "Phase: Inconclusive" in output
    assert "Message: PathError" in output


def test_main_metric_file_with_overrides(stub_client, tmp_path, capsys):
    stub_client.add_json(URL, '{"data": {"ratio": 0.02}}')
    metric_file = tmp_path / "metric.json"
    metric_file.write_text(
        json.dumps(
            {
                "name": "error-ratio",
                "successCondition": "result < 0.01",
                "provider": {"web": {"url": URL, "jsonPath": "{$.data.ratio}", "headers": [{"key": "Accept", "value": "application/json"}]}},
            }
        )
    )
    assert main(["--metric-file", str(metric_file)]) == 1
    assert main(["--metric-file", str(metric_file), "--success", "result < 0.05"]) == 0
    output = capsys.readouterr().out
    assert "Metric: error-ratio" in output
    assert "Kind: Float64" in output
    assert stub_client.requests[0].headers == {"Accept": "application/json"}


def test_main_requires_jsonpath(stub_client):
    with pytest.raises(SystemExit) as excinfo:
        main([URL])
    assert excinfo.value.code == 2


def test_main_rejects_invalid_jsonpath(stub_client, capsys):
    assert main([URL, "--jsonpath", "$.["]) == 4
    assert "error: PathError" in capsys.readouterr().err


def test_truncate_text_bytes():
    assert _truncate_text_bytes("short", 100) == "short"
    truncated = _truncate_text_bytes("x" * 100, 20)
    assert truncated.endswith("...[truncated]")
    assert len(truncated.encode("utf-8")) <= 20
