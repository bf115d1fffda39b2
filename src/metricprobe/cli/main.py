# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""metricprobe CLI."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import ProbeError
from ..http import parse_header_line
from ..log import setup_logging
from ..models import Measurement, MetricSpec, Phase
from ..runtime import MetricProbe

CLI_TEXT_TRUNCATION_BYTES = 4096
EXIT_CODES: dict[Phase | None, int] = {
    Phase.SUCCESSFUL: 0,
    Phase.FAILED: 1,
    Phase.INCONCLUSIVE: 3,
    Phase.ERROR: 4,
    None: 4,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch a JSON endpoint once and classify the extracted metric value")
    parser.add_argument("url", nargs="?", help="Endpoint to GET (optional with --metric-file)")
    parser.add_argument("--metric-file", help="JSON file holding a metric definition")
    parser.add_argument("--jsonpath", help="JSONPath selecting the value, e.g. '$.data.count'")
    parser.add_argument("--success", default=None, help="Success condition, e.g. 'result >= 5'")
    parser.add_argument("--failure", default=None, help="Failure condition, e.g. 'result > 100'")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        help="Request header as 'Name: value' (repeatable; later values win)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default 10)")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of a human-friendly summary")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: METRICPROBE_LOG_LEVEL or WARNING)")
    return parser


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    suffix_bytes = suffix.encode("utf-8")
    keep = max_bytes - len(suffix_bytes)
    if keep <= 0:
        return suffix_bytes[:max_bytes].decode("utf-8", errors="ignore")
    prefix = raw[:keep].decode("utf-8", errors="ignore")
    return prefix + suffix


def build_metric(args: argparse.Namespace) -> MetricSpec:
    """Merge --metric-file with command-line overrides. Raises ValueError on incomplete input."""
    data: dict[str, Any] = {}
    if args.metric_file:
        with open(args.metric_file, encoding="utf-8") as handle:
            loaded = json.load(handle)
        if not isinstance(loaded, dict):
            raise ValueError(f"{args.metric_file} must contain a JSON object")
        data = loaded

    if data:
        metric = MetricSpec.from_mapping(data)
    else:
        if not args.url:
            raise ValueError("a URL or --metric-file is required")
        if not args.jsonpath:
            raise ValueError("--jsonpath is required without --metric-file")
        metric = MetricSpec(url=args.url, json_path=args.jsonpath)

    overrides: dict[str, Any] = {}
    if args.url:
        overrides["url"] = args.url
    if args.jsonpath:
        overrides["json_path"] = args.jsonpath
    if args.success is not None:
        overrides["success_condition"] = args.success
    if args.failure is not None:
        overrides["failure_condition"] = args.failure
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.header:
        overrides["headers"] = tuple(metric.headers) + tuple(parse_header_line(h) for h in args.header)
    return replace(metric, **overrides) if overrides else metric


def _print_json(measurement: Measurement) -> None:
    json.dump(measurement.to_dict(), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(metric: MetricSpec, measurement: Measurement) -> None:
    phase = measurement.phase.value if measurement.phase else "-"
    print(f"[metricprobe] Phase: {phase}")
    print(f"Metric: {metric.name or metric.url}")
    if measurement.value:
        print(f"Value: {_truncate_text_bytes(measurement.value, CLI_TEXT_TRUNCATION_BYTES)}")
    kind = measurement.metadata.get("value_kind")
    if kind:
        print(f"Kind: {kind}")
    if measurement.message:
        print(f"Message: {measurement.message}")
    if measurement.finished_at is not None:
        elapsed = (measurement.finished_at - measurement.started_at).total_seconds()
        print(f"Elapsed: {elapsed:.3f}s")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        metric = build_metric(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    with MetricProbe(settings=settings) as probe:
        try:
            measurement = probe.run(metric)
        except (ProbeError, ValueError) as exc:
            # Provider setup failures (bad JSONPath, unknown provider kind).
            message = exc.describe() if isinstance(exc, ProbeError) else str(exc)
            print(f"error: {message}", file=sys.stderr)
            return EXIT_CODES[Phase.ERROR]

    if args.json:
        _print_json(measurement)
    else:
        _pretty_print(metric, measurement)

    return EXIT_CODES.get(measurement.phase, EXIT_CODES[Phase.ERROR])


if __name__ == "__main__":
    raise SystemExit(main())
