from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Sequence

from .core.runners import ExtractRunner
from .core.strategy import load_settings
from .extraction.models import catalog_to_dict
from .observability.obs import api as obs
from .observability.sinks.jsonl import JsonlSink
from .observability.trace.envelope import EventRecord, TraceEnvelope


SETTINGS_ENV_VAR = "HELPDOC_SETTINGS_PATH"


def build_observability(settings_path: str | Path) -> JsonlSink | None:
    settings = load_settings(settings_path)
    if not settings.observability.trace_enabled:
        return None
    sink = JsonlSink(settings.paths.logs_dir)
    obs.set_sink(sink)
    return sink


def format_diagnostic(ev: EventRecord) -> str:
    level = ev.kind.split(".", 1)[1]
    message = ev.attrs.get("message", "")
    details = ", ".join(
        f"{k}={v if isinstance(v, str) else json.dumps(v, sort_keys=True, ensure_ascii=False)}"
        for k, v in sorted(ev.attrs.items())
        if k != "message"
    )
    return f"helpdoc: {level}: {message} ({details})" if details else f"helpdoc: {level}: {message}"


def report_diagnostics(trace: TraceEnvelope, *, quiet: bool = False) -> int:
    """Print the run's diagnostics to stderr; returns how many were printed."""
    count = 0
    for ev in trace.iter_diagnostics():
        if quiet and ev.kind != "diag.error":
            continue
        print(format_diagnostic(ev), file=sys.stderr)
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="helpdoc",
        description="Extract a typed API catalog from help documentation.",
    )
    parser.add_argument("catalog", help="Catalog to extract (functions, lua, options, or a strategy-defined one).")
    parser.add_argument(
        "--settings",
        default=os.environ.get(SETTINGS_ENV_VAR, "config/settings.yaml"),
        help=f"Settings YAML path (default: ${SETTINGS_ENV_VAR} or config/settings.yaml).",
    )
    parser.add_argument("--strategy", default=None, help="Strategy id or YAML path (default: from settings).")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent for the printed catalog.")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report error diagnostics on stderr (skip debug ones such as unknown return types).",
    )
    args = parser.parse_args(argv)

    try:
        build_observability(args.settings)
        result = ExtractRunner(settings_path=args.settings).run(args.catalog, strategy_config_id=args.strategy)
    except (KeyError, OSError, TypeError, ValueError) as exc:
        # configuration problems surface before any trace exists
        print(f"helpdoc: {exc}", file=sys.stderr)
        return 1
    finally:
        obs.set_sink(None)

    if result.trace is not None:
        report_diagnostics(result.trace, quiet=args.quiet)

    if result.error is not None:
        print(f"helpdoc: {result.error} (trace_id={result.trace_id})", file=sys.stderr)
        return 1

    catalog = result.output.output if result.output is not None else {}
    json.dump(catalog_to_dict(catalog), sys.stdout, indent=args.indent, sort_keys=True, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
