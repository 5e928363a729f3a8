from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from dataclasses import asdict
from pathlib import Path

from codein_namespaces import __version__
from codein_namespaces.models import Diagnostic, Report

RED = "\033[91m"
DARK_RED = "\033[31m"
RESET = "\033[0m"


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="codein-namespaces",
        description=(
            "Report namespaces imported through repeated single-symbol use "
            "statements and imported names never referenced in the file."
        ),
    )
    parser.add_argument("--path", default=".", help="Target project directory")
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        help="Glob to include (repeatable, relative to --path)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Glob to exclude (repeatable, relative to --path)",
    )
    parser.add_argument(
        "--extension",
        action="append",
        default=[],
        help="File extension to check (repeatable, default .php)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument(
        "--write-report",
        action="store_true",
        help="Write namespace_report.json and namespace_report.md into --path",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    root = Path(args.path).resolve()
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Path does not exist or is not a directory: {root}")

    from codein_namespaces.analyzer import analyze, write_report
    from codein_namespaces.config import load_config

    config = load_config(root)
    report = analyze(
        root=root,
        include=config.get("include", []) + args.include,
        exclude=config.get("exclude", []) + args.exclude,
        extensions=args.extension or config.get("extensions") or None,
    )
    if args.write_report:
        write_report(root, report)

    if args.format == "json":
        print(json.dumps(asdict(report), indent=2, sort_keys=True))
    else:
        color = not args.no_color and sys.stdout.isatty()
        for diagnostic in report.diagnostics:
            print(render_diagnostic(diagnostic, color=color))
        print(_render_summary(report))
    return 1 if report.diagnostics else 0


def render_diagnostic(diagnostic: Diagnostic, color: bool = False) -> str:
    if not color:
        return diagnostic.message
    tail = f" in {diagnostic.file}"
    head = diagnostic.message[: -len(tail)]
    label, _, rest = head.partition(f" {diagnostic.subject}")
    return (
        f"{RED}{label} {DARK_RED}{diagnostic.subject}{RED}{rest} in "
        f"{DARK_RED}{diagnostic.file}{RESET}"
    )


def _render_summary(report: Report) -> str:
    if not report.diagnostics:
        return f"Checked {report.files_checked} file(s): no namespace issues found."
    by_kind = ", ".join(f"{kind}={count}" for kind, count in report.summary["by_kind"].items())
    return (
        f"Checked {report.files_checked} file(s): "
        f"{len(report.diagnostics)} finding(s) ({by_kind})"
    )


if __name__ == "__main__":
    raise SystemExit(main())
