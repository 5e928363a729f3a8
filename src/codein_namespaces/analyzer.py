from __future__ import annotations

import fnmatch
import json
import logging
import os
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from codein_namespaces.check import check
from codein_namespaces.models import Diagnostic, Report, SourceFile

DEFAULT_EXTENSIONS = {".php"}
DEFAULT_EXCLUDES = [
    ".git/**",
    ".idea/**",
    "vendor/**",
    "node_modules/**",
    ".phpunit.cache/**",
    ".php-cs-fixer.cache",
    "namespace_report.json",
    "namespace_report.md",
]

logger = logging.getLogger(__name__)


def analyze(
    root: Path,
    include: list[str],
    exclude: list[str],
    extensions: Iterable[str] | None = None,
) -> Report:
    root = root.resolve()
    wanted = {_normalize_extension(ext) for ext in extensions} if extensions else DEFAULT_EXTENSIONS
    files = [_source_file(root, path) for path in _collect_files(root, include, exclude, wanted)]
    diagnostics: list[Diagnostic] = []
    checked = 0

    for source in files:
        try:
            text = source.path.read_text(encoding="utf-8", errors="ignore")
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", source.rel_path, exc)
            continue
        checked += 1
        found = list(check(source.rel_path, text))
        logger.debug("Checked %s: %d finding(s)", source.rel_path, len(found))
        diagnostics.extend(found)

    summary = {
        "files_checked": checked,
        "diagnostics": len(diagnostics),
        "by_kind": _summarize_by_kind(diagnostics),
        "files_with_findings": len({d.file for d in diagnostics}),
    }
    return Report(
        root=str(root),
        generated_at=datetime.now(timezone.utc).isoformat(),
        files_checked=checked,
        diagnostics=diagnostics,
        summary=summary,
    )


def write_report(root: Path, report: Report) -> None:
    json_path = root / "namespace_report.json"
    md_path = root / "namespace_report.md"

    json_path.write_text(json.dumps(asdict(report), indent=2, sort_keys=True))
    md_path.write_text(_render_markdown(report))


def _normalize_extension(extension: str) -> str:
    extension = extension.lower()
    return extension if extension.startswith(".") else f".{extension}"


def _collect_files(
    root: Path,
    include: list[str],
    exclude: list[str],
    extensions: set[str],
) -> list[Path]:
    exclude_patterns = DEFAULT_EXCLUDES + exclude
    results: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        if rel_dir != "." and _matches(rel_dir + "/", exclude_patterns):
            dirnames[:] = []
            continue
        for name in filenames:
            full_path = Path(dirpath) / name
            if full_path.suffix.lower() not in extensions:
                continue
            rel_path = full_path.relative_to(root).as_posix()
            if _matches(rel_path, exclude_patterns):
                continue
            if include and not _matches(rel_path, include):
                continue
            results.append(full_path)
    results.sort(key=lambda p: p.relative_to(root).as_posix())
    return results


def _matches(path: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(path, pattern) for pattern in patterns)


def _source_file(root: Path, path: Path) -> SourceFile:
    return SourceFile(
        path=path,
        rel_path=path.relative_to(root).as_posix(),
    )


def _summarize_by_kind(diagnostics: list[Diagnostic]) -> dict[str, int]:
    summary: dict[str, int] = {}
    for diagnostic in diagnostics:
        summary[diagnostic.kind] = summary.get(diagnostic.kind, 0) + 1
    return dict(sorted(summary.items()))


def _render_markdown(report: Report) -> str:
    lines = [
        "# Namespace Report",
        "",
        f"Root: `{report.root}`",
        f"Generated: `{report.generated_at}`",
        f"Files checked: `{report.files_checked}`",
        f"Findings: `{len(report.diagnostics)}`",
        "",
        "## Summary",
    ]
    for kind, count in report.summary.get("by_kind", {}).items():
        lines.append(f"- {kind}: {count}")
    lines.append("")
    lines.append("## Findings")
    if not report.diagnostics:
        lines.append("- (none)")
    for diagnostic in report.diagnostics:
        lines.append(f"- [{diagnostic.kind}] {diagnostic.message}")
    lines.append("")
    return "\n".join(lines)
