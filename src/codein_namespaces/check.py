from __future__ import annotations

from collections.abc import Iterator

from codein_namespaces.imports import (
    duplicate_prefixes,
    expand_imports,
    extract_imports,
    short_names,
)
from codein_namespaces.models import Diagnostic
from codein_namespaces.usage import is_used

SEVERITY = "red"


def check(file: str, text: str) -> Iterator[Diagnostic]:
    """Yield duplicate-namespace findings, then unused-import findings, for one file."""
    scan = extract_imports(text)
    if not scan.statements:
        return
    expanded = expand_imports(scan.clauses)

    for prefix, count in duplicate_prefixes(expanded.prefix_counts):
        yield Diagnostic(
            kind="duplicate_namespace",
            severity=SEVERITY,
            subject=prefix,
            message=f"Namespace {prefix} appears {count} times in {file}",
            file=file,
        )

    for name in short_names(expanded.names):
        if is_used(name, scan.working_text):
            continue
        yield Diagnostic(
            kind="unused_import",
            severity=SEVERITY,
            subject=name,
            message=f"Unused: {name} in {file}",
            file=file,
        )
