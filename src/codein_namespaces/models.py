from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    path: Path
    rel_path: str


@dataclass(frozen=True)
class ImportScan:
    statements: tuple[str, ...]
    clauses: tuple[str, ...]
    working_text: str


@dataclass(frozen=True)
class ExpandedImports:
    names: tuple[str, ...]
    prefix_counts: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Diagnostic:
    kind: str  # "duplicate_namespace" or "unused_import"
    severity: str  # always "red"
    subject: str
    message: str
    file: str


@dataclass(frozen=True)
class Report:
    root: str
    generated_at: str
    files_checked: int
    diagnostics: list[Diagnostic]
    summary: dict[str, Any]
