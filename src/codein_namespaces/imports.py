"""Extract, expand and count the file-level ``use`` imports of a PHP file."""

from __future__ import annotations

import re
from collections.abc import Iterable

from codein_namespaces.models import ExpandedImports, ImportScan

USE_STATEMENT = re.compile(r"^use (.*?);$", re.MULTILINE)
GROUP_SEPARATOR = re.compile(r",\s*")
STRAY_BRACE = re.compile(r"\s*}")


def extract_imports(text: str) -> ImportScan:
    statements: list[str] = []
    clauses: list[str] = []
    working_text = text
    for match in USE_STATEMENT.finditer(text):
        statements.append(match.group(0))
        clauses.append(match.group(1))
        # One removal per match, so repeated identical lines stay paired.
        working_text = working_text.replace(match.group(0), "", 1)
    return ImportScan(
        statements=tuple(statements),
        clauses=tuple(clauses),
        working_text=working_text,
    )


def expand_imports(clauses: Iterable[str]) -> ExpandedImports:
    names: list[str] = []
    prefix_counts: dict[str, int] = {}
    for clause in clauses:
        if "{" in clause:
            names.extend(_expand_group(clause))
            continue
        names.append(clause)
        parts = clause.split("\\")
        if len(parts) > 1:
            prefix = f"{parts[0]}\\{parts[1]}"
            prefix_counts[prefix] = prefix_counts.get(prefix, 0) + 1
    return ExpandedImports(names=tuple(names), prefix_counts=prefix_counts)


def _expand_group(clause: str) -> list[str]:
    members = clause[clause.index("{") + 1 :].strip()
    if members.endswith("}"):
        members = members[:-1].rstrip()
    return GROUP_SEPARATOR.split(members)


def short_name(raw: str) -> str:
    """Name an import is referred to by: alias if any, else its last segment."""
    name = raw
    if " as " in name:
        name = name.split(" as ")[-1]
    if "\\" in name:
        name = name[name.rindex("\\") + 1 :]
    return STRAY_BRACE.sub("", name.strip()).strip()


def short_names(names: Iterable[str]) -> list[str]:
    unique: dict[str, None] = {}
    for raw in names:
        name = short_name(raw)
        # Empty names (trailing comma in a group) are never reported.
        if name:
            unique.setdefault(name, None)
    return list(unique)


def duplicate_prefixes(prefix_counts: dict[str, int]) -> list[tuple[str, int]]:
    return [(prefix, count) for prefix, count in prefix_counts.items() if count > 1]
