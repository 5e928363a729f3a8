"""Textual heuristics deciding whether an imported short name is used.

Every predicate takes the short name and the import-stripped file text. They
are independent: any single match counts as a use. None of them understands
comments or string literals.
"""

from __future__ import annotations

import re
from collections.abc import Callable

FUNCTION_PARAMETERS = re.compile(r"function \w*\(([^)]*)\)")
IMPLEMENTS_LIST = re.compile(r"implements (.*?)$", re.MULTILINE)
LIST_SEPARATOR = re.compile(r",\s*")

Predicate = Callable[[str, str], bool]


def instantiated(name: str, text: str) -> bool:
    return f"new {name}" in text


def argument_type_hint(name: str, text: str) -> bool:
    for match in FUNCTION_PARAMETERS.finditer(text):
        for parameter in LIST_SEPARATOR.split(match.group(1)):
            if parameter.startswith(name):
                return True
    return False


def trait_used(name: str, text: str) -> bool:
    # Cannot tell a class-body trait from an indented import line.
    return f"use {name}" in text


def return_type_hint(name: str, text: str) -> bool:
    return f": {name}" in text or f":? {name}" in text


def static_reference(name: str, text: str) -> bool:
    pattern = re.escape(name) + r"(?:\\[\w\\]+)?::"
    return re.search(pattern, text) is not None


def instanceof_check(name: str, text: str) -> bool:
    return f"instanceof {name}" in text


def extends_class(name: str, text: str) -> bool:
    return f"extends {name}" in text


def implements_interface(name: str, text: str) -> bool:
    # Only the first implements clause of the file is inspected.
    match = IMPLEMENTS_LIST.search(text)
    if match is None:
        return False
    return any(entry.startswith(name) for entry in LIST_SEPARATOR.split(match.group(1)))


def catches_exception(name: str, text: str) -> bool:
    return f"}} catch ({name} " in text


USAGE_PREDICATES: tuple[Predicate, ...] = (
    instantiated,
    argument_type_hint,
    trait_used,
    return_type_hint,
    static_reference,
    instanceof_check,
    extends_class,
    implements_interface,
    catches_exception,
)


def is_used(name: str, text: str) -> bool:
    return any(predicate(name, text) for predicate in USAGE_PREDICATES)
