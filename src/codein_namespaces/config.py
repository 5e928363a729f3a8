"""Load .codein-namespaces.toml config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

CONFIG_FILENAME = ".codein-namespaces.toml"
LIST_KEYS = ("include", "exclude", "extensions")

logger = logging.getLogger(__name__)


def load_config(root: str | Path) -> dict[str, list[str]]:
    path = Path(root) / CONFIG_FILENAME
    if not path.exists():
        return {}
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    section = data.get("namespaces", data)
    if not isinstance(section, dict):
        section = {}
    config: dict[str, list[str]] = {}
    for key in LIST_KEYS:
        value = section.get(key)
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            config[key] = list(value)
        elif value is not None:
            logger.warning("Ignoring %s in %s: expected a list of strings", key, path)
    return config
