from __future__ import annotations

from pathlib import Path

from codein_namespaces.config import CONFIG_FILENAME, load_config


def test_missing_config(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}


def test_top_level_keys(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        'include = ["src/**"]\nexclude = ["legacy/**"]\nextensions = [".php", ".inc"]\n'
    )

    assert load_config(tmp_path) == {
        "include": ["src/**"],
        "exclude": ["legacy/**"],
        "extensions": [".php", ".inc"],
    }


def test_namespaces_table(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text('[namespaces]\nexclude = ["tests/**"]\n')

    assert load_config(str(tmp_path)) == {"exclude": ["tests/**"]}


def test_invalid_toml_is_ignored(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("exclude = [\n")

    assert load_config(tmp_path) == {}


def test_wrong_value_types_are_dropped(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text('exclude = "legacy/**"\ninclude = [1, 2]\n')

    assert load_config(tmp_path) == {}
