"""Persistent JSON config helpers.

Stores the book rules (ignore lists, ordering, TOC and empty-folder flags).
Malformed or missing config falls back to default rules; nothing here raises.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .rules import (
    ORDER_FILES_FIRST,
    SIBLING_ORDERS,
    SORT_ALPHABETICAL,
    SORTING_STRATEGIES,
    RuleSet,
    clean_patterns,
)

APP_NAME = "vaultbook"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_PATTERN_KEYS = ("folders_to_ignore", "files_to_ignore", "extensions_to_ignore", "tags_to_ignore")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks a generation run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_patterns(data: dict[str, object], key: str) -> tuple[str, ...]:
    """Read a pattern list, keeping only non-blank string items."""
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return clean_patterns(item for item in value if isinstance(item, str))


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_choice(data: dict[str, object], key: str, choices: tuple[str, ...], default: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) and value in choices else default


def load_rules() -> RuleSet:
    """Build a :class:`RuleSet` from persisted config with strict validation."""
    data = load_config()
    defaults = RuleSet()
    return RuleSet(
        folders_to_ignore=_load_patterns(data, "folders_to_ignore"),
        files_to_ignore=_load_patterns(data, "files_to_ignore"),
        extensions_to_ignore=_load_patterns(data, "extensions_to_ignore"),
        tags_to_ignore=_load_patterns(data, "tags_to_ignore"),
        include_empty_folders=_load_bool(data, "include_empty_folders", defaults.include_empty_folders),
        sorting_strategy=_load_choice(data, "sorting_strategy", SORTING_STRATEGIES, SORT_ALPHABETICAL),
        sibling_order=_load_choice(data, "sibling_order", SIBLING_ORDERS, ORDER_FILES_FIRST),
        generate_tocs=_load_bool(data, "generate_tocs", defaults.generate_tocs),
        legacy_toc_scoping=_load_bool(data, "legacy_toc_scoping", defaults.legacy_toc_scoping),
    )


def save_rules(rules: RuleSet) -> None:
    """Persist ``rules`` in normalized form, keeping unrelated config keys."""
    normalized = rules.normalized()
    config = load_config()
    for key in _PATTERN_KEYS:
        config[key] = list(getattr(normalized, key))
    config["include_empty_folders"] = normalized.include_empty_folders
    config["sorting_strategy"] = normalized.sorting_strategy
    config["sibling_order"] = normalized.sibling_order
    config["generate_tocs"] = normalized.generate_tocs
    config["legacy_toc_scoping"] = normalized.legacy_toc_scoping
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_rules",
    "save_rules",
]
