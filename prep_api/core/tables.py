from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _load_yaml_mapping(name: str) -> dict[str, Any]:
    path = _DATA_DIR / name
    if not path.exists():
        raise RuntimeError(f"Data table not found at '{path}'. Expected file: prep_api/data/{name}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read data table '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in data table '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid data table '{path}': expected a top-level mapping.")
    return parsed


@lru_cache(maxsize=1)
def get_vocabulary() -> dict[str, Any]:
    """Token and pattern tables used by the matcher and the extractor."""
    return _load_yaml_mapping("vocabulary.yaml")


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    """Constants of the heuristic resume scorer."""
    return _load_yaml_mapping("scoring.yaml")


def _lookup(current: Any, path: str, default: Any) -> Any:
    if not path:
        return default
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'score.skills.per_item'."""
    return _lookup(get_scoring_config(), path, default)


def get_vocabulary_value(path: str, default: Any = None) -> Any:
    return _lookup(get_vocabulary(), path, default)
