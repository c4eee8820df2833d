"""YAML/JSON document loading shared by the profile and catalog loaders."""

from __future__ import annotations

import json
from pathlib import Path

import yaml


def load_document(path: Path, label: str = "document") -> dict:
    """Load a YAML or JSON mapping from ``path``.

    The format is chosen by extension; unknown extensions are auto-detected.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or is not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"{label.capitalize()} not found: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return _load_yaml(path, label)
    if suffix == ".json":
        return _load_json(path, label)
    return _load_unknown(path, label)


def _ensure_mapping(data: object, path: Path, label: str) -> dict:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{label.capitalize()} must be a mapping/dict: {path}")
    return data


def _load_yaml(path: Path, label: str) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML {label}: {path}") from e
    return _ensure_mapping(data, path, label)


def _load_json(path: Path, label: str) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON {label}: {path}") from e

    if data is None:
        raise ValueError(f"{label.capitalize()} must be a mapping/dict: {path}")
    return _ensure_mapping(data, path, label)


def _load_unknown(path: Path, label: str) -> dict:
    raw = path.read_text(encoding="utf-8")
    raw_stripped = raw.lstrip()

    # Try JSON first if it looks like JSON, otherwise fall back to YAML.
    if raw_stripped.startswith("{") or raw_stripped.startswith("["):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            pass
        else:
            return _ensure_mapping(data, path, label)

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {label} format: {path}") from e
    return _ensure_mapping(data, path, label)
