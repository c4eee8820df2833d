from __future__ import annotations

import tomllib
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def _package_find_options() -> dict:
    with (REPO_ROOT / "pyproject.toml").open("rb") as f:
        return tomllib.load(f)["tool"]["setuptools"]["packages"]["find"]


def test_package_discovery_includes_directories_without_init() -> None:
    from setuptools import find_namespace_packages

    options = _package_find_options()
    packages = find_namespace_packages(where=str(REPO_ROOT), include=options["include"])

    assert options["namespaces"] is True
    assert {"src", "src.config", "src.relevance", "src.utils"} <= set(packages)
