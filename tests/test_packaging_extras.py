"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _extras(pyproject: dict[str, Any]) -> dict[str, list[str]]:
    return cast(dict[str, list[str]], pyproject.get("project", {}).get("optional-dependencies", {}))


def _flatten_mypy_overrides(pyproject: dict[str, Any]) -> set[str]:
    overrides = pyproject.get("tool", {}).get("mypy", {}).get("overrides", [])
    modules: set[str] = set()
    for entry in overrides:
        modules.update(entry.get("module", []))
    return modules


def test_runtime_dependencies() -> None:
    pyproject = _load_pyproject()
    deps = " ".join(pyproject["project"]["dependencies"]).lower()
    for name in ("pydantic", "pyyaml", "python-dateutil", "typer"):
        assert name in deps


def test_dev_extra() -> None:
    extras = _extras(_load_pyproject())
    assert any(req.startswith("pytest") for req in extras["dev"])


def test_console_script_entrypoint() -> None:
    pyproject = _load_pyproject()
    scripts = pyproject.get("project", {}).get("scripts", {})
    assert scripts.get("edtf-converter") == "edtf_converter.cli:app"


def test_package_data_includes_yaml() -> None:
    pyproject = _load_pyproject()
    package_data = pyproject["tool"]["setuptools"]["package-data"]
    assert "*.yml" in package_data["edtf_converter.locales"]
    assert "*.yml" in package_data["edtf_converter.config"]


def test_import_smoke() -> None:
    importlib.import_module("edtf_converter")
    importlib.import_module("edtf_converter.cli")


def test_mypy_overrides() -> None:
    pyproject = _load_pyproject()
    mods = _flatten_mypy_overrides(pyproject)
    for mod in {"yaml", "yaml.*"}:
        assert mod in mods
