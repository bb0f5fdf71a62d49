"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pixelhex


def _load_pyproject() -> dict:
    with Path("pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "pixelhex"
    assert poetry["version"] == pixelhex.__version__

    dependencies = poetry["dependencies"]
    for dependency in ("pydantic", "platformdirs", "numpy"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
    assert "pytest" in poetry["extras"]["test"]
