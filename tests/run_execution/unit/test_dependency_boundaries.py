"""Boundary tests for domain package dependencies."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "postman_suite_runner"


def test_only_the_cli_module_imports_click() -> None:
    for module_path in _package_root().rglob("*.py"):
        if module_path.name == "cli.py":
            continue
        text = module_path.read_text(encoding="utf-8")
        assert "import click" not in text, f"click imported outside the CLI: {module_path}"


def test_only_the_newman_adapter_starts_processes() -> None:
    for module_path in _package_root().rglob("*.py"):
        if module_path.name == "newman_engine.py":
            continue
        text = module_path.read_text(encoding="utf-8")
        assert "subprocess" not in text, f"Process handling outside the adapter: {module_path}"
