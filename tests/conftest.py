"""Shared pytest fixtures for the pgx-new test suite.

Provides reusable fixtures for:
- Temporary output directories
- Extension configurations (standard and background worker)
- An in-memory template set for swapping out the packaged templates
- A clean environment (no ``PGX_NEW_*`` variables leaking in)
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pgx_new.scaffolder import ExtensionConfig, TemplateRenderer


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip pgx-new settings from the environment for every test."""
    for var in ("PGX_NEW_OUTPUT_DIR", "PGX_NEW_STAGED", "PGX_NEW_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory the extension directory is created in."""
    out = tmp_path / "extensions"
    out.mkdir()
    yield out


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def standard_config() -> ExtensionConfig:
    return ExtensionConfig(name="my_ext")


@pytest.fixture
def worker_config() -> ExtensionConfig:
    return ExtensionConfig(name="my_ext", bgworker=True)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


FAKE_TEMPLATES: dict[str, str] = {
    "control.j2": "control for {{ name }}\n",
    "cargo_toml.j2": "[package]\nname = \"{{ name }}\"\n",
    "cargo_config": "# tooling {{ name }} stays literal\n",
    "lib_rs.j2": "fn standard_{{ name }}() {}\n",
    "bgworker_lib_rs.j2": "fn worker_{{ name }}() {}\n",
    "gitignore": "/target\n",
}


@pytest.fixture
def fake_templates() -> dict[str, str]:
    return dict(FAKE_TEMPLATES)


@pytest.fixture
def mapping_renderer(fake_templates: dict[str, str]) -> TemplateRenderer:
    """A renderer backed by :data:`FAKE_TEMPLATES` instead of package data."""
    return TemplateRenderer.from_mapping(fake_templates)
