"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes a tamilwriter.toml and returns its path."""

    def _write(body: str, name: str = "tamilwriter.toml") -> Path:
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def no_config_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run in an empty directory so no tamilwriter.toml is auto-detected."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
