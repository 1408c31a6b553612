"""Tests for configuration path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

import lfmq.config.paths as paths


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = paths.default_config_path(
        env={"LFMQ_CONFIG": str(tmp_path / "env.toml")},
        explicit_path=tmp_path / "explicit.toml",
    )
    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_blank_env_override_falls_back_to_repo_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(paths, "_detect_repo_root", lambda _start=None: tmp_path, raising=True)

    assert paths.default_config_path(env={"LFMQ_CONFIG": "   "}) == (tmp_path / "config" / "config.toml").resolve()


def test_env_override_for_config_file(tmp_path: Path) -> None:
    resolved = paths.default_config_path(env={"LFMQ_CONFIG": f"  {tmp_path / 'custom.toml'}  "})
    assert resolved == (tmp_path / "custom.toml").resolve()


def test_default_config_path_uses_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)

    assert paths.default_config_path(env={}) == (tmp_path / "config" / "config.toml").resolve()
    assert paths.default_log_file() == (tmp_path / "logs" / "lfmq.log").resolve()


def test_detect_repo_root_finds_pyproject(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert paths._detect_repo_root(nested / "module.py") == tmp_path  # pyright: ignore[reportPrivateUsage]
