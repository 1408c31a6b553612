"""Where: src/lfmq/config/paths.py
What: Locate the lfmq config file and the default log file.
Why: Config and logging must agree on one checkout-relative layout.

Layout: ``<repo_root>/config/config.toml`` (``LFMQ_CONFIG`` overrides it)
and ``<repo_root>/logs/lfmq.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

_ENV_CONFIG_FILE: Final[str] = "LFMQ_CONFIG"
_CONFIG_RELATIVE: Final[Path] = Path("config") / "config.toml"
_LOG_RELATIVE: Final[Path] = Path("logs") / "lfmq.log"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding ``pyproject.toml`` or ``.git``.

    Falls back to the current working directory for installed copies.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(
    env: Mapping[str, str] | None = None,
    explicit_path: Path | str | None = None,
) -> Path:
    """Return the config file: explicit path, then ``LFMQ_CONFIG``, then the repo default."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    override = (mapping.get(_ENV_CONFIG_FILE) or "").strip()
    if override:
        return Path(override).expanduser().resolve()

    return (_detect_repo_root() / _CONFIG_RELATIVE).resolve()


def default_log_file() -> Path:
    return (_detect_repo_root() / _LOG_RELATIVE).resolve()


__all__ = ["default_config_path", "default_log_file"]
