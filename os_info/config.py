# SPDX-License-Identifier: MIT
"""Environment-driven settings.

OS_INFO_ROOT  Filesystem root release files are read under (default "/").
OS_INFO_LOG   Log level for the command line tool (e.g. "debug").
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Settings", "load_settings"]

ROOT_ENV = "OS_INFO_ROOT"
LOG_ENV = "OS_INFO_LOG"


@dataclass(frozen=True, slots=True)
class Settings:
    root: Path = Path("/")
    log_level: str | None = None


def load_settings() -> Settings:
    """Read settings from the environment. Not cached."""
    root = os.environ.get(ROOT_ENV)
    level = os.environ.get(LOG_ENV)
    return Settings(
        root=Path(root).expanduser() if root else Path("/"),
        log_level=level.strip().upper() if level and level.strip() else None,
    )
