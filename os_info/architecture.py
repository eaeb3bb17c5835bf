# SPDX-License-Identifier: MIT
"""Machine architecture string (e.g. "x86_64", "arm64")."""

from __future__ import annotations

import platform as _platform

from os_info.process import CommandRunner, uname

__all__ = ["detect"]


def detect(runner: CommandRunner | None = None) -> str | None:
    """Return `uname -m`, falling back to `platform.machine()`."""
    machine = uname("-m", runner)
    if machine:
        return machine
    return _platform.machine() or None
