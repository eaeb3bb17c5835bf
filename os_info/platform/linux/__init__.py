# SPDX-License-Identifier: MIT
"""Linux probe: lsb_release first, release files as fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from os_info import architecture, bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.platform.linux import file_release, lsb_release
from os_info.process import CommandRunner, DefaultCommandRunner

__all__ = ["LinuxProbe"]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LinuxProbe:
    """Detect the running Linux distribution.

    Attributes:
        runner: Runs lsb_release, getconf and uname
        root: Filesystem root release files are read under (None: from settings)
    """

    runner: CommandRunner = field(default_factory=DefaultCommandRunner)
    root: Path | None = None

    def detect(self) -> Info:
        log.debug("linux probe is called")

        info = lsb_release.get(self.runner)
        if info is None:
            info = file_release.get(self.root)
        if info is None:
            info = Info.with_type(Type.LINUX)

        info = replace(
            info,
            bitness=bitness.detect(self.runner),
            architecture=architecture.detect(self.runner),
        )
        log.debug("Returning %r", info)
        return info
