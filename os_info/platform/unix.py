# SPDX-License-Identifier: MIT
"""Probes for the remaining uname-based systems: illumos/Solaris, GNU/Hurd
and AIX."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from os_info import architecture, bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.process import CommandRunner, DefaultCommandRunner, uname
from os_info.version import UnknownVersion, Version

__all__ = ["AixProbe", "HurdProbe", "SunOSProbe"]

log = logging.getLogger(__name__)

_SUNOS_TYPES: dict[str, Type] = {
    "illumos": Type.ILLUMOS,
    "Solaris": Type.SOLARIS,
}


def _to_version(text: str | None) -> Version:
    return Version.from_string(text) if text else UnknownVersion()


@dataclass(frozen=True, slots=True)
class SunOSProbe:
    """illumos distributions and Oracle Solaris."""

    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("sunos probe is called")
        os_name = uname("-o", self.runner)
        info = Info(
            os_type=_SUNOS_TYPES.get(os_name or "", Type.UNKNOWN),
            version=_to_version(uname("-v", self.runner)),
            bitness=bitness.detect(self.runner),
            architecture=architecture.detect(self.runner),
        )
        log.debug("Returning %r", info)
        return info


@dataclass(frozen=True, slots=True)
class HurdProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("hurd probe is called")
        info = Info(
            os_type=Type.HURD,
            version=_to_version(uname("-r", self.runner)),
            bitness=bitness.detect(self.runner),
            architecture=architecture.detect(self.runner),
        )
        log.debug("Returning %r", info)
        return info


@dataclass(frozen=True, slots=True)
class AixProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("aix probe is called")
        info = Info(
            os_type=Type.AIX if uname("-o", self.runner) == "AIX" else Type.UNKNOWN,
            version=_to_version(self.version()),
            bitness=bitness.detect(self.runner),
            architecture=architecture.detect(self.runner),
        )
        log.debug("Returning %r", info)
        return info

    def version(self) -> str | None:
        # AIX splits its version: `uname -v` is the major, `uname -r` the minor.
        major = uname("-v", self.runner)
        if major is None:
            return None
        minor = uname("-r", self.runner) or "0"
        return f"{major}.{minor}"
