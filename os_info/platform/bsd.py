# SPDX-License-Identifier: MIT
"""BSD probes: FreeBSD (and its HardenedBSD / MidnightBSD forks), OpenBSD,
NetBSD and DragonFly BSD."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from os_info import architecture, bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.process import CommandRunner, DefaultCommandRunner, succeeds, uname
from os_info.version import UnknownVersion, Version

__all__ = ["DragonFlyProbe", "FreeBSDProbe", "NetBSDProbe", "OpenBSDProbe"]

log = logging.getLogger(__name__)


def _release_version(runner: CommandRunner) -> Version:
    release = uname("-r", runner)
    return Version.from_string(release) if release else UnknownVersion()


def _bsd_info(os_type: Type, runner: CommandRunner) -> Info:
    info = Info(
        os_type=os_type,
        version=_release_version(runner),
        bitness=bitness.detect(runner),
        architecture=architecture.detect(runner),
    )
    log.debug("Returning %r", info)
    return info


@dataclass(frozen=True, slots=True)
class FreeBSDProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("freebsd probe is called")
        return _bsd_info(self.os_type(), self.runner)

    def os_type(self) -> Type:
        """Tell FreeBSD apart from the forks that report the same platform.

        MidnightBSD names itself in `uname -s`; HardenedBSD only differs by
        exposing the `hardening.version` sysctl.
        """
        if uname("-s", self.runner) == "MidnightBSD":
            return Type.MIDNIGHTBSD
        if succeeds(["sysctl", "hardening.version"], self.runner):
            return Type.HARDENEDBSD
        return Type.FREEBSD


@dataclass(frozen=True, slots=True)
class OpenBSDProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("openbsd probe is called")
        return _bsd_info(Type.OPENBSD, self.runner)


@dataclass(frozen=True, slots=True)
class NetBSDProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("netbsd probe is called")
        return _bsd_info(Type.NETBSD, self.runner)


@dataclass(frozen=True, slots=True)
class DragonFlyProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)

    def detect(self) -> Info:
        log.debug("dragonfly probe is called")
        return _bsd_info(Type.DRAGONFLY, self.runner)
