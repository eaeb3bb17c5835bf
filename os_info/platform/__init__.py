# SPDX-License-Identifier: MIT
"""Per-platform probes and the dispatch that picks one of them.

The probe is chosen once per process from `sys.platform`; detection itself
runs again on every call.
"""

from __future__ import annotations

import sys as _sys
from functools import lru_cache
from typing import Protocol

from os_info.info import Info
from os_info.platform.bsd import DragonFlyProbe, FreeBSDProbe, NetBSDProbe, OpenBSDProbe
from os_info.platform.linux import LinuxProbe
from os_info.platform.macos import MacosProbe
from os_info.platform.mobile import AndroidProbe, IosProbe
from os_info.platform.other import EmscriptenProbe, RedoxProbe, UnknownProbe
from os_info.platform.unix import AixProbe, HurdProbe, SunOSProbe
from os_info.platform.windows import WindowsProbe

__all__ = [
    "Probe",
    "current_probe",
    "probe_for",
]


class Probe(Protocol):
    def detect(self) -> Info:
        """Identify the running system. Must not raise for missing sources."""
        ...


def probe_for(system: str) -> Probe:
    """Return the probe for a `sys.platform` value."""
    system = system.lower()
    if system.startswith("linux"):
        return LinuxProbe()
    if system.startswith("darwin"):
        return MacosProbe()
    if system.startswith(("win32", "cygwin", "msys")):
        return WindowsProbe()
    if system.startswith("freebsd"):
        return FreeBSDProbe()
    if system.startswith("openbsd"):
        return OpenBSDProbe()
    if system.startswith("netbsd"):
        return NetBSDProbe()
    if system.startswith("dragonfly"):
        return DragonFlyProbe()
    if system.startswith("sunos"):
        return SunOSProbe()
    if system.startswith("gnu"):
        return HurdProbe()
    if system.startswith("aix"):
        return AixProbe()
    if system == "android":
        return AndroidProbe()
    if system == "ios":
        return IosProbe()
    if system == "emscripten":
        return EmscriptenProbe()
    if system == "redox":
        return RedoxProbe()
    return UnknownProbe()


@lru_cache(maxsize=1)
def current_probe() -> Probe:
    """Probe for the running platform (cached)."""
    return probe_for(_sys.platform)
