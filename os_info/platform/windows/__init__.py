# SPDX-License-Identifier: MIT
"""Windows probe."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from os_info.bitness import Bitness, interpreter_bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.platform.windows.winapi import (
    VER_SUITE_WH_SERVER,
    NativeApi,
    NativeVersionInfo,
    WinApi,
)
from os_info.version import Semantic

__all__ = ["WindowsProbe", "edition"]

log = logging.getLogger(__name__)

# First Windows 11 build; Windows 11 still reports itself as 10.0.
_WINDOWS_11_BUILD = 22000

# Server 2016 and 2019 share 10.0; the registry ReleaseId tells them apart.
_SERVER_2019_RELEASE_ID = "1809"


@dataclass(frozen=True, slots=True)
class WindowsProbe:
    api: NativeApi = field(default_factory=WinApi)

    def detect(self) -> Info:
        log.debug("windows probe is called")

        native = self.api.version_info()
        arch = self.api.architecture()
        if native is None:
            info = Info(os_type=Type.WINDOWS, bitness=self.bitness(), architecture=arch)
        else:
            info = Info(
                os_type=Type.WINDOWS,
                version=Semantic(native.major, native.minor, native.build),
                edition=self.edition(native, arch),
                bitness=self.bitness(),
                architecture=arch,
            )
        log.debug("Returning %r", info)
        return info

    def edition(self, native: NativeVersionInfo, arch: str | None) -> str | None:
        # Only the 5.2 family needs the extra native lookups.
        legacy = (native.major, native.minor) == (5, 2)
        return edition(
            native,
            self.api.release_id(),
            server_r2=legacy and self.api.is_server_r2(),
            amd64=legacy and arch == "amd64",
        )

    def bitness(self) -> Bitness:
        # A 64-bit process only runs on 64-bit Windows.
        if interpreter_bitness() is Bitness.X64:
            return Bitness.X64

        match self.api.is_wow64():
            case True:
                return Bitness.X64
            case False:
                return Bitness.X32
            case _:
                return Bitness.UNKNOWN


def edition(
    native: NativeVersionInfo,
    release_id: str | None,
    *,
    server_r2: bool = False,
    amd64: bool = False,
) -> str | None:
    """Map a Windows version to its product name.

    See https://learn.microsoft.com/windows/win32/api/winnt/ns-winnt-osversioninfoexw

    Example: edition(NativeVersionInfo(6, 1, 7601), None) -> "Windows 7"
    """
    workstation = native.is_workstation

    match (native.major, native.minor):
        case (10, 0) if workstation:
            return "Windows 11" if native.build >= _WINDOWS_11_BUILD else "Windows 10"
        case (10, 0):
            # Plain string comparison, so "1809" <= "2004" <= "21H2".
            if release_id is not None and release_id >= _SERVER_2019_RELEASE_ID:
                return "Windows Server 2019"
            return "Windows Server 2016"
        case (6, 3):
            return "Windows 8.1" if workstation else "Windows Server 2012 R2"
        case (6, 2):
            return "Windows 8" if workstation else "Windows Server 2012"
        case (6, 1):
            return "Windows 7" if workstation else "Windows Server 2008 R2"
        case (6, 0):
            return "Windows Vista" if workstation else "Windows Server 2008"
        case (5, 2):
            if server_r2:
                return "Windows Server 2003 R2"
            if native.suite_mask & VER_SUITE_WH_SERVER:
                return "Windows Home Server"
            if workstation and amd64:
                return "Windows XP Professional x64 Edition"
            return "Windows Server 2003"
        case (5, 1):
            return "Windows XP"
        case (5, 0):
            return "Windows 2000"
        case _:
            return None
