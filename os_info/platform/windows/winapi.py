# SPDX-License-Identifier: MIT
"""Native Windows calls.

Everything that touches the Win32 API or the registry lives here. The
edition logic in `os_info.platform.windows` only sees plain values, so it can
be tested on any platform with a fake `NativeApi`.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "CURRENT_VERSION_KEY",
    "NativeApi",
    "NativeVersionInfo",
    "VER_NT_WORKSTATION",
    "VER_SUITE_WH_SERVER",
    "WinApi",
]

log = logging.getLogger(__name__)

# https://learn.microsoft.com/windows/win32/api/winnt/ns-winnt-osversioninfoexw
VER_NT_WORKSTATION = 0x0000001
VER_SUITE_WH_SERVER = 0x00008000
SM_SERVERR2 = 89

CURRENT_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"


@dataclass(frozen=True, slots=True)
class NativeVersionInfo:
    """The fields of OSVERSIONINFOEX the probe needs."""

    major: int
    minor: int
    build: int
    product_type: int = VER_NT_WORKSTATION
    suite_mask: int = 0

    @property
    def is_workstation(self) -> bool:
        return self.product_type == VER_NT_WORKSTATION


class NativeApi(Protocol):
    def version_info(self) -> NativeVersionInfo | None: ...

    def release_id(self) -> str | None: ...

    def is_server_r2(self) -> bool: ...

    def is_wow64(self) -> bool | None: ...

    def architecture(self) -> str | None: ...


@dataclass(frozen=True, slots=True)
class WinApi:
    """Production `NativeApi` backed by sys, winreg and ctypes."""

    def version_info(self) -> NativeVersionInfo | None:
        getwindowsversion = getattr(sys, "getwindowsversion", None)
        if getwindowsversion is None:
            log.error("sys.getwindowsversion is unavailable")
            return None

        v = getwindowsversion()
        # platform_version reports the real OS version, unaffected by the
        # compatibility manifest of the interpreter.
        major, minor, build = v.platform_version[:3]
        return NativeVersionInfo(
            major=major,
            minor=minor,
            build=build,
            product_type=v.product_type,
            suite_mask=v.suite_mask,
        )

    def release_id(self) -> str | None:
        """Read the ReleaseId string (e.g. "1809") from the registry."""
        try:
            import winreg
        except ImportError:
            return None

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, CURRENT_VERSION_KEY) as key:
                value, value_type = winreg.QueryValueEx(key, "ReleaseId")
        except OSError as e:
            log.debug("ReleaseId is unavailable: %s", e)
            return None

        if value_type != winreg.REG_SZ or not isinstance(value, str):
            log.warning("ReleaseId has unexpected registry type %d", value_type)
            return None
        return value

    def is_server_r2(self) -> bool:
        try:
            import ctypes

            return bool(ctypes.windll.user32.GetSystemMetrics(SM_SERVERR2))
        except (ImportError, AttributeError, OSError) as e:
            log.error("GetSystemMetrics failed: %s", e)
            return False

    def is_wow64(self) -> bool | None:
        """Whether this 32-bit process runs on 64-bit Windows (None if unknown)."""
        try:
            import ctypes
            from ctypes import wintypes

            kernel32 = ctypes.windll.kernel32
            # Not exported by the oldest supported Windows releases.
            is_wow64_process = getattr(kernel32, "IsWow64Process", None)
            if is_wow64_process is None:
                return None

            result = wintypes.BOOL()
            if not is_wow64_process(kernel32.GetCurrentProcess(), ctypes.byref(result)):
                log.error("IsWow64Process failed")
                return None
            return bool(result.value)
        except (ImportError, AttributeError, OSError) as e:
            log.error("IsWow64Process is unavailable: %s", e)
            return None

    def architecture(self) -> str | None:
        # NOTE: avoid platform.machine() on Windows, it may query WMI.
        arch = os.environ.get("PROCESSOR_ARCHITEW6432") or os.environ.get(
            "PROCESSOR_ARCHITECTURE"
        )
        return arch.lower() if arch else None
