# SPDX-License-Identifier: MIT
"""Operating system types and families.

`Type` is the closed set of systems the probes can recognise. New
distributions that no probe knows about are reported as `Type.LINUX` (on
Linux) or `Type.UNKNOWN`, never as an error.
"""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["Family", "Type"]


class Family(Enum):
    """Broad category an operating system belongs to."""

    BSD = auto()
    LINUX = auto()
    MACOS = auto()
    WINDOWS_NT = auto()
    SUNOS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return _FAMILY_NAMES[self]


_FAMILY_NAMES: dict[Family, str] = {
    Family.BSD: "BSD",
    Family.LINUX: "Linux",
    Family.MACOS: "MacOS",
    Family.WINDOWS_NT: "Windows NT",
    Family.SUNOS: "SunOS",
    Family.UNKNOWN: "Unknown",
}


class Type(Enum):
    """Operating system type."""

    UNKNOWN = auto()
    AIX = auto()
    ALMALINUX = auto()
    ALPAQUITA = auto()
    ALPINE = auto()
    AMAZON = auto()
    ANDROID = auto()
    ARCH = auto()
    ARTIX = auto()
    CACHYOS = auto()
    CENTOS = auto()
    DEBIAN = auto()
    DRAGONFLY = auto()
    EMSCRIPTEN = auto()
    ENDEAVOUROS = auto()
    FEDORA = auto()
    FREEBSD = auto()
    GARUDA = auto()
    GENTOO = auto()
    HARDENEDBSD = auto()
    HURD = auto()
    ILLUMOS = auto()
    IOS = auto()
    KALI = auto()
    LINUX = auto()
    MABOX = auto()
    MACOS = auto()
    MANJARO = auto()
    MARINER = auto()
    MIDNIGHTBSD = auto()
    MINT = auto()
    NETBSD = auto()
    NIXOS = auto()
    NOBARA = auto()
    OPENBSD = auto()
    OPENCLOUDOS = auto()
    OPENEULER = auto()
    OPENSUSE = auto()
    ORACLE_LINUX = auto()
    POP = auto()
    RASPBIAN = auto()
    REDHAT = auto()
    REDHAT_ENTERPRISE = auto()
    REDOX = auto()
    ROCKY_LINUX = auto()
    SOLARIS = auto()
    SOLUS = auto()
    SUSE = auto()
    UBUNTU = auto()
    ULTRAMARINE = auto()
    VOID = auto()
    WINDOWS = auto()
    ZORIN = auto()

    def __str__(self) -> str:
        return _TYPE_NAMES.get(self, self.name.capitalize())

    @property
    def family(self) -> Family:
        """Family this operating system belongs to."""
        if self in _BSD_TYPES:
            return Family.BSD
        if self in _SUNOS_TYPES:
            return Family.SUNOS
        if self in _NON_LINUX_TYPES:
            return _NON_LINUX_TYPES[self]
        return Family.LINUX


_TYPE_NAMES: dict[Type, str] = {
    Type.AIX: "AIX",
    Type.ALMALINUX: "AlmaLinux",
    Type.AMAZON: "Amazon",
    Type.ARCH: "Arch Linux",
    Type.ARTIX: "Artix Linux",
    Type.CACHYOS: "CachyOS",
    Type.CENTOS: "CentOS",
    Type.DRAGONFLY: "DragonFly BSD",
    Type.ENDEAVOUROS: "EndeavourOS",
    Type.FREEBSD: "FreeBSD",
    Type.HARDENEDBSD: "HardenedBSD",
    Type.HURD: "GNU/Hurd",
    Type.ILLUMOS: "illumos",
    Type.IOS: "iOS",
    Type.MACOS: "Mac OS",
    Type.MIDNIGHTBSD: "MidnightBSD",
    Type.MINT: "Linux Mint",
    Type.NETBSD: "NetBSD",
    Type.NIXOS: "NixOS",
    Type.OPENBSD: "OpenBSD",
    Type.OPENCLOUDOS: "OpenCloudOS",
    Type.OPENEULER: "EulerOS",
    Type.OPENSUSE: "openSUSE",
    Type.ORACLE_LINUX: "Oracle Linux",
    Type.POP: "Pop!_OS",
    Type.REDHAT: "Red Hat Linux",
    Type.REDHAT_ENTERPRISE: "Red Hat Enterprise Linux",
    Type.ROCKY_LINUX: "Rocky Linux",
    Type.SUSE: "SUSE Linux Enterprise Server",
}

_BSD_TYPES = frozenset(
    {
        Type.DRAGONFLY,
        Type.FREEBSD,
        Type.HARDENEDBSD,
        Type.MIDNIGHTBSD,
        Type.NETBSD,
        Type.OPENBSD,
    }
)

_SUNOS_TYPES = frozenset({Type.ILLUMOS, Type.SOLARIS})

# Everything not listed here (or above) is a Linux distribution.
_NON_LINUX_TYPES: dict[Type, Family] = {
    Type.UNKNOWN: Family.UNKNOWN,
    Type.AIX: Family.UNKNOWN,
    Type.EMSCRIPTEN: Family.UNKNOWN,
    Type.HURD: Family.UNKNOWN,
    Type.REDOX: Family.UNKNOWN,
    Type.IOS: Family.MACOS,
    Type.MACOS: Family.MACOS,
    Type.WINDOWS: Family.WINDOWS_NT,
}
