# SPDX-License-Identifier: MIT
"""Distribution detection through the `lsb_release` tool."""

from __future__ import annotations

import re
from dataclasses import dataclass

from os_info.info import Info
from os_info.os_type import Type
from os_info.process import CommandRunner, output
from os_info.version import Rolling, UnknownVersion, Version

__all__ = ["DISTRIBUTORS", "LsbRelease", "get", "parse"]

# An empty field must not capture the label on the next line.
_DISTRIBUTOR_RE = re.compile(r"Distributor ID:[^\S\n]+(\w+)")
_RELEASE_RE = re.compile(r"Release:[^\S\n]+(\S+)")
_CODENAME_RE = re.compile(r"Codename:[^\S\n]+(\S+)")

# Values of "Distributor ID" as printed by lsb_release.
DISTRIBUTORS: dict[str, Type] = {
    "AlmaLinux": Type.ALMALINUX,
    "Alpine": Type.ALPINE,
    "Amazon": Type.AMAZON,
    "AmazonAMI": Type.AMAZON,
    "Arch": Type.ARCH,
    "Artix": Type.ARTIX,
    "CentOS": Type.CENTOS,
    "Debian": Type.DEBIAN,
    "EndeavourOS": Type.ENDEAVOUROS,
    "Fedora": Type.FEDORA,
    "Garuda": Type.GARUDA,
    "Gentoo": Type.GENTOO,
    "Kali": Type.KALI,
    "Linuxmint": Type.MINT,
    "ManjaroLinux": Type.MANJARO,
    "MarinerLinux": Type.MARINER,
    "NixOS": Type.NIXOS,
    "Nobara": Type.NOBARA,
    "OracleServer": Type.ORACLE_LINUX,
    "Pop": Type.POP,
    "Raspbian": Type.RASPBIAN,
    "RedHatEnterprise": Type.REDHAT_ENTERPRISE,
    "RedHatEnterpriseServer": Type.REDHAT_ENTERPRISE,
    "RedHatEnterpriseWorkstation": Type.REDHAT_ENTERPRISE,
    "Rocky": Type.ROCKY_LINUX,
    "SUSE": Type.SUSE,
    "Solus": Type.SOLUS,
    "Ubuntu": Type.UBUNTU,
    "Ultramarine": Type.ULTRAMARINE,
    "VoidLinux": Type.VOID,
    "Zorin": Type.ZORIN,
    "openEuler": Type.OPENEULER,
    "openSUSE": Type.OPENSUSE,
}


@dataclass(frozen=True, slots=True)
class LsbRelease:
    distribution: str | None = None
    version: str | None = None
    codename: str | None = None


def get(runner: CommandRunner | None = None) -> Info | None:
    """Identify the distribution via `lsb_release -a`.

    Returns None when the tool is missing or fails; an unrecognised
    distributor is reported as generic Linux. The raw release token from
    `parse` is normalized here ("22.04" -> Semantic(22, 4, 0)).
    """
    stdout = output(["lsb_release", "-a"], runner)
    if stdout is None:
        return None

    release = parse(stdout)
    os_type = DISTRIBUTORS.get(release.distribution or "", Type.LINUX)
    return Info(
        os_type=os_type,
        version=_version(release.version),
        codename=release.codename,
    )


def parse(text: str) -> LsbRelease:
    """Parse `lsb_release -a` output. Missing fields are None."""
    codename = _first_group(_CODENAME_RE, text)
    return LsbRelease(
        distribution=_first_group(_DISTRIBUTOR_RE, text),
        version=_first_group(_RELEASE_RE, text),
        codename=codename if codename and codename.lower() != "n/a" else None,
    )


def _first_group(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def _version(release: str | None) -> Version:
    if release is None or release.lower() == "n/a":
        return UnknownVersion()
    if release.lower() == "rolling":
        return Rolling()
    return Version.from_string(release)
