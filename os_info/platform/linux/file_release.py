# SPDX-License-Identifier: MIT
"""Release-file based Linux distribution detection.

Walks a fixed, ordered table of release files. The generic os-release file
comes first since nearly every current distribution ships it; the legacy
single-distribution files follow for older systems.

The first file whose type rule recognises the distribution wins. A file that
exists but names an unknown distribution falls through to the next entry; a
recognised distribution with an unparseable version still wins, with an
unknown version.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from os_info.config import load_settings
from os_info.info import Info
from os_info.matcher import AllTrimmed, KeyValue, Matcher, PrefixedVersion
from os_info.os_type import Type
from os_info.version import Rolling, UnknownVersion, Version

__all__ = ["DISTRIBUTIONS", "OS_RELEASE_IDS", "ReleaseInfo", "get", "retrieve"]

log = logging.getLogger(__name__)

TypeRule = Callable[[str], Type | None]
VersionRule = Callable[[str], Version | None]
TextRule = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """How to read one release file.

    Attributes:
        path: Absolute path of the release file
        os_type: Recognises the distribution from the file contents
        version: Extracts the version
        edition: Extracts the edition (product variant)
        codename: Extracts the release codename
    """

    path: str
    os_type: TypeRule
    version: VersionRule
    edition: TextRule = lambda _: None
    codename: TextRule = lambda _: None


# Values of the os-release ID key, see os-release(5).
OS_RELEASE_IDS: dict[str, Type] = {
    "almalinux": Type.ALMALINUX,
    "alpaquita": Type.ALPAQUITA,
    "alpine": Type.ALPINE,
    "amzn": Type.AMAZON,
    "arch": Type.ARCH,
    "archarm": Type.ARCH,
    "artix": Type.ARTIX,
    "cachyos": Type.CACHYOS,
    "centos": Type.CENTOS,
    "debian": Type.DEBIAN,
    "endeavouros": Type.ENDEAVOUROS,
    "fedora": Type.FEDORA,
    "garuda": Type.GARUDA,
    "gentoo": Type.GENTOO,
    "kali": Type.KALI,
    "linuxmint": Type.MINT,
    "mabox": Type.MABOX,
    "manjaro": Type.MANJARO,
    "manjaro-arm": Type.MANJARO,
    "mariner": Type.MARINER,
    "nixos": Type.NIXOS,
    "nobara": Type.NOBARA,
    "ol": Type.ORACLE_LINUX,
    "opencloudos": Type.OPENCLOUDOS,
    "openEuler": Type.OPENEULER,
    "opensuse": Type.OPENSUSE,
    "opensuse-leap": Type.OPENSUSE,
    "opensuse-tumbleweed": Type.OPENSUSE,
    "pop": Type.POP,
    "raspbian": Type.RASPBIAN,
    "rhel": Type.REDHAT_ENTERPRISE,
    "rocky": Type.ROCKY_LINUX,
    "sled": Type.SUSE,  # SUSE desktop
    "sles": Type.SUSE,
    "sles_sap": Type.SUSE,  # SUSE SAP
    "solus": Type.SOLUS,
    "ubuntu": Type.UBUNTU,
    "ultramarine": Type.ULTRAMARINE,
    "void": Type.VOID,
    "zorin": Type.ZORIN,
}

# Distributions without release numbers; their os-release has no VERSION_ID.
_ROLLING_TYPES = frozenset(
    {
        Type.ARCH,
        Type.ARTIX,
        Type.CACHYOS,
        Type.ENDEAVOUROS,
        Type.GARUDA,
        Type.GENTOO,
        Type.MANJARO,
        Type.VOID,
    }
)


def _fixed(os_type: Type) -> TypeRule:
    return lambda _: os_type


def _version(matcher: Matcher) -> VersionRule:
    def rule(release: str) -> Version | None:
        found = matcher.find(release)
        return Version.from_string(found) if found is not None else None

    return rule


def _os_release_type(release: str) -> Type | None:
    os_id = KeyValue("ID").find(release)
    if os_id is None:
        return None
    return OS_RELEASE_IDS.get(os_id)


def _os_release_version(release: str) -> Version | None:
    version_id = KeyValue("VERSION_ID").find(release)
    if version_id is not None:
        return Version.from_string(version_id)

    if _os_release_type(release) in _ROLLING_TYPES:
        build_id = KeyValue("BUILD_ID").find(release)
        return Rolling(build_id if build_id and build_id != "rolling" else None)
    return None


def _non_empty(key: str) -> TextRule:
    def rule(release: str) -> str | None:
        return KeyValue(key).find(release) or None

    return rule


DISTRIBUTIONS: tuple[ReleaseInfo, ...] = (
    ReleaseInfo(
        path="/etc/os-release",
        os_type=_os_release_type,
        version=_os_release_version,
        edition=_non_empty("VARIANT"),
        codename=_non_empty("VERSION_CODENAME"),
    ),
    ReleaseInfo(
        path="/etc/mariner-release",
        os_type=_fixed(Type.MARINER),
        version=_version(PrefixedVersion("CBL-Mariner")),
    ),
    ReleaseInfo(
        path="/etc/centos-release",
        os_type=_fixed(Type.CENTOS),
        version=_version(PrefixedVersion("release")),
    ),
    ReleaseInfo(
        path="/etc/fedora-release",
        os_type=_fixed(Type.FEDORA),
        version=_version(PrefixedVersion("release")),
    ),
    ReleaseInfo(
        path="/etc/alpine-release",
        os_type=_fixed(Type.ALPINE),
        version=_version(AllTrimmed()),
    ),
    ReleaseInfo(
        path="/etc/redhat-release",
        os_type=_fixed(Type.REDHAT_ENTERPRISE),
        version=_version(PrefixedVersion("release")),
    ),
)


def get(root: Path | None = None) -> Info | None:
    """Identify the distribution from release files under `root`."""
    if root is None:
        root = load_settings().root
    return retrieve(DISTRIBUTIONS, root)


def retrieve(distributions: tuple[ReleaseInfo, ...], root: Path = Path("/")) -> Info | None:
    """Return info from the first release file that names a known distribution."""
    for release_info in distributions:
        path = root / release_info.path.lstrip("/")

        if not path.exists():
            log.debug("Path '%s' doesn't exist", path)
            continue

        try:
            release = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Unable to read %s: %s", path, e)
            continue

        os_type = release_info.os_type(release)
        if os_type is None:
            log.debug("%s doesn't name a known distribution", path)
            continue

        version = release_info.version(release)
        return Info(
            os_type=os_type,
            version=version if version is not None else UnknownVersion(),
            edition=release_info.edition(release),
            codename=release_info.codename(release),
        )

    return None
