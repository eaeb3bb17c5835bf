# SPDX-License-Identifier: MIT
"""macOS probe.

The product version comes from SystemVersion.plist; `sw_vers` is only run
when the plist is missing or malformed.
"""

from __future__ import annotations

import logging
import plistlib
from dataclasses import dataclass, field
from pathlib import Path
from xml.parsers.expat import ExpatError

from os_info import architecture, bitness
from os_info.info import Info
from os_info.matcher import PrefixedVersion
from os_info.os_type import Type
from os_info.process import CommandRunner, DefaultCommandRunner, output
from os_info.version import UnknownVersion, Version

__all__ = ["SYSTEM_VERSION_PLIST", "MacosProbe", "parse_sw_vers"]

log = logging.getLogger(__name__)

SYSTEM_VERSION_PLIST = Path("/System/Library/CoreServices/SystemVersion.plist")


@dataclass(frozen=True, slots=True)
class MacosProbe:
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)
    plist_path: Path = SYSTEM_VERSION_PLIST

    def detect(self) -> Info:
        log.debug("macos probe is called")

        arch = architecture.detect(self.runner)
        product_version = self.product_version()
        info = Info(
            os_type=Type.MACOS,
            version=(
                Version.from_string(product_version) if product_version else UnknownVersion()
            ),
            bitness=bitness.from_architecture(arch, self.runner),
            architecture=arch,
        )
        log.debug("Returning %r", info)
        return info

    def product_version(self) -> str | None:
        version = self._plist_version()
        if version is not None:
            log.debug("ProductVersion from %s: %r", self.plist_path, version)
            return version

        stdout = output(["sw_vers"], self.runner)
        if stdout is None:
            log.warning("sw_vers is unavailable")
            return None
        return parse_sw_vers(stdout)

    def _plist_version(self) -> str | None:
        try:
            with self.plist_path.open("rb") as f:
                data = plistlib.load(f)
        except (OSError, ValueError, ExpatError) as e:
            log.warning("Failed to parse %s: %s", self.plist_path, e)
            return None

        version = data.get("ProductVersion") if isinstance(data, dict) else None
        if not isinstance(version, str):
            log.warning("Failed to get ProductVersion from %s", self.plist_path)
            return None
        return version


def parse_sw_vers(text: str) -> str | None:
    """Extract the product version from `sw_vers` output."""
    return PrefixedVersion("ProductVersion:").find(text)
