# SPDX-License-Identifier: MIT
"""Android and iOS probes."""

from __future__ import annotations

import logging
import platform as _platform
from dataclasses import dataclass

from os_info.bitness import interpreter_bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.version import UnknownVersion, Version

__all__ = ["AndroidProbe", "IosProbe"]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AndroidProbe:
    def detect(self) -> Info:
        log.debug("android probe is called")
        info = Info.with_type(Type.ANDROID)
        log.debug("Returning %r", info)
        return info


@dataclass(frozen=True, slots=True)
class IosProbe:
    def detect(self) -> Info:
        log.debug("ios probe is called")
        info = Info(
            os_type=Type.IOS,
            version=self.version(),
            bitness=interpreter_bitness(),
            architecture=_platform.machine() or None,
        )
        log.debug("Returning %r", info)
        return info

    def version(self) -> Version:
        # platform.ios_ver() is only provided by iOS builds of Python 3.13+.
        ios_ver = getattr(_platform, "ios_ver", None)
        if ios_ver is None:
            return UnknownVersion()
        release = ios_ver().release
        return Version.from_string(release) if release else UnknownVersion()
