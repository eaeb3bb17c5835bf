# SPDX-License-Identifier: MIT
"""Detect the running operating system: type, version, bitness and family.

Example:
    str(os_info.get()) -> "Ubuntu 22.4.0 (jammy) [64-bit]"
"""

from __future__ import annotations

import logging

from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Family, Type
from os_info.version import Custom, Rolling, Semantic, UnknownVersion, Version

__version__ = "1.0.0"

__all__ = [
    "Bitness",
    "Custom",
    "Family",
    "Info",
    "Rolling",
    "Semantic",
    "Type",
    "UnknownVersion",
    "Version",
    "__version__",
    "get",
]

log = logging.getLogger(__name__)


def get() -> Info:
    """Return information about the running operating system.

    Never raises: whatever cannot be determined is reported as unknown.
    """
    from os_info.platform import current_probe

    try:
        return current_probe().detect()
    except Exception:
        log.exception("OS detection failed")
        return Info.unknown()
