# SPDX-License-Identifier: MIT
"""Emscripten, Redox and the catch-all probe for unsupported targets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from os_info.info import Info
from os_info.os_type import Type
from os_info.version import Custom, UnknownVersion

__all__ = ["EmscriptenProbe", "RedoxProbe", "UnknownProbe"]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EmscriptenProbe:
    def detect(self) -> Info:
        log.debug("emscripten probe is called")
        return Info.with_type(Type.EMSCRIPTEN)


@dataclass(frozen=True, slots=True)
class RedoxProbe:
    uname_path: Path = Path("sys:uname")

    def detect(self) -> Info:
        log.debug("redox probe is called")
        try:
            uname = self.uname_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Unable to read %s: %s", self.uname_path, e)
            uname = ""

        info = Info(
            os_type=Type.REDOX,
            version=Custom(uname) if uname else UnknownVersion(),
        )
        log.debug("Returning %r", info)
        return info


@dataclass(frozen=True, slots=True)
class UnknownProbe:
    def detect(self) -> Info:
        log.debug("unknown probe is called")
        return Info.unknown()
