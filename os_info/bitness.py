# SPDX-License-Identifier: MIT
"""Processor word width detection."""

from __future__ import annotations

import logging
import sys
from enum import Enum, auto

from os_info.process import CommandRunner, output

__all__ = ["Bitness", "detect", "from_architecture", "interpreter_bitness"]

log = logging.getLogger(__name__)


class Bitness(Enum):
    """Word width the operating system runs as."""

    UNKNOWN = auto()
    X32 = auto()
    X64 = auto()

    def __str__(self) -> str:
        return {
            Bitness.UNKNOWN: "unknown bitness",
            Bitness.X32: "32-bit",
            Bitness.X64: "64-bit",
        }[self]


_ARCH_BITNESS: dict[str, Bitness] = {
    "x86_64": Bitness.X64,
    "amd64": Bitness.X64,
    "arm64": Bitness.X64,
    "aarch64": Bitness.X64,
    "ppc64": Bitness.X64,
    "ppc64le": Bitness.X64,
    "riscv64": Bitness.X64,
    "s390x": Bitness.X64,
    "i386": Bitness.X32,
    "i686": Bitness.X32,
    "x86": Bitness.X32,
    "arm": Bitness.X32,
    "armv7l": Bitness.X32,
}


def interpreter_bitness() -> Bitness:
    """Bitness of the running interpreter (pointer size)."""
    return Bitness.X64 if sys.maxsize > 2**32 else Bitness.X32


def detect(runner: CommandRunner | None = None) -> Bitness:
    """Detect bitness on Unix-like systems via `getconf LONG_BIT`.

    Falls back to the interpreter's pointer size when getconf is unavailable
    or prints something unexpected.
    """
    stdout = output(["getconf", "LONG_BIT"], runner)
    match stdout.strip() if stdout else None:
        case "64":
            return Bitness.X64
        case "32":
            return Bitness.X32
        case value:
            if value:
                log.warning("Unexpected getconf LONG_BIT output: %r", value)
            return interpreter_bitness()


def from_architecture(architecture: str | None, runner: CommandRunner | None = None) -> Bitness:
    """Derive bitness from a machine architecture string (e.g. "arm64")."""
    if architecture:
        known = _ARCH_BITNESS.get(architecture.lower())
        if known is not None:
            return known
    return detect(runner)
