# SPDX-License-Identifier: MIT
"""The identification record returned by `os_info.get()`."""

from __future__ import annotations

from dataclasses import dataclass, field

from os_info.bitness import Bitness
from os_info.os_type import Family, Type
from os_info.version import UnknownVersion, Version

__all__ = ["Info"]


@dataclass(frozen=True, slots=True)
class Info:
    """Operating system information.

    Built once per query and never mutated; use `dataclasses.replace` to
    derive a copy with different fields.

    Attributes:
        os_type: Operating system or distribution
        version: Version (Unknown when no source reported one)
        edition: Product variant, when a source supplies one
        codename: Release nickname, when a source supplies one
        bitness: Word width the OS runs as
        architecture: Machine architecture string (e.g. "x86_64")
    """

    os_type: Type = Type.UNKNOWN
    version: Version = field(default_factory=UnknownVersion)
    edition: str | None = None
    codename: str | None = None
    bitness: Bitness = Bitness.UNKNOWN
    architecture: str | None = None

    @classmethod
    def unknown(cls) -> Info:
        return cls()

    @classmethod
    def with_type(cls, os_type: Type) -> Info:
        return cls(os_type=os_type)

    @property
    def family(self) -> Family:
        return self.os_type.family

    def to_dict(self) -> dict[str, str | None]:
        """Plain representation used for JSON output."""
        return {
            "type": str(self.os_type),
            "version": str(self.version),
            "edition": self.edition,
            "codename": self.codename,
            "bitness": str(self.bitness),
            "architecture": self.architecture,
            "family": str(self.family),
        }

    def __str__(self) -> str:
        text = str(self.os_type)
        if self.edition:
            text += f" ({self.edition})"
        if self.version.is_known:
            text += f" {self.version}"
        if self.codename:
            text += f" ({self.codename})"
        return f"{text} [{self.bitness}]"
