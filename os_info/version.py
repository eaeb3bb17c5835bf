# SPDX-License-Identifier: MIT
"""Operating system version values.

A version is one of four immutable shapes:

- `UnknownVersion()` when no source reported anything usable
- `Semantic(major, minor, patch)` for plain dotted integers
- `Rolling(date)` for rolling-release distributions
- `Custom(value)` for anything else, kept verbatim
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Custom",
    "Rolling",
    "Semantic",
    "UnknownVersion",
    "Version",
    "parse_semantic",
]


@dataclass(frozen=True, slots=True)
class Version:
    """Base of all version shapes. Use `Version.from_string` to parse text."""

    @staticmethod
    def from_string(text: str) -> Version:
        """Build a version from free-form text.

        Returns `Semantic` when the text is one to three dot-separated integers
        (missing components default to 0), otherwise `Custom` holding the text
        unmodified. Never raises.

        Example:
            Version.from_string("18.10") -> Semantic(18, 10, 0)
            Version.from_string("21.05pre275822") -> Custom("21.05pre275822")
        """
        parsed = parse_semantic(text)
        if parsed is None:
            return Custom(text)
        return Semantic(*parsed)

    @property
    def is_known(self) -> bool:
        return not isinstance(self, UnknownVersion)


@dataclass(frozen=True, slots=True)
class UnknownVersion(Version):
    def __str__(self) -> str:
        return "Unknown"


@dataclass(frozen=True, slots=True)
class Semantic(Version):
    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True, slots=True)
class Rolling(Version):
    date: str | None = None

    def __str__(self) -> str:
        if self.date:
            return f"Rolling Release ({self.date})"
        return "Rolling Release"


@dataclass(frozen=True, slots=True)
class Custom(Version):
    value: str

    def __str__(self) -> str:
        return self.value


def parse_semantic(text: str) -> tuple[int, int, int] | None:
    """Parse "1", "1.2" or "1.2.3" into a (major, minor, patch) tuple.

    Surrounding whitespace and a single trailing dot are tolerated ("1.2." is
    (1, 2, 0)). Returns None for anything else.
    """
    parts = text.strip().split(".")
    if parts[-1] == "":
        parts.pop()
    if not 1 <= len(parts) <= 3:
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None

    numbers = [int(part) for part in parts] + [0, 0]
    return numbers[0], numbers[1], numbers[2]
