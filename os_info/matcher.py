# SPDX-License-Identifier: MIT
"""Value extraction from loosely structured text.

All release-file, command-output and plist fallbacks parse text through one
of these matchers instead of ad hoc patterns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "AllTrimmed",
    "KeyValue",
    "Matcher",
    "PrefixedVersion",
    "PrefixedWord",
]


class Matcher(Protocol):
    def find(self, text: str) -> str | None: ...


@dataclass(frozen=True, slots=True)
class AllTrimmed:
    """The whole input with surrounding whitespace removed (may be empty)."""

    def find(self, text: str) -> str | None:
        return text.strip()


@dataclass(frozen=True, slots=True)
class PrefixedWord:
    """The word following the first occurrence of `prefix`.

    Example: PrefixedWord("release").find("Fedora release 26 (Twenty Six)") -> "26"
    """

    prefix: str

    def find(self, text: str) -> str | None:
        return _find_prefixed_word(text, self.prefix)


@dataclass(frozen=True, slots=True)
class PrefixedVersion:
    """Like `PrefixedWord`, but rejects words that start or end with a dot."""

    prefix: str

    def find(self, text: str) -> str | None:
        word = _find_prefixed_word(text, self.prefix)
        if word is None or not _is_valid_version(word):
            return None
        return word


@dataclass(frozen=True, slots=True)
class KeyValue:
    """The value of a `KEY=value` or `KEY="value"` line.

    Example: KeyValue("VERSION_ID").find('VERSION_ID="18.10"') -> "18.10"
    """

    key: str

    def find(self, text: str) -> str | None:
        for line in text.splitlines():
            name, sep, value = line.strip().partition("=")
            if not sep or name.strip() != self.key:
                continue
            return _unquote(value.strip())
        return None


def _find_prefixed_word(text: str, prefix: str) -> str | None:
    start = text.find(prefix)
    if start == -1:
        return None

    rest = text[start + len(prefix) :].lstrip()
    words = rest.split(maxsplit=1)
    return words[0] if words else ""


def _is_valid_version(word: str) -> bool:
    return not word.startswith(".") and not word.endswith(".")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value
