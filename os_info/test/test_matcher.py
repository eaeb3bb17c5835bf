from __future__ import annotations

import pytest

from os_info.matcher import AllTrimmed, KeyValue, PrefixedVersion, PrefixedWord

SW_VERS = "ProductName:\tMac OS X\nProductVersion:\t10.10.5\nBuildVersion:\t14F27"


def test_all_trimmed_strips_surrounding_whitespace() -> None:
    assert AllTrimmed().find("  3.12.0\n") == "3.12.0"


def test_all_trimmed_returns_empty_string_for_empty_input() -> None:
    assert AllTrimmed().find("") == ""
    assert AllTrimmed().find(" \n\t") == ""


def test_prefixed_word_returns_next_word() -> None:
    assert PrefixedWord("release").find("Fedora release 26 (Twenty Six)") == "26"
    assert PrefixedWord("ProductVersion:").find(SW_VERS) == "10.10.5"


def test_prefixed_word_uses_first_occurrence() -> None:
    assert PrefixedWord("release").find("release 1 release 2") == "1"


def test_prefixed_word_missing_prefix() -> None:
    assert PrefixedWord("release").find("Alpine 3.12") is None


def test_prefixed_word_at_end_of_text_is_empty() -> None:
    assert PrefixedWord("release").find("Fedora release") == ""


@pytest.mark.parametrize("text", ["ProductVersion: .15", "ProductVersion: 10.", "ProductVersion: ."])
def test_prefixed_version_rejects_dot_bounded_words(text: str) -> None:
    assert PrefixedVersion("ProductVersion:").find(text) is None
    assert PrefixedWord("ProductVersion:").find(text) is not None


def test_prefixed_version_accepts_regular_versions() -> None:
    assert PrefixedVersion("CBL-Mariner").find("CBL-Mariner 2.0.20220210") == "2.0.20220210"
    assert PrefixedVersion("release").find("CentOS Linux release 7.9.2009 (Core)") == "7.9.2009"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('VERSION_ID="18.10"', "18.10"),
        ("VERSION_ID=18.10", "18.10"),
        ("VERSION_ID='18.10'", "18.10"),
        ('NAME="Ubuntu"\nVERSION_ID="18.10"\n', "18.10"),
        ('VERSION_ID=""', ""),
    ],
)
def test_key_value(text: str, expected: str) -> None:
    assert KeyValue("VERSION_ID").find(text) == expected


def test_key_value_matches_whole_key() -> None:
    text = 'VERSION_ID="8.1"\nID_LIKE="fedora"\nID="ol"\n'
    assert KeyValue("ID").find(text) == "ol"


def test_key_value_missing_key() -> None:
    assert KeyValue("VERSION_ID").find('ID=arch\nBUILD_ID=rolling\n') is None
