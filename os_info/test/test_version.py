from __future__ import annotations

import dataclasses

import pytest

from os_info.version import Custom, Rolling, Semantic, UnknownVersion, Version, parse_semantic


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", Semantic(1, 0, 0)),
        ("18.10", Semantic(18, 10, 0)),
        ("1.2.3", Semantic(1, 2, 3)),
        (" 3.12.0\n", Semantic(3, 12, 0)),
        ("1.2.", Semantic(1, 2, 0)),
        ("2.0.20220210", Semantic(2, 0, 20220210)),
    ],
)
def test_from_string_semantic(text: str, expected: Version) -> None:
    assert Version.from_string(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "XX",
        "A.B.C",
        "1.2.3.4",
        "21.05pre275822",
        "2018.03.0.20190826",
        "-1",
        "1..2",
        ".1",
        "١٢",
    ],
)
def test_from_string_custom_keeps_text_verbatim(text: str) -> None:
    assert Version.from_string(text) == Custom(text)


def test_parse_semantic_pads_missing_components() -> None:
    assert parse_semantic("7") == (7, 0, 0)
    assert parse_semantic("7.1") == (7, 1, 0)
    assert parse_semantic("7.x") is None


@pytest.mark.parametrize(
    ("version", "text"),
    [
        (UnknownVersion(), "Unknown"),
        (Semantic(22, 4, 0), "22.4.0"),
        (Semantic(1), "1.0.0"),
        (Rolling(), "Rolling Release"),
        (Rolling("20220715"), "Rolling Release (20220715)"),
        (Custom("Tumbleweed"), "Tumbleweed"),
    ],
)
def test_str(version: Version, text: str) -> None:
    assert str(version) == text


def test_is_known() -> None:
    assert not UnknownVersion().is_known
    assert Semantic(1).is_known
    assert Rolling().is_known
    assert Custom("").is_known


def test_versions_are_immutable_values() -> None:
    version = Semantic(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        version.major = 2  # type: ignore[misc]

    assert Semantic(1, 2, 3) == Semantic(1, 2, 3)
    assert Custom("1") != Semantic(1)
    assert UnknownVersion() == UnknownVersion()
    assert len({Semantic(1), Semantic(1, 0, 0)}) == 1
