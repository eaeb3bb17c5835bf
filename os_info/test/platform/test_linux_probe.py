from __future__ import annotations

from pathlib import Path

import pytest

from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.platform.linux import LinuxProbe, file_release
from os_info.test.runners import FakeRunner
from os_info.version import Semantic, UnknownVersion

MACHINE = {("getconf", "LONG_BIT"): "64\n", ("uname", "-m"): "x86_64\n"}

LSB_UBUNTU = "Distributor ID:\tUbuntu\nRelease:\t22.04\nCodename:\tjammy\n"


def write_os_release(root: Path, contents: str) -> None:
    (root / "etc").mkdir(parents=True, exist_ok=True)
    (root / "etc" / "os-release").write_text(contents, encoding="utf-8")


def test_lsb_release_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(root: Path | None = None) -> Info | None:
        raise AssertionError("release files must not be read when lsb_release succeeds")

    monkeypatch.setattr(file_release, "get", fail)
    runner = FakeRunner({("lsb_release", "-a"): LSB_UBUNTU, **MACHINE})

    info = LinuxProbe(runner=runner, root=tmp_path).detect()

    assert info == Info(
        os_type=Type.UBUNTU,
        version=Semantic(22, 4, 0),
        codename="jammy",
        bitness=Bitness.X64,
        architecture="x86_64",
    )


def test_falls_back_to_release_files(tmp_path: Path) -> None:
    write_os_release(tmp_path, 'ID="rhel"\nVERSION_ID="8.2"\n')

    info = LinuxProbe(runner=FakeRunner(MACHINE), root=tmp_path).detect()

    assert info == Info(
        os_type=Type.REDHAT_ENTERPRISE,
        version=Semantic(8, 2, 0),
        bitness=Bitness.X64,
        architecture="x86_64",
    )


def test_failed_lsb_release_falls_back(tmp_path: Path) -> None:
    write_os_release(tmp_path, "ID=alpine\nVERSION_ID=3.12.0\n")
    runner = FakeRunner({("lsb_release", "-a"): (1, ""), **MACHINE})

    info = LinuxProbe(runner=runner, root=tmp_path).detect()

    assert info.os_type is Type.ALPINE


def test_nothing_found_is_generic_linux(tmp_path: Path) -> None:
    info = LinuxProbe(runner=FakeRunner(MACHINE), root=tmp_path).detect()

    assert info == Info(
        os_type=Type.LINUX,
        version=UnknownVersion(),
        bitness=Bitness.X64,
        architecture="x86_64",
    )


def test_detect_is_repeatable(tmp_path: Path) -> None:
    write_os_release(tmp_path, "ID=debian\nVERSION_ID=12\nVERSION_CODENAME=bookworm\n")
    probe = LinuxProbe(runner=FakeRunner(MACHINE), root=tmp_path)

    assert probe.detect() == probe.detect()


def test_legacy_fedora_release_without_lsb_release(tmp_path: Path) -> None:
    (tmp_path / "etc").mkdir()
    (tmp_path / "etc" / "fedora-release").write_text(
        "Fedora release 26 (Twenty Six)\n", encoding="utf-8"
    )

    info = LinuxProbe(runner=FakeRunner(MACHINE), root=tmp_path).detect()

    assert info == Info(
        os_type=Type.FEDORA,
        version=Semantic(26, 0, 0),
        bitness=Bitness.X64,
        architecture="x86_64",
    )
    assert str(info) == "Fedora 26.0.0 [64-bit]"
