from __future__ import annotations

import pytest

import os_info
from os_info import platform as probes
from os_info.bitness import Bitness
from os_info.info import Info
from os_info.os_type import Type
from os_info.platform import probe_for
from os_info.platform.bsd import DragonFlyProbe, FreeBSDProbe, NetBSDProbe, OpenBSDProbe
from os_info.platform.linux import LinuxProbe
from os_info.platform.macos import MacosProbe
from os_info.platform.mobile import AndroidProbe, IosProbe
from os_info.platform.other import EmscriptenProbe, RedoxProbe, UnknownProbe
from os_info.platform.unix import AixProbe, HurdProbe, SunOSProbe
from os_info.platform.windows import WindowsProbe


@pytest.mark.parametrize(
    ("system", "probe_type"),
    [
        ("linux", LinuxProbe),
        ("darwin", MacosProbe),
        ("win32", WindowsProbe),
        ("cygwin", WindowsProbe),
        ("freebsd13", FreeBSDProbe),
        ("openbsd7", OpenBSDProbe),
        ("netbsd9", NetBSDProbe),
        ("dragonfly6", DragonFlyProbe),
        ("sunos5", SunOSProbe),
        ("gnu0", HurdProbe),
        ("aix7", AixProbe),
        ("android", AndroidProbe),
        ("ios", IosProbe),
        ("emscripten", EmscriptenProbe),
        ("redox", RedoxProbe),
        ("wasi", UnknownProbe),
        ("plan9", UnknownProbe),
    ],
)
def test_probe_for(system: str, probe_type: type) -> None:
    assert isinstance(probe_for(system), probe_type)


class StaticProbe:
    def __init__(self, info: Info):
        self.calls = 0
        self._info = info

    def detect(self) -> Info:
        self.calls += 1
        return self._info


class BrokenProbe:
    def detect(self) -> Info:
        raise RuntimeError("boom")


def test_get_runs_detection_on_every_call(monkeypatch: pytest.MonkeyPatch) -> None:
    probe = StaticProbe(Info(os_type=Type.DEBIAN, bitness=Bitness.X64))
    monkeypatch.setattr(probes, "current_probe", lambda: probe)

    assert os_info.get() == os_info.get()
    assert probe.calls == 2


def test_get_never_raises(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(probes, "current_probe", lambda: BrokenProbe())

    assert os_info.get() == Info.unknown()
    assert "OS detection failed" in caplog.text


def test_get_on_this_machine() -> None:
    info = os_info.get()

    assert isinstance(info, Info)
    assert str(info).endswith("]")
    assert info == os_info.get()
