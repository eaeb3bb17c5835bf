# SPDX-License-Identifier: MIT
"""External command execution.

Every command a probe runs (uname, sw_vers, lsb_release, sysctl, getconf)
goes through a `CommandRunner`, so probes can be exercised with fake runners.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

__all__ = [
    "CommandRunner",
    "DefaultCommandRunner",
    "output",
    "succeeds",
    "uname",
]

log = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run a command and capture its output.

        Raises OSError when the executable cannot be started.
        """
        ...


@dataclass(frozen=True, slots=True)
class DefaultCommandRunner:
    """Runs commands with `subprocess.run`, decoding output leniently."""

    def run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            args,
            text=True,
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )


def output(args: list[str], runner: CommandRunner | None = None) -> str | None:
    """Return stdout of a successful command, or None.

    A missing executable or a non-zero exit status is a normal negative
    result, not an error.
    """
    runner = runner or DefaultCommandRunner()
    try:
        result = runner.run(args)
    except OSError as e:
        log.debug("%s could not be started: %s", args[0], e)
        return None

    if result.returncode != 0:
        log.debug("%s exited with code %d", " ".join(args), result.returncode)
        return None

    log.debug("%s returned %r", " ".join(args), result.stdout)
    return result.stdout


def succeeds(args: list[str], runner: CommandRunner | None = None) -> bool:
    """Check whether a command runs and exits with status 0."""
    return output(args, runner) is not None


def uname(flag: str, runner: CommandRunner | None = None) -> str | None:
    """Run `uname <flag>` and return its trimmed output (None if empty)."""
    stdout = output(["uname", flag], runner)
    if stdout is None:
        return None
    return stdout.strip() or None
