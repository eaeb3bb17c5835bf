# SPDX-License-Identifier: MIT
"""os-info command - print information about the running operating system."""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from os_info import __version__, get
from os_info.config import load_settings
from os_info.info import Info

app = typer.Typer(add_completion=False, no_args_is_help=False)

console = Console(highlight=False, soft_wrap=True)

log = logging.getLogger("os_info.cli")

ALL_FIELDS = ("type", "version", "edition", "codename", "bitness", "architecture", "family")

# Labels for the fields that can be requested one by one.
_SINGLE_LABELS: dict[str, str] = {
    "type": "OS type",
    "version": "OS version",
    "bitness": "OS bitness",
    "architecture": "OS architecture",
    "family": "OS family",
}


def _value(info: Info, name: str) -> str:
    value = info.to_dict()[name]
    return value if value else "Unknown"


def render_all(info: Info) -> list[str]:
    lines = ["OS information:"]
    for name in ALL_FIELDS:
        lines.append(f"{name.capitalize()}: {_value(info, name)}")
    return lines


def render_selected(info: Info, names: list[str]) -> list[str]:
    return [f"{_SINGLE_LABELS[name]}: {_value(info, name)}" for name in names]


def _log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    name = load_settings().log_level
    level = logging.getLevelName(name) if name else logging.WARNING
    # getLevelName() maps unknown names to a "Level X" string.
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(verbose: bool) -> None:
    level = _log_level(verbose)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def show(
    all_: bool = typer.Option(False, "--all", help="Show all OS information."),
    type_: bool = typer.Option(False, "--type", "-t", help="Show OS type."),
    os_version: bool = typer.Option(False, "--os-version", "-v", help="Show OS version."),
    bitness: bool = typer.Option(False, "--bitness", "-b", help="Show OS bitness."),
    family: bool = typer.Option(False, "--family", "-f", help="Show OS family."),
    architecture: bool = typer.Option(
        False, "--architecture", "-a", help="Show OS architecture."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print all fields as JSON."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Show information about the current operating system.

    Without options everything is shown (same as --all).
    """
    _configure_logging(verbose)

    selected = [
        name
        for name, enabled in (
            ("type", type_),
            ("version", os_version),
            ("bitness", bitness),
            ("architecture", architecture),
            ("family", family),
        )
        if enabled
    ]

    info = get()

    if as_json:
        typer.echo(json.dumps(info.to_dict(), indent=2))
        return

    if all_ or not selected:
        if all_ and selected:
            log.warning("--all supersedes all other options")
        lines = render_all(info)
    else:
        lines = render_selected(info, selected)

    for line in lines:
        console.print(line, markup=False)


def main() -> None:
    app()
