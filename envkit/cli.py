from __future__ import annotations

import json
import logging
import os
import sys
from typing import List, Optional

import typer
from rich.table import Table

from envkit.config import get_settings
from envkit.console import main_console as console
from envkit.constants import EXIT_CODE_NOT_FOUND, PATH_KEY
from envkit.env import Env
from envkit.error_handlers import handle_cmd_exception
from envkit.executable import (
    ExecutableClassifier,
    ExecutableFinder,
    compile_pattern,
)
from envkit.meta import get_version

LOG = logging.getLogger(__name__)

CLI_MAIN_INTRODUCTION = (
    "Inspect list-valued environment variables and find executables on the "
    "search path.\nExample: envkit which git"
)
CLI_DEBUG_HELP = "Enable debug logging."
CLI_CWD_HELP = "Search the working directory before PATH."

app = typer.Typer(
    rich_markup_mode="rich",
    name="envkit",
    help=CLI_MAIN_INTRODUCTION,
    no_args_is_help=True,
    add_completion=False,
)
path_app = typer.Typer(
    name="path",
    help="Show PATH or print an updated PATH value for your shell to export.",
    no_args_is_help=True,
)
pathext_app = typer.Typer(
    name="pathext",
    help="Show the executable suffixes used on Windows.",
    no_args_is_help=True,
)
app.add_typer(path_app, name="path")
app.add_typer(pathext_app, name="pathext")


def configure_logger(debug: bool) -> None:
    level = logging.CRITICAL

    if debug:
        level = logging.DEBUG

    logging.basicConfig(format="%(asctime)s %(name)s => %(message)s", level=level)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"envkit {get_version() or 'unknown'}", markup=False)
        raise typer.Exit()


def print_plain(text: str) -> None:
    console.print(text, markup=False, soft_wrap=True)


@app.callback()
def cli(
    debug: bool = typer.Option(False, "--debug", help=CLI_DEBUG_HELP),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    configure_logger(debug)
    LOG.debug("envkit %s on %s", get_version(), sys.platform)


@app.command("which")
@handle_cmd_exception
def which(
    name: str = typer.Argument(..., help="Name, basename or path to look for."),
    all_matches: bool = typer.Option(
        False, "--all", "-a", help="Print every match instead of the first one."
    ),
    cwd: Optional[bool] = typer.Option(None, "--cwd/--no-cwd", help=CLI_CWD_HELP),
) -> None:
    """
    Locate an executable on the search path.
    """
    settings = get_settings(include_cwd=cwd)
    finder = ExecutableFinder(suffixes=settings.suffixes)

    if all_matches:
        found = False
        for entry in finder.iter_executables(
            cwd=settings.include_cwd, filters=[name]
        ):
            found = True
            print_plain(entry.path)
        if found:
            return
    else:
        entry = finder.get_executable(name, cwd=settings.include_cwd)
        if entry:
            print_plain(entry.path)
            return

    typer.secho(f"{name} not found", fg="red", err=True)
    raise typer.Exit(code=EXIT_CODE_NOT_FOUND)


@app.command("list")
@handle_cmd_exception
def list_executables(
    filters: List[str] = typer.Option(
        [], "--filter", "-f", help="Exact basename, name or path to keep."
    ),
    patterns: List[str] = typer.Option(
        [],
        "--regex",
        "-r",
        help="Regular expression searched in basename, name or path.",
    ),
    cwd: Optional[bool] = typer.Option(None, "--cwd/--no-cwd", help=CLI_CWD_HELP),
    as_json: bool = typer.Option(
        False, "--json", help="Print one JSON object per line."
    ),
) -> None:
    """
    List the executables reachable through the search path.
    """
    settings = get_settings(include_cwd=cwd)
    specifiers = list(filters) + [compile_pattern(raw) for raw in patterns]
    finder = ExecutableFinder(suffixes=settings.suffixes)
    entries = finder.iter_executables(cwd=settings.include_cwd, filters=specifiers)

    if as_json:
        for entry in entries:
            print_plain(json.dumps(entry.to_dict()))
        return

    table = Table(box=None, show_edge=False)
    table.add_column("Name", style="name")
    table.add_column("Basename")
    table.add_column("Path", style="path", overflow="fold")
    for entry in entries:
        table.add_row(entry.name, entry.basename, entry.path)
    console.print(table)


@app.command("check")
@handle_cmd_exception
def check(
    path: str = typer.Argument(..., help="Path to classify."),
    may_not_exist: bool = typer.Option(
        False, "--may-not-exist", help="Report false instead of failing if missing."
    ),
) -> None:
    """
    Tell whether a path is executable on this platform.
    """
    settings = get_settings()
    result = ExecutableClassifier().is_executable_path(
        path, may_not_exist=may_not_exist, suffixes=settings.suffixes
    )
    print_plain("true" if result else "false")
    if not result:
        raise typer.Exit(code=EXIT_CODE_NOT_FOUND)


def _env_copy() -> Env:
    return Env(dict(os.environ))


@path_app.command("show")
@handle_cmd_exception
def path_show() -> None:
    """
    Print the PATH directories, one per line.
    """
    for directory in Env().path.get():
        print_plain(directory)


@path_app.command("add")
@handle_cmd_exception
def path_add(
    directories: List[str] = typer.Argument(..., help="Absolute directories."),
) -> None:
    """
    Print PATH with the directories appended.
    """
    env = _env_copy()
    env.path.add(*directories)
    print_plain(env.get(PATH_KEY) or "")


@path_app.command("prepend")
@handle_cmd_exception
def path_prepend(
    directories: List[str] = typer.Argument(..., help="Absolute directories."),
) -> None:
    """
    Print PATH with the directories moved to the front.
    """
    env = _env_copy()
    env.path.prepend(*directories)
    print_plain(env.get(PATH_KEY) or "")


@path_app.command("remove")
@handle_cmd_exception
def path_remove(
    directories: List[str] = typer.Argument(..., help="Absolute directories."),
) -> None:
    """
    Print PATH without the directories.
    """
    env = _env_copy()
    env.path.delete(*directories)
    print_plain(env.get(PATH_KEY) or "")


@pathext_app.command("show")
@handle_cmd_exception
def pathext_show() -> None:
    """
    Print the executable suffixes, one per line.
    """
    suffixes = Env().pathext.get()
    if suffixes is None:
        console.print("[muted]PATHEXT is not used on this platform.[/muted]")
        return

    override = get_settings().suffixes
    for suffix in override or suffixes:
        print_plain(suffix)
