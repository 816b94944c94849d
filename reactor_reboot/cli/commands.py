from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from click import UsageError
from typer import Context, Option

from .. import __version__
from ..core import reactor
from ..core.errors import ReactorError
from ..core.volume import INIT_REGION, clipped_volume, total_volume
from ..data import loader, watcher
from ..data.parser import parse_cuboid
from ..data.schema import Report, encode_report
from .console import Console
from .progress_bar import ProgressBar

if TYPE_CHECKING:
    from ..core.cuboid import Cuboid
    from ..core.reactor import Command

logger = logging.getLogger("reactor_reboot")
logging.basicConfig(format="%(message)s")


def _show_version(ctx: Context, value: bool):
    if value:
        print(__version__)
        ctx.exit()


def _show_help(ctx: Context, value: bool):
    if value:
        typer.echo(ctx.get_help())
        ctx.exit()


def _set_verbosity(*, quiet: bool, debug: bool, as_json: bool):
    if debug:
        logger.setLevel(logging.DEBUG)
    elif quiet or as_json:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)


def solve(commands: list[Command], limit: Cuboid | None = None) -> Report:
    with ProgressBar(total=len(commands), description="Rebooting") as track:
        region = reactor.run(commands, on_step=track)

    return Report(
        steps=len(commands),
        cuboids=len(region),
        total=total_volume(region),
        limit=str(limit) if limit else None,
        clipped=clipped_volume(region, limit) if limit else None,
    )


def _output(report: Report, *, as_json: bool):
    if as_json:
        typer.echo(encode_report(report).decode())
    else:
        Console.report(report)


def run(
    input_path: Annotated[
        Path | None,
        Option(
            "--in",
            "-i",
            help="Reboot steps, one per line, or a JSON list of steps",
            show_default="read from stdin",
            metavar="file",
            rich_help_panel="Input & output",
            envvar="REACTOR_REBOOT_INPUT",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ] = None,
    watch: Annotated[
        bool,
        Option(
            "--watch",
            help="Watch input file and recompute on changes",
            rich_help_panel="Input & output",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        Option(
            "--json",
            help="Print the result as JSON on stdout",
            rich_help_panel="Input & output",
        ),
    ] = False,
    limit: Annotated[
        str | None,
        Option(
            "--limit",
            help="Also count only the cubes inside this cuboid",
            show_default=False,
            metavar="x=A..B,y=C..D,z=E..F",
            rich_help_panel="Volume",
        ),
    ] = None,
    init: Annotated[
        bool,
        Option(
            "--init",
            help=f"Shorthand for --limit {INIT_REGION}",
            rich_help_panel="Volume",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        Option("--quiet", "-q", help="Only log warnings", rich_help_panel="Logging"),
    ] = False,
    debug: Annotated[
        bool,
        Option("--debug", help="Log every step and full tracebacks", rich_help_panel="Logging"),
    ] = False,
    _version: Annotated[
        bool,
        Option("--version", is_eager=True, hidden=True, callback=_show_version),
    ] = False,
    _help: Annotated[
        bool,
        Option("--help", is_eager=True, hidden=True, callback=_show_help),
    ] = False,
):
    _set_verbosity(quiet=quiet, debug=debug, as_json=as_json)

    if init and limit:
        raise UsageError("--init and --limit are mutually exclusive.")
    bound = INIT_REGION if init else parse_cuboid(limit) if limit else None

    try:
        if not watch:
            _output(solve(loader.load(input_path), bound), as_json=as_json)
            return

        for commands in watcher.watch(input_path):
            _output(solve(commands, bound), as_json=as_json)
            Console.newline()
            Console.success("Recomputed {steps} steps", steps=len(commands))
            Console.info("Waiting for changes to {path}", path=input_path)
    except ReactorError as e:
        logger.error(f"ERROR - {e}")
        logger.debug("".join(traceback.format_exception(e)))
        raise typer.Exit(1)
