"""Main CLI application."""

import logging
import sys
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from cdidc import NAME, __version__
from cdidc.browser.launcher import launch_browser
from cdidc.config import Settings, get_settings
from cdidc.core.disc import IdSelection
from cdidc.i18n import setup_translation
from cdidc.metadata.libdiscid import DiscReadError, get_default_device, read_disc_ids
from cdidc.output.formatting import format_cddb_id, format_musicbrainz_id

COPYRIGHT_MESSAGE = """\
Copyright (C) 2021 the cdidc authors
License GPLv3+: GNU GPL version 3 or later <https://gnu.org/licenses/gpl.html>.
This is free software: you are free to change and redistribute it.
There is NO WARRANTY, to the extent permitted by law."""

app = typer.Typer(
    name=NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)
log = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging on standard error."""
    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def default_device_help() -> str:
    """Describe the -d option, naming the drive libdiscid would pick."""
    try:
        device = get_default_device()
    except DiscReadError:
        device = "the drive libdiscid picks"
    return f"Optical disc drive to use. Defaults to {device}"


def version_callback(value: bool) -> None:
    """Show version and license, then exit."""
    if value:
        console.print(f"[bold blue]{NAME}[/] [green]{__version__}[/]")
        console.print(COPYRIGHT_MESSAGE, highlight=False)
        raise typer.Exit()


@app.command()
def identify(
    device: Annotated[
        str | None,
        typer.Option(
            "--device",
            "-d",
            metavar="DEVICE",
            help=default_device_help(),
        ),
    ] = None,
    cddb: Annotated[
        bool,
        typer.Option("--cddb", "-c", help="Print CDDB ID of CD"),
    ] = False,
    musicbrainz: Annotated[
        bool,
        typer.Option("--musicbrainz", "-m", help="Print MusicBrainz Disc ID of CD"),
    ] = False,
    submit: Annotated[
        bool,
        typer.Option(
            "--submit", "-s", help="Submit Disc ID to MusicBrainz using the default browser"
        ),
    ] = False,
    browser: Annotated[
        str | None,
        typer.Option(
            "--browser",
            "-w",
            metavar="BROWSER",
            help="Use BROWSER instead of the system default (implies -s)",
        ),
    ] = None,
    brief: Annotated[
        bool,
        typer.Option("--brief", "-b", help="Format the output more briefly"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help=f"Print version ({__version__}) information and exit",
        ),
    ] = False,
) -> None:
    """Calculate MusicBrainz or CDDB IDs of a compact disc.

    If neither type of ID is specified, both are printed.
    """
    settings = get_settings()
    configure_logging(settings)
    setup_translation(settings.locale_dir)

    selection = IdSelection.from_flags(cddb=cddb, musicbrainz=musicbrainz)
    if browser:
        submit = True
    browser = browser or settings.browser

    try:
        device = device or settings.device or get_default_device()
        ids = read_disc_ids(device, selection, submit=submit)
    except DiscReadError as e:
        log.debug("Giving up on disc", device=device, error=str(e))
        err_console.print(f"[red]libdiscid:[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if ids.musicbrainz_id is not None:
        typer.echo(format_musicbrainz_id(ids.musicbrainz_id, brief=brief))

    if submit and ids.can_submit:
        launch_browser(browser, ids.submission_url)

    if ids.freedb_id is not None:
        typer.echo(format_cddb_id(ids.freedb_id, brief=brief))


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    try:
        exit_code = app(args=argv, prog_name=NAME, standalone_mode=False)
    except typer.Abort:
        sys.exit(1)
    except Exception as e:
        # Usage errors come from whichever click typer runs on; match by shape
        if not (hasattr(e, "exit_code") and hasattr(e, "format_message")):
            raise
        ctx = getattr(e, "ctx", None)
        if ctx is not None:
            # Usage goes to stdout, the complaint itself to stderr
            help_text = ctx.get_help()
            if help_text:
                typer.echo(help_text)
        err_console.print(f"[red]Error:[/] {escape(e.format_message())}", soft_wrap=True)
        sys.exit(e.exit_code)

    sys.exit(exit_code or 0)


if __name__ == "__main__":
    main()
