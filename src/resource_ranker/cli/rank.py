"""The ranking command."""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..core import ResourceRanker
from ..exceptions import InvalidPathError, ResourceRankerError
from ..formatters import get_formatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, print_intro, resolve_config
from .arguments import parse_arguments

logger = get_logger(__name__)


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Project directory, then any of: color num class contrast help <int>",
        show_default=False,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format",
        click_type=click.Choice(["rich", "json", "plain"], case_sensitive=False),
    ),
    extension: Optional[str] = typer.Option(
        None,
        "--ext",
        help="Source file extension to scan (default: dart)",
    ),
    strip_literals: bool = typer.Option(
        False,
        "--strip-literals",
        help="Ignore braces inside strings and comments when sizing classes",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every scanned file",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Rank the colors, magic numbers and classes of a project by usage and size.

    [bold cyan]Examples:[/bold cyan]

      resource-ranker documents/project color 10

      resource-ranker ../ class 0

      resource-ranker ../../ contrast 5 --format plain
    """
    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Resource Ranker[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    request = parse_arguments(args or [])
    output_format = output_format.lower()
    machine_output = output_format == "json"

    if request.show_help:
        print_intro()
        raise typer.Exit(0)

    if request.show_intro and not machine_output:
        print_intro()

    try:
        settings = resolve_config(
            config=config,
            extension=extension,
            strip_literals=strip_literals,
            verbose=verbose,
            quiet=quiet,
            log_file=log_file,
        )
        setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=settings.log_file,
        )

        root = Path(request.root)
        if (request.show_intro or settings.verbosity == "verbose") and not machine_output:
            console.print(f"Opening directory: {escape(str(root.absolute()))}\n", highlight=False)

        ranker = ResourceRanker(
            root,
            modes=request.modes,
            limit=request.limit,
            config=settings,
        )
        report = ranker.run()
        get_formatter(output_format).render(report)

    except typer.Exit:
        raise

    except InvalidPathError as e:
        # A missing directory is reported, not treated as a failure
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(
            f"[red]Error![/red] Directory does not exist: {escape(str(e.path))}", highlight=False
        )
        raise typer.Exit(0)

    except ResourceRankerError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during scan")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
