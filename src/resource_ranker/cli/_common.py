"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from ..config import RankerConfig, load_config

console = Console()

INTRO = """\
This is a tool to rank colors, numbers and classes by size.

[bold]USAGE:[/bold]
   [cyan]$ resource-ranker <project directory> [OPTIONS][/cyan]

[bold]OPTIONS:[/bold]
 color       How many colors you are using and how many times
 contrast    How many colors and how they compare to black and white
 num         How many magical numbers you are using and how many times
 class       How many lines of code each class has (approximate).
 help        Show this text.
 <int>       Max limit. If 0, shows all elements. Default is 10.

[bold]EXAMPLE:[/bold]
   [cyan]$ resource-ranker documents/project color 10[/cyan]
   [cyan]$ resource-ranker ../ class 0[/cyan]
   [cyan]$ resource-ranker ../../ contrast 5[/cyan]
   [cyan]$ resource-ranker ./ num[/cyan]"""


def print_intro() -> None:
    """Print the usage banner."""
    console.print(
        Panel(
            INTRO,
            title="[bold yellow]Resource Ranker[/bold yellow]",
            expand=False,
        )
    )


def resolve_config(
    config: Optional[Path] = None,
    extension: Optional[str] = None,
    strip_literals: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> RankerConfig:
    """Build configuration from CLI options. Unset flags leave file and env values alone."""
    overrides = {}
    if extension is not None:
        overrides["extension"] = extension
    if strip_literals:
        overrides["strip_literals"] = True
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    if log_file is not None:
        overrides["log_file"] = str(log_file)
    return load_config(config_file=config, **overrides)
