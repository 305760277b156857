"""CLI entry point."""

import typer

app = typer.Typer(
    name="resource-ranker",
    help="Resource Ranker - rank colors, magic numbers and classes by size",
    add_completion=False,
    rich_markup_mode="rich",
)


from .rank import main  # noqa: F401, E402
