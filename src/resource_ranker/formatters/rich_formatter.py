"""Rich terminal formatter for Resource Ranker."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import RankedEntry, RankingReport, ScanMode
from .base import BaseFormatter

console = Console()

_SWATCH = "▒"


def _contrast_label(label: str) -> str:
    if label == "fail":
        return "[red]fail[/red]"
    elif label == "AA+":
        return "[yellow]AA+[/yellow]"
    elif label in ("AA", "AAA"):
        return f"[green]{label}[/green]"
    else:
        return "[dim]-[/dim]"


def _ranking_table(title: str, key_header: str, count_header: str, entries) -> Table:
    table = Table(title=title, title_justify="left", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column(key_header, style="cyan", overflow="fold")
    table.add_column(count_header, justify="right", style="bold")
    for idx, entry in enumerate(entries, 1):
        table.add_row(str(idx), Text(str(entry.key)), str(entry.count))
    return table


class RichFormatter(BaseFormatter):
    """Colored tables per ranking, preceded by the contrast table."""

    SECTIONS = (
        (ScanMode.COLOR, "Top Colors", "Color", "Uses", "colors"),
        (ScanMode.NUM, "Top Magic Numbers", "Number", "Uses", "numbers"),
        (ScanMode.CLASS, "Top Largest Classes", "Class", "Statements", "classes"),
    )

    def render(self, report: RankingReport) -> None:
        if report.has_mode(ScanMode.CONTRAST):
            self._print_contrast(report)

        for mode, title, key_header, count_header, attr in self.SECTIONS:
            if not report.has_mode(mode):
                continue
            entries: list[RankedEntry] = getattr(report, attr)
            if not entries:
                console.print(f"[bold]{title}[/bold]: [dim]none found[/dim]")
                console.print()
                continue
            console.print(_ranking_table(title, key_header, count_header, entries))
            console.print()

        if report.skipped_files:
            console.print(
                f"[yellow]{len(report.skipped_files)} file(s) could not be read[/yellow]"
                " (run with --verbose for details)"
            )

    def format(self, report: RankingReport) -> str:
        # Rich output goes directly to console; return empty string
        self.render(report)
        return ""

    def _print_contrast(self, report: RankingReport) -> None:
        if not report.contrast:
            console.print("[bold]Contrast[/bold]: [dim]no hex colors found[/dim]")
            console.print()
            return

        table = Table(title="Contrast", title_justify="left")
        table.add_column("Color", style="cyan")
        table.add_column("Uses", justify="right")
        table.add_column(f"[black on white]{_SWATCH}[/black on white] Black", justify="right")
        table.add_column("", justify="left")
        table.add_column(f"[white on black]{_SWATCH}[/white on black] White", justify="right")
        table.add_column("", justify="left")

        for entry in report.contrast:
            # Keys come from scanned source; only the hex tail is trusted as a style
            label = Text.assemble(("  ", f"on #{entry.color[-6:]}"), " ", entry.color)
            table.add_row(
                label,
                str(entry.count),
                f"{entry.black_ratio:.2f}",
                _contrast_label(entry.black_label),
                f"{entry.white_ratio:.2f}",
                _contrast_label(entry.white_label),
            )
        console.print(table)
        console.print()
