"""Plain text formatter: the classic ``Top Colors:`` / ``[key=count]`` layout."""

from typing import List

from ..models import ContrastEntry, RankedEntry, RankingReport, ScanMode
from .base import BaseFormatter

SECTION_TITLES = (
    (ScanMode.COLOR, "Top Colors:", "colors"),
    (ScanMode.NUM, "Top Magic Numbers:", "numbers"),
    (ScanMode.CLASS, "Top Largest Classes:", "classes"),
)


def format_entries(entries: List[RankedEntry]) -> str:
    return "[" + ", ".join(f"{e.key}={e.count}" for e in entries) + "]"


def format_contrast(entry: ContrastEntry) -> str:
    return (
        f"{entry.color}: {entry.count} times\n"
        f"Black: {entry.black_ratio:.2f} ({entry.black_label})"
        f" / White: {entry.white_ratio:.2f} ({entry.white_label})\n"
    )


class PlainFormatter(BaseFormatter):
    """Render sections as plain text, contrast blocks first."""

    def render(self, report: RankingReport) -> None:
        print(self.format(report), end="")

    def format(self, report: RankingReport) -> str:
        lines: List[str] = []

        if report.has_mode(ScanMode.CONTRAST):
            for entry in report.contrast:
                lines.append(format_contrast(entry))

        for mode, title, attr in SECTION_TITLES:
            if report.has_mode(mode):
                lines.append(title)
                lines.append(format_entries(getattr(report, attr)))
                lines.append("")

        return "\n".join(lines) + ("\n" if lines else "")
