"""Frequency maps for one ranking run."""

from typing import Collection, Iterable, Optional, Tuple

from .models import ColorLiteral, FrequencyMap, MagicNumber, ScanMode
from .scanning import BlockScanner, extract_colors, extract_magic_numbers


class Aggregator:
    """Accumulates extractor output into three frequency maps.

    Colors and numbers are occurrence counts. Classes hold a size, so a name
    seen again (e.g. the same class name in another file) is overwritten.
    """

    def __init__(self, block_scanner: Optional[BlockScanner] = None):
        self.colors: FrequencyMap[ColorLiteral, int] = {}
        self.numbers: FrequencyMap[MagicNumber, int] = {}
        self.classes: FrequencyMap[str, int] = {}
        self.block_scanner = block_scanner or BlockScanner()

    def add_colors(self, colors: Iterable[ColorLiteral]) -> None:
        for color in colors:
            self.colors[color] = self.colors.get(color, 0) + 1

    def add_numbers(self, numbers: Iterable[MagicNumber]) -> None:
        for number in numbers:
            self.numbers[number] = self.numbers.get(number, 0) + 1

    def record_classes(self, records: Iterable[Tuple[str, int]]) -> None:
        for name, size in records:
            self.classes[name] = size

    def scan_text(self, text: str, modes: Collection[ScanMode]) -> None:
        """Run the extractors the given modes need over one file's text."""
        if ScanMode.COLOR in modes or ScanMode.CONTRAST in modes:
            self.add_colors(extract_colors(text))

        if ScanMode.NUM in modes:
            self.add_numbers(extract_magic_numbers(text))

        if ScanMode.CLASS in modes:
            self.record_classes(self.block_scanner.class_sizes(text))
