"""Data models for Resource Ranker"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Generic, List, TypeVar, Union

K = TypeVar("K")

# Extracted color expression, e.g. "0xff1da1f3" or "CupertinoTheme.of(context).primaryColor;"
ColorLiteral = str
MagicNumber = int

FrequencyMap = Dict


class ScanMode(str, Enum):
    """What a run ranks. Values double as the CLI keywords."""

    COLOR = "color"
    NUM = "num"
    CLASS = "class"
    CONTRAST = "contrast"

    @classmethod
    def default_modes(cls) -> FrozenSet["ScanMode"]:
        return frozenset({cls.COLOR, cls.NUM, cls.CLASS})


@dataclass
class RankedEntry(Generic[K]):
    """One (key, count) pair of a ranking."""

    key: K
    count: int


@dataclass
class ContrastEntry:
    """WCAG contrast of a ranked hex color against black and white."""

    color: ColorLiteral
    count: int
    black_ratio: float
    black_label: str
    white_ratio: float
    white_label: str


@dataclass
class SkippedFile:
    """A file the walker found but could not read."""

    path: str
    reason: str


@dataclass
class RankingReport:
    """Final output of one run, consumed by the formatters."""

    root: str
    modes: List[str]
    limit: int
    files_scanned: int = 0
    colors: List[RankedEntry] = field(default_factory=list)
    numbers: List[RankedEntry] = field(default_factory=list)
    classes: List[RankedEntry] = field(default_factory=list)
    contrast: List[ContrastEntry] = field(default_factory=list)
    skipped_files: List[SkippedFile] = field(default_factory=list)

    def has_mode(self, mode: Union[ScanMode, str]) -> bool:
        value = mode.value if isinstance(mode, ScanMode) else mode
        return value in self.modes
