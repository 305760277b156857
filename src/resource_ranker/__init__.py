"""
Resource Ranker - lexical resource usage report for source trees

Ranks the most used color literals and magic numbers of a project and its
largest classes by statement count, with a WCAG contrast check for hex
colors. Scanning is regex and brace-depth based; no parser is involved.
"""

__version__ = "0.1.0"

from .config import RankerConfig, load_config
from .core import ResourceRanker, rank_resources
from .models import ContrastEntry, RankedEntry, RankingReport, ScanMode

__all__ = [
    "rank_resources",  # Main entry point
    "ResourceRanker",
    "RankerConfig",
    "load_config",
    "RankingReport",
    "RankedEntry",
    "ContrastEntry",
    "ScanMode",
]
