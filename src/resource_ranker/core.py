"""Run orchestrator for Resource Ranker.

One ``ResourceRanker.run`` owns one Aggregator: files are walked and scanned
sequentially, then each frequency map is ranked once.
"""

from pathlib import Path
from typing import Collection, Optional, Union

from .aggregation import Aggregator
from .config import RankerConfig
from .contrast import analyze_contrast
from .exceptions import FileAccessError
from .file_ops import safe_read_file, validate_root_directory, walk_source_files
from .logging_config import get_logger
from .models import RankingReport, ScanMode, SkippedFile
from .ranking import rank
from .scanning import BlockScanner

logger = get_logger(__name__)

# Stable ordering for RankingReport.modes
_MODE_ORDER = (ScanMode.COLOR, ScanMode.NUM, ScanMode.CLASS, ScanMode.CONTRAST)


class ResourceRanker:
    """Scans a directory tree and ranks colors, magic numbers and classes."""

    def __init__(
        self,
        root_dir: Union[Path, str],
        modes: Optional[Collection[ScanMode]] = None,
        limit: Optional[int] = None,
        config: Optional[RankerConfig] = None,
    ):
        self.config = config or RankerConfig()
        self.root_dir = Path(root_dir)
        self.modes = frozenset(modes) if modes is not None else ScanMode.default_modes()
        self.limit = self.config.limit if limit is None else limit

    def run(self) -> RankingReport:
        """Scan every source file under the root and build the report.

        Raises:
            InvalidPathError: If the root directory does not exist
        """
        root = validate_root_directory(self.root_dir)

        aggregator = Aggregator(
            BlockScanner(self.config.class_pattern, strip_literals=self.config.strip_literals)
        )
        report = RankingReport(
            root=str(root),
            modes=[mode.value for mode in _MODE_ORDER if mode in self.modes],
            limit=self.limit,
        )

        for path in walk_source_files(
            root,
            self.config.suffix,
            exclude_patterns=self.config.exclude_patterns,
            follow_symlinks=self.config.follow_symlinks,
        ):
            try:
                text = safe_read_file(
                    path,
                    encoding=self.config.encoding,
                    max_size_bytes=self.config.max_file_size_bytes,
                )
            except FileAccessError as e:
                logger.warning(f"Skipping {path}: {e.reason}")
                report.skipped_files.append(SkippedFile(path=str(path), reason=e.reason))
                continue

            logger.debug(f"Scanning {path}")
            aggregator.scan_text(text, self.modes)
            report.files_scanned += 1

        if ScanMode.COLOR in self.modes:
            report.colors = rank(aggregator.colors, self.limit)
        if ScanMode.NUM in self.modes:
            report.numbers = rank(aggregator.numbers, self.limit)
        if ScanMode.CLASS in self.modes:
            report.classes = rank(aggregator.classes, self.limit)
        if ScanMode.CONTRAST in self.modes:
            report.contrast = analyze_contrast(rank(aggregator.colors, self.limit))

        logger.info(
            f"Scanned {report.files_scanned} {self.config.suffix} files under {root} "
            f"({len(aggregator.colors)} colors, {len(aggregator.numbers)} numbers, "
            f"{len(aggregator.classes)} classes)"
        )
        return report


def rank_resources(
    root_dir: Union[Path, str],
    modes: Optional[Collection[Union[ScanMode, str]]] = None,
    limit: Optional[int] = None,
    config: Optional[RankerConfig] = None,
) -> RankingReport:
    """Convenience wrapper: ``rank_resources("lib", ["color"], limit=5)``."""
    parsed = {ScanMode(mode) for mode in modes} if modes is not None else None
    return ResourceRanker(root_dir, modes=parsed, limit=limit, config=config).run()
