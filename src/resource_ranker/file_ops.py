"""
Safe file operations for Resource Ranker.

Provides root validation, a deterministic recursive walk filtered by
extension, and size-limited text reads.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError, InvalidPathError


def validate_root_directory(root_dir: Path) -> Path:
    """
    Resolve the scan root and make sure it is an existing directory.

    Raises:
        InvalidPathError: If the path does not exist or is not a directory
    """
    try:
        resolved = root_dir.resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(root_dir, f"Cannot resolve path: {e}")

    if not resolved.exists():
        raise InvalidPathError(resolved, "Directory does not exist")
    if not resolved.is_dir():
        raise InvalidPathError(resolved, "Not a directory")

    return resolved


def safe_read_file(
    filepath: Path,
    encoding: str = "utf-8",
    errors: str = "replace",
    max_size_bytes: Optional[int] = None,
) -> str:
    """
    Read a file as text.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors
        max_size_bytes: Refuse files larger than this (None = no limit)

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read or is too large
    """
    try:
        if max_size_bytes is not None:
            size = filepath.stat().st_size
            if size > max_size_bytes:
                raise FileAccessError(
                    filepath, f"File size {size} exceeds limit of {max_size_bytes} bytes"
                )

        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except FileAccessError:
        raise
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except LookupError as e:
        raise FileAccessError(filepath, f"Unknown encoding: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def walk_source_files(
    root_dir: Path,
    suffix: str,
    exclude_patterns: Optional[list[str]] = None,
    follow_symlinks: bool = False,
) -> Generator[Path, None, None]:
    """
    Recursively yield files under ``root_dir`` whose suffix is ``suffix``.

    Directories are visited top-down; entries are sorted so a run is
    reproducible across platforms.

    Args:
        root_dir: Directory to scan
        suffix: File suffix including the dot, e.g. ".dart"
        exclude_patterns: Glob patterns matched against the root-relative path
        follow_symlinks: Whether to descend into symlinked directories

    Yields:
        Matching file paths

    Raises:
        FileAccessError: If the root itself cannot be listed
    """
    patterns = exclude_patterns or []

    def _on_error(error: OSError) -> None:
        if Path(error.filename or "") == root_dir:
            raise FileAccessError(root_dir, f"Directory scan failed: {error}")

    for dirpath, dirnames, filenames in os.walk(
        root_dir, onerror=_on_error, followlinks=follow_symlinks
    ):
        dirnames.sort()
        current = Path(dirpath)
        for filename in sorted(filenames):
            path = current / filename
            if path.suffix != suffix:
                continue
            if should_skip_file(path.relative_to(root_dir), patterns):
                continue
            if not path.is_file():
                continue
            yield path


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False
