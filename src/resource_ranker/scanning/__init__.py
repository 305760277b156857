"""Lexical extractors: color literals, magic numbers and class bodies."""

from .blocks import BlockScanner, BlockSpan, find_block_end
from .colors import extract_colors
from .lexical import strip_literals
from .numbers import extract_magic_numbers

__all__ = [
    "BlockScanner",
    "BlockSpan",
    "extract_colors",
    "extract_magic_numbers",
    "find_block_end",
    "strip_literals",
]
