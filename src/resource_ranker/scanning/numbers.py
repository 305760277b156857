"""Magic number extraction.

A digit run is a magic number when the character right after it is neither
``;`` nor ``,`` (those suggest a declaration such as ``padding = 16;``) and
its value is outside the trivial set {-1, 0, 1, 2}.
"""

import re
from typing import Iterator

DIGIT_RUN = re.compile(r"[0-9]+")

DECLARATION_TERMINATORS = frozenset(";,")

# Values in [-1, 2] are never magic
NON_MAGIC_MIN = -1
NON_MAGIC_MAX = 2

_INT_MAX = 2**31 - 1


def is_undeclared_position(text: str, index: int) -> bool:
    """Return True when the digit run ending before ``index`` looks undeclared.

    Only the single character at ``index`` is inspected. Whitespace is not
    skipped, so ``16 ;`` counts as a magic number while ``16;`` does not.
    End of text never counts.
    """
    if index >= len(text):
        return False
    return text[index] not in DECLARATION_TERMINATORS


def parse_int(digits: str) -> int:
    """Parse a digit run as a 32-bit int; overflow collapses to 0."""
    try:
        value = int(digits)
    except ValueError:
        return 0
    if value > _INT_MAX:
        return 0
    return value


def is_magic(value: int) -> bool:
    return value < NON_MAGIC_MIN or value > NON_MAGIC_MAX


def extract_magic_numbers(text: str) -> Iterator[int]:
    """Yield every magic number occurrence in ``text``."""
    for match in DIGIT_RUN.finditer(text):
        if not is_undeclared_position(text, match.end()):
            continue
        value = parse_int(match.group())
        if is_magic(value):
            yield value
