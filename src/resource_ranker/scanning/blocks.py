"""Class size approximation by brace matching.

There is no parser: a regex finds each declaration, and a depth counter
walks from the first ``{`` to its matching ``}``. The body's size is the
number of ``;`` it contains.

Braces inside strings or comments are counted like any other brace unless
the text is passed through :func:`resource_ranker.scanning.lexical.strip_literals`
first.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Pattern, Tuple, Union

from ..config import DEFAULT_CLASS_PATTERN
from ..logging_config import get_logger
from . import lexical

logger = get_logger(__name__)

STATEMENT_TERMINATOR = ";"


@dataclass(frozen=True)
class BlockSpan:
    """A class declaration and the extent of its body."""

    name: str
    start: int  # index of the opening brace
    end: int  # index of the matching closing brace (or last index of text)
    size: int


def find_block_end(text: str, start: int) -> int:
    """Return the index of the brace closing the block opened at ``start``.

    Falls back to the last index of ``text`` when the block never closes.
    """
    last_index = len(text) - 1
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        if depth == 0:
            return index
    return last_index


def class_name_of(declaration: str) -> Optional[str]:
    """'class Blind extends StatelessWidget ' -> 'Blind'."""
    tokens = declaration.split()
    if len(tokens) < 2:
        return None
    return tokens[1]


class BlockScanner:
    """Locates class declarations and measures their bodies."""

    def __init__(
        self,
        pattern: Union[str, Pattern[str]] = DEFAULT_CLASS_PATTERN,
        strip_literals: bool = False,
    ):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.strip_literals = strip_literals

    def scan(self, text: str) -> Iterator[BlockSpan]:
        """Yield one BlockSpan per declaration, in source order."""
        if self.strip_literals:
            text = lexical.strip_literals(text)

        for match in self.pattern.finditer(text):
            start = text.find("{", match.end())
            if start == -1:
                # Only reachable with a custom pattern lacking the brace lookahead
                logger.debug(f"No opening brace after {match.group()!r}")
                continue

            name = class_name_of(match.group())
            if name is None:
                logger.debug(f"Declaration without a name at offset {match.start()}")
                continue

            end = find_block_end(text, start)
            size = text.count(STATEMENT_TERMINATOR, start, end)
            yield BlockSpan(name=name, start=start, end=end, size=size)

    def class_sizes(self, text: str) -> Iterator[Tuple[str, int]]:
        """Yield ``(class name, statement count)`` pairs."""
        for span in self.scan(text):
            yield span.name, span.size
