"""Color literal extraction.

Two independent regex passes over the whole text. Every match counts, so a
line such as ``Color c = Color(0xff123456);`` yields one key per pass.
"""

import re
from typing import Iterator

# Color(0xff1da1f3), possibly spanning lines. The leading \W (or start of
# text) rejects identifiers that merely end in "Color":
#   analogous(Color(0xffff0000))  -> 0xffff0000
#   analogousColor(0xffff0000)    -> no match
CONSTRUCTOR_CALL = re.compile(r"(\W|^)Color\(.+?\)", re.DOTALL | re.ASCII)
_CONSTRUCTOR_PREFIX = re.compile(r"(\W|^)Color\(", re.ASCII)

# Color primaryColor = CupertinoTheme\n.of(context)\n.primaryColor;
TYPED_ASSIGNMENT = re.compile(r"\WColor \w+\s*=\s*\w+[\s\S]*?;", re.ASCII)
_ASSIGNMENT_PREFIX = re.compile(r"\WColor \w+\s*=\s*", re.ASCII)


def extract_constructor_colors(text: str) -> Iterator[str]:
    """Yield the argument text of every ``Color(...)`` call."""
    for match in CONSTRUCTOR_CALL.finditer(text):
        yield _CONSTRUCTOR_PREFIX.sub("", match.group()).rstrip(")")


def extract_assigned_colors(text: str) -> Iterator[str]:
    """Yield the right-hand side (terminating ``;`` included) of typed Color assignments."""
    for match in TYPED_ASSIGNMENT.finditer(text):
        yield _ASSIGNMENT_PREFIX.sub("", match.group())


def extract_colors(text: str) -> Iterator[str]:
    """Yield every color key found by both passes, constructor calls first."""
    yield from extract_constructor_colors(text)
    yield from extract_assigned_colors(text)
