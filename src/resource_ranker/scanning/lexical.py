"""Optional lexical pre-pass for the block scanner.

Blanks the contents of string literals and comments so braces and
semicolons inside them do not disturb the depth count. Every removed
character is replaced by a space (newlines are kept), so offsets into the
cleaned text match offsets into the input.

Understands ``//`` and ``/* */`` comments, single, double and triple-quoted
strings with backslash escapes, raw strings (``r'...'``, no escapes) and
``${...}`` interpolation, including strings nested inside it.
"""

from typing import List, Optional, Tuple

_QUOTES = ("'''", '"""', "'", '"')


def _blank(chars: List[str], start: int, end: int) -> None:
    for i in range(start, end):
        if chars[i] != "\n":
            chars[i] = " "


def _quote_at(text: str, i: int) -> Optional[str]:
    return next((q for q in _QUOTES if text.startswith(q, i)), None)


def _is_raw(text: str, i: int) -> bool:
    """True when the quote at ``i`` carries an ``r`` prefix (not the tail of a name)."""
    if i == 0 or text[i - 1] not in "rR":
        return False
    return i == 1 or not (text[i - 2].isalnum() or text[i - 2] == "_")


def _skip_interpolation(text: str, start: int) -> int:
    """Return the index just past the ``}`` closing an interpolation body at ``start``."""
    length = len(text)
    depth = 1
    j = start
    while j < length:
        quote = _quote_at(text, j)
        if quote is not None:
            j, _ = _skip_string(text, j, quote)
            continue
        if text[j] == "{":
            depth += 1
        elif text[j] == "}":
            depth -= 1
            if depth == 0:
                return j + 1
        j += 1
    return length


def _skip_string(text: str, start: int, quote: str) -> Tuple[int, bool]:
    """Scan the literal opened at ``start``.

    Returns the index just past it and whether the closing delimiter was
    found. Unterminated single-line strings stop at the end of the line.
    """
    length = len(text)
    raw = _is_raw(text, start)
    j = start + len(quote)
    while j < length:
        if text.startswith(quote, j):
            return j + len(quote), True
        if len(quote) == 1 and text[j] == "\n":
            return j, False
        if not raw and text[j] == "\\":
            j += 2
            continue
        if not raw and text.startswith("${", j):
            j = _skip_interpolation(text, j + 2)
            continue
        j += 1
    return length, False


def strip_literals(text: str) -> str:
    """Return ``text`` with string and comment bodies replaced by spaces."""
    chars = list(text)
    length = len(text)
    i = 0

    while i < length:
        if text.startswith("//", i):
            end = text.find("\n", i)
            end = length if end == -1 else end
            _blank(chars, i, end)
            i = end
            continue

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = length if end == -1 else end + 2
            _blank(chars, i, end)
            i = end
            continue

        quote = _quote_at(text, i)
        if quote is None:
            i += 1
            continue

        end, closed = _skip_string(text, i, quote)
        # Keep the delimiters, blank the body
        _blank(chars, i + len(quote), end - len(quote) if closed else end)
        i = end

    return "".join(chars)
