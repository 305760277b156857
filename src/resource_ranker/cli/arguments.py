"""Positional argument grammar of the ``resource-ranker`` command.

    resource-ranker <project directory> [color] [num] [class] [contrast] [help] [<int>]

The first argument is the root. Keywords may appear in any order. The first
integer-looking argument (the root included) is the limit. With fewer than
two arguments, or an integer in second position, the default modes
(color, num, class) are switched on.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence

from ..models import ScanMode

DEFAULT_ROOT = "./"
HELP_KEYWORD = "help"

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class RankRequest:
    """What the user asked for on the command line."""

    root: str
    modes: FrozenSet[ScanMode]
    limit: Optional[int]  # None means "use the configured default"
    show_help: bool = False
    show_intro: bool = False


def to_int_or_none(token: str) -> Optional[int]:
    """Strict 32-bit integer parse: '10' -> 10, '1e3' / ' 5' / '9999999999' -> None."""
    if not _INT_TOKEN.fullmatch(token):
        return None
    value = int(token)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def parse_arguments(args: Sequence[str]) -> RankRequest:
    tokens = list(args)

    default_mode = len(tokens) < 2 or to_int_or_none(tokens[1]) is not None

    modes = {mode for mode in ScanMode if mode.value in tokens}
    if default_mode:
        modes |= ScanMode.default_modes()

    limit = next(
        (value for value in map(to_int_or_none, tokens) if value is not None),
        None,
    )

    return RankRequest(
        root=tokens[0] if tokens else DEFAULT_ROOT,
        modes=frozenset(modes),
        limit=limit,
        show_help=HELP_KEYWORD in tokens,
        show_intro=len(tokens) < 2,
    )
