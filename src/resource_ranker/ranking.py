"""Ranking of frequency maps."""

from typing import List, Mapping, TypeVar

from .models import RankedEntry

K = TypeVar("K")


def rank(mapping: Mapping[K, int], limit: int) -> List[RankedEntry]:
    """Sort entries by count, highest first, and keep the top ``limit``.

    The sort is stable: equal counts keep the mapping's insertion order.
    A ``limit`` of 0 or less returns every entry.
    """
    ordered = sorted(mapping.items(), key=lambda item: item[1], reverse=True)
    if limit > 0:
        ordered = ordered[:limit]
    return [RankedEntry(key=key, count=count) for key, count in ordered]
