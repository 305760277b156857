"""WCAG contrast of extracted colors against black and white.

Luminance follows <https://www.w3.org/TR/WCAG20/#relativeluminancedef>.
"""

import string
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .logging_config import get_logger
from .models import ContrastEntry, RankedEntry

logger = get_logger(__name__)

# Rec. 709 channel weights
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

LINEAR_THRESHOLD = 0.03928

# 0x + alpha + rgb, e.g. 0xff1da1f3
HEX_COLOR_KEY_LENGTH = 10

# (upper bound, label), checked in order
CONTRAST_LEVELS: Sequence[Tuple[float, str]] = (
    (2.9, "fail"),
    (4.5, "AA+"),
    (7.0, "AA"),
    (25.0, "AAA"),
)


def linearize(components) -> np.ndarray:
    """Convert gamma-encoded sRGB components in [0, 1] to linear light."""
    c = np.asarray(components, dtype=float)
    return np.where(c <= LINEAR_THRESHOLD, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


@dataclass(frozen=True)
class ColorRGBa:
    """An sRGB color with channels in [0, 1]."""

    r: float
    g: float
    b: float

    @classmethod
    def from_hex(cls, hex_code: str) -> "ColorRGBa":
        """Parse 'fff', '#ffffff' or '1da1f3'.

        Raises:
            ValueError: If the code is not 3 or 6 hex digits
        """
        parsed = hex_code.replace("#", "")
        length = len(parsed)
        if length not in (3, 6) or not all(ch in string.hexdigits for ch in parsed):
            raise ValueError(f"Expected 3 or 6 hex digits, got {hex_code!r}")

        width = length // 3
        channels = []
        for idx in range(3):
            part = parsed[idx * width:(idx + 1) * width]
            if length == 3:
                part = part + part
            channels.append(int(part, 16) / 255.0)

        return cls(*channels)

    def compute_luminance(self) -> float:
        """Relative luminance in [0, 1]."""
        linear = linearize((self.r, self.g, self.b))
        return float(np.clip(np.dot(LUMINANCE_WEIGHTS, linear), 0.0, 1.0))


BLACK = ColorRGBa.from_hex("000000")
WHITE = ColorRGBa.from_hex("ffffff")


def calculate_contrast(color1: ColorRGBa, color2: ColorRGBa) -> float:
    """WCAG contrast ratio, >= 1.0, larger meaning more contrast."""
    lum1 = color1.compute_luminance()
    lum2 = color2.compute_luminance()
    darker = min(lum1, lum2)
    lighter = max(lum1, lum2)
    return 1 / ((darker + 0.05) / (lighter + 0.05))


def contrast_label(contrast: float) -> str:
    """'fail', 'AA+', 'AA', 'AAA', or '' above the last level."""
    for upper, label in CONTRAST_LEVELS:
        if contrast < upper:
            return label
    return ""


def color_from_key(key: str) -> Optional[ColorRGBa]:
    """Read the RGB part of a '0xAARRGGBB' key; None for anything else."""
    if len(key) != HEX_COLOR_KEY_LENGTH:
        return None
    try:
        return ColorRGBa.from_hex(key[-6:])
    except ValueError:
        logger.debug(f"Skipping non-hex color key {key!r}")
        return None


def analyze_contrast(ranked_colors: Iterable[RankedEntry]) -> List[ContrastEntry]:
    """Contrast rows for every ranked color that is a literal hex value."""
    entries: List[ContrastEntry] = []
    for entry in ranked_colors:
        color = color_from_key(entry.key)
        if color is None:
            continue

        black = calculate_contrast(color, BLACK)
        white = calculate_contrast(color, WHITE)
        entries.append(
            ContrastEntry(
                color=entry.key,
                count=entry.count,
                black_ratio=black,
                black_label=contrast_label(black),
                white_ratio=white,
                white_label=contrast_label(white),
            )
        )
    return entries
