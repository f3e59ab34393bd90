"""Significant-digit number formatting for serialized SVG.

The formatters are built once at import from settings and never mutated, so
they can be shared read-only between concurrent callers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from svgpathserializer.config import settings


@dataclass(frozen=True)
class NumberFormat:
    """Positional (never scientific) formatting to a fixed number of significant digits."""

    significant_digits: int

    def __post_init__(self) -> None:
        if self.significant_digits < 1:
            raise ValueError(f"significant_digits must be >= 1, got {self.significant_digits}")

    def format(self, value: float) -> str:
        if not math.isfinite(value):
            raise ValueError(f"Cannot format non-finite value {value!r}")
        text = np.format_float_positional(
            float(value),
            precision=self.significant_digits,
            unique=False,
            fractional=False,
            trim="-",
        )
        # Values that round to zero keep no sign
        if text in ("-0", "0"):
            return "0"
        return text


COORDINATE_FORMAT = NumberFormat(settings.coordinate_significant_digits)
OPACITY_FORMAT = NumberFormat(settings.opacity_significant_digits)


def format_coordinate(value: float) -> str:
    return COORDINATE_FORMAT.format(value)


def format_opacity(value: float) -> str:
    return OPACITY_FORMAT.format(value)
