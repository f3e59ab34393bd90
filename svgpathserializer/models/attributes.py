"""Colour and attribute-set models."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from svgpathserializer.models.diagnostics import Diagnostic


@dataclass(frozen=True)
class Color:
    """RGBA colour, every channel normalized to [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Color channel {name}={value!r} outside [0, 1]")

    def with_alpha(self, alpha: float) -> Color:
        return replace(self, alpha=alpha)


TRANSPARENT = Color(1.0, 1.0, 1.0, 0.0)

AttributeValue = Union[str, Color]
AttributeSet = dict[str, AttributeValue]


@dataclass
class DecodedAttributes:
    # None when no attribute survived decoding
    attributes: AttributeSet | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
