# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Swatch: a representative color plus the number of pixels it stands for.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class Swatch:
    """
    A color swatch generated from an image's palette.

    Equality and hashing use ``color`` and ``population`` only. HSL and
    text colors are derived from ``color`` on first access and memoized;
    whether they have been computed never affects comparisons.

    Attributes:
        color: Packed ARGB integer. Swatches are always opaque; any alpha
            passed in is replaced with 0xFF.
        population: Number of pixels this swatch represents
    """
    color: int
    population: int

    def __post_init__(self) -> None:
        """Force opacity and validate population."""
        if self.population < 0:
            raise ValueError(f"Population must be >= 0, got {self.population}")
        object.__setattr__(self, "color", (self.color & 0x00FFFFFF) | 0xFF000000)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """(r, g, b) channels, 0-255."""
        return (self.color >> 16) & 0xFF, (self.color >> 8) & 0xFF, self.color & 0xFF

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8"."""
        from swatchbook.measure.colorspace import to_hex
        return to_hex(self.color)

    @cached_property
    def hsl(self) -> tuple[float, float, float]:
        """
        (h, s, l): hue in [0, 360), saturation and lightness in [0, 1].
        """
        from swatchbook.measure.colorspace import rgb_to_hsl
        return rgb_to_hsl(*self.rgb)

    @cached_property
    def _text_colors(self) -> tuple[int, int]:
        from swatchbook.measure.scoring import text_colors_for_background
        return text_colors_for_background(self.color)

    @property
    def title_text_color(self) -> int:
        """
        ARGB color for 'title' text displayed over this swatch.

        White or black at the lowest alpha that reaches a 3.0 contrast ratio.
        """
        return self._text_colors[0]

    @property
    def body_text_color(self) -> int:
        """
        ARGB color for 'body' text displayed over this swatch.

        White or black at the lowest alpha that reaches a 4.5 contrast ratio.
        """
        return self._text_colors[1]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.hex, "population": self.population}

    @classmethod
    def from_dict(cls, data: dict) -> Swatch:
        """Deserialize from dictionary (``color`` as hex string or int)."""
        color = data["color"]
        if isinstance(color, str):
            color = int(color.lstrip("#"), 16)
        return cls(color=color, population=data["population"])

    def __str__(self) -> str:
        h, s, l = self.hsl
        return (
            f"Swatch [RGB: {self.hex}] [HSL: ({h:.1f}, {s:.3f}, {l:.3f})] "
            f"[Population: {self.population}] "
            f"[Title Text: #{self.title_text_color:08X}] "
            f"[Body Text: #{self.body_text_color:08X}]"
        )
