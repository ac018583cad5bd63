# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Color filters.

A filter decides whether a color may take part in quantization. Filters
are evaluated in registration order; a color is kept only if every filter
allows it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


HSL = tuple[float, float, float]


@runtime_checkable
class Filter(Protocol):
    """Hook for fine-grained control over which colors end up in a palette."""

    def is_allowed(self, rgb: int, hsl: HSL) -> bool:
        """
        Args:
            rgb: The color as a packed ARGB integer
            hsl: (h, s, l) of the color

        Returns:
            True if the color is allowed
        """
        ...


@dataclass(frozen=True)
class DefaultFilter:
    """
    Rejects colors that are rarely useful for theming:

    - near black (lightness <= black_max_lightness)
    - near white (lightness >= white_min_lightness)
    - close to the red side of the I line (skin tones): hue in
      [i_line_min_hue, i_line_max_hue] and saturation <= i_line_max_saturation
    """

    black_max_lightness: float = 0.05
    white_min_lightness: float = 0.95
    i_line_min_hue: float = 10.0
    i_line_max_hue: float = 37.0
    i_line_max_saturation: float = 0.82

    def is_allowed(self, rgb: int, hsl: HSL) -> bool:
        return not self.is_white(hsl) and not self.is_black(hsl) and not self.is_near_red_i_line(hsl)

    def is_black(self, hsl: HSL) -> bool:
        return hsl[2] <= self.black_max_lightness

    def is_white(self, hsl: HSL) -> bool:
        return hsl[2] >= self.white_min_lightness

    def is_near_red_i_line(self, hsl: HSL) -> bool:
        return (
            self.i_line_min_hue <= hsl[0] <= self.i_line_max_hue
            and hsl[1] <= self.i_line_max_saturation
        )


@dataclass(frozen=True)
class FunctionFilter:
    """Adapt a plain ``(rgb, hsl) -> bool`` function to the Filter protocol."""

    function: Callable[[int, HSL], bool]

    def is_allowed(self, rgb: int, hsl: HSL) -> bool:
        return bool(self.function(rgb, hsl))


DEFAULT_FILTER = DefaultFilter()


def is_allowed(rgb: int, hsl: HSL, filters: tuple[Filter, ...]) -> bool:
    """True if every filter in ``filters`` allows the color."""
    for f in filters:
        if not f.is_allowed(rgb, hsl):
            return False
    return True
