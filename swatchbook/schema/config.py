# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Palette generation settings.

One immutable record, validated on construction. Use
``dataclasses.replace`` to derive variants.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from swatchbook.schema.filter import DEFAULT_FILTER, Filter
from swatchbook.schema.target import DEFAULT_TARGETS, TargetProfile


DEFAULT_RESIZE_AREA = 112 * 112
DEFAULT_MAX_COLORS = 16


@dataclass(frozen=True)
class Region:
    """
    Rectangular area of an image, in pixels.

    ``right`` and ``bottom`` are exclusive.
    """
    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        if self.right <= self.left or self.bottom <= self.top:
            raise ValueError(
                f"Region must have positive width and height, got {self}"
            )

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def intersect(self, width: int, height: int) -> Region:
        """
        Clip this region to an image of the given size.

        Raises:
            ValueError: If the region lies entirely outside the image
        """
        left = max(self.left, 0)
        top = max(self.top, 0)
        right = min(self.right, width)
        bottom = min(self.bottom, height)
        if right <= left or bottom <= top:
            raise ValueError(
                f"The given region must intersect with the image's "
                f"dimensions ({width}x{height}), got {self}"
            )
        return Region(left, top, right, bottom)


@dataclass(frozen=True)
class PaletteConfig:
    """
    Settings for palette generation from pixels.

    Attributes:
        max_colors: Maximum number of swatches the quantizer may produce.
            Landscapes work well with 10-16; images dominated by faces
            benefit from ~24.
        resize_area: If the image covers more pixels than this, it is scaled
            down to roughly this area before quantization. None disables
            area-based resizing.
        resize_max_dimension: Only used when ``resize_area`` is None. If the
            image's largest side is longer than this, it is scaled down so
            that side matches. None disables resizing.
        region: Optional area of the image to restrict the palette to
        filters: Color filters, evaluated in order. Passing ``filters``
            replaces the default chain; use :meth:`add_filters` to keep
            ``DEFAULT_FILTER`` and append to it, or pass ``()`` to clear it.
        targets: Target profiles, scored in order. As with filters, use
            :meth:`add_targets` to keep the six defaults.
    """
    max_colors: int = DEFAULT_MAX_COLORS
    resize_area: Optional[int] = DEFAULT_RESIZE_AREA
    resize_max_dimension: Optional[int] = None
    region: Optional[Region] = None
    filters: tuple[Filter, ...] = (DEFAULT_FILTER,)
    targets: tuple[TargetProfile, ...] = DEFAULT_TARGETS

    def __post_init__(self) -> None:
        """Validate settings and freeze sequences into tuples."""
        if self.max_colors < 1:
            raise ValueError(f"max_colors must be >= 1, got {self.max_colors}")
        if self.resize_area is not None and self.resize_area <= 0:
            raise ValueError(f"resize_area must be > 0 or None, got {self.resize_area}")
        if self.resize_max_dimension is not None and self.resize_max_dimension <= 0:
            raise ValueError(
                f"resize_max_dimension must be > 0 or None, got {self.resize_max_dimension}"
            )

        filters = tuple(self.filters)
        for f in filters:
            if not isinstance(f, Filter):
                raise TypeError(f"Expected a Filter with is_allowed(rgb, hsl), got {type(f)}")
        object.__setattr__(self, "filters", filters)

        targets = tuple(self.targets)
        for t in targets:
            if not isinstance(t, TargetProfile):
                raise TypeError(f"Expected TargetProfile, got {type(t)}")
        object.__setattr__(self, "targets", _dedupe(targets))

    def add_filters(self, *filters: Filter) -> PaletteConfig:
        """Copy of this config with ``filters`` appended to the current chain."""
        return replace(self, filters=self.filters + filters)

    def add_targets(self, *targets: TargetProfile) -> PaletteConfig:
        """Copy of this config with ``targets`` scored after the current ones."""
        return replace(self, targets=self.targets + targets)


def _dedupe(targets: tuple[TargetProfile, ...]) -> tuple[TargetProfile, ...]:
    """Drop repeated targets, keeping first occurrence order."""
    seen = []
    for t in targets:
        if t not in seen:
            seen.append(t)
    return tuple(seen)
