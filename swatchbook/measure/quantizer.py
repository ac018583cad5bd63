# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Median-cut color quantization.

The histogram's colors start in a single box covering the whole RGB555
cube. The most populated splittable box is repeatedly cut in two along
its longest channel, at the point where cumulative population reaches
half the box's total, until ``max_colors`` boxes exist or nothing can be
split any further. Each final box becomes one swatch: the
population-weighted average of its colors.

Boxes are index ranges into a single working copy of the histogram;
splitting re-sorts only the box's own slice.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from swatchbook.schema.filter import Filter, is_allowed
from swatchbook.schema.swatch import Swatch
from swatchbook.measure.colorspace import rgb, rgb_to_hsl
from swatchbook.measure.histogram import PixelHistogram, widen_channels

logger = logging.getLogger(__name__)


COMPONENT_RED = 0
COMPONENT_GREEN = 1
COMPONENT_BLUE = 2

# Sort keys per split channel, least significant first (np.lexsort order)
_SORT_KEYS = {
    COMPONENT_RED: (COMPONENT_BLUE, COMPONENT_GREEN, COMPONENT_RED),
    COMPONENT_GREEN: (COMPONENT_BLUE, COMPONENT_RED, COMPONENT_GREEN),
    COMPONENT_BLUE: (COMPONENT_RED, COMPONENT_GREEN, COMPONENT_BLUE),
}


@dataclass
class _ColorBox:
    """
    A box of the RGB555 cube owning ``channels[lower:upper + 1]``.

    ``minimum`` and ``maximum`` are per-channel bounds of the colors inside.
    """
    lower: int
    upper: int
    population: int
    minimum: tuple[int, int, int]
    maximum: tuple[int, int, int]

    @classmethod
    def fit(cls, channels: NDArray[np.int64], populations: NDArray[np.int64], lower: int, upper: int) -> _ColorBox:
        """Create a box over ``[lower, upper]`` with tight channel bounds."""
        members = channels[lower:upper + 1]
        return cls(
            lower=lower,
            upper=upper,
            population=int(populations[lower:upper + 1].sum()),
            minimum=tuple(int(v) for v in members.min(axis=0)),
            maximum=tuple(int(v) for v in members.max(axis=0)),
        )

    @property
    def color_count(self) -> int:
        return self.upper - self.lower + 1

    def can_split(self) -> bool:
        return self.color_count > 1

    def longest_component(self) -> int:
        """Channel with the widest range; ties go to red, then green."""
        red_length, green_length, blue_length = (
            hi - lo for lo, hi in zip(self.minimum, self.maximum)
        )
        if red_length >= green_length and red_length >= blue_length:
            return COMPONENT_RED
        if green_length >= red_length and green_length >= blue_length:
            return COMPONENT_GREEN
        return COMPONENT_BLUE


def _find_split_point(box: _ColorBox, channels: NDArray[np.int64], populations: NDArray[np.int64]) -> int:
    """
    Sort the box's slice by its longest channel and return the last index
    of the lower half.
    """
    lo, hi = box.lower, box.upper + 1
    keys = _SORT_KEYS[box.longest_component()]

    members = channels[lo:hi]
    order = np.lexsort(tuple(members[:, k] for k in keys))
    channels[lo:hi] = members[order]
    populations[lo:hi] = populations[lo:hi][order]

    midpoint = box.population // 2
    cumulative = np.cumsum(populations[lo:hi])
    offset = int(np.searchsorted(cumulative, midpoint, side="left"))

    # The upper box must keep at least one color
    return min(box.upper - 1, lo + offset)


def _split_box(
    box: _ColorBox,
    channels: NDArray[np.int64],
    populations: NDArray[np.int64],
) -> tuple[_ColorBox, _ColorBox]:
    split = _find_split_point(box, channels, populations)
    return (
        _ColorBox.fit(channels, populations, box.lower, split),
        _ColorBox.fit(channels, populations, split + 1, box.upper),
    )


def _split_boxes(
    channels: NDArray[np.int64],
    populations: NDArray[np.int64],
    max_colors: int,
) -> list[_ColorBox]:
    """
    Cut the histogram into at most ``max_colors`` boxes.

    The box chosen for splitting is always the one with the largest
    population, both while fewer than half of ``max_colors`` boxes exist
    and afterwards. Equal populations go to the older box. Boxes that can
    not be split are retired and the next candidate is tried.
    """
    sequence = 0
    root = _ColorBox.fit(channels, populations, 0, len(channels) - 1)
    queue: list[tuple[int, int, _ColorBox]] = [(-root.population, sequence, root)]
    retired: list[tuple[int, int, _ColorBox]] = []

    while queue and len(queue) + len(retired) < max_colors:
        entry = heapq.heappop(queue)
        box = entry[2]
        if not box.can_split():
            retired.append(entry)
            continue

        for part in _split_box(box, channels, populations):
            sequence += 1
            heapq.heappush(queue, (-part.population, sequence, part))

    boxes = sorted(queue + retired)
    logger.debug("Median cut: %d boxes (max %d)", len(boxes), max_colors)
    return [b for _, _, b in boxes]


def _average_color(box: _ColorBox, channels: NDArray[np.int64], populations: NDArray[np.int64]) -> int:
    members = channels[box.lower:box.upper + 1]
    weights = populations[box.lower:box.upper + 1]
    sums = (members * weights[:, None]).sum(axis=0)
    # Half-up rounding of the 5-bit mean
    mean = np.floor(sums / box.population + 0.5).astype(np.int64)
    r, g, b = widen_channels(mean).tolist()
    return rgb(r, g, b)


def _should_ignore(color: int, filters: tuple[Filter, ...]) -> bool:
    if not filters:
        return False
    r, g, b = (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF
    return not is_allowed(color, rgb_to_hsl(r, g, b), filters)


def quantize(
    histogram: PixelHistogram,
    max_colors: int,
    filters: tuple[Filter, ...] = (),
) -> tuple[Swatch, ...]:
    """
    Reduce a histogram to at most ``max_colors`` swatches.

    Args:
        histogram: Filtered color histogram
        max_colors: Upper bound on the number of swatches (>= 1)
        filters: Filters re-applied to averaged box colors; an average
            that a filter rejects is dropped

    Returns:
        Swatches ordered by population, descending. Empty if the
        histogram is empty.

    Raises:
        ValueError: If max_colors < 1
    """
    if max_colors < 1:
        raise ValueError(f"max_colors must be >= 1, got {max_colors}")

    if histogram.is_empty:
        return ()

    if len(histogram) <= max_colors:
        # Few enough colors: each one is its own swatch
        widened = widen_channels(histogram.channels).tolist()
        swatches = [
            Swatch(rgb(r, g, b), int(p))
            for (r, g, b), p in zip(widened, histogram.populations.tolist())
        ]
        swatches.sort(key=lambda s: (-s.population, s.color))
        return tuple(swatches)

    # Private working copies; splitting reorders them in place
    channels = np.array(histogram.channels, dtype=np.int64)
    populations = np.array(histogram.populations, dtype=np.int64)

    swatches = []
    for box in _split_boxes(channels, populations, max_colors):
        color = _average_color(box, channels, populations)
        if _should_ignore(color, filters):
            continue
        swatches.append(Swatch(color, box.population))

    return tuple(swatches)


class ColorCutQuantizer:
    """
    Median-cut quantizer over a pixel buffer.

    Builds the filtered histogram and runs :func:`quantize`; the pixel
    buffer is not retained.
    """

    def __init__(
        self,
        pixels,
        max_colors: int,
        filters: Optional[tuple[Filter, ...]] = None,
    ) -> None:
        if max_colors < 1:
            raise ValueError(f"max_colors must be >= 1, got {max_colors}")
        self.filters = tuple(filters) if filters else ()
        histogram = PixelHistogram.from_pixels(pixels, self.filters)
        self.quantized_colors = quantize(histogram, max_colors, self.filters)
