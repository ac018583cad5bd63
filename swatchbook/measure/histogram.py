# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Pixel histogram.

Reduces a buffer of packed ARGB pixels to a sorted list of distinct colors
with their pixel counts. Colors are first quantized to 5 bits per channel,
so at most 32768 distinct colors survive. Colors rejected by any filter
are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from swatchbook.schema.filter import Filter, is_allowed
from swatchbook.measure.colorspace import rgb, rgb_array_to_hsl

logger = logging.getLogger(__name__)


QUANTIZE_WORD_WIDTH = 5
QUANTIZE_WORD_MASK = (1 << QUANTIZE_WORD_WIDTH) - 1
_WIDEN_SHIFT = 8 - QUANTIZE_WORD_WIDTH


def quantize_channels(pixels: NDArray[np.integer]) -> NDArray[np.int64]:
    """
    Reduce packed ARGB pixels to 15-bit RGB555 values.

    Alpha is ignored.
    """
    pixels = np.asarray(pixels).astype(np.int64) & 0xFFFFFFFF
    r = (pixels >> (16 + _WIDEN_SHIFT)) & QUANTIZE_WORD_MASK
    g = (pixels >> (8 + _WIDEN_SHIFT)) & QUANTIZE_WORD_MASK
    b = (pixels >> _WIDEN_SHIFT) & QUANTIZE_WORD_MASK
    return (r << (2 * QUANTIZE_WORD_WIDTH)) | (g << QUANTIZE_WORD_WIDTH) | b


def split_quantized(colors: NDArray[np.integer]) -> NDArray[np.int64]:
    """Unpack RGB555 values into an (N, 3) array of 5-bit channels."""
    colors = np.asarray(colors, dtype=np.int64)
    return np.stack(
        [
            (colors >> (2 * QUANTIZE_WORD_WIDTH)) & QUANTIZE_WORD_MASK,
            (colors >> QUANTIZE_WORD_WIDTH) & QUANTIZE_WORD_MASK,
            colors & QUANTIZE_WORD_MASK,
        ],
        axis=-1,
    )


def widen_channels(channels: NDArray[np.integer]) -> NDArray[np.int64]:
    """Expand 5-bit channels back to 8 bits."""
    return np.asarray(channels, dtype=np.int64) << _WIDEN_SHIFT


@dataclass(frozen=True)
class PixelHistogram:
    """
    Distinct quantized colors and their pixel counts.

    Attributes:
        colors: (K,) RGB555 values, ascending
        populations: (K,) pixel counts, all > 0
    """
    colors: NDArray[np.int64]
    populations: NDArray[np.int64]

    @classmethod
    def from_pixels(
        cls,
        pixels: Union[Sequence[int], NDArray[np.integer]],
        filters: tuple[Filter, ...] = (),
    ) -> PixelHistogram:
        """
        Build the histogram for a flat buffer of packed ARGB pixels.

        Raises:
            ValueError: If ``pixels`` is empty or not one-dimensional
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 1:
            raise ValueError(f"Expected a flat pixel buffer, got shape {pixels.shape}")
        if pixels.size == 0:
            raise ValueError("Cannot build a histogram from an empty pixel buffer")

        colors, counts = np.unique(quantize_channels(pixels), return_counts=True)
        counts = counts.astype(np.int64)

        if filters and len(colors):
            keep = _allowed_mask(colors, filters)
            colors = colors[keep]
            counts = counts[keep]

        logger.debug(
            "Histogram: %d pixels, %d distinct colors after filtering",
            pixels.size, len(colors),
        )
        return cls(colors=colors, populations=counts)

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def is_empty(self) -> bool:
        return len(self.colors) == 0

    @property
    def channels(self) -> NDArray[np.int64]:
        """(K, 3) array of 5-bit (r, g, b) channels."""
        return split_quantized(self.colors)

    @property
    def total_population(self) -> int:
        return int(self.populations.sum())


def _allowed_mask(colors: NDArray[np.int64], filters: tuple[Filter, ...]) -> NDArray[np.bool_]:
    """Run every filter over the widened 8-bit version of each quantized color."""
    rgb888 = widen_channels(split_quantized(colors))
    hsl = rgb_array_to_hsl(rgb888)

    keep = np.empty(len(colors), dtype=bool)
    for i, ((r, g, b), (h, s, l)) in enumerate(zip(rgb888.tolist(), hsl.tolist())):
        keep[i] = is_allowed(rgb(r, g, b), (h, s, l), filters)
    return keep
