# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Swatchbook -- prominent color extraction for UI theming.

Quantizes an image's pixels into a handful of swatches with median cut,
then picks swatches for named profiles (vibrant, muted, and their light
and dark variants) so UI elements can be themed around an image.

Quick start::

    from swatchbook import generate

    palette = generate("photo.jpg")
    palette.dominant_swatch        # Most common color
    palette.vibrant_color(0xFF000000)
    palette.muted_swatch.body_text_color
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatchbook.measure import generate, generate_from_pixels
from swatchbook.schema import (
    DEFAULT_FILTER,
    DEFAULT_TARGETS,
    DARK_MUTED,
    DARK_VIBRANT,
    LIGHT_MUTED,
    LIGHT_VIBRANT,
    MUTED,
    VIBRANT,
    Filter,
    FunctionFilter,
    Palette,
    PaletteConfig,
    Region,
    Swatch,
    TargetProfile,
)

__all__ = [
    # Core API
    "generate",
    "generate_from_pixels",
    "Palette",
    "PaletteConfig",
    "Region",
    # Types
    "Swatch",
    "TargetProfile",
    "Filter",
    "FunctionFilter",
    # Built-ins
    "DEFAULT_FILTER",
    "DEFAULT_TARGETS",
    "LIGHT_VIBRANT",
    "VIBRANT",
    "DARK_VIBRANT",
    "LIGHT_MUTED",
    "MUTED",
    "DARK_MUTED",
    # Version
    "__version__",
]
