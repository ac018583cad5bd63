# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes.

Swatches, targets and configuration are immutable; a Palette is read-only
once generated.
"""

from swatchbook.schema.filter import (
    DEFAULT_FILTER,
    DefaultFilter,
    Filter,
    FunctionFilter,
)
from swatchbook.schema.target import (
    DARK_MUTED,
    DARK_VIBRANT,
    DEFAULT_TARGETS,
    LIGHT_MUTED,
    LIGHT_VIBRANT,
    MUTED,
    VIBRANT,
    TargetProfile,
)
from swatchbook.schema.swatch import Swatch
from swatchbook.schema.config import PaletteConfig, Region
from swatchbook.schema.palette import Palette

__all__ = [
    # Filters
    "Filter",
    "DefaultFilter",
    "FunctionFilter",
    "DEFAULT_FILTER",
    # Targets
    "TargetProfile",
    "DEFAULT_TARGETS",
    "LIGHT_VIBRANT",
    "VIBRANT",
    "DARK_VIBRANT",
    "LIGHT_MUTED",
    "MUTED",
    "DARK_MUTED",
    # Results
    "Swatch",
    "Palette",
    # Configuration
    "PaletteConfig",
    "Region",
]
