# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Quantization and scoring core for Swatchbook.

All operations are pure and deterministic: the same pixels and settings
always produce the same palette.
"""

from swatchbook.measure.extract import generate, generate_from_pixels

__all__ = ["generate", "generate_from_pixels"]
