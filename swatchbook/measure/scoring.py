# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Target scoring.

Matches quantized swatches to target profiles. Targets are processed in
registration order; for each one every eligible swatch is scored and the
best is selected. Exclusive targets claim their swatch's color so later
targets can not pick it again.

Score = w_s * (1 - |s - target_s|)
      + w_l * (1 - |l - target_l|)
      + w_p * (population / max_population)
"""

from __future__ import annotations

import logging
from typing import Optional

from swatchbook.schema.palette import Palette
from swatchbook.schema.swatch import Swatch
from swatchbook.schema.target import TargetProfile
from swatchbook.measure.colorspace import (
    BLACK,
    WHITE,
    contrast_ratio,
    minimum_alpha_for_contrast,
    set_alpha,
)

logger = logging.getLogger(__name__)


MIN_CONTRAST_TITLE_TEXT = 3.0
MIN_CONTRAST_BODY_TEXT = 4.5


def find_dominant_swatch(swatches: tuple[Swatch, ...]) -> Optional[Swatch]:
    """Swatch with the largest population; first one wins ties."""
    dominant: Optional[Swatch] = None
    for swatch in swatches:
        if dominant is None or swatch.population > dominant.population:
            dominant = swatch
    return dominant


def score_swatch(swatch: Swatch, target: TargetProfile, max_population: int) -> float:
    """
    Weighted score of ``swatch`` against an already-normalized ``target``.

    Criteria with a zero weight contribute nothing.
    """
    _, saturation, lightness = swatch.hsl

    saturation_score = 0.0
    lightness_score = 0.0
    population_score = 0.0

    if target.saturation_weight > 0:
        saturation_score = target.saturation_weight * (
            1.0 - abs(saturation - target.target_saturation)
        )
    if target.lightness_weight > 0:
        lightness_score = target.lightness_weight * (
            1.0 - abs(lightness - target.target_lightness)
        )
    if target.population_weight > 0:
        population_score = target.population_weight * (
            swatch.population / max_population
        )

    return saturation_score + lightness_score + population_score


def _best_swatch(
    swatches: tuple[Swatch, ...],
    target: TargetProfile,
    used_colors: set[int],
    max_population: int,
) -> Optional[Swatch]:
    best: Optional[Swatch] = None
    best_score = 0.0
    for swatch in swatches:
        _, saturation, lightness = swatch.hsl
        if not target.accepts(saturation, lightness) or swatch.color in used_colors:
            continue
        score = score_swatch(swatch, target, max_population)
        # Strict comparison: the first swatch in scan order wins ties
        if best is None or score > best_score:
            best = swatch
            best_score = score
    return best


def score_targets(
    swatches: tuple[Swatch, ...],
    targets: tuple[TargetProfile, ...],
    dominant: Optional[Swatch] = None,
) -> dict[TargetProfile, Optional[Swatch]]:
    """
    Select a swatch for each target.

    Args:
        swatches: Candidate swatches, in scan order
        targets: Targets, in scoring order
        dominant: Dominant swatch (computed from ``swatches`` if None)

    Returns:
        Mapping from each target (as passed in) to its swatch, or None
        when no swatch was eligible.
    """
    if dominant is None:
        dominant = find_dominant_swatch(swatches)
    max_population = dominant.population if dominant is not None and dominant.population > 0 else 1

    used_colors: set[int] = set()
    selected: dict[TargetProfile, Optional[Swatch]] = {}

    for target in targets:
        if target in selected:
            continue
        best = _best_swatch(swatches, target.normalized(), used_colors, max_population)
        if best is not None and target.exclusive:
            used_colors.add(best.color)
        selected[target] = best
        logger.debug("Target %r -> %s", target.name, best.hex if best is not None else None)

    return selected


def build_palette(
    swatches: tuple[Swatch, ...],
    targets: tuple[TargetProfile, ...],
) -> Palette:
    """Score ``swatches`` against ``targets`` and wrap the result in a Palette."""
    dominant = find_dominant_swatch(swatches)
    selected = score_targets(swatches, targets, dominant)
    return Palette(
        swatches=swatches,
        targets=tuple(selected),
        selected=selected,
        dominant=dominant,
    )


# =============================================================================
# Text colors
# =============================================================================


def text_colors_for_background(background: int) -> tuple[int, int]:
    """
    Pick readable title and body text colors for an opaque background.

    White is tried first (most swatches are dark), then black, each at the
    lowest alpha that meets the contrast threshold. If neither works for
    both roles, each role uses whichever foreground works for it.

    Returns:
        (title_color, body_color) as packed ARGB integers
    """
    light_body_alpha = minimum_alpha_for_contrast(WHITE, background, MIN_CONTRAST_BODY_TEXT)
    light_title_alpha = minimum_alpha_for_contrast(WHITE, background, MIN_CONTRAST_TITLE_TEXT)

    if light_body_alpha != -1 and light_title_alpha != -1:
        return set_alpha(WHITE, light_title_alpha), set_alpha(WHITE, light_body_alpha)

    dark_body_alpha = minimum_alpha_for_contrast(BLACK, background, MIN_CONTRAST_BODY_TEXT)
    dark_title_alpha = minimum_alpha_for_contrast(BLACK, background, MIN_CONTRAST_TITLE_TEXT)

    if dark_body_alpha != -1 and dark_title_alpha != -1:
        return set_alpha(BLACK, dark_title_alpha), set_alpha(BLACK, dark_body_alpha)

    title = _mixed_text_color(light_title_alpha, dark_title_alpha, background)
    body = _mixed_text_color(light_body_alpha, dark_body_alpha, background)
    return title, body


def _mixed_text_color(light_alpha: int, dark_alpha: int, background: int) -> int:
    if light_alpha != -1:
        return set_alpha(WHITE, light_alpha)
    if dark_alpha != -1:
        return set_alpha(BLACK, dark_alpha)
    # Neither reaches the threshold: use the stronger opaque option
    if contrast_ratio(WHITE, background) >= contrast_ratio(BLACK, background):
        return WHITE
    return BLACK
