# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""
Target profiles.

A target describes the character of a swatch a caller wants out of a
palette: acceptance windows on saturation and lightness, the ideal values
inside those windows, and how much saturation, lightness and population
each contribute to a swatch's score.

Six profiles are built in: light/normal/dark variants of vibrant and muted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


# Lightness bands
TARGET_DARK_LUMA = 0.26
MAX_DARK_LUMA = 0.45

MIN_LIGHT_LUMA = 0.55
TARGET_LIGHT_LUMA = 0.74

MIN_NORMAL_LUMA = 0.3
TARGET_NORMAL_LUMA = 0.5
MAX_NORMAL_LUMA = 0.7

# Saturation bands
TARGET_MUTED_SATURATION = 0.3
MAX_MUTED_SATURATION = 0.4

TARGET_VIBRANT_SATURATION = 1.0
MIN_VIBRANT_SATURATION = 0.35

# Score weights
WEIGHT_SATURATION = 0.24
WEIGHT_LUMA = 0.52
WEIGHT_POPULATION = 0.24


@dataclass(frozen=True)
class TargetProfile:
    """
    A named swatch profile.

    Attributes:
        name: Human-readable name, e.g. "Vibrant"
        min_saturation / target_saturation / max_saturation: Saturation window [0, 1]
        min_lightness / target_lightness / max_lightness: Lightness window [0, 1]
        saturation_weight / lightness_weight / population_weight: Score weights
            (>= 0). They are normalized to sum to 1 before scoring.
        exclusive: If True, a swatch selected for this target can not be
            selected by any later target.
    """
    name: str
    min_saturation: float = 0.0
    target_saturation: float = 0.5
    max_saturation: float = 1.0
    min_lightness: float = 0.0
    target_lightness: float = 0.5
    max_lightness: float = 1.0
    saturation_weight: float = WEIGHT_SATURATION
    lightness_weight: float = WEIGHT_LUMA
    population_weight: float = WEIGHT_POPULATION
    exclusive: bool = True

    def __post_init__(self) -> None:
        """Validate windows and weights."""
        for label, lo, mid, hi in (
            ("saturation", self.min_saturation, self.target_saturation, self.max_saturation),
            ("lightness", self.min_lightness, self.target_lightness, self.max_lightness),
        ):
            for value in (lo, mid, hi):
                if not 0.0 <= value <= 1.0:
                    raise ValueError(f"{self.name}: {label} values must be 0-1, got {value}")
            if not lo <= mid <= hi:
                raise ValueError(
                    f"{self.name}: expected min <= target <= max for {label}, "
                    f"got {lo}, {mid}, {hi}"
                )
        for weight in (self.saturation_weight, self.lightness_weight, self.population_weight):
            if weight < 0.0:
                raise ValueError(f"{self.name}: weights must be >= 0, got {weight}")

    @property
    def weights(self) -> tuple[float, float, float]:
        """(saturation, lightness, population) weights."""
        return self.saturation_weight, self.lightness_weight, self.population_weight

    def normalized(self) -> TargetProfile:
        """
        Copy of this target whose positive weights sum to 1.

        Returned unchanged when every weight is zero.
        """
        total = sum(w for w in self.weights if w > 0)
        if total == 0:
            return self
        return replace(
            self,
            saturation_weight=self.saturation_weight / total,
            lightness_weight=self.lightness_weight / total,
            population_weight=self.population_weight / total,
        )

    def accepts(self, saturation: float, lightness: float) -> bool:
        """True if (saturation, lightness) lies inside both windows."""
        return (
            self.min_saturation <= saturation <= self.max_saturation
            and self.min_lightness <= lightness <= self.max_lightness
        )


# =============================================================================
# Built-in targets
# =============================================================================

LIGHT_VIBRANT = TargetProfile(
    name="Light Vibrant",
    min_lightness=MIN_LIGHT_LUMA,
    target_lightness=TARGET_LIGHT_LUMA,
    min_saturation=MIN_VIBRANT_SATURATION,
    target_saturation=TARGET_VIBRANT_SATURATION,
)

VIBRANT = TargetProfile(
    name="Vibrant",
    min_lightness=MIN_NORMAL_LUMA,
    target_lightness=TARGET_NORMAL_LUMA,
    max_lightness=MAX_NORMAL_LUMA,
    min_saturation=MIN_VIBRANT_SATURATION,
    target_saturation=TARGET_VIBRANT_SATURATION,
)

DARK_VIBRANT = TargetProfile(
    name="Dark Vibrant",
    target_lightness=TARGET_DARK_LUMA,
    max_lightness=MAX_DARK_LUMA,
    min_saturation=MIN_VIBRANT_SATURATION,
    target_saturation=TARGET_VIBRANT_SATURATION,
)

LIGHT_MUTED = TargetProfile(
    name="Light Muted",
    min_lightness=MIN_LIGHT_LUMA,
    target_lightness=TARGET_LIGHT_LUMA,
    target_saturation=TARGET_MUTED_SATURATION,
    max_saturation=MAX_MUTED_SATURATION,
)

MUTED = TargetProfile(
    name="Muted",
    min_lightness=MIN_NORMAL_LUMA,
    target_lightness=TARGET_NORMAL_LUMA,
    max_lightness=MAX_NORMAL_LUMA,
    target_saturation=TARGET_MUTED_SATURATION,
    max_saturation=MAX_MUTED_SATURATION,
)

DARK_MUTED = TargetProfile(
    name="Dark Muted",
    target_lightness=TARGET_DARK_LUMA,
    max_lightness=MAX_DARK_LUMA,
    target_saturation=TARGET_MUTED_SATURATION,
    max_saturation=MAX_MUTED_SATURATION,
)

# Scoring order matters: earlier exclusive targets claim swatches first.
DEFAULT_TARGETS: tuple[TargetProfile, ...] = (
    LIGHT_VIBRANT,
    VIBRANT,
    DARK_VIBRANT,
    LIGHT_MUTED,
    MUTED,
    DARK_MUTED,
)
