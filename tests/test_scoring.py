# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""Tests for target scoring, palette assembly and text colors."""

import pytest

from swatchbook.schema import (
    DARK_MUTED,
    DARK_VIBRANT,
    DEFAULT_TARGETS,
    LIGHT_MUTED,
    LIGHT_VIBRANT,
    MUTED,
    VIBRANT,
    Palette,
    Swatch,
    TargetProfile,
)
from swatchbook.measure.colorspace import (
    BLACK,
    WHITE,
    alpha,
    contrast_ratio,
    rgb,
)
from swatchbook.measure.scoring import (
    MIN_CONTRAST_BODY_TEXT,
    MIN_CONTRAST_TITLE_TEXT,
    find_dominant_swatch,
    score_swatch,
    score_targets,
    text_colors_for_background,
)


RED = rgb(255, 0, 0)
GREEN = rgb(0, 255, 0)
BLUE = rgb(0, 0, 255)


class TestFromSwatches:

    def test_keeps_swatches(self):
        swatches = [Swatch(BLACK, 40), Swatch(GREEN, 60), Swatch(BLUE, 10)]
        palette = Palette.from_swatches(swatches)
        assert palette.swatches == tuple(swatches)
        assert palette.targets == DEFAULT_TARGETS

    def test_dominant(self):
        palette = Palette.from_swatches([Swatch(BLACK, 40), Swatch(GREEN, 60), Swatch(BLUE, 10)])
        assert palette.dominant_swatch == Swatch(GREEN, 60)
        assert palette.dominant_color() == GREEN

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="not valid"):
            Palette.from_swatches([])

    def test_none_raises(self):
        with pytest.raises(ValueError, match="not valid"):
            Palette.from_swatches(None)

    def test_custom_targets(self):
        anything = TargetProfile("Anything")
        palette = Palette.from_swatches([Swatch(RED, 5)], targets=[anything])
        assert palette.targets == (anything,)
        assert palette.swatch_for_target(anything) == Swatch(RED, 5)
        assert palette.vibrant_swatch is None


class TestDefaultTargets:

    def setup_method(self):
        self.vibrant = Swatch(rgb(230, 30, 30), 100)
        self.muted = Swatch(rgb(110, 120, 140), 50)
        self.palette = Palette.from_swatches([self.vibrant, self.muted])

    def test_vibrant_and_muted_found(self):
        assert self.palette.vibrant_swatch == self.vibrant
        assert self.palette.muted_swatch == self.muted
        assert self.palette.vibrant_color() == self.vibrant.color
        assert self.palette.muted_color() == self.muted.color

    def test_other_targets_empty(self):
        for swatch in (
            self.palette.light_vibrant_swatch,
            self.palette.dark_vibrant_swatch,
            self.palette.light_muted_swatch,
            self.palette.dark_muted_swatch,
        ):
            assert swatch is None

    def test_default_colors(self):
        assert self.palette.light_vibrant_color(0x12345678) == 0x12345678
        assert self.palette.dark_muted_color() is None
        assert self.palette.dark_vibrant_color(-1) == -1
        assert self.palette.light_muted_color(WHITE) == WHITE

    def test_every_target_has_an_entry(self):
        selected = self.palette.selected_swatches
        assert set(selected) == {
            LIGHT_VIBRANT, VIBRANT, DARK_VIBRANT, LIGHT_MUTED, MUTED, DARK_MUTED,
        }
        assert selected[VIBRANT] == self.vibrant
        assert selected[DARK_MUTED] is None

    def test_selection_is_read_only(self):
        with pytest.raises(TypeError):
            self.palette.selected_swatches[VIBRANT] = None

    def test_selected_swatches_belong_to_palette(self):
        for swatch in self.palette.selected_swatches.values():
            assert swatch is None or swatch in self.palette.swatches


class TestScoreSwatch:

    def test_weighted_sum(self):
        target = TargetProfile(
            "Half",
            target_saturation=0.5,
            target_lightness=0.5,
            saturation_weight=1.0,
            lightness_weight=1.0,
            population_weight=2.0,
        ).normalized()
        # s=1, l=0.5: 0.25 * 0.5 + 0.25 * 1 + 0.5 * (50 / 100)
        assert score_swatch(Swatch(RED, 50), target, 100) == pytest.approx(0.625)

    def test_zero_weight_ignored(self):
        target = TargetProfile(
            "Population only",
            saturation_weight=0.0,
            lightness_weight=0.0,
            population_weight=1.0,
        ).normalized()
        assert score_swatch(Swatch(RED, 30), target, 60) == pytest.approx(0.5)


class TestScoreTargets:

    def test_exclusive_target_claims_swatch(self):
        first, second = TargetProfile("First"), TargetProfile("Second")
        selected = score_targets((Swatch(RED, 10),), (first, second))
        assert selected[first] == Swatch(RED, 10)
        assert selected[second] is None

    def test_non_exclusive_target_shares_swatch(self):
        first = TargetProfile("First", exclusive=False)
        second = TargetProfile("Second")
        selected = score_targets((Swatch(RED, 10),), (first, second))
        assert selected[first] == Swatch(RED, 10)
        assert selected[second] == Swatch(RED, 10)

    def test_exclusive_swatch_not_reused_by_next_target(self):
        first, second = TargetProfile("First"), TargetProfile("Second")
        swatches = (Swatch(RED, 10), Swatch(rgb(100, 100, 100), 5))
        selected = score_targets(swatches, (first, second))
        assert selected[first] == Swatch(RED, 10)
        assert selected[second] == Swatch(rgb(100, 100, 100), 5)

    def test_first_swatch_wins_ties(self):
        target = TargetProfile("Any")
        red, blue = Swatch(RED, 10), Swatch(BLUE, 10)
        assert score_targets((red, blue), (target,))[target] == red
        assert score_targets((blue, red), (target,))[target] == blue

    def test_window_excludes_swatches(self):
        dark_only = TargetProfile("Dark", max_lightness=0.2, target_lightness=0.1)
        selected = score_targets((Swatch(RED, 10),), (dark_only,))
        assert selected[dark_only] is None

    def test_repeated_target_scored_once(self):
        selected = score_targets((Swatch(RED, 10),), (VIBRANT, VIBRANT))
        assert list(selected) == [VIBRANT]
        assert selected[VIBRANT] == Swatch(RED, 10)

    def test_zero_population_does_not_divide_by_zero(self):
        target = TargetProfile("Any")
        selected = score_targets((Swatch(RED, 0),), (target,))
        assert selected[target] == Swatch(RED, 0)

    def test_no_swatches(self):
        selected = score_targets((), DEFAULT_TARGETS)
        assert all(s is None for s in selected.values())


class TestDominantSwatch:

    def test_largest_population(self):
        swatches = (Swatch(RED, 1), Swatch(BLUE, 9), Swatch(GREEN, 3))
        assert find_dominant_swatch(swatches) == Swatch(BLUE, 9)

    def test_first_wins_ties(self):
        swatches = (Swatch(RED, 5), Swatch(BLUE, 5))
        assert find_dominant_swatch(swatches) == Swatch(RED, 5)

    def test_empty(self):
        assert find_dominant_swatch(()) is None


class TestTextColors:

    def test_white_text_on_black(self):
        title, body = text_colors_for_background(BLACK)
        assert title & 0x00FFFFFF == 0x00FFFFFF
        assert body & 0x00FFFFFF == 0x00FFFFFF
        assert alpha(title) <= alpha(body)

    def test_black_text_on_white(self):
        title, body = text_colors_for_background(WHITE)
        assert title & 0x00FFFFFF == 0
        assert body & 0x00FFFFFF == 0
        assert alpha(title) <= alpha(body)

    @pytest.mark.parametrize("value", range(0, 256, 15))
    def test_contrast_met_across_grays(self, value):
        background = rgb(value, value, value)
        title, body = text_colors_for_background(background)
        assert contrast_ratio(title, background) >= MIN_CONTRAST_TITLE_TEXT
        assert contrast_ratio(body, background) >= MIN_CONTRAST_BODY_TEXT

    @pytest.mark.parametrize("color", [RED, GREEN, BLUE, rgb(255, 255, 0), rgb(0, 128, 128)])
    def test_contrast_met_for_saturated_colors(self, color):
        title, body = text_colors_for_background(color)
        assert contrast_ratio(title, color) >= MIN_CONTRAST_TITLE_TEXT
        assert contrast_ratio(body, color) >= MIN_CONTRAST_BODY_TEXT

    def test_swatch_exposes_text_colors(self):
        swatch = Swatch(BLACK, 1)
        assert (swatch.title_text_color, swatch.body_text_color) == text_colors_for_background(BLACK)
