# Copyright (c) 2026 Swatchbook
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization."""

import dataclasses

import pytest

from swatchbook.schema import (
    DEFAULT_FILTER,
    DEFAULT_TARGETS,
    VIBRANT,
    FunctionFilter,
    Palette,
    PaletteConfig,
    Region,
    Swatch,
    TargetProfile,
)
from swatchbook.measure.colorspace import rgb


class TestSwatch:

    def test_alpha_forced_opaque(self):
        s = Swatch(0x00336699, 3)
        assert s.color == 0xFF336699

    def test_negative_population_raises(self):
        with pytest.raises(ValueError, match="Population"):
            Swatch(rgb(1, 2, 3), -1)

    def test_rgb_and_hex(self):
        s = Swatch(rgb(57, 65, 200), 1)
        assert s.rgb == (57, 65, 200)
        assert s.hex == "#3941C8"

    def test_hsl(self):
        h, s, l = Swatch(rgb(0, 0, 255), 1).hsl
        assert h == pytest.approx(240.0)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_equality_ignores_cached_values(self):
        a = Swatch(rgb(10, 20, 30), 5)
        b = Swatch(rgb(10, 20, 30), 5)
        _ = a.hsl
        _ = a.body_text_color
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_population_affects_equality(self):
        assert Swatch(rgb(10, 20, 30), 5) != Swatch(rgb(10, 20, 30), 6)

    def test_immutable(self):
        s = Swatch(rgb(10, 20, 30), 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.population = 6

    def test_to_dict_roundtrip(self):
        s = Swatch(rgb(200, 100, 50), 42)
        d = s.to_dict()
        assert d == {"color": "#C86432", "population": 42}
        assert Swatch.from_dict(d) == s

    def test_from_dict_int_color(self):
        assert Swatch.from_dict({"color": 0xC86432, "population": 1}) == Swatch(rgb(200, 100, 50), 1)

    def test_str(self):
        text = str(Swatch(rgb(200, 100, 50), 42))
        assert "#C86432" in text
        assert "Population: 42" in text


class TestTargetProfile:

    def test_defaults(self):
        t = TargetProfile("Plain")
        assert t.weights == (0.24, 0.52, 0.24)
        assert t.exclusive

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="saturation"):
            TargetProfile("Bad", max_saturation=1.5)
        with pytest.raises(ValueError, match="lightness"):
            TargetProfile("Bad", min_lightness=-0.1)

    def test_unordered_window_raises(self):
        with pytest.raises(ValueError, match="min <= target <= max"):
            TargetProfile("Bad", min_lightness=0.6, target_lightness=0.5)

    def test_negative_weight_raises(self):
        with pytest.raises(ValueError, match="weights"):
            TargetProfile("Bad", population_weight=-1.0)

    def test_normalized_sums_to_one(self):
        t = TargetProfile("Heavy", saturation_weight=2.0, lightness_weight=1.0, population_weight=1.0)
        n = t.normalized()
        assert sum(n.weights) == pytest.approx(1.0)
        assert n.saturation_weight == pytest.approx(0.5)
        assert t.saturation_weight == 2.0

    def test_normalized_all_zero_unchanged(self):
        t = TargetProfile("Zero", saturation_weight=0.0, lightness_weight=0.0, population_weight=0.0)
        assert t.normalized() is t

    def test_accepts(self):
        assert VIBRANT.accepts(0.8, 0.5)
        assert not VIBRANT.accepts(0.2, 0.5)
        assert not VIBRANT.accepts(0.8, 0.8)

    def test_default_target_order(self):
        assert [t.name for t in DEFAULT_TARGETS] == [
            "Light Vibrant", "Vibrant", "Dark Vibrant",
            "Light Muted", "Muted", "Dark Muted",
        ]

    def test_built_in_windows(self):
        assert VIBRANT.min_saturation == 0.35
        assert VIBRANT.target_saturation == 1.0
        assert (VIBRANT.min_lightness, VIBRANT.target_lightness, VIBRANT.max_lightness) == (0.3, 0.5, 0.7)


class TestRegion:

    def test_size(self):
        r = Region(10, 20, 50, 30)
        assert (r.width, r.height) == (40, 10)

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="positive"):
            Region(5, 5, 5, 10)

    def test_intersect_clips(self):
        assert Region(-10, 50, 60, 200).intersect(40, 100) == Region(0, 50, 40, 100)

    def test_intersect_inside_unchanged(self):
        r = Region(1, 2, 3, 4)
        assert r.intersect(10, 10) == r

    def test_no_intersection_raises(self):
        with pytest.raises(ValueError, match="must intersect"):
            Region(200, 200, 300, 300).intersect(100, 100)


class TestPaletteConfig:

    def test_defaults(self):
        config = PaletteConfig()
        assert config.max_colors == 16
        assert config.resize_area == 112 * 112
        assert config.resize_max_dimension is None
        assert config.region is None
        assert config.filters == (DEFAULT_FILTER,)
        assert config.targets == DEFAULT_TARGETS

    @pytest.mark.parametrize("kwargs", [
        {"max_colors": 0},
        {"resize_area": 0},
        {"resize_max_dimension": -5},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            PaletteConfig(**kwargs)

    def test_sequences_become_tuples(self):
        no_red = FunctionFilter(lambda color, hsl: True)
        config = PaletteConfig(filters=[no_red], targets=[VIBRANT])
        assert config.filters == (no_red,)
        assert config.targets == (VIBRANT,)

    def test_duplicate_targets_removed(self):
        config = PaletteConfig(targets=[VIBRANT, TargetProfile("Other"), VIBRANT])
        assert [t.name for t in config.targets] == ["Vibrant", "Other"]

    def test_bad_filter_type_raises(self):
        with pytest.raises(TypeError, match="Filter"):
            PaletteConfig(filters=[lambda color, hsl: True])

    def test_bad_target_type_raises(self):
        with pytest.raises(TypeError, match="TargetProfile"):
            PaletteConfig(targets=["Vibrant"])

    def test_replace(self):
        config = dataclasses.replace(PaletteConfig(), max_colors=24, filters=())
        assert config.max_colors == 24
        assert config.filters == ()

    def test_add_filters_keeps_default(self):
        pass_all = FunctionFilter(lambda color, hsl: True)
        config = PaletteConfig().add_filters(pass_all)
        assert config.filters == (DEFAULT_FILTER, pass_all)

    def test_add_filters_after_clearing(self):
        pass_all = FunctionFilter(lambda color, hsl: True)
        assert PaletteConfig(filters=()).add_filters(pass_all).filters == (pass_all,)

    def test_add_targets_keeps_defaults(self):
        other = TargetProfile("Other")
        config = PaletteConfig().add_targets(other, VIBRANT)
        assert config.targets == DEFAULT_TARGETS + (other,)

    def test_add_filters_validates(self):
        with pytest.raises(TypeError, match="Filter"):
            PaletteConfig().add_filters(lambda color, hsl: True)


class TestPaletteSerialization:

    def test_to_dict(self):
        red = Swatch(rgb(230, 30, 30), 100)
        palette = Palette.from_swatches([red], targets=[VIBRANT])
        d = palette.to_dict()
        assert d["swatches"] == [red.to_dict()]
        assert d["dominant"] == red.to_dict()
        assert d["targets"] == {"Vibrant": red.to_dict()}

    def test_repr(self):
        palette = Palette.from_swatches([Swatch(rgb(230, 30, 30), 100)])
        assert repr(palette).startswith("Palette(swatches=1")
