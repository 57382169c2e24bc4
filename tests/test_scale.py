"""Tests for canvas dimensions and base-pair to pixel scaling."""

from karyoviz.scale import GlyphLayout, compute_scale
from karyoviz.summary import DatasetSummary


def _summary(bar_count, reference_size=1000):
    return DatasetSummary(0, 0, False, reference_size, bar_count)


def test_canvas_dimensions_for_two_contigs():
    scale = compute_scale(_summary(2), GlyphLayout())
    assert scale.canvas_width == 232
    assert scale.canvas_height == 300


def test_pixels_per_bp():
    scale = compute_scale(_summary(1), GlyphLayout())
    assert abs(scale.pixels_per_bp - 0.28) < 1e-12
    assert scale.pixel_height(1000) == 280


def test_interval_pixels_are_floored():
    scale = compute_scale(_summary(1), GlyphLayout())
    assert scale.to_pixels(100) == 28
    assert scale.to_pixels(200) == 56
    assert scale.to_pixels(3) == 0


def test_layout_from_config_ignores_other_keys():
    layout = GlyphLayout.from_config({"glyph_width": 20, "legend_colors": ["#000"], "mode": "all"})
    assert layout.glyph_width == 20
    assert layout.canvas_height == 300


def test_layout_from_empty_config():
    assert GlyphLayout.from_config(None) == GlyphLayout()
