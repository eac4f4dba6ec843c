# tests/test_gallery.py
"""
Tests for imagefunc/gallery.py - every preset builds and samples.
"""
import pytest

from imagefunc.color import Color
from imagefunc.coordinate import CartesianPoint, PolarPoint
from imagefunc.gallery import PRESETS, build_preset, list_presets, render_gallery

PROBES = [
    CartesianPoint(0.0, 0.0),
    CartesianPoint(37.0, -12.0),
    CartesianPoint(-150.0, 90.0),
    PolarPoint(200.0, 2.0),
]


def test_every_operation_has_a_preset():
    expected = {
        "constant", "circle", "checker", "polar_checker", "rings",
        "vertical_stripe", "rotate", "translate", "scale",
        "cond", "lerp", "darken", "lighten",
    }
    assert expected <= set(list_presets())


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_preset_samples_colors(name):
    img = build_preset(name)
    for p in PROBES:
        assert isinstance(img(p), Color)


def test_unknown_preset():
    with pytest.raises(KeyError, match="Unknown preset"):
        build_preset("mandelbrot")


def test_render_gallery_subset(tmp_path):
    written = render_gallery(tmp_path, size=8, names=["checker", "lighten"])
    assert [p.name for p in written] == ["checker.png", "lighten.png"]
    assert all(p.exists() for p in written)
