import math

import numpy as np
import pytest

from gradient_visualizer.gradient import (
    DEFAULT_OPTIONS,
    LUMINANCE_ORDER,
    SAMPLE_LABELS,
    GradientOptions,
    create_gradient,
    create_gradient_with_oklch,
)
from gradient_visualizer.oklch import (
    InvalidColorError,
    clamp_gamut,
    to_oklch,
    to_point,
    with_lc,
)

BLUE = "#3b82f6"


def lightness(result, labels):
    return [result.oklch_points[k].l for k in labels]


def test_label_tables():
    assert LUMINANCE_ORDER == (0, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950, 1000)
    assert SAMPLE_LABELS[0] == 950 and SAMPLE_LABELS[-1] == 50
    assert set(SAMPLE_LABELS) | {0, 1000} == set(LUMINANCE_ORDER)


def test_boundaries_white_black():
    res = create_gradient_with_oklch(BLUE)
    assert res.palette[0] == "#ffffff"
    assert res.palette[1000] == "#000000"
    assert (res.oklch_points[0].l, res.oklch_points[0].c, res.oklch_points[0].h) == (1.0, 0.0, None)
    assert (res.oklch_points[1000].l, res.oklch_points[1000].c, res.oklch_points[1000].h) == (0.0, 0.0, None)


@pytest.mark.parametrize("color", [BLUE, "#ff0000", "#808080", "#00ff00", "#000000"])
def test_exactly_thirteen_labels(color):
    res = create_gradient_with_oklch(color)
    assert list(res.palette) == list(LUMINANCE_ORDER)
    assert list(res.oklch_points) == list(LUMINANCE_ORDER)
    assert all(len(h) == 7 and h.startswith("#") for h in res.palette.values())


def test_deterministic():
    opts = {"min_l": 0.25, "main_color_stop": 0.4}
    assert create_gradient_with_oklch(BLUE, opts) == create_gradient_with_oklch(BLUE, opts)


def test_defaults_round_trip():
    explicit = GradientOptions(
        min_l=0.2, max_l=0.98, dark_chroma=0.001, light_chroma=0.01, main_color_stop=0.5
    )
    assert explicit == DEFAULT_OPTIONS
    assert create_gradient_with_oklch(BLUE) == create_gradient_with_oklch(BLUE, explicit)
    assert create_gradient_with_oklch(BLUE) == create_gradient_with_oklch(BLUE, {})


def test_partial_options_override_defaults():
    opts = DEFAULT_OPTIONS.merged({"max_l": 0.9})
    assert opts.max_l == 0.9
    assert opts.min_l == DEFAULT_OPTIONS.min_l
    with pytest.raises(TypeError):
        DEFAULT_OPTIONS.merged({"minLightness": 0.1})


def test_scenario_a_lightness_increases_dark_to_light():
    res = create_gradient_with_oklch(BLUE)
    ls = lightness(res, SAMPLE_LABELS)
    assert all(a < b for a, b in zip(ls, ls[1:]))


@pytest.mark.parametrize(
    "opts",
    [{}, {"min_l": 0.3, "max_l": 0.95}, {"min_l": 0.1, "main_color_stop": 0.7}],
)
def test_endpoint_lightness(opts):
    res = create_gradient_with_oklch(BLUE, opts)
    o = DEFAULT_OPTIONS.merged(opts)
    assert math.isclose(res.oklch_points[950].l, o.min_l, abs_tol=1e-6)
    assert math.isclose(res.oklch_points[50].l, o.max_l, abs_tol=1e-6)


def test_endpoint_chroma_and_hue():
    res = create_gradient_with_oklch(BLUE)
    main = clamp_gamut(to_oklch(BLUE))
    main_h = res.main_color_oklch.h
    # the dark end is displayable as requested
    assert np.isclose(res.oklch_points[950].c, 0.001, atol=1e-6)
    # the light end (0.98, 0.01) sits just outside sRGB, so its chroma is clamped down
    light = to_point(clamp_gamut(with_lc(main, 0.98, 0.01)))
    p50 = res.oklch_points[50]
    assert np.allclose([p50.l, p50.c], [light.l, light.c], atol=1e-6)
    assert p50.c <= 0.01
    assert np.isclose(res.oklch_points[950].h, main_h, atol=1e-6)
    assert np.isclose(p50.h, main_h, atol=1e-6)


def test_main_color_point_is_clamped_and_option_independent():
    expected = to_point(clamp_gamut(to_oklch(BLUE)))
    for opts in ({}, {"min_l": 0.05}, {"dark_chroma": 0.1, "light_chroma": 0.0}):
        assert create_gradient_with_oklch(BLUE, opts).main_color_oklch == expected


def test_main_color_sits_at_its_stop():
    # mainColorStop = 0.5 → sample index 5 → label 500
    res = create_gradient_with_oklch(BLUE)
    main = res.main_color_oklch
    assert np.isclose(res.oklch_points[500].l, main.l, atol=1e-6)
    assert np.isclose(res.oklch_points[500].c, main.c, atol=1e-6)
    assert res.palette[500] == BLUE


def test_scenario_b_stop_near_dark_end():
    res = create_gradient_with_oklch(BLUE, {"main_color_stop": 0.1})
    # position 0.1 is sample index 1 → label 900
    assert np.isclose(res.oklch_points[900].l, res.main_color_oklch.l, atol=1e-3)


def test_scenario_c_achromatic_endpoints():
    res = create_gradient_with_oklch(BLUE, {"dark_chroma": 0.0, "light_chroma": 0.0})
    for label in (950, 50):
        p = res.oklch_points[label]
        assert p.c == pytest.approx(0.0, abs=1e-9)
        assert p.h is None


def test_achromatic_main_color():
    res = create_gradient_with_oklch("#808080")
    assert res.main_color_oklch.h is None
    ls = lightness(res, SAMPLE_LABELS)
    assert all(a < b for a, b in zip(ls, ls[1:]))


def test_out_of_gamut_input_is_clamped():
    res = create_gradient_with_oklch("oklch(0.7 0.4 150)")
    assert res.main_color_oklch.c < 0.4
    assert np.isclose(res.main_color_oklch.h, 150.0, atol=2.0)


def test_create_gradient_returns_palette_only():
    assert create_gradient(BLUE) == create_gradient_with_oklch(BLUE).palette


@pytest.mark.parametrize("bad", ["not-a-color", "", "#zzzzzz", None, 42])
def test_invalid_color_raises(bad):
    with pytest.raises(InvalidColorError):
        create_gradient_with_oklch(bad)


def test_to_json_shape():
    data = create_gradient_with_oklch(BLUE).to_json()
    assert set(data) == {"gradient", "oklchPoints", "mainColorOklch"}
    assert set(data["gradient"]) == {str(k) for k in LUMINANCE_ORDER}
    assert data["oklchPoints"]["0"] == {"l": 1.0, "c": 0.0, "h": None}
    assert set(data["mainColorOklch"]) == {"l", "c", "h"}
