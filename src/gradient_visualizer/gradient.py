"""
Perceptual gradient derivation.

One main colour and five knobs become a fixed thirteen-step palette:

    dark endpoint (min_l, dark_chroma) ── main colour ── light endpoint (max_l, light_chroma)
        t = 0                          t = main_color_stop            t = 1

The path lives in OKLCH; eleven equidistant samples are labelled 950 → 50
and the boundary labels are pinned (0 = white, 1000 = black).
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Union

from .oklch import (
    Color,
    OklchPoint,
    clamp_gamut,
    format_hex,
    interpolation_path,
    samples,
    to_oklch,
    to_point,
    with_lc,
)

log = logging.getLogger(__name__)

Hex = str
Label = int

# Display order, lightest first.
LUMINANCE_ORDER: tuple[Label, ...] = (
    0, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950, 1000,
)
# Sample index → label; index 0 is the darkest end of the path.
SAMPLE_LABELS: tuple[Label, ...] = (
    950, 900, 800, 700, 600, 500, 400, 300, 200, 100, 50,
)

WHITE: Hex = "#ffffff"
BLACK: Hex = "#000000"
WHITE_POINT = OklchPoint(1.0, 0.0, None)
BLACK_POINT = OklchPoint(0.0, 0.0, None)


@dataclass(frozen=True)
class GradientOptions:
    min_l: float = 0.2  # lightness of the darkest sample
    max_l: float = 0.98  # lightness of the lightest sample
    dark_chroma: float = 0.001
    light_chroma: float = 0.01
    main_color_stop: float = 0.5  # position of the main colour on the path

    def merged(self, overrides: Mapping[str, float]) -> "GradientOptions":
        """Supplied fields replace ours wholesale; unknown names raise TypeError."""
        return replace(self, **{k: float(v) for k, v in overrides.items()})

    def to_json(self) -> dict[str, float]:
        return {WIRE_NAMES[k]: v for k, v in asdict(self).items()}


DEFAULT_OPTIONS = GradientOptions()

# Field name → name used by the web API.
WIRE_NAMES: Mapping[str, str] = {
    "min_l": "minL",
    "max_l": "maxL",
    "dark_chroma": "darkChroma",
    "light_chroma": "lightChroma",
    "main_color_stop": "mainColorStop",
}

OptionsLike = Union[GradientOptions, Mapping[str, float], None]


@dataclass(frozen=True)
class GradientResult:
    palette: dict[Label, Hex]
    oklch_points: dict[Label, OklchPoint]
    main_color_oklch: OklchPoint

    def to_json(self) -> dict[str, Any]:
        return {
            "gradient": {str(k): v for k, v in self.palette.items()},
            "oklchPoints": {str(k): p.to_json() for k, p in self.oklch_points.items()},
            "mainColorOklch": self.main_color_oklch.to_json(),
        }


def resolve_options(options: OptionsLike) -> GradientOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, GradientOptions):
        return options
    return DEFAULT_OPTIONS.merged(options)


def _endpoint(main: Color, l: float, c: float) -> Color:
    return clamp_gamut(with_lc(main, l, c))


def create_gradient_with_oklch(
    main_color: str, options: OptionsLike = None
) -> GradientResult:
    """
    Derive the thirteen-step palette for `main_color`.

    Raises InvalidColorError when `main_color` does not parse; InvariantError
    if a sampled colour cannot be formatted (a defect, not a user error).
    """
    opts = resolve_options(options)

    main = clamp_gamut(to_oklch(main_color))
    darkest = _endpoint(main, opts.min_l, opts.dark_chroma)
    lightest = _endpoint(main, opts.max_l, opts.light_chroma)
    log.debug("main=%s darkest=%s lightest=%s", main, darkest, lightest)

    path = interpolation_path(
        [darkest, (main, opts.main_color_stop), lightest]
    )
    sampled = [path(t) for t in samples(len(SAMPLE_LABELS))]

    hexes: dict[Label, Hex] = {0: WHITE, 1000: BLACK}
    points: dict[Label, OklchPoint] = {0: WHITE_POINT, 1000: BLACK_POINT}
    for label, color in zip(SAMPLE_LABELS, sampled):
        hexes[label] = format_hex(color)
        points[label] = to_point(color)

    return GradientResult(
        palette={k: hexes[k] for k in LUMINANCE_ORDER},
        oklch_points={k: points[k] for k in LUMINANCE_ORDER},
        main_color_oklch=to_point(main),
    )


def create_gradient(main_color: str, options: OptionsLike = None) -> dict[Label, Hex]:
    return create_gradient_with_oklch(main_color, options).palette


__all__ = [
    "BLACK",
    "DEFAULT_OPTIONS",
    "GradientOptions",
    "GradientResult",
    "LUMINANCE_ORDER",
    "SAMPLE_LABELS",
    "WHITE",
    "WIRE_NAMES",
    "create_gradient",
    "create_gradient_with_oklch",
    "resolve_options",
]
