# oklch.py – perceptual colour primitives on top of ColorAide
#   - parse / convert to OKLCH
#   - sRGB gamut clamp (ray-trace, hue preserving, stays in OKLCH)
#   - piecewise interpolation path with explicit stop positions
#   - equidistant sampling and hex formatting

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Sequence, Tuple, Union

import numpy as np
from coloraide import Color as _Base
from coloraide import stop

log = logging.getLogger(__name__)


class Color(_Base):
    """Project-local Color class; OKLCH and sRGB ship with the base class."""


Hex = str
Keyframe = Union[Color, Tuple[Color, float]]
Path = Callable[[float], Color]

GAMUT = "srgb"
FIT = {"method": "raytrace", "pspace": "oklch"}  # consistent gamut-fit everywhere
ACHROMATIC_CHROMA = 1e-4
HUE_QUANT = 0.5  # degrees; background slices are cached per quantized hue

_HEX_RE = re.compile(r"#[0-9a-f]{6}")


class InvalidColorError(ValueError):
    """Raised when a colour string cannot be parsed."""


class InvariantError(RuntimeError):
    """A derived colour could not be turned into a displayable value."""


@dataclass(frozen=True)
class OklchPoint:
    l: float
    c: float
    h: float | None

    def to_json(self) -> dict[str, Any]:
        return {"l": self.l, "c": self.c, "h": self.h}


def _is_achromatic(c: float) -> bool:
    return c < ACHROMATIC_CHROMA


def to_oklch(color: str) -> Color:
    if not isinstance(color, str):
        raise InvalidColorError(f"expected a color string, got {type(color).__name__}")
    try:
        parsed = Color(color.strip())
    except ValueError as exc:
        raise InvalidColorError(f"unrecognised color {color!r}") from exc
    lch = parsed.convert("oklch")
    if _is_achromatic(float(lch["c"])):
        lch.set("h", math.nan)
    return lch


def clamp_gamut(color: Color) -> Color:
    """Fit into sRGB while staying in OKLCH; returns a new colour."""
    lch = color.clone().convert("oklch")
    if lch.in_gamut(GAMUT):
        return lch
    log.debug("clamping out-of-gamut %s", lch)
    return lch.fit(GAMUT, **FIT)


def with_lc(color: Color, l: float, c: float) -> Color:
    out = color.clone().convert("oklch").set("l", float(l)).set("c", float(c))
    if _is_achromatic(float(c)):
        out.set("h", math.nan)
    return out


def interpolation_path(keyframes: Sequence[Keyframe]) -> Path:
    """
    Build t -> Color over [0, 1] in OKLCH.

    Keyframes are colours or (colour, position) pairs; unpositioned colours
    are spread evenly between their neighbours. Channels are interpolated
    linearly and independently, hue along the shorter arc; an undefined
    hue borrows the other side's hue.
    """
    stops = [stop(k[0], k[1]) if isinstance(k, tuple) else k for k in keyframes]
    return Color.interpolate(
        stops, space="oklch", out_space="oklch", method="linear", hue="shorter"
    )


def samples(n: int) -> list[float]:
    if n < 2:
        raise ValueError("n must be ≥ 2")
    return [float(t) for t in np.linspace(0.0, 1.0, int(n))]


def format_hex(color: Color) -> Hex:
    lch = color.convert("oklch")
    if math.isnan(float(lch["l"])) or math.isnan(float(lch["c"])):
        raise InvariantError(f"cannot format {lch} as hex")
    out = lch.convert(GAMUT).to_string(hex=True, fit=FIT)
    if not _HEX_RE.fullmatch(out):
        raise InvariantError(f"unexpected hex output {out!r} for {lch}")
    return out


def to_point(color: Color) -> OklchPoint:
    lch = color.convert("oklch")
    l, c, h = (float(v) for v in lch.coords())
    if math.isnan(h) or _is_achromatic(c):
        return OklchPoint(l, c, None)
    return OklchPoint(l, c, h % 360.0)


@lru_cache(maxsize=4096)
def _slice_hex_cached(hq: float, l: float, c: float) -> Hex:
    return format_hex(clamp_gamut(Color("oklch", [l, c, hq])))


def hue_slice_hex(hue: float | None, l: float, c: float) -> Hex:
    """Displayable colour at (l, c) on the hue slice, clamped to sRGB."""
    h = 0.0 if hue is None else float(hue) % 360.0
    hq = round(h / HUE_QUANT) * HUE_QUANT
    return _slice_hex_cached(hq, round(float(l), 6), round(float(c), 6))


__all__ = [
    "ACHROMATIC_CHROMA",
    "Color",
    "FIT",
    "InvalidColorError",
    "InvariantError",
    "OklchPoint",
    "clamp_gamut",
    "format_hex",
    "hue_slice_hex",
    "interpolation_path",
    "samples",
    "to_oklch",
    "to_point",
    "with_lc",
]
