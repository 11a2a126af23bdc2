"""Geometry for the lightness-vs-chroma SVG chart.

Everything here is plain numbers and strings; the template only places
them. L runs up the y-axis (1 at the top), C along the x-axis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import numpy as np

from .gradient import LUMINANCE_ORDER, GradientResult
from .oklch import hue_slice_hex

L_TICKS = (0.0, 0.25, 0.5, 0.75, 1.0)
C_TICKS = (0.0, 0.1, 0.2, 0.3, 0.4)


@dataclass(frozen=True)
class Padding:
    top: float = 30
    right: float = 30
    bottom: float = 50
    left: float = 60


@dataclass(frozen=True)
class LCPlot:
    width: float = 500
    height: float = 400
    padding: Padding = field(default_factory=Padding)
    max_c: float = 0.4
    grid_resolution: int = 40

    @property
    def plot_width(self) -> float:
        return self.width - self.padding.left - self.padding.right

    @property
    def plot_height(self) -> float:
        return self.height - self.padding.top - self.padding.bottom

    def x(self, c: float) -> float:
        return self.padding.left + (c / self.max_c) * self.plot_width

    def y(self, l: float) -> float:
        return self.padding.top + (1.0 - l) * self.plot_height

    def background(self, hue: float | None) -> List[dict[str, Any]]:
        """Grid of clamped colours covering the plot at `hue`."""
        n = self.grid_resolution
        cw = self.plot_width / n
        ch = self.plot_height / n
        steps = np.arange(n) / n
        cells: List[dict[str, Any]] = []
        for i, u in enumerate(steps):
            for j, v in enumerate(steps):
                cells.append(
                    {
                        "x": self.padding.left + i * cw,
                        "y": self.padding.top + j * ch,
                        "color": hue_slice_hex(hue, 1.0 - float(v), float(u) * self.max_c),
                    }
                )
        return cells

    def model(self, result: GradientResult) -> dict[str, Any]:
        """Everything the SVG template needs for one gradient."""
        points = []
        for lum in LUMINANCE_ORDER:
            p = result.oklch_points[lum]
            points.append(
                {
                    "lum": lum,
                    "color": result.palette[lum],
                    "cx": self.x(p.c),
                    "cy": self.y(p.l),
                }
            )
        path_d = " ".join(
            f"{'M' if i == 0 else 'L'} {p['cx']:.2f} {p['cy']:.2f}"
            for i, p in enumerate(points)
        )
        main = result.main_color_oklch
        n = self.grid_resolution
        return {
            "width": self.width,
            "height": self.height,
            "padding": self.padding,
            "cell_w": self.plot_width / n + 0.5,
            "cell_h": self.plot_height / n + 0.5,
            "background": self.background(main.h),
            "l_ticks": [{"value": l, "pos": self.y(l)} for l in L_TICKS],
            "c_ticks": [{"value": c, "pos": self.x(c)} for c in C_TICKS],
            "path_d": path_d,
            "main": {"cx": self.x(main.c), "cy": self.y(main.l)},
            "points": points,
        }


__all__ = ["C_TICKS", "LCPlot", "L_TICKS", "Padding"]
