"""Gradient visualizer web app (Flask).

Derives a thirteen-step palette (0, 50, 100 … 900, 950, 1000) from one main
colour by interpolating in OKLCH between a near-black and a near-white that
share its hue, and shows it as swatches plus a lightness-vs-chroma chart.

Usage
-----
$ pip install -e .
$ python main.py                # starts on http://127.0.0.1:5000

Knobs (query parameters, all optional)
--------------------------------------
color          main colour, #rgb or #rrggbb        (default #3b82f6)
minL           lightness of the dark end           (default 0.2)
maxL           lightness of the light end          (default 0.98)
darkChroma     chroma of the dark end              (default 0.001)
lightChroma    chroma of the light end             (default 0.01)
mainColorStop  main colour position on the path    (default 0.5)

GET /gradient returns the palette and OKLCH points as JSON.
Settings can be overridden with GRADIENT_* environment variables, e.g.
GRADIENT_LOG_LEVEL=DEBUG.
"""

from __future__ import annotations

from gradient_visualizer.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=False, threaded=True)
