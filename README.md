# planekit

Small, dependency-free 2D geometry primitives for graphics work.

## Modules

- `planekit.vec2` – `Vec2`: a 2D vector with `+`, `-`, scalar `*` and `/`,
  negation, `dot`, `cross`, `hypot`, `hypot2`, `atan2`, `from_angle`, `lerp`,
  `normalize`, and the rounding helpers `round`, `ceil`, `floor`, `expand`
  (away from zero) and `trunc`.
- `planekit.point` – `Point`: a 2D point. `Point - Point` gives a `Vec2`;
  a `Vec2` or an `(x, y)` tuple can be added or subtracted. Also `lerp`,
  `midpoint`, `distance`, `distance_squared` and the rounding helpers.
- `planekit.size` – `Size`: width and height with arithmetic, `area`,
  `is_empty`, `clamp`, `max_side`, `min_side`, `aspect_ratio` (height /
  width), `to_rect` and `to_rounded_rect`.
- `planekit.shape` – `Shape`: the abstract base with `area`, `perimeter`,
  `winding`, `contains`, `bounding_box`, `as_rect` and `as_rounded_rect`.
- `planekit.rect` – `Rect`: an axis-aligned rectangle. Construct from
  coordinates or with `from_points`, `from_origin_size`, `from_center_size`;
  query `width`, `height`, `origin`, `size`, `center`, `area`; combine with
  `union`, `union_pt`, `intersect`, `inflate`; fit with
  `contained_rect_with_aspect_ratio`. Adding or subtracting a `Vec2` moves it.
- `planekit.rounded_rect_radii` – `RoundedRectRadii`: four corner radii,
  clockwise from top-left. `coerce` accepts radii, one number, or a
  4-tuple.
- `planekit.rounded_rect` – `RoundedRect`: built with `new`, `from_rect`,
  `from_points` or `from_origin_size`; dimensions are made non-negative and
  radii clamped to half the shorter side. Exact `area`, `perimeter` and
  `winding`.
- `planekit.param_curve` – the curve bases `ParamCurve`, `ParamCurveArclen`,
  `ParamCurveArea`, `ParamCurveExtrema`, the `Nearest` record, and the
  constants `DEFAULT_ACCURACY` and `MAX_EXTREMA`.
- `planekit.quadbez` – `QuadBez`: a quadratic Bézier segment with `eval`,
  `subsegment`, `subdivide`, `arclen`, `signed_area`, `extrema`,
  `extrema_ranges` and `bounding_box`.
- `planekit.quadspline` – `QuadSpline`: control points of a quadratic
  B-spline; `to_quads` yields the G1-continuous `QuadBez` segments.
- `planekit.translate_scale` – `TranslateScale`: a uniform scale followed by
  a translation. Multiplying applies it to a `Point`, `Rect`, `RoundedRect`,
  `RoundedRectRadii` or `QuadBez`, or composes it with another
  `TranslateScale`; also `from_scale`, `from_translate`, `inverse`.

All values are frozen dataclasses. `format()` and f-strings accept a float
format spec; a bare precision such as `.2` gives fixed-point digits.

## Installation

```
pip install planekit
```

## Example

```python
from planekit.point import Point
from planekit.rect import Rect
from planekit.quadbez import QuadBez
from planekit.translate_scale import TranslateScale
from planekit.vec2 import Vec2

print(Point(0.0, 10.0).distance(Point(0.0, 5.0)))      # 5.0

r = Rect(0.0, 0.0, 10.0, 20.0)
print(r.contained_rect_with_aspect_ratio(1.0))         # Rect { (0, 5) (10×10) }

q = QuadBez(Point(-1.0, 1.0), Point(0.0, -1.0), Point(1.0, 1.0))
print(q.eval(0.5))                                     # (0, 0)
print(q.extrema())                                     # [0.5]
print(q.bounding_box())                                # Rect { (-1, 0) (2×1) }

ts = TranslateScale(Vec2(5.0, 6.0), 2.0)
print(ts * Point(3.0, 4.0))                            # (11, 14)
print(f"{Point(0.12345, 9.87654):.2}")                 # (0.12, 9.88)
```

## What it does not do

planekit has no path type: shapes cannot be turned into sequences of path
elements, there is no SVG reading or writing, no general affine transform,
no cubic Béziers, circles, ellipses or arcs, and no nearest-point or
curvature queries on curves.

## Running the tests

```
pip install -e ".[test]"
pytest
```