"""2D geometry primitives: vectors, points, sizes, rectangles, quadratic Bézier curves and transforms."""

__version__ = "0.1.0"

__all__ = [
    "param_curve",
    "point",
    "quadbez",
    "quadspline",
    "rect",
    "rounded_rect",
    "rounded_rect_radii",
    "shape",
    "size",
    "translate_scale",
    "vec2",
]