"""Geometry for 2D curves: explicit, implicit and parametric solvers.

Explicit and parametric curves are turned into triangle lists (six vertices
per segment, two triangles forming a quad of the requested pixel width).
Implicit curves are turned into a cloud of points where the function
changes sign across a sampling grid.
"""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from typing import Callable, Optional

from forestplot.colors import RGBA

SAMPLING_DENSITY = 1.0
ASYMPTOTE_THRESHOLD_FACTOR = 10.0
IMPLICIT_GRID_LIMIT = 700
IMPLICIT_GRID_MIN = 100
SAMPLES_PER_UNIT_T = 20.0
JUMP_THRESHOLD_FACTOR = 2.0

_ARITHMETIC_FAILURES = (ZeroDivisionError, OverflowError, ValueError)


def _f32(value: float) -> float:
    """Round a float to single precision, saturating to infinity on overflow."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Vertex:
    """A 2D vertex in world space, stored at single precision."""

    x: float
    y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


def _vertex(x: float, y: float) -> Vertex:
    return Vertex(_f32(x), _f32(y))


class GeoKind(enum.Enum):
    """The kind of geometry a :class:`GeoObj` describes."""

    IMPLICIT = "implicit"
    PARAMETRIC = "parametric"
    EXPLICIT = "explicit"
    GEOMETRY = "geometry"


@dataclass
class GeoObj:
    """A plottable object: a function of the given kind with a colour and width."""

    kind: GeoKind
    func: Optional[Callable] = None
    color: RGBA = (1.0, 1.0, 1.0, 1.0)
    width: float = 1.0
    t_range: Optional[tuple[float, float]] = None

    @classmethod
    def new_implicit(cls, f, color, width):
        """An implicit curve ``f(x, y) = 0``."""
        return cls(GeoKind.IMPLICIT, f, tuple(color), width)

    @classmethod
    def new_parametric(cls, f, t_range, color, width):
        """A parametric curve ``t -> (x, y)`` over ``t_range``."""
        return cls(GeoKind.PARAMETRIC, f, tuple(color), width, tuple(t_range))

    @classmethod
    def new_explicit(cls, f, color, width):
        """An explicit curve ``y = f(x)``."""
        return cls(GeoKind.EXPLICIT, f, tuple(color), width)


def _sample(f: Callable[..., float], *args: float) -> float:
    """Evaluate ``f``; arithmetic failures count as an undefined (NaN) value."""
    try:
        return float(f(*args))
    except _ARITHMETIC_FAILURES:
        return math.nan


def _sample_point(f: Callable[[float], tuple[float, float]], t: float) -> tuple[float, float]:
    try:
        x, y = f(t)
        return float(x), float(y)
    except _ARITHMETIC_FAILURES:
        return math.nan, math.nan


def _quad(p0, p1, nx: float, ny: float, half_width: float) -> list[Vertex]:
    ox, oy = nx * half_width, ny * half_width
    p0_l = _vertex(p0[0] + ox, p0[1] + oy)
    p0_r = _vertex(p0[0] - ox, p0[1] - oy)
    p1_l = _vertex(p1[0] + ox, p1[1] + oy)
    p1_r = _vertex(p1[0] - ox, p1[1] - oy)
    return [p0_l, p1_l, p0_r, p0_r, p1_l, p1_r]


def _half_width_world(width_px: float, zoom: float, screen_h: float) -> float:
    pixel_size_world = _f32(_f32(2.0 / _f32(zoom)) / _f32(screen_h))
    return _f32(_f32(_f32(width_px) * 0.5) * pixel_size_world)


def solve_explicit(f, x_range, width_px, zoom, screen_w, screen_h) -> list[Vertex]:
    """Triangulate ``y = f(x)`` over ``x_range`` as a strip of the given pixel width.

    Segments with a non-finite end, or whose vertical jump exceeds ten view
    heights (an asymptote), are left out.
    """
    x_min, x_max = x_range
    x_len = x_max - x_min
    if x_len <= 0.0 or screen_w == 0:
        return []

    total_samples = max(math.ceil(screen_w * SAMPLING_DENSITY), 100)
    step_x = x_len / total_samples
    path = [
        (x, _sample(f, x))
        for x in (x_min + i * step_x for i in range(total_samples + 1))
    ]

    half_width = _half_width_world(width_px, zoom, screen_h)
    view_height_world = 2.0 / _f32(zoom)
    jump_threshold = view_height_world * ASYMPTOTE_THRESHOLD_FACTOR

    vertices: list[Vertex] = []
    for p0, p1 in zip(path, path[1:]):
        if not (math.isfinite(p0[1]) and math.isfinite(p1[1])):
            continue
        dy = p1[1] - p0[1]
        if abs(dy) > jump_threshold:
            continue
        dx = p1[0] - p0[0]
        length = math.sqrt(dx * dx + dy * dy)
        if length < 1e-9:
            continue
        vertices.extend(_quad(p0, p1, -dy / length, dx / length, half_width))
    return vertices


def _linear_interp(v0: float, v1: float) -> float:
    diff = v1 - v0
    if abs(diff) < 1e-15:
        return 0.5
    return min(max(-v0 / diff, 0.0), 1.0)


def solve_implicit(f, x_range, y_range, screen_w, screen_h) -> list[Vertex]:
    """Find points where ``f(x, y)`` changes sign on a grid over the view.

    The grid has half the screen resolution, clamped to 100..700 cells per axis.
    """
    grid_w = min(max(int(screen_w) // 2, IMPLICIT_GRID_MIN), IMPLICIT_GRID_LIMIT)
    grid_h = min(max(int(screen_h) // 2, IMPLICIT_GRID_MIN), IMPLICIT_GRID_LIMIT)

    x_step = (x_range[1] - x_range[0]) / grid_w
    y_step = (y_range[1] - y_range[0]) / grid_h

    points: list[Vertex] = []
    for i in range(grid_w):
        x = x_range[0] + i * x_step
        for j in range(grid_h):
            y = y_range[0] + j * y_step
            v00 = _sample(f, x, y)
            v10 = _sample(f, x + x_step, y)
            v01 = _sample(f, x, y + y_step)
            if v00 * v10 <= 0.0:
                t = _linear_interp(v00, v10)
                points.append(_vertex(x + t * x_step, y))
            if v00 * v01 <= 0.0:
                t = _linear_interp(v00, v01)
                points.append(_vertex(x, y + t * y_step))
    return points


def solve_parametric(f, t_range, width_px, zoom, aspect, screen_h) -> list[Vertex]:
    """Triangulate the curve ``t -> f(t)`` over ``t_range`` as a strip.

    Segments with a non-finite end, of zero length, or longer than twice the
    view height are left out.  ``aspect`` is accepted for symmetry with the
    other solvers and does not affect the result.
    """
    t_min, t_max = t_range
    t_len = t_max - t_min
    if t_len <= 0.0:
        return []

    total_samples = max(math.floor(t_len * SAMPLES_PER_UNIT_T), 200)
    step_t = t_len / total_samples
    path = [_sample_point(f, t_min + i * step_t) for i in range(total_samples + 1)]

    half_width = _half_width_world(width_px, zoom, screen_h)
    max_jump = _f32(_f32(2.0 / _f32(zoom)) * JUMP_THRESHOLD_FACTOR)
    max_jump_dist_sq = _f32(max_jump * max_jump)

    vertices: list[Vertex] = []
    for p0, p1 in zip(path, path[1:]):
        if not all(math.isfinite(c) for c in (*p0, *p1)):
            continue
        dx = p1[0] - p0[0]
        dy = p1[1] - p0[1]
        dist_sq = _f32(dx * dx + dy * dy)
        if dist_sq < 1e-12 or dist_sq > max_jump_dist_sq:
            continue
        length = _f32(math.sqrt(dist_sq))
        vertices.extend(_quad(p0, p1, -dy / length, dx / length, half_width))
    return vertices