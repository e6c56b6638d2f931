import math

import pytest

from forestplot.colors import Color
from forestplot.curves2d import (
    GeoKind,
    GeoObj,
    Vertex,
    solve_explicit,
    solve_implicit,
    solve_parametric,
)


# --- GeoObj -----------------------------------------------------------------

def test_new_explicit_sets_kind_and_style():
    f = lambda x: x * x
    obj = GeoObj.new_explicit(f, Color.RED, 3.0)
    assert obj.kind is GeoKind.EXPLICIT
    assert obj.func is f
    assert obj.color == Color.RED
    assert obj.width == 3.0
    assert obj.t_range is None


def test_new_parametric_keeps_t_range():
    obj = GeoObj.new_parametric(lambda t: (t, t), (0.0, 5.0), Color.BLUE, 2.0)
    assert obj.kind is GeoKind.PARAMETRIC
    assert obj.t_range == (0.0, 5.0)


def test_new_implicit_kind():
    obj = GeoObj.new_implicit(lambda x, y: x - y, Color.GREEN, 1.0)
    assert obj.kind is GeoKind.IMPLICIT
    assert obj.color == Color.GREEN


# --- explicit ---------------------------------------------------------------

@pytest.mark.parametrize("x_range,screen_w", [((1.0, 1.0), 200), ((2.0, 1.0), 200), ((0.0, 1.0), 0)])
def test_explicit_degenerate_inputs_give_nothing(x_range, screen_w):
    assert solve_explicit(lambda x: x, x_range, 2.0, 1.0, screen_w, 100.0) == []


def test_explicit_flat_line_has_one_quad_per_sample():
    verts = solve_explicit(lambda x: 0.0, (0.0, 1.0), 2.0, 1.0, 200, 100.0)
    assert len(verts) == 6 * 200
    ys = {abs(v.y) for v in verts}
    assert len(ys) == 1
    assert {round(v.y, 9) for v in verts} == {round(y, 9) for y in (ys.pop(), -abs(verts[0].y))}


def test_explicit_minimum_sample_count():
    verts = solve_explicit(lambda x: 0.0, (0.0, 1.0), 1.0, 1.0, 10, 100.0)
    assert len(verts) == 6 * 100


def test_explicit_strip_is_symmetric_about_curve():
    verts = solve_explicit(lambda x: 2.0 * x, (-1.0, 1.0), 4.0, 1.0, 150, 300.0)
    assert len(verts) % 6 == 0
    for k in range(0, len(verts), 6):
        p0_l, _, p0_r = verts[k], verts[k + 1], verts[k + 2]
        mid_x = (p0_l.x + p0_r.x) / 2
        mid_y = (p0_l.y + p0_r.y) / 2
        assert mid_y == pytest.approx(2.0 * mid_x, abs=1e-5)


def test_explicit_skips_undefined_region():
    verts = solve_explicit(math.sqrt, (-1.0, 1.0), 1.0, 1.0, 200, 100.0)
    assert 0 < len(verts) < 6 * 200
    assert all(v.x > -0.05 for v in verts)


def test_explicit_cuts_asymptote():
    f = lambda x: 1.0 / (x - 0.0025)
    verts = solve_explicit(f, (-1.0, 1.0), 1.0, 1.0, 200, 100.0)
    assert len(verts) < 6 * 200
    assert all(math.isfinite(v.y) for v in verts)


# --- implicit ---------------------------------------------------------------

def test_implicit_points_lie_on_circle():
    pts = solve_implicit(lambda x, y: x * x + y * y - 1.0, (-2.0, 2.0), (-2.0, 2.0), 200, 200)
    assert pts
    for p in pts:
        assert abs(math.hypot(p.x, p.y) - 1.0) < 0.05


def test_implicit_no_sign_change_gives_nothing():
    assert solve_implicit(lambda x, y: 1.0, (-1.0, 1.0), (-1.0, 1.0), 400, 400) == []


@pytest.mark.parametrize("screen_w,expected", [(10, 100), (400, 200), (5000, 700)])
def test_implicit_grid_is_clamped(screen_w, expected):
    pts = solve_implicit(lambda x, y: y - 0.0123, (-1.0, 1.0), (-1.0, 1.0), screen_w, 200)
    assert len(pts) == expected
    assert all(p.y == pytest.approx(0.0123, abs=1e-5) for p in pts)


def test_implicit_vertex_position_property():
    pts = solve_implicit(lambda x, y: x - 0.0117, (-1.0, 1.0), (-1.0, 1.0), 200, 200)
    assert pts
    assert all(p.position == (p.x, p.y) for p in pts)
    assert all(p.x == pytest.approx(0.0117, abs=1e-5) for p in pts)


# --- parametric -------------------------------------------------------------

def test_parametric_empty_range():
    assert solve_parametric(lambda t: (t, t), (1.0, 1.0), 2.0, 1.0, 1.0, 100.0) == []
    assert solve_parametric(lambda t: (t, t), (2.0, 1.0), 2.0, 1.0, 1.0, 100.0) == []


def test_parametric_circle_stays_near_unit_radius():
    f = lambda t: (math.cos(t), math.sin(t))
    verts = solve_parametric(f, (0.0, 2 * math.pi), 2.0, 1.0, 1.5, 400.0)
    assert len(verts) == 6 * 200
    for v in verts:
        assert abs(math.hypot(v.x, v.y) - 1.0) < 0.01


def test_parametric_constant_curve_is_empty():
    assert solve_parametric(lambda t: (1.0, 1.0), (0.0, 1.0), 2.0, 1.0, 1.0, 100.0) == []


def test_parametric_cuts_jumps_and_undefined_points():
    f = lambda t: (t, 1.0 / (t - 0.5))
    verts = solve_parametric(f, (0.0, 1.0), 1.0, 1.0, 1.0, 100.0)
    assert len(verts) % 6 == 0
    assert len(verts) < 6 * 200
    assert all(math.isfinite(v.x) and math.isfinite(v.y) for v in verts)


def test_parametric_aspect_does_not_change_result():
    f = lambda t: (t, t * t)
    a = solve_parametric(f, (-1.0, 1.0), 2.0, 1.0, 1.0, 100.0)
    b = solve_parametric(f, (-1.0, 1.0), 2.0, 1.0, 3.0, 100.0)
    assert a == b
    assert all(isinstance(v, Vertex) for v in a) and len(a) > 0