"""Marching-cubes triangulation of implicit surfaces ``f(x, y, z) = 0``."""

from __future__ import annotations

import math
from typing import Callable

from forestplot.marching_tables import EDGE_TABLE, TRI_TABLE
from forestplot.mesh import MeshData, Vec3, Vertex3D

ISOVALUE = 0.0
GRADIENT_EPS = 1e-6
INTERP_EPS = 1e-9

_ARITHMETIC_FAILURES = (ZeroDivisionError, OverflowError, ValueError)

# Corner offsets (di, dj, dk) in the order the lookup tables expect.
_CORNER_OFFSETS = (
    (0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1),
    (0, 1, 0), (1, 1, 0), (1, 1, 1), (0, 1, 1),
)

# The two corners joined by each of the twelve cell edges.
_EDGE_CORNERS = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

ScalarField = Callable[[float, float, float], float]


def _sample(func: ScalarField, x: float, y: float, z: float) -> float:
    """Evaluate ``func``; arithmetic failures count as an undefined (NaN) value."""
    try:
        return float(func(x, y, z))
    except _ARITHMETIC_FAILURES:
        return math.nan


def _vertex_interp(p1: Vec3, v1: float, p2: Vec3, v2: float) -> Vec3:
    """The point between ``p1`` and ``p2`` where the field crosses the isovalue."""
    if abs(v2 - v1) < INTERP_EPS:
        return p1
    mu = (ISOVALUE - v1) / (v2 - v1)
    return p1 + (p2 - p1) * mu


def _gradient_normal(func: ScalarField, p: Vec3) -> Vec3:
    """The unit gradient of ``func`` at ``p`` by central differences."""
    eps = GRADIENT_EPS
    dx = _sample(func, p.x + eps, p.y, p.z) - _sample(func, p.x - eps, p.y, p.z)
    dy = _sample(func, p.x, p.y + eps, p.z) - _sample(func, p.x, p.y - eps, p.z)
    dz = _sample(func, p.x, p.y, p.z + eps) - _sample(func, p.x, p.y, p.z - eps)
    return Vec3(dx, dy, dz).unit()


def solve_implicit_surface(func, x_range, y_range, z_range, resolution) -> MeshData:
    """Triangulate ``func(x, y, z) = 0`` inside the given box.

    The box is split into ``resolution`` cells along each axis. Points where
    the field is negative count as inside. Every triangle gets its own three
    vertices, with normals taken from the field's gradient.
    """
    if resolution < 0:
        raise ValueError(f"resolution must not be negative, got {resolution}")
    if resolution == 0:
        return MeshData()

    step_x = (x_range[1] - x_range[0]) / resolution
    step_y = (y_range[1] - y_range[0]) / resolution
    step_z = (z_range[1] - z_range[0]) / resolution

    def position(i: int, j: int, k: int) -> Vec3:
        return Vec3(
            x_range[0] + i * step_x,
            y_range[0] + j * step_y,
            z_range[0] + k * step_z,
        )

    points = range(resolution + 1)
    values = [
        [[_sample(func, *position(i, j, k)) for i in points] for j in points]
        for k in points
    ]

    vertices: list[Vertex3D] = []
    cells = range(resolution)
    for k in cells:
        for j in cells:
            for i in cells:
                corner_vals = [values[k + dk][j + dj][i + di] for di, dj, dk in _CORNER_OFFSETS]
                cube_index = sum(
                    1 << n for n, val in enumerate(corner_vals) if val < ISOVALUE
                )
                edges = EDGE_TABLE[cube_index]
                if edges == 0:
                    continue

                corner_pos = [position(i + di, j + dj, k + dk) for di, dj, dk in _CORNER_OFFSETS]
                edge_points = {
                    edge: _vertex_interp(corner_pos[a], corner_vals[a], corner_pos[b], corner_vals[b])
                    for edge, (a, b) in enumerate(_EDGE_CORNERS)
                    if edges & (1 << edge)
                }

                for edge in TRI_TABLE[cube_index]:
                    p = edge_points.get(edge, Vec3.ZERO)
                    vertices.append(Vertex3D.from_vecs(p, _gradient_normal(func, p)))

    return MeshData(vertices, list(range(len(vertices))))