"""Tube meshes that follow a parametric 3D curve."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from forestplot.mesh import MeshData, Vec3, Vertex3D, _evaluate

TANGENT_EPS = 1e-9


@dataclass(frozen=True)
class _Frame:
    pos: Vec3
    normal: Vec3
    binormal: Vec3


def _frame_at(func: Callable[[float], Vec3], t: float) -> _Frame:
    pos = _evaluate(func, t)
    tangent = (_evaluate(func, t + TANGENT_EPS) - pos).unit()
    helper = Vec3.J
    if abs(tangent.dot(helper)) > 0.99:
        helper = Vec3.K
    normal = tangent.cross(helper).unit()
    binormal = tangent.cross(normal).unit()
    return _Frame(pos, normal, binormal)


def tube_mesh(func, t_range, radius, tube_segments, path_segments) -> MeshData:
    """Build a tube of the given radius around the curve ``t -> func(t)``.

    The curve is sampled at ``path_segments + 1`` points, each carrying a ring
    of ``tube_segments + 1`` vertices (the last closing the ring).
    """
    t_min, t_max = t_range
    t_step = (t_max - t_min) / path_segments
    frames = [_frame_at(func, t_min + i * t_step) for i in range(path_segments + 1)]

    vertices: list[Vertex3D] = []
    for frame in frames:
        for j in range(tube_segments + 1):
            theta = (j / tube_segments) * math.tau
            offset = frame.normal * math.cos(theta) + frame.binormal * math.sin(theta)
            vertices.append(Vertex3D.from_vecs(frame.pos + offset * radius, offset.unit()))

    ring = tube_segments + 1
    indices: list[int] = []
    for i in range(path_segments):
        row1 = i * ring
        row2 = (i + 1) * ring
        for j in range(tube_segments):
            a, b = row1 + j, row1 + j + 1
            c, d = row2 + j + 1, row2 + j
            indices.extend((a, d, b, b, d, c))
    return MeshData(vertices, indices)