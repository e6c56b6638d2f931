"""3D vectors and triangle meshes: parametric surfaces, axes and planes."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Callable, ClassVar

_ARITHMETIC_FAILURES = (ZeroDivisionError, OverflowError, ValueError)

JUMP_THRESHOLD_SQ = 10.0 * 10.0
NORMAL_EPS = 1e-9


def _f32(value: float) -> float:
    """Round a float to single precision, saturating to infinity on overflow."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Vec3:
    """An immutable double-precision 3D vector."""

    x: float
    y: float
    z: float

    ZERO: ClassVar["Vec3"]
    I: ClassVar["Vec3"]
    J: ClassVar["Vec3"]
    K: ClassVar["Vec3"]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> Vec3:
        """The vector scaled to length one, or the zero vector if that is impossible."""
        length = self.length()
        if length > 0.0 and math.isfinite(length):
            return self * (1.0 / length)
        return Vec3.ZERO

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.I = Vec3(1.0, 0.0, 0.0)
Vec3.J = Vec3(0.0, 1.0, 0.0)
Vec3.K = Vec3(0.0, 0.0, 1.0)

_NAN_VEC = Vec3(math.nan, math.nan, math.nan)


def _as_vec3(value) -> Vec3:
    return value if isinstance(value, Vec3) else Vec3(*(float(c) for c in value))


def _evaluate(func: Callable, *args: float) -> Vec3:
    """Evaluate a vector function; arithmetic failures give a NaN vector."""
    try:
        return _as_vec3(func(*args))
    except _ARITHMETIC_FAILURES:
        return _NAN_VEC


@dataclass(frozen=True)
class Vertex3D:
    """A mesh vertex with position and normal, stored at single precision."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]

    @classmethod
    def from_vecs(cls, position: Vec3, normal: Vec3) -> Vertex3D:
        return cls(
            tuple(_f32(c) for c in position),
            tuple(_f32(c) for c in normal),
        )


def _valid_triangle(*points: tuple[float, float, float]) -> bool:
    if any(math.isnan(p[0]) for p in points):
        return False
    for a, b in ((points[0], points[1]), (points[1], points[2]), (points[2], points[0])):
        if _f32(sum((ca - cb) ** 2 for ca, cb in zip(a, b))) > JUMP_THRESHOLD_SQ:
            return False
    return True


@dataclass
class MeshData:
    """An indexed triangle (or line) mesh."""

    vertices: list[Vertex3D] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @classmethod
    def parametric_surface(cls, func, u_range, v_range, u_segments, v_segments) -> MeshData:
        """Sample ``(u, v) -> Vec3`` on a grid and triangulate it.

        Non-finite samples become NaN vertices; triangles touching them, or
        with an edge longer than 10 units, are left out.
        """
        u_min, u_max = u_range
        v_min, v_max = v_range
        u_step = (u_max - u_min) / u_segments
        v_step = (v_max - v_min) / v_segments

        vertices: list[Vertex3D] = []
        for i in range(u_segments + 1):
            u = u_min + i * u_step
            for j in range(v_segments + 1):
                v = v_min + j * v_step
                pos = _evaluate(func, u, v)
                if not pos.is_finite():
                    vertices.append(Vertex3D((math.nan,) * 3, (0.0, 0.0, 0.0)))
                    continue
                pos_u = _evaluate(func, u + NORMAL_EPS, v)
                pos_v = _evaluate(func, u, v + NORMAL_EPS)
                if math.isfinite(pos_u.x) and math.isfinite(pos_v.x):
                    du = (pos_u - pos) * (1.0 / NORMAL_EPS)
                    dv = (pos_v - pos) * (1.0 / NORMAL_EPS)
                    normal = du.cross(dv).unit()
                else:
                    normal = Vec3.K
                vertices.append(Vertex3D.from_vecs(pos, normal))

        indices: list[int] = []
        stride = v_segments + 1
        for i in range(u_segments):
            row1 = i * stride
            row2 = (i + 1) * stride
            for j in range(v_segments):
                a, b = row1 + j, row1 + j + 1
                c, d = row2 + j + 1, row2 + j
                pa, pb, pc, pd = (vertices[k].position for k in (a, b, c, d))
                if _valid_triangle(pa, pd, pb):
                    indices.extend((a, d, b))
                if _valid_triangle(pb, pd, pc):
                    indices.extend((b, d, c))
        return cls(vertices, indices)

    @classmethod
    def axes(cls, length) -> MeshData:
        """Three line segments from the origin along x, y and z."""
        n = (0.0, 0.0, 0.0)
        length = _f32(length)
        positions = [
            (0.0, 0.0, 0.0),
            (length, 0.0, 0.0),
            (0.0, length, 0.0),
            (0.0, 0.0, length),
        ]
        return cls([Vertex3D(p, n) for p in positions], [0, 1, 0, 2, 0, 3])

    @classmethod
    def plane(cls, size) -> MeshData:
        """A square of side ``size`` centred on the origin in the z = 0 plane."""
        h = _f32(size / 2.0)
        n = (0.0, 0.0, 1.0)
        positions = [(-h, -h, 0.0), (h, -h, 0.0), (h, h, 0.0), (-h, h, 0.0)]
        return cls([Vertex3D(p, n) for p in positions], [0, 1, 2, 0, 2, 3])