import math

import pytest

from forestplot.mesh import Vec3
from forestplot.tube import tube_mesh


def _line(t):
    return Vec3(t, 0.0, 0.0)


def test_counts():
    mesh = tube_mesh(_line, (0.0, 1.0), 0.5, 8, 10)
    assert len(mesh.vertices) == 11 * 9
    assert len(mesh.indices) == 10 * 8 * 6
    assert max(mesh.indices) == len(mesh.vertices) - 1
    assert min(mesh.indices) == 0


def test_vertices_lie_at_radius_from_axis():
    radius = 0.5
    mesh = tube_mesh(_line, (0.0, 2.0), radius, 12, 4)
    for vertex in mesh.vertices:
        _, y, z = vertex.position
        assert math.hypot(y, z) == pytest.approx(radius, rel=1e-5)


def test_normals_are_unit_and_radial():
    mesh = tube_mesh(_line, (0.0, 1.0), 2.0, 6, 3)
    for vertex in mesh.vertices:
        nx, ny, nz = vertex.normal
        assert math.sqrt(nx * nx + ny * ny + nz * nz) == pytest.approx(1.0, rel=1e-5)
        assert nx == pytest.approx(0.0, abs=1e-6)
        _, y, z = vertex.position
        assert ny * y + nz * z > 0


def test_rings_follow_the_path():
    mesh = tube_mesh(_line, (0.0, 4.0), 0.1, 5, 4)
    ring = 6
    for i in range(5):
        xs = {round(v.position[0], 5) for v in mesh.vertices[i * ring:(i + 1) * ring]}
        assert xs == {float(i)}


def test_ring_is_closed():
    mesh = tube_mesh(_line, (0.0, 1.0), 1.0, 7, 2)
    ring = 8
    for i in range(3):
        first = mesh.vertices[i * ring].position
        last = mesh.vertices[i * ring + ring - 1].position
        assert first == pytest.approx(last, abs=1e-6)


def test_tangent_along_helper_axis_switches_helper():
    mesh = tube_mesh(lambda t: Vec3(0.0, t, 0.0), (0.0, 1.0), 1.0, 4, 1)
    for vertex in mesh.vertices:
        x, _, z = vertex.position
        assert math.hypot(x, z) == pytest.approx(1.0, rel=1e-5)