import math

import pytest

from forestplot.mesh import MeshData, Vec3, Vertex3D


def test_cross_of_basis_vectors():
    assert Vec3.I.cross(Vec3.J) == Vec3.K
    assert Vec3.J.cross(Vec3.K) == Vec3.I
    assert Vec3.K.cross(Vec3.I) == Vec3.J


def test_dot_of_orthogonal_is_zero():
    assert Vec3.I.dot(Vec3.J) == 0.0
    assert Vec3.K.dot(Vec3.K) == 1.0


def test_unit_has_length_one_and_same_direction():
    v = Vec3(3.0, -2.0, 7.0)
    u = v.unit()
    assert u.length() == pytest.approx(1.0)
    assert u.cross(v).length() == pytest.approx(0.0, abs=1e-12)
    assert u.dot(v) > 0


def test_unit_of_zero_is_zero():
    assert Vec3.ZERO.unit() == Vec3.ZERO


def test_arithmetic_round_trip():
    a = Vec3(1.5, -2.0, 4.0)
    b = Vec3(0.25, 3.0, -1.0)
    assert (a + b) - b == a
    assert -a + a == Vec3.ZERO
    assert a * 2.0 == 2.0 * a


def test_is_finite():
    assert Vec3(1.0, 2.0, 3.0).is_finite()
    assert not Vec3(1.0, math.nan, 3.0).is_finite()
    assert not Vec3(math.inf, 0.0, 0.0).is_finite()


def test_axes_layout():
    mesh = MeshData.axes(100.0)
    assert mesh.indices == [0, 1, 0, 2, 0, 3]
    assert mesh.vertices[0].position == (0.0, 0.0, 0.0)
    assert mesh.vertices[1].position == (100.0, 0.0, 0.0)
    assert mesh.vertices[2].position == (0.0, 100.0, 0.0)
    assert mesh.vertices[3].position == (0.0, 0.0, 100.0)


def test_plane_layout():
    mesh = MeshData.plane(20.0)
    assert mesh.indices == [0, 1, 2, 0, 2, 3]
    assert [v.position for v in mesh.vertices] == [
        (-10.0, -10.0, 0.0),
        (10.0, -10.0, 0.0),
        (10.0, 10.0, 0.0),
        (-10.0, 10.0, 0.0),
    ]
    assert all(v.normal == (0.0, 0.0, 1.0) for v in mesh.vertices)


def test_flat_surface_counts_and_normals():
    mesh = MeshData.parametric_surface(
        lambda u, v: Vec3(u, v, 0.0), (0.0, 1.0), (0.0, 1.0), 4, 5
    )
    assert len(mesh.vertices) == 5 * 6
    assert len(mesh.indices) == 4 * 5 * 6
    assert all(i < len(mesh.vertices) for i in mesh.indices)
    for vertex in mesh.vertices:
        assert vertex.normal[2] == pytest.approx(1.0, abs=1e-3)


def test_nan_sample_drops_adjacent_triangles():
    def surface(u, v):
        if u == 0.0 and v == 0.0:
            return Vec3(math.nan, 0.0, 0.0)
        return Vec3(u, v, 0.0)

    full = MeshData.parametric_surface(lambda u, v: Vec3(u, v, 0.0), (0.0, 1.0), (0.0, 1.0), 2, 2)
    holed = MeshData.parametric_surface(surface, (0.0, 1.0), (0.0, 1.0), 2, 2)
    assert math.isnan(holed.vertices[0].position[0])
    assert 0 not in holed.indices
    assert len(holed.indices) < len(full.indices)


def test_arithmetic_error_is_a_gap():
    mesh = MeshData.parametric_surface(
        lambda u, v: Vec3(u, v, 1.0 / u), (0.0, 1.0), (0.0, 1.0), 2, 2
    )
    assert math.isnan(mesh.vertices[0].position[0])
    assert 0 not in mesh.indices


def test_large_jump_is_not_connected():
    def step(u, v):
        return Vec3(u, v, 0.0 if u < 0.5 else 1000.0)

    mesh = MeshData.parametric_surface(step, (0.0, 1.0), (0.0, 1.0), 2, 2)
    flat = MeshData.parametric_surface(lambda u, v: Vec3(u, v, 0.0), (0.0, 1.0), (0.0, 1.0), 2, 2)
    assert len(mesh.indices) < len(flat.indices)
    for k in range(0, len(mesh.indices), 3):
        zs = {mesh.vertices[i].position[2] for i in mesh.indices[k:k + 3]}
        assert len(zs) == 1


def test_vertex_from_vecs_rounds_to_single_precision():
    v = Vertex3D.from_vecs(Vec3(0.1, 0.2, 0.3), Vec3.K)
    assert v.position[0] == pytest.approx(0.1, rel=1e-7)
    assert v.position[0] != 0.1
    assert v.normal == (0.0, 0.0, 1.0)