import math

import pytest

from forestplot.implicit_surface import solve_implicit_surface


def sphere(x, y, z):
    return x * x + y * y + z * z - 1.0


BOX = (-2.0, 2.0)


@pytest.fixture
def sphere_mesh():
    return solve_implicit_surface(sphere, BOX, BOX, BOX, 10)


def test_sphere_indices_are_sequential(sphere_mesh):
    assert len(sphere_mesh.vertices) > 0
    assert sphere_mesh.indices == list(range(len(sphere_mesh.vertices)))
    assert len(sphere_mesh.indices) % 3 == 0


def test_sphere_vertices_lie_near_surface(sphere_mesh):
    for vertex in sphere_mesh.vertices:
        r = math.sqrt(sum(c * c for c in vertex.position))
        assert r == pytest.approx(1.0, abs=0.15)


def test_sphere_normals_are_unit_and_outward(sphere_mesh):
    for vertex in sphere_mesh.vertices:
        length = math.sqrt(sum(c * c for c in vertex.normal))
        assert length == pytest.approx(1.0, abs=1e-5)
        outward = sum(p * n for p, n in zip(vertex.position, vertex.normal))
        assert outward > 0.0


def test_sphere_is_symmetric_under_mirror(sphere_mesh):
    positions = {tuple(round(c, 5) for c in v.position) for v in sphere_mesh.vertices}
    mirrored = {(-x, y, z) for x, y, z in positions}
    assert {tuple(round(c, 5) + 0.0 for c in p) for p in mirrored} == {
        tuple(c + 0.0 for c in p) for p in positions
    }


@pytest.mark.parametrize("offset", [5.0, -5.0])
def test_field_without_crossing_gives_empty_mesh(offset):
    mesh = solve_implicit_surface(lambda x, y, z: offset, BOX, BOX, BOX, 6)
    assert mesh.vertices == []
    assert mesh.indices == []


def test_horizontal_plane():
    resolution = 4
    mesh = solve_implicit_surface(
        lambda x, y, z: z - 0.3, (0.0, 1.0), (0.0, 1.0), (0.0, 1.0), resolution
    )
    assert len(mesh.vertices) == 6 * resolution * resolution
    for vertex in mesh.vertices:
        assert vertex.position[2] == pytest.approx(0.3, abs=1e-6)
        assert 0.0 <= vertex.position[0] <= 1.0
        assert 0.0 <= vertex.position[1] <= 1.0
        assert vertex.normal == pytest.approx((0.0, 0.0, 1.0), abs=1e-6)


def test_zero_resolution_gives_empty_mesh():
    mesh = solve_implicit_surface(sphere, BOX, BOX, BOX, 0)
    assert mesh.vertices == []
    assert mesh.indices == []


def test_negative_resolution_is_rejected():
    with pytest.raises(ValueError):
        solve_implicit_surface(sphere, BOX, BOX, BOX, -1)


def test_finer_resolution_gives_more_triangles():
    coarse = solve_implicit_surface(sphere, BOX, BOX, BOX, 6)
    fine = solve_implicit_surface(sphere, BOX, BOX, BOX, 12)
    assert len(fine.vertices) > len(coarse.vertices)


def test_failing_field_points_are_tolerated():
    def field(x, y, z):
        if x > 1.5:
            raise ZeroDivisionError
        return sphere(x, y, z)

    mesh = solve_implicit_surface(field, BOX, BOX, BOX, 8)
    assert len(mesh.vertices) > 0
    assert mesh.indices == list(range(len(mesh.vertices)))
    for vertex in mesh.vertices:
        assert all(math.isfinite(c) for c in vertex.position)