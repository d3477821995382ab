import math

import pytest

from rallykit.geometry import (
    Mesh,
    build_checkpoint_mesh,
    build_sky_mesh,
    build_water_mesh,
)


def _sky_vertex(mesh, x, y):
    return mesh.vertices[(y + 10) * 21 + (x + 10)]


def test_sky_sizes():
    mesh = build_sky_mesh()
    assert mesh.stride == 5
    assert len(mesh.vertices) == 21 * 20
    assert len(mesh.indices) == 22 * 20 * 2
    assert mesh.count == 21 * 20 * 2
    assert all(len(v) == 5 for v in mesh.vertices)


def test_sky_centre_height():
    mesh = build_sky_mesh()
    assert _sky_vertex(mesh, 0, 0) == pytest.approx((0.0, 0.0, 0.0, 0.0, 0.3))


def test_sky_texture_matches_position_and_dome_is_symmetric():
    mesh = build_sky_mesh()
    for v in mesh.vertices:
        assert v[0] == v[2] and v[1] == v[3]
    assert _sky_vertex(mesh, 3, 4)[4] == pytest.approx(_sky_vertex(mesh, -3, -4)[4])
    assert _sky_vertex(mesh, 5, 0)[4] == pytest.approx(_sky_vertex(mesh, 0, 5)[4])
    assert _sky_vertex(mesh, 5, 0)[4] < _sky_vertex(mesh, 2, 0)[4] < _sky_vertex(mesh, 0, 0)[4]


def test_sky_strip_restarts():
    mesh = build_sky_mesh()
    for row in range(20):
        end = (row * 22 + 21) * 2
        assert mesh.indices[end:end + 2] == [0, 0]
    assert mesh.indices[0:2] == [21, 0]


def test_checkpoint_sizes():
    mesh = build_checkpoint_mesh()
    assert mesh.stride == 10
    assert len(mesh.vertices) == 60
    assert len(mesh.indices) == 84
    assert mesh.count == 84
    assert max(mesh.indices) < len(mesh.vertices)


def test_checkpoint_vertices_lie_on_unit_circle():
    mesh = build_checkpoint_mesh()
    for index, v in enumerate(mesh.vertices):
        j = index % 3
        assert v[3] == (1.0 if j == 1 else 0.0)
        assert v[9] == j - 1
        assert math.hypot(v[7], v[8]) == pytest.approx(1.0)
        assert v[:3] == (0.0, 0.0, 0.0)


def test_checkpoint_strips_close_the_ring():
    mesh = build_checkpoint_mesh()
    lower, upper = mesh.indices[:42], mesh.indices[42:]
    assert lower[:2] == lower[-2:] == [0, 1]
    assert upper[:2] == upper[-2:] == [1, 2]


def test_water_fixed_user_alpha_ignores_terrain():
    def fail(x, y):
        raise AssertionError("terrain must not be sampled")

    mesh = build_water_mesh(0.0, 0.0, 5.0, fail, fixed_alpha=True, user_alpha=0.3)
    written = mesh.vertices[:1601]
    assert all(v[5] == pytest.approx(0.3) for v in written)
    assert all(v[11] == 5.0 for v in written)


def test_water_sizes_and_unwritten_tail():
    mesh = build_water_mesh(0.0, 0.0, 1.0, lambda x, y: 0.0, fixed_alpha=True)
    assert isinstance(mesh, Mesh)
    assert mesh.stride == 12
    assert len(mesh.vertices) == 40 * 41
    assert len(mesh.indices) == 41 * 40 * 2
    assert mesh.count == len(mesh.indices)
    assert all(v == (0.0,) * 12 for v in mesh.vertices[1601:])


def test_water_alpha_clamped_by_depth():
    deep = build_water_mesh(0.0, 0.0, 0.0, lambda x, y: -1000.0)
    assert all(v[5] == pytest.approx(0.5) for v in deep.vertices[:1601])
    dry = build_water_mesh(0.0, 0.0, 0.0, lambda x, y: 1000.0)
    assert all(v[5] == 0.0 for v in dry.vertices[:1601])


def test_water_samples_terrain_around_camera():
    calls = []

    def height(x, y):
        calls.append((x, y))
        return -100.0

    mesh = build_water_mesh(45.0, -30.0, 0.0, height)
    off_x, off_y = mesh.offset
    assert (off_x, off_y) == (2, -1)
    assert len(calls) == 40 * 41
    assert calls[0] == ((-20 + off_x) * 20.0, (-20 + off_y) * 20.0)
    centre = mesh.vertices[20 * 40 + 20]
    assert centre[9:12] == (0.0, 0.0, 0.0)
    assert centre[1] == pytest.approx((off_y - off_x) * 0.5)


def test_water_strip_restarts():
    mesh = build_water_mesh(0.0, 0.0, 0.0, lambda x, y: 0.0, fixed_alpha=True)
    for row in range(40):
        end = (row * 41 + 40) * 2
        assert mesh.indices[end:end + 2] == [0, 0]
    assert mesh.indices[0:2] == [40, 0]