import math

import pytest

from glowbox.mesh import Mesh
from glowbox.shapes import cube
from glowbox.tangents import compute_tangents_and_bitangents


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _triangle():
    return Mesh(
        vertices=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
        texture_coordinates=[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)],
        indices=[0, 1, 2],
    )


def test_aligned_triangle_tangents():
    mesh = _triangle()
    compute_tangents_and_bitangents(mesh)
    for tangent, bitangent in zip(mesh.tangents, mesh.bitangents):
        assert tangent == pytest.approx((1.0, 0.0, 0.0))
        assert bitangent == pytest.approx((0.0, 1.0, 0.0))


def test_cube_tangents_unit_and_orthogonal_to_normals():
    mesh = cube()
    compute_tangents_and_bitangents(mesh)
    assert len(mesh.tangents) == len(mesh.vertices)
    assert len(mesh.bitangents) == len(mesh.vertices)
    for tangent, bitangent, normal in zip(mesh.tangents, mesh.bitangents, mesh.normals):
        assert math.sqrt(_dot(tangent, tangent)) == pytest.approx(1.0)
        assert math.sqrt(_dot(bitangent, bitangent)) == pytest.approx(1.0)
        assert _dot(tangent, normal) == pytest.approx(0.0, abs=1e-6)
        assert _dot(bitangent, normal) == pytest.approx(0.0, abs=1e-6)


def test_unused_vertex_gets_nan():
    mesh = _triangle()
    mesh.vertices.append((5.0, 5.0, 5.0))
    mesh.texture_coordinates.append((0.5, 0.5))
    compute_tangents_and_bitangents(mesh)
    assert len(mesh.tangents) == 4
    assert all(math.isnan(c) for c in mesh.tangents[3])
    assert all(math.isnan(c) for c in mesh.bitangents[3])


def test_incomplete_triangle_rejected():
    mesh = _triangle()
    mesh.indices.append(0)
    with pytest.raises(ValueError):
        compute_tangents_and_bitangents(mesh)


def test_scaled_uvs_keep_direction():
    mesh = _triangle()
    mesh.texture_coordinates = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]
    reference = _triangle()
    compute_tangents_and_bitangents(mesh)
    compute_tangents_and_bitangents(reference)
    for a, b in zip(mesh.tangents, reference.tangents):
        assert a == pytest.approx(b)
    for a, b in zip(mesh.bitangents, reference.bitangents):
        assert a == pytest.approx(b)