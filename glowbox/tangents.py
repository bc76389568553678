"""Per-vertex tangent and bitangent computation for normal mapping."""

from __future__ import annotations

import math

from glowbox.mesh import Mesh, Vec3

_ZERO: Vec3 = (0.0, 0.0, 0.0)


def _normalize(vector: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in vector))
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (vector[0] / length, vector[1] / length, vector[2] / length)


def compute_tangents_and_bitangents(mesh: Mesh) -> None:
    """Fill ``mesh.tangents`` and ``mesh.bitangents`` from positions and UVs.

    Existing entries are kept and accumulated into, as are any missing
    entries padded with zero vectors. A vertex touched by no triangle ends
    up with NaN components.
    """
    if len(mesh.indices) % 3:
        raise ValueError("index count must be a multiple of 3")

    count = len(mesh.vertices)
    tangents = [list(t) for t in mesh.tangents[:count]]
    bitangents = [list(b) for b in mesh.bitangents[:count]]
    tangents += [list(_ZERO) for _ in range(count - len(tangents))]
    bitangents += [list(_ZERO) for _ in range(count - len(bitangents))]

    triangles = zip(*[iter(mesh.indices)] * 3)
    for triangle in triangles:
        p0, p1, p2 = (mesh.vertices[i] for i in triangle)
        uv0, uv1, uv2 = (mesh.texture_coordinates[i] for i in triangle)

        e1 = [b - a for a, b in zip(p0, p1)]
        e2 = [b - a for a, b in zip(p0, p2)]
        du1, dv1 = uv1[0] - uv0[0], uv1[1] - uv0[1]
        du2, dv2 = uv2[0] - uv0[0], uv2[1] - uv0[1]

        f = 1.0 / (du1 * dv2 - du2 * dv1 + 1e-8)
        tangent = [f * (a * dv2 - b * dv1) for a, b in zip(e1, e2)]
        bitangent = [f * (-a * du2 + b * du1) for a, b in zip(e1, e2)]

        for index in triangle:
            for axis in range(3):
                tangents[index][axis] += tangent[axis]
                bitangents[index][axis] += bitangent[axis]

    mesh.tangents = [_normalize(tuple(t)) for t in tangents]
    mesh.bitangents = [_normalize(tuple(b)) for b in bitangents]