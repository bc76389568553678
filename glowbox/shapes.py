"""Procedural cube and sphere meshes."""

from __future__ import annotations

import math

from glowbox.mesh import Mesh, Vec2, Vec3

# Corner indices of each face: bottom, top, right, left, back, front.
_FACES = (
    (2, 3, 0, 1),
    (4, 5, 6, 7),
    (7, 5, 3, 1),
    (4, 6, 0, 2),
    (5, 4, 1, 0),
    (6, 7, 2, 3),
)

_FACE_NORMALS: tuple[Vec3, ...] = (
    (0.0, -1.0, 0.0),
    (0.0, 1.0, 0.0),
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, 0.0, -1.0),
    (0.0, 0.0, 1.0),
)

_UVS: tuple[Vec2, ...] = ((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0))


def cube(
    scale: Vec3 = (1.0, 1.0, 1.0),
    texture_scale: Vec2 = (1.0, 1.0),
    tiling_textures: bool = False,
    inverted: bool = False,
    texture_scale_3d: Vec3 = (1.0, 1.0, 1.0),
) -> Mesh:
    """Build an axis-aligned box centred on the origin, 36 unshared vertices."""
    sx, sy, sz = scale
    points = []
    for corner in range(8):
        x, z, y = corner & 1, (corner >> 1) & 1, (corner >> 2) & 1
        points.append(
            ((x * 2 - 1) * 0.5 * sx, (y * 2 - 1) * 0.5 * sy, (z * 2 - 1) * 0.5 * sz)
        )

    tx = sx * texture_scale_3d[0]
    ty = sy * texture_scale_3d[1]
    tz = sz * texture_scale_3d[2]
    face_scales = (
        (-tx, -tz),
        (-tx, -tz),
        (tz, ty),
        (tz, ty),
        (tx, ty),
        (tx, ty),
    )

    sign = -1.0 if inverted else 1.0
    corner_order = (0, 1, 3, 0, 3, 2) if inverted else (0, 3, 1, 0, 2, 3)
    uv_order = (3, 1, 0, 3, 0, 2) if inverted else (1, 2, 3, 1, 0, 2)

    mesh = Mesh()
    for face, normal, face_scale in zip(_FACES, _FACE_NORMALS, face_scales):
        oriented = (normal[0] * sign, normal[1] * sign, normal[2] * sign)
        for corner in corner_order:
            mesh.vertices.append(points[face[corner]])
            mesh.indices.append(len(mesh.indices))
            mesh.normals.append(oriented)

        if tiling_textures:
            factor = (face_scale[0] / texture_scale[0], face_scale[1] / texture_scale[1])
        else:
            factor = (1.0, 1.0)
        for uv_index in uv_order:
            u, v = _UVS[uv_index]
            mesh.texture_coordinates.append((u * factor[0], v * factor[1]))

    return mesh


def _asin_or_nan(value: float) -> float:
    return math.asin(value) if -1.0 <= value <= 1.0 else math.nan


def generate_sphere(sphere_radius: float, slices: int, layers: int) -> Mesh:
    """Build a UV sphere around the z-axis from slices * layers quads."""
    degrees_per_layer = 180.0 / layers
    degrees_per_slice = 360.0 / slices

    mesh = Mesh()
    for layer in range(layers):
        current_angle = math.radians(degrees_per_layer * layer)
        next_angle = math.radians(degrees_per_layer * (layer + 1))

        current_z = -math.cos(current_angle)
        next_z = -math.cos(next_angle)
        radius = math.sin(current_angle)
        next_radius = math.sin(next_angle)

        for slice_ in range(slices):
            current_slice = math.radians(slice_ * degrees_per_slice)
            next_slice = math.radians((slice_ + 1) * degrees_per_slice)
            cur_dx, cur_dy = math.cos(current_slice), math.sin(current_slice)
            nxt_dx, nxt_dy = math.cos(next_slice), math.sin(next_slice)

            unit_points = (
                (radius * cur_dx, radius * cur_dy, current_z),
                (radius * nxt_dx, radius * nxt_dy, current_z),
                (next_radius * nxt_dx, next_radius * nxt_dy, next_z),
                (radius * cur_dx, radius * cur_dy, current_z),
                (next_radius * nxt_dx, next_radius * nxt_dy, next_z),
                (next_radius * cur_dx, next_radius * cur_dy, next_z),
            )
            for nx, ny, nz in unit_points:
                vertex = (sphere_radius * nx, sphere_radius * ny, sphere_radius * nz)
                mesh.vertices.append(vertex)
                mesh.normals.append((nx, ny, nz))
                mesh.indices.append(len(mesh.indices))
                mesh.texture_coordinates.append(
                    (
                        0.5 + math.atan2(vertex[2], vertex[1]) / (2.0 * math.pi),
                        0.5 - _asin_or_nan(vertex[1]) / math.pi,
                    )
                )

    return mesh