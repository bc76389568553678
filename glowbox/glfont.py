"""Quad geometry for drawing text from a 128-glyph horizontal font atlas."""

from __future__ import annotations

from glowbox.mesh import Mesh

_TEXTURE_WIDTH = 1.0 / 128.0


def generate_text_geometry_buffer(
    text: str, character_height_over_width: float, total_text_width: float
) -> Mesh:
    """Lay out one textured quad per character along the x-axis."""
    mesh = Mesh()
    if not text:
        return mesh

    character_width = total_text_width / len(text)
    character_height = character_height_over_width * character_width

    for position, character in enumerate(text):
        base_x = position * character_width
        base_u = ord(character) * _TEXTURE_WIDTH
        first = len(mesh.vertices)

        mesh.vertices.extend(
            [
                (base_x, 0.0, 0.0),
                (base_x + character_width, 0.0, 0.0),
                (base_x + character_width, character_height, 0.0),
                (base_x, character_height, 0.0),
            ]
        )
        mesh.indices.extend(first + offset for offset in (0, 1, 2, 0, 2, 3))
        mesh.texture_coordinates.extend(
            [
                (base_u, 0.0),
                (base_u + _TEXTURE_WIDTH, 0.0),
                (base_u + _TEXTURE_WIDTH, 1.0),
                (base_u, 1.0),
            ]
        )

    return mesh