import pytest

from glowbox.glfont import generate_text_geometry_buffer


def test_empty_text_gives_empty_mesh():
    mesh = generate_text_geometry_buffer("", 2.0, 10.0)
    assert mesh.vertices == []
    assert mesh.indices == []
    assert mesh.texture_coordinates == []


def test_counts_per_character():
    mesh = generate_text_geometry_buffer("Hello", 2.0, 10.0)
    assert len(mesh.vertices) == 20
    assert len(mesh.texture_coordinates) == 20
    assert len(mesh.indices) == 30
    assert mesh.normals == []


def test_index_pattern():
    mesh = generate_text_geometry_buffer("ab", 1.0, 2.0)
    assert mesh.indices == [0, 1, 2, 0, 2, 3, 4, 5, 6, 4, 6, 7]


def test_text_spans_total_width_and_height():
    mesh = generate_text_geometry_buffer("abcd", 3.0, 8.0)
    xs = [v[0] for v in mesh.vertices]
    ys = [v[1] for v in mesh.vertices]
    assert min(xs) == 0.0
    assert max(xs) == pytest.approx(8.0)
    assert max(ys) == pytest.approx(3.0 * 8.0 / 4)
    assert all(v[2] == 0.0 for v in mesh.vertices)


def test_texture_coordinates_follow_character_codes():
    text = "Az"
    mesh = generate_text_geometry_buffer(text, 1.0, 1.0)
    for position, character in enumerate(text):
        quad = mesh.texture_coordinates[4 * position:4 * position + 4]
        assert quad[0][0] == pytest.approx(ord(character) / 128)
        assert quad[1][0] == pytest.approx((ord(character) + 1) / 128)
        assert [uv[1] for uv in quad] == [0.0, 0.0, 1.0, 1.0]


def test_quads_are_adjacent():
    mesh = generate_text_geometry_buffer("xyz", 1.0, 6.0)
    for position in range(2):
        right_edge = mesh.vertices[4 * position + 1][0]
        next_left = mesh.vertices[4 * (position + 1)][0]
        assert right_edge == pytest.approx(next_left)