from glowbox.scene_graph import SceneNode, SceneNodeType, print_node


def test_defaults():
    node = SceneNode()
    assert node.children == []
    assert node.position == (0.0, 0.0, 0.0)
    assert node.scale == (1.0, 1.0, 1.0)
    assert node.vertex_array_object_id == -1
    assert node.vao_index_count == 0
    assert node.node_type is SceneNodeType.GEOMETRY
    assert node.material_id == 0


def test_default_matrices_are_identity():
    node = SceneNode()
    for matrix, size in ((node.model_matrix, 4), (node.normal_matrix, 3)):
        assert len(matrix) == size
        for r, row in enumerate(matrix):
            for c, value in enumerate(row):
                assert value == (1.0 if r == c else 0.0)


def test_ids_are_unique_and_increasing():
    first, second, third = SceneNode(), SceneNode(), SceneNode()
    assert first.id < second.id < third.id


def test_children_lists_are_independent():
    a, b = SceneNode(), SceneNode()
    a.add_child(SceneNode())
    assert len(a.children) == 1
    assert b.children == []


def test_total_children_counts_descendants():
    root = SceneNode()
    child = SceneNode()
    leaf = SceneNode()
    root.add_child(child)
    root.add_child(SceneNode())
    child.add_child(leaf)
    leaf.add_child(SceneNode())
    assert root.total_children() == 4
    assert child.total_children() == 2
    assert SceneNode().total_children() == 0


def test_describe_contents():
    node = SceneNode(position=(1.5, 2.0, -3.0))
    node.add_child(SceneNode())
    text = node.describe()
    assert text.startswith("SceneNode {\n")
    assert text.endswith("}")
    assert "    Child count: 1\n" in text
    assert "    Location: (1.500000, 2.000000, -3.000000)\n" in text
    assert "    VAO ID: -1\n" in text


def test_print_node(capsys):
    node = SceneNode(rotation=(0.25, 0.0, 1.0))
    print_node(node)
    assert capsys.readouterr().out == node.describe() + "\n"