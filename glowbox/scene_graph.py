"""Scene graph nodes holding transforms and render handles."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum

from glowbox.mesh import Vec3

_ids = itertools.count()


def _identity(size: int) -> tuple[tuple[float, ...], ...]:
    return tuple(
        tuple(1.0 if row == col else 0.0 for col in range(size)) for row in range(size)
    )


class SceneNodeType(Enum):
    """How the contents of a node are handled when rendering."""

    GEOMETRY = 0
    POINT_LIGHT = 1
    SPOT_LIGHT = 2
    GEOMETRY_2D = 3
    NORMAL_MAPPED_GEOMETRY = 4


@dataclass(eq=False)
class SceneNode:
    """A node with a transform relative to its parent and a list of children."""

    children: list[SceneNode] = field(default_factory=list)
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    light_color: Vec3 = (0.0, 0.0, 0.0)
    current_transformation_matrix: tuple[tuple[float, ...], ...] = field(
        default_factory=lambda: _identity(4)
    )
    model_matrix: tuple[tuple[float, ...], ...] = field(
        default_factory=lambda: _identity(4)
    )
    normal_matrix: tuple[tuple[float, ...], ...] = field(
        default_factory=lambda: _identity(3)
    )
    reference_point: Vec3 = (0.0, 0.0, 0.0)
    vertex_array_object_id: int = -1
    vao_index_count: int = 0
    node_type: SceneNodeType = SceneNodeType.GEOMETRY
    id: int = field(default_factory=lambda: next(_ids))
    texture_id: int = 0
    normal_map_id: int = 0
    roughness_map_id: int = 0
    material_id: int = 0

    def add_child(self, child: SceneNode) -> None:
        """Append a child node."""
        self.children.append(child)

    def total_children(self) -> int:
        """Count all descendants of this node."""
        return sum(1 + child.total_children() for child in self.children)

    def describe(self) -> str:
        """Human-readable summary of the node's current values."""
        rx, ry, rz = self.rotation
        px, py, pz = self.position
        fx, fy, fz = self.reference_point
        return (
            "SceneNode {\n"
            f"    Child count: {len(self.children)}\n"
            f"    Rotation: ({rx:f}, {ry:f}, {rz:f})\n"
            f"    Location: ({px:f}, {py:f}, {pz:f})\n"
            f"    Reference point: ({fx:f}, {fy:f}, {fz:f})\n"
            f"    VAO ID: {self.vertex_array_object_id}\n"
            "}"
        )


def print_node(node: SceneNode) -> None:
    """Print a node's summary to standard output."""
    print(node.describe())