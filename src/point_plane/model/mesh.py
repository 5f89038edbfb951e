from __future__ import annotations

from enum import Enum
from typing import List
from dataclasses import dataclass, field
import numpy as np
from pyglm import glm

from point_plane.model.scene_object import SceneObject


# Colors are multiplied by the hue, which only toggles the red channel.
PLANE_COLOR = glm.vec4(1.0, 0.0, 1.0, 1.0)
POINT_COLOR = glm.vec4(1.0, 1.0, 0.0, 1.0)


class Topology(Enum):
    TRIANGLE_LIST = "triangle_list"
    POINT_LIST = "point_list"


def hue_matrix(colliding: bool) -> glm.mat4:
    """Build the color matrix for the current collision state.

    :param colliding: Whether the plane and point currently collide.
    :return: Identity with the red channel switched on or off.
    """
    hue = glm.mat4(1.0)
    hue[0, 0] = 1.0 if colliding else 0.0
    return hue


@dataclass
class Mesh(SceneObject):
    vertices: List[glm.vec3] = field(default_factory=list)
    colors: List[glm.vec4] = field(default_factory=list)
    topology: Topology = Topology.TRIANGLE_LIST

    def __post_init__(self):
        if len(self.colors) != len(self.vertices):
            raise ValueError(
                f"Mesh '{self.name}' has {len(self.vertices)} vertices "
                f"but {len(self.colors)} colors."
            )

    def tinted_colors(self, hue: glm.mat4) -> List[glm.vec4]:
        return [hue * c for c in self.colors]

    def vertex_data(self, hue: glm.mat4) -> np.ndarray:
        """Interleave positions and tinted colors for a vertex buffer.

        :param hue: Color matrix applied to every vertex color.
        :return: A float32 array of shape (N, 7): xyz followed by rgba.
        """
        rows = [
            [v.x, v.y, v.z, c.x, c.y, c.z, c.w]
            for v, c in zip(self.vertices, self.tinted_colors(hue))
        ]
        return np.ascontiguousarray(rows, dtype=np.float32).reshape((-1, 7))


def plane_quad_mesh(name: str = "plane") -> Mesh:
    """A 2x2 quad in the local YZ plane, drawn as two triangles."""
    vertices = [
        glm.vec3(0.0, 1.0, 1.0),
        glm.vec3(0.0, -1.0, 1.0),
        glm.vec3(0.0, -1.0, -1.0),
        glm.vec3(0.0, -1.0, -1.0),
        glm.vec3(0.0, 1.0, -1.0),
        glm.vec3(0.0, 1.0, 1.0),
    ]
    return Mesh(
        name=name,
        vertices=vertices,
        colors=[glm.vec4(PLANE_COLOR) for _ in vertices],
        topology=Topology.TRIANGLE_LIST,
    )


def point_mesh(name: str = "point") -> Mesh:
    """A single vertex at the local origin."""
    return Mesh(
        name=name,
        vertices=[glm.vec3(0.0, 0.0, 0.0)],
        colors=[glm.vec4(POINT_COLOR)],
        topology=Topology.POINT_LIST,
    )
