from __future__ import annotations
from dataclasses import dataclass, field
from pyglm import glm

from point_plane.model.transforms import Transform3D


# SceneObject index to generate unique IDs.
_scene_object_index = 0


def get_next_scene_object_index() -> int:
    global _scene_object_index
    idx = _scene_object_index
    _scene_object_index += 1
    return idx


@dataclass
class SceneObject:
    name: str = field(default_factory=lambda: f"object_{get_next_scene_object_index()}")
    transform: Transform3D = field(default_factory=Transform3D)

    def get_transform_matrix(self) -> glm.mat4:
        """Compute the model matrix of this object.

        :return: The 4x4 model matrix.
        """
        return self.transform.get_matrix()

    @property
    def world_position(self) -> glm.vec3:
        """The object's origin in world space, read from its translation."""
        return self.transform.position

    def desc(self) -> str:
        p = self.world_position
        return f"SceneObject(name={self.name}, position=({p.x:.3f}, {p.y:.3f}, {p.z:.3f}))"

    def __repr__(self):
        return self.desc()
