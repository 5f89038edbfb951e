"""
A module defining the scene data structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pyglm import glm

from point_plane.model.cameras import PerspectiveCamera
from point_plane.model.mesh import Mesh, plane_quad_mesh, point_mesh
from point_plane.model.plane import PlaneCollider


PLANE_START = glm.vec3(0.15, 0.0, 0.0)
POINT_START = glm.vec3(-0.15, 0.0, 0.0)


class SelectedObject(Enum):
    PLANE = "plane"
    POINT = "point"

    def other(self) -> SelectedObject:
        return SelectedObject.POINT if self is SelectedObject.PLANE else SelectedObject.PLANE


@dataclass
class Scene:
    """The demo scene: one plane, one point and the camera looking at them.

    Exactly one object is the target of input at a time, tracked by
    ``selected``.
    """

    plane: Mesh = field(default_factory=plane_quad_mesh)
    point: Mesh = field(default_factory=point_mesh)
    collider: PlaneCollider | None = None
    camera: PerspectiveCamera = field(default_factory=PerspectiveCamera)
    selected: SelectedObject = SelectedObject.PLANE

    def __post_init__(self):
        if self.collider is None:
            # The first triangle of the quad spans the plane.
            a, b, c = self.plane.vertices[:3]
            self.collider = PlaneCollider.from_vertices(a, b, c)

    @classmethod
    def default(cls) -> Scene:
        """The starting layout: plane and point apart along X, plane selected."""
        scene = cls()
        scene.plane.transform.apply_translation_delta(PLANE_START)
        scene.point.transform.apply_translation_delta(POINT_START)
        return scene

    @property
    def selected_object(self) -> Mesh:
        return self.plane if self.selected is SelectedObject.PLANE else self.point

    def toggle_selection(self) -> SelectedObject:
        """Swap which object receives input.

        :return: The newly selected object kind.
        """
        self.selected = self.selected.other()
        return self.selected

    def __repr__(self):
        return (
            f"Scene(selected={self.selected.value}, "
            f"plane={self.plane.desc()}, point={self.point.desc()})"
        )
