"""
Camera parameters.
"""

from dataclasses import dataclass, field
from pyglm import glm


@dataclass
class PerspectiveCamera:
    """Fixed perspective camera looking at a target.

    :param fov: Field of view in degrees.
    :param near: Near clipping plane distance.
    :param far: Far clipping plane distance.
    """

    fov: float = 45.0
    near: float = 0.1
    far: float = 100.0
    eye: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 2.0))
    target: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 0.0, 0.0))
    up: glm.vec3 = field(default_factory=lambda: glm.vec3(0.0, 1.0, 0.0))

    def view_matrix(self) -> glm.mat4:
        """Calculate the view matrix.

        :return: View matrix as glm.mat4.
        """
        return glm.lookAt(self.eye, self.target, self.up)

    def projection_matrix(self, w: int, h: int) -> glm.mat4:
        """Calculate the projection matrix.

        :param w: Width of the viewport.
        :param h: Height of the viewport.
        :return: Projection matrix as glm.mat4.
        """
        return glm.perspectiveFov(
            glm.radians(self.fov),
            w,
            h,
            self.near,
            self.far,
        )

    def view_projection(self, w: int, h: int) -> glm.mat4:
        return self.projection_matrix(w, h) * self.view_matrix()
