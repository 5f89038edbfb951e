"""
A module defining transform data structures.
"""

from dataclasses import dataclass, field

from pyglm import glm


X_AXIS = glm.vec3(1.0, 0.0, 0.0)
Y_AXIS = glm.vec3(0.0, 1.0, 0.0)


@dataclass(eq=False)
class Transform3D:
    """An affine transform kept as separate translation, rotation and scale.

    Rotation is stored as a unit quaternion and only turned into a matrix when
    it is read, so repeated incremental updates stay orthonormal.

    :param translation: Translation of the transform as a 4x4 matrix.
    :param orientation: Rotation of the transform as a unit quaternion (w, x, y, z).
    :param scale: Scale of the transform as a 4x4 matrix.
    """

    translation: glm.mat4 = field(default_factory=lambda: glm.mat4(1.0))
    orientation: glm.quat = field(default_factory=lambda: glm.quat(1.0, 0.0, 0.0, 0.0))
    scale: glm.mat4 = field(default_factory=lambda: glm.mat4(1.0))

    @property
    def rotation(self) -> glm.mat4:
        """The rotation as a 4x4 matrix."""
        return glm.mat4_cast(self.orientation)

    @rotation.setter
    def rotation(self, matrix: glm.mat4) -> None:
        self.orientation = glm.normalize(glm.quat_cast(glm.mat3(matrix)))

    @property
    def position(self) -> glm.vec3:
        """The translation column of the transform."""
        t = self.translation
        return glm.vec3(t[3][0], t[3][1], t[3][2])

    def get_matrix(self) -> glm.mat4:
        """Compute the model matrix to transform points from local to world space.

        :return: The 4x4 model matrix, ``translation * rotation * scale``.
        """
        return glm.mat4(self.translation * self.rotation * self.scale)

    def apply_translation_delta(self, axis_vector: glm.vec3) -> None:
        """Move the transform by ``axis_vector`` in world space.

        :param axis_vector: Offset to apply. It is pre-multiplied onto the
            current translation so it ignores the current orientation.
        """
        delta = glm.translate(glm.mat4(1.0), glm.vec3(axis_vector))
        self.translation = delta * self.translation

    def apply_rotation_delta(self, yaw_angle: float, pitch_angle: float) -> None:
        """Rotate the transform in world space.

        The new rotation is ``yaw * pitch * rotation`` where yaw turns about +Y
        and pitch about +X. An axis whose angle is exactly zero contributes
        nothing.

        :param yaw_angle: Angle in radians about the world Y axis.
        :param pitch_angle: Angle in radians about the world X axis.
        """
        yaw = glm.quat(1.0, 0.0, 0.0, 0.0)
        pitch = glm.quat(1.0, 0.0, 0.0, 0.0)
        if yaw_angle != 0.0:
            yaw = glm.angleAxis(float(yaw_angle), Y_AXIS)
        if pitch_angle != 0.0:
            pitch = glm.angleAxis(float(pitch_angle), X_AXIS)
        self.orientation = glm.normalize(yaw * pitch * self.orientation)
