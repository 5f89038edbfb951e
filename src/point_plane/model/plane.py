"""
Plane collider.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pyglm import glm

from point_plane.errors import InvalidGeometryError


@dataclass(frozen=True)
class PlaneCollider:
    """An infinite plane through the local origin of its scene object.

    The normal is kept as given and is expected to be unit length. Only the
    owning object's transform changes; that is what moves the plane in world
    space.

    :param normal: The plane normal in local space.
    """

    normal: glm.vec3 = field(default_factory=lambda: glm.vec3(1.0, 0.0, 0.0))

    def __post_init__(self):
        normal = glm.vec3(self.normal)
        if not all(math.isfinite(c) for c in normal):
            raise InvalidGeometryError(f"Plane normal must be finite, got {normal}")
        if glm.length(normal) == 0.0:
            raise InvalidGeometryError("Plane normal must not be zero.")
        object.__setattr__(self, "normal", normal)

    @classmethod
    def from_vertices(cls, a: glm.vec3, b: glm.vec3, c: glm.vec3) -> PlaneCollider:
        """Build a collider from three vertices lying in the plane.

        :param a: First vertex.
        :param b: Second vertex.
        :param c: Third vertex.
        :return: A collider whose normal is ``normalize(cross(a - b, b - c))``.
        """
        cross = glm.cross(glm.vec3(a) - glm.vec3(b), glm.vec3(b) - glm.vec3(c))
        if glm.length(cross) == 0.0:
            raise InvalidGeometryError(
                f"Vertices {a}, {b}, {c} are collinear and do not span a plane."
            )
        return cls(normal=glm.normalize(cross))
