"""
Point-plane collision test.

A point is a zero-measure position and a plane is infinitely thin, so an
exact incidence test would practically never fire under float arithmetic or
keyboard control. The test therefore accepts any point whose distance along
the plane normal is within an acceptance tolerance, sized to the radius of
the drawn point.

The world normal is not renormalized after the model transform. Objects that
carry a plane collider are expected to keep an identity scale, otherwise the
tolerance is compared against a scaled distance.
"""

import numpy as np
from pyglm import glm

from point_plane.model.plane import PlaneCollider


# Matches the float32 precision PyGLM computes in.
FLT_EPSILON = float(np.finfo(np.float32).eps)
DEFAULT_ACCEPTANCE_TOLERANCE = 0.002


def world_normal(plane: PlaneCollider, model_matrix: glm.mat4) -> glm.vec3:
    """Transform the plane normal into world space.

    :param plane: The plane collider.
    :param model_matrix: The plane's model-to-world matrix.
    :return: The world space normal. Translation is ignored (w = 0).
    """
    return glm.vec3(model_matrix * glm.vec4(plane.normal, 0.0))


def plane_world_position(model_matrix: glm.mat4) -> glm.vec3:
    """Get the translation column of a model matrix.

    :param model_matrix: The plane's model-to-world matrix.
    :return: The plane's origin in world space.
    """
    return glm.vec3(model_matrix[3][0], model_matrix[3][1], model_matrix[3][2])


def signed_distance(
    plane: PlaneCollider, model_matrix: glm.mat4, point: glm.vec3
) -> float:
    """Dot product of the point, relative to the plane origin, with the world normal.

    :param plane: The plane collider.
    :param model_matrix: The plane's model-to-world matrix.
    :param point: The point in world space.
    :return: The signed distance along the (unnormalized) world normal.
    """
    relative = glm.vec3(point) - plane_world_position(model_matrix)
    return float(glm.dot(relative, world_normal(plane, model_matrix)))


def test_collision(
    plane: PlaneCollider,
    model_matrix: glm.mat4,
    point: glm.vec3,
    acceptance_tolerance: float = DEFAULT_ACCEPTANCE_TOLERANCE,
) -> bool:
    """Test whether a point lies on a plane.

    :param plane: The plane collider.
    :param model_matrix: The plane's model-to-world matrix.
    :param point: The point in world space.
    :param acceptance_tolerance: Extra distance from the plane still accepted
        as a collision.
    :return: True if the point is within the tolerance band of the plane.
    """
    distance = signed_distance(plane, model_matrix, point)
    return abs(distance) <= FLT_EPSILON + acceptance_tolerance


# Not a pytest test function.
test_collision.__test__ = False
