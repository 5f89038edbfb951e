"""
Pytest configuration and fixtures for point-plane tests.
"""

import numpy as np
import pytest
from pyglm import glm

from point_plane.model.plane import PlaneCollider
from point_plane.model.scene import Scene
from point_plane.settings import InteractionSettings
from point_plane.view_model.scene_manager import SceneManager


def assert_mat_close(actual: glm.mat4, expected: glm.mat4, atol: float = 1e-6) -> None:
    assert np.allclose(np.array(actual), np.array(expected), atol=atol)


def assert_vec_close(actual: glm.vec3, expected, atol: float = 1e-6) -> None:
    assert np.allclose(np.array(glm.vec3(actual)), np.array(expected), atol=atol)


@pytest.fixture
def x_plane():
    """Plane with normal +X."""
    return PlaneCollider(glm.vec3(1.0, 0.0, 0.0))


@pytest.fixture
def settings():
    return InteractionSettings()


@pytest.fixture
def scene():
    """Plane and point both at the origin, plane selected."""
    return Scene()


@pytest.fixture
def manager(scene, settings):
    return SceneManager(scene=scene, settings=settings)
