"""
Tests for SceneManager: input handling and per-frame collision evaluation.
"""

import logging
import math

import numpy as np
import pytest
from pyglm import glm

from conftest import assert_vec_close
from point_plane.model.scene import Scene, SelectedObject
from point_plane.settings import InteractionSettings
from point_plane.view_model.scene_manager import Axis, SceneManager


class TestAxis:
    @pytest.mark.parametrize(
        "axis, expected",
        [
            (Axis.POS_X, (1.0, 0.0, 0.0)),
            (Axis.NEG_X, (-1.0, 0.0, 0.0)),
            (Axis.POS_Y, (0.0, 1.0, 0.0)),
            (Axis.NEG_Y, (0.0, -1.0, 0.0)),
            (Axis.POS_Z, (0.0, 0.0, 1.0)),
            (Axis.NEG_Z, (0.0, 0.0, -1.0)),
        ],
    )
    def test_unit_vectors(self, axis, expected):
        assert_vec_close(axis.vector, expected)


class TestInput:
    def test_default_scene_starts_apart(self):
        manager = SceneManager()
        assert manager.colliding.value is False
        assert manager.update() is False
        assert manager.scene.selected is SelectedObject.PLANE

    def test_translate_moves_selected_by_movement_speed(self, manager):
        manager.translate_request(Axis.POS_Y)
        manager.translate_request(Axis.NEG_X)
        assert_vec_close(manager.scene.plane.world_position, (-0.02, 0.02, 0.0))
        assert_vec_close(manager.scene.point.world_position, (0.0, 0.0, 0.0))

    def test_translate_uses_configured_speed(self, scene):
        manager = SceneManager(scene=scene, settings=InteractionSettings(movement_speed=0.5))
        manager.translate_request(Axis.NEG_Z)
        assert_vec_close(scene.plane.world_position, (0.0, 0.0, -0.5))

    def test_toggle_redirects_input(self, manager):
        assert manager.select_toggle() is SelectedObject.POINT
        manager.translate_request(Axis.POS_X)
        assert_vec_close(manager.scene.point.world_position, (0.02, 0.0, 0.0))
        assert_vec_close(manager.scene.plane.world_position, (0.0, 0.0, 0.0))

    def test_toggle_publishes_selection(self, manager):
        seen = []
        manager.selection.subscribe(seen.append)
        manager.select_toggle()
        manager.select_toggle()
        assert seen == [SelectedObject.PLANE, SelectedObject.POINT, SelectedObject.PLANE]

    def test_toggle_is_logged(self, manager, caplog):
        with caplog.at_level(logging.INFO, logger="point_plane.view_model.scene_manager"):
            manager.select_toggle()
        assert "Selected point" in caplog.text

    def test_rotate_drag_scales_pixels_by_rotation_speed(self, manager):
        pixels = (math.pi / 2) / manager.settings.rotation_speed
        manager.rotate_drag(pixels, 0.0)
        rotation = manager.scene.plane.transform.rotation
        rotated = glm.vec3(rotation * glm.vec4(1.0, 0.0, 0.0, 0.0))
        assert_vec_close(rotated, (0.0, 0.0, -1.0), atol=1e-5)

    def test_rotate_drag_vertical_pitches(self, manager):
        manager.rotate_drag(0.0, 10.0)
        expected = glm.rotate(glm.mat4(1.0), 0.1, glm.vec3(1.0, 0.0, 0.0))
        actual = manager.scene.plane.transform.rotation
        assert np.allclose(np.array(actual), np.array(expected), atol=1e-6)

    def test_rotate_drag_without_motion_is_a_no_op(self, manager):
        before = glm.quat(manager.scene.plane.transform.orientation)
        manager.rotate_drag(0.0, 0.0)
        assert manager.scene.plane.transform.orientation == before

    def test_rotate_drag_only_affects_selected(self, manager):
        manager.select_toggle()
        manager.rotate_drag(25.0, -40.0)
        assert manager.scene.plane.transform.orientation == glm.quat(1.0, 0.0, 0.0, 0.0)
        assert manager.scene.point.transform.orientation != glm.quat(1.0, 0.0, 0.0, 0.0)


class TestUpdate:
    def test_end_to_end_with_default_layout(self):
        manager = SceneManager()
        assert manager.update() is False

        # Walk the point onto the plane: 15 steps of 0.02 cover the 0.3 gap.
        manager.select_toggle()
        for _ in range(15):
            manager.translate_request(Axis.POS_X)
        assert manager.update() is True

        # One more step leaves the plane again.
        manager.translate_request(Axis.POS_X)
        assert manager.update() is False

    def test_publishes_only_on_change(self, manager):
        seen = []
        manager.colliding.subscribe(seen.append)
        manager.update()
        manager.update()
        manager.translate_request(Axis.POS_X)
        manager.update()
        manager.update()
        manager.translate_request(Axis.NEG_X)
        manager.update()
        assert seen == [True, False, True]

    def test_rotating_plane_breaks_contact(self, manager):
        manager.select_toggle()
        manager.translate_request(Axis.POS_Z)
        manager.select_toggle()
        assert manager.update() is True

        manager.rotate_drag((math.pi / 2) / manager.settings.rotation_speed, 0.0)
        assert manager.update() is False

    def test_uses_configured_tolerance(self, scene):
        manager = SceneManager(
            scene=scene, settings=InteractionSettings(acceptance_tolerance=0.05)
        )
        manager.translate_request(Axis.POS_X)
        assert manager.update() is True

        manager.settings.acceptance_tolerance = 0.002
        assert manager.update() is False

    def test_hue_follows_collision(self, manager):
        manager.update()
        assert manager.hue()[0, 0] == 1.0
        manager.translate_request(Axis.POS_X)
        manager.update()
        assert manager.hue()[0, 0] == 0.0

    def test_scene_is_passed_through(self):
        scene = Scene.default()
        manager = SceneManager(scene=scene)
        assert manager.scene is scene
