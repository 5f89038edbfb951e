"""
Tests for the scene, its meshes and the hue tint.
"""

import numpy as np
import pytest
from pyglm import glm

from conftest import assert_vec_close
from point_plane.model.cameras import PerspectiveCamera
from point_plane.model.mesh import (
    Mesh,
    Topology,
    hue_matrix,
    plane_quad_mesh,
    point_mesh,
)
from point_plane.model.scene import Scene, SelectedObject


class TestMeshes:
    def test_plane_quad_is_two_triangles(self):
        mesh = plane_quad_mesh()
        assert len(mesh.vertices) == 6
        assert mesh.topology is Topology.TRIANGLE_LIST
        assert all(v.x == 0.0 for v in mesh.vertices)

    def test_point_is_single_vertex_at_origin(self):
        mesh = point_mesh()
        assert mesh.topology is Topology.POINT_LIST
        assert len(mesh.vertices) == 1
        assert_vec_close(mesh.vertices[0], (0.0, 0.0, 0.0))

    def test_color_count_must_match_vertices(self):
        with pytest.raises(ValueError):
            Mesh(name="bad", vertices=[glm.vec3(0.0)], colors=[])

    def test_vertex_data_layout(self):
        data = point_mesh().vertex_data(hue_matrix(True))
        assert data.dtype == np.float32
        assert data.shape == (1, 7)
        assert np.allclose(data[0], [0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 1.0])


class TestHue:
    def test_apart_removes_red(self):
        hue = hue_matrix(False)
        plane_color = plane_quad_mesh().tinted_colors(hue)[0]
        point_color = point_mesh().tinted_colors(hue)[0]
        # Blue plane, green point.
        assert np.allclose(np.array(plane_color), [0.0, 0.0, 1.0, 1.0])
        assert np.allclose(np.array(point_color), [0.0, 1.0, 0.0, 1.0])

    def test_colliding_keeps_red(self):
        hue = hue_matrix(True)
        plane_color = plane_quad_mesh().tinted_colors(hue)[0]
        point_color = point_mesh().tinted_colors(hue)[0]
        # Pink plane, yellow point.
        assert np.allclose(np.array(plane_color), [1.0, 0.0, 1.0, 1.0])
        assert np.allclose(np.array(point_color), [1.0, 1.0, 0.0, 1.0])


class TestScene:
    def test_collider_derived_from_quad(self, scene):
        assert_vec_close(scene.collider.normal, (1.0, 0.0, 0.0))

    def test_default_layout(self):
        scene = Scene.default()
        assert_vec_close(scene.plane.world_position, (0.15, 0.0, 0.0))
        assert_vec_close(scene.point.world_position, (-0.15, 0.0, 0.0))
        assert scene.selected is SelectedObject.PLANE
        assert scene.selected_object is scene.plane

    def test_toggle_selection(self, scene):
        assert scene.toggle_selection() is SelectedObject.POINT
        assert scene.selected_object is scene.point
        assert scene.toggle_selection() is SelectedObject.PLANE
        assert scene.selected_object is scene.plane

    def test_scenes_are_independent(self):
        a = Scene.default()
        b = Scene()
        assert_vec_close(b.plane.world_position, (0.0, 0.0, 0.0))
        assert a.plane is not b.plane


class TestCamera:
    def test_view_moves_origin_in_front_of_camera(self):
        camera = PerspectiveCamera()
        p = camera.view_matrix() * glm.vec4(0.0, 0.0, 0.0, 1.0)
        assert_vec_close(glm.vec3(p), (0.0, 0.0, -2.0))

    def test_origin_projects_to_screen_center(self):
        camera = PerspectiveCamera()
        clip = camera.view_projection(800, 800) * glm.vec4(0.0, 0.0, 0.0, 1.0)
        assert clip.x / clip.w == pytest.approx(0.0, abs=1e-6)
        assert clip.y / clip.w == pytest.approx(0.0, abs=1e-6)
