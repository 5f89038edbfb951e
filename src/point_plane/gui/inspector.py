from typing import Unpack
from imgui_bundle import ImVec4, imgui, imgui_ctx
from pyglm import glm
from slangpy_imgui_bundle.render_targets.window import Window, WindowArgs

from point_plane.model.collision import signed_distance, world_normal
from point_plane.model.mesh import Mesh
from point_plane.model.scene import SelectedObject
from point_plane.view_model.scene_manager import CONTROLS_HELP, SceneManager


COLLIDING_COLOR = ImVec4(1.0, 0.0, 1.0, 1.0)
APART_COLOR = ImVec4(0.0, 1.0, 0.0, 1.0)


class InspectorArgs(WindowArgs):
    scene_manager: SceneManager


class InspectorWindow(Window):
    _scene_manager: SceneManager

    def __init__(self, **kwargs: Unpack[InspectorArgs]) -> None:
        super().__init__(**kwargs)
        self._scene_manager = kwargs["scene_manager"]

    def render_window(self, time: float, delta_time: float, open: bool | None) -> bool:
        with imgui_ctx.begin("Inspector", p_open=open) as window:
            with imgui_ctx.push_item_width(-150):
                self._render_selection()
                self._render_collision()
                self._render_object(self._scene_manager.scene.plane)
                self._render_object(self._scene_manager.scene.point)
                self._render_settings()
                imgui.separator_text("Controls")
                imgui.text_wrapped(CONTROLS_HELP)
            return window.opened

    def _render_selection(self) -> None:
        imgui.separator_text("Selection")
        selected = self._scene_manager.scene.selected
        for option in SelectedObject:
            if imgui.radio_button(option.value.capitalize(), selected is option):
                if selected is not option:
                    self._scene_manager.select_toggle()
            imgui.same_line()
        imgui.new_line()

    def _render_collision(self) -> None:
        imgui.separator_text("Collision")
        scene = self._scene_manager.scene
        model = scene.plane.get_transform_matrix()
        normal = world_normal(scene.collider, model)
        distance = signed_distance(scene.collider, model, scene.point.world_position)
        imgui.text(f"World normal: ({normal.x:.3f}, {normal.y:.3f}, {normal.z:.3f})")
        imgui.text(f"Distance along normal: {distance:.4f}")
        if self._scene_manager.colliding.value:
            imgui.text_colored(COLLIDING_COLOR, "Colliding")
        else:
            imgui.text_colored(APART_COLOR, "Not colliding")

    def _render_object(self, obj: Mesh) -> None:
        imgui.separator_text(obj.name.capitalize())
        transform = obj.transform
        p = obj.world_position
        q = transform.orientation
        imgui.text(f"Position: ({p.x:.3f}, {p.y:.3f}, {p.z:.3f})")
        imgui.text(f"Rotation (wxyz): ({q.w:.3f}, {q.x:.3f}, {q.y:.3f}, {q.z:.3f})")
        if imgui.button(f"Reset Rotation##{obj.name}"):
            transform.orientation = glm.quat(1.0, 0.0, 0.0, 0.0)

    def _render_settings(self) -> None:
        imgui.separator_text("Settings")
        settings = self._scene_manager.settings
        changed, value = imgui.slider_float(
            "Movement Speed", settings.movement_speed, 0.001, 0.2
        )
        if changed:
            settings.movement_speed = value
        changed, value = imgui.slider_float(
            "Rotation Speed", settings.rotation_speed, 0.001, 0.1
        )
        if changed:
            settings.rotation_speed = value
        changed, value = imgui.slider_float(
            "Acceptance Tolerance",
            settings.acceptance_tolerance,
            0.0,
            0.05,
            format="%.4f",
            flags=imgui.SliderFlags_.logarithmic.value,
        )
        if changed:
            settings.acceptance_tolerance = value
