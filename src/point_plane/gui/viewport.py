"""
Viewport window.
"""

import logging
from typing import Unpack
from imgui_bundle import ImVec2, imgui, imgui_ctx
import slangpy as spy
import numpy as np
from slangpy_imgui_bundle.render_targets.window import Window, WindowArgs

from point_plane.renderer.scene_renderer import SceneRenderer
from point_plane.view_model.scene_manager import Axis, SceneManager


logger = logging.getLogger(__name__)


KEY_AXES = {
    imgui.Key.w: Axis.POS_Y,
    imgui.Key.a: Axis.NEG_X,
    imgui.Key.s: Axis.NEG_Y,
    imgui.Key.d: Axis.POS_X,
    imgui.Key.left_ctrl: Axis.POS_Z,
    imgui.Key.left_shift: Axis.NEG_Z,
}


class ViewportWindowArgs(WindowArgs):
    scene_manager: SceneManager


class ViewportWindow(Window):
    """Draws the scene and turns keyboard and mouse input into transform updates."""

    _viewport_size: ImVec2 = ImVec2(1.0, 1.0)

    def __init__(self, **kwargs: Unpack[ViewportWindowArgs]) -> None:
        super().__init__(**kwargs)
        self._scene_manager = kwargs["scene_manager"]

        # Require device.
        device = kwargs.get("device")
        if device is None:
            raise ValueError("ViewportWindow requires a device.")
        self._device = device
        # Require adapater.
        adapter = kwargs.get("adapter")
        if adapter is None:
            raise ValueError("ViewportWindow requires an adapter.")
        self._adapter = adapter

        self._render_tex = self._create_render_texture(self._viewport_size)
        self._render_tex_id = self._adapter.register_texture(self._render_tex)
        self._scene_renderer = SceneRenderer(
            device=self._device, render_target=self._render_tex
        )

        # Cursor position at the previous frame of a left-button drag.
        self._last_mouse_pos: tuple[float, float] | None = None

    def _create_render_texture(self, size: ImVec2) -> spy.Texture:
        return self._device.create_texture(
            type=spy.TextureType.texture_2d,
            format=spy.Format.rgba8_unorm,
            width=int(size.x),
            height=int(size.y),
            usage=spy.TextureUsage.render_target | spy.TextureUsage.shader_resource,
            label="viewport_render_texture",
            data=np.zeros((int(size.y), int(size.x), 4), dtype=np.uint8),
        )

    def render_window(self, time: float, delta_time: float, open: bool | None) -> bool:
        imgui.set_next_window_size(
            ImVec2(800.0, 800.0),
            imgui.Cond_.first_use_ever.value,
        )
        with imgui_ctx.begin("Viewport", p_open=open) as window:
            avail_size = imgui.get_content_region_avail()
            if avail_size != self._viewport_size:
                self._resize_viewport(avail_size)

            # Check for zero size.
            if avail_size.x <= 0.0 or avail_size.y <= 0.0:
                return window.opened

            # Disable window move when interacting with the viewport.
            internal_window = imgui.internal.get_current_window()
            hovered = imgui.is_window_hovered() and imgui.is_mouse_hovering_rect(
                internal_window.inner_rect.min, internal_window.inner_rect.max
            )
            if hovered:
                internal_window.flags |= imgui.WindowFlags_.no_move.value
            else:
                internal_window.flags &= ~imgui.WindowFlags_.no_move.value

            if imgui.is_window_focused():
                self._process_keyboard()
            self._process_mouse(hovered)

            self._scene_manager.update()
            self._scene_renderer.render_scene(
                self._scene_manager.scene, hue=self._scene_manager.hue()
            )
            imgui.image(self._render_tex_id, avail_size)

            return window.opened

    def _resize_viewport(self, new_size: ImVec2) -> None:
        logger.debug(f"Viewport available size changed to {new_size}")
        # Check for zero size.
        if new_size.x <= 0.0 or new_size.y <= 0.0:
            return
        self._adapter.unregister_texture(self._render_tex_id)
        self._render_tex = self._create_render_texture(new_size)
        self._render_tex_id = self._adapter.register_texture(self._render_tex)
        self._scene_renderer.update_render_target(self._render_tex)
        self._viewport_size = new_size

    def _process_keyboard(self) -> None:
        if imgui.is_key_pressed(imgui.Key.space, repeat=False):
            self._scene_manager.select_toggle()
        for key, axis in KEY_AXES.items():
            # Fires on the initial press and on key repeat.
            if imgui.is_key_pressed(key, repeat=True):
                self._scene_manager.translate_request(axis)

    def _process_mouse(self, hovered: bool) -> None:
        """Rotate the selected object while the left button is dragged."""
        left_down = imgui.is_mouse_down(imgui.MouseButton_.left.value)
        if not left_down:
            self._last_mouse_pos = None
            return

        mouse_pos = imgui.get_mouse_pos()
        mouse_x = float(mouse_pos.x)
        mouse_y = float(mouse_pos.y)
        if self._last_mouse_pos is None:
            # Only start a drag inside the viewport.
            if hovered:
                self._last_mouse_pos = (mouse_x, mouse_y)
            return

        dx = mouse_x - self._last_mouse_pos[0]
        dy = mouse_y - self._last_mouse_pos[1]
        self._last_mouse_pos = (mouse_x, mouse_y)
        self._scene_manager.rotate_drag(dx, dy)
