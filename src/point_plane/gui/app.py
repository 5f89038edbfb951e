"""
Point-plane collision demo application.
"""

import logging
import platform
from reactivex.subject import BehaviorSubject
from slangpy_imgui_bundle.app import App
import slangpy as spy

from point_plane import SHADER_PATH
from point_plane.gui.dockspace import PointPlaneDockspace
from point_plane.gui.inspector import InspectorWindow
from point_plane.gui.viewport import ViewportWindow
from point_plane.settings import InteractionSettings
from point_plane.view_model.scene_manager import CONTROLS_HELP, SceneManager


logger = logging.getLogger(__name__)


_system = platform.system()
if _system == "Darwin":
    DEVICE_TYPE = spy.DeviceType.metal
elif _system in ("Windows", "Linux"):
    DEVICE_TYPE = spy.DeviceType.vulkan
else:
    # Default to vulkan for unknown/other platforms
    DEVICE_TYPE = spy.DeviceType.vulkan


class PointPlaneApp(App):
    window_title = "Point - Plane Collision Detection"
    fb_scale = 1.0
    font_size = 16
    device_type = DEVICE_TYPE

    scene_manager: SceneManager

    _viewport_open: BehaviorSubject[bool]
    _inspector_open: BehaviorSubject[bool]

    def __init__(self, settings: InteractionSettings | None = None) -> None:
        super().__init__(user_shader_paths=[SHADER_PATH])

        if settings is None:
            settings = InteractionSettings.from_env()
        self.scene_manager = SceneManager(settings=settings)
        logger.info("Starting with %s", settings)
        logger.info(CONTROLS_HELP)

        self._viewport_open = BehaviorSubject(True)
        self._inspector_open = BehaviorSubject(True)

        self._dockspace = PointPlaneDockspace(
            device=self.device,
            adapter=self.adapter,
            window_size=self._curr_window_size,
            window_open_subjects={
                "viewport_open": self._viewport_open,
                "inspector_open": self._inspector_open,
            },
            scene_state={
                "colliding": self.scene_manager.colliding,
                "selection": self.scene_manager.selection,
            },
        )

        self._render_targets = [
            ViewportWindow(
                device=self.device,
                adapter=self.adapter,
                open=self._viewport_open,
                on_close=lambda: self._viewport_open.on_next(False),
                scene_manager=self.scene_manager,
            ),
            InspectorWindow(
                device=self.device,
                adapter=self.adapter,
                open=self._inspector_open,
                on_close=lambda: self._inspector_open.on_next(False),
                scene_manager=self.scene_manager,
            ),
        ]
