"""
Point-plane demo dockspace.
"""

from typing import TypedDict, Unpack
from imgui_bundle import imgui
from reactivex.subject import BehaviorSubject
from slangpy_imgui_bundle.render_targets.dockspace import Dockspace, DockspaceArgs
from slangpy_imgui_bundle.render_targets.menu import Menu, MenuItem
from slangpy_imgui_bundle.utils.fps_counter import FPSCounter
from slangpy_imgui_bundle.render_targets.render_target import RenderTarget, RenderArgs

from point_plane.model.scene import SelectedObject


class CollisionStatusArgs(RenderArgs):
    colliding: BehaviorSubject[bool]


class CollisionStatus(RenderTarget):
    def __init__(self, **kwargs: Unpack[CollisionStatusArgs]) -> None:
        super().__init__(**kwargs)
        self._colliding = kwargs["colliding"]

    def render(self, time: float, delta_time: float) -> None:
        if self._colliding.value:
            imgui.text_colored((1.0, 0.0, 1.0, 1.0), "Colliding")
        else:
            imgui.text_colored((0.0, 1.0, 0.0, 1.0), "Not Colliding")


class SelectionStatusArgs(RenderArgs):
    selection: BehaviorSubject[SelectedObject]


class SelectionStatus(RenderTarget):
    def __init__(self, **kwargs: Unpack[SelectionStatusArgs]) -> None:
        super().__init__(**kwargs)
        self._selection = kwargs["selection"]

    def render(self, time: float, delta_time: float) -> None:
        imgui.text(f"Selected: {self._selection.value.value}")


class WindowOpenSubjects(TypedDict):
    viewport_open: BehaviorSubject[bool]
    inspector_open: BehaviorSubject[bool]


class SceneState(TypedDict):
    colliding: BehaviorSubject[bool]
    selection: BehaviorSubject[SelectedObject]


class PointPlaneDockspaceArgs(DockspaceArgs):
    window_open_subjects: WindowOpenSubjects
    scene_state: SceneState


class PointPlaneDockspace(Dockspace):
    def __init__(self, **kwargs: Unpack[PointPlaneDockspaceArgs]) -> None:
        super().__init__(**kwargs)

        self._menu_items = [
            Menu(
                device=self._device,
                adapter=self._adapter,
                name="Views",
                children=[
                    MenuItem(
                        device=self._device,
                        adapter=self._adapter,
                        name="Viewport",
                        open=kwargs["window_open_subjects"]["viewport_open"],
                        on_open_changed=lambda opened: kwargs["window_open_subjects"][
                            "viewport_open"
                        ].on_next(opened),
                    ),
                    MenuItem(
                        device=self._device,
                        adapter=self._adapter,
                        name="Inspector",
                        open=kwargs["window_open_subjects"]["inspector_open"],
                        on_open_changed=lambda opened: kwargs["window_open_subjects"][
                            "inspector_open"
                        ].on_next(opened),
                    ),
                ],
            ),
        ]

        self._status_items = [
            FPSCounter(),
            SelectionStatus(selection=kwargs["scene_state"]["selection"]),
            CollisionStatus(colliding=kwargs["scene_state"]["colliding"]),
        ]

    def build(self, dockspace_id: int) -> None:
        # Build dock space.
        if not imgui.internal.dock_builder_get_node(dockspace_id):
            imgui.internal.dock_builder_remove_node(dockspace_id)
            main_id = imgui.internal.dock_builder_add_node(dockspace_id)
            # Split the main node into the viewport and the inspector.
            res = imgui.internal.dock_builder_split_node(main_id, imgui.Dir.left, 0.7)
            viewport_id = res.id_at_dir
            inspector_id = res.id_at_opposite_dir

            imgui.internal.dock_builder_dock_window("Viewport", viewport_id)
            imgui.internal.dock_builder_dock_window("Inspector", inspector_id)

            imgui.internal.dock_builder_finish(dockspace_id)
