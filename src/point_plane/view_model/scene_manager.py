"""
Scene manager for the point-plane collision demo.
"""

import logging
from enum import Enum
from pyglm import glm
from reactivex.subject import BehaviorSubject

from point_plane.model.collision import test_collision
from point_plane.model.mesh import hue_matrix
from point_plane.model.scene import Scene, SelectedObject
from point_plane.settings import InteractionSettings


logger = logging.getLogger(__name__)


CONTROLS_HELP = (
    "Use WASD to move the selected shape in the XY plane.\n"
    "Use left CTRL & left shift to move the selected shape along Z axis.\n"
    "Left click and drag the mouse to rotate the selected shape.\n"
    "Use spacebar to swap the selected shape."
)


class Axis(Enum):
    """Signed world axes a translation request can move along."""

    POS_X = (1.0, 0.0, 0.0)
    NEG_X = (-1.0, 0.0, 0.0)
    POS_Y = (0.0, 1.0, 0.0)
    NEG_Y = (0.0, -1.0, 0.0)
    POS_Z = (0.0, 0.0, 1.0)
    NEG_Z = (0.0, 0.0, -1.0)

    @property
    def vector(self) -> glm.vec3:
        return glm.vec3(*self.value)


class SceneManager:
    """Applies input to the selected object and evaluates the collision each frame."""

    scene: Scene
    settings: InteractionSettings
    colliding: BehaviorSubject[bool]
    selection: BehaviorSubject[SelectedObject]

    def __init__(
        self,
        scene: Scene | None = None,
        settings: InteractionSettings | None = None,
    ):
        self.scene = scene if scene is not None else Scene.default()
        self.settings = settings if settings is not None else InteractionSettings()
        self.colliding = BehaviorSubject(self._evaluate())
        self.selection = BehaviorSubject(self.scene.selected)

    def select_toggle(self) -> SelectedObject:
        """Swap which object receives translation and rotation input."""
        selected = self.scene.toggle_selection()
        logger.info(f"Selected {selected.value}")
        self.selection.on_next(selected)
        return selected

    def translate_request(self, axis: Axis) -> None:
        """Move the selected object one step along a world axis.

        :param axis: The signed axis to move along.
        """
        obj = self.scene.selected_object
        obj.transform.apply_translation_delta(axis.vector * self.settings.movement_speed)
        logger.debug(f"Moved {obj.name} along {axis.name}: {obj.world_position}")

    def rotate_drag(self, delta_x_pixels: float, delta_y_pixels: float) -> None:
        """Rotate the selected object from a mouse drag.

        Horizontal motion yaws about world Y, vertical motion pitches about
        world X.

        :param delta_x_pixels: Horizontal cursor motion since the last sample.
        :param delta_y_pixels: Vertical cursor motion since the last sample.
        """
        if delta_x_pixels == 0.0 and delta_y_pixels == 0.0:
            return
        speed = self.settings.rotation_speed
        obj = self.scene.selected_object
        obj.transform.apply_rotation_delta(
            yaw_angle=delta_x_pixels * speed,
            pitch_angle=delta_y_pixels * speed,
        )
        logger.debug(f"Rotated {obj.name} by ({delta_x_pixels}, {delta_y_pixels}) px")

    def update(self) -> bool:
        """Evaluate the collision for the current poses.

        :return: True if the point lies on the plane.
        """
        colliding = self._evaluate()
        if colliding != self.colliding.value:
            logger.debug("Collision %s", "started" if colliding else "ended")
            self.colliding.on_next(colliding)
        return colliding

    def hue(self) -> glm.mat4:
        """Color matrix for the last evaluated collision state."""
        return hue_matrix(self.colliding.value)

    def _evaluate(self) -> bool:
        return test_collision(
            self.scene.collider,
            self.scene.plane.get_transform_matrix(),
            self.scene.point.world_position,
            acceptance_tolerance=self.settings.acceptance_tolerance,
        )
