"""
Interaction settings for the point-plane demo.
"""

import logging
import math
import os
from dataclasses import dataclass, fields
from typing import Mapping

from point_plane.errors import InvalidSettingsError


logger = logging.getLogger(__name__)


ENV_PREFIX = "POINT_PLANE_"


@dataclass
class InteractionSettings:
    """Tunable constants for input mapping and the collision test.

    :param movement_speed: World units moved per key press or repeat.
    :param rotation_speed: Radians rotated per pixel of mouse drag.
    :param acceptance_tolerance: Half-thickness of the band around the plane
        that still counts as a collision. Raising it gives friendlier visual
        snapping at the cost of false positives; lowering it is stricter.
    """

    movement_speed: float = 0.02
    rotation_speed: float = 0.01
    acceptance_tolerance: float = 0.002

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise InvalidSettingsError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0.0:
                raise InvalidSettingsError(
                    f"{f.name} must be finite and non-negative, got {value!r}"
                )
            setattr(self, f.name, float(value))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "InteractionSettings":
        """Build settings from ``POINT_PLANE_*`` environment variables.

        :param environ: Mapping to read from. Defaults to ``os.environ``.
        :return: Settings with unset variables left at their defaults.
        """
        if environ is None:
            environ = os.environ
        values = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            raw = environ.get(key)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[f.name] = float(raw)
            except ValueError as e:
                raise InvalidSettingsError(f"{key}={raw!r} is not a number") from e
            logger.debug("Using %s=%s from environment", key, raw)
        return cls(**values)
