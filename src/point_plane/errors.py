"""
Exceptions raised by the point-plane core.
"""


class PointPlaneError(Exception):
    """Base class for errors raised by this package."""


class InvalidGeometryError(PointPlaneError, ValueError):
    """A plane was built from a zero, non-finite or degenerate normal."""


class InvalidSettingsError(PointPlaneError, ValueError):
    """An interaction setting is negative, non-finite or unparsable."""
