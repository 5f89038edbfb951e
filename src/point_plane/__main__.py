"""
The entry point for the point-plane collision demo.
"""

import asyncio
import logging
import os

from point_plane.gui.app import PointPlaneApp


log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
log_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(level=log_level)


if __name__ == "__main__":
    app = PointPlaneApp()
    asyncio.run(app.run())
