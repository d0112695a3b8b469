import numpy as np

from . import constants as C
from .analysis import center_of_mass


class Camera:
    """Top-down view of the x/z plane with smooth focus following."""

    def __init__(self, zoom=C.ZOOM_BASE, pan_offset=None):
        self.zoom = float(zoom)
        self.pan_offset = (
            np.array(pan_offset, dtype=float) if pan_offset is not None else C.INITIAL_PAN_OFFSET.astype(float).copy()
        )

    @staticmethod
    def project(pos):
        """Drop the vertical axis: world (x, y, z) -> plane (x, z)."""
        pos = np.asarray(pos, dtype=float)
        return pos[..., [0, 2]]

    def world_to_screen(self, pos):
        """Convert a world position to screen coordinates."""
        return self.project(pos) * self.zoom + self.pan_offset

    def screen_radius(self, radius):
        return int(np.clip(radius * self.zoom, C.MIN_DRAW_RADIUS, C.MAX_DRAW_RADIUS))

    @staticmethod
    def is_visible(screen_pos, radius, size):
        """True when a circle at ``screen_pos`` touches a ``size`` window."""
        x, y = screen_pos
        width, height = size
        return -radius <= x <= width + radius and -radius <= y <= height + radius

    def update_focus(self, focus, bodies, screen_center):
        """Smoothly pan towards ``focus``: a body, ``"COM"`` or None."""
        if focus is None:
            return
        if focus == "COM":
            com_pos, _ = center_of_mass(bodies)
            if com_pos is None:
                return
            target_pos = self.project(com_pos)
        else:
            target_pos = self.project(focus.pos)

        target = np.asarray(screen_center, dtype=float) - target_pos * self.zoom
        self.pan_offset += (target - self.pan_offset) * C.CAMERA_SMOOTHING
