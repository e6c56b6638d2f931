"""An orbit camera around a target point."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from forestplot.mesh import Vec3

ROTATE_SENSITIVITY = 0.005
PAN_SENSITIVITY_PER_RADIUS = 0.0015
PITCH_LIMIT = 1.55
MIN_RADIUS = 0.1
MAX_RADIUS = 1000.0
PIXEL_SCROLL_SCALE = 0.01


class MouseButton(enum.Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


@dataclass
class Camera:
    """Orbits ``target`` at ``radius``; yaw and pitch are in radians, z is up."""

    target: Vec3 = field(default_factory=lambda: Vec3.ZERO)
    yaw: float = math.radians(45.0)
    pitch: float = math.radians(30.0)
    radius: float = 10.0

    def eye_position(self) -> Vec3:
        cos_p = math.cos(self.pitch)
        offset = Vec3(
            self.radius * cos_p * math.cos(self.yaw),
            self.radius * cos_p * math.sin(self.yaw),
            self.radius * math.sin(self.pitch),
        )
        return self.target + offset

    def drag(self, dx, dy, button) -> None:
        """Rotate with the left button, pan with the middle; others do nothing."""
        if button is MouseButton.LEFT:
            self.yaw -= dx * ROTATE_SENSITIVITY
            self.pitch = min(max(self.pitch + dy * ROTATE_SENSITIVITY, -PITCH_LIMIT), PITCH_LIMIT)
        elif button is MouseButton.MIDDLE:
            sensitivity = self.radius * PAN_SENSITIVITY_PER_RADIUS
            forward = (self.target - self.eye_position()).unit()
            right = forward.cross(Vec3.K).unit()
            up = right.cross(forward).unit()
            self.target = self.target + right * (-dx * sensitivity) + up * (dy * sensitivity)

    def _zoom(self, amount: float) -> None:
        self.radius = min(max(self.radius - amount, MIN_RADIUS), MAX_RADIUS)

    def scroll_lines(self, y) -> None:
        """Zoom by a wheel delta measured in lines."""
        self._zoom(y * 1.0)

    def scroll_pixels(self, y) -> None:
        """Zoom by a wheel delta measured in pixels."""
        self._zoom(y * PIXEL_SCROLL_SCALE)