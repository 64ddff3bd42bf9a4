"""Orbit camera that circles a target point."""

from __future__ import annotations

import math
from dataclasses import dataclass

MAX_PITCH = 1.55


@dataclass
class OrbitCamera:
    """Camera on a sphere of ``radius`` around ``target``, steered by yaw and pitch."""

    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 18.0
    yaw: float = 0.0
    pitch: float = 0.4
    sensitivity: float = 0.008

    def orbit(self, dx: float, dy: float) -> tuple[float, float, float]:
        """Turn by a pointer delta, clamp the pitch and return the new position.

        A zero delta leaves the angles untouched.
        """
        if dx == 0.0 and dy == 0.0:
            return self.position()
        self.yaw += dx * self.sensitivity
        self.pitch = max(-MAX_PITCH, min(MAX_PITCH, self.pitch + dy * self.sensitivity))
        return self.position()

    def position(self) -> tuple[float, float, float]:
        """World-space position of the camera."""
        sy, cy = math.sin(self.yaw), math.cos(self.yaw)
        sp, cp = math.sin(self.pitch), math.cos(self.pitch)
        tx, ty, tz = self.target
        return (
            tx + cy * cp * self.radius,
            ty + sp * self.radius,
            tz + sy * cp * self.radius,
        )