"""Camera viewport: the grid of pixels that primary rays pass through."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .scene import Scene
from .vectors import Vec

UP_GUIDE = Vec(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Viewport:
    """A viewport one unit in front of the camera, split into pixels."""

    res_x: int
    res_y: int
    origin: Vec
    width: float
    height: float
    back: Vec
    right: Vec
    up: Vec
    top_left: Vec
    pixel_delta_x: Vec
    pixel_delta_y: Vec

    def ray(self, x: float, y: float) -> Vec:
        """Direction from the camera through pixel ``(x, y)``, not normalised."""
        pixel = self.top_left + self.pixel_delta_x * x + self.pixel_delta_y * y
        return pixel - self.origin


def create_viewport(scene: Scene, res_x: int, res_y: int) -> Viewport:
    """Build the viewport for the scene's camera at the given resolution."""
    if res_x <= 0 or res_y <= 0:
        raise ValueError("resolution must be positive")
    camera = scene.camera
    if camera is None:
        raise ValueError("scene has no camera")

    look_at = camera.direction + camera.position
    back = (camera.position - look_at).normalized()
    try:
        right = UP_GUIDE.cross(back).normalized()
    except ValueError:
        raise ValueError(
            "camera direction must not be parallel to the vertical axis"
        ) from None
    up = back.cross(right)

    height = 2 * math.tan(math.radians(camera.fov) / 2)
    width = height * res_x / res_y
    span_x = right * width
    span_y = up * -height

    top_left = camera.position - back - span_x / 2 - span_y / 2
    return Viewport(
        res_x=res_x,
        res_y=res_y,
        origin=camera.position,
        width=width,
        height=height,
        back=back,
        right=right,
        up=up,
        top_left=top_left,
        pixel_delta_x=span_x / res_x,
        pixel_delta_y=span_y / res_y,
    )