"""Rendering a scene into an image and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .intersect import Hit, hit_scene
from .parser import SceneFileError, parse_file
from .scene import Scene
from .shading import calc_shadowlight, set_color
from .viewport import Viewport, create_viewport

DEFAULT_WIDTH = 1440
DEFAULT_OUTPUT = "minirt.ppm"


class Image:
    """A width x height grid of ``0xRRGGBB`` pixels, black to start with."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.width + x

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self._pixels[self._offset(x, y)] = color & 0xFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[self._offset(x, y)]

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for color in self._pixels:
            body += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        return header + bytes(body)

    def save(self, path: str | Path) -> None:
        Path(path).write_bytes(self.to_ppm())


def send_rays(scene: Scene, viewport: Viewport, image: Image) -> None:
    """Trace one ray per pixel and draw every pixel that hits an object."""
    if (image.width, image.height) != (viewport.res_x, viewport.res_y):
        raise ValueError("image and viewport sizes differ")
    origin = scene.camera.position
    hit = Hit()
    for y in range(viewport.res_y):
        for x in range(viewport.res_x):
            ray = viewport.ray(x, y)
            if hit_scene(origin, ray, scene, hit):
                calc_shadowlight(origin, ray, scene, hit)
                image.set_pixel(x, y, set_color(hit, scene))


def render(scene: Scene, width: int, height: int) -> Image:
    """Render the scene into a new image of the given size."""
    viewport = create_viewport(scene, width, height)
    image = Image(width, height)
    send_rays(scene, viewport, image)
    return image


def _frame_height(width: int) -> int:
    return (width // 16) * 9


def main(argv: list[str] | None = None) -> int:
    """Render a scene file to a PPM image; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="minirt", description="Render an .rt scene file to a PPM image."
    )
    parser.add_argument("scene", help="scene file with the .rt extension")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help="where to write the image")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help="image width; the height keeps a 16:9 frame")
    parser.add_argument("--debug", action="store_true",
                        help="print the parsed scene values")
    args = parser.parse_args(argv)

    try:
        scene = parse_file(args.scene)
        if args.debug:
            print(scene.describe(), end="")
        print("-----SENDING RAYS----")
        image = render(scene, args.width, _frame_height(args.width))
        print("----FINISHED SENDING RAYS----")
        image.save(args.output)
    except (SceneFileError, ValueError, OSError) as exc:
        print(f"Error\n{exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())