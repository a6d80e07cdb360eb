"""Parsing of the individual element lines of a scene file."""

from __future__ import annotations

from collections.abc import Sequence

from .fields import ParseError, parse_color, parse_direction, parse_position
from .numbers import parse_float, parse_int
from .scene import (
    MAX_OBJECTS,
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Scene,
    Sphere,
)

MAX_DIMENSION = 200.0
MAX_FOV = 180


def _expect_count(tokens: Sequence[str], count: int, message: str) -> list[str]:
    values = list(tokens)
    if len(values) != count:
        raise ParseError(message)
    return values


def _float_field(text: str, message: str) -> float:
    try:
        return parse_float(text)
    except ValueError:
        raise ParseError(message) from None


def parse_ambient(tokens: Sequence[str], scene: Scene) -> Ambient:
    """Parse ``A ratio r,g,b`` and store it in the scene."""
    if scene.ambient is not None:
        raise ParseError("Only 1 ambience light source is allowed.")
    values = _expect_count(
        tokens, 3, "3 set of values are neccessary for ambient light."
    )
    color = parse_color(values[-1])
    ratio = _float_field(
        values[1],
        "One of the values of ambient light has the wrong data type "
        "or is wrongly formatted.",
    )
    if not 0 <= ratio <= 1:
        raise ParseError("Ambient strength is out of range.")
    scene.ambient = Ambient(ratio=ratio, color=color)
    return scene.ambient


def parse_camera(tokens: Sequence[str], scene: Scene) -> Camera:
    """Parse ``C x,y,z dx,dy,dz fov`` and store it in the scene."""
    if scene.camera is not None:
        raise ParseError("Only 1 camera is allowed.")
    values = _expect_count(
        tokens, 4, "4 set of values are neccessary for the camera."
    )
    position = parse_position(values[1])
    direction = parse_direction(values[2])
    try:
        fov = parse_int(values[3])
    except ValueError:
        raise ParseError(
            "FOV of the camera has the wrong data type or is wrongly formatted."
        ) from None
    if not 0 <= fov <= MAX_FOV:
        raise ParseError("FOV is out of range.")
    scene.camera = Camera(position=position, direction=direction, fov=fov)
    return scene.camera


def parse_light(tokens: Sequence[str], scene: Scene) -> Light:
    """Parse ``L x,y,z brightness r,g,b`` and store it in the scene."""
    if scene.light is not None:
        raise ParseError("Only 1 light source is allowed.")
    values = _expect_count(
        tokens, 4, "4 set of values are neccessary for the light source."
    )
    position = parse_position(values[1])
    color = parse_color(values[-1])
    brightness = _float_field(
        values[2], "Brightness has the wrong data type or is wrongly formatted."
    )
    if not 0 <= brightness <= 1:
        raise ParseError("Light brightness is out of range.")
    scene.light = Light(position=position, color=color, brightness=brightness)
    return scene.light


def parse_sphere(tokens: Sequence[str], scene: Scene) -> Sphere:
    """Parse ``sp x,y,z diameter r,g,b`` and append it to the scene."""
    values = _expect_count(
        tokens, 4, "4 set of values are neccessary for the sphere."
    )
    if len(scene.spheres) >= MAX_OBJECTS:
        raise ParseError("Only a maximum of 50 spheres allowed.")
    center = parse_position(values[1])
    color = parse_color(values[-1])
    diameter = _float_field(
        values[2],
        "diameter of the sphere has the wrong data type or is wrongly formatted.",
    )
    if diameter <= 0:
        raise ParseError("diameter has a negative or 0 value.")
    if diameter > MAX_DIMENSION:
        raise ParseError("diameter can't have a value bigger than 200.")
    sphere = Sphere(center=center, color=color, diameter=diameter)
    scene.spheres.append(sphere)
    return sphere


def parse_plane(tokens: Sequence[str], scene: Scene) -> Plane:
    """Parse ``pl x,y,z nx,ny,nz r,g,b`` and append it to the scene."""
    values = _expect_count(
        tokens, 4, "4 set of values are neccessary for the plane."
    )
    if len(scene.planes) >= MAX_OBJECTS:
        raise ParseError("Only a maximum of 50 planes allowed.")
    point = parse_position(values[1])
    normal = parse_direction(values[2])
    color = parse_color(values[-1])
    plane = Plane(point=point, color=color, normal=normal)
    scene.planes.append(plane)
    return plane


def parse_cylinder(tokens: Sequence[str], scene: Scene) -> Cylinder:
    """Parse ``cy x,y,z ax,ay,az diameter height r,g,b`` into the scene."""
    values = _expect_count(
        tokens, 6, "6 set of values are neccessary for the cylinder."
    )
    if len(scene.cylinders) >= MAX_OBJECTS:
        raise ParseError("Only a maximum of 50 cylinders allowed.")
    center = parse_position(values[1])
    axis = parse_direction(values[2])
    format_message = (
        "diameter of the cylinder has the wrong data type or is wrongly formatted."
    )
    height = _float_field(values[4], format_message)
    diameter = _float_field(values[3], format_message)
    if diameter <= 0 or height <= 0:
        raise ParseError("diameter or height has a negative or 0 value.")
    if diameter > MAX_DIMENSION or height > MAX_DIMENSION:
        raise ParseError("diameter or height can't have a value bigger than 200.")
    color = parse_color(values[-1])
    cylinder = Cylinder(
        center=center, color=color, axis=axis, diameter=diameter, height=height
    )
    scene.cylinders.append(cylinder)
    return cylinder