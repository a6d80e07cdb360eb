"""Diffuse lighting, shadows and the final colour of a hit."""

from __future__ import annotations

import math

from .intersect import (
    CYLINDER,
    NO_HIT,
    PLANE,
    SPHERE,
    Hit,
    hit_cylinder,
    hit_plane,
    hit_sphere,
    light_and_cam_in_plane,
    plane_normal,
    point_in_cylinder,
    point_in_plane,
    sphere_normal,
)
from .scene import Scene
from .vectors import Vec

SHADOW_THRESHOLD = 0.02
CHANNEL_MAX = 255


def _unit(vector: Vec) -> Vec:
    """Normalise, giving a NaN vector for a zero-length input."""
    length = vector.magnitude()
    if length == 0:
        return Vec(math.nan, math.nan, math.nan)
    return vector / length


def _shadow_ray(hit: Hit, scene: Scene) -> tuple[Vec, float]:
    ray = scene.light.position - hit.hitpoint
    return ray, ray.magnitude()


def _shadow_spheres(hit: Hit, shadow: Hit, scene: Scene) -> None:
    ray, distance = _shadow_ray(hit, scene)
    if distance > 0:
        for sphere in scene.spheres:
            if hit_sphere(hit.hitpoint, ray, shadow, sphere) and shadow.t < distance:
                hit.light_angle = 0.0
                hit.edgecase_status = 1
                return
    if hit.light_angle <= SHADOW_THRESHOLD:
        hit.light_angle = 0.0


def _shadow_planes(hit: Hit, shadow: Hit, scene: Scene) -> None:
    ray, distance = _shadow_ray(hit, scene)
    if distance == 0:
        return
    camera = scene.camera.position
    planes = iter(scene.planes)
    for plane in planes:
        if point_in_plane(plane, camera):
            # A plane holding the camera also hides the plane after it.
            next(planes, None)
        elif hit_plane(hit.hitpoint, ray, shadow, plane) and shadow.t < distance:
            hit.light_angle = 0.0


def _shadow_cylinders(hit: Hit, shadow: Hit, scene: Scene) -> None:
    ray, distance = _shadow_ray(hit, scene)
    if distance == 0:
        return
    for cylinder in scene.cylinders:
        if hit_cylinder(hit.hitpoint, ray, shadow, cylinder) and shadow.t < distance:
            hit.light_angle = 0.0


def _cylinder_edgecase(origin: Vec, hit: Hit, scene: Scene) -> None:
    """Light the inside of a cylinder that holds both the camera and the light."""
    cylinder = scene.cylinders[hit.index]
    if not point_in_cylinder(origin, cylinder):
        return
    if point_in_cylinder(scene.light.position, cylinder):
        probe = Hit()
        _shadow_spheres(hit, probe, scene)
        if probe.edgecase_status != 1:
            hit.light_angle = 1.0
    else:
        hit.light_angle = 0.0


def calc_shadowlight(origin: Vec, ray: Vec, scene: Scene, hit: Hit) -> None:
    """Set the normal and the light angle of ``hit``, taking shadows into account."""
    if hit.kind == SPHERE:
        sphere_normal(origin, ray, hit, scene.spheres[hit.index])
    elif hit.kind == PLANE:
        plane_normal(origin, ray, hit, scene.planes[hit.index])
    elif hit.kind == CYLINDER:
        hit.normal = _unit(hit.normal)
    hit.t = NO_HIT
    shadow = Hit()
    to_surface = _unit(hit.hitpoint - scene.light.position)
    hit.light_angle = -hit.normal.dot(to_surface)
    _shadow_spheres(hit, shadow, scene)
    _shadow_planes(hit, shadow, scene)
    _shadow_cylinders(hit, shadow, scene)
    if hit.kind == CYLINDER:
        _cylinder_edgecase(origin, hit, scene)
    if light_and_cam_in_plane(scene):
        hit.light_angle = 0.0


def set_color(hit: Hit, scene: Scene) -> int:
    """Return the lit colour of the hit object packed as ``0xRRGGBB``."""
    objects = {
        SPHERE: scene.spheres,
        PLANE: scene.planes,
        CYLINDER: scene.cylinders,
    }
    if hit.kind not in objects:
        raise ValueError(f"unknown object kind: {hit.kind!r}")
    color = objects[hit.kind][hit.index].color
    angle = hit.light_angle
    if math.isnan(angle) or angle < 0:
        angle = 0.0
    brightness = scene.light.brightness
    ambient = scene.ambient

    def channel(surface: int, ambient_part: int) -> int:
        value = angle * brightness * surface + ambient.ratio * ambient_part
        return int(min(value, CHANNEL_MAX))

    red = channel(color.r, ambient.color.r)
    green = channel(color.g, ambient.color.g)
    blue = channel(color.b, ambient.color.b)
    return (red << 16) | (green << 8) | blue