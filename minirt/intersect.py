"""Ray intersections with spheres, planes and cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .scene import Cylinder, Plane, Scene, Sphere
from .vectors import Vec, signum

NO_HIT = float(2**63 - 1)
MIN_T = 0.01
PLANE_TOLERANCE = 0.5

SPHERE = "sphere"
PLANE = "plane"
CYLINDER = "cylinder"


@dataclass
class Hit:
    """The nearest intersection found so far along a ray."""

    index: int = 0
    t: float = NO_HIT
    light_angle: float = 0.0
    kind: str = ""
    hitpoint: Vec = field(default_factory=Vec)
    normal: Vec = field(default_factory=Vec)
    edgecase_status: int = 0


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division with infinities and NaN instead of errors."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _solve_quadratic(a: float, b: float, c: float) -> float | None:
    discriminant = b * b - 4 * a * c
    if discriminant < MIN_T:
        return None
    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2 * a)
    t2 = (-b + root) / (2 * a)
    if (t1 < t2 and t1 >= MIN_T) or (t1 > t2 and t2 <= MIN_T):
        return t1
    if t2 >= MIN_T:
        return t2
    return None


def hit_sphere(origin: Vec, ray: Vec, hit: Hit, sphere: Sphere) -> bool:
    """Record the sphere in ``hit`` if it is nearer than the current hit."""
    ray = ray.normalized()
    oc = origin - sphere.center
    a = ray.dot(ray)
    b = 2.0 * oc.dot(ray)
    c = oc.dot(oc) - (sphere.diameter / 2) ** 2
    t = _solve_quadratic(a, b, c)
    if t is not None and hit.t > t:
        hit.t = t
        return True
    return False


def sphere_normal(origin: Vec, ray: Vec, hit: Hit, sphere: Sphere) -> None:
    """Set the hit point and the normal facing the viewer on a sphere."""
    ray = ray.normalized()
    hit.hitpoint = origin + hit.t * ray
    hit.normal = (hit.hitpoint - sphere.center).normalized()
    radius = sphere.diameter / 2
    to_center = sphere.center - origin
    if to_center.dot(to_center) < radius * radius:
        hit.normal = -hit.normal


def hit_plane(origin: Vec, ray: Vec, hit: Hit, plane: Plane) -> bool:
    """Record the plane in ``hit`` if it is nearer than the current hit."""
    facing = plane.normal.dot(ray.normalized())
    if facing == 0:
        return False
    t = (plane.point - origin).dot(plane.normal) / facing
    if MIN_T < t < hit.t:
        hit.t = t
        return True
    return False


def plane_normal(origin: Vec, ray: Vec, hit: Hit, plane: Plane) -> None:
    """Set the hit point and the normal facing the viewer on a plane."""
    ray = ray.normalized()
    hit.hitpoint = origin + hit.t * ray
    hit.normal = plane.normal.normalized()
    if ray.dot(plane.normal) > MIN_T:
        hit.normal = -hit.normal


def point_in_plane(plane: Plane, point: Vec) -> bool:
    """True when the point lies within a small distance of the plane."""
    return -PLANE_TOLERANCE < plane.normal.dot(point - plane.point) < PLANE_TOLERANCE


def light_and_cam_in_plane(scene: Scene) -> bool:
    """True when some plane holds the light but not the camera."""
    light = scene.light.position
    camera = scene.camera.position
    return any(
        point_in_plane(plane, light) and not point_in_plane(plane, camera)
        for plane in scene.planes
    )


def _cap_centers(cylinder: Cylinder) -> tuple[Vec, Vec]:
    offset = cylinder.axis * (cylinder.height / 2)
    return cylinder.center + offset, cylinder.center - offset


def _cap_distance(height: float, baoc: float, baba: float, bard: float) -> float:
    if height < 0:
        return _divide(-baoc, bard)
    return _divide(baba - baoc, bard)


def hit_cylinder(origin: Vec, ray: Vec, hit: Hit, cylinder: Cylinder) -> bool:
    """Record the capped cylinder in ``hit`` if it is nearer than the current hit."""
    radius = cylinder.diameter / 2
    ray = ray.normalized()
    top, bottom = _cap_centers(cylinder)
    ba = bottom - top
    oc = origin - top
    baba = ba.dot(ba)
    bard = ba.dot(ray)
    baoc = ba.dot(oc)

    a = baba - bard * bard
    b = baba * oc.dot(ray) - baoc * bard
    c = baba * oc.dot(oc) - baoc * baoc - radius * radius * baba
    discriminant = b * b - a * c
    if discriminant < 0:
        return False
    root = math.sqrt(discriminant)
    body_t1 = _divide(-b - root, a)
    body_t2 = _divide(-b + root, a)
    height1 = baoc + body_t1 * bard
    height2 = baoc + body_t2 * bard
    cap_t1 = _cap_distance(height1, baoc, baba, bard)
    cap_t2 = _cap_distance(height2, baoc, baba, bard)
    cap_normal = ba * signum(height1) / math.sqrt(baba)

    if 0 < height1 < baba and MIN_T < body_t1 < hit.t:
        hit.t = body_t1
        surface = oc + ray * body_t1
        hit.normal = (surface - ba * height1 / baba) / radius
    elif abs(b + a * cap_t1) < root and MIN_T < cap_t1 < hit.t:
        hit.t = cap_t1
        hit.normal = cap_normal
    elif 0 < height2 < baba and MIN_T < body_t2 < hit.t:
        hit.t = body_t2
        hit.normal = -(hit.hitpoint - cylinder.center)
    elif abs(b + a * cap_t2) < root and MIN_T < cap_t2 < hit.t:
        hit.t = cap_t2
        hit.normal = cap_normal
    else:
        return False
    hit.hitpoint = origin + hit.t * ray
    return True


def point_in_cylinder(point: Vec, cylinder: Cylinder) -> bool:
    """True when the point lies inside the capped cylinder."""
    radius = cylinder.diameter / 2
    top, bottom = _cap_centers(cylinder)
    axis = bottom - top
    distance = axis.cross(point - top).magnitude() / axis.magnitude()
    past_top = (point - top).dot(-axis)
    past_bottom = (point - bottom).dot(axis)
    return distance <= radius and past_top <= 0 and past_bottom <= 0


def hit_scene(origin: Vec, ray: Vec, scene: Scene, hit: Hit) -> bool:
    """Find the nearest object along the ray; return whether any was hit."""
    hit.t = NO_HIT
    found = False
    for index, sphere in enumerate(scene.spheres):
        if hit_sphere(origin, ray, hit, sphere):
            found = True
            hit.index, hit.kind = index, SPHERE
    for index, plane in enumerate(scene.planes):
        if hit_plane(origin, ray, hit, plane):
            found = True
            hit.index, hit.kind = index, PLANE
    for index, cylinder in enumerate(scene.cylinders):
        if hit_cylinder(origin, ray, hit, cylinder):
            found = True
            hit.index, hit.kind = index, CYLINDER
    return found