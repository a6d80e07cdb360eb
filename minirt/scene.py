"""Scene description: lights, camera and the objects to render."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vectors import Vec

MAX_OBJECTS = 50


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer components."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass(frozen=True)
class Camera:
    position: Vec = Vec()
    direction: Vec = Vec()
    fov: int = 0


@dataclass(frozen=True)
class Light:
    position: Vec = Vec()
    color: Color = Color()
    brightness: float = 0.0


@dataclass(frozen=True)
class Ambient:
    ratio: float = 0.0
    color: Color = Color()


@dataclass(frozen=True)
class Sphere:
    center: Vec = Vec()
    color: Color = Color()
    diameter: float = 0.0


@dataclass(frozen=True)
class Plane:
    point: Vec = Vec()
    color: Color = Color()
    normal: Vec = Vec()


@dataclass(frozen=True)
class Cylinder:
    center: Vec = Vec()
    color: Color = Color()
    axis: Vec = Vec()
    diameter: float = 0.0
    height: float = 0.0


@dataclass
class Scene:
    """Everything read from a scene file."""

    ambient: Ambient | None = None
    camera: Camera | None = None
    light: Light | None = None
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)

    def copy(self) -> Scene:
        """Return a copy whose object lists can be changed independently."""
        return Scene(
            ambient=self.ambient,
            camera=self.camera,
            light=self.light,
            spheres=list(self.spheres),
            planes=list(self.planes),
            cylinders=list(self.cylinders),
        )

    def describe(self) -> str:
        """Return a multi-line dump of the scene's values."""
        ambient = self.ambient or Ambient()
        camera = self.camera or Camera()
        light = self.light or Light()
        separator = "-------------------------"
        lines = [
            f"ambient strength:{ambient.ratio:f}",
            f"ambientcolor_r:{ambient.color.r}",
            f"ambientcolor_g:{ambient.color.g}",
            f"ambientcolor_b:{ambient.color.b}",
            f"light_x: {light.position.x:f}",
            f"light_y: {light.position.y:f}",
            f"light_z: {light.position.z:f}",
            f"cam_fov: {camera.fov}",
            f"camvec_x: {camera.direction.x:f}",
            f"camvec_y: {camera.direction.y:f}",
            f"camvec_z: {camera.direction.z:f}",
            f"camx:{camera.position.x:f}",
            f"camy:{camera.position.y:f}",
            f"camz:{camera.position.z:f}",
            f"sphere index:{len(self.spheres)}",
        ]
        for sphere in self.spheres:
            lines += [
                f"spehre dia: {sphere.diameter:f}",
                f"spehre_x: {sphere.center.x:f}",
                f"sphere_y: {sphere.center.y:f}",
                f"sphere_z: {sphere.center.z:f}",
                f"spehrecolor_r: {sphere.color.r}",
                f"spehrecolor_g: {sphere.color.g}",
                f"spehrecolor_b: {sphere.color.b}",
                separator,
            ]
        for plane in self.planes:
            lines += [
                f"plane_x: {plane.point.x:f}",
                f"plane_y: {plane.point.y:f}",
                f"plane_z: {plane.point.z:f}",
                f"plane_vecx: {plane.normal.x:f}",
                f"plane_vecy: {plane.normal.y:f}",
                f"plane_vecz: {plane.normal.z:f}",
                f"planecolor_r: {plane.color.r}",
                f"planecolor_g: {plane.color.g}",
                f"planecolor_b: {plane.color.b}",
                separator,
            ]
        for cylinder in self.cylinders:
            lines += [
                f"Cylinder diameter: {cylinder.diameter:f}",
                f"Cylinder height: {cylinder.height:f}",
                f"Cylinder_x: {cylinder.center.x:f}",
                f"Cylinder_y: {cylinder.center.y:f}",
                f"Cylinder_z: {cylinder.center.z:f}",
                f"Cylindercolor_r: {cylinder.color.r}",
                f"Cylindercolor_g: {cylinder.color.g}",
                f"Cylindercolor_b: {cylinder.color.b}",
                separator,
            ]
        lines.append(separator)
        return "\n".join(lines) + "\n"