"""Ray tracer that renders .rt scene files of spheres, planes and cylinders to PPM images."""

__version__ = "0.1.0"