"""Reading scene files: file name checks, line dispatch and completeness."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .elements import (
    parse_ambient,
    parse_camera,
    parse_cylinder,
    parse_light,
    parse_plane,
    parse_sphere,
)
from .scene import Scene

SCENE_EXTENSION = "rt"

_PARSERS: dict[str, Callable[[Sequence[str], Scene], object]] = {
    "A": parse_ambient,
    "C": parse_camera,
    "L": parse_light,
    "sp": parse_sphere,
    "pl": parse_plane,
    "cy": parse_cylinder,
}


class SceneFileError(Exception):
    """Raised when a scene file cannot be used as a whole."""


def check_filename(filename: str) -> str:
    """Validate a scene file name and return it with surrounding spaces removed."""
    clean = filename.strip(" ")
    if not clean:
        raise SceneFileError("Argument cant be empty.")
    dot = clean.rfind(".")
    if dot < 0:
        raise SceneFileError("File needs an extension.")
    if clean[dot + 1:] != SCENE_EXTENSION:
        raise SceneFileError("Extension needs to be 'rt'.")
    return clean


def parse_line(line: str, scene: Scene) -> object | None:
    """Parse one line into the scene; return the element read, or None.

    Blank lines and lines with an unknown identifier are ignored.
    """
    tokens = [token for token in line.rstrip("\n").split(" ") if token]
    if not tokens:
        return None
    parser = _PARSERS.get(tokens[0])
    if parser is None:
        return None
    return parser(tokens, scene)


def check_limits(scene: Scene) -> None:
    """Raise SceneFileError unless the scene has an ambient light, camera and light."""
    if scene.ambient is None:
        raise SceneFileError("Scene needs one ambient lighting.")
    if scene.camera is None:
        raise SceneFileError("Scene needs one camera.")
    if scene.light is None:
        raise SceneFileError("Scene needs one light.")


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a complete scene from the lines of a scene file."""
    scene = Scene()
    for line in lines:
        parse_line(line, scene)
    check_limits(scene)
    return scene


def parse_file(filename: str) -> Scene:
    """Read and parse the scene file with the given name."""
    path = check_filename(filename)
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise SceneFileError(
            "rt file does not exist or dir is not correct or file "
            "doesn't have the correct permissions."
        ) from exc
    with handle:
        return parse_lines(handle)