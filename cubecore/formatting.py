from __future__ import annotations

from typing import TYPE_CHECKING

from cubecore.models import Clockwise, FaceElement

if TYPE_CHECKING:
    from cubecore.cube import RubikCube

_CLOCKWISE_ALIASES = {
    "cw": Clockwise.CLOCKWISE,
    "clockwise": Clockwise.CLOCKWISE,
    "ccw": Clockwise.COUNTERCLOCKWISE,
    "counterclockwise": Clockwise.COUNTERCLOCKWISE,
}


def _as_face(face: FaceElement | int) -> FaceElement:
    try:
        return FaceElement(face)
    except ValueError:
        return FaceElement.INVALID


def face_to_string(face: FaceElement | int) -> str:
    return _as_face(face).label


def face_element_to_string(face_element: FaceElement | int) -> str:
    """Single-character token of a face element; every token has the same width."""
    return _as_face(face_element).token


def clockwise_to_string(clockwise: Clockwise) -> str:
    if isinstance(clockwise, Clockwise):
        return clockwise.value
    return "INVALID_CW"


def format_cube(cube: RubikCube) -> str:
    lines: list[str] = []
    for face in FaceElement.real_faces():
        lines.append(f"\n{face_to_string(face)}\n")
        for row in cube.face_grid(face):
            lines.append("".join(f"{face_element_to_string(element)} " for element in row) + "\n")
    return "".join(lines)


def state_string(cube: RubikCube) -> str:
    """Element tokens of every cell, faces in FaceElement order, each face row-major."""
    return "".join(
        face_element_to_string(element)
        for face in FaceElement.real_faces()
        for row in cube.face_grid(face)
        for element in row
    )


def parse_face(raw: str) -> FaceElement:
    text = raw.strip()
    for face in FaceElement.real_faces():
        if text.lower() == face.label or text.upper() == face.token:
            return face
    raise ValueError(f"Unknown face '{raw}' (expected one of front/back/left/right/top/bottom or F/B/L/R/U/D)")


def parse_clockwise(raw: str) -> Clockwise:
    key = raw.strip().lower().replace("-", "").replace("_", "")
    if key not in _CLOCKWISE_ALIASES:
        raise ValueError(f"Unknown direction '{raw}' (expected cw or ccw)")
    return _CLOCKWISE_ALIASES[key]
