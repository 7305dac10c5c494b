from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class FaceElement(IntEnum):
    # Order is part of the interface: face i of a solved cube holds FaceElement(i).
    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3
    TOP = 4
    BOTTOM = 5
    INVALID = 6

    @classmethod
    def real_faces(cls) -> tuple[FaceElement, ...]:
        return (cls.FRONT, cls.BACK, cls.LEFT, cls.RIGHT, cls.TOP, cls.BOTTOM)

    @property
    def is_real(self) -> bool:
        return self is not FaceElement.INVALID

    @property
    def label(self) -> str:
        return _FACE_LABELS[self]

    @property
    def token(self) -> str:
        return _FACE_TOKENS[self]

    def opposite(self) -> FaceElement:
        return _OPPOSITE_FACES[self]

    @property
    def axis(self) -> Axis:
        if self in (FaceElement.LEFT, FaceElement.RIGHT):
            return Axis.X
        if self in (FaceElement.TOP, FaceElement.BOTTOM):
            return Axis.Y
        if self in (FaceElement.FRONT, FaceElement.BACK):
            return Axis.Z
        raise ValueError("INVALID face has no axis")

    @property
    def is_positive(self) -> bool:
        """True for the face a rotation about its axis is defined from (FRONT, RIGHT, TOP)."""
        return self in (FaceElement.FRONT, FaceElement.RIGHT, FaceElement.TOP)

    def __str__(self) -> str:
        return self.label


_FACE_LABELS = {
    FaceElement.FRONT: "front",
    FaceElement.BACK: "back",
    FaceElement.LEFT: "left",
    FaceElement.RIGHT: "right",
    FaceElement.TOP: "top",
    FaceElement.BOTTOM: "bottom",
    FaceElement.INVALID: "invalid",
}

_FACE_TOKENS = {
    FaceElement.FRONT: "F",
    FaceElement.BACK: "B",
    FaceElement.LEFT: "L",
    FaceElement.RIGHT: "R",
    FaceElement.TOP: "U",
    FaceElement.BOTTOM: "D",
    FaceElement.INVALID: "I",
}

_OPPOSITE_FACES = {
    FaceElement.FRONT: FaceElement.BACK,
    FaceElement.BACK: FaceElement.FRONT,
    FaceElement.LEFT: FaceElement.RIGHT,
    FaceElement.RIGHT: FaceElement.LEFT,
    FaceElement.TOP: FaceElement.BOTTOM,
    FaceElement.BOTTOM: FaceElement.TOP,
    FaceElement.INVALID: FaceElement.INVALID,
}


class Clockwise(Enum):
    CLOCKWISE = "CW"
    COUNTERCLOCKWISE = "CCW"

    def inverted(self) -> Clockwise:
        if self is Clockwise.CLOCKWISE:
            return Clockwise.COUNTERCLOCKWISE
        return Clockwise.CLOCKWISE

    def __str__(self) -> str:
        return self.value


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2

    @property
    def positive_face(self) -> FaceElement:
        return (FaceElement.RIGHT, FaceElement.TOP, FaceElement.FRONT)[self]

    @property
    def negative_face(self) -> FaceElement:
        return self.positive_face.opposite()


@dataclass(frozen=True)
class Rotation:
    """A single layer turn: the face it is seen from, its direction and its depth."""

    face: FaceElement
    clockwise: Clockwise = Clockwise.CLOCKWISE
    depth: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.face, FaceElement) or not self.face.is_real:
            raise ValueError(f"Rotation face must be a real face, got {self.face!r}")
        if not isinstance(self.clockwise, Clockwise):
            raise ValueError(f"Rotation direction must be a Clockwise value, got {self.clockwise!r}")
        if self.depth < 0:
            raise ValueError("Rotation depth must be >= 0")

    def inverted(self) -> Rotation:
        return Rotation(face=self.face, clockwise=self.clockwise.inverted(), depth=self.depth)

    def __str__(self) -> str:
        return f"{self.face.label}:{self.clockwise.value.lower()}:{self.depth}"
