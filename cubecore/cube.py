from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Iterable

import numpy as np

from cubecore.formatting import format_cube, state_string
from cubecore.geometry import face_ring_coords, layer_coords, layer_length, ring_length
from cubecore.models import Axis, Clockwise, FaceElement, Rotation
from cubecore.utils import rotate_elements

logger = logging.getLogger(__name__)

Cell = tuple[FaceElement, int, int]
_CellValue = tuple[int, Any]


class CubeCoordinateError(IndexError):
    """Raised for a face, row, column or depth outside the cube."""


class FaceObjectError(LookupError):
    """Raised when an associated object is missing from a cell or from the whole cube."""


class RubikCube:
    """
    Logical state of an N x N x N cube.

    Each of the six faces is an N x N grid seen from outside the cube, row 0 at
    the top and column 0 on the left. TOP is seen with BACK above it and BOTTOM
    with FRONT above it. Every cell holds the face element it carries and,
    optionally, an object owned by the caller (typically a scene node) that
    moves with the element. The cube keeps a reference only; it never manages
    the object's lifetime.
    """

    NUM_FACES = 6

    def __init__(self, size: int = 3) -> None:
        if int(size) != size or size < 1:
            raise ValueError(f"Cube size must be a positive integer, got {size!r}")
        self._size = int(size)
        faces = np.arange(self.NUM_FACES, dtype=np.int8)
        self._elements = np.repeat(faces, self._size * self._size).reshape(
            self.NUM_FACES, self._size, self._size
        )
        self._objects = np.full((self.NUM_FACES, self._size, self._size), None, dtype=object)

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_faces(self) -> int:
        return self.NUM_FACES

    def get_num_faces(self) -> int:
        return self.NUM_FACES

    def _check_face(self, face: FaceElement | int) -> FaceElement:
        try:
            checked = FaceElement(face)
        except ValueError as exc:
            raise CubeCoordinateError(f"Invalid face: {face!r}") from exc
        if not checked.is_real:
            raise CubeCoordinateError("INVALID is not a face of the cube")
        return checked

    def _check_index(self, name: str, value: int) -> None:
        if isinstance(value, bool):
            raise CubeCoordinateError(f"{name} must be an integer, got {value!r}")
        try:
            operator.index(value)
        except TypeError as exc:
            raise CubeCoordinateError(f"{name} must be an integer, got {value!r}") from exc
        if not 0 <= value < self._size:
            raise CubeCoordinateError(f"{name} {value} out of range for cube size {self._size}")

    def _check_cell(self, face: FaceElement | int, row: int, col: int) -> FaceElement:
        checked = self._check_face(face)
        self._check_index("row", row)
        self._check_index("col", col)
        return checked

    def _read(self, face: FaceElement, row: int, col: int) -> _CellValue:
        return int(self._elements[face, row, col]), self._objects[face, row, col]

    def _write(self, face: FaceElement, row: int, col: int, value: _CellValue) -> None:
        self._elements[face, row, col], self._objects[face, row, col] = value

    def _face_ring_accessors(
        self, face: FaceElement, padding: int
    ) -> tuple[Callable[[int], _CellValue], Callable[[int, _CellValue], None]]:
        def get(pos: int) -> _CellValue:
            row, col = face_ring_coords(pos, padding, self._size)
            return self._read(face, row, col)

        def set_(pos: int, value: _CellValue) -> None:
            row, col = face_ring_coords(pos, padding, self._size)
            self._write(face, row, col, value)

        return get, set_

    def _layer_accessors(
        self, axis: Axis, depth: int
    ) -> tuple[Callable[[int], _CellValue], Callable[[int, _CellValue], None]]:
        def get(pos: int) -> _CellValue:
            return self._read(*layer_coords(axis, pos, depth, self._size))

        def set_(pos: int, value: _CellValue) -> None:
            self._write(*layer_coords(axis, pos, depth, self._size), value)

        return get, set_

    def _rotate_face_grid(self, face: FaceElement, clockwise: Clockwise) -> None:
        # The centre cell of an odd face has no ring and stays in place.
        for padding in range(self._size // 2):
            offset = self._size - 1 - 2 * padding
            if clockwise is Clockwise.CLOCKWISE:
                offset = -offset
            get, set_ = self._face_ring_accessors(face, padding)
            rotate_elements(offset, ring_length(padding, self._size), get, set_)

    def _axis_depth(self, face: FaceElement, depth: int) -> int:
        # Layer tables measure depth from the positive face of each axis.
        if face.is_positive:
            return depth
        return self._size - 1 - depth

    def _rotate_layer(self, face: FaceElement, clockwise: Clockwise, depth: int) -> None:
        offset = self._size if face.is_positive else -self._size
        if clockwise is Clockwise.CLOCKWISE:
            offset = -offset
        get, set_ = self._layer_accessors(face.axis, self._axis_depth(face, depth))
        rotate_elements(offset, layer_length(self._size), get, set_)

    def _grid_face_for_depth(self, face: FaceElement, depth: int) -> FaceElement | None:
        if depth == 0:
            return face
        if depth == self._size - 1:
            return face.opposite()
        return None

    def rotate_face(self, face: FaceElement, clockwise: Clockwise, depth: int = 0) -> None:
        """
        Rotates the layer at `depth` behind `face` (0 is the face itself).

        The direction is the one seen from outside `face`. At depth N-1 the
        layer holds the opposite face, which therefore turns the other way.
        """
        face = self._check_face(face)
        self._check_index("depth", depth)
        if not isinstance(clockwise, Clockwise):
            raise ValueError(f"Invalid rotation direction: {clockwise!r}")

        logger.debug("Rotating %s %s at depth %d", face.label, clockwise, depth)
        if depth == 0:
            self._rotate_face_grid(face, clockwise)
        elif depth == self._size - 1:
            self._rotate_face_grid(face.opposite(), clockwise.inverted())
        self._rotate_layer(face, clockwise, depth)

    def apply(self, rotations: Iterable[Rotation]) -> None:
        for rotation in rotations:
            self.rotate_face(rotation.face, rotation.clockwise, rotation.depth)

    def get_face_element(self, face: FaceElement, row: int, col: int) -> FaceElement:
        face = self._check_cell(face, row, col)
        return FaceElement(int(self._elements[face, row, col]))

    def face_grid(self, face: FaceElement) -> list[list[FaceElement]]:
        face = self._check_face(face)
        return [[FaceElement(int(value)) for value in row] for row in self._elements[face]]

    def get_face_object(self, face: FaceElement, row: int, col: int) -> Any:
        face = self._check_cell(face, row, col)
        obj = self._objects[face, row, col]
        if obj is None:
            raise FaceObjectError(f"No object associated with {face.label} ({row}, {col})")
        return obj

    def set_face_object(self, face: FaceElement, row: int, col: int, obj: Any) -> None:
        face = self._check_cell(face, row, col)
        if obj is None:
            raise ValueError("Associated object must not be None")
        self._objects[face, row, col] = obj

    def clear_face_objects(self) -> None:
        self._objects.fill(None)

    def get_object_coordinates(self, obj: Any) -> Cell:
        """Returns the first cell, in face/row/column order, holding exactly `obj`."""
        if obj is None:
            raise FaceObjectError("None is never associated with a cell")
        for face, row, col in np.ndindex(self._objects.shape):
            if self._objects[face, row, col] is obj:
                return FaceElement(face), row, col
        raise FaceObjectError(f"Object {obj!r} is not associated with any cell")

    def get_layer_cells(self, face: FaceElement, depth: int) -> list[Cell]:
        """Cells moved by rotate_face(face, *, depth): the turned face grid first, then the ring."""
        face = self._check_face(face)
        self._check_index("depth", depth)

        cells: list[Cell] = []
        grid_face = self._grid_face_for_depth(face, depth)
        if grid_face is not None:
            cells.extend(
                (grid_face, row, col) for row in range(self._size) for col in range(self._size)
            )

        axis_depth = self._axis_depth(face, depth)
        cells.extend(
            layer_coords(face.axis, pos, axis_depth, self._size)
            for pos in range(layer_length(self._size))
        )
        return cells

    def get_face_objects(self, face: FaceElement, depth: int) -> list[Any]:
        return [self.get_face_object(*cell) for cell in self.get_layer_cells(face, depth)]

    def is_solved(self) -> bool:
        return all(
            np.all(self._elements[face] == self._elements[face, 0, 0])
            for face in range(self.NUM_FACES)
        )

    def copy(self) -> RubikCube:
        clone = RubikCube.__new__(RubikCube)
        clone._size = self._size
        clone._elements = self._elements.copy()
        clone._objects = self._objects.copy()
        return clone

    def state_string(self) -> str:
        return state_string(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubikCube):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._elements, other._elements)

    __hash__ = None

    def __repr__(self) -> str:
        return f"RubikCube(size={self._size})"

    def __str__(self) -> str:
        return format_cube(self)
